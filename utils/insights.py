"""
Derived metrics over check-in history.

Every function here is pure: it takes already-fetched CheckIn records and
returns plain data for the dashboard. The scoring and window helpers only read
attributes; `summarize` also serializes recent records with `CheckIn.to_dict`.
"""
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence

from models.choices import Mood, SleepQuality, FocusLevel, AnalysisState, values

WINDOW_SIZES = {
    'week': 7,
    'month': 30,
}
DEFAULT_TIMEFRAME = 'week'

DEFAULT_MOOD_SCORE = 5
DEFAULT_SLEEP_SCORE = 5
DEFAULT_FOCUS_SCORE = 6

RECENT_LIMIT = 5

WEEKDAY_NAMES = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')


def _member(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        return None


def mood_score(mood) -> float:
    """Map a mood to 1-10; unknown moods score neutral."""
    member = _member(Mood, mood)
    if member is Mood.ANGRY:
        return 1
    if member is Mood.SAD:
        return 2
    if member is Mood.ANXIOUS:
        return 3
    if member is Mood.NEUTRAL:
        return 5
    if member is Mood.CONTENT:
        return 7
    if member is Mood.HAPPY:
        return 8
    if member is Mood.JOYFUL:
        return 10
    return DEFAULT_MOOD_SCORE


def sleep_score(quality) -> float:
    member = _member(SleepQuality, quality)
    if member is SleepQuality.POOR:
        return 2.5
    if member is SleepQuality.FAIR:
        return 5
    if member is SleepQuality.GOOD:
        return 7.5
    if member is SleepQuality.EXCELLENT:
        return 10
    return DEFAULT_SLEEP_SCORE


def focus_score(level) -> float:
    member = _member(FocusLevel, level)
    if member is FocusLevel.LOW:
        return 3
    if member is FocusLevel.MEDIUM:
        return 6
    if member is FocusLevel.HIGH:
        return 9
    return DEFAULT_FOCUS_SCORE


def window_size(timeframe: str) -> int:
    return WINDOW_SIZES.get(timeframe, WINDOW_SIZES[DEFAULT_TIMEFRAME])


def _chronological_key(check_in):
    return (check_in.created_at or datetime.min, check_in.id or 0)


def select_window(check_ins: Sequence, size: int) -> List:
    """
    Keep the `size` most recent check-ins, oldest first.

    The input may arrive in any order; the API lists newest first, so the
    records are sorted ascending before the trailing slice is taken.
    """
    if size <= 0:
        return []
    ordered = sorted(check_ins, key=_chronological_key)
    return ordered[-size:]


def round_half_up(value: float) -> float:
    """Round to one decimal with halves going up, as the dashboard displays them."""
    return float(Decimal(str(value)).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def compute_averages(window: Sequence) -> Dict[str, float]:
    """Mean stress and mood/sleep/focus scores, rounded to one decimal."""
    if not window:
        return {'stress': 0, 'mood': 0, 'sleep': 0, 'focus': 0}

    count = len(window)
    totals = {'stress': 0.0, 'mood': 0.0, 'sleep': 0.0, 'focus': 0.0}
    for check_in in window:
        totals['stress'] += check_in.stress_level
        totals['mood'] += mood_score(check_in.mood)
        totals['sleep'] += sleep_score(check_in.sleep_quality)
        totals['focus'] += focus_score(check_in.focus_level)

    return {name: round_half_up(total / count) for name, total in totals.items()}


def state_distribution(window: Sequence) -> List[Dict[str, object]]:
    """Count check-ins per analysis state; unanalyzed records are skipped."""
    counts = {state: 0 for state in values(AnalysisState)}
    for check_in in window:
        if check_in.analysis_state in counts:
            counts[check_in.analysis_state] += 1
    return [{'name': name, 'value': value} for name, value in counts.items()]


def chart_points(window: Sequence) -> List[Dict[str, object]]:
    points = []
    for check_in in window:
        created = check_in.created_at
        points.append({
            'date': f"{created.month}/{created.day}" if created else None,
            'weekday': WEEKDAY_NAMES[created.weekday()] if created else None,
            'stress': check_in.stress_level,
            'mood': mood_score(check_in.mood),
            'sleep': sleep_score(check_in.sleep_quality),
            'focus': focus_score(check_in.focus_level),
        })
    return points


def latest_state(check_ins: Sequence) -> Optional[str]:
    if not check_ins:
        return None
    return max(check_ins, key=_chronological_key).analysis_state


def latest_confidence(check_ins: Sequence) -> int:
    """Confidence of the newest check-in, 0 when it has none."""
    if not check_ins:
        return 0
    return max(check_ins, key=_chronological_key).analysis_confidence or 0


def summarize(check_ins: Sequence, timeframe: str = DEFAULT_TIMEFRAME) -> Dict[str, object]:
    """Everything the insights dashboard shows for one timeframe."""
    if timeframe not in WINDOW_SIZES:
        timeframe = DEFAULT_TIMEFRAME

    size = window_size(timeframe)
    window = select_window(check_ins, size)
    recent = sorted(check_ins, key=_chronological_key, reverse=True)[:RECENT_LIMIT]

    return {
        'timeframe': timeframe,
        'window_size': size,
        'total_check_ins': len(check_ins),
        'averages': compute_averages(window),
        'state_distribution': state_distribution(window),
        'chart_data': chart_points(window),
        'latest_state': latest_state(check_ins),
        'latest_confidence': latest_confidence(check_ins),
        'week_check_ins': len(select_window(check_ins, WINDOW_SIZES['week'])),
        'recent_check_ins': [check_in.to_dict() for check_in in recent],
    }
