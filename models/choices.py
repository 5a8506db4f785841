from enum import Enum


class Mood(str, Enum):
    ANGRY = 'angry'
    SAD = 'sad'
    ANXIOUS = 'anxious'
    NEUTRAL = 'neutral'
    CONTENT = 'content'
    HAPPY = 'happy'
    JOYFUL = 'joyful'


class SleepQuality(str, Enum):
    POOR = 'poor'
    FAIR = 'fair'
    GOOD = 'good'
    EXCELLENT = 'excellent'


class FocusLevel(str, Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


class AnalysisState(str, Enum):
    NORMAL = 'Normal'
    MILD_STRESS = 'Mild Stress'
    MODERATE_STRESS = 'Moderate Stress'
    HIGH_STRESS = 'High Stress'


def values(enum_cls):
    """Return the raw string values of an enumeration, in declaration order."""
    return [member.value for member in enum_cls]
