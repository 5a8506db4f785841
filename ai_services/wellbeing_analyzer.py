import json
import logging
from dataclasses import dataclass, asdict, field
from numbers import Real
from typing import Any, Dict, List, Optional

import requests

from models.choices import AnalysisState, values
from utils.errors import AnalysisFailure

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a supportive mental health companion for college students. Your role is to:
1. Read the wellbeing indicators together (mood, stress, sleep, focus)
2. Classify the student's state as exactly one of: "Normal", "Mild Stress", "Moderate Stress", "High Stress"
3. Give a confidence for that classification as a whole number from 0 to 100
4. Explain the result briefly in plain, supportive, non-medical language
5. Suggest 3-4 personalised, actionable recommendations

Guidelines:
- Weight stress and sleep more heavily than mood and focus
- Be encouraging, never alarming
- Do not use medical terminology or offer a diagnosis
- Keep suggestions practical for a student's day
- If stress is high, gently suggest reaching out for professional support"""

ANALYSIS_SCHEMA = {
    "name": "mental_health_analysis",
    "schema": {
        "type": "object",
        "properties": {
            "state": {"type": "string", "enum": values(AnalysisState)},
            "confidence": {"type": "number"},
            "explanation": {"type": "string"},
            "recommendations": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["state", "confidence", "explanation", "recommendations"],
        "additionalProperties": False,
    },
}

RESPONSE_FIELDS = frozenset(ANALYSIS_SCHEMA["schema"]["required"])


@dataclass
class AnalysisResult:
    state: str
    confidence: int
    explanation: str
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_user_prompt(mood: str, stress_level: int, sleep_quality: str,
                      focus_level: str, journal_text: Optional[str] = None) -> str:
    """Describe one check-in and the JSON shape the reply must take."""
    lines = [
        "Analyze this student's check-in:",
        f"- Mood: {mood}",
        f"- Stress Level: {stress_level}/10",
        f"- Sleep Quality: {sleep_quality}",
        f"- Focus Level: {focus_level}",
    ]
    if journal_text:
        lines.append(f"- Journal: {journal_text}")

    lines.append("")
    lines.append("Reply with JSON only, no markdown, in exactly this structure:")
    lines.append(json.dumps({
        "state": "|".join(values(AnalysisState)),
        "confidence": 85,
        "explanation": "Brief supportive explanation of their current state",
        "recommendations": [
            "Specific actionable tip 1",
            "Specific actionable tip 2",
            "Specific actionable tip 3",
        ],
    }, indent=2))
    return "\n".join(lines)


def parse_analysis(content: Any) -> AnalysisResult:
    """
    Validate the model's reply against the analysis schema.

    Args:
        content: The message content returned by the chat-completion endpoint

    Returns:
        AnalysisResult with the confidence rounded to a whole number

    Raises:
        AnalysisFailure: if the content is not the required JSON object
    """
    try:
        payload = json.loads(content)
    except (TypeError, ValueError) as e:
        raise AnalysisFailure() from e

    if not isinstance(payload, dict) or set(payload) != RESPONSE_FIELDS:
        raise AnalysisFailure()

    state = payload["state"]
    confidence = payload["confidence"]
    explanation = payload["explanation"]
    recommendations = payload["recommendations"]

    if state not in values(AnalysisState):
        raise AnalysisFailure()
    if isinstance(confidence, bool) or not isinstance(confidence, Real):
        raise AnalysisFailure()
    if not 0 <= confidence <= 100:
        raise AnalysisFailure()
    if not isinstance(explanation, str):
        raise AnalysisFailure()
    if not isinstance(recommendations, list) or not all(isinstance(r, str) for r in recommendations):
        raise AnalysisFailure()

    return AnalysisResult(
        state=state,
        confidence=int(round(confidence)),
        explanation=explanation,
        recommendations=recommendations,
    )


class WellbeingAnalyzer:
    """
    Classifies a check-in by delegating to an external chat-completion endpoint.
    """

    def __init__(self, api_url: Optional[str], api_key: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """
        Args:
            api_url: Chat-completion endpoint accepting {messages, json_schema}
            api_key: Optional bearer token sent with each request
            timeout: Seconds to wait for the endpoint, None for no limit
            session: Optional requests session, mainly for connection reuse
        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.http = session or requests

    @classmethod
    def from_config(cls, config) -> "WellbeingAnalyzer":
        return cls(
            api_url=config.get("CHAT_COMPLETION_URL"),
            api_key=config.get("CHAT_COMPLETION_API_KEY"),
            timeout=config.get("CHAT_COMPLETION_TIMEOUT"),
        )

    def build_request(self, mood: str, stress_level: int, sleep_quality: str,
                      focus_level: str, journal_text: Optional[str] = None) -> Dict[str, Any]:
        return {
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(
                    mood, stress_level, sleep_quality, focus_level, journal_text
                )},
            ],
            "json_schema": ANALYSIS_SCHEMA,
        }

    def analyze(self, mood: str, stress_level: int, sleep_quality: str,
                focus_level: str, journal_text: Optional[str] = None) -> AnalysisResult:
        """Classify one check-in. Raises AnalysisFailure on any remote or format error."""
        if not self.api_url:
            raise AnalysisFailure("Analysis service is not configured")

        headers = {'Content-Type': 'application/json'}
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'

        body = self.build_request(mood, stress_level, sleep_quality, focus_level, journal_text)

        try:
            response = self.http.post(self.api_url, headers=headers, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Analysis request failed: {e}")
            raise AnalysisFailure() from e

        if not response.ok:
            logger.error(f"Analysis API error {response.status_code}: {response.text[:200]}")
            raise AnalysisFailure()

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected analysis response shape: {e}")
            raise AnalysisFailure() from e

        result = parse_analysis(content)
        logger.info(f"Check-in classified as {result.state} ({result.confidence}%)")
        return result
