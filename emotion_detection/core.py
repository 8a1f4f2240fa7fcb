# Emotion Detection value types

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Type

from emotion_detection.utils.config import ERROR_SENTINEL, INTERNAL_ERROR_MESSAGE, INVALID_SENTINEL, INVALID_TEXT_MESSAGE


class BaseEmotion(str, Enum):
    """Five classic emotions kept for backward-compatible output."""

    ANGER = "anger"
    DISGUST = "disgust"
    FEAR = "fear"
    JOY = "joy"
    SADNESS = "sadness"


class ExpandedEmotion(str, Enum):
    """Closed vocabulary of the expanded set; declaration order is output order."""

    # Affective
    HAPPY = "happy"
    JOYFUL = "joyful"
    EXCITED = "excited"
    CONTENT = "content"
    GRATEFUL = "grateful"
    HOPEFUL = "hopeful"
    PROUD = "proud"
    RELIEVED = "relieved"
    AMUSED = "amused"
    LOVING = "loving"
    SAD = "sad"
    LONELY = "lonely"
    DISAPPOINTED = "disappointed"
    GRIEVING = "grieving"
    ANGRY = "angry"
    FRUSTRATED = "frustrated"
    IRRITATED = "irritated"
    RESENTFUL = "resentful"
    AFRAID = "afraid"
    ANXIOUS = "anxious"
    NERVOUS = "nervous"
    DISGUSTED = "disgusted"
    SURPRISED = "surprised"
    CONFUSED = "confused"
    EMBARRASSED = "embarrassed"
    GUILTY = "guilty"
    JEALOUS = "jealous"
    BORED = "bored"
    # Physical
    TIRED = "tired"
    ENERGIZED = "energized"
    SICK = "sick"
    PAINED = "pained"
    RELAXED = "relaxed"
    HUNGRY = "hungry"
    # Social
    REJECTED = "rejected"
    APPRECIATED = "appreciated"
    BETRAYED = "betrayed"
    CONNECTED = "connected"
    # Motivational
    DETERMINED = "determined"
    MOTIVATED = "motivated"
    OVERWHELMED = "overwhelmed"
    CURIOUS = "curious"
    # Default state
    NEUTRAL = "neutral"


class AnalysisStatus(IntEnum):
    SUCCESS = 200
    INVALID_INPUT = 400
    INTERNAL_ERROR = 500


# Model label normalisation onto the base set
NORMALIZE = {
    "anger": BaseEmotion.ANGER.value,
    "angry": BaseEmotion.ANGER.value,
    "disgust": BaseEmotion.DISGUST.value,
    "disgusted": BaseEmotion.DISGUST.value,
    "fear": BaseEmotion.FEAR.value,
    "fearful": BaseEmotion.FEAR.value,
    "joy": BaseEmotion.JOY.value,
    "happy": BaseEmotion.JOY.value,
    "happiness": BaseEmotion.JOY.value,
    "sadness": BaseEmotion.SADNESS.value,
    "sad": BaseEmotion.SADNESS.value,
}


def zero_scores(emotions: Type[Enum]) -> Dict[str, float]:
    return {e.value: 0.0 for e in emotions}


@dataclass(frozen=True)
class EmotionScores:
    """One EmotionSet: every key of its vocabulary, its dominant label and,
    for the expanded set, the explanation built from the fired rules."""

    scores: Mapping[str, float]
    dominant_emotion: str
    explanation: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    def to_dict(self) -> Dict:
        out = dict(self.scores)
        out["dominant_emotion"] = self.dominant_emotion
        if self.explanation is not None:
            out["explanation"] = self.explanation
        return out


@dataclass(frozen=True)
class AnalysisResult:
    status: AnalysisStatus
    original: EmotionScores
    expanded: EmotionScores
    message: Optional[str] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.status is AnalysisStatus.SUCCESS

    @classmethod
    def invalid_input(cls) -> "AnalysisResult":
        return cls._empty(AnalysisStatus.INVALID_INPUT, INVALID_SENTINEL, INVALID_TEXT_MESSAGE)

    @classmethod
    def internal_error(cls) -> "AnalysisResult":
        return cls._empty(AnalysisStatus.INTERNAL_ERROR, ERROR_SENTINEL, INTERNAL_ERROR_MESSAGE)

    @classmethod
    def _empty(cls, status: AnalysisStatus, sentinel: str, message: str) -> "AnalysisResult":
        return cls(
            status=status,
            original=EmotionScores(zero_scores(BaseEmotion), sentinel),
            expanded=EmotionScores(zero_scores(ExpandedEmotion), sentinel, ""),
            message=message,
        )
