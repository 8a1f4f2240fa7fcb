import json
from typing import Dict, Mapping, Optional

from emotion_detection.core import AnalysisResult
from emotion_detection.inference.detector import detect_emotions
from emotion_detection.utils.config import ROUND_DIGITS


def round_scores(scores: Mapping[str, object], digits: int = ROUND_DIGITS) -> Dict[str, object]:
    # Only numeric fields are rounded; labels and explanation pass through
    return {
        k: round(float(v), digits) if isinstance(v, (int, float)) and not isinstance(v, bool) else v
        for k, v in scores.items()
    }


def format_result(result: AnalysisResult, digits: int = ROUND_DIGITS) -> Dict:
    """Project an AnalysisResult onto the external output shape.

    Success:
        {"original_emotions": {..., "dominant_emotion": "<key>"},
         "expanded_emotions": {..., "dominant_emotion": "<key>", "explanation": "..."}}
    Failure:
        {"error": "<message>", "status_code": 400 | 500}
    """
    if not result.ok:
        return {"error": result.message or "Analysis failed", "status_code": int(result.status)}
    return {
        "original_emotions": round_scores(result.original.to_dict(), digits),
        "expanded_emotions": round_scores(result.expanded.to_dict(), digits),
    }


def predict_emotion(text: str, rng=None, backend: Optional[str] = None, model=None) -> str:
    result = detect_emotions(text, rng=rng, backend=backend, model=model)
    return json.dumps(format_result(result), indent=2)
