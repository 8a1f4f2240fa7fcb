from typing import Dict, List, Optional, Tuple

import numpy as np

from emotion_detection.core import AnalysisResult, AnalysisStatus, BaseEmotion, EmotionScores
from emotion_detection.inference.rules import BASE_SET, DEFAULT_EXPLANATION, EXPANDED_SET, EmotionRule, EmotionSetConfig
from emotion_detection.utils.config import BACKEND, BACKENDS, RANDOM_SEED
from emotion_detection.utils.logger import get_logger

logger = get_logger("detector")


def _default_rng():
    return np.random.default_rng(RANDOM_SEED)


def initial_scores(emotion_set: EmotionSetConfig) -> Dict[str, float]:
    scores = {k: emotion_set.floor for k in emotion_set.keys}
    if emotion_set.neutral_key:
        scores[emotion_set.neutral_key] = emotion_set.neutral_floor
    return scores


def apply_rules(text_lower: str, emotion_set: EmotionSetConfig, scores: Dict[str, float], rng) -> List[EmotionRule]:
    """Accumulate every firing rule into ``scores`` in table order; return the fired rules."""
    fired = []
    for rule in emotion_set.rules:
        if not rule.matches(text_lower):
            continue
        scores[rule.target] += float(rng.uniform(rule.low, rule.high))
        for key, factor in rule.related:
            scores[key] += factor * float(rng.uniform(rule.low, rule.high))
        fired.append(rule)
    return fired


def suppress_neutral(scores: Dict[str, float], emotion_set: EmotionSetConfig) -> Dict[str, float]:
    if not emotion_set.neutral_key:
        return scores
    total = sum(v for k, v in scores.items() if k != emotion_set.neutral_key)
    excess = total - emotion_set.neutral_threshold
    if excess > 0:
        lowered = scores[emotion_set.neutral_key] - emotion_set.neutral_factor * excess
        scores[emotion_set.neutral_key] = max(lowered, emotion_set.neutral_min)
    return scores


def add_jitter(scores: Dict[str, float], emotion_set: EmotionSetConfig, rng) -> Dict[str, float]:
    for k in emotion_set.keys:
        scores[k] = min(scores[k] + float(rng.uniform(0.0, emotion_set.jitter)), 1.0)
    return scores


def dominant_emotion(scores: Dict[str, float], fallback: str) -> str:
    # Strictly greater wins, so ties keep the earlier key
    best, best_score = fallback, 0.0
    for key, value in scores.items():
        if value > best_score:
            best, best_score = key, value
    return best


def explain(fired: List[EmotionRule]) -> str:
    clauses = [r.clause for r in fired if r.clause]
    return " ".join(clauses) if clauses else DEFAULT_EXPLANATION


def score_emotion_set(text_lower: str, emotion_set: EmotionSetConfig, rng) -> EmotionScores:
    scores = initial_scores(emotion_set)
    fired = apply_rules(text_lower, emotion_set, scores, rng)
    suppress_neutral(scores, emotion_set)
    add_jitter(scores, emotion_set, rng)
    explanation = explain(fired) if emotion_set.explain else None
    return EmotionScores(scores, dominant_emotion(scores, emotion_set.fallback), explanation)


def _score_with_model(text: str, model) -> EmotionScores:
    probs = model.get().predict_scores(text)
    scores = {e.value: min(float(probs.get(e.value, 0.0)), 1.0) for e in BaseEmotion}
    return EmotionScores(scores, dominant_emotion(scores, BASE_SET.fallback))


def resolve_backend(backend: Optional[str] = None) -> str:
    name = (backend or BACKEND).strip().lower()
    if name not in BACKENDS:
        logger.warning(f"Unknown backend '{name}', scoring the base set with keyword rules")
        return "keyword"
    return name


def _analyse(text: str, rng, backend: str, model) -> Tuple[EmotionScores, EmotionScores]:
    text_lower = text.lower()
    if backend == "transformers":
        if model is None:
            from emotion_detection.inference.backend import get_text_model_handle
            model = get_text_model_handle()
        original = _score_with_model(text, model)
    else:
        original = score_emotion_set(text_lower, BASE_SET, rng)
    expanded = score_emotion_set(text_lower, EXPANDED_SET, rng)
    return original, expanded


def detect_emotions(text: str, rng=None, backend: Optional[str] = None, model=None) -> AnalysisResult:
    """Score ``text`` against the base and expanded emotion sets.

    Never raises: blank input yields an INVALID_INPUT result and any failure
    while scoring (model loading included) yields INTERNAL_ERROR.
    ``rng`` needs only ``uniform(low, high)``; pass a seeded generator for
    reproducible scores.
    """
    if not isinstance(text, str) or not text.strip():
        logger.info("Invalid input detected, returning status 400")
        return AnalysisResult.invalid_input()

    logger.info(f"Starting emotion analysis ({len(text)} chars)")
    try:
        original, expanded = _analyse(text, rng if rng is not None else _default_rng(), resolve_backend(backend), model)
    except Exception:
        logger.exception("Error during emotion analysis")
        return AnalysisResult.internal_error()

    logger.info(f"Analysis complete. Dominant: original={original.dominant_emotion} expanded={expanded.dominant_emotion}")
    return AnalysisResult(status=AnalysisStatus.SUCCESS, original=original, expanded=expanded)
