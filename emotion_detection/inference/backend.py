import threading
from typing import Callable, Dict, Tuple

from emotion_detection.core import NORMALIZE
from emotion_detection.utils.config import TEXT_ALLOW_DOWNLOAD, TEXT_MODEL_DIR, TEXT_MODEL_ID
from emotion_detection.utils.logger import get_logger

logger = get_logger("backend")


class ModelHandle:
    """Process-wide handle to an analysis backend, initialised at most once.

    Concurrent first callers block on the lock until the loader returns and
    then share the same instance. A loader failure is not cached: it
    propagates to the caller and the next ``get()`` tries again.
    """

    def __init__(self, loader: Callable[[], object]):
        self._loader = loader
        self._lock = threading.Lock()
        self._instance = None

    @property
    def loaded(self) -> bool:
        return self._instance is not None

    def get(self):
        if self._instance is not None:
            return self._instance
        with self._lock:
            if self._instance is None:
                self._instance = self._loader()
        return self._instance

    def reset(self):
        with self._lock:
            self._instance = None


class TransformersEmotionModel:
    def __init__(self, tokenizer, model):
        self.tokenizer = tokenizer
        self.model = model
        self.model.eval()
        id2label = getattr(model.config, "id2label", {}) or {}
        self.labels = [str(id2label.get(i, i)).lower() for i in range(len(id2label))]

    def predict_scores(self, text: str) -> Dict[str, float]:
        import torch

        inputs = self.tokenizer(text, return_tensors="pt", truncation=True, max_length=128)
        with torch.no_grad():
            logits = self.model(**inputs).logits
        probs = torch.softmax(logits, dim=-1).squeeze(0).tolist()
        scores: Dict[str, float] = {}
        for label, p in zip(self.labels, probs):
            key = NORMALIZE.get(label)
            if key is not None:
                scores[key] = scores.get(key, 0.0) + float(p)
        logger.info(f"Model scores: {scores}")
        return scores


def _model_source() -> Tuple[str, bool]:
    """Where to read the classifier from, and whether to cache it in TEXT_MODEL_DIR afterwards."""
    if (TEXT_MODEL_DIR / "config.json").is_file():
        return str(TEXT_MODEL_DIR), False
    if not TEXT_ALLOW_DOWNLOAD:
        raise RuntimeError(
            f"No emotion classifier in {TEXT_MODEL_DIR}; "
            f"set ED_TEXT_ALLOW_DOWNLOAD=1 to fetch '{TEXT_MODEL_ID}'."
        )
    return TEXT_MODEL_ID, True


def _load_transformers_model() -> TransformersEmotionModel:
    # torch/transformers are only imported once this backend is actually used
    from transformers import AutoModelForSequenceClassification, AutoTokenizer

    source, cache = _model_source()
    logger.info(f"Loading emotion classifier from {source}")
    tokenizer = AutoTokenizer.from_pretrained(source)
    model = AutoModelForSequenceClassification.from_pretrained(source)
    if cache:
        try:
            TEXT_MODEL_DIR.mkdir(parents=True, exist_ok=True)
            tokenizer.save_pretrained(str(TEXT_MODEL_DIR))
            model.save_pretrained(str(TEXT_MODEL_DIR))
        except OSError as e:
            logger.warning(f"Classifier loaded but not cached in {TEXT_MODEL_DIR}: {e}")
    return TransformersEmotionModel(tokenizer, model)


_TEXT_MODEL = ModelHandle(_load_transformers_model)


def get_text_model_handle() -> ModelHandle:
    return _TEXT_MODEL
