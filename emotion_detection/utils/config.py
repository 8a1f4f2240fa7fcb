from pathlib import Path
import os

# Centralized config for paths, backend selection and output contract

# Allow overriding base/log/models directories via environment variables
BASE_DIR = Path(os.getenv("ED_BASE_DIR", Path(__file__).resolve().parents[1]))
LOG_DIR = Path(os.getenv("ED_LOG_DIR", BASE_DIR / "logs"))
MODELS_DIR = Path(os.getenv("ED_MODELS_DIR", BASE_DIR / "models"))

# Logging: level name and whether to also write rotating files under LOG_DIR
LOG_LEVEL = os.getenv("ED_LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("ED_LOG_TO_FILE", "1") in {"1", "true", "True"}

# Scoring backend for the base emotion set: "keyword" (rule tables) or "transformers"
BACKEND = os.getenv("ED_BACKEND", "keyword").strip().lower()
BACKENDS = ("keyword", "transformers")

# Fixed seed makes every analysis reproducible; unset means fresh entropy per call
_seed = os.getenv("ED_RANDOM_SEED")
RANDOM_SEED = int(_seed) if _seed not in (None, "") else None

# HuggingFace emotion classifier used by the transformers backend
TEXT_MODEL_ID = os.getenv("ED_TEXT_MODEL_ID", "j-hartmann/emotion-english-distilroberta-base")
TEXT_MODEL_DIR = Path(os.getenv("ED_TEXT_MODEL_DIR", MODELS_DIR / "text_hf"))
# Whether to allow internet downloads at runtime (default: disabled)
TEXT_ALLOW_DOWNLOAD = os.getenv("ED_TEXT_ALLOW_DOWNLOAD", "0") in {"1", "true", "True"}

# Where the UI and the API scripts reach a running server
API_URL = os.getenv("ED_API_URL", "http://localhost:8000")

# Output contract
ROUND_DIGITS = 3
INVALID_TEXT_MESSAGE = "Invalid text! Please try again!"
INTERNAL_ERROR_MESSAGE = "Internal server error during analysis"
INVALID_SENTINEL = "none"
ERROR_SENTINEL = "error"
