import logging
from logging.handlers import RotatingFileHandler

from emotion_detection.utils.config import LOG_DIR, LOG_LEVEL, LOG_TO_FILE

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(f"emotion_detection.{name}")
    if logger.handlers:
        return logger
    logger.setLevel(LOG_LEVEL)
    logger.propagate = False
    fmt = logging.Formatter(_FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    if LOG_TO_FILE:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(LOG_DIR / f"{name}.log", maxBytes=2_000_000, backupCount=2)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
    return logger
