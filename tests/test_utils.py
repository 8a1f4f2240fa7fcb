"""
Logger and config tests
"""

from emotion_detection.utils import config
from emotion_detection.utils.logger import get_logger


class TestLogger:
    """get_logger wiring"""

    def test_idempotent_per_name(self):
        first = get_logger("utils_test")
        count = len(first.handlers)
        second = get_logger("utils_test")
        assert second is first
        assert len(second.handlers) == count

    def test_writes_rotating_file_under_log_dir(self):
        logger = get_logger("utils_file_test")
        logger.info("hello")
        for h in logger.handlers:
            h.flush()
        assert (config.LOG_DIR / "utils_file_test.log").exists()


class TestConfig:
    """Output contract constants"""

    def test_contract_constants(self):
        assert config.ROUND_DIGITS == 3
        assert config.INVALID_TEXT_MESSAGE == "Invalid text! Please try again!"
        assert config.INTERNAL_ERROR_MESSAGE == "Internal server error during analysis"
        assert config.BACKEND in config.BACKENDS
