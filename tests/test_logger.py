import logging

from puenjai.utils.logger import LOGGER_NAME, setup_logger


def test_setup_logger_applies_level_and_single_handler():
    logger = setup_logger("DEBUG")
    try:
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG
        assert logger.propagate is False

        again = setup_logger("warning")
        assert again is logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        setup_logger("INFO")


def test_unknown_level_falls_back_to_info():
    logger = setup_logger("chatty")
    assert logger.level == logging.INFO
