"""
Test script for logging setup.
"""
import logging
import os

import pytest

from reversi.config import get_default_config
from reversi.logger import Logger, setup_logger


def test_console_logger_metrics(caplog):
    config = get_default_config()
    logger = setup_logger(config)
    try:
        with caplog.at_level(logging.INFO, logger='reversi'):
            logger.log_metrics({'win_rate': 0.5, 'games': 4}, step=3, prefix='arena/')
        assert "Step 3: arena/win_rate=0.5000 arena/games=4" in caplog.text
    finally:
        logger.close()
    assert logger.handlers == []


def test_file_logging(tmp_path):
    config = get_default_config()
    config.logging.log_to_file = True
    logger = Logger(config, log_dir=str(tmp_path))
    try:
        logging.getLogger('reversi.game').info("hello from the board")
    finally:
        logger.close()

    log_file = os.path.join(logger.run_dir, 'reversi.log')
    with open(log_file) as f:
        assert "hello from the board" in f.read()


def test_unknown_log_level():
    config = get_default_config()
    config.logging.log_level = "LOUD"
    with pytest.raises(ValueError):
        Logger(config)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
