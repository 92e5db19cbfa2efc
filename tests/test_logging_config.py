"""Tests for logging mode switching."""
import logging

import pytest

from config import logging_config
from phev_analyzer.utils.logger import get_logger, setup_logger


def test_unknown_mode_falls_back_to_development():
    config = logging_config.get_logging_config('verbose')

    assert config['log_level'] == 'INFO'
    assert config['log_dir'] == logging_config.LOG_DIR


def test_switch_logging_mode(monkeypatch):
    monkeypatch.setattr(logging_config, 'CURRENT_LOGGING_MODE', 'PRODUCTION')

    logging_config.switch_logging_mode('debug')

    assert logging_config.CURRENT_LOGGING_MODE == 'DEBUG'
    assert logging_config.get_logging_config()['log_level'] == 'DEBUG'
    with pytest.raises(ValueError):
        logging_config.switch_logging_mode('LOUD')


def test_silent_logger_has_no_output_handlers():
    logger = setup_logger(**logging_config.get_logging_config('SILENT'))

    assert logger.log_level == logging.CRITICAL
    assert logger.log_file is None
    assert [type(h) for h in logger.logger.handlers] == [logging.NullHandler]
    assert get_logger('battery_simulator').name == 'phev_analyzer.battery_simulator'
