"""
Unit tests for ro_calcs/logging_config.py.
"""

import logging

import pytest

from ro_calcs.logging_config import configure_logging


class TestConfigureLogging:

    @pytest.mark.unit
    def test_single_handler_after_repeat_calls(self):
        configure_logging()
        logger = configure_logging()
        assert logger.name == 'ro_calcs'
        assert len(logger.handlers) == 1

    @pytest.mark.unit
    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv('RO_LOG_LEVEL', 'debug')
        assert configure_logging().level == logging.DEBUG

    @pytest.mark.unit
    def test_explicit_level(self):
        assert configure_logging(logging.WARNING).level == logging.WARNING
