"""Tests for logging helpers."""
import logging

from fbgraph import setup_logging
from fbgraph.core.logging import get_logger


class TestGetLogger:
    """Test suite for get_logger."""

    def test_returns_named_logger(self):
        logger = get_logger('fbgraph.test.named')

        assert logger is logging.getLogger('fbgraph.test.named')
        assert logger.propagate is True

    def test_records_reach_caplog(self, caplog):
        logger = get_logger('fbgraph.test.caplog')

        with caplog.at_level(logging.INFO, logger='fbgraph.test.caplog'):
            logger.info('Upload session 42 started')

        assert 'Upload session 42 started' in caplog.text


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_sets_level_on_package_loggers(self):
        setup_logging(logging.DEBUG)
        try:
            assert logging.getLogger('fbgraph').level == logging.DEBUG
            assert logging.getLogger('fbgraph.upload').level == logging.DEBUG
            assert logging.getLogger('fbgraph.auth').level == logging.DEBUG
        finally:
            setup_logging(logging.WARNING)
