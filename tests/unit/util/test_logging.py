"""Unit tests for logging setup."""

import logging

from folio.config import Settings
from folio.util.logging import setup_logging


class TestSetupLogging:
    def test_test_environment_is_quiet(self):
        setup_logging(Settings(environment="test"))

        assert logging.getLogger("folio").level == logging.WARNING

    def test_debug_wins_over_environment(self):
        setup_logging(Settings(environment="production", debug=True))

        assert logging.getLogger("folio").level == logging.DEBUG
