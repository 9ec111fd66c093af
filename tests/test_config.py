"""Unit tests for configuration helpers"""

import logging
import os
import sys

# Add the parent directory to the path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import config


class TestConfig:
    def test_defaults(self):
        assert config.APPNAME == "passtype"
        assert config.PASS_CONFIG["store"]["extension"] == ".gpg"
        assert config.PASS_CONFIG["pass"]["command"] == "pass"

    def test_apply_cli_flags(self, monkeypatch):
        monkeypatch.setitem(config.PASS_CONFIG["logging"], "level", "INFO")
        monkeypatch.setitem(config.PASS_CONFIG["pipeline"], "background", True)

        rest = config.apply_cli_flags(["--debug", "--foreground", "--bogus"])

        assert rest == ["--bogus"]
        assert config.PASS_CONFIG["logging"]["level"] == "DEBUG"
        assert config.PASS_CONFIG["pipeline"]["background"] is False

    def test_configure_logging_levels(self):
        assert config.configure_logging("debug") == logging.DEBUG
        assert config.configure_logging("ERROR") == logging.ERROR
        assert config.configure_logging("nonsense") == logging.INFO
