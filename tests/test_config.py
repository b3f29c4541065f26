"""Tests for SequenceMiningConfig."""

import logging

from seqpm.config import SequenceMiningConfig


class TestDefaultValues:

    def test_defaults(self, monkeypatch):
        for name in ("SEQPM_VERBOSE", "SEQPM_LOG_LEVEL", "SEQPM_CHECK_TIMESTAMP_ORDER", "SEQPM_STRING_PADDING"):
            monkeypatch.delenv(name, raising=False)
        c = SequenceMiningConfig()
        assert c.verbose is False
        assert c.log_level == "WARNING"
        assert c.check_timestamp_order is False
        assert c.string_padding == 4


class TestEnvironmentOverrides:

    def test_verbose(self, monkeypatch):
        monkeypatch.setenv("SEQPM_VERBOSE", "true")
        assert SequenceMiningConfig().verbose is True

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("SEQPM_LOG_LEVEL", "DEBUG")
        assert SequenceMiningConfig().log_level == "DEBUG"

    def test_timestamp_order(self, monkeypatch):
        monkeypatch.setenv("SEQPM_CHECK_TIMESTAMP_ORDER", "TRUE")
        assert SequenceMiningConfig().check_timestamp_order is True

    def test_string_padding(self, monkeypatch):
        monkeypatch.setenv("SEQPM_STRING_PADDING", "2")
        assert SequenceMiningConfig().string_padding == 2


class TestSetupLogging:

    def test_level_from_settings(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        SequenceMiningConfig(log_level="error", verbose=False).setup_logging()
        assert calls["level"] == logging.ERROR

    def test_verbose_forces_debug(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        SequenceMiningConfig(log_level="error", verbose=True).setup_logging()
        assert calls["level"] == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        SequenceMiningConfig(log_level="loud", verbose=False).setup_logging()
        assert calls["level"] == logging.WARNING
