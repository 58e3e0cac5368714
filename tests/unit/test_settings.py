"""Unit tests for status settings."""

import pytest
from pydantic import ValidationError

from src.settings import StatusSettings, get_settings


class TestStatusSettings:
    """Tests for StatusSettings."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("STATUS_DEBUG_CHECKS", "STATUS_FATAL_ABORT", "STATUS_FATAL_EXIT_CODE"):
            monkeypatch.delenv(name, raising=False)
        settings = StatusSettings(_env_file=None)
        assert settings.debug_checks is False
        assert settings.fatal_abort is True
        assert settings.fatal_exit_code == 134

    @pytest.mark.unit
    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STATUS_DEBUG_CHECKS", "1")
        monkeypatch.setenv("STATUS_FATAL_ABORT", "false")
        monkeypatch.setenv("STATUS_FATAL_EXIT_CODE", "42")
        settings = get_settings()
        assert settings.debug_checks is True
        assert settings.fatal_abort is False
        assert settings.fatal_exit_code == 42

    @pytest.mark.unit
    @pytest.mark.parametrize("exit_code", ["0", "256"])
    def test_exit_code_range(
        self, monkeypatch: pytest.MonkeyPatch, exit_code: str
    ) -> None:
        """Exit code must be a valid non-zero process status."""
        monkeypatch.setenv("STATUS_FATAL_EXIT_CODE", exit_code)
        with pytest.raises(ValidationError):
            get_settings()
