"""Unit tests for error codes."""

import pytest

from src.status.codes import ERROR_CODE_TEXT, ErrorCode


class TestErrorCode:
    """Tests for ErrorCode enum."""

    @pytest.mark.unit
    def test_distinguished_codes_defined(self) -> None:
        """OK and UNKNOWN are always available."""
        assert ErrorCode.OK == "OK"
        assert ErrorCode.UNKNOWN == "UNKNOWN"

    @pytest.mark.unit
    def test_values_are_names(self) -> None:
        """Textual form of each code is its name."""
        for code in ErrorCode:
            assert code.value == code.name

    @pytest.mark.unit
    def test_codes_are_distinct(self) -> None:
        assert len({code.value for code in ErrorCode}) == len(ErrorCode)

    @pytest.mark.unit
    def test_lookup_by_text(self) -> None:
        assert ErrorCode("CANCELLED") is ErrorCode.CANCELLED

    @pytest.mark.unit
    def test_all_codes_have_text(self) -> None:
        """All error codes must have human-readable text."""
        for code in ErrorCode:
            assert code in ERROR_CODE_TEXT, f"Missing text for {code}"
            assert len(ERROR_CODE_TEXT[code]) > 0
