"""Status values for reporting the outcome of fallible operations.

This module provides:
- ErrorCode enum for machine-checkable error classification
- Status value type with merge (update), swap and comparison semantics
- check_ok / dcheck_ok fatal-check assertions
"""

from src.status.checks import check_ok, dcheck_ok, fatal
from src.status.codes import ERROR_CODE_TEXT, ErrorCode
from src.status.status import Status


__all__ = [
    "ERROR_CODE_TEXT",
    "ErrorCode",
    "Status",
    "check_ok",
    "dcheck_ok",
    "fatal",
]
