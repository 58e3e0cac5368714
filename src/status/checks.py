"""Fatal-check assertions for statuses that must always be OK.

These guards are for call sites that have declared a failure impossible.
A non-OK status is reported and the process is terminated; nothing here
is meant for recoverable error handling.
"""

import os
import sys
from collections.abc import Callable
from typing import NoReturn

import structlog
from pydantic import ValidationError

from src.observability import configure_logging, get_logger
from src.settings import get_settings
from src.status.codes import ERROR_CODE_TEXT
from src.status.status import Status


logger = get_logger(__name__)

# Extra diagnostic text, either literal or built lazily on failure
CheckContext = str | Callable[[], str] | None


def check_ok(status: Status, context: CheckContext = None) -> None:
    """Terminate the process unless the status is OK.

    Args:
        status: Status that must be OK.
        context: Optional text appended to the diagnostic. A callable is
            only invoked when the check fails.
    """
    if status.ok:
        return

    detail = context() if callable(context) else context
    diagnostic = f"Check failed: {status}"
    if detail:
        diagnostic = f"{diagnostic} {detail}"

    # Unconfigured processes still get the record next to the diagnostic
    if not structlog.is_configured():
        configure_logging(output=sys.stderr)

    logger.critical(
        "check_failed",
        status=str(status),
        description=ERROR_CODE_TEXT[status.code],
        context=detail,
        **status.to_dict(),
    )
    fatal(diagnostic)


def dcheck_ok(status: Status, context: CheckContext = None) -> None:
    """Debug-only variant of check_ok.

    Enforced only when ``STATUS_DEBUG_CHECKS`` is enabled; otherwise the
    status is not inspected.

    Args:
        status: Status that must be OK.
        context: Optional text appended to the diagnostic.
    """
    if not get_settings().debug_checks:
        return
    check_ok(status, context)


def fatal(diagnostic: str) -> NoReturn:
    """Write a diagnostic to stderr and terminate immediately.

    Invalid termination settings fall back to ``os.abort()``.

    Args:
        diagnostic: Text that must appear in the termination output.
    """
    sys.stderr.write(f"{diagnostic}\n")
    sys.stderr.flush()

    try:
        settings = get_settings()
    except ValidationError:
        os.abort()

    if settings.fatal_abort:
        os.abort()
    os._exit(settings.fatal_exit_code)
