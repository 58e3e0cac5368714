"""Status value type for reporting the outcome of fallible operations."""

from pydantic import BaseModel, ConfigDict, model_validator

from src.status.codes import ErrorCode


class Status(BaseModel):
    """Outcome of a fallible operation: an error code plus a message.

    A Status is either OK or an error. An OK status always carries an
    empty message; any message supplied together with ``ErrorCode.OK``
    is discarded on construction, on ``set_error`` and on direct
    assignment to the ``code`` or ``message`` fields, which are validated.

    Two comparison relations are provided:
    - ``equals`` / ``==``: code and message must both match
    - ``matches``: only the code must match (for assertions where the
      message text is environment-dependent)

    Instances are mutable values. Use ``copy()`` to obtain an
    independent value; plain assignment only binds another name.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    code: ErrorCode = ErrorCode.OK
    message: str = ""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.OK,
        message: str = "",
    ) -> None:
        """Initialize the status.

        Args:
            code: Error classification (default: OK).
            message: Human-readable message, dropped when code is OK.
        """
        super().__init__(code=code, message=message)

    @model_validator(mode="after")
    def _normalize_ok(self) -> "Status":
        # Runs after every field assignment too; write the dict directly so
        # clearing the message does not re-enter assignment validation.
        if self.code is ErrorCode.OK and self.message:
            self.__dict__["message"] = ""
        return self

    @classmethod
    def success(cls) -> "Status":
        """Return a fresh canonical OK status."""
        return cls(ErrorCode.OK)

    @classmethod
    def unknown(cls) -> "Status":
        """Return a fresh canonical UNKNOWN status with an empty message."""
        return cls(ErrorCode.UNKNOWN)

    @property
    def ok(self) -> bool:
        """Whether the status represents success."""
        return self.code is ErrorCode.OK

    @property
    def error_code(self) -> ErrorCode:
        return self.code

    @property
    def error_message(self) -> str:
        return self.message

    def set_error(self, code: ErrorCode, message: str) -> None:
        """Overwrite code and message in place.

        Args:
            code: New error classification.
            message: New message, dropped when code is OK.
        """
        self._assign(Status(code, message))

    def clear(self) -> None:
        """Reset to OK with an empty message."""
        self._assign(Status.success())

    def update(self, other: "Status") -> None:
        """Merge a newly observed status into this one.

        The first error sticks: an OK receiver takes a copy of ``other``,
        while a receiver already holding an error is left untouched, even
        when ``other`` is OK.

        Args:
            other: Status observed by the caller.

        Raises:
            TypeError: If other is not a Status.
        """
        _require_status(other)
        if self.ok:
            self._assign(other)

    def swap(self, other: "Status") -> None:
        """Exchange code and message with another status in place.

        Args:
            other: Status to exchange state with.

        Raises:
            TypeError: If other is not a Status.
        """
        _require_status(other)
        theirs = other.copy()
        other._assign(self)
        self._assign(theirs)

    def equals(self, other: "Status") -> bool:
        """Strict comparison of both code and message."""
        _require_status(other)
        return self.code is other.code and self.message == other.message

    def matches(self, other: "Status") -> bool:
        """Loose comparison of the code only; messages are ignored."""
        _require_status(other)
        return self.code is other.code

    def copy(self) -> "Status":  # type: ignore[override]
        """Return an independent copy of this status."""
        return self.model_copy()

    def to_dict(self) -> dict[str, str]:
        """Convert status to dictionary for logging/serialization.

        Returns:
            Dictionary with the code text and the message.
        """
        return {"code": self.code.value, "message": self.message}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Status):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        if self.ok:
            return "OK"
        return f"{self.code.value}:{self.message}"

    def _assign(self, other: "Status") -> None:
        # Code first: an OK code clears the message, which then stays empty.
        self.code = other.code
        self.message = other.message


def _require_status(value: object) -> None:
    if not isinstance(value, Status):
        raise TypeError(f"Expected Status, got {type(value).__name__}")
