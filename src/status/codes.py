"""Error classification codes carried by Status values."""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-checkable classification of an operation outcome.

    The member value is the code's canonical textual form and is what
    appears before the colon in a rendered Status. Codes are compared
    for equality only; their declaration order carries no meaning.
    """

    OK = "OK"
    UNKNOWN = "UNKNOWN"
    CANCELLED = "CANCELLED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNIMPLEMENTED = "UNIMPLEMENTED"
    FILE_FAILURE = "FILE_FAILURE"
    END_OF_STREAM = "END_OF_STREAM"
    HTTP_FAILURE = "HTTP_FAILURE"
    PARSER_FAILURE = "PARSER_FAILURE"
    ENCRYPTION_FAILURE = "ENCRYPTION_FAILURE"
    CHUNKING_ERROR = "CHUNKING_ERROR"
    MUXER_FAILURE = "MUXER_FAILURE"
    FRAGMENT_FINALIZED = "FRAGMENT_FINALIZED"
    SERVER_ERROR = "SERVER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STOPPED = "STOPPED"
    TIME_OUT = "TIME_OUT"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"


# Mapping from error code to human-readable description
ERROR_CODE_TEXT: dict[ErrorCode, str] = {
    ErrorCode.OK: "Operation succeeded.",
    ErrorCode.UNKNOWN: "Unknown error.",
    ErrorCode.CANCELLED: "Operation was cancelled.",
    ErrorCode.INVALID_ARGUMENT: "Caller supplied an invalid argument.",
    ErrorCode.UNIMPLEMENTED: "Operation is not implemented.",
    ErrorCode.FILE_FAILURE: "File operation failed.",
    ErrorCode.END_OF_STREAM: "End of stream reached.",
    ErrorCode.HTTP_FAILURE: "HTTP request failed.",
    ErrorCode.PARSER_FAILURE: "Input could not be parsed.",
    ErrorCode.ENCRYPTION_FAILURE: "Encryption or decryption failed.",
    ErrorCode.CHUNKING_ERROR: "Chunking failed.",
    ErrorCode.MUXER_FAILURE: "Muxer failed.",
    ErrorCode.FRAGMENT_FINALIZED: "Fragment is already finalized.",
    ErrorCode.SERVER_ERROR: "Server returned an error.",
    ErrorCode.INTERNAL_ERROR: "Internal error.",
    ErrorCode.STOPPED: "Operation was stopped.",
    ErrorCode.TIME_OUT: "Operation timed out.",
    ErrorCode.NOT_FOUND: "Requested entity was not found.",
    ErrorCode.ALREADY_EXISTS: "Entity already exists.",
}
