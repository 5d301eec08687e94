"""Store exceptions and error classification for the HTTP surface."""

from enum import Enum

from pydantic import BaseModel


class StoreError(Exception):
    """Base class for entity store errors."""


class DuplicateIdError(StoreError):
    """Raised when a record is inserted with an id already present in its collection.

    Ids are unique for the lifetime of a collection, so this signals a programming
    error rather than a recoverable condition.
    """

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"Duplicate id in {collection}: {record_id}")


class RecordNotFoundError(StoreError, KeyError):
    """Raised by explicit single-record lookups when the id is unknown.

    Updates and deletes never raise this; unknown ids are silent no-ops there.
    """

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"Record not found in {collection}: {record_id}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCode:
    """Error codes for specific error conditions."""

    ERR_RECORD_NOT_FOUND = "ERR_RECORD_NOT_FOUND"
    ERR_DUPLICATE_ID = "ERR_DUPLICATE_ID"
    ERR_VALIDATION = "ERR_VALIDATION"
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised during execution

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    if isinstance(exception, RecordNotFoundError):
        return ErrorResponse(
            code=ErrorCode.ERR_RECORD_NOT_FOUND,
            message=f"I couldn't find that {exception.collection.replace('_', ' ')} record.",
            suggestion="List the collection to see the current ids.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, DuplicateIdError):
        return ErrorResponse(
            code=ErrorCode.ERR_DUPLICATE_ID,
            message=f"A record with id {exception.record_id} already exists.",
            suggestion="Omit the id and let the store assign one.",
            severity=ErrorSeverity.HIGH,
        )

    if isinstance(exception, ValueError):
        return ErrorResponse(
            code=ErrorCode.ERR_VALIDATION,
            message=str(exception),
            suggestion="Check the submitted fields and try again.",
            severity=ErrorSeverity.LOW,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again later. If the problem persists, check the server logs.",
        severity=ErrorSeverity.MEDIUM,
    )
