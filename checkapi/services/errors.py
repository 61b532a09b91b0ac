"""
Failure taxonomy for the check pipeline and the classifier that turns any
failure into an error envelope.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..logger import log_error
from ..models import ErrorEnvelope

INVALID_DOMAIN_MESSAGE = "Must supply a valid domain name on an authoritative TLD"
GENERIC_ERROR_MESSAGE = "Invalid request"


class FailureKind(str, Enum):
    VALIDATION = "validation"
    PROTOCOL = "protocol"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class CheckFailure:
    """
    Tagged failure returned by pipeline stages in place of a value.

    message is shown to the caller for VALIDATION and PROTOCOL only.
    cause keeps the original exception for server-side logging.
    """
    kind: FailureKind
    message: str
    cause: Optional[BaseException] = None

    @classmethod
    def validation(cls) -> "CheckFailure":
        return cls(FailureKind.VALIDATION, INVALID_DOMAIN_MESSAGE)

    @classmethod
    def protocol(cls, message: str) -> "CheckFailure":
        return cls(FailureKind.PROTOCOL, message)

    @classmethod
    def unexpected(cls, cause: BaseException) -> "CheckFailure":
        return cls(FailureKind.UNEXPECTED, GENERIC_ERROR_MESSAGE, cause)


def classify(failure: CheckFailure, **context) -> ErrorEnvelope:
    """
    Map a failure to the envelope shown to the caller.

    Args:
        failure: Tagged failure from any pipeline stage
        **context: Extra log fields (trid, flow, zone)

    Returns:
        ErrorEnvelope with a caller-safe reason
    """
    if failure.kind is FailureKind.VALIDATION:
        return ErrorEnvelope(reason=failure.message)

    if failure.kind is FailureKind.PROTOCOL:
        return ErrorEnvelope(reason=failure.message)

    cause = failure.cause
    log_error(
        "Unknown error during domain check",
        exc_info=cause if cause is not None else False,
        action="check_unexpected_failure",
        failure_kind=failure.kind.value,
        error_type=type(cause).__name__ if cause is not None else None,
        **context,
    )
    return ErrorEnvelope(reason=GENERIC_ERROR_MESSAGE)
