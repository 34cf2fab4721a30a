"""User-facing text for domain errors.

Never expose internal error details: every message here is generic enough
to be shown as-is.
"""

from clubs.domain import Role
from clubs.domain.errors import AuthenticationRejectedError, DomainError, ErrorCode

_MESSAGES = {
    ErrorCode.VALIDATION_FAILED: "Please fill in all fields",
    ErrorCode.DUPLICATE_USERNAME: "Username already exists",
    ErrorCode.DUPLICATE_CLUB: "A club with this name already exists",
    ErrorCode.UNKNOWN_CLUB: "Selected club not found",
    ErrorCode.AUTHENTICATION_REJECTED: "Invalid username or password.",
    ErrorCode.MISSING_CLUB: "Please select a club for member login",
    ErrorCode.MEMBER_NOT_FOUND: "Member not found",
    ErrorCode.EVENT_NOT_FOUND: "Event not found",
    ErrorCode.NOT_AUTHORIZED: "Please sign in again",
    ErrorCode.STORAGE_CORRUPTED: "Something went wrong while reading saved data",
}

MEMBER_LOGIN_REJECTED = (
    "Invalid credentials or you're not a member of the selected club. "
    "Please check with your admin."
)


def error_message(error: DomainError) -> str:
    if isinstance(error, AuthenticationRejectedError) and error.role is Role.MEMBER:
        return MEMBER_LOGIN_REJECTED
    return _MESSAGES[error.code]
