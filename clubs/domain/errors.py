"""Domain error codes for the clubs module."""

from dataclasses import dataclass
from enum import Enum

from clubs.domain.value_objects import Role


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    DUPLICATE_CLUB = "DUPLICATE_CLUB"
    UNKNOWN_CLUB = "UNKNOWN_CLUB"
    AUTHENTICATION_REJECTED = "AUTHENTICATION_REJECTED"
    MISSING_CLUB = "MISSING_CLUB"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    STORAGE_CORRUPTED = "STORAGE_CORRUPTED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationFailedError(DomainError):
    """Raised when a required field is missing or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message=f"Field '{field}' is required",
        )
        self.field = field


class DuplicateUsernameError(DomainError):
    """Raised when a username is already taken (case-insensitive)."""

    def __init__(self, username: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_USERNAME,
            message="Username already exists",
        )
        self.username = username


class DuplicateClubError(DomainError):
    """Raised when a new club would reuse an existing club id."""

    def __init__(self, club_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_CLUB,
            message="A club with this name already exists",
        )
        self.club_id = club_id


class UnknownClubError(DomainError):
    """Raised when a club id does not resolve to a stored club."""

    def __init__(self, club_id: str | None) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_CLUB,
            message="Club not found",
        )
        self.club_id = club_id


class AuthenticationRejectedError(DomainError):
    """Raised when credentials, role or club do not match.

    Deliberately says nothing about which part failed.
    """

    def __init__(self, role: Role) -> None:
        super().__init__(
            code=ErrorCode.AUTHENTICATION_REJECTED,
            message="Authentication rejected",
        )
        self.role = role


class MissingClubError(DomainError):
    """Raised when a member login does not name a club."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_CLUB,
            message="A club must be selected for member login",
        )


class MemberNotFoundError(DomainError):
    """Raised when a member is not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            code=ErrorCode.MEMBER_NOT_FOUND,
            message="Member not found",
        )
        self.user_id = user_id


class EventNotFoundError(DomainError):
    """Raised when an event is not found for the caller's club."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class NotAuthorizedError(DomainError):
    """Raised when the session does not hold the role an operation needs."""

    def __init__(self, required: Role) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHORIZED,
            message=f"A signed-in {required.value} is required",
        )
        self.required = required


class StorageCorruptedError(DomainError):
    """Raised when stored text for a key cannot be decoded."""

    def __init__(self, key: str) -> None:
        super().__init__(
            code=ErrorCode.STORAGE_CORRUPTED,
            message="Stored data could not be read",
        )
        self.key = key
