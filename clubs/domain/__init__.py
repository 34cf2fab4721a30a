from clubs.domain.models import (
    DEFAULT_CLUBS,
    AdminUser,
    Club,
    Event,
    GuestUser,
    MemberUser,
    User,
)
from clubs.domain.value_objects import ClubId, Role, new_identifier

__all__ = [
    "DEFAULT_CLUBS",
    "AdminUser",
    "Club",
    "Event",
    "GuestUser",
    "MemberUser",
    "User",
    "ClubId",
    "Role",
    "new_identifier",
]
