"""Domain models representing persisted state.

These are pure domain objects with no storage or presentation rules.
Serialization lives in clubs/stores/serializers.py.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import ClassVar

from clubs.domain.value_objects import Role


@dataclass(frozen=True)
class Club:
    """Domain representation of a Club."""

    id: str
    name: str
    description: str


@dataclass(frozen=True)
class AdminUser:
    """An administrator. Never bound to a club."""

    role: ClassVar[Role] = Role.ADMIN

    id: str
    username: str
    password: str


@dataclass(frozen=True)
class MemberUser:
    """A user bound to exactly one club."""

    role: ClassVar[Role] = Role.MEMBER

    id: str
    username: str
    password: str
    club_id: str


@dataclass(frozen=True)
class GuestUser:
    """A self-registered, read-only user."""

    role: ClassVar[Role] = Role.GUEST

    id: str
    username: str
    password: str


User = AdminUser | MemberUser | GuestUser


@dataclass(frozen=True)
class Event:
    """Domain representation of a club Event.

    ``club_name`` caches the owning club's name and is rewritten when the
    club is renamed.
    """

    id: str
    title: str
    description: str
    club_id: str
    club_name: str
    date: date
    time: time
    created_at: datetime
    created_by: str


def same_username(user: User, username: str) -> bool:
    """Usernames compare case-insensitively."""
    return user.username.lower() == username.lower()


DEFAULT_CLUBS: tuple[Club, ...] = (
    Club(id="stic", name="STIC", description="Student Technical Innovation Club"),
    Club(id="gdg", name="GDG", description="Google Developer Group"),
    Club(id="aws", name="AWS", description="Amazon Web Services Club"),
    Club(id="acm", name="ACM", description="Association for Computing Machinery"),
    Club(
        id="ieee",
        name="IEEE",
        description="Institute of Electrical and Electronics Engineers",
    ),
)

DEFAULT_ADMIN_ID = "admin-1"
