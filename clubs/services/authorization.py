"""Authorization gate - decides which screen a caller may enter.

The check runs once per screen entry. A session changed underneath an
already-open screen is only noticed on the next entry.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from clubs.domain import Role, User
from clubs.stores import PersistedStore

logger = logging.getLogger(__name__)


class Screen(StrEnum):
    LOGIN = "login"
    ADMIN = "admin"
    MEMBER = "member"
    GUEST = "guest"


_SCREEN_ROLES = {
    Screen.ADMIN: Role.ADMIN,
    Screen.MEMBER: Role.MEMBER,
    Screen.GUEST: Role.GUEST,
}


@dataclass(frozen=True)
class Admission:
    """Where the caller ends up, and as whom."""

    screen: Screen
    user: User | None = None

    @property
    def redirected(self) -> bool:
        return self.user is None


LOGIN = Admission(screen=Screen.LOGIN)


def landing_screen(role: Role) -> Screen:
    """Return the dashboard a role lands on after signing in."""
    return Screen(Role(role).value)


class AuthorizationGate:
    """Guards entry to the role dashboards."""

    def __init__(self, store: PersistedStore) -> None:
        self._store = store

    def enter(self, screen: Screen) -> Admission:
        """Admit the session user to screen, or send the caller to login."""
        screen = Screen(screen)
        if screen is Screen.LOGIN:
            return LOGIN

        user = self._store.load_session()
        if user is None or user.role is not _SCREEN_ROLES[screen]:
            logger.info("Redirecting to login from %s screen", screen.value)
            return LOGIN
        return Admission(screen=screen, user=user)

    def logout(self) -> Admission:
        """Clear the session. Safe to call when nobody is signed in."""
        self._store.clear_session()
        return LOGIN
