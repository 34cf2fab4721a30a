"""Identity service - resolves login attempts against stored users.

Passwords are stored and compared as plain text. Usernames compare
case-insensitively, passwords exactly.
"""

import logging

from clubs.domain import GuestUser, Role, User, new_identifier
from clubs.domain.errors import AuthenticationRejectedError, MissingClubError
from clubs.domain.models import same_username
from clubs.services.validation import require
from clubs.stores import Collection, PersistedStore

logger = logging.getLogger(__name__)


class IdentityService:
    """Service for signing users in."""

    def __init__(self, store: PersistedStore) -> None:
        self._store = store

    def authenticate(
        self,
        username: str,
        password: str,
        role: Role,
        club_id: str | None = None,
    ) -> User:
        """Resolve credentials to a user and open a session for it.

        Guests that have never signed in before are registered on the spot.

        Raises:
            ValidationFailedError: If username or password is blank.
            MissingClubError: If a member login names no club.
            AuthenticationRejectedError: If nothing matches.
        """
        require(username=username, password=password)
        role = Role(role)
        if role is Role.MEMBER and not club_id:
            raise MissingClubError()

        users = self._store.load(Collection.USERS)
        if role is Role.GUEST:
            user = self._resolve_guest(users, username, password)
        else:
            user = next(
                (
                    candidate
                    for candidate in users
                    if candidate.role is role
                    and same_username(candidate, username)
                    and candidate.password == password
                    and (role is not Role.MEMBER or candidate.club_id == club_id)
                ),
                None,
            )

        if user is None:
            logger.warning("Rejected %s login for %r", role.value, username)
            raise AuthenticationRejectedError(role)

        self._store.save_session(user)
        logger.info("Signed in %s %r", role.value, user.username)
        return user

    def _resolve_guest(self, users: list, username: str, password: str) -> User | None:
        existing = next(
            (u for u in users if u.role is Role.GUEST and same_username(u, username)),
            None,
        )
        if existing is not None:
            return existing if existing.password == password else None

        guest = GuestUser(id=new_identifier("guest"), username=username, password=password)
        self._store.save(Collection.USERS, [*users, guest])
        logger.info("Registered guest %r", username)
        return guest
