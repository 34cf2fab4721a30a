"""Member service - administrator-managed member accounts."""

import logging

from clubs.domain import Club, MemberUser, new_identifier
from clubs.domain.errors import DuplicateUsernameError, MemberNotFoundError, UnknownClubError
from clubs.domain.models import same_username
from clubs.services.validation import require
from clubs.stores import Collection, PersistedStore

logger = logging.getLogger(__name__)


class MemberService:
    """Service for adding, editing and removing club members."""

    def __init__(self, store: PersistedStore) -> None:
        self._store = store

    def list_members(self, club_id: str | None = None) -> list[MemberUser]:
        return [
            u
            for u in self._store.load(Collection.USERS)
            if isinstance(u, MemberUser) and (club_id is None or u.club_id == club_id)
        ]

    def add_member(self, username: str, password: str, club_id: str) -> MemberUser:
        """Create a member of club_id.

        Raises:
            ValidationFailedError: If any field is blank.
            DuplicateUsernameError: If the username is taken by any user.
            UnknownClubError: If the club does not exist.
        """
        require(username=username, password=password, club_id=club_id)
        username, password = username.strip(), password.strip()

        users = self._store.load(Collection.USERS)
        if any(same_username(u, username) for u in users):
            raise DuplicateUsernameError(username)
        club = self._require_club(club_id)

        member = MemberUser(
            id=new_identifier("member"),
            username=username,
            password=password,
            club_id=club.id,
        )
        self._store.save(Collection.USERS, [*users, member])
        logger.info("Added member %r to club %r", member.username, club.id)
        return member

    def update_member(
        self, user_id: str, username: str, password: str, club_id: str
    ) -> MemberUser:
        """Replace a member's username, password and club.

        Raises:
            ValidationFailedError: If any field is blank.
            MemberNotFoundError: If user_id is not a member.
            DuplicateUsernameError: If another user has the username.
            UnknownClubError: If the club does not exist.
        """
        require(username=username, password=password, club_id=club_id)
        username, password = username.strip(), password.strip()

        users = self._store.load(Collection.USERS)
        if not any(isinstance(u, MemberUser) and u.id == user_id for u in users):
            raise MemberNotFoundError(user_id)
        if any(u.id != user_id and same_username(u, username) for u in users):
            raise DuplicateUsernameError(username)
        club = self._require_club(club_id)

        updated = MemberUser(id=user_id, username=username, password=password, club_id=club.id)
        self._store.save(
            Collection.USERS,
            [updated if u.id == user_id else u for u in users],
        )
        logger.info("Updated member %r", user_id)
        return updated

    def delete_member(self, user_id: str) -> None:
        users = self._store.load(Collection.USERS)
        remaining = [u for u in users if not (isinstance(u, MemberUser) and u.id == user_id)]
        if len(remaining) != len(users):
            self._store.save(Collection.USERS, remaining)
            logger.info("Removed member %r", user_id)

    def _require_club(self, club_id: str) -> Club:
        club = next(
            (c for c in self._store.load(Collection.CLUBS) if c.id == club_id),
            None,
        )
        if club is None:
            raise UnknownClubError(club_id)
        return club
