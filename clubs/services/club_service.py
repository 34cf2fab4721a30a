"""Club service - club CRUD and the cascades that keep users and events
consistent with their club.

Services:
- Depend only on the persisted store
- Validate before writing, so a raised error leaves the store unchanged
- Return domain models or raise domain errors
"""

import logging
from collections import Counter
from dataclasses import replace

from clubs.domain import Club, ClubId, MemberUser
from clubs.domain.errors import DuplicateClubError, UnknownClubError
from clubs.services.validation import require
from clubs.stores import Collection, PersistedStore

logger = logging.getLogger(__name__)


class ClubService:
    """Service for club operations."""

    def __init__(self, store: PersistedStore) -> None:
        self._store = store

    def list_clubs(self) -> list[Club]:
        return self._store.load(Collection.CLUBS)

    def get_club(self, club_id: str) -> Club:
        """Return a club by id.

        Raises:
            UnknownClubError: If the club does not exist.
        """
        club = next((c for c in self.list_clubs() if c.id == club_id), None)
        if club is None:
            raise UnknownClubError(club_id)
        return club

    def create_club(self, name: str, description: str) -> Club:
        """Create a club whose id is derived from its name.

        Raises:
            ValidationFailedError: If name or description is blank.
            DuplicateClubError: If the derived id is already taken.
        """
        require(name=name, description=description)
        club = Club(id=ClubId.from_name(name).value, name=name, description=description)

        clubs = self.list_clubs()
        if any(existing.id == club.id for existing in clubs):
            raise DuplicateClubError(club.id)

        self._store.save(Collection.CLUBS, [*clubs, club])
        logger.info("Created club %r", club.id)
        return club

    def update_club(self, club_id: str, name: str, description: str) -> Club:
        """Rename or re-describe a club and refresh the name cached on its events.

        Raises:
            ValidationFailedError: If name or description is blank.
            UnknownClubError: If the club does not exist.
        """
        require(name=name, description=description)
        clubs = self.list_clubs()
        if not any(c.id == club_id for c in clubs):
            raise UnknownClubError(club_id)

        updated = Club(id=club_id, name=name, description=description)
        events = self._store.load(Collection.EVENTS)
        self._store.save(
            Collection.CLUBS,
            [updated if c.id == club_id else c for c in clubs],
        )
        self._store.save(
            Collection.EVENTS,
            [replace(e, club_name=name) if e.club_id == club_id else e for e in events],
        )
        logger.info("Updated club %r", club_id)
        return updated

    def delete_club(self, club_id: str) -> None:
        """Delete a club together with its members and events."""
        clubs = self.list_clubs()
        users = self._store.load(Collection.USERS)
        events = self._store.load(Collection.EVENTS)

        remaining_users = [
            u for u in users if not (isinstance(u, MemberUser) and u.club_id == club_id)
        ]
        remaining_events = [e for e in events if e.club_id != club_id]

        self._store.save(Collection.CLUBS, [c for c in clubs if c.id != club_id])
        self._store.save(Collection.USERS, remaining_users)
        self._store.save(Collection.EVENTS, remaining_events)
        logger.info(
            "Deleted club %r with %d members and %d events",
            club_id,
            len(users) - len(remaining_users),
            len(events) - len(remaining_events),
        )

    def member_counts(self) -> dict[str, int]:
        """Return the number of members of every club, zero included."""
        counts = Counter(
            u.club_id for u in self._store.load(Collection.USERS) if isinstance(u, MemberUser)
        )
        return {club.id: counts[club.id] for club in self.list_clubs()}
