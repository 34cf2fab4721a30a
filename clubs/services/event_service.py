"""Event service - events published by club members.

The publishing member is read from the session slot; club id, club name and
author are stamped from it rather than taken from the caller.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime, time, timedelta

from django.utils import timezone

from clubs.domain import Club, Event, MemberUser, Role, new_identifier
from clubs.domain.errors import EventNotFoundError, NotAuthorizedError, UnknownClubError
from clubs.services.validation import require
from clubs.stores import Collection, PersistedStore

logger = logging.getLogger(__name__)

NEW_EVENT_WINDOW = timedelta(hours=24)


class EventService:
    """Service for event operations."""

    def __init__(
        self,
        store: PersistedStore,
        clock: Callable[[], datetime] = timezone.now,
        new_event_window: timedelta = NEW_EVENT_WINDOW,
    ) -> None:
        self._store = store
        self._clock = clock
        self._new_event_window = new_event_window

    def list_events(self) -> list[Event]:
        return self._store.load(Collection.EVENTS)

    def events_created_by(self, user_id: str) -> list[Event]:
        return [e for e in self.list_events() if e.created_by == user_id]

    def new_events(self, now: datetime | None = None) -> list[Event]:
        """Return events created less than the new-event window ago."""
        now = now or self._clock()
        return [e for e in self.list_events() if now - e.created_at < self._new_event_window]

    def create_event(
        self,
        title: str,
        description: str,
        date: date | None,
        time: time | None,
    ) -> Event:
        """Publish an event for the signed-in member's club.

        Raises:
            NotAuthorizedError: If the session does not hold a member.
            UnknownClubError: If the member's club no longer exists.
            ValidationFailedError: If any field is missing or blank.
        """
        member, club = self._session_member()
        require(title=title, description=description, date=date, time=time)

        event = Event(
            id=new_identifier("event"),
            title=title,
            description=description,
            club_id=club.id,
            club_name=club.name,
            date=date,
            time=time,
            created_at=self._clock(),
            created_by=member.id,
        )
        self._store.save(Collection.EVENTS, [*self.list_events(), event])
        logger.info("Member %r created event %r", member.username, event.id)
        return event

    def update_event(
        self,
        event_id: str,
        title: str,
        description: str,
        date: date | None,
        time: time | None,
    ) -> Event:
        """Edit an event of the signed-in member's club.

        Raises:
            NotAuthorizedError: If the session does not hold a member.
            UnknownClubError: If the member's club no longer exists.
            ValidationFailedError: If any field is missing or blank.
            EventNotFoundError: If the event is not one of the club's events.
        """
        member, club = self._session_member()
        require(title=title, description=description, date=date, time=time)

        events = self.list_events()
        current = next((e for e in events if e.id == event_id and e.club_id == club.id), None)
        if current is None:
            raise EventNotFoundError(event_id)

        updated = replace(
            current,
            title=title,
            description=description,
            date=date,
            time=time,
            club_name=club.name,
        )
        self._store.save(
            Collection.EVENTS,
            [updated if e.id == event_id else e for e in events],
        )
        logger.info("Member %r updated event %r", member.username, event_id)
        return updated

    def delete_event(self, event_id: str) -> None:
        """Remove one of the signed-in member's club events.

        Raises:
            NotAuthorizedError: If the session does not hold a member.
            UnknownClubError: If the member's club no longer exists.
        """
        member, club = self._session_member()
        events = self.list_events()
        remaining = [e for e in events if not (e.id == event_id and e.club_id == club.id)]
        if len(remaining) != len(events):
            self._store.save(Collection.EVENTS, remaining)
            logger.info("Member %r deleted event %r", member.username, event_id)

    def _session_member(self) -> tuple[MemberUser, Club]:
        member = self._store.load_session()
        if not isinstance(member, MemberUser):
            raise NotAuthorizedError(Role.MEMBER)

        club = next(
            (c for c in self._store.load(Collection.CLUBS) if c.id == member.club_id),
            None,
        )
        if club is None:
            raise UnknownClubError(member.club_id)
        return member, club
