"""Screen handlers - the presentation side of each dashboard.

Handlers:
- Check the authorization gate on entry
- Call services for business logic
- Turn domain errors into notices through the Notifier
- Never contain business logic
- Never let a domain error escape
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, time
from typing import ClassVar, TypeVar

from clubs.domain import Club, Event, MemberUser, Role, User
from clubs.domain.errors import AuthenticationRejectedError, DomainError
from clubs.handlers.collaborators import Clipboard, Navigator, Notifier
from clubs.handlers.messages import error_message
from clubs.services import Credentials, Screen, Services, generate_credentials, landing_screen

T = TypeVar("T")

NOTIFICATION_PREVIEW = 3


@dataclass(frozen=True)
class ClubSummary:
    club: Club
    member_count: int


@dataclass(frozen=True)
class AdminOverview:
    clubs: list[ClubSummary]
    members: list[MemberUser]
    events: list[Event]


@dataclass(frozen=True)
class MemberOverview:
    member: MemberUser
    club: Club | None
    my_events: list[Event]
    all_events: list[Event]


@dataclass(frozen=True)
class GuestOverview:
    clubs: list[Club]
    events: list[Event]
    notifications: list[Event]
    more_notifications: int


class BaseScreen:
    """Shared gate check, logout and error-to-notice mapping."""

    screen: ClassVar[Screen]

    def __init__(self, services: Services, notifier: Notifier, navigator: Navigator) -> None:
        self._services = services
        self._notifier = notifier
        self._navigator = navigator
        self.user: User | None = None

    def enter(self) -> bool:
        """Run the gate. Redirects to login and returns False when refused."""
        admission = self._read(lambda: self._services.gate.enter(self.screen))
        if admission is None or admission.redirected:
            self._navigator.redirect(Screen.LOGIN)
            return False
        self.user = admission.user
        return True

    def logout(self) -> None:
        self._services.gate.logout()
        self.user = None
        self._navigator.redirect(Screen.LOGIN)

    def _read(self, load: Callable[[], T]) -> T | None:
        try:
            return load()
        except DomainError as exc:
            self._notifier.notify("Error", error_message(exc), error=True)
            return None

    def _attempt(self, action: Callable[[], T], success: str | Callable[[T], str]) -> T | None:
        try:
            result = action()
            message = success(result) if callable(success) else success
        except DomainError as exc:
            self._notifier.notify("Error", error_message(exc), error=True)
            return None
        self._notifier.notify("Success", message)
        return result


class LoginScreen(BaseScreen):
    screen = Screen.LOGIN

    def open(self) -> list[Club] | None:
        """Seed defaults on first use and return the clubs to pick from."""
        return self._read(self._seeded_clubs)

    def _seeded_clubs(self) -> list[Club]:
        self._services.store.seed_defaults()
        return self._services.clubs.list_clubs()

    def submit(
        self,
        username: str,
        password: str,
        role: Role,
        club_id: str | None = None,
    ) -> User | None:
        try:
            user = self._services.identity.authenticate(username, password, role, club_id)
        except AuthenticationRejectedError as exc:
            self._notifier.notify("Login Failed", error_message(exc), error=True)
            return None
        except DomainError as exc:
            self._notifier.notify("Error", error_message(exc), error=True)
            return None

        self.user = user
        self._notifier.notify("Login Successful!", f"Welcome {user.username}!")
        self._navigator.redirect(landing_screen(user.role))
        return user


class AdminScreen(BaseScreen):
    screen = Screen.ADMIN

    def __init__(
        self,
        services: Services,
        notifier: Notifier,
        navigator: Navigator,
        clipboard: Clipboard,
    ) -> None:
        super().__init__(services, notifier, navigator)
        self._clipboard = clipboard

    def open(self) -> AdminOverview | None:
        if not self.enter():
            return None
        return self.overview()

    def overview(self) -> AdminOverview | None:
        return self._read(self._admin_overview)

    def _admin_overview(self) -> AdminOverview:
        counts = self._services.clubs.member_counts()
        return AdminOverview(
            clubs=[
                ClubSummary(club=club, member_count=counts.get(club.id, 0))
                for club in self._services.clubs.list_clubs()
            ],
            members=self._services.members.list_members(),
            events=self._services.events.list_events(),
        )

    def create_club(self, name: str, description: str) -> Club | None:
        return self._attempt(
            lambda: self._services.clubs.create_club(name, description),
            "Club created successfully!",
        )

    def update_club(self, club_id: str, name: str, description: str) -> Club | None:
        return self._attempt(
            lambda: self._services.clubs.update_club(club_id, name, description),
            "Club updated successfully!",
        )

    def delete_club(self, club_id: str) -> None:
        self._attempt(
            lambda: self._services.clubs.delete_club(club_id),
            "Club deleted successfully!",
        )

    def add_member(self, username: str, password: str, club_id: str) -> MemberUser | None:
        def announce(member: MemberUser) -> str:
            club = self._services.clubs.get_club(member.club_id)
            return (
                f"Member {member.username} added to {club.name}! "
                f"Credentials: {member.username} / {member.password}"
            )

        return self._attempt(
            lambda: self._services.members.add_member(username, password, club_id),
            announce,
        )

    def update_member(
        self, user_id: str, username: str, password: str, club_id: str
    ) -> MemberUser | None:
        return self._attempt(
            lambda: self._services.members.update_member(user_id, username, password, club_id),
            "Member updated successfully!",
        )

    def delete_member(self, user_id: str) -> None:
        self._attempt(
            lambda: self._services.members.delete_member(user_id),
            "Member removed successfully!",
        )

    def generate_credentials(self, club_id: str | None) -> Credentials | None:
        if not club_id:
            self._notifier.notify("Error", "Please select a club first", error=True)
            return None
        try:
            club = self._services.clubs.get_club(club_id)
        except DomainError as exc:
            self._notifier.notify("Error", error_message(exc), error=True)
            return None

        credentials = generate_credentials(club)
        self._notifier.notify("Credentials Generated", "Username and password have been generated")
        return credentials

    def copy(self, text: str, label: str) -> None:
        self._clipboard.copy(text)
        self._notifier.notify("Copied!", f"{label} copied to clipboard")


class MemberScreen(BaseScreen):
    screen = Screen.MEMBER

    def open(self) -> MemberOverview | None:
        if not self.enter():
            return None
        return self.overview()

    def overview(self) -> MemberOverview | None:
        return self._read(self._member_overview)

    def _member_overview(self) -> MemberOverview:
        member = self.user
        club = next(
            (c for c in self._services.clubs.list_clubs() if c.id == member.club_id),
            None,
        )
        return MemberOverview(
            member=member,
            club=club,
            my_events=self._services.events.events_created_by(member.id),
            all_events=self._services.events.list_events(),
        )

    def create_event(
        self, title: str, description: str, date: date | None, time: time | None
    ) -> Event | None:
        return self._attempt(
            lambda: self._services.events.create_event(title, description, date, time),
            "Event created successfully!",
        )

    def update_event(
        self,
        event_id: str,
        title: str,
        description: str,
        date: date | None,
        time: time | None,
    ) -> Event | None:
        return self._attempt(
            lambda: self._services.events.update_event(event_id, title, description, date, time),
            "Event updated successfully!",
        )

    def delete_event(self, event_id: str) -> None:
        self._attempt(
            lambda: self._services.events.delete_event(event_id),
            "Event deleted successfully!",
        )


class GuestScreen(BaseScreen):
    screen = Screen.GUEST

    def open(self) -> GuestOverview | None:
        if not self.enter():
            return None
        return self.overview()

    def overview(self) -> GuestOverview | None:
        return self._read(self._guest_overview)

    def _guest_overview(self) -> GuestOverview:
        fresh = self._services.events.new_events()
        return GuestOverview(
            clubs=self._services.clubs.list_clubs(),
            events=self._services.events.list_events(),
            notifications=fresh[:NOTIFICATION_PREVIEW],
            more_notifications=max(len(fresh) - NOTIFICATION_PREVIEW, 0),
        )
