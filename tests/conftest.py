"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from clubs.domain import Club, MemberUser, Role
from clubs.services import Services, build_services
from clubs.stores import InMemoryStorage, PersistedStore

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


class RecordingNotifier:
    def __init__(self) -> None:
        self.notices: list[tuple[str, str, bool]] = []

    def notify(self, title: str, message: str, error: bool = False) -> None:
        self.notices.append((title, message, error))

    @property
    def last(self) -> tuple[str, str, bool]:
        return self.notices[-1]


class RecordingNavigator:
    def __init__(self) -> None:
        self.redirects = []

    def redirect(self, screen) -> None:
        self.redirects.append(screen)


class RecordingClipboard:
    def __init__(self) -> None:
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        self.copied.append(text)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def services(storage: InMemoryStorage, clock: FixedClock) -> Services:
    return build_services(storage, clock=clock)


@pytest.fixture
def store(services: Services) -> PersistedStore:
    return services.store


@pytest.fixture
def robotics(services: Services) -> Club:
    return services.clubs.create_club("Robotics", "Builds and races robots")


@pytest.fixture
def signed_in_member(services: Services, robotics: Club) -> MemberUser:
    member = services.members.add_member("robotics_0001", "Ab12Cd34", robotics.id)
    services.identity.authenticate("robotics_0001", "Ab12Cd34", Role.MEMBER, robotics.id)
    return member


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def clipboard() -> RecordingClipboard:
    return RecordingClipboard()
