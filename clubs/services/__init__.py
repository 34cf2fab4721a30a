"""Service wiring.

build_services() assembles one PersistedStore and the services that share
it, using the storage backend named in settings.
"""

from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings
from django.utils.module_loading import import_string

from clubs.domain import AdminUser
from clubs.domain.models import DEFAULT_ADMIN_ID
from clubs.services.authorization import Admission, AuthorizationGate, Screen, landing_screen
from clubs.services.club_service import ClubService
from clubs.services.credentials import Credentials, generate_credentials
from clubs.services.event_service import EventService
from clubs.services.identity_service import IdentityService
from clubs.services.member_service import MemberService
from clubs.stores import KeyValueStorage, PersistedStore

__all__ = [
    "Admission",
    "AuthorizationGate",
    "ClubService",
    "Credentials",
    "EventService",
    "IdentityService",
    "MemberService",
    "Screen",
    "Services",
    "build_services",
    "default_admin",
    "generate_credentials",
    "landing_screen",
]


@dataclass(frozen=True)
class Services:
    store: PersistedStore
    identity: IdentityService
    gate: AuthorizationGate
    clubs: ClubService
    members: MemberService
    events: EventService


def default_admin() -> AdminUser:
    return AdminUser(
        id=DEFAULT_ADMIN_ID,
        username=settings.CLUBS_DEFAULT_ADMIN_USERNAME,
        password=settings.CLUBS_DEFAULT_ADMIN_PASSWORD,
    )


def build_services(storage: KeyValueStorage | None = None, **event_options) -> Services:
    """Wire services over storage, or over the configured backend."""
    if storage is None:
        storage = import_string(settings.CLUBS_STORAGE_BACKEND)()

    store = PersistedStore(storage, default_admin=default_admin())
    event_options.setdefault(
        "new_event_window", timedelta(hours=settings.CLUBS_NEW_EVENT_WINDOW_HOURS)
    )
    return Services(
        store=store,
        identity=IdentityService(store),
        gate=AuthorizationGate(store),
        clubs=ClubService(store),
        members=MemberService(store),
        events=EventService(store, **event_options),
    )
