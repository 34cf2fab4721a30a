"""Typed access to the stored collections and the session slot.

Every collection is stored whole as JSON text under a fixed key. There is no
incremental update: callers read the full collection, compute the new one
and save it back, and the last write wins.
"""

import json
import logging
from enum import StrEnum

from rest_framework import serializers

from clubs.domain import DEFAULT_CLUBS, AdminUser, User
from clubs.domain.errors import StorageCorruptedError
from clubs.stores.interfaces import KeyValueStorage
from clubs.stores.serializers import ClubSerializer, EventSerializer, UserSerializer

logger = logging.getLogger(__name__)

SESSION_KEY = "currentUser"


class Collection(StrEnum):
    """Stored collections and the keys they live under."""

    CLUBS = "clubs"
    USERS = "users"
    EVENTS = "events"


_SERIALIZERS: dict[Collection, type[serializers.Serializer]] = {
    Collection.CLUBS: ClubSerializer,
    Collection.USERS: UserSerializer,
    Collection.EVENTS: EventSerializer,
}


class PersistedStore:
    """Reads and writes clubs, users, events and the current session."""

    def __init__(self, storage: KeyValueStorage, default_admin: AdminUser) -> None:
        self._storage = storage
        self._default_admin = default_admin

    def load(self, collection: Collection) -> list:
        """Return every item of a collection.

        An absent key reads as empty, except that the first load of clubs
        seeds the default clubs, and users always gain the default admin
        when no admin is stored.
        """
        text = self._storage.get_item(collection.value)
        if text is None:
            items = []
            if collection is Collection.CLUBS:
                items = list(DEFAULT_CLUBS)
                self.save(collection, items)
                logger.info("Seeded %d default clubs", len(items))
        else:
            items = self._decode(collection.value, _SERIALIZERS[collection], text, many=True)

        if collection is Collection.USERS and not any(
            isinstance(user, AdminUser) for user in items
        ):
            items = [*items, self._default_admin]
            self.save(collection, items)
            logger.info("Seeded default admin %r", self._default_admin.username)
        return items

    def save(self, collection: Collection, items: list) -> None:
        """Overwrite a collection with items."""
        serializer = _SERIALIZERS[collection](items, many=True)
        self._storage.set_item(collection.value, json.dumps(serializer.data))

    def seed_defaults(self) -> None:
        """Make sure default clubs and the default admin exist."""
        self.load(Collection.CLUBS)
        self.load(Collection.USERS)

    def load_session(self) -> User | None:
        text = self._storage.get_item(SESSION_KEY)
        if text is None:
            return None
        return self._decode(SESSION_KEY, UserSerializer, text, many=False)

    def save_session(self, user: User) -> None:
        self._storage.set_item(SESSION_KEY, json.dumps(UserSerializer(user).data))

    def clear_session(self) -> None:
        self._storage.remove_item(SESSION_KEY)

    def _decode(self, key: str, serializer_class, text: str, many: bool):
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error("Stored value under %r is not valid JSON", key)
            raise StorageCorruptedError(key) from exc

        if raw is None:
            return [] if many else None

        serializer = serializer_class(data=raw, many=many)
        if not serializer.is_valid():
            logger.error("Stored value under %r failed validation: %s", key, serializer.errors)
            raise StorageCorruptedError(key)
        return serializer.save()
