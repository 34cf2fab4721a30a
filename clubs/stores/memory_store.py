"""In-memory implementation of KeyValueStorage, used by tests."""

from clubs.stores.interfaces import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage. Contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
