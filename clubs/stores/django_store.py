"""Django ORM implementation of KeyValueStorage."""

from clubs.models import StoredItem
from clubs.stores.interfaces import KeyValueStorage


class DjangoStorage(KeyValueStorage):
    """Database-backed storage using the StoredItem table."""

    def get_item(self, key: str) -> str | None:
        item = StoredItem.objects.filter(key=key).only("value").first()
        return item.value if item is not None else None

    def set_item(self, key: str, value: str) -> None:
        StoredItem.objects.update_or_create(key=key, defaults={"value": value})

    def remove_item(self, key: str) -> None:
        StoredItem.objects.filter(key=key).delete()
