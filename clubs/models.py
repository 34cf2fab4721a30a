"""Django ORM models (persistence layer).

The clubs core keeps its state as serialized text under a handful of fixed
keys. StoredItem is the table those keys live in; domain logic lives in
domain/ and services/.
"""

from django.db import models


class StoredItem(models.Model):
    """One key of the key-value store and its serialized text."""

    key = models.CharField(max_length=64, primary_key=True)
    value = models.TextField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]

    def __str__(self) -> str:
        return self.key
