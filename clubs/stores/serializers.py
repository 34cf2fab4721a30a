"""Serializers that map domain models to the stored JSON layout and back.

The stored layout keeps camelCase keys (clubId, clubName, createdAt,
createdBy) so existing data stays readable.
"""

from django.core.validators import ProhibitNullCharactersValidator
from rest_framework import serializers
from rest_framework.validators import ProhibitSurrogateCharactersValidator

from clubs.domain import AdminUser, Club, Event, GuestUser, MemberUser, Role


class StoredTextField(serializers.CharField):
    """CharField that reads back any string it was given to write.

    CharField rejects NUL and lone surrogate characters on input, but writing
    never checks them, so a stored value holding one would fail every later
    read. Those two validators are dropped here.
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.validators = [
            validator
            for validator in self.validators
            if not isinstance(
                validator,
                (ProhibitNullCharactersValidator, ProhibitSurrogateCharactersValidator),
            )
        ]


def _text(**kwargs) -> StoredTextField:
    # Stored text is kept verbatim, passwords included.
    return StoredTextField(trim_whitespace=False, allow_blank=True, **kwargs)


class ClubSerializer(serializers.Serializer):
    """Serializer for the Club domain model."""

    id = _text()
    name = _text()
    description = _text()

    def create(self, validated_data):
        return Club(**validated_data)


class UserSerializer(serializers.Serializer):
    """Serializer for the User variants, tagged by role."""

    id = _text()
    username = _text()
    password = _text()
    role = serializers.ChoiceField(choices=[role.value for role in Role])
    clubId = _text(source="club_id", required=False, allow_null=True)

    def validate(self, attrs):
        if attrs["role"] == Role.MEMBER and not attrs.get("club_id"):
            raise serializers.ValidationError({"clubId": "Members must belong to a club."})
        return attrs

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get("clubId") is None:
            data.pop("clubId", None)
        return data

    def create(self, validated_data):
        role = Role(validated_data["role"])
        common = {
            "id": validated_data["id"],
            "username": validated_data["username"],
            "password": validated_data["password"],
        }
        if role is Role.MEMBER:
            return MemberUser(**common, club_id=validated_data["club_id"])
        if role is Role.ADMIN:
            return AdminUser(**common)
        return GuestUser(**common)


class EventSerializer(serializers.Serializer):
    """Serializer for the Event domain model."""

    id = _text()
    title = _text()
    description = _text()
    clubId = _text(source="club_id")
    clubName = _text(source="club_name")
    date = serializers.DateField()
    time = serializers.TimeField(format="%H:%M")
    createdAt = serializers.DateTimeField(source="created_at")
    createdBy = _text(source="created_by")

    def create(self, validated_data):
        return Event(**validated_data)
