"""Domain primitives that enforce validity at creation time."""

import re
import uuid
from dataclasses import dataclass
from enum import StrEnum
from typing import Self

_WHITESPACE = re.compile(r"\s+")


class Role(StrEnum):
    """Role a user signs in with."""

    ADMIN = "admin"
    MEMBER = "member"
    GUEST = "guest"


@dataclass(frozen=True)
class ClubId:
    """Identifier of a Club, derived from its name once and never changed."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Club id cannot be empty")

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Lower-case the stripped name and turn each whitespace run into ``-``.

        Surrounding whitespace is dropped first, so ``" Robotics"`` gives
        ``"robotics"`` rather than ``"-robotics"``.
        """
        return cls(value=_WHITESPACE.sub("-", name.strip().lower()))

    def __str__(self) -> str:
        return self.value


def new_identifier(prefix: str) -> str:
    """Return an opaque identifier such as ``member-1a2b3c4d5e6f``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
