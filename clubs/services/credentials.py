"""Onboarding credentials an administrator can hand to a new member.

These are defaults the administrator may overwrite, so a non-cryptographic
random source is used.
"""

import random
import re
import string
from dataclasses import dataclass
from datetime import datetime

from django.utils import timezone

from clubs.domain import Club

PASSWORD_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


def generate_username(club: Club, now: datetime | None = None) -> str:
    """Return ``<club name without whitespace>_<last 4 digits of epoch ms>``."""
    now = now or timezone.now()
    prefix = re.sub(r"\s+", "", club.name.lower())
    millis = str(int(now.timestamp()) * 1000 + now.microsecond // 1000)
    return f"{prefix}_{millis[-4:]}"


def generate_password(rng: random.Random | None = None) -> str:
    rng = rng or random.Random()
    return "".join(rng.choice(PASSWORD_ALPHABET) for _ in range(PASSWORD_LENGTH))


def generate_credentials(
    club: Club,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> Credentials:
    return Credentials(username=generate_username(club, now), password=generate_password(rng))
