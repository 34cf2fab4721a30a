"""Tests for onboarding credential generation.

Run with: pytest tests/test_credentials.py -v
"""

import random
from datetime import datetime, timedelta, timezone

from clubs.domain import Club
from clubs.services.credentials import (
    PASSWORD_ALPHABET,
    generate_credentials,
    generate_password,
    generate_username,
)

# Epoch milliseconds of this instant end in ...1234.
INSTANT = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc) + timedelta(seconds=1, milliseconds=234)


class TestUsername:
    def test_uses_club_name_and_time_suffix(self):
        club = Club(id="robotics", name="Robotics", description="x")
        assert generate_username(club, INSTANT) == "robotics_1234"

    def test_strips_all_whitespace_from_club_name(self):
        club = Club(id="data-science", name="Data  Science Club", description="x")
        assert generate_username(club, INSTANT) == "datascienceclub_1234"


class TestPassword:
    def test_has_eight_alphanumeric_characters(self):
        password = generate_password()

        assert len(password) == 8
        assert set(password) <= set(PASSWORD_ALPHABET)

    def test_alphabet_is_letters_and_digits(self):
        assert len(PASSWORD_ALPHABET) == 62

    def test_seeded_source_is_reproducible(self):
        assert generate_password(random.Random(7)) == generate_password(random.Random(7))


def test_generate_credentials_pairs_both():
    club = Club(id="gdg", name="GDG", description="x")

    credentials = generate_credentials(club, INSTANT, random.Random(1))

    assert credentials.username == "gdg_1234"
    assert len(credentials.password) == 8
