"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from dataclasses import FrozenInstanceError

import pytest

from clubs.domain import AdminUser, Club, ClubId, GuestUser, MemberUser, Role, new_identifier
from clubs.domain.errors import AuthenticationRejectedError, ErrorCode, ValidationFailedError


class TestClubId:
    """Tests for ClubId value object."""

    def test_from_name_lower_cases(self):
        """Club ids are the lower-cased name."""
        assert ClubId.from_name("STIC").value == "stic"

    def test_from_name_collapses_whitespace(self):
        """Runs of whitespace become a single dash."""
        assert ClubId.from_name("Data   Science\tSociety").value == "data-science-society"

    def test_from_name_ignores_outer_whitespace(self):
        """Leading and trailing whitespace does not leak into the id."""
        assert ClubId.from_name("  Robotics ").value == "robotics"

    def test_rejects_empty_value(self):
        """ClubId raises ValueError when empty."""
        with pytest.raises(ValueError):
            ClubId(value="")


class TestUsers:
    """Tests for the role-tagged user variants."""

    def test_each_variant_carries_its_role(self):
        assert AdminUser(id="a", username="a", password="p").role is Role.ADMIN
        assert MemberUser(id="m", username="m", password="p", club_id="gdg").role is Role.MEMBER
        assert GuestUser(id="g", username="g", password="p").role is Role.GUEST

    def test_only_members_carry_a_club(self):
        assert not hasattr(GuestUser(id="g", username="g", password="p"), "club_id")

    def test_users_are_immutable(self):
        guest = GuestUser(id="g", username="g", password="p")
        with pytest.raises(FrozenInstanceError):
            guest.password = "other"


class TestIdentifiers:
    def test_new_identifier_uses_prefix(self):
        assert new_identifier("event").startswith("event-")

    def test_new_identifiers_are_unique(self):
        assert len({new_identifier("guest") for _ in range(50)}) == 50


class TestErrors:
    def test_validation_error_names_field(self):
        error = ValidationFailedError("title")
        assert error.code is ErrorCode.VALIDATION_FAILED
        assert error.field == "title"
        assert str(error) == "VALIDATION_FAILED: Field 'title' is required"

    def test_rejection_does_not_say_what_failed(self):
        error = AuthenticationRejectedError(Role.MEMBER)
        assert error.message == "Authentication rejected"

    def test_club_is_plain_value(self):
        assert Club(id="gdg", name="GDG", description="x") == Club(id="gdg", name="GDG", description="x")
