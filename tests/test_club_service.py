"""Unit tests for ClubService and the cascades it performs.

Run with: pytest tests/test_club_service.py -v
"""

from datetime import date, time

import pytest

from clubs.domain import Club, MemberUser, Role
from clubs.domain.errors import DuplicateClubError, UnknownClubError, ValidationFailedError
from clubs.services import Services
from clubs.stores import Collection


def publish(services: Services, club_id: str, username: str, title: str):
    """Sign in as a fresh member of club_id and publish one event."""
    services.members.add_member(username, "Secret99", club_id)
    services.identity.authenticate(username, "Secret99", Role.MEMBER, club_id)
    return services.events.create_event(title, "Details", date(2026, 11, 1), time(17, 0))


class TestCreateClub:
    """Tests for club creation."""

    def test_id_is_derived_from_name(self, services: Services):
        club = services.clubs.create_club("Data Science", "Numbers")

        assert club == Club(id="data-science", name="Data Science", description="Numbers")
        assert services.clubs.get_club("data-science") == club

    def test_new_club_is_appended_after_defaults(self, services: Services):
        services.clubs.create_club("Chess", "Plays chess")
        assert [c.id for c in services.clubs.list_clubs()][-2:] == ["ieee", "chess"]

    def test_duplicate_id_is_rejected(self, services: Services):
        with pytest.raises(DuplicateClubError):
            services.clubs.create_club("gdg", "Again")
        assert len(services.clubs.list_clubs()) == 5

    @pytest.mark.parametrize("name,description", [("", "x"), ("Chess", " ")])
    def test_blank_fields_are_rejected(self, services: Services, name, description):
        with pytest.raises(ValidationFailedError):
            services.clubs.create_club(name, description)


class TestUpdateClub:
    """Tests for rename propagation."""

    def test_rename_updates_events_of_that_club(self, services: Services, robotics: Club):
        first = publish(services, robotics.id, "robo_1", "Build night")
        second = publish(services, robotics.id, "robo_2", "Race day")
        other = publish(services, "gdg", "gdg_1", "Study jam")

        services.clubs.update_club(robotics.id, "Robotics Society", "Builds robots")

        events = {e.id: e for e in services.events.list_events()}
        assert events[first.id].club_name == "Robotics Society"
        assert events[second.id].club_name == "Robotics Society"
        assert events[other.id] == other

    def test_id_never_changes(self, services: Services, robotics: Club):
        updated = services.clubs.update_club(robotics.id, "Mechatronics", "Moving parts")

        assert updated.id == "robotics"
        assert services.clubs.get_club("robotics").name == "Mechatronics"

    def test_description_change_leaves_events_alone(self, services: Services, robotics: Club):
        event = publish(services, robotics.id, "robo_1", "Build night")

        services.clubs.update_club(robotics.id, robotics.name, "New description")

        assert services.events.list_events() == [event]

    def test_unknown_club_is_rejected(self, services: Services):
        with pytest.raises(UnknownClubError):
            services.clubs.update_club("nope", "Name", "Description")

    def test_blank_name_writes_nothing(self, services: Services, robotics: Club):
        with pytest.raises(ValidationFailedError):
            services.clubs.update_club(robotics.id, "", "Description")
        assert services.clubs.get_club(robotics.id) == robotics


class TestDeleteClub:
    """Tests for cascade delete."""

    def test_delete_removes_members_and_events(self, services: Services, robotics: Club):
        publish(services, robotics.id, "robo_1", "Build night")
        gdg_event = publish(services, "gdg", "gdg_1", "Study jam")
        guest = services.identity.authenticate("sam", "pw", Role.GUEST)
        users_before = services.store.load(Collection.USERS)
        clubs_before = services.clubs.list_clubs()

        services.clubs.delete_club(robotics.id)

        users_after = services.store.load(Collection.USERS)
        assert [c for c in clubs_before if c.id != robotics.id] == services.clubs.list_clubs()
        assert [
            u for u in users_before if not (isinstance(u, MemberUser) and u.club_id == robotics.id)
        ] == users_after
        assert guest in users_after
        assert services.events.list_events() == [gdg_event]

    def test_delete_unknown_club_changes_nothing(self, services: Services):
        clubs = services.clubs.list_clubs()

        services.clubs.delete_club("nope")

        assert services.clubs.list_clubs() == clubs

    def test_deleted_club_is_unknown(self, services: Services, robotics: Club):
        services.clubs.delete_club(robotics.id)
        with pytest.raises(UnknownClubError):
            services.clubs.get_club(robotics.id)


class TestMemberCounts:
    def test_counts_members_per_club(self, services: Services, robotics: Club):
        services.members.add_member("robo_1", "pw", robotics.id)
        services.members.add_member("robo_2", "pw", robotics.id)
        services.members.add_member("gdg_1", "pw", "gdg")

        counts = services.clubs.member_counts()

        assert counts["robotics"] == 2
        assert counts["gdg"] == 1
        assert counts["stic"] == 0
