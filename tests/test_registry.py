"""
Club registry and membership workflow tests
"""

from clubs import membership
from clubs.models import Club, Member
from clubs.registry import ClubRegistry


class TestClubRegistry:
    """Add / remove / get / list"""

    def test_get_after_add(self):
        registry = ClubRegistry()
        club = Club(name="Chess", president="Kim", description="desc1")
        registry.add(club)
        assert registry.get("Chess") == club

    def test_get_missing_returns_none(self):
        assert ClubRegistry().get("Nope") is None

    def test_duplicate_add_overwrites(self):
        registry = ClubRegistry()
        registry.add(Club(name="Chess", president="Kim", description="old"))
        registry.add(Club(name="Chess", president="Park", description="new"))
        assert len(registry) == 1
        assert registry.get("Chess").president == "Park"
        assert registry.get("Chess").description == "new"

    def test_remove_existing(self):
        registry = ClubRegistry([Club(name="Chess")])
        assert registry.remove("Chess") is True
        assert registry.get("Chess") is None
        assert "Chess" not in registry

    def test_remove_missing_has_no_effect(self):
        registry = ClubRegistry([Club(name="Chess")])
        assert registry.remove("Art") is False
        assert len(registry) == 1
        assert registry.get("Chess") is not None

    def test_list_all_is_snapshot(self):
        registry = ClubRegistry([Club(name="Chess"), Club(name="Art")])
        clubs = registry.list_all()
        clubs.clear()
        assert len(registry) == 2

    def test_list_all_keeps_insertion_order(self):
        registry = ClubRegistry([Club(name="Chess"), Club(name="Art"), Club(name="Robotics")])
        registry.add(Club(name="Chess", president="Park"))
        assert [club.name for club in registry.list_all()] == ["Chess", "Art", "Robotics"]

    def test_name_lookup_is_exact(self):
        registry = ClubRegistry([Club(name="Chess")])
        assert registry.get("chess") is None
        assert registry.get("Chess ") is None


class TestMembership:
    """Submit and approve applications"""

    def _club(self):
        club = Club(name="Chess", president="Kim", description="desc1")
        membership.submit(club, "alice", "x")
        membership.submit(club, "bob", "y")
        return club

    def test_submit_appends_in_order(self):
        club = self._club()
        assert club.pending_applications == [Member("alice", "x"), Member("bob", "y")]

    def test_approve_removes_match(self):
        club = self._club()
        approved = membership.approve(club, "bob")
        assert approved == Member("bob", "y")
        assert club.pending_applications == [Member("alice", "x")]

    def test_approve_no_match(self):
        club = self._club()
        assert membership.approve(club, "carol") is None
        assert club.pending_applications == [Member("alice", "x"), Member("bob", "y")]

    def test_approve_removes_first_duplicate_only(self):
        club = Club(name="Chess")
        membership.submit(club, "alice", "first")
        membership.submit(club, "alice", "second")
        approved = membership.approve(club, "alice")
        assert approved.application_text == "first"
        assert club.pending_applications == [Member("alice", "second")]

    def test_submit_does_not_validate(self):
        club = Club(name="Chess")
        membership.submit(club, "", "")
        assert len(club.pending_applications) == 1

    def test_pending_is_snapshot(self):
        club = self._club()
        snapshot = membership.pending(club)
        snapshot.pop()
        assert len(club.pending_applications) == 2
