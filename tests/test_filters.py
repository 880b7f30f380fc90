"""Tests for list filters."""

from challenges.store import ChallengeFilters


class TestFromMapping:
    """Tests for building filters from plain mappings."""

    def test_known_keys(self):
        """Test that recognized keys are copied."""
        filters = ChallengeFilters.from_mapping(
            {"status": "done", "community_member_id": 3, "is_weekly": True}
        )
        assert filters == ChallengeFilters(status="done", community_member_id=3, is_weekly=True)

    def test_unknown_keys_ignored(self):
        """Test that keys which are not filters are dropped."""
        assert ChallengeFilters.from_mapping({"title": "x", "limit": 10}) == ChallengeFilters()


class TestAsLookup:
    """Tests for translating filters into ORM lookups."""

    def test_empty(self):
        """Test that unset filters produce no lookup."""
        assert ChallengeFilters().as_lookup() == {}

    def test_false_is_weekly_kept(self):
        """Test that an explicit False survives."""
        assert ChallengeFilters(is_weekly=False).as_lookup() == {"is_weekly": False}

    def test_empty_status_skipped(self):
        """Test that an empty status is not a filter."""
        assert ChallengeFilters(status="").as_lookup() == {}

    def test_zero_member_id_kept(self):
        """Test that only None leaves the member unfiltered."""
        assert ChallengeFilters(community_member_id=0).as_lookup() == {"community_member_id": 0}
