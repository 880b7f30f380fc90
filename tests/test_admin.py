"""Tests for admin registration."""

from django.contrib import admin

from challenges.admin import ChallengeAdmin, CommunityMemberAdmin
from challenges.models import Challenge, CommunityMember


class TestRegistration:
    """Tests that both models are editable from the admin."""

    def test_challenge_registered(self):
        """Test that Challenge uses ChallengeAdmin."""
        assert isinstance(admin.site._registry[Challenge], ChallengeAdmin)

    def test_member_registered(self):
        """Test that CommunityMember uses CommunityMemberAdmin."""
        assert isinstance(admin.site._registry[CommunityMember], CommunityMemberAdmin)

    def test_audit_fields_read_only(self):
        """Test that timestamps cannot be edited by hand."""
        assert {"created_at", "updated_at"} <= set(ChallengeAdmin.readonly_fields)
