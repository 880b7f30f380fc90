from __future__ import annotations

from typing import Any

from django.db import models


# ---------------------------------------------------------------------------
# Status choices
# ---------------------------------------------------------------------------

class ChallengeStatus(models.TextChoices):
    PENDING     = "pending",     "Pending"
    IN_PROGRESS = "in_progress", "In progress"
    DONE        = "done",        "Done"
    CANCELLED   = "cancelled",   "Cancelled"


# ---------------------------------------------------------------------------
# Community members
# ---------------------------------------------------------------------------

class CommunityMember(models.Model):
    """
    A member of the community who owns challenges.
    """

    display_name = models.CharField(max_length=64, help_text="Name shown next to the member's challenges.")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("display_name",)
        verbose_name = "Community Member"
        verbose_name_plural = "Community Members"

    def __str__(self) -> str:
        return self.display_name

    def as_dict(self) -> dict[str, Any]:
        return {field.attname: getattr(self, field.attname) for field in self._meta.concrete_fields}


# ---------------------------------------------------------------------------
# Challenges
# ---------------------------------------------------------------------------

class Challenge(models.Model):
    """
    A task with a reward, owned by a community member.

    Status values are plain text; no transition rules are enforced here.
    """

    title = models.CharField(max_length=255, help_text="Short name of the challenge.")
    description = models.TextField(blank=True, help_text="What has to be done to complete it.")
    reward_type = models.CharField(
        max_length=32,
        blank=True,
        help_text="Kind of incentive (e.g. 'points', 'badge').",
    )
    reward_value = models.CharField(
        max_length=255,
        blank=True,
        help_text="Amount or key of the incentive, interpreted by the reward_type.",
    )
    due_date = models.DateTimeField(null=True, blank=True)
    status = models.CharField(
        max_length=16,
        choices=ChallengeStatus.choices,
        default=ChallengeStatus.PENDING,
    )
    is_weekly = models.BooleanField(
        default=False,
        help_text="Marks challenges that are part of the weekly rotation.",
    )
    recurrence_rule = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="How the challenge repeats, e.g. an RRULE string. Leave blank for one-off challenges.",
    )
    community_member = models.ForeignKey(
        CommunityMember,
        on_delete=models.CASCADE,
        related_name="challenges",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-created_at",)
        indexes = (
            models.Index(fields=("status", "created_at"), name="ch_status_created_idx"),
        )
        verbose_name = "Challenge"
        verbose_name_plural = "Challenges"

    def __str__(self) -> str:
        return self.title

    def as_dict(self) -> dict[str, Any]:
        """Plain record: every column keyed by attribute name (``community_member_id``)."""
        return {field.attname: getattr(self, field.attname) for field in self._meta.concrete_fields}
