from django.contrib import admin

from .models import Challenge, CommunityMember


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

class ChallengeInline(admin.TabularInline):
    model = Challenge
    extra = 0
    fields = ("title", "status", "is_weekly", "due_date", "created_at")
    readonly_fields = ("created_at",)
    ordering = ("-created_at",)
    show_change_link = True


@admin.register(CommunityMember)
class CommunityMemberAdmin(admin.ModelAdmin):
    list_display = ("display_name", "challenge_count", "created_at")
    search_fields = ("display_name",)
    readonly_fields = ("created_at",)
    inlines = (ChallengeInline,)

    @admin.display(description="Challenges")
    def challenge_count(self, obj: CommunityMember) -> int:
        return obj.challenges.count()


# ---------------------------------------------------------------------------
# Challenges
# ---------------------------------------------------------------------------

@admin.register(Challenge)
class ChallengeAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "community_member",
        "status",
        "is_weekly",
        "reward_type",
        "reward_value",
        "due_date",
        "created_at",
    )
    list_filter = ("status", "is_weekly", "reward_type")
    search_fields = ("title", "description")
    readonly_fields = ("created_at", "updated_at")
    list_select_related = ("community_member",)
    fieldsets = (
        (
            "Identity",
            {
                "fields": ("title", "description", "community_member"),
            },
        ),
        (
            "Reward",
            {
                "fields": ("reward_type", "reward_value"),
            },
        ),
        (
            "Schedule",
            {
                "fields": ("due_date", "is_weekly", "recurrence_rule"),
            },
        ),
        (
            "Status",
            {
                "fields": ("status", "created_at", "updated_at"),
            },
        ),
    )
