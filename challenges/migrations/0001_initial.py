from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        # ------------------------------------------------------------------
        # CommunityMember
        # ------------------------------------------------------------------
        migrations.CreateModel(
            name="CommunityMember",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "display_name",
                    models.CharField(
                        max_length=64, help_text="Name shown next to the member's challenges."
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ("display_name",),
                "verbose_name": "Community Member",
                "verbose_name_plural": "Community Members",
            },
        ),
        # ------------------------------------------------------------------
        # Challenge
        # ------------------------------------------------------------------
        migrations.CreateModel(
            name="Challenge",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "title",
                    models.CharField(max_length=255, help_text="Short name of the challenge."),
                ),
                (
                    "description",
                    models.TextField(
                        blank=True, help_text="What has to be done to complete it."
                    ),
                ),
                (
                    "reward_type",
                    models.CharField(
                        blank=True,
                        max_length=32,
                        help_text="Kind of incentive (e.g. 'points', 'badge').",
                    ),
                ),
                (
                    "reward_value",
                    models.CharField(
                        blank=True,
                        max_length=255,
                        help_text="Amount or key of the incentive, interpreted by the reward_type.",
                    ),
                ),
                ("due_date", models.DateTimeField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("in_progress", "In progress"),
                            ("done", "Done"),
                            ("cancelled", "Cancelled"),
                        ],
                        default="pending",
                        max_length=16,
                    ),
                ),
                (
                    "is_weekly",
                    models.BooleanField(
                        default=False,
                        help_text="Marks challenges that are part of the weekly rotation.",
                    ),
                ),
                (
                    "recurrence_rule",
                    models.CharField(
                        blank=True,
                        null=True,
                        max_length=255,
                        help_text=(
                            "How the challenge repeats, e.g. an RRULE string. "
                            "Leave blank for one-off challenges."
                        ),
                    ),
                ),
                (
                    "community_member",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="challenges",
                        to="challenges.communitymember",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("-created_at",),
                "verbose_name": "Challenge",
                "verbose_name_plural": "Challenges",
                "indexes": [
                    models.Index(fields=["status", "created_at"], name="ch_status_created_idx"),
                ],
            },
        ),
    ]
