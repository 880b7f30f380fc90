"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from django.conf import settings


def pytest_configure():
    settings.configure(
        SECRET_KEY="challenges-tests",
        INSTALLED_APPS=[
            "django.contrib.admin",
            "django.contrib.auth",
            "django.contrib.contenttypes",
            "django.contrib.sessions",
            "django.contrib.messages",
            "challenges",
        ],
        DATABASES={
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": ":memory:",
            }
        },
        MIDDLEWARE=[
            "django.contrib.sessions.middleware.SessionMiddleware",
            "django.contrib.auth.middleware.AuthenticationMiddleware",
            "django.contrib.messages.middleware.MessageMiddleware",
        ],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": True,
                "OPTIONS": {
                    "context_processors": [
                        "django.template.context_processors.request",
                        "django.contrib.auth.context_processors.auth",
                        "django.contrib.messages.context_processors.messages",
                    ],
                },
            }
        ],
        DEFAULT_AUTO_FIELD="django.db.models.BigAutoField",
        USE_TZ=True,
        TIME_ZONE="UTC",
    )


@pytest.fixture
def store():
    """A store bound to the default Challenge model."""
    from challenges.store import ChallengeStore

    return ChallengeStore()


@pytest_asyncio.fixture
async def member(transactional_db):
    """A saved community member."""
    from challenges.models import CommunityMember

    return await CommunityMember.objects.acreate(display_name="alice")


@pytest_asyncio.fixture
async def other_member(transactional_db):
    """A second saved community member."""
    from challenges.models import CommunityMember

    return await CommunityMember.objects.acreate(display_name="bob")


@pytest.fixture
def make_challenge(store, member):
    """Create challenges through the store with sensible defaults."""

    async def _make(**overrides):
        data = {
            "title": "Morning run",
            "description": "Run 5km before breakfast.",
            "reward_type": "points",
            "reward_value": "50",
            "community_member_id": member.pk,
        }
        data.update(overrides)
        return await store.create(data)

    return _make
