"""Shared fixtures for creatorscore tests."""

from pathlib import Path

import pytest

from creatorscore.models.platform import Platform
from creatorscore.models.snapshot import Connection, CreatorSnapshot


FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_snapshot(
    display_name: str | None = None,
    avatar_url: str | None = None,
    bio: str | None = None,
    username: str | None = None,
    email_verified: bool = False,
    followers: dict[Platform, int | None] | None = None,
) -> CreatorSnapshot:
    """Build a snapshot with one connection per entry in followers."""
    connections = tuple(
        Connection(platform=platform, follower_count=count)
        for platform, count in (followers or {}).items()
    )
    return CreatorSnapshot(
        display_name=display_name,
        avatar_url=avatar_url,
        bio=bio,
        username=username,
        email_verified=email_verified,
        connections=connections,
    )


@pytest.fixture
def empty_snapshot() -> CreatorSnapshot:
    return CreatorSnapshot()


@pytest.fixture
def full_profile_snapshot() -> CreatorSnapshot:
    """Complete profile, verified email, four platforms, no follower data."""
    return make_snapshot(
        display_name="Test User",
        avatar_url="https://example.com/img.png",
        bio="Hello world!",
        username="testuser",
        email_verified=True,
        followers={
            Platform.YOUTUBE: None,
            Platform.GITHUB: None,
            Platform.TWITTER: None,
            Platform.LINKEDIN: None,
        },
    )
