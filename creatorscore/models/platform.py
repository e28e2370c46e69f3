"""Supported platform enumeration."""

from enum import Enum


class Platform(str, Enum):
    """Platforms a creator can connect."""
    YOUTUBE = "youtube"
    GITHUB = "github"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    INSTAGRAM = "instagram"
    BEHANCE = "behance"
    DRIBBBLE = "dribbble"


SUPPORTED_PLATFORMS: tuple[Platform, ...] = tuple(Platform)

PLATFORM_ALIASES = {
    "x": Platform.TWITTER,
}
