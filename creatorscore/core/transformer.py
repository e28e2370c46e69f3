"""Snapshot assembly from raw profile and connection store records."""

import math
from collections.abc import Iterable

from creatorscore.logging import get_logger
from creatorscore.models.platform import Platform, PLATFORM_ALIASES
from creatorscore.models.snapshot import Connection, CreatorSnapshot

_log = get_logger("transformer")


def _finite_int(number: float) -> int | None:
    # inf and nan have no integer value
    if not math.isfinite(number):
        return None
    return int(number)


def normalize_follower_count(value) -> int | None:
    """
    Convert follower counts from store records to integers.

    Examples:
        1200 -> 1200
        "1.2K" -> 1200
        "1M" -> 1000000
        "1,234" -> 1234
        None -> None
        "n/a" -> None
        "inf" -> None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return _finite_int(value)

    count_str = str(value).strip().upper().replace(",", "")

    if not count_str:
        return None

    multipliers = {
        "K": 1_000,
        "M": 1_000_000,
        "B": 1_000_000_000,
    }

    for suffix, multiplier in multipliers.items():
        if count_str.endswith(suffix):
            try:
                return _finite_int(float(count_str[:-1]) * multiplier)
            except ValueError:
                return None

    try:
        return _finite_int(float(count_str))
    except ValueError:
        return None


def parse_platform(value) -> Platform | None:
    """
    Map a platform key from the connections store to a Platform.

    Returns None for unsupported platforms.
    """
    if isinstance(value, Platform):
        return value
    if not isinstance(value, str):
        return None

    key = value.strip().lower()
    if key in PLATFORM_ALIASES:
        return PLATFORM_ALIASES[key]
    try:
        return Platform(key)
    except ValueError:
        return None


def _is_verified(value) -> bool:
    # The profile store emits a verification timestamp or null
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in {"", "false", "0", "null"}
    return bool(value)


def _text(record: dict, *keys: str) -> str | None:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return str(value)
    return None


def transform_connections(records: Iterable[dict]) -> tuple[Connection, ...]:
    """
    Transform raw connection records to Connection models.

    Unknown platforms are skipped. Duplicate platforms collapse to one
    entry keeping the largest follower count.

    Args:
        records: Dicts with "platform" and optional "followerCount"

    Returns:
        Tuple of Connection models, one per platform, sorted by platform
    """
    by_platform: dict[Platform, Connection] = {}

    for record in records:
        raw_platform = record.get("platform")
        platform = parse_platform(raw_platform)
        if platform is None:
            _log.warning("connection_skipped", platform=raw_platform, reason="unsupported_platform")
            continue

        raw_count = record.get("followerCount", record.get("follower_count"))
        conn = Connection(
            platform=platform,
            follower_count=normalize_follower_count(raw_count),
        )

        current = by_platform.get(platform)
        if current is not None:
            _log.debug("connection_duplicate", platform=platform.value)
            if (conn.follower_count or 0) <= (current.follower_count or 0):
                continue
        by_platform[platform] = conn

    return tuple(by_platform[p] for p in sorted(by_platform, key=lambda p: p.value))


def build_snapshot(profile: dict, connections: Iterable[dict] = ()) -> CreatorSnapshot:
    """
    Assemble a CreatorSnapshot from store records.

    Args:
        profile: Profile record ("name"/"displayName", "image"/"avatarUrl",
            "bio", "username", "emailVerified")
        connections: Connection records from the connections store

    Returns:
        Immutable CreatorSnapshot
    """
    return CreatorSnapshot(
        display_name=_text(profile, "displayName", "display_name", "name"),
        avatar_url=_text(profile, "avatarUrl", "avatar_url", "image"),
        bio=_text(profile, "bio"),
        username=_text(profile, "username"),
        email_verified=_is_verified(
            profile.get("emailVerified", profile.get("email_verified"))
        ),
        connections=transform_connections(connections),
    )
