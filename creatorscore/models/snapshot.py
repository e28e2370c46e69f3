"""Creator snapshot model - the engine's input."""

from pydantic import BaseModel, ConfigDict

from creatorscore.models.platform import Platform


class Connection(BaseModel):
    """A linked external platform account."""

    model_config = ConfigDict(frozen=True)

    platform: Platform
    follower_count: int | None = None


class CreatorSnapshot(BaseModel):
    """Immutable bundle of profile and connection data for one computation."""

    model_config = ConfigDict(frozen=True)

    display_name: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    username: str | None = None
    email_verified: bool = False
    connections: tuple[Connection, ...] = ()

    def distinct_connections(self) -> list[Connection]:
        """
        Collapse connections to one per platform.

        Duplicates keep the largest known follower count, so the result
        does not depend on input order. Output is sorted by platform.
        """
        by_platform: dict[Platform, Connection] = {}
        for conn in self.connections:
            current = by_platform.get(conn.platform)
            if current is None or (conn.follower_count or 0) > (current.follower_count or 0):
                by_platform[conn.platform] = conn
        return [by_platform[p] for p in sorted(by_platform, key=lambda p: p.value)]
