"""Custom exception hierarchy for creatorscore."""


class CreatorScoreError(Exception):
    """Base exception for all creatorscore errors."""


class SnapshotError(CreatorScoreError):
    """Snapshot file or record bundle could not be read or validated."""


class ConfigError(CreatorScoreError, ValueError):
    """Invalid configuration."""
