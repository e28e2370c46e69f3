"""Pydantic models for creatorscore."""

from creatorscore.models.platform import Platform, SUPPORTED_PLATFORMS
from creatorscore.models.snapshot import Connection, CreatorSnapshot
from creatorscore.models.breakdown import ScoreBreakdown, ScoredCreator, ScoreStats

__all__ = [
    "Platform",
    "SUPPORTED_PLATFORMS",
    "Connection",
    "CreatorSnapshot",
    "ScoreBreakdown",
    "ScoredCreator",
    "ScoreStats",
]
