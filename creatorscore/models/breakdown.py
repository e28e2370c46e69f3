"""Score breakdown models - the engine's output."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ScoreBreakdown(BaseModel):
    """Itemized sub-scores and the clamped total."""

    model_config = ConfigDict(frozen=True)

    profile_points: int = Field(ge=0, le=20)
    email_points: int = Field(ge=0, le=10)
    connection_points: int = Field(ge=0, le=50)
    audience_points: int = Field(ge=0, le=20)
    total: int = Field(ge=0, le=100)


class ScoredCreator(BaseModel):
    """A breakdown tagged with the creator it belongs to."""

    creator_id: str | None = None
    breakdown: ScoreBreakdown
    computed_at: datetime


class ScoreStats(BaseModel):
    """Aggregate statistics over many breakdowns."""

    count: int
    mean_total: float
    median_total: float
    min_total: int
    max_total: int
    mean_profile_points: float
    mean_email_points: float
    mean_connection_points: float
    mean_audience_points: float
