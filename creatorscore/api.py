"""FastAPI web server for the creator score engine."""

from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from creatorscore import __version__
from creatorscore.config import load_config
from creatorscore.core.aggregator import compute_score, scoring_rules
from creatorscore.core.exporter import score_stats
from creatorscore.core.transformer import build_snapshot
from creatorscore.logging import bind_creator, configure_logging, get_logger
from creatorscore.models.breakdown import ScoreBreakdown, ScoredCreator, ScoreStats
from creatorscore.models.snapshot import CreatorSnapshot

_log = get_logger("api")


# Request/Response models
class RecordBundle(BaseModel):
    """Raw profile and connection records as the external stores emit them."""

    profile: dict = Field(..., description="Profile record (name, image, bio, username, emailVerified)")
    connections: list[dict] = Field(
        default_factory=list,
        description="Connection records with 'platform' and optional 'followerCount'",
    )


class BatchItem(BaseModel):
    """One creator in a batch request."""

    creator_id: str | None = Field(default=None, description="Caller-side identifier echoed back")
    snapshot: CreatorSnapshot


class BatchScoreRequest(BaseModel):
    """Request body for batch scoring."""

    items: list[BatchItem] = Field(..., min_length=1)


class BatchScoreResponse(BaseModel):
    """Batch scoring result with aggregate statistics."""

    total: int
    results: list[ScoredCreator]
    stats: ScoreStats


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup."""
    configure_logging(load_config())
    _log.info("api_started", version=__version__)
    yield


app = FastAPI(
    title="creatorscore API",
    description="Creator reputation score engine",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now().isoformat(),
    )


@app.post("/api/score", response_model=ScoreBreakdown, tags=["Scoring"])
async def score_snapshot(snapshot: CreatorSnapshot):
    """
    Compute the score breakdown for a single snapshot.

    Used by the dashboard preview to explain a creator's score.
    """
    return compute_score(snapshot)


@app.post("/api/score/records", response_model=ScoreBreakdown, tags=["Scoring"])
async def score_records(bundle: RecordBundle):
    """Compute the score from raw profile and connection store records."""
    snapshot = build_snapshot(bundle.profile, bundle.connections)
    return compute_score(snapshot)


@app.post("/api/score/batch", response_model=BatchScoreResponse, tags=["Scoring"])
async def score_batch(request: BatchScoreRequest):
    """
    Score many creators at once and summarize the results.

    Limited to the configured maximum batch size.
    """
    config = load_config()
    if len(request.items) > config.api_max_batch_size:
        raise HTTPException(
            status_code=422,
            detail=f"Batch too large: {len(request.items)} items, limit is {config.api_max_batch_size}",
        )

    now = datetime.now()
    results = []
    for item in request.items:
        bind_creator(item.creator_id)
        results.append(ScoredCreator(
            creator_id=item.creator_id,
            breakdown=compute_score(item.snapshot),
            computed_at=now,
        ))
    bind_creator(None)

    stats = score_stats([r.breakdown for r in results])
    _log.info("batch_scored", count=len(results), mean_total=stats.mean_total)

    return BatchScoreResponse(total=len(results), results=results, stats=stats)


@app.get("/api/rules", tags=["System"])
async def get_rules():
    """
    Get the point weights used by the engine.

    Clients render the score breakdown panel from these values.
    """
    return scoring_rules()


if __name__ == "__main__":
    import uvicorn

    config = load_config()
    uvicorn.run(app, host=config.api_host, port=config.api_port)
