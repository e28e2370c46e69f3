"""Export and file utilities for snapshots and score breakdowns."""

import json
import statistics
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from creatorscore.core.aggregator import compute_score
from creatorscore.core.transformer import build_snapshot
from creatorscore.exceptions import SnapshotError
from creatorscore.logging import bind_creator
from creatorscore.models.breakdown import ScoreBreakdown, ScoredCreator, ScoreStats
from creatorscore.models.snapshot import CreatorSnapshot

if TYPE_CHECKING:
    import pandas as pd

try:
    import pandas as pd
    PANDAS_AVAILABLE = True
except ImportError:
    PANDAS_AVAILABLE = False


def to_json(obj: BaseModel, indent: int = 2) -> str:
    """
    Convert a breakdown, scored creator or snapshot to a JSON string.

    Args:
        obj: Model to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return obj.model_dump_json(indent=indent)


def to_dict(obj: BaseModel) -> dict:
    """Convert a model to a JSON-compatible dictionary."""
    return obj.model_dump(mode="json")


def save_json(obj: BaseModel, filepath: str | Path, indent: int = 2) -> Path:
    """
    Save a model to a JSON file, creating parent directories.

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(obj.model_dump_json(indent=indent), encoding="utf-8")
    return path


def parse_snapshot(data: dict) -> CreatorSnapshot:
    """
    Build a snapshot from either model-shaped data or a record bundle.

    A record bundle is {"profile": {...}, "connections": [...]} as emitted
    by the profile and connections stores.

    Raises:
        SnapshotError: If the data cannot be validated
    """
    if not isinstance(data, dict):
        raise SnapshotError(f"Expected a JSON object, got {type(data).__name__}")

    try:
        if "profile" in data:
            profile = data["profile"]
            if not isinstance(profile, dict):
                raise SnapshotError("'profile' must be an object")
            connections = data.get("connections") or []
            if not isinstance(connections, list) or not all(isinstance(c, dict) for c in connections):
                raise SnapshotError("'connections' must be a list of objects")
            return build_snapshot(profile, connections)
        return CreatorSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot: {e}") from e


def load_snapshot(filepath: str | Path) -> CreatorSnapshot:
    """
    Load a snapshot from a JSON file.

    Raises:
        SnapshotError: If the file is missing, not JSON or not a valid snapshot
    """
    path = Path(filepath)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SnapshotError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in {path}: {e}") from e
    return parse_snapshot(data)


def score_file(filepath: str | Path) -> ScoredCreator:
    """
    Load and score a snapshot file.

    The file stem is used as the creator id.
    """
    path = Path(filepath)
    bind_creator(path.stem)
    try:
        breakdown = compute_score(load_snapshot(path))
    finally:
        bind_creator(None)

    return ScoredCreator(
        creator_id=path.stem,
        breakdown=breakdown,
        computed_at=datetime.now(),
    )


def load_scored(filepath: str | Path) -> ScoredCreator:
    """Load a ScoredCreator previously written by save_json."""
    path = Path(filepath)
    try:
        return ScoredCreator.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise SnapshotError(f"Cannot load scored result {path}: {e}") from e


def score_stats(breakdowns: Sequence[ScoreBreakdown]) -> ScoreStats:
    """
    Aggregate statistics over many breakdowns.

    An empty input yields zeroed statistics.
    """
    if not breakdowns:
        return ScoreStats(
            count=0,
            mean_total=0.0,
            median_total=0.0,
            min_total=0,
            max_total=0,
            mean_profile_points=0.0,
            mean_email_points=0.0,
            mean_connection_points=0.0,
            mean_audience_points=0.0,
        )

    totals = [b.total for b in breakdowns]
    return ScoreStats(
        count=len(breakdowns),
        mean_total=round(statistics.fmean(totals), 2),
        median_total=float(statistics.median(totals)),
        min_total=min(totals),
        max_total=max(totals),
        mean_profile_points=round(statistics.fmean(b.profile_points for b in breakdowns), 2),
        mean_email_points=round(statistics.fmean(b.email_points for b in breakdowns), 2),
        mean_connection_points=round(statistics.fmean(b.connection_points for b in breakdowns), 2),
        mean_audience_points=round(statistics.fmean(b.audience_points for b in breakdowns), 2),
    )


def _check_pandas():
    """Raise ImportError if pandas is not available."""
    if not PANDAS_AVAILABLE:
        raise ImportError(
            "pandas is required for DataFrame export. Install with: pip install creatorscore[dataframe]"
        )


def breakdowns_to_df(scored: Sequence[ScoredCreator]) -> "pd.DataFrame":
    """
    Convert scored creators to a DataFrame with one row per creator.

    Columns: creator_id, computed_at, and each breakdown field.

    Raises:
        ImportError: If pandas is not installed
    """
    _check_pandas()

    rows = []
    for item in scored:
        row = {
            "creator_id": item.creator_id,
            "computed_at": item.computed_at.isoformat(),
        }
        row.update(item.breakdown.model_dump())
        rows.append(row)

    return pd.DataFrame(rows)


def save_csv(scored: Sequence[ScoredCreator], filepath: str | Path) -> Path:
    """
    Save scored creators to a CSV file.

    Raises:
        ImportError: If pandas is not installed
    """
    _check_pandas()

    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    breakdowns_to_df(scored).to_csv(path, index=False)
    return path
