"""creatorscore - creator reputation score engine."""

from creatorscore.models.platform import Platform, SUPPORTED_PLATFORMS
from creatorscore.models.snapshot import Connection, CreatorSnapshot
from creatorscore.models.breakdown import ScoreBreakdown, ScoredCreator, ScoreStats
from creatorscore.config import ScoreConfig
from creatorscore.core.aggregator import ScoreAggregator, compute_score, scoring_rules
from creatorscore.core.transformer import build_snapshot
from creatorscore.core.exporter import to_json, to_dict, save_json, load_snapshot, score_stats

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "compute_score",
    "ScoreAggregator",
    "ScoreConfig",
    "build_snapshot",
    "scoring_rules",
    # Models
    "Platform",
    "SUPPORTED_PLATFORMS",
    "Connection",
    "CreatorSnapshot",
    "ScoreBreakdown",
    "ScoredCreator",
    "ScoreStats",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_snapshot",
    "score_stats",
    "__version__",
]
