"""Score aggregator - combines the four evaluators into a breakdown."""

from creatorscore.core import evaluators as ev
from creatorscore.core.evaluators import (
    AudienceReachEvaluator,
    ConnectionCoverageEvaluator,
    EmailVerificationEvaluator,
    ProfileCompletenessEvaluator,
    clamp,
    round_half_up,
)
from creatorscore.logging import get_logger
from creatorscore.models.breakdown import ScoreBreakdown
from creatorscore.models.platform import SUPPORTED_PLATFORMS
from creatorscore.models.snapshot import CreatorSnapshot

SCORE_MIN = 0
SCORE_MAX = 100


class ScoreAggregator:
    """
    Compute a creator score from a snapshot.

    Example:
        aggregator = ScoreAggregator()
        breakdown = aggregator.compute(snapshot)
        print(breakdown.total)
    """

    def __init__(self):
        self.profile = ProfileCompletenessEvaluator()
        self.email = EmailVerificationEvaluator()
        self.connections = ConnectionCoverageEvaluator()
        self.audience = AudienceReachEvaluator()
        self._log = get_logger("aggregator")

    def compute(self, snapshot: CreatorSnapshot) -> ScoreBreakdown:
        """
        Run every evaluator and sum the results.

        Args:
            snapshot: Profile and connection state for one creator

        Returns:
            ScoreBreakdown with each sub-score and the total clamped to 0-100
        """
        profile_points = self.profile.evaluate(snapshot)
        email_points = self.email.evaluate(snapshot)
        connection_points = self.connections.evaluate(snapshot)
        audience_points = self.audience.evaluate(snapshot)

        raw = profile_points + email_points + connection_points + audience_points
        total = clamp(round_half_up(raw), SCORE_MIN, SCORE_MAX)

        self._log.debug(
            "score_computed",
            username=snapshot.username,
            profile_points=profile_points,
            email_points=email_points,
            connection_points=connection_points,
            audience_points=audience_points,
            total=total,
        )

        return ScoreBreakdown(
            profile_points=profile_points,
            email_points=email_points,
            connection_points=connection_points,
            audience_points=audience_points,
            total=total,
        )


_default_aggregator: ScoreAggregator | None = None


def compute_score(snapshot: CreatorSnapshot) -> ScoreBreakdown:
    """Compute a breakdown using the shared default aggregator."""
    global _default_aggregator
    if _default_aggregator is None:
        _default_aggregator = ScoreAggregator()
    return _default_aggregator.compute(snapshot)


def scoring_rules() -> dict:
    """Describe point weights and supported platforms for display."""
    return {
        "max_total": SCORE_MAX,
        "profile": {
            "max_points": ev.PROFILE_MAX_POINTS,
            "points_per_field": ev.PROFILE_FIELD_POINTS,
            "fields": ["display_name", "avatar_url", "bio", "username"],
            "bio_min_length": ev.BIO_MIN_LENGTH,
        },
        "email": {"max_points": ev.EMAIL_POINTS},
        "connections": {
            "max_points": ev.CONNECTION_MAX_POINTS,
            "points_per_connection": ev.POINTS_PER_CONNECTION,
        },
        "audience": {
            "max_points": ev.AUDIENCE_MAX_POINTS,
            "points_per_decade": ev.AUDIENCE_POINTS_PER_DECADE,
        },
        "supported_platforms": [p.value for p in SUPPORTED_PLATFORMS],
    }
