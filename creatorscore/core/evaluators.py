"""Sub-score evaluators for the creator score.

Each evaluator is a stateless object with an ``evaluate(snapshot) -> int``
method returning points within its own budget. Evaluators never raise for
missing or out-of-range values; they degrade to zero instead.
"""

import math

from creatorscore.models.snapshot import CreatorSnapshot

PROFILE_MAX_POINTS = 20
PROFILE_FIELD_POINTS = 5
BIO_MIN_LENGTH = 10

EMAIL_POINTS = 10

CONNECTION_MAX_POINTS = 50
POINTS_PER_CONNECTION = 10

AUDIENCE_MAX_POINTS = 20
AUDIENCE_POINTS_PER_DECADE = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for value >= 0."""
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int, high: int) -> int:
    """Limit value to the closed range [low, high]."""
    return max(low, min(value, high))


def _filled(value: str | None) -> bool:
    return bool(value and value.strip())


class ProfileCompletenessEvaluator:
    """
    Score basic profile fields, 0-20.

    Four independent conditions worth 5 points each:
    display name, avatar, bio of at least 10 characters, username.
    """

    max_points = PROFILE_MAX_POINTS

    def evaluate(self, snapshot: CreatorSnapshot) -> int:
        bio = (snapshot.bio or "").strip()
        conditions = [
            _filled(snapshot.display_name),
            _filled(snapshot.avatar_url),
            len(bio) >= BIO_MIN_LENGTH,
            _filled(snapshot.username),
        ]
        points = sum(PROFILE_FIELD_POINTS for ok in conditions if ok)
        return clamp(points, 0, self.max_points)


class EmailVerificationEvaluator:
    """Binary: 10 points for a verified email, else 0."""

    max_points = EMAIL_POINTS

    def evaluate(self, snapshot: CreatorSnapshot) -> int:
        return EMAIL_POINTS if snapshot.email_verified else 0


class ConnectionCoverageEvaluator:
    """
    Score breadth of connected platforms, 0-50.

    Flat rate of 10 points per distinct platform, capped at 50, so five
    connections already reach the ceiling.
    """

    max_points = CONNECTION_MAX_POINTS

    def evaluate(self, snapshot: CreatorSnapshot) -> int:
        count = len(snapshot.distinct_connections())
        return clamp(count * POINTS_PER_CONNECTION, 0, self.max_points)


class AudienceReachEvaluator:
    """
    Score combined follower reach on a log10 scale, 0-20.

    Each factor of ten in total followers is worth 5 points:
        1 -> 0, 100 -> 10, 1,000 -> 15, 10,000+ -> 20
    Unknown or negative follower counts contribute nothing.
    """

    max_points = AUDIENCE_MAX_POINTS

    @staticmethod
    def total_followers(snapshot: CreatorSnapshot) -> int:
        return sum(
            max(conn.follower_count or 0, 0)
            for conn in snapshot.distinct_connections()
        )

    def evaluate(self, snapshot: CreatorSnapshot) -> int:
        total = self.total_followers(snapshot)
        # log10 undefined at zero
        if total <= 0:
            return 0
        points = round_half_up(math.log10(total) * AUDIENCE_POINTS_PER_DECADE)
        return clamp(points, 0, self.max_points)
