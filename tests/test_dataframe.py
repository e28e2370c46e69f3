"""Unit tests for DataFrame export utilities - uses JSON fixtures."""

import pytest

from creatorscore.core.exporter import breakdowns_to_df, save_csv, score_file

from tests.conftest import FIXTURES_DIR

# Skip all tests if pandas not installed
pd = pytest.importorskip("pandas")


@pytest.fixture
def scored():
    return [
        score_file(FIXTURES_DIR / "complete_creator.json"),
        score_file(FIXTURES_DIR / "store_records.json"),
        score_file(FIXTURES_DIR / "empty_creator.json"),
    ]


class TestBreakdownsToDf:
    """Test scored creator DataFrame conversion."""

    def test_returns_dataframe(self, scored):
        assert isinstance(breakdowns_to_df(scored), pd.DataFrame)

    def test_one_row_per_creator(self, scored):
        assert len(breakdowns_to_df(scored)) == 3

    def test_has_breakdown_columns(self, scored):
        df = breakdowns_to_df(scored)
        for column in ("creator_id", "profile_points", "email_points",
                       "connection_points", "audience_points", "total"):
            assert column in df.columns

    def test_preserves_totals(self, scored):
        df = breakdowns_to_df(scored)
        totals = dict(zip(df["creator_id"], df["total"]))
        assert totals == {"complete_creator": 90, "store_records": 75, "empty_creator": 0}

    def test_empty_input(self):
        assert breakdowns_to_df([]).empty


class TestSaveCsv:
    """Test CSV export."""

    def test_writes_file(self, scored, tmp_path):
        path = save_csv(scored, tmp_path / "out" / "scores.csv")
        assert path.exists()
        loaded = pd.read_csv(path)
        assert len(loaded) == 3
        assert loaded["total"].max() == 90
