"""Tests for onerm.tables module."""
import pandas as pd
import pytest
from pydantic import ValidationError

from onerm.formulas import (
    Formula,
    estimate_1rm_all,
    estimate_1rm_brzycki,
    estimate_1rm_epley,
    estimate_1rm_wathan,
    predict_reps_all,
)
from onerm.tables import (
    ESTIMATE_COLUMNS,
    PREDICTION_COLUMNS,
    estimate_table,
    rep_max_table,
    rep_prediction_table,
)


class TestEstimateTable:
    """Test cases for estimate_table function."""

    def test_schema(self, sample_set):
        df = estimate_table(**sample_set)
        assert list(df.columns) == ESTIMATE_COLUMNS
        assert len(df) == 6
        assert set(df["formula"]) == {f.value for f in Formula}

    def test_values_rounded_to_default_precision(self, sample_set):
        df = estimate_table(**sample_set).set_index("formula")
        expected = estimate_1rm_all(100.0, 5)
        for formula, value in expected.items():
            assert df.loc[formula.value, "one_rm"] == round(value, 1)
        assert df.loc["Epley", "one_rm"] == 116.7
        assert df.loc["Brzycki", "one_rm"] == 112.5

    def test_default_row_follows_selection_policy(self):
        df = estimate_table(100.0, 3).set_index("formula")
        assert df.loc["Default", "one_rm"] == round(estimate_1rm_brzycki(100.0, 3), 1)
        df = estimate_table(100.0, 15).set_index("formula")
        assert df.loc["Default", "one_rm"] == round(estimate_1rm_wathan(100.0, 15), 1)

    def test_training_max_column(self, sample_set):
        df = estimate_table(**sample_set).set_index("formula")
        assert df.loc["Epley", "training_max"] == 105.0

    def test_explicit_precision(self, sample_set):
        df = estimate_table(**sample_set, precision=3).set_index("formula")
        assert df.loc["Epley", "one_rm"] == round(estimate_1rm_epley(100.0, 5), 3)

    def test_configured_precision(self, sample_set, monkeypatch):
        monkeypatch.setenv("ONERM_PRECISION", "0")
        df = estimate_table(**sample_set).set_index("formula")
        assert df.loc["Epley", "one_rm"] == 117.0

    def test_configured_training_max_pct(self, monkeypatch):
        monkeypatch.setenv("ONERM_TRAINING_MAX_PCT", "0.5")
        df = estimate_table(100.0, 1).set_index("formula")
        assert df.loc["Default", "training_max"] == 50.0

    def test_invalid_weight(self):
        with pytest.raises(ValidationError):
            estimate_table(0, 5)

    def test_invalid_reps(self):
        with pytest.raises(ValidationError):
            estimate_table(100, 40)

    def test_reps_where_brzycki_turns_negative(self):
        with pytest.raises(ValidationError):
            estimate_table(100, 36.99)

    def test_high_reps_keep_brzycki_positive(self):
        df = estimate_table(100, 36.9).set_index("formula")
        assert df.loc["Brzycki", "one_rm"] > 0


class TestRepPredictionTable:
    """Test cases for rep_prediction_table function."""

    def test_schema_and_values(self, sample_known_max):
        df = rep_prediction_table(**sample_known_max)
        assert list(df.columns) == PREDICTION_COLUMNS
        assert len(df) == 5
        by_formula = df.set_index("formula")["reps"]
        for formula, value in predict_reps_all(130.0, 100.0).items():
            assert by_formula[formula.value] == round(value, 1)
        assert by_formula["Epley"] == 9.0

    def test_non_positive_1rm_gives_zero_reps(self):
        df = rep_prediction_table(-5, 100)
        assert (df["reps"] == 0).all()

    def test_invalid_weight(self):
        with pytest.raises(ValidationError):
            rep_prediction_table(130, -1)


class TestRepMaxTable:
    """Test cases for rep_max_table function."""

    def test_shape(self):
        df = rep_max_table(150.0, max_reps=10)
        assert list(df.columns) == ["reps", "Epley", "Brzycki", "Lombardi", "Mayhew", "Wathan"]
        assert df["reps"].tolist() == list(range(1, 11))

    def test_weights_reproduce_1rm(self):
        """Each weight, fed back through its formula, estimates the original 1RM."""
        df = rep_max_table(150.0, max_reps=8, precision=6)
        row = df[df["reps"] == 8].iloc[0]
        assert estimate_1rm_epley(row["Epley"], 8) == pytest.approx(150.0, abs=1e-3)
        assert estimate_1rm_brzycki(row["Brzycki"], 8) == pytest.approx(150.0, abs=1e-3)

    def test_weights_decrease_with_reps(self):
        df = rep_max_table(200.0)
        for column in ["Epley", "Brzycki", "Lombardi", "Mayhew", "Wathan"]:
            assert df[column].is_monotonic_decreasing

    def test_returns_dataframe(self):
        assert isinstance(rep_max_table(100.0), pd.DataFrame)

    @pytest.mark.parametrize("max_reps", [0, 37, 50])
    def test_max_reps_out_of_range(self, max_reps):
        with pytest.raises(ValueError):
            rep_max_table(100.0, max_reps=max_reps)

    def test_max_reps_upper_limit(self):
        df = rep_max_table(100.0, max_reps=36)
        assert len(df) == 36
        assert (df["Brzycki"] > 0).all()

    def test_invalid_1rm(self):
        with pytest.raises(ValidationError):
            rep_max_table(0.0)
