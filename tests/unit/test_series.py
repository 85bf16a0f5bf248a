"""Tests for running methods over pandas Series."""

import pandas as pd
import pytest

from slidingstats import SMM, InvalidInput, InvalidParameters, LinReg
from slidingstats.series import apply_method, lsma, rolling_median


class TestApplyMethod:
    """Tests for apply_method."""

    def test_aligned_to_index(self, prices):
        """Output keeps the input index and gets a descriptive name."""
        index = pd.date_range("2024-01-01", periods=len(prices), freq="min")
        series = pd.Series(prices, index=index)

        out = apply_method(SMM, 5, series)

        assert out.index.equals(index)
        assert out.name == "SMM(5)"
        assert out.dtype == "float64"

    def test_matches_method(self, prices):
        """Values equal feeding the samples through the method directly."""
        series = pd.Series(prices)

        out = apply_method(LinReg, 10, series)

        assert out.tolist() == LinReg(10, prices[0]).over(prices)

    def test_empty_series(self):
        """An empty Series gives an empty float Series."""
        out = apply_method(SMM, 3, pd.Series([], dtype="float64"))

        assert out.empty
        assert out.dtype == "float64"

    def test_construction_errors_propagate(self):
        """Invalid lengths surface as InvalidParameters."""
        with pytest.raises(InvalidParameters):
            apply_method(LinReg, 1, pd.Series([1.0, 2.0]))

    def test_nan_rejected_by_median(self):
        """A NaN in the series is refused by SMM."""
        with pytest.raises(InvalidInput):
            rolling_median(pd.Series([1.0, float("nan"), 2.0]), 3)

    def test_integer_series(self):
        """Integer input is converted to float."""
        out = rolling_median(pd.Series([1, 2, 3, 100]), 3)

        assert out.tolist() == [1.0, 1.0, 2.0, 3.0]


class TestShorthands:
    """Tests for rolling_median and lsma."""

    def test_rolling_median_matches_pandas_once_full(self, prices):
        """Once the window is full of real samples, the median matches pandas."""
        series = pd.Series(prices)

        ours = rolling_median(series, 7)
        theirs = series.rolling(7).median()

        assert ours.iloc[6:].tolist() == pytest.approx(theirs.iloc[6:].tolist())

    def test_lsma_passes_resync(self, prices):
        """lsma forwards resync_every to LinReg."""
        series = pd.Series(prices)

        out = lsma(series, 12, resync_every=5)

        assert out.name == "LinReg(12)"
        assert out.tolist() == pytest.approx(lsma(series, 12).tolist())
