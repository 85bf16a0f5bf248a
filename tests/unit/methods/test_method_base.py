"""Tests for the shared Method base class."""

import pytest

from slidingstats import SMM, InvalidParameters, LinReg, Method, SlidingStatsError
from slidingstats.methods.base import check_finite, check_length


class TestMethodContract:
    """Tests for behavior shared by all methods."""

    def test_cannot_instantiate_base(self):
        """Method is abstract."""
        with pytest.raises(TypeError):
            Method()

    @pytest.mark.parametrize("method_cls", [SMM, LinReg])
    def test_methods_are_methods(self, method_cls):
        """Every tracker implements the Method interface."""
        method = method_cls.new(4, 1.0)

        assert isinstance(method, Method)
        assert method.length == 4
        assert method.window.to_list() == [1.0] * 4

    @pytest.mark.parametrize("method_cls", [SMM, LinReg])
    def test_over_matches_next(self, prices, method_cls):
        """over gives the same outputs as calling next in a loop."""
        a = method_cls(6, prices[0])
        b = method_cls(6, prices[0])

        assert a.over(prices) == [b.next(p) for p in prices]

    @pytest.mark.parametrize("method_cls", [SMM, LinReg])
    def test_independent_instances(self, prices, method_cls):
        """Two instances never share state."""
        a = method_cls(5, prices[0])
        b = method_cls(5, prices[0])
        a.over(prices[:100])

        assert b.window.to_list() == [prices[0]] * 5

    def test_window_tracks_input(self, prices):
        """The method window holds the last length samples."""
        smm = SMM(5, prices[0])
        smm.over(prices)

        assert smm.window.to_list() == prices[-5:]


class TestChecks:
    """Tests for parameter and input validation helpers."""

    def test_check_length_accepts_minimum(self):
        """The minimum length itself is valid."""
        assert check_length(2, 2, "X") == 2

    def test_check_length_rejects_below_minimum(self):
        """Lengths below the minimum raise InvalidParameters."""
        with pytest.raises(InvalidParameters, match="X length must be >= 2, got 1"):
            check_length(1, 2, "X")

    def test_check_length_rejects_bool(self):
        """True is not a length."""
        with pytest.raises(TypeError):
            check_length(True, 1, "X")

    def test_check_finite(self):
        """Finite values pass through, others raise."""
        assert check_finite(1.5, "X") == 1.5
        with pytest.raises(SlidingStatsError):
            check_finite(float("inf"), "X")

    def test_errors_are_value_errors(self):
        """Both error kinds can be caught as ValueError."""
        with pytest.raises(ValueError):
            SMM(0, 1.0)
        with pytest.raises(ValueError):
            SMM(1, float("nan"))
