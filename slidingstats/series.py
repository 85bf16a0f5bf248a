"""Run sliding window methods over pandas Series."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pandas as pd

from slidingstats.methods import SMM, LinReg

if TYPE_CHECKING:
    from slidingstats.methods import Method


def apply_method(method_cls: type[Method], length: int, series: pd.Series, **kwargs) -> pd.Series:
    """Feed ``series`` through a method one sample at a time.

    The method is created from the first element, so the first outputs are
    computed over a window pre-filled with it.

    Args:
        method_cls: Method class, e.g. ``SMM`` or ``LinReg``.
        length: Window length.
        series: Input samples in time order.
        **kwargs: Extra options passed to the method constructor.

    Returns:
        Float Series aligned to ``series.index``, named ``"<Method>(<length>)"``.

    Raises:
        InvalidParameters: If length is invalid for the method.
        InvalidInput: If the method rejects a sample.
    """
    name = f"{method_cls.__name__}({length})"
    if series.empty:
        return pd.Series(index=series.index, dtype="float64", name=name)

    values = series.to_numpy(dtype="float64")
    method = method_cls(length, float(values[0]), **kwargs)
    out = [method.next(float(v)) for v in values]

    return pd.Series(out, index=series.index, dtype="float64", name=name)


def rolling_median(series: pd.Series, length: int) -> pd.Series:
    """Moving median of ``series`` over ``length`` samples."""
    return apply_method(SMM, length, series)


def lsma(series: pd.Series, length: int, resync_every: int | None = None) -> pd.Series:
    """Least squares moving average of ``series`` over ``length`` samples."""
    return apply_method(LinReg, length, series, resync_every=resync_every)
