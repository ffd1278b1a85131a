from __future__ import annotations

from collections.abc import Callable, Iterable

import pandas as pd


def make_group_key(year: object, circuit_name: object, constructor_name: object) -> str:
    return f"{year}_{circuit_name}_{constructor_name}"


def format_seconds(value: float | int, decimals: int = 2) -> str:
    return f"{float(value):.{decimals}f}s"


def value_domain(
    values: Iterable[object],
    zero_based: bool = False,
    pad: float = 0.0,
) -> tuple[float, float] | None:
    """Return ``(low, high)`` over the numeric values, or ``None`` when there are none.

    ``zero_based`` pins the low end at 0; ``pad`` is added to the high end.
    """
    series = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce").dropna()
    if series.empty:
        return None
    low = 0.0 if zero_based else float(series.min())
    return low, float(series.max()) + pad


def linear_scale(
    domain: tuple[float, float] | None,
    output_range: tuple[float, float],
) -> Callable[[float], float]:
    """Map ``domain`` linearly onto ``output_range``.

    A missing or zero-width domain maps everything to the middle of the range.
    """
    out_low, out_high = output_range
    if domain is None or domain[1] == domain[0]:
        midpoint = (out_low + out_high) / 2.0
        return lambda _value: midpoint

    low, high = domain
    span = high - low

    def scale(value: float) -> float:
        return out_low + (float(value) - low) / span * (out_high - out_low)

    return scale
