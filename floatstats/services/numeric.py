"""Numeric statistics helpers.

Every function takes a *sample*, an ordered sequence of floats, and never
modifies it. Statistics that are undefined for a sample come back as ``None``.
"""
from __future__ import annotations

import math
from typing import Callable, Dict, Optional, Sequence

__all__: list[str] = [
    "StatFn",
    "STATISTICS",
    "mean",
    "stddev",
    "median",
    "l2",
    "summation_power",
    "numeric_summary",
]

# Shape shared by every statistic: None when the statistic is ill-defined.
StatFn = Callable[[Sequence[float]], Optional[float]]


def mean(sample: Sequence[float]) -> Optional[float]:
    """
    Arithmetic mean. The mean of an empty sample is 0.0.

    The element count is accumulated as a float alongside the sum rather
    than taken from len(), so results stay bit-identical with the
    reference vectors.
    """
    if not sample:
        return 0.0
    count = 0.0
    total = 0.0
    for value in sample:
        count += 1.0
        total += value
    return total / count


def stddev(sample: Sequence[float]) -> Optional[float]:
    """
    Summed squared deviation from the mean, divided by (n - 1).

    Note that no square root is taken. Undefined (None) for an empty sample.
    A single-element sample divides by zero and yields nan or inf.
    """
    if not sample:
        return None
    return _ieee_div(summation_power(sample, mean(sample)), float(len(sample) - 1))


def median(sample: Sequence[float]) -> Optional[float]:
    """
    Median, taking the value closer to the beginning to break ties.

    For an even number of values the lower of the two central values is
    returned; the two are never averaged. Undefined (None) for an empty sample.
    """
    if not sample:
        return None
    ordered = sorted(sample, key=_total_order)
    offset = len(ordered) - 1
    return ordered[offset // 2]


def l2(sample: Sequence[float]) -> Optional[float]:
    """Euclidean norm. The norm of an empty sample is 0.0."""
    if not sample:
        return 0.0
    return math.sqrt(summation_power(sample, 0.0))


def summation_power(sample: Sequence[float], offset: float) -> float:
    """
    Sum of (value - offset) ** 2 over the sample, 0.0 when empty.
    """
    total = 0.0
    for value in sample:
        # d * d overflows to inf where float.__pow__ would raise
        diff = value - offset
        total += diff * diff
    return total


STATISTICS: Dict[str, StatFn] = {
    "mean": mean,
    "stddev": stddev,
    "median": median,
    "l2": l2,
}


def numeric_summary(values: Sequence[float] | Sequence[int]) -> dict[str, Optional[float]]:
    """
    Compute every registered statistic for a sequence of numbers.
    Empty input is allowed; undefined statistics are reported as None.
    """
    vals = [float(v) for v in values]
    return {name: stat(vals) for name, stat in STATISTICS.items()}


def _ieee_div(numerator: float, denominator: float) -> float:
    # float division raises on zero; keep the IEEE-754 result instead
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _total_order(value: float) -> tuple[bool, float]:
    # nan sorts after every other value
    return (math.isnan(value), value)
