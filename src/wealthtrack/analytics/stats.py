"""numpy kernels shared by the aggregators.

Amounts arrive as Decimal and are converted to float here; results are
plain floats.
"""

from decimal import Decimal
from typing import Sequence

import numpy as np

# Below this a standard deviation is treated as zero (identical inputs)
STD_EPSILON = 1e-12


def _floats(values: Sequence[Decimal | float]) -> np.ndarray:
    return np.asarray([float(v) for v in values], dtype=float)


def population_std(values: Sequence[Decimal | float]) -> float:
    if len(values) == 0:
        return 0.0
    std = float(np.std(_floats(values)))
    return 0.0 if std < STD_EPSILON else std


def population_beta(returns: Sequence[float], benchmark: Sequence[float]) -> float:
    """Cov(returns, benchmark) / Var(benchmark) over the trailing overlap.

    Returns 0 when there is no overlap to speak of or the benchmark is flat.
    """
    n = min(len(returns), len(benchmark))
    if n < 2:
        return 0.0
    a = _floats(returns[-n:])
    b = _floats(benchmark[-n:])
    var_b = float(np.var(b))
    if var_b < STD_EPSILON:
        return 0.0
    cov = float(np.cov(a, b, bias=True)[0, 1])
    return cov / var_b


def max_drawdown_percent(values: Sequence[Decimal | float]) -> float:
    """Largest peak-to-trough decline as a positive percent of the peak."""
    if len(values) < 2:
        return 0.0
    arr = _floats(values)
    peak = np.maximum.accumulate(arr)
    drawdown = np.where(peak > 0, (peak - arr) / np.where(peak > 0, peak, 1), 0.0)
    return float(np.max(drawdown) * 100)


def herfindahl_index(weights: Sequence[Decimal | float]) -> float:
    """Sum of squared shares; weights need not be normalized."""
    arr = _floats(weights)
    total = float(arr.sum()) if len(arr) else 0.0
    if total <= 0:
        return 0.0
    shares = arr / total
    return float(np.sum(shares ** 2))
