from __future__ import annotations

import math
from typing import Sequence

import numpy as np
import pandas as pd


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def finite_or_zero(value: float) -> float:
    return float(value) if math.isfinite(value) else 0.0


def round2(value):
    """Round half up to cents. Works on scalars, numpy arrays and pandas objects."""
    if isinstance(value, (np.ndarray, pd.Series, pd.DataFrame)):
        return np.floor(value * 100 + 0.5) / 100
    return math.floor(value * 100 + 0.5) / 100


def to_currency(amount: float) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percent_loose(pct: float) -> str:
    """Up to six decimals with thousands grouping and no trailing zeros."""
    number = finite_or_zero(pct)
    text = f"{number:,.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def compute_percents(values: Sequence[float]) -> list[int]:
    """Whole percentages that always add up to 100 (largest remainder method)."""
    arr = np.asarray(values, dtype=float)
    total = arr.sum()
    if not total > 0:
        return [0] * len(arr)

    raw = arr / total * 100
    floored = np.floor(raw)
    remain = 100 - int(floored.sum())

    # stable sort keeps input order between equal remainders
    order = np.argsort(-(raw - floored), kind="stable")
    out = floored.astype(int)
    for idx in order[: max(remain, 0)]:
        out[idx] += 1
    return out.tolist()
