import math
from typing import Any, Iterable

import pandas as pd

from models.chart_series import ChartSeries

UNKNOWN_YEAR = "Unknown"


def _year_label(value: Any) -> str:
    if value is None or pd.isna(value) or not value:
        return UNKNOWN_YEAR
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def _year_sort_key(label: str) -> tuple[int, float]:
    # numeric years first (largest first once reversed), unknown last
    try:
        return (1, float(label))
    except ValueError:
        return (0, 0.0)


def _round2(value: float) -> float:
    # half-up, not banker's rounding
    return math.floor(value * 100 + 0.5) / 100


def range_by_year(rows: Iterable[dict]) -> ChartSeries:
    """
    Mean Range per model year for the chart on the vehicle-type page.

    Non-numeric ranges are dropped from the mean; years left without any
    numeric range are omitted. Labels run from the newest year down.
    """
    df = pd.DataFrame(list(rows), columns=["Year", "Range"])
    if df.empty:
        return ChartSeries()

    df["year_label"] = df["Year"].map(_year_label)
    df["range_value"] = pd.to_numeric(df["Range"], errors="coerce")
    df = df.dropna(subset=["range_value"])
    if df.empty:
        return ChartSeries()

    grouped = df.groupby("year_label")["range_value"].agg(["sum", "count"])

    labels = sorted(grouped.index, key=_year_sort_key, reverse=True)
    data = [
        _round2(float(grouped.at[label, "sum"]) / int(grouped.at[label, "count"]))
        for label in labels
    ]
    return ChartSeries(labels=labels, data=data)
