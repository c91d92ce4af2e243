"""Descriptive statistics of the numeric columns of a DataFrame.

The statistics are computed by :mod:`pyarrow.compute` and returned
as a new DataFrame with one row per numeric column::

    variables  count  mean  std                min  25%   median  75%  max
    integers       4  4.25  2.217355782608345  2.0  2.75     4.0  5.5  7.0

Non numeric columns are skipped.
"""

from typing import TYPE_CHECKING

import pyarrow as pa
import pyarrow.compute as pc

from ..display.types import is_numeric

if TYPE_CHECKING:
    from .dataframe import DataFrame

QUANTILES = {"25%": 0.25, "median": 0.5, "75%": 0.75}


def describe(frame: "DataFrame") -> "DataFrame":
    """Compute count, mean, standard deviation, quantiles, min and max.

    The standard deviation is the sample one, and
    quantiles are computed with linear interpolation.
    """
    numeric = [idx for idx, t in enumerate(frame.table.schema.types) if is_numeric(t)]
    if not numeric:
        return frame.__class__()

    stats: dict[str, list] = {
        "count": [],
        "mean": [],
        "std": [],
        "min": [],
        **{name: [] for name in QUANTILES},
        "max": [],
    }
    for idx in numeric:
        column = frame.table.column(idx).cast(pa.float64())
        count = pc.count(column).as_py()
        stats["count"].append(count)
        stats["mean"].append(pc.mean(column).as_py())
        stats["std"].append(pc.stddev(column, ddof=1).as_py())
        stats["min"].append(pc.min(column).as_py())
        stats["max"].append(pc.max(column).as_py())
        if count:
            quantiles = pc.quantile(column, q=list(QUANTILES.values())).to_pylist()
        else:
            quantiles = [None] * len(QUANTILES)
        for name, quantile in zip(QUANTILES, quantiles):
            stats[name].append(quantile)

    variables = pa.array([frame.keys[idx] for idx in numeric]).dictionary_encode()
    return frame.__class__.from_columns(
        {
            "variables": variables,
            "count": pa.array(stats.pop("count"), type=pa.int64()),
            **{name: pa.array(values, type=pa.float64()) for name, values in stats.items()},
        }
    )
