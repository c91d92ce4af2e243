"""Analyse the distinct values of a column.

The *level* of a column is the number of distinct values it contains,
a missing value counts as one more distinct value. The level tells
a lot about the nature of a column: a low level usually means that
the column holds categories, while a level equal to the number of
rows usually means that the column holds identifiers or measures.

For this reason the data preview of low level columns is a tally
of how many times each value appears, while for high level
columns it's a preview of the leading values::

    string  5 {"A": 2, "B": 1, "C": 1, "D": 1, "E": 1}
    double  6 [1.0, NaN, Infinity, -Infinity, nil, ... ], 1 NaN, 1 nil

The counting is performed by :mod:`pyarrow.compute` kernels,
so the analysis usually doesn't have to move the whole column to Python.
The only values converted to Python are the distinct ones (for tallies)
or the leading ones (for previews). Types that Arrow can't hash,
like ``null``, lists and structs, are counted on the Python side.
"""

from typing import Any

import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.types as pat

from ..utils.naming import pluralize
from .formatting import format_preview, format_tally

UNSUPPORTED = (pa.ArrowNotImplementedError, pa.ArrowTypeError)


class Level:
    """Result of the analysis of a column.

    Depending on the level, only one between ``tally``
    and ``preview`` is provided.
    """

    def __init__(
        self,
        level: int,
        tally: list[tuple[Any, int]] | None = None,
        preview: list[Any] | None = None,
        complete: bool = True,
        n_nan: int = 0,
        n_nil: int = 0,
    ) -> None:
        """
        :param level: The number of distinct values in the column.
        :param tally: ``(value, occurrences)`` pairs, in order of first occurrence.
        :param preview: The leading values of the column.
        :param complete: If the preview contains all the values of the column.
        :param n_nan: How many NaN values the column contains.
        :param n_nil: How many missing values the column contains.
        """
        self.level = level
        self.tally = tally
        self.preview = preview
        self.complete = complete
        self.n_nan = n_nan
        self.n_nil = n_nil

    def __str__(self) -> str:
        if self.tally is not None:
            return format_tally(self.tally)

        text = format_preview(self.preview, complete=self.complete)
        if self.n_nan:
            text += ", " + pluralize(self.n_nan, "NaN")
        if self.n_nil:
            text += ", " + pluralize(self.n_nil, "nil")
        return text

    def __repr__(self) -> str:
        return f"Level({self.level}, {self})"


def count_levels(column: pa.ChunkedArray) -> int:
    """Count the distinct values of a column, missing included."""
    column = decode(column)
    try:
        return pc.count_distinct(column, mode="all").as_py()
    except UNSUPPORTED:
        return len(count_values(column))


def tally(column: pa.ChunkedArray) -> list[tuple[Any, int]]:
    """Count how many times each distinct value appears in the column.

    Pairs are provided in order of first occurrence of the value.
    """
    column = decode(column)
    try:
        counts = pc.value_counts(column)
    except UNSUPPORTED:
        return list(count_values(column).values())
    return list(
        zip(counts.field("values").to_pylist(), counts.field("counts").to_pylist())
    )


def count_nan(column: pa.ChunkedArray) -> int:
    """Count the NaN values of a floating point column."""
    if not pat.is_floating(column.type):
        return 0
    return pc.sum(pc.is_nan(column)).as_py() or 0


def analyze(column: pa.ChunkedArray, tally_threshold: int, max_elements: int) -> Level:
    """Analyse a column to compute its level and data preview.

    :param column: The column to analyse.
    :param tally_threshold: Up to how many distinct values a tally is
                            provided instead of the leading values.
                            Columns without repeated values are
                            always previewed by their leading values.
    :param max_elements: How many leading values to provide at most.
    """
    level = count_levels(column)
    if level <= tally_threshold and level < len(column):
        return Level(level, tally=tally(column))

    return Level(
        level,
        preview=column.slice(0, max_elements).to_pylist(),
        complete=len(column) <= max_elements,
        n_nan=count_nan(column),
        n_nil=column.null_count,
    )


def decode(column: pa.ChunkedArray) -> pa.ChunkedArray:
    """Replace dictionary encoded columns with their plain values."""
    if pat.is_dictionary(column.type):
        return column.cast(column.type.value_type)
    return column


def count_values(column: pa.ChunkedArray) -> dict[str, tuple[Any, int]]:
    """Count the values of a column on the Python side.

    Used for the types that Arrow can't hash, like ``null``, lists
    and structs. Values are told apart by their ``repr``, as lists
    and dictionaries can't be used as keys. The result maps each
    value key to a ``(value, occurrences)`` pair, in order of first
    occurrence.

    >>> count_values(pa.chunked_array([[[1], None, [1]]]))
    {'[1]': ([1], 2), 'None': (None, 1)}
    """
    counts: dict[str, tuple[Any, int]] = {}
    for value in column.to_pylist():
        key = repr(value)
        seen, occurrences = counts.get(key, (value, 0))
        counts[key] = (seen, occurrences + 1)
    return counts
