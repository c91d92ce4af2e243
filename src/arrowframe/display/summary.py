"""Render a statistical summary of a DataFrame.

Instead of showing the data row by row, the summary shows
one line per column with its type, its level (the number
of distinct values) and a preview of its data::

    DataFrame : 6 x 4 Vectors
    Vectors : 2 numeric, 1 string, 1 boolean
    # key     type   level data_preview
    0 integer int64      6 [1, 2, 3, 4, 5, ... ]
    1 double  double     6 [1.0, NaN, Infinity, -Infinity, nil, ... ], 1 NaN, 1 nil
    2 string  string     5 {"A": 2, "B": 1, "C": 1, "D": 1, "E": 1}
    3 boolean bool       3 {true: 2, false: 2, nil: 2}

This makes the summary the best way to look at frames
with many columns, as the output grows with the number
of columns and not with the number of rows.
See :mod:`arrowframe.display.levels` for how the
data preview is computed.
"""

from typing import TYPE_CHECKING

from ..utils.naming import pluralize, quote_key
from ..utils.tabulate import LEFT, RIGHT, tabulate
from .base import Renderer, header
from .levels import analyze
from .types import group_counts, type_name

if TYPE_CHECKING:
    from ..dataframe import DataFrame

ALL = "all"


class SummaryRenderer(Renderer):
    """Render frames as one summary line per column."""

    def __init__(self, limit: int | str = 10, tally: int = 5, elements: int = 5) -> None:
        """
        :param limit: How many columns to show at most, or ``"all"``.
        :param tally: Up to how many distinct values a column is
                      previewed as a tally of its values.
        :param elements: How many leading values to preview for
                         the other columns.
        """
        if limit != ALL and (not isinstance(limit, int) or limit < 0):
            raise ValueError(f"Invalid limit: {limit!r}, expected a count or {ALL!r}")
        self.limit = limit
        self.tally = tally
        self.elements = elements

    def render(self, frame: "DataFrame") -> str:
        if frame.n_columns == 0:
            return header(frame) + "\n"

        types = frame.table.schema.types
        noun = "Vector" if frame.n_columns == 1 else "Vectors"
        lines = [header(frame), f"{noun} : {group_counts(types)}"]

        shown = frame.n_columns if self.limit == ALL else min(self.limit, frame.n_columns)
        rows = [["#", "key", "type", "level", "data_preview"]]
        for idx in range(shown):
            level = analyze(frame.table.column(idx), self.tally, self.elements)
            rows.append(
                [
                    str(idx),
                    quote_key(frame.keys[idx]),
                    type_name(types[idx]),
                    str(level.level),
                    str(level),
                ]
            )
        lines.append(tabulate(rows, align=[LEFT, LEFT, LEFT, RIGHT, LEFT]))

        if shown < frame.n_columns:
            more = pluralize(frame.n_columns - shown, "more Vector")
            lines.append(f" ... {more} ...")
        return "\n".join(lines) + "\n"
