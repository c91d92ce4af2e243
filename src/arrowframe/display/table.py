"""Render a DataFrame as an aligned text table.

This is the default representation of a DataFrame::

    DataFrame : 6 x 4 Vectors
      integer    double string   boolean
      <int64>  <double> <string> <bool>
    0       1       1.0 A        true
    1       2       NaN A        false
    2       3  Infinity B        (nil)
    3       4 -Infinity C        true
    4       5     (nil) D        false
    5       6       0.0 E        (nil)

Numeric columns are aligned to the right, all other columns
to the left. Large frames are truncated both in rows and columns,
the omitted rows are marked by a row of ``:`` and the omitted
columns by a column of ``...``.
"""

from typing import TYPE_CHECKING

from ..utils.tabulate import LEFT, RIGHT, tabulate
from .base import Renderer, header, take_rows, truncate
from .formatting import format_cell
from .types import is_numeric, type_name

if TYPE_CHECKING:
    from ..dataframe import DataFrame

ROW_ELLIPSIS = ":"
COLUMN_ELLIPSIS = "..."


class TableRenderer(Renderer):
    """Render frames as text tables, one line per row.

    >>> from arrowframe import DataFrame
    >>> print(TableRenderer().render(DataFrame({"x": [1, 20], "y": ["a", None]})), end="")
    DataFrame : 2 x 2 Vectors
            x y
      <int64> <string>
    0       1 a
    1      20 (nil)
    """

    def __init__(
        self,
        max_rows: int = 8,
        head_rows: int = 5,
        tail_rows: int = 3,
        max_columns: int = 11,
        head_columns: int = 10,
        tail_columns: int = 1,
    ) -> None:
        """
        :param max_rows: Frames with more rows than this are truncated.
        :param head_rows: How many leading rows to show when truncated.
        :param tail_rows: How many trailing rows to show when truncated.
        :param max_columns: Frames with more columns than this are truncated.
        :param head_columns: How many leading columns to show when truncated.
        :param tail_columns: How many trailing columns to show when truncated.
        """
        self.max_rows = max_rows
        self.head_rows = head_rows
        self.tail_rows = tail_rows
        self.max_columns = max_columns
        self.head_columns = head_columns
        self.tail_columns = tail_columns

    def render(self, frame: "DataFrame") -> str:
        if frame.n_columns == 0:
            return header(frame) + "\n"

        rows = truncate(frame.n_rows, self.max_rows, self.head_rows, self.tail_rows)
        columns = truncate(
            frame.n_columns, self.max_columns, self.head_columns, self.tail_columns
        )
        shown = take_rows(frame.table, rows)

        # The table is built column by column and then transposed,
        # the first column holds the row positions.
        cells = [["", ""] + [ROW_ELLIPSIS if r is None else str(r) for r in rows]]
        align = [LEFT]
        for c in columns:
            if c is None:
                cells.append([COLUMN_ELLIPSIS] * (len(rows) + 2))
                align.append(LEFT)
                continue

            field = frame.table.schema.field(c)
            values = iter(shown.column(c).to_pylist())
            cells.append(
                [field.name, f"<{type_name(field.type)}>"]
                + [ROW_ELLIPSIS if r is None else format_cell(next(values)) for r in rows]
            )
            align.append(RIGHT if is_numeric(field.type) else LEFT)

        lines = tabulate([list(row) for row in zip(*cells)], align=align)
        return header(frame) + "\n" + lines + "\n"
