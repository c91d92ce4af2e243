"""Render a DataFrame as an HTML table for notebooks.

The HTML output is meant to be embedded by notebook hosts,
so it's a single line made of a short description of the frame
followed by a ``<table>``::

    DataFrame <3 x 1 vector> <table><tr><th>x</th></tr><tr><td>1</td></tr>...</table>

Like the text table, the HTML table is truncated when the frame
is too large: omitted rows are replaced by a row of vertical
ellipsis (``&#8942;``) and omitted columns by a column of
horizontal ellipsis (``&#8230;``).
"""

from typing import TYPE_CHECKING

from ..utils.naming import pluralize
from .base import Renderer, frame_name, take_rows, truncate
from .formatting import escape, format_html_cell

if TYPE_CHECKING:
    from ..dataframe import DataFrame

ROW_ELLIPSIS = "&#8942;"
COLUMN_ELLIPSIS = "&#8230;"
EMPTY = "(empty DataFrame)"


class HtmlRenderer(Renderer):
    """Render frames as HTML tables."""

    def __init__(
        self,
        max_rows: int = 8,
        head_rows: int = 4,
        tail_rows: int = 3,
        max_columns: int = 15,
        head_columns: int = 7,
        tail_columns: int = 7,
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
            return EMPTY

        rows = truncate(frame.n_rows, self.max_rows, self.head_rows, self.tail_rows)
        columns = truncate(
            frame.n_columns, self.max_columns, self.head_columns, self.tail_columns
        )
        shown = take_rows(frame.table, rows)
        values = {c: shown.column(c).to_pylist() for c in columns if c is not None}

        keys = [COLUMN_ELLIPSIS if c is None else escape(frame.keys[c]) for c in columns]
        header_cells = "".join(f"<th>{key}</th>" for key in keys)
        body = [f"<tr>{header_cells}</tr>"]
        shown_idx = 0
        for r in rows:
            if r is None:
                body.append("<tr>" + f"<td>{ROW_ELLIPSIS}</td>" * len(columns) + "</tr>")
                continue
            cells = "".join(
                f"<td>{COLUMN_ELLIPSIS if c is None else format_html_cell(values[c][shown_idx])}</td>"
                for c in columns
            )
            body.append(f"<tr>{cells}</tr>")
            shown_idx += 1

        description = f"{frame.n_rows} x {pluralize(frame.n_columns, 'vector')}"
        return f"{frame_name(frame)} <{description}> <table>{''.join(body)}</table>"
