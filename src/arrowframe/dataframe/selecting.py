"""Select rows and columns of a DataFrame.

The ``frame[...]`` operator accepts a list of selectors that can be
row positions, ranges of positions or column keys::

    frame[0, 2]             # rows 0 and 2
    frame[range(1, 4), 4]   # rows 1, 2, 3 and 4
    frame[-3:]              # the last 3 rows
    frame["x", "y"]         # columns x and y

Before selecting anything, the selectors are normalized:
ranges and slices are expanded to the positions they contain
(preserving order and duplicates) and then the whole list is classified.
A list made only of integers selects rows, a list made only of
strings selects columns, anything else is rejected.
Rows and columns can't be selected at the same time,
that requires two separate selections.

Column storage is columnar, but row selection works row by row:
each requested row is extracted as a full record and the records
are then reassembled into a new table. This is what allows rows
to be picked in any order and to be repeated, which wouldn't
be possible by slicing contiguous ranges of the columns.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterable

import pyarrow as pa

from ..errors import IndexOutOfRangeError, InvalidSelectorError, UnknownColumnError

if TYPE_CHECKING:
    from .dataframe import DataFrame

logger = logging.getLogger(__name__)

ROWS = "rows"
COLUMNS = "columns"


def flatten(selectors: Iterable[Any]) -> list[Any]:
    """Unpack lists and tuples of selectors into a single list."""
    tokens = []
    for token in selectors:
        if isinstance(token, (list, tuple)):
            tokens.extend(flatten(token))
        else:
            tokens.append(token)
    return tokens


def expand(tokens: list[Any], n_rows: int) -> list[Any]:
    """Expand ranges and slices into the positions they contain.

    Slices are resolved against the number of rows,
    following Python slicing rules.

    >>> expand([range(1, 4), 4], n_rows=5)
    [1, 2, 3, 4]
    >>> expand([slice(-2, None), "x"], n_rows=5)
    [3, 4, 'x']
    """
    expanded = []
    for token in tokens:
        if isinstance(token, range):
            expanded.extend(token)
        elif isinstance(token, slice):
            expanded.extend(range(*token.indices(n_rows)))
        else:
            expanded.append(token)
    return expanded


def is_position(token: Any) -> bool:
    """Row positions are integers, booleans are not accepted as positions."""
    return isinstance(token, int) and not isinstance(token, bool)


def normalize(selectors: Iterable[Any], n_rows: int) -> tuple[str, list[Any]]:
    """Classify selectors as a row or column selection.

    Returns ``("rows", positions)`` or ``("columns", keys)``.

    >>> normalize([range(0, 2), -1], n_rows=5)
    ('rows', [0, 1, -1])
    >>> normalize(["x", "y"], n_rows=5)
    ('columns', ['x', 'y'])
    """
    tokens = flatten(selectors)
    if not tokens:
        raise InvalidSelectorError("Empty selector")

    expanded = expand(tokens, n_rows)
    if all(is_position(t) for t in expanded):
        return ROWS, expanded
    elif all(isinstance(t, str) for t in expanded):
        return COLUMNS, [str(t) for t in expanded]
    raise InvalidSelectorError(f"Invalid selector: {tokens!r}")


def select_columns(frame: "DataFrame", keys: list[str]) -> "DataFrame":
    """Build a new frame with exactly the requested columns.

    Columns are provided in the requested order, and a key
    requested more than once results in a repeated column.
    """
    missing = [k for k in keys if k not in frame.keys]
    if missing:
        raise UnknownColumnError(f"Unknown columns: {missing}")

    logger.debug("Selecting columns %s", keys)
    indices = [frame.keys.index(k) for k in keys]
    table = pa.Table.from_arrays(
        [frame.table.column(idx) for idx in indices],
        schema=pa.schema([frame.table.schema.field(idx) for idx in indices]),
    )
    return frame.__class__(table)


def out_of_range(positions: list[int], n_rows: int) -> bool:
    """If any position is outside of ``[-n_rows, n_rows)``."""
    return max(positions) >= n_rows or min(positions) < -n_rows


def select_rows(frame: "DataFrame", positions: list[int]) -> "DataFrame":
    """Build a new frame with the rows at the requested positions.

    Negative positions count from the end, ``-1`` being the last row.
    Rows are provided in the requested order and can be repeated.
    """
    n_rows = frame.n_rows
    if positions and out_of_range(positions, n_rows):
        raise IndexOutOfRangeError(
            f"Invalid positions {positions} for {n_rows} rows [0..{n_rows - 1}]"
        )

    logger.debug("Selecting %d rows out of %d", len(positions), n_rows)
    table = frame.table
    records = []
    for position in positions:
        row = table.slice(position % n_rows, 1)
        records.append([column[0].as_py() for column in row.columns])
    return frame.__class__.from_rows(table.schema, records)


def head(frame: "DataFrame", n_rows: int) -> "DataFrame":
    """The first ``n_rows`` rows, or all rows if there are less."""
    if n_rows < 0:
        raise InvalidSelectorError(f"Invalid number of rows: {n_rows}")
    return select_rows(frame, list(range(min(n_rows, frame.n_rows))))


def tail(frame: "DataFrame", n_rows: int) -> "DataFrame":
    """The last ``n_rows`` rows, or all rows if there are less."""
    if n_rows < 0:
        raise InvalidSelectorError(f"Invalid number of rows: {n_rows}")
    n_rows = min(n_rows, frame.n_rows)
    return select_rows(frame, list(range(frame.n_rows - n_rows, frame.n_rows)))
