"""Reshape DataFrames between wide and long forms.

Data is frequently stored in *wide* form, one column per
measured variable, while many analyses prefer a *long* form,
one row per measure. For example, given::

    city     2020  2021
    Rome      10    12
    Milan      8     9

``to_long("city", name="year", value="shops")`` gives::

    city   year  shops
    Rome   2020     10
    Rome   2021     12
    Milan  2020      8
    Milan  2021      9

while ``transpose()`` swaps rows and columns,
using the values of the ``city`` column as the new keys::

    name  Rome  Milan
    2020    10      8
    2021    12      9

Both operations iterate over the frame row by row and build
the columns of the new frame, so their cost is proportional
to the number of cells. As a new column gathers values from
several source columns, it keeps their type only when they agree:
integers and floats become floats, any other mixture becomes text.
"""

import logging
from typing import TYPE_CHECKING, Any

import pyarrow as pa
import pyarrow.types as pat

from ..display.formatting import format_cell
from ..errors import InvalidSelectorError, UnknownColumnError
from ..utils.naming import first_unused

if TYPE_CHECKING:
    from .dataframe import DataFrame

logger = logging.getLogger(__name__)


def key_of(value: Any) -> str:
    """Convert a cell value into a column key."""
    if value is None:
        return ""
    elif isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def transpose(frame: "DataFrame", key: str | None = None, new_key: str = "name") -> "DataFrame":
    """Swap rows and columns of a frame.

    :param key: The column whose values become the new keys,
                by default the first column.
    :param new_key: The key of the column that will hold the
                    names of the other columns. If it collides
                    with one of the new keys, the first unused
                    name among ``name1``, ``name2``, ... is used.
    """
    if key is None and frame.keys:
        key = frame.keys[0]
    if key not in frame.keys:
        raise InvalidSelectorError(f"Not a column: {key!r}")

    pivot_idx = frame.keys.index(key)
    pivot = [key_of(v) for v in frame.table.column(pivot_idx).to_pylist()]
    if new_key in pivot:
        new_key = first_unused("name", set(pivot))
    logger.debug("Transposing on %r, names in %r", key, new_key)

    others = [idx for idx in range(frame.n_columns) if idx != pivot_idx]
    types = [frame.table.schema.field(idx).type for idx in others]
    columns: dict[str, Any] = {
        new_key: pa.array([frame.keys[idx] for idx in others], type=pa.string())
    }
    for new_column, record in zip(pivot, frame.raw_records()):
        columns[new_column] = merge_values([record[idx] for idx in others], types)
    return frame.__class__.from_columns(columns)


def to_long(
    frame: "DataFrame", *keep_keys: str, name: str = "name", value: str = "value"
) -> "DataFrame":
    """Melt the columns not in ``keep_keys`` into name and value pairs.

    Each row of the source frame becomes one row per melted column,
    where the kept columns repeat their value, ``name`` holds the key of
    the melted column and ``value`` its value.

    :param keep_keys: The columns to keep as they are.
    :param name: The key of the column holding the melted keys.
    :param value: The key of the column holding the melted values.
    """
    missing = [k for k in keep_keys if k not in frame.keys]
    if missing:
        raise UnknownColumnError(f"Unknown columns: {missing}")
    for new_key in (name, value):
        if new_key in keep_keys:
            raise InvalidSelectorError(f"Invalid key: {new_key!r} is a kept column")
    if name == value:
        raise InvalidSelectorError(f"Invalid key: {value!r} is also the name column")

    kept = [idx for idx, k in enumerate(frame.keys) if k in keep_keys]
    melted = [idx for idx, k in enumerate(frame.keys) if k not in keep_keys]
    logger.debug("Melting %d columns, keeping %d", len(melted), len(kept))

    kept_values: list[list[Any]] = [[] for _ in kept]
    names: list[str] = []
    values: list[Any] = []
    for record in frame.raw_records():
        for position, idx in enumerate(kept):
            kept_values[position].extend([record[idx]] * len(melted))
        for idx in melted:
            names.append(frame.keys[idx])
            values.append(record[idx])

    schema = frame.table.schema
    arrays = [pa.array(v, type=schema.field(idx).type) for v, idx in zip(kept_values, kept)]
    arrays.append(pa.array(names, type=pa.string()))
    arrays.append(merge_values(values, [schema.field(idx).type for idx in melted]))
    return frame.__class__.from_columns(
        dict(zip([frame.keys[idx] for idx in kept] + [name, value], arrays))
    )


def merge_values(values: list[Any], types: list[pa.DataType]) -> pa.Array:
    """Build one array out of values coming from columns of different types.

    Values keep their type when all the columns share it
    (dictionary columns provide their plain values),
    integers and floats are widened to ``double``, and any other
    mixture is converted to strings, formatted like the cells of
    a text table. Missing values stay missing.

    >>> merge_values([1, 0.5], [pa.int64(), pa.float64()]).to_pylist()
    [1.0, 0.5]
    >>> merge_values([1, "p", None], [pa.int64(), pa.string(), pa.string()]).to_pylist()
    ['1', 'p', None]
    """
    kinds = set(
        t.value_type if pat.is_dictionary(t) else t for t in types if not pat.is_null(t)
    )
    if not kinds:
        return pa.array(values, type=pa.null())
    elif len(kinds) == 1:
        return pa.array(values, type=kinds.pop())
    elif all(pat.is_integer(t) or pat.is_floating(t) for t in kinds):
        return pa.array(values, type=pa.float64())
    return pa.array(
        [None if v is None else format_cell(v) for v in values], type=pa.string()
    )
