"""The DataFrame object itself."""

from typing import Any, Iterable, Iterator, Mapping, Self

import pyarrow as pa
import pyarrow.csv
import pyarrow.parquet

from .. import display
from ..display.types import type_name
from ..errors import TypeMismatchError
from ..utils.naming import normalize_keys
from . import reshaping, selecting, statistics

ARROW_ERRORS = (pa.ArrowInvalid, pa.ArrowTypeError, pa.ArrowNotImplementedError)


class DataFrame:
    """Data structure that handles data in rows and columns.

    The DataFrame holds a :class:`pyarrow.Table` and is immutable,
    every operation returns a new DataFrame and never modifies
    the one it was invoked on.

    >>> df = DataFrame({"x": [1, 2, 3], "y": ["A", "B", "C"]})
    >>> df.shape
    (3, 2)
    >>> df[1, 2].to_dict()
    {'x': [2, 3], 'y': ['B', 'C']}
    >>> df["y"].keys
    ['y']

    Blank keys are replaced by ``unnamed1``, ``unnamed2``, ...

    >>> DataFrame({"": [1], "x": [2]}).keys
    ['unnamed1', 'x']
    """

    def __init__(self, data: "pa.Table | DataFrame | Mapping | None" = None) -> None:
        """
        :param data: A `pyarrow.Table`, another DataFrame, or a mapping
                     of column keys to their values. Nothing, or an
                     empty container, creates an empty DataFrame.
        """
        if data is None or (isinstance(data, (dict, list, tuple)) and not data):
            table = pa.table({})
        elif isinstance(data, pa.Table):
            table = data
        elif isinstance(data, pa.RecordBatch):
            table = pa.Table.from_batches([data])
        elif isinstance(data, DataFrame):
            table = data.table
        elif isinstance(data, Mapping):
            table = build_table(data)
        else:
            raise TypeMismatchError(
                f"Invalid input {type(data).__name__}, expected a pyarrow Table, "
                "a DataFrame or a mapping of columns"
            )

        keys = normalize_keys(table.column_names)
        if keys != table.column_names:
            table = table.rename_columns(keys)
        self._table = table

    @classmethod
    def from_columns(cls, columns: Mapping[str, Iterable[Any]]) -> Self:
        """Create a DataFrame from a mapping of keys to column values.

        Values can be any sequence of Python values or a pyarrow array,
        the type of each column is inferred by Arrow.
        """
        return cls(build_table(columns))

    @classmethod
    def from_rows(cls, schema: pa.Schema, rows: Iterable[Iterable[Any]]) -> Self:
        """Create a DataFrame from a schema and a list of rows.

        :param schema: The schema of the resulting table.
        :param rows: Each row provides one value per field of the schema.
        """
        rows = [list(row) for row in rows]
        if any(len(row) != len(schema) for row in rows):
            raise TypeMismatchError(f"Rows must provide {len(schema)} values")

        columns = [[row[idx] for row in rows] for idx in range(len(schema))]
        try:
            arrays = [pa.array(values, type=field.type) for values, field in zip(columns, schema)]
            return cls(pa.Table.from_arrays(arrays, schema=schema))
        except ARROW_ERRORS as e:
            raise TypeMismatchError(f"Rows don't match the schema: {e}") from e

    @classmethod
    def from_copy(cls, frame: "DataFrame") -> Self:
        """Create a DataFrame sharing the data of another one."""
        return cls(frame.table)

    @classmethod
    def empty(cls) -> Self:
        """Create a DataFrame without rows and columns."""
        return cls()

    @classmethod
    def load(cls, filename: str) -> Self:
        """Load a CSV or Parquet file and create a DataFrame out of its data.

        :param filename: The path to a local ``.csv`` or ``.parquet`` file.
        """
        if filename.endswith(".csv"):
            return cls(pa.csv.read_csv(filename))
        elif filename.endswith(".parquet"):
            return cls(pa.parquet.read_table(filename))
        raise NotImplementedError(f"File format not supported: {filename}")

    # Properties

    @property
    def table(self) -> pa.Table:
        """The `pyarrow.Table` holding the data."""
        return self._table

    @property
    def n_rows(self) -> int:
        return self._table.num_rows

    size = n_rows

    @property
    def n_columns(self) -> int:
        return self._table.num_columns

    width = n_columns

    @property
    def shape(self) -> tuple[int, int]:
        return self.n_rows, self.n_columns

    @property
    def keys(self) -> list[str]:
        """The keys of the columns, in order."""
        return self._table.column_names

    column_names = keys

    @property
    def types(self) -> list[str]:
        """The names of the column types, in order."""
        return [type_name(t) for t in self._table.schema.types]

    @property
    def vectors(self) -> list[pa.ChunkedArray]:
        """The columns, in order."""
        return self._table.columns

    def __len__(self) -> int:
        return self.n_rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataFrame):
            return NotImplemented
        return self.keys == other.keys and self._table.equals(other.table)

    __hash__ = None

    # Output

    def to_dict(self) -> dict[str, list[Any]]:
        """The columns as a ``{key: values}`` dictionary."""
        return {k: c.to_pylist() for k, c in zip(self.keys, self.vectors)}

    def to_list(self) -> list[tuple[str, list[Any]]]:
        """The columns as a list of ``(key, values)`` pairs."""
        return [(k, c.to_pylist()) for k, c in zip(self.keys, self.vectors)]

    def raw_records(self) -> list[list[Any]]:
        """The rows as lists of values, without the keys."""
        return [list(row) for row in zip(*(c.to_pylist() for c in self.vectors))]

    def each_row(self) -> Iterator[dict[str, Any]]:
        """Iterate over the rows as ``{key: value}`` dictionaries."""
        for record in self.raw_records():
            yield dict(zip(self.keys, record))

    def to_arrow(self) -> pa.Table:
        """The data as a `pyarrow.Table`."""
        return self._table

    # Selecting

    def __getitem__(self, selectors: Any) -> Self:
        """Select rows by position or columns by key.

        Rows can be selected by integer positions, ranges and slices,
        columns by their keys. Mixing rows and columns is not allowed.
        See :mod:`arrowframe.dataframe.selecting`.
        """
        if not isinstance(selectors, tuple):
            selectors = (selectors,)
        kind, values = selecting.normalize(selectors, self.n_rows)
        if kind == selecting.ROWS:
            return self.select_rows(values)
        return self.select_columns(values)

    def select_rows(self, positions: list[int]) -> Self:
        """Select the rows at the given positions, in order."""
        return selecting.select_rows(self, positions)

    def select_columns(self, keys: list[str]) -> Self:
        """Select the columns with the given keys, in order."""
        return selecting.select_columns(self, keys)

    def head(self, n_rows: int = 5) -> Self:
        """The first ``n_rows`` rows."""
        return selecting.head(self, n_rows)

    def tail(self, n_rows: int = 5) -> Self:
        """The last ``n_rows`` rows."""
        return selecting.tail(self, n_rows)

    def first(self, n_rows: int = 1) -> Self:
        return self.head(n_rows)

    def last(self, n_rows: int = 1) -> Self:
        return self.tail(n_rows)

    # Reshaping

    def transpose(self, key: str | None = None, new_key: str = "name") -> Self:
        """Swap rows and columns, see :func:`arrowframe.dataframe.reshaping.transpose`."""
        return reshaping.transpose(self, key, new_key)

    def to_long(self, *keep_keys: str, name: str = "name", value: str = "value") -> Self:
        """Melt to long form, see :func:`arrowframe.dataframe.reshaping.to_long`."""
        return reshaping.to_long(self, *keep_keys, name=name, value=value)

    # Statistics

    def summary(self) -> Self:
        """Descriptive statistics of the numeric columns."""
        return statistics.describe(self)

    describe = summary

    # Rendering

    def render(self, mode: display.RenderMode | str | None = None) -> str:
        """Render the frame as text, with the given or configured mode."""
        return display.render(self, mode)

    def summary_str(
        self, limit: int | str = 10, tally: int = 5, elements: int = 5
    ) -> str:
        """Render the summary of the frame, one line per column.

        :param limit: How many columns to show at most, or ``"all"``.
        :param tally: Up to how many distinct values a column is
                      shown as a tally of its values.
        :param elements: How many leading values to show for the other columns.
        """
        return display.SummaryRenderer(limit, tally, elements).render(self)

    def to_display_pair(self, mode: display.RenderMode | str | None = None) -> tuple[str, str]:
        """The ``(mime type, content)`` pair to show the frame in notebooks."""
        return display.display_pair(self, mode)

    def _repr_mimebundle_(self, include: Any = None, exclude: Any = None) -> dict[str, str]:
        mimetype, content = self.to_display_pair()
        return {mimetype: content}

    def __repr__(self) -> str:
        return self.render()


def build_table(columns: Mapping[Any, Iterable[Any]]) -> pa.Table:
    """Build a `pyarrow.Table` out of a mapping of keys to values."""
    names = normalize_keys(list(columns.keys()))
    try:
        arrays = [
            values if isinstance(values, (pa.Array, pa.ChunkedArray)) else pa.array(list(values))
            for values in columns.values()
        ]
        return pa.Table.from_arrays(arrays, names=names)
    except ARROW_ERRORS as e:
        raise TypeMismatchError(f"Invalid columns: {e}") from e
    except TypeError as e:
        raise TypeMismatchError(f"Invalid column values: {e}") from e
