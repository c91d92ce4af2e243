import pyarrow as pa
import pytest

from arrowframe import (
    DataFrame,
    IndexOutOfRangeError,
    InvalidSelectorError,
    UnknownColumnError,
)
from arrowframe.dataframe.selecting import COLUMNS, ROWS, expand, flatten, normalize


@pytest.fixture
def df():
    """Five rows with an integer, a string and a float column."""
    return DataFrame(
        {
            "a": [0, 1, 2, 3, 4],
            "b": ["A", "B", "C", "D", "E"],
            "c": [0.0, 0.1, 0.2, 0.3, 0.4],
        }
    )


@pytest.fixture
def df10():
    return DataFrame({"x": list(range(10))})


def test_flatten():
    assert flatten([1, [2, (3, 4)], "a"]) == [1, 2, 3, 4, "a"]


def test_expand_preserves_order_and_duplicates():
    assert expand([range(3, 0, -1), 2, range(1, 3)], n_rows=5) == [3, 2, 1, 2, 1, 2]


def test_expand_slices():
    assert expand([slice(None, 2), slice(-1, None)], n_rows=5) == [0, 1, 4]


@pytest.mark.parametrize(
    "selectors,expected",
    [
        ([1, 2], (ROWS, [1, 2])),
        ([range(1, 4), 4], (ROWS, [1, 2, 3, 4])),
        ([-1], (ROWS, [-1])),
        (["a"], (COLUMNS, ["a"])),
        ([["a", "b"]], (COLUMNS, ["a", "b"])),
        ([range(0)], (ROWS, [])),
    ],
)
def test_normalize(selectors, expected):
    assert normalize(selectors, n_rows=5) == expected


@pytest.mark.parametrize("selectors", [[], [[]], [1, "a"], [True], [1.5], [None]])
def test_normalize_invalid(selectors):
    with pytest.raises(InvalidSelectorError):
        normalize(selectors, n_rows=5)


def test_select_rows(df):
    result = df[1, 3]
    assert result.to_dict() == {"a": [1, 3], "b": ["B", "D"], "c": [0.1, 0.3]}
    assert result.table.schema == df.table.schema


def test_select_rows_property(df):
    positions = [4, 0, 0, -1, 2, -5]
    result = df.select_rows(positions)
    assert result.n_rows == len(positions)
    records = df.raw_records()
    assert result.raw_records() == [records[p] for p in positions]


def test_select_range_and_index(df):
    """frame[1..3, 4] selects rows 1, 2, 3 and 4."""
    assert df[range(1, 4), 4] == df[[1, 2, 3, 4]]


def test_select_negative_range(df10):
    """frame[-3..-1] selects the last three rows in order."""
    assert df10[range(-3, 0)].to_dict() == {"x": [7, 8, 9]}


def test_select_slice(df10):
    assert df10[2:5].to_dict() == {"x": [2, 3, 4]}
    assert df10[::4].to_dict() == {"x": [0, 4, 8]}
    assert df10[-2:].to_dict() == {"x": [8, 9]}


def test_select_empty_range(df):
    result = df[range(0)]
    assert result.shape == (0, 3)
    assert result.table.schema == df.table.schema


@pytest.mark.parametrize("positions", [[5], [0, 5], [-6], [100]])
def test_select_rows_out_of_range(df, positions):
    with pytest.raises(IndexOutOfRangeError):
        df[positions]


def test_select_rows_out_of_range_is_index_error(df):
    with pytest.raises(IndexError):
        df[5]


def test_select_rows_on_empty_frame():
    with pytest.raises(IndexOutOfRangeError):
        DataFrame()[0]


def test_select_columns(df):
    result = df["c", "a"]
    assert result.keys == ["c", "a"]
    assert result.types == ["double", "int64"]
    assert result.to_dict() == {"c": df.to_dict()["c"], "a": df.to_dict()["a"]}


def test_select_single_column(df):
    assert df["b"].to_dict() == {"b": ["A", "B", "C", "D", "E"]}


def test_select_repeated_columns(df):
    result = df["a", "b", "a"]
    assert result.keys == ["a", "b", "a"]
    assert result.n_columns == 3
    assert result.raw_records()[0] == [0, "A", 0]


def test_select_unknown_column(df):
    with pytest.raises(UnknownColumnError) as err:
        df["a", "z"]
    assert "z" in str(err.value)


def test_unknown_column_is_key_error(df):
    with pytest.raises(KeyError):
        df["z"]


@pytest.mark.parametrize("selectors", [(1, "a"), (), ([],), (1.0,)])
def test_invalid_selectors(df, selectors):
    with pytest.raises(InvalidSelectorError):
        df[selectors]


def test_select_rows_keeps_types():
    df = DataFrame({"x": pa.array([1, None, 3], type=pa.int8()), "y": [True, None, False]})
    result = df[2, 1]
    assert result.types == ["int8", "bool"]
    assert result.to_dict() == {"x": [3, None], "y": [False, None]}


@pytest.mark.parametrize("n", [0, 1, 3, 5, 10])
def test_head(df, n):
    assert df.head(n) == df.select_rows(list(range(min(n, 5))))


@pytest.mark.parametrize("n", [0, 1, 3, 5, 10])
def test_tail(df, n):
    n_rows = min(n, 5)
    assert df.tail(n) == df.select_rows(list(range(5 - n_rows, 5)))


def test_head_tail_defaults(df10):
    assert df10.head().to_dict() == {"x": [0, 1, 2, 3, 4]}
    assert df10.tail().to_dict() == {"x": [5, 6, 7, 8, 9]}
    assert df10.first().to_dict() == {"x": [0]}
    assert df10.last().to_dict() == {"x": [9]}
    assert df10.first(2).to_dict() == {"x": [0, 1]}
    assert df10.last(2).to_dict() == {"x": [8, 9]}


@pytest.mark.parametrize("n", [0, 2, 4])
@pytest.mark.parametrize("m", [0, 1, 4])
def test_head_then_tail(df, n, m):
    expected_rows = list(range(n))[len(range(n)) - min(m, n) :]
    assert df.head(n).tail(m) == df.select_rows(expected_rows)


@pytest.mark.parametrize("method", ["head", "tail", "first", "last"])
def test_negative_count(df, method):
    with pytest.raises(InvalidSelectorError):
        getattr(df, method)(-1)
