import pytest

from arrowframe import DataFrame

TEST_DATA = {"integers": [2, 3, 5, 7], "floats": [2.0, 3.0, 5.0, 7.0]}


@pytest.fixture
def stats():
    return DataFrame(TEST_DATA).summary()


def test_summary_keys(stats):
    assert stats.keys == [
        "variables",
        "count",
        "mean",
        "std",
        "min",
        "25%",
        "median",
        "75%",
        "max",
    ]
    assert stats.types[:3] == ["dictionary", "int64", "double"]


@pytest.mark.parametrize(
    "statistic,expected",
    [
        ("count", 4),
        ("mean", 4.25),
        ("std", 2.217355782608345),
        ("min", 2.0),
        ("25%", 2.75),
        ("median", 4.0),
        ("75%", 5.5),
        ("max", 7.0),
    ],
)
def test_summary_values(stats, statistic, expected):
    assert stats.to_dict()[statistic] == [pytest.approx(expected)] * 2


def test_summary_variables(stats):
    assert stats.to_dict()["variables"] == ["integers", "floats"]


def test_describe_alias():
    df = DataFrame(TEST_DATA)
    assert df.describe() == df.summary()


def test_summary_skips_non_numeric():
    df = DataFrame({"name": ["a", "b"], "value": [1, None]})
    stats = df.summary()
    assert stats.n_rows == 1
    assert stats.to_dict()["variables"] == ["value"]
    assert stats.to_dict()["count"] == [1]
    assert stats.to_dict()["max"] == [1.0]


def test_summary_without_numeric_columns():
    assert DataFrame({"name": ["a", "b"]}).summary().shape == (0, 0)


def test_summary_of_summary(stats):
    lines = stats.summary_str().splitlines()
    assert lines[0] == "DataFrame : 2 x 9 Vectors"
    assert lines[1] == "Vectors : 8 numeric, 1 dictionary"
    assert lines[2] == "# key       type       level data_preview"
    assert lines[3] == '0 variables dictionary     2 ["integers", "floats"]'
    assert lines[4] == "1 count     int64          1 {4: 2}"
    assert lines[8] == '5 "25%"     double         1 {2.75: 2}'
