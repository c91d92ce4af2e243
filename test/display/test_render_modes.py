import logging

import pytest

from arrowframe import DataFrame, RenderMode
from arrowframe.display import (
    HtmlRenderer,
    MinimalRenderer,
    SummaryRenderer,
    TableRenderer,
    current_mode,
    parse_mode,
    renderer_for,
    resolve_mode,
)
from arrowframe.display.modes import ENVIRON_KEY

SIMPLE_DATA = {"x": [1, 2, float("nan")], "y": ["", " ", None], "z": [True, False, None]}


@pytest.fixture
def df():
    return DataFrame(SIMPLE_DATA)


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, RenderMode.TABLE),
        ("", RenderMode.TABLE),
        ("table", RenderMode.TABLE),
        ("PLAIN", RenderMode.TABLE),
        ("Summary", RenderMode.SUMMARY),
        ("TDR", RenderMode.SUMMARY),
        ("minimal", RenderMode.MINIMAL),
        ("Minimum", RenderMode.MINIMAL),
        (" html ", RenderMode.HTML),
    ],
)
def test_parse_mode(value, expected):
    assert parse_mode(value) is expected


def test_unrecognized_mode(caplog):
    with caplog.at_level(logging.WARNING):
        assert parse_mode("fancy") is RenderMode.TABLE
    assert "fancy" in caplog.text


def test_current_mode(monkeypatch):
    monkeypatch.delenv(ENVIRON_KEY, raising=False)
    assert current_mode() is RenderMode.TABLE
    monkeypatch.setenv(ENVIRON_KEY, "tdr")
    assert current_mode() is RenderMode.SUMMARY


def test_explicit_mode_wins(monkeypatch):
    monkeypatch.setenv(ENVIRON_KEY, "html")
    assert resolve_mode(RenderMode.MINIMAL) is RenderMode.MINIMAL
    assert resolve_mode("summary") is RenderMode.SUMMARY
    assert resolve_mode() is RenderMode.HTML


@pytest.mark.parametrize(
    "mode,renderer_class",
    [
        (RenderMode.TABLE, TableRenderer),
        (RenderMode.SUMMARY, SummaryRenderer),
        (RenderMode.MINIMAL, MinimalRenderer),
        (RenderMode.HTML, HtmlRenderer),
    ],
)
def test_renderer_for(mode, renderer_class):
    assert isinstance(renderer_for(mode), renderer_class)


def test_repr_follows_environment(monkeypatch, df):
    monkeypatch.setenv(ENVIRON_KEY, "minimal")
    assert repr(df) == "DataFrame : 3 x 3 Vectors"
    monkeypatch.setenv(ENVIRON_KEY, "summary")
    assert repr(df) == SummaryRenderer().render(df)
    monkeypatch.setenv(ENVIRON_KEY, "unknown")
    assert repr(df) == TableRenderer().render(df)


def test_minimal(df):
    assert df.render(RenderMode.MINIMAL) == "DataFrame : 3 x 3 Vectors"
    assert DataFrame({"x": list(range(10))}).render("minimal") == "DataFrame : 10 x 1 Vector"
    assert DataFrame().render("minimal") == "DataFrame : (empty)"


def test_subclass_name(df):
    class Shops(DataFrame):
        pass

    assert Shops(df).render("minimal") == "Shops : 3 x 3 Vectors"
    assert isinstance(Shops(df).head(1), Shops)


@pytest.mark.parametrize("mode", list(RenderMode))
def test_display_pair_empty(mode):
    assert DataFrame().to_display_pair(mode) == ("text/plain", "(empty DataFrame)")


def test_display_pair_html(df):
    mimetype, content = df.to_display_pair(RenderMode.HTML)
    assert mimetype == "text/html"
    assert content.startswith("DataFrame <3 x 3 vectors> <table>")


def test_display_pair_table(df):
    assert df.to_display_pair(RenderMode.TABLE) == (
        "text/plain",
        "DataFrame : 3 x 3 Vectors\n"
        "         x y        z\n"
        "  <double> <string> <bool>\n"
        "0      1.0          true\n"
        "1      2.0          false\n"
        "2      NaN (nil)    (nil)\n",
    )


def test_display_pair_minimal(df):
    assert df.to_display_pair(RenderMode.MINIMAL) == ("text/plain", "DataFrame : 3 x 3 Vectors")


def test_display_pair_summary(df):
    assert df.to_display_pair(RenderMode.SUMMARY) == ("text/plain", df.summary_str())


def test_mimebundle(monkeypatch, df):
    monkeypatch.setenv(ENVIRON_KEY, "html")
    bundle = df._repr_mimebundle_()
    assert list(bundle) == ["text/html"]
    monkeypatch.setenv(ENVIRON_KEY, "minimal")
    assert df._repr_mimebundle_() == {"text/plain": "DataFrame : 3 x 3 Vectors"}
