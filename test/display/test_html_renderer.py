from arrowframe import DataFrame, RenderMode
from arrowframe.display import HtmlRenderer


def test_simple():
    df = DataFrame({"x": [1, 2, float("nan")], "y": ["", " ", None], "z": [True, False, None]})
    assert HtmlRenderer().render(df) == (
        "DataFrame <3 x 3 vectors> <table>"
        "<tr><th>x</th><th>y</th><th>z</th></tr>"
        '<tr><td>1</td><td>""</td><td><i>(true)</i></td></tr>'
        '<tr><td>2</td><td>" "</td><td><i>(false)</i></td></tr>'
        "<tr><td>NaN</td><td><i>(nil)</i></td><td><i>(nil)</i></td></tr>"
        "</table>"
    )


def test_long():
    df = DataFrame({"x": list(range(1, 11))})
    assert HtmlRenderer().render(df) == (
        "DataFrame <10 x 1 vector> <table><tr><th>x</th></tr>"
        "<tr><td>1</td></tr><tr><td>2</td></tr><tr><td>3</td></tr><tr><td>4</td></tr>"
        "<tr><td>&#8942;</td></tr>"
        "<tr><td>8</td></tr><tr><td>9</td></tr><tr><td>10</td></tr></table>"
    )


def test_wide():
    df = DataFrame({chr(64 + i): [i] for i in range(1, 17)})
    shown = [c for c in "ABCDEFG"] + ["&#8230;"] + [c for c in "JKLMNOP"]
    values = [str(i) for i in range(1, 8)] + ["&#8230;"] + [str(i) for i in range(10, 17)]
    assert HtmlRenderer().render(df) == (
        "DataFrame <1 x 16 vectors> <table>"
        + "<tr>" + "".join(f"<th>{c}</th>" for c in shown) + "</tr>"
        + "<tr>" + "".join(f"<td>{v}</td>" for v in values) + "</tr>"
        + "</table>"
    )


def test_long_and_wide():
    df = DataFrame({k: list(range(3)) for k in "abc"})
    renderer = HtmlRenderer(max_rows=2, head_rows=1, tail_rows=1, max_columns=2, head_columns=1, tail_columns=1)
    assert renderer.render(df) == (
        "DataFrame <3 x 3 vectors> <table>"
        "<tr><th>a</th><th>&#8230;</th><th>c</th></tr>"
        "<tr><td>0</td><td>&#8230;</td><td>0</td></tr>"
        "<tr><td>&#8942;</td><td>&#8942;</td><td>&#8942;</td></tr>"
        "<tr><td>2</td><td>&#8230;</td><td>2</td></tr>"
        "</table>"
    )


def test_numeric_digits():
    df = DataFrame(
        {
            "digits": [
                123_456,
                12_345.6,
                1_234.56,
                123.456,
                12.3456,
                1.23456,
                0.123456,
                0.0123456,
                0.00123456,
            ]
        }
    )
    assert HtmlRenderer().render(df) == (
        "DataFrame <9 x 1 vector> <table><tr><th>digits</th></tr>"
        "<tr><td>123456</td></tr><tr><td>12345.6</td></tr>"
        "<tr><td>1234.56</td></tr><tr><td>123.456</td></tr>"
        "<tr><td>&#8942;</td></tr>"
        "<tr><td>0.123456</td></tr><tr><td>0.0123456</td></tr>"
        "<tr><td>0.00123456</td></tr></table>"
    )


def test_blank_spaces():
    df = DataFrame({"str": ["", " ", "two words"]})
    assert HtmlRenderer().render(df) == (
        "DataFrame <3 x 1 vector> <table><tr><th>str</th></tr>"
        '<tr><td>""</td></tr><tr><td>" "</td></tr><tr><td>two words</td></tr></table>'
    )


def test_escaping():
    df = DataFrame({"<a>": ["x & y"]})
    assert HtmlRenderer().render(df) == (
        "DataFrame <1 x 1 vector> <table><tr><th>&lt;a&gt;</th></tr>"
        "<tr><td>x &amp; y</td></tr></table>"
    )


def test_empty():
    assert HtmlRenderer().render(DataFrame()) == "(empty DataFrame)"


def test_idempotent():
    df = DataFrame({"x": [1, 2, 3]})
    assert df.render(RenderMode.HTML) == df.render(RenderMode.HTML)


def test_keys_and_cells_escape_alike():
    df = DataFrame({'say "hi" & <go>': ['say "hi" & <go>']})
    assert HtmlRenderer().render(df) == (
        "DataFrame <1 x 1 vector> <table>"
        '<tr><th>say "hi" &amp; &lt;go&gt;</th></tr>'
        '<tr><td>say "hi" &amp; &lt;go&gt;</td></tr>'
        "</table>"
    )
