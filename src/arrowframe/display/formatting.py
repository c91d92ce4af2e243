"""Format scalar values for display.

Values extracted from Arrow columns are plain Python objects
(``int``, ``float``, ``str``, ``bool``, ``datetime``, ``None``).
Each renderer needs to show them in a slightly different way:

* Previews and tallies show them as literals, so that
  a missing value (``nil``) can be told apart from
  the string ``"nil"`` or the empty string ``""``.
* Text tables show them bare, with ``(nil)`` for missing values.
* HTML tables show them escaped, with special markers
  for booleans, missing values and blank strings.

Floats share the same special values everywhere::

    NaN, Infinity, -Infinity
"""

import html
import math
from typing import Any, Iterable

ELLIPSIS = "... "


def format_float(value: float) -> str:
    """Format a float using ``NaN`` and ``Infinity`` for special values.

    >>> format_float(float("-inf"))
    '-Infinity'
    >>> format_float(39.1)
    '39.1'
    """
    if math.isnan(value):
        return "NaN"
    elif math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def quote_string(value: str) -> str:
    """Quote a string with double quotes, escaping quotes and backslashes."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_literal(value: Any) -> str:
    """Format a value as a literal for previews and tallies.

    >>> [format_literal(v) for v in [1, 1.0, float("nan"), None, "", True]]
    ['1', '1.0', 'NaN', 'nil', '""', 'true']
    """
    if value is None:
        return "nil"
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, float):
        return format_float(value)
    elif isinstance(value, str):
        return quote_string(value)
    elif isinstance(value, list):
        return "[" + ", ".join(format_literal(v) for v in value) + "]"
    elif isinstance(value, dict):
        return "{" + ", ".join(
            f"{format_literal(k)}: {format_literal(v)}" for k, v in value.items()
        ) + "}"
    return str(value)


def format_cell(value: Any) -> str:
    """Format a value for a cell of a text table."""
    if value is None:
        return "(nil)"
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, float):
        return format_float(value)
    elif isinstance(value, (list, dict)):
        return format_literal(value)
    return str(value)


def escape(text: str) -> str:
    """Escape text for HTML content, keys and cells alike.

    Only ``&``, ``<`` and ``>`` are escaped, quotes are left as they are.

    >>> escape('"a" & <b>')
    '"a" &amp; &lt;b&gt;'
    """
    return html.escape(text, quote=False)


def format_html_cell(value: Any) -> str:
    """Format a value for a cell of an HTML table.

    >>> [format_html_cell(v) for v in [2.0, 12.5, "", " ", "a<b", False, None]]
    ['2', '12.5', '""', '" "', 'a&lt;b', '<i>(false)</i>', '<i>(nil)</i>']
    """
    if value is None:
        return "<i>(nil)</i>"
    elif isinstance(value, bool):
        return "<i>(true)</i>" if value else "<i>(false)</i>"
    elif isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return format_float(value)
    elif isinstance(value, str) and not value.strip():
        return f'"{value}"'
    return escape(str(value))


def format_preview(values: Iterable[Any], complete: bool) -> str:
    """Format the leading values of a column as a list literal.

    When the values don't cover the whole column,
    an ellipsis marks the preview as incomplete.

    >>> format_preview([1, 2, 3], complete=False)
    '[1, 2, 3, ... ]'
    """
    items = [format_literal(v) for v in values]
    if not complete:
        items.append(ELLIPSIS)
    return "[" + ", ".join(items) + "]"


def format_tally(tally: Iterable[tuple[Any, int]]) -> str:
    """Format a value to occurrences tally as a mapping literal.

    >>> format_tally([("A", 2), (None, 1)])
    '{"A": 2, nil: 1}'
    """
    return "{" + ", ".join(f"{format_literal(v)}: {n}" for v, n in tally) + "}"
