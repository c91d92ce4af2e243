"""Rendering of DataFrames to text and HTML.

A DataFrame can contain any number of rows and columns,
but its representation must always be bounded and readable.
This package provides four output strategies, each implemented
by a :class:`arrowframe.display.base.Renderer`:

* :class:`TableRenderer`, an aligned text table, the default.
* :class:`SummaryRenderer`, one line per column with its type,
  its level and a preview of its values.
* :class:`MinimalRenderer`, just the shape of the frame.
* :class:`HtmlRenderer`, an HTML table for notebooks.

Which one is used by ``repr()`` is decided by the
:class:`RenderMode`, which is read from the environment
at every render (see :mod:`arrowframe.display.modes`)::

    >>> from arrowframe import DataFrame
    >>> df = DataFrame({"x": [1, 2, 3]})
    >>> render(df, RenderMode.MINIMAL)
    'DataFrame : 3 x 1 Vector'
    >>> display_pair(DataFrame(), RenderMode.HTML)
    ('text/plain', '(empty DataFrame)')
"""

import logging
from typing import TYPE_CHECKING

from .base import Renderer
from .html import EMPTY, HtmlRenderer
from .minimal import MinimalRenderer
from .modes import RenderMode, current_mode, parse_mode, resolve_mode
from .summary import ALL, SummaryRenderer
from .table import TableRenderer

if TYPE_CHECKING:
    from ..dataframe import DataFrame

logger = logging.getLogger(__name__)

__all__ = (
    "ALL",
    "Renderer",
    "RenderMode",
    "TableRenderer",
    "SummaryRenderer",
    "MinimalRenderer",
    "HtmlRenderer",
    "current_mode",
    "parse_mode",
    "resolve_mode",
    "renderer_for",
    "render",
    "display_pair",
)

RENDERERS = {
    RenderMode.TABLE: TableRenderer,
    RenderMode.SUMMARY: SummaryRenderer,
    RenderMode.MINIMAL: MinimalRenderer,
    RenderMode.HTML: HtmlRenderer,
}


def renderer_for(mode: RenderMode) -> Renderer:
    """Build the renderer for a mode, with its default limits."""
    return RENDERERS[mode]()


def render(frame: "DataFrame", mode: RenderMode | str | None = None) -> str:
    """Render a frame with the requested or configured mode."""
    mode = resolve_mode(mode)
    logger.debug("Rendering %s in %s mode", frame.shape, mode.value)
    return renderer_for(mode).render(frame)


def display_pair(
    frame: "DataFrame", mode: RenderMode | str | None = None
) -> tuple[str, str]:
    """Provide the ``(mime type, content)`` pair for notebook hosts.

    Frames without columns are always shown as plain text.
    """
    if frame.n_columns == 0:
        return "text/plain", EMPTY

    mode = resolve_mode(mode)
    if mode is RenderMode.HTML:
        return "text/html", render(frame, mode)
    return "text/plain", render(frame, mode)
