"""Select how DataFrames are rendered.

The render mode is a process wide setting provided through the
``ARROWFRAME_OUTPUT_MODE`` environment variable. It is looked up
every time a frame is rendered, so changing the variable affects
all the following renders, and DataFrames themselves never
carry any mode::

    $ ARROWFRAME_OUTPUT_MODE=summary python -c "..."

Explicitly passing a mode to the render functions always takes
precedence over the environment.
"""

import enum
import logging
import os

logger = logging.getLogger(__name__)

ENVIRON_KEY = "ARROWFRAME_OUTPUT_MODE"


class RenderMode(enum.Enum):
    """The available output strategies."""

    TABLE = "table"
    SUMMARY = "summary"
    MINIMAL = "minimal"
    HTML = "html"


ALIASES = {
    "table": RenderMode.TABLE,
    "plain": RenderMode.TABLE,
    "summary": RenderMode.SUMMARY,
    "tdr": RenderMode.SUMMARY,
    "minimal": RenderMode.MINIMAL,
    "minimum": RenderMode.MINIMAL,
    "html": RenderMode.HTML,
}


def parse_mode(value: str | None) -> RenderMode:
    """Convert a configuration value to a :class:`RenderMode`.

    Missing or unrecognized values fall back to ``RenderMode.TABLE``.

    >>> parse_mode("TDR")
    <RenderMode.SUMMARY: 'summary'>
    >>> parse_mode("nonsense")
    <RenderMode.TABLE: 'table'>
    """
    if value is None or not value.strip():
        return RenderMode.TABLE

    mode = ALIASES.get(value.strip().lower())
    if mode is None:
        logger.warning("Unrecognized %s=%r, using table mode", ENVIRON_KEY, value)
        return RenderMode.TABLE
    return mode


def current_mode() -> RenderMode:
    """Read the render mode from the environment."""
    return parse_mode(os.environ.get(ENVIRON_KEY))


def resolve_mode(mode: RenderMode | str | None = None) -> RenderMode:
    """Pick the explicitly requested mode, or the configured one."""
    if mode is None:
        return current_mode()
    elif isinstance(mode, RenderMode):
        return mode
    return parse_mode(mode)
