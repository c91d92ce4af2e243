"""Base classes and helpers shared by the renderers.

A renderer converts a DataFrame of any size into a bounded text.
To keep the output bounded, renderers only show a leading and a trailing
block of rows (and columns) when the frame is larger than their limits,
and mark the omitted part with an ellipsis::

    0, 1, 2, 3, 4, <ellipsis>, 7, 8, 9

The :func:`truncate` function computes which positions are shown,
using ``None`` as the position of the ellipsis.
"""

import abc
from typing import TYPE_CHECKING

import pyarrow as pa

from ..utils.naming import pluralize

if TYPE_CHECKING:
    from ..dataframe import DataFrame


class Renderer(abc.ABC):
    """Render a DataFrame to text.

    Renderers are configured by their limits at construction time
    and the output of :meth:`render` only depends on the content
    of the rendered frame, so the same renderer can be used for
    any number of frames.
    """

    @abc.abstractmethod
    def render(self, frame: "DataFrame") -> str:
        """Produce the text representation of the frame."""
        ...


def frame_name(frame: "DataFrame") -> str:
    """Name of the frame class, as shown by the renderers."""
    return frame.__class__.__name__


def shape_str(frame: "DataFrame") -> str:
    """Describe the size of a frame, like ``6 x 4 Vectors``."""
    if frame.n_columns == 0:
        return "(empty)"
    return f"{frame.n_rows} x {pluralize(frame.n_columns, 'Vector')}"


def header(frame: "DataFrame") -> str:
    """The first line of the text renderers, like ``DataFrame : 6 x 4 Vectors``."""
    return f"{frame_name(frame)} : {shape_str(frame)}"


def truncate(count: int, limit: int, head: int, tail: int) -> list[int | None]:
    """Pick the positions to show out of ``count``.

    When ``count`` exceeds ``limit`` only the first ``head`` and
    the last ``tail`` positions are shown, with ``None`` in between.

    >>> truncate(10, 8, 5, 3)
    [0, 1, 2, 3, 4, None, 7, 8, 9]
    >>> truncate(3, 8, 5, 3)
    [0, 1, 2]
    """
    if count <= limit:
        return list(range(count))
    return list(range(head)) + [None] + list(range(count - tail, count))


def take_rows(table: pa.Table, positions: list[int | None]) -> pa.Table:
    """Take from the table only the rows that are going to be shown."""
    return table.take([p for p in positions if p is not None])
