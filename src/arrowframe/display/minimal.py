"""Render a DataFrame as a single line with its shape."""

from typing import TYPE_CHECKING

from .base import Renderer, header

if TYPE_CHECKING:
    from ..dataframe import DataFrame


class MinimalRenderer(Renderer):
    """Render only the shape of a frame, like ``DataFrame : 6 x 4 Vectors``.

    Frames without columns are rendered as ``DataFrame : (empty)``.
    """

    def render(self, frame: "DataFrame") -> str:
        return header(frame)
