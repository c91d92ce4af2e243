"""arrowframe

An immutable, columnar DataFrame built on top of Apache Arrow.

arrowframe focuses on looking at data: selecting rows and columns,
reshaping frames between wide and long forms, and rendering
frames of any size into a bounded, readable representation.

The platform is constituted by multiple components, each isolated within its own
package and each self documented:

* The Dataframe API, in :mod:`arrowframe.dataframe`, which provides
  construction, selection, reshaping and statistics.
* The Display engine, in :mod:`arrowframe.display`, which renders
  frames as text tables, summaries or HTML.
* The ``arrowframe-fview`` command, in :mod:`arrowframe.commands`,
  to look at CSV and Parquet files from the shell.

>>> from arrowframe import DataFrame
>>> df = DataFrame({"city": ["Rome", "Milan"], "shops": [10, 8]})
>>> print(df.render("minimal"))
DataFrame : 2 x 2 Vectors
"""

from . import display
from .dataframe import DataFrame
from .display import RenderMode
from .errors import (
    FrameError,
    IndexOutOfRangeError,
    InvalidSelectorError,
    TypeMismatchError,
    UnknownColumnError,
)

__all__ = (
    "DataFrame",
    "RenderMode",
    "display",
    "FrameError",
    "IndexOutOfRangeError",
    "InvalidSelectorError",
    "TypeMismatchError",
    "UnknownColumnError",
)
