"""Generic utilities and helpers.

This is a collection of generic utilities and helpers
that can be helpful in the other parts of the codebase
and are not specifically bound or related to any component.

Usually this will be generic Python utilities that could work
in any Python project, like picking a free name or
laying out text in aligned columns.
"""

from . import naming, tabulate

__all__ = ("naming", "tabulate")
