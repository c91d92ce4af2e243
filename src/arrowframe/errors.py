"""Errors raised by arrowframe operations.

All the errors are raised synchronously by the operation
that detected the problem, and no operation ever returns
a partial result: either a complete new :class:`arrowframe.DataFrame`
is returned or an error is raised.

Each error also inherits from the closest builtin exception,
so that code written against plain Python containers
(catching ``KeyError`` or ``IndexError``) keeps working.
"""


class FrameError(Exception):
    """Base class for all errors raised by arrowframe."""

    pass


class InvalidSelectorError(FrameError, ValueError):
    """The selection or reshape arguments can't be interpreted.

    Raised for empty or mixed selector lists, negative
    row counts and reshape keys that are not allowed.
    """

    pass


class UnknownColumnError(FrameError, KeyError):
    """A referenced column key does not exist in the DataFrame."""

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise.
        return str(self.args[0]) if self.args else ""


class IndexOutOfRangeError(FrameError, IndexError):
    """A row position is outside of ``[-n_rows, n_rows)``."""

    pass


class TypeMismatchError(FrameError, TypeError):
    """The data provided to build a DataFrame has an unsupported shape."""

    pass
