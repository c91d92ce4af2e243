"""Dataframe library built on top of Apache Arrow.

A dataframe library is a tool designed to handle and manipulate structured data,
typically in the form of tables (i.e., rows and columns).
It allows users to load data from various sources (like CSV files or databases),
explore it, reshape it, and analyze it.

The arrowframe :class:`DataFrame` keeps its data in a :class:`pyarrow.Table`,
Arrow is in charge of storing the columns, loading files and computing
statistics, while the DataFrame provides:

* Selection of rows and columns, see :mod:`arrowframe.dataframe.selecting`.
* Reshaping between wide and long forms, see :mod:`arrowframe.dataframe.reshaping`.
* Descriptive statistics, see :mod:`arrowframe.dataframe.statistics`.
* Bounded representations for terminals and notebooks, see :mod:`arrowframe.display`.
"""

from .dataframe import DataFrame

__all__ = ("DataFrame",)
