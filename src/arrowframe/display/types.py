"""Classify Arrow data types into display groups.

When summarising a DataFrame it's more useful to know that it holds
"2 numeric, 1 string" columns than to know that it holds an ``int8``,
a ``double`` and a ``large_string`` column. This module maps each
:class:`pyarrow.DataType` to one of a few :class:`TypeGroup` values
and provides the short type names shown by the renderers.
"""

import enum
from collections import Counter
from typing import Iterable

import pyarrow as pa
import pyarrow.types as pat


class TypeGroup(enum.Enum):
    """Display group of a column type.

    The order of the members is the order in which
    groups are listed in the summary output.
    """

    NUMERIC = "numeric"
    STRING = "string"
    BOOLEAN = "boolean"
    DICTIONARY = "dictionary"
    TEMPORAL = "temporal"
    OTHER = "other"


def classify(datatype: pa.DataType) -> TypeGroup:
    """Map a declared column type to its display group.

    >>> classify(pa.int8())
    <TypeGroup.NUMERIC: 'numeric'>
    >>> classify(pa.large_string())
    <TypeGroup.STRING: 'string'>
    """
    if pat.is_integer(datatype) or pat.is_floating(datatype) or pat.is_decimal(datatype):
        return TypeGroup.NUMERIC
    elif pat.is_string(datatype) or pat.is_large_string(datatype):
        return TypeGroup.STRING
    elif pat.is_boolean(datatype):
        return TypeGroup.BOOLEAN
    elif pat.is_dictionary(datatype):
        return TypeGroup.DICTIONARY
    elif pat.is_temporal(datatype):
        return TypeGroup.TEMPORAL
    return TypeGroup.OTHER


def is_numeric(datatype: pa.DataType) -> bool:
    """If the type is one of the numeric types."""
    return classify(datatype) is TypeGroup.NUMERIC


def group_counts(datatypes: Iterable[pa.DataType]) -> str:
    """Count the types in each group, like ``"2 numeric, 1 string"``.

    Groups without any column are omitted.
    """
    counts = Counter(classify(t) for t in datatypes)
    return ", ".join(
        f"{counts[group]} {group.value}" for group in TypeGroup if counts[group]
    )


def type_name(datatype: pa.DataType) -> str:
    """Short name of a type, as shown in the rendered output.

    Parametric types are shown only by their family name.

    >>> type_name(pa.int64())
    'int64'
    >>> type_name(pa.timestamp("s"))
    'timestamp'
    >>> type_name(pa.dictionary(pa.int32(), pa.string()))
    'dictionary'
    """
    if pat.is_dictionary(datatype):
        return "dictionary"
    elif pat.is_timestamp(datatype):
        return "timestamp"
    elif pat.is_date32(datatype):
        return "date32"
    elif pat.is_date64(datatype):
        return "date64"
    elif pat.is_time(datatype):
        return "time"
    elif pat.is_duration(datatype):
        return "duration"
    elif pat.is_decimal(datatype):
        return "decimal"
    elif pat.is_list(datatype) or pat.is_large_list(datatype):
        return "list"
    elif pat.is_struct(datatype):
        return "struct"
    return str(datatype)
