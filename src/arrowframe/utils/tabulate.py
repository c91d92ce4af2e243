"""Lay out text cells into aligned columns.

The ``tabulate`` function takes rows of already formatted cells
and pads each column to its widest cell, aligning each column
to the left or to the right. Trailing whitespace is stripped,
so that the last column never leaves padding behind.

Example:

    >>> print(tabulate([["Product", "Quantity"], ["Videogame", "8"], ["Laptop", "17"]],
    ...                align=["<", ">"]))
    Product   Quantity
    Videogame        8
    Laptop          17
"""

LEFT = "<"
RIGHT = ">"


def tabulate(rows: list[list[str]], align: list[str], separator: str = " ") -> str:
    """Format rows of text cells into a text table.

    :param rows: The rows of the table, each row with the same number of cells.
    :param align: For each column ``"<"`` to align left or ``">"`` to align right.
    :param separator: What to put between two columns.
    """
    colsizes = compute_max_colsize(rows)
    return "\n".join(
        maketablerow(row, colsizes=colsizes, align=align, separator=separator)
        for row in rows
    )


def compute_max_colsize(rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    if not rows:
        return []
    return [max(len(row[colidx]) for row in rows) for colidx in range(len(rows[0]))]


def maketablerow(
    cells: list[str], colsizes: list[int], align: list[str], separator: str = " "
) -> str:
    """Make a table row with the given column sizes and alignments."""
    return separator.join(
        cell.rjust(colsizes[idx]) if align[idx] == RIGHT else cell.ljust(colsizes[idx])
        for idx, cell in enumerate(cells)
    ).rstrip()
