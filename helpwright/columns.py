"""
Two-column layout of help rows.

A Row is an immutable (first, second) pair: the label (names, placeholders)
and the description. write_columns() lays a list of rows out as an indented
block whose columns share one width each:

    <indent><first, padded to column 1><indent><second>

Column widths
- Natural widths (longest first / longest second text) are used whenever they
  fit in the total width together with the indent and the gutter.
- Otherwise column 1 is capped to half the width minus the indent; when a label
  is longer than that cap the column shrinks to the longest *wrapped* label
  line, and column 2 receives whatever width remains.

Both cells are wrapped independently and zipped line by line; the shorter side
is padded with empty lines. A line whose description part is blank ends right
after the label, with no trailing padding.
"""
import itertools
from collections import namedtuple

from .wrapping import wrap

INDENT = "  "


class Row(namedtuple("Row", ("first", "second"))):
    """
    One rendered help row: label in the first column, description in the second.
    """
    __slots__ = ()

    def __new__(cls, first, second=""):
        if not isinstance(first, str) or not isinstance(second, str):
            raise TypeError("row columns must be strings")
        return super().__new__(cls, first, second)


def measure(rows, width, /, indent=len(INDENT)):
    """
    Return (first, second) column widths for rows laid out in width columns.
    """
    first = max(len(row.first) for row in rows)
    second = max(len(row.second) for row in rows)

    if first + second + 2 * indent > width:
        ceiling = max(width // 2 - indent, 1)
        if first > ceiling:
            first = max((len(line) for row in rows for line in wrap(row.first, ceiling)), default=0)
        second = max(width - first - 2 * indent, 1)

    return first, second


def write_columns(rows, width, output, /, indent=len(INDENT)):
    """
    Write rows to output as an aligned, wrapped two-column block.

    Nothing is written when rows is empty.
    """
    if not rows:
        return

    first, second = measure(rows, width, indent)
    padding = " " * indent

    for row in rows:
        labels = wrap(row.first, first) if first > 0 else iter(())
        descriptions = wrap(row.second, second) if second > 0 else iter(())
        for label, description in itertools.zip_longest(labels, descriptions, fillvalue=""):
            output.write(padding + label)
            if description and not description.isspace():
                output.write(" " * (first - len(label)) + padding + description)
            output.write("\n")


__all__ = (
    "INDENT",
    "Row",
    "measure",
    "write_columns",
)
