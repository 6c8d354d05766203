"""
Cell conversion for PyFrame.

Every cell is stored as text; typed values are produced on demand:
  - str is the identity conversion
  - int, float and bool read the longest numeric prefix of the cell
  - a cell with no numeric prefix converts to 0 / 0.0 / False

The numeric read is permissive on purpose. "10.5" read as int is 10 and
"abc" read as float is 0.0; nothing here raises on malformed numbers.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Type
import re

from .errors import PyFrameTypeError
from .text import WHITESPACE


class Axis(Enum):
    """Iteration direction for PyFrame.to_vector()."""
    COLUMN = "column"
    ROW = "row"


_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _read_prefix(cell: str, pattern: re.Pattern) -> str | None:
    match = pattern.match(cell.lstrip(WHITESPACE))
    if match is None:
        return None
    return match.group(0)


def read_int(cell: str) -> int:
    """
    Read the integer prefix of a cell.

    Leading whitespace is skipped; reading stops at the first character that
    cannot continue the number.

    Examples
    --------
    >>> read_int("10.5")
    10
    >>> read_int("  -7kg")
    -7
    >>> read_int("n/a")
    0
    """
    prefix = _read_prefix(cell, _INT_PREFIX)
    if prefix is None:
        return 0
    return int(prefix)


def read_float(cell: str) -> float:
    """
    Read the floating-point prefix of a cell.

    Examples
    --------
    >>> read_float("10.2")
    10.2
    >>> read_float("1e3x")
    1000.0
    >>> read_float("")
    0.0
    """
    prefix = _read_prefix(cell, _FLOAT_PREFIX)
    if prefix is None:
        return 0.0
    return float(prefix)


def read_bool(cell: str) -> bool:
    """Read an integer prefix; any nonzero value is True."""
    return read_int(cell) != 0


_READERS = {
    int: read_int,
    float: read_float,
    bool: read_bool,
}


def convert(cell: str, kind: Type[Any] = str) -> Any:
    """
    Convert a text cell to the requested kind.

    Parameters
    ----------
    cell : str
        Raw cell text
    kind : type
        One of str, int, float, bool

    Returns
    -------
    Any
        The converted value

    Raises
    ------
    PyFrameTypeError
        If kind is not a supported conversion target
    """
    if kind is str:
        return cell
    reader = _READERS.get(kind)
    if reader is None:
        name = getattr(kind, "__name__", repr(kind))
        raise PyFrameTypeError(
            f"Cannot convert cells to {name}; expected one of str, int, float, bool"
        )
    return reader(cell)
