"""
py-frame: a small, zero-dependency table of text cells

Parses delimited text (CSV-like) into a rectangular table with named columns,
selects and slices it by column name or row index (negative indices count from
the end), converts cells to int/float/str on demand, and writes it back out.

Main classes:
    - PyFrame: header + rows of text cells
    - DynamicValue: bool / number / text value used for read options
    - ReadOption: keys of the read_csv options mapping
    - Axis: ROW or COLUMN, for PyFrame.to_vector

Every cell is stored as text. Conversions are explicit (as_scalar, to_vector,
to_matrix) and numeric reads are permissive: "10.5" read as int is 10 and a
cell with no leading number reads as 0.

Zero external dependencies - pure Python stdlib only.
"""

from .dynamic import DynamicValue, Kind
from .errors import (
	PyFrameError,
	PyFrameIOError,
	PyFrameIndexError,
	PyFrameKeyError,
	PyFrameShapeError,
	PyFrameSizeMismatchError,
	PyFrameStructureError,
	PyFrameTypeError,
	PyFrameValueError,
)
from .frame import PyFrame
from .options import DEFAULT_NEW_LINE, DEFAULT_SEPARATOR, ReadCsvOptions, ReadOption
from .typing import Axis, convert

read_csv = PyFrame.read_csv
from_text = PyFrame.from_text

__version__ = "0.1.0"
__all__ = [
	"PyFrame",
	"DynamicValue",
	"Kind",
	"ReadOption",
	"ReadCsvOptions",
	"Axis",
	"convert",
	"read_csv",
	"from_text",
	"DEFAULT_NEW_LINE",
	"DEFAULT_SEPARATOR",
	"PyFrameError",
	"PyFrameIOError",
	"PyFrameIndexError",
	"PyFrameKeyError",
	"PyFrameShapeError",
	"PyFrameSizeMismatchError",
	"PyFrameStructureError",
	"PyFrameTypeError",
	"PyFrameValueError",
]
