import warnings

from .display import _describe_lines, _printr
from .errors import (
	PyFrameIOError,
	PyFrameIndexError,
	PyFrameKeyError,
	PyFrameShapeError,
	PyFrameSizeMismatchError,
	PyFrameStructureError,
	PyFrameTypeError,
	PyFrameValueError,
)
from .options import DEFAULT_NEW_LINE, DEFAULT_SEPARATOR, ReadCsvOptions, resolve
from .text import join, split
from .typing import Axis, convert


def _missing_col_error(name, context="PyFrame"):
	return PyFrameKeyError(f"Column '{name}' not found in {context}")


def _check_text(values, what):
	for value in values:
		if not isinstance(value, str):
			raise PyFrameTypeError(f"{what} must be str, not {type(value).__name__}: {value!r}")


class _RowView:
	"""Lightweight row view for iterating over frame rows."""
	__slots__ = ('_header', '_data', '_index')

	def __init__(self, frame, index):
		self._header = frame._header
		self._data = frame._data
		self._index = index

	def set_index(self, index):
		"""Reuse this row view for a different index (avoids allocation during iteration)."""
		self._index = index
		return self

	def __getitem__(self, key):
		"""Access cells by position or by column name (first match)."""
		row = self._data[self._index]
		try:
			return row[key]
		except TypeError:
			if isinstance(key, str):
				try:
					return row[self._header.index(key)]
				except ValueError:
					raise _missing_col_error(key, "row")
			raise PyFrameTypeError(f"Row indices must be int or str, not {type(key).__name__}")

	def __iter__(self):
		return iter(self._data[self._index])

	def __len__(self):
		return len(self._header)

	def __repr__(self):
		values = [repr(cell) for cell in self._data[self._index]]
		return f"Row({self._index}: {', '.join(values)})"


class PyFrame:
	"""
	Rectangular table of text cells with named columns.

	Selection and slicing never modify the frame; they return new frames that
	share no rows with it. Only rename() changes a frame in place.

	Column names need not be unique. Lookups by name use the first matching
	column.
	"""

	def __init__(self, header=(), rows=()):
		header = tuple(header)
		_check_text(header, "Column names")
		data = [list(row) for row in rows]
		for idx, row in enumerate(data):
			if len(row) != len(header):
				raise PyFrameStructureError(idx, len(header), len(row))
			_check_text(row, "Cells")
		self._header = header
		self._data = data

	@classmethod
	def _from_parts(cls, header, data):
		"""Wrap freshly built header/rows without copying them again."""
		frame = cls.__new__(cls)
		frame._header = tuple(header)
		frame._data = data
		return frame

	#-----------------------------------------------------
	# Parsing and serialization
	#-----------------------------------------------------

	@classmethod
	def from_text(cls, text, header=True, separator=DEFAULT_SEPARATOR, new_line=DEFAULT_NEW_LINE,
			auto_trim=True, options=None):
		"""
		Parse delimited text into a PyFrame.

		Separator and new_line are literal substrings; there is no quoting, so
		a cell cannot contain either. Trailing empty lines are ignored. When
		header is False the columns are named "0", "1", ...

		options is an optional {ReadOption: value} mapping overriding the
		keyword arguments.

		Raises PyFrameStructureError if a line's cell count differs from the
		header's.
		"""
		opts = resolve(options, ReadCsvOptions(header, separator, new_line, auto_trim))
		return cls._parse(text, opts, stacklevel=3)

	@classmethod
	def _parse(cls, text, opts, stacklevel):
		"""Shared by from_text and read_csv; stacklevel is handed to warnings.warn."""
		lines = split(text, opts.new_line)
		while lines and not lines[-1]:
			lines.pop()
		if not lines:
			return cls()

		first = split(lines[0], opts.separator, opts.auto_trim)
		if opts.header:
			header_row = first
			lines = lines[1:]
			duplicates = sorted({name for name in header_row if header_row.count(name) > 1})
			if duplicates:
				warnings.warn(
					f"Duplicate column names {duplicates}; lookups by name return the first match",
					stacklevel=stacklevel,
				)
		else:
			header_row = [str(i) for i in range(len(first))]

		data = []
		for row_index, line in enumerate(lines):
			row = split(line, opts.separator, opts.auto_trim)
			if len(row) != len(header_row):
				# Line number within the text, header line counted as 0
				raise PyFrameStructureError(row_index + int(opts.header), len(header_row), len(row))
			data.append(row)

		return cls._from_parts(header_row, data)

	@classmethod
	def read_csv(cls, path, options=None, *, header=True, separator=DEFAULT_SEPARATOR,
			new_line=DEFAULT_NEW_LINE, auto_trim=True, encoding="utf-8"):
		"""
		Read a delimited text file into a PyFrame.

		The file is read whole, without newline translation, so new_line must
		match what is actually on disk. Raises PyFrameIOError if the file is
		missing, unreadable or not valid in encoding.
		"""
		opts = resolve(options, ReadCsvOptions(header, separator, new_line, auto_trim))
		try:
			with open(path, "r", encoding=encoding, newline="") as f:
				text = f.read()
		except OSError as exc:
			raise PyFrameIOError(f"file '{path}' could not be read: {exc.strerror or exc}") from exc
		except UnicodeDecodeError as exc:
			raise PyFrameIOError(f"file '{path}' could not be decoded as {encoding}: {exc.reason}") from exc

		return cls._parse(text, opts, stacklevel=3)

	def to_text(self, header=True, separator=DEFAULT_SEPARATOR, new_line="\n"):
		"""Header line (optional) and one line per row; no terminator after the last line."""
		lines = []
		if header:
			lines.append(join(self._header, separator))
		lines.extend(join(row, separator) for row in self._data)
		return new_line.join(lines)

	def to_csv(self, path, append=False, header=True, separator=DEFAULT_SEPARATOR,
			new_line=DEFAULT_NEW_LINE, encoding="utf-8"):
		"""
		Write to_text() to path, overwriting it unless append is True.

		new_line defaults to the platform terminator, the same default
		read_csv uses.
		"""
		mode = "a" if append else "w"
		try:
			with open(path, mode, encoding=encoding, newline="") as f:
				f.write(self.to_text(header=header, separator=separator, new_line=new_line))
		except OSError as exc:
			raise PyFrameIOError(f"file '{path}' could not be written: {exc.strerror or exc}") from exc

	#-----------------------------------------------------
	# Shape and access
	#-----------------------------------------------------

	@property
	def header(self):
		return self._header

	@property
	def rows(self):
		"""Copy of the cell grid."""
		return [list(row) for row in self._data]

	def data(self):
		return self.rows

	def __len__(self):
		return len(self._data)

	def size(self):
		return (len(self._data), len(self._header))

	@property
	def shape(self):
		return self.size()

	def copy(self):
		return PyFrame._from_parts(self._header, self.rows)

	def __eq__(self, other):
		if not isinstance(other, PyFrame):
			return NotImplemented
		return self._header == other._header and self._data == other._data

	# rename() mutates
	__hash__ = None

	def __iter__(self):
		"""Iterate over rows using a reusable _RowView."""
		row_view = _RowView(self, 0)
		for i in range(len(self._data)):
			row_view.set_index(i)
			yield row_view

	def __repr__(self):
		return _printr(self)

	def describe(self, file=None):
		"""Print column names, row count and column count."""
		for line in _describe_lines(self):
			print(line, file=file)

	#-----------------------------------------------------
	# Selection
	#-----------------------------------------------------

	def _column_index(self, name):
		try:
			return self._header.index(name)
		except ValueError:
			raise _missing_col_error(name)

	def _normalize(self, index):
		if isinstance(index, bool) or not isinstance(index, int):
			raise PyFrameTypeError(f"Row index must be int, not {type(index).__name__}")
		return index if index >= 0 else len(self._data) + index

	def select_column(self, name):
		"""Single column (the first one named name) as a new frame."""
		idx = self._column_index(name)
		return PyFrame._from_parts((name,), [[row[idx]] for row in self._data])

	def select_columns(self, names):
		"""Columns in the given order; names may repeat."""
		if isinstance(names, str):
			raise PyFrameTypeError(f"select_columns takes a list of names, not a str; use select_column({names!r})")
		names = list(names)
		indices = [self._column_index(name) for name in names]
		data = [[row[i] for i in indices] for row in self._data]
		return PyFrame._from_parts(names, data)

	def select_row(self, index):
		"""Single row as a new frame; negative indices count from the end."""
		idx = self._normalize(index)
		if idx < 0 or idx >= len(self._data):
			raise PyFrameIndexError(f"index number [{index}] was out of range for {len(self._data)} rows")
		return PyFrame._from_parts(self._header, [list(self._data[idx])])

	def slice(self, start, end):
		"""
		Rows [start, end) as a new frame.

		Both bounds accept negative indices and must lie within 0..len(self)
		after normalization; end == len(self) is allowed. Unlike list slicing,
		out-of-range bounds raise instead of clamping.
		"""
		s_idx = self._normalize(start)
		e_idx = self._normalize(end)
		n = len(self._data)
		if s_idx < 0 or s_idx > n:
			raise PyFrameIndexError(f"start index number [{start}] was out of range for {n} rows")
		if e_idx < 0 or e_idx > n:
			raise PyFrameIndexError(f"end index number [{end}] was out of range for {n} rows")
		if s_idx > e_idx:
			raise PyFrameIndexError(f"end index [{end}] must not be before start index [{start}]")
		return PyFrame._from_parts(self._header, [list(row) for row in self._data[s_idx:e_idx]])

	def __getitem__(self, key):
		"""
		frame["col"]          -> select_column
		frame[["a", "b"]]     -> select_columns
		frame[-1]             -> select_row
		frame[1:3]            -> slice (step must be 1)
		"""
		if isinstance(key, str):
			return self.select_column(key)

		if isinstance(key, (list, tuple)):
			if all(isinstance(k, str) for k in key):
				return self.select_columns(key)
			raise PyFrameTypeError("Multi-column selection takes column names only")

		if isinstance(key, slice):
			if key.step not in (None, 1):
				raise PyFrameValueError(f"PyFrame slicing does not support step {key.step!r}")
			start = 0 if key.start is None else key.start
			stop = len(self._data) if key.stop is None else key.stop
			return self.slice(start, stop)

		if isinstance(key, int) and not isinstance(key, bool):
			return self.select_row(key)

		raise PyFrameTypeError(f"PyFrame indices must be str, list of str, int or slice, not {type(key).__name__}")

	def rename(self, names):
		"""Replace all column names (modifies in place, returns self for chaining)"""
		names = tuple(names)
		if len(names) != len(self._header):
			raise PyFrameSizeMismatchError(
				f"header size is different: frame has {len(self._header)} columns, got {len(names)} names"
			)
		_check_text(names, "Column names")
		self._header = names
		return self

	#-----------------------------------------------------
	# Conversion
	#-----------------------------------------------------

	def as_scalar(self, kind=str):
		"""Convert the only cell of a 1×1 frame."""
		if self.size() != (1, 1):
			rows, cols = self.size()
			raise PyFrameShapeError(f"as_scalar needs a 1×1 PyFrame, not {rows}×{cols}")
		return convert(self._data[0][0], kind)

	def as_int(self):
		return self.as_scalar(int)

	def as_float(self):
		return self.as_scalar(float)

	def as_str(self):
		return self.as_scalar(str)

	def to_vector(self, kind=str, axis=Axis.COLUMN):
		"""
		Convert a single column (axis=COLUMN) or a single row (axis=ROW)
		to a list of kind.
		"""
		if not isinstance(axis, Axis):
			raise PyFrameTypeError(f"axis must be an Axis, not {type(axis).__name__}")
		rows, cols = self.size()
		if axis is Axis.ROW:
			if rows != 1:
				raise PyFrameShapeError(f"to_vector(axis=ROW) needs exactly 1 row, not {rows}")
			return [convert(cell, kind) for cell in self._data[0]]
		if cols != 1:
			raise PyFrameShapeError(f"to_vector(axis=COLUMN) needs exactly 1 column, not {cols}")
		return [convert(row[0], kind) for row in self._data]

	def to_list(self, kind=str):
		"""Flatten a one-row frame along ROW, anything else along COLUMN."""
		if len(self._data) == 1:
			return self.to_vector(kind, Axis.ROW)
		return self.to_vector(kind, Axis.COLUMN)

	def to_matrix(self, kind=str):
		"""Every cell converted to kind, row-major."""
		return [[convert(cell, kind) for cell in row] for row in self._data]
