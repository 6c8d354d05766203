"""Display and repr logic for PyFrame."""

from __future__ import annotations
from typing import List, Sequence

from .text import join


# How many rows/columns to show before inserting "..."
MAX_HEAD_ROWS = 5
MAX_HEAD_COLS = 5


def _needs_quoting(name: str) -> bool:
	"""A name needs quoting if it is empty or has leading/trailing whitespace."""
	return name == "" or name != name.strip()


def _preview_indices(length: int, head: int) -> List[int | None]:
	"""Indices to show, with None marking the "..." gap."""
	if length > head * 2:
		return list(range(head)) + [None] + list(range(length - head, length))
	return list(range(length))


def _format_column(name: str, cells: Sequence[str]) -> List[str]:
	"""Header + cells of one column, left-aligned to a common width."""
	head = repr(name) if _needs_quoting(name) else name
	out = [head] + list(cells)
	width = max(len(s) for s in out)
	return [s.ljust(width) for s in out]


def _footer(frame) -> str:
	rows, cols = frame.size()
	return f"# {rows}×{cols} frame"


def _printr(frame) -> str:
	"""Pretty repr for a PyFrame; entry point used by PyFrame.__repr__."""
	header = frame.header
	if not header:
		return _footer(frame)

	row_indices = _preview_indices(len(frame), MAX_HEAD_ROWS)
	col_indices = _preview_indices(len(header), MAX_HEAD_COLS)

	columns = []
	for c in col_indices:
		if c is None:
			columns.append(["..."] * (len(row_indices) + 1))
			continue
		cells = ["..." if r is None else frame._data[r][c] for r in row_indices]
		columns.append(_format_column(header[c], cells))

	lines = []
	for r in range(len(row_indices) + 1):
		lines.append("  ".join(col[r] for col in columns).rstrip())

	lines.append("")
	lines.append(_footer(frame))
	return "\n".join(lines)


def _describe_lines(frame) -> List[str]:
	"""The three summary lines printed by PyFrame.describe()."""
	rows, cols = frame.size()
	return [
		"header names: {" + join(frame.header, ",") + "}",
		f"    row size: {rows}",
		f" column size: {cols}",
	]
