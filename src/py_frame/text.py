"""Literal-substring splitting, joining and trimming of delimited text."""

from __future__ import annotations
from typing import Iterable, List


# ASCII whitespace removed by trim_whitespace()
WHITESPACE = " \t\n\r\f\v"


def trim_whitespace(text: str) -> str:
	"""Strip leading/trailing ASCII whitespace.

	A string made only of whitespace becomes "".
	Unicode spaces (e.g. U+00A0) are kept, unlike str.strip().
	"""
	return text.strip(WHITESPACE)


def split(text: str, separator: str, trim: bool = False) -> List[str]:
	"""
	Split text on every non-overlapping occurrence of separator.

	Args:
		text: The text to split.
		separator: Literal substring (not a regex).
		trim: Strip whitespace around each produced piece.

	Returns:
		The pieces, in order. Empty text gives []; an empty separator
		gives [text] unchanged.
	"""
	if not text:
		return []
	if not separator:
		return [text]

	pieces = text.split(separator)
	if trim:
		return [trim_whitespace(p) for p in pieces]
	return pieces


def join(pieces: Iterable[str], separator: str) -> str:
	"""Inverse of split(): pieces with separator between them, no trailing separator."""
	return separator.join(pieces)
