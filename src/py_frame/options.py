"""Read options for PyFrame.read_csv / PyFrame.from_text."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping
import os

from .dynamic import DynamicValue
from .errors import PyFrameKeyError


DEFAULT_SEPARATOR = ","
# CRLF on Windows, LF elsewhere
DEFAULT_NEW_LINE = "\r\n" if os.name == "nt" else "\n"


class ReadOption(Enum):
	HEADER_PRESENT = "header_present"
	SEPARATOR = "separator"
	NEW_LINE = "new_line"
	AUTO_TRIM = "auto_trim"


@dataclass(frozen=True)
class ReadCsvOptions:
	"""Resolved settings for one parse."""
	header: bool = True
	separator: str = DEFAULT_SEPARATOR
	new_line: str = DEFAULT_NEW_LINE
	auto_trim: bool = True


def _as_dynamic(value: Any) -> DynamicValue:
	if isinstance(value, DynamicValue):
		return value
	return DynamicValue(value)


def resolve(options: Mapping[ReadOption, Any] | None = None, base: ReadCsvOptions | None = None) -> ReadCsvOptions:
	"""
	Build ReadCsvOptions from a {ReadOption: value} mapping.

	Values may be DynamicValue instances or plain bool/float/str. Keys that
	are missing keep the value from base (or the defaults).
	"""
	base = base or ReadCsvOptions()
	if not options:
		return base

	for key in options:
		if not isinstance(key, ReadOption):
			raise PyFrameKeyError(f"Unknown read option {key!r}")

	def pick(key, kind, default):
		if key in options:
			return _as_dynamic(options[key]).extract(kind)
		return default

	return ReadCsvOptions(
		header=pick(ReadOption.HEADER_PRESENT, bool, base.header),
		separator=pick(ReadOption.SEPARATOR, str, base.separator),
		new_line=pick(ReadOption.NEW_LINE, str, base.new_line),
		auto_trim=pick(ReadOption.AUTO_TRIM, bool, base.auto_trim),
	)
