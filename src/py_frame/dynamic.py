"""
DynamicValue: a closed sum type over {boolean, number, text}.

Used to pass heterogeneous read options (see options.py). The active variant
is decided once, from the payload's Python type, and never changes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Type

from .errors import PyFrameTypeError
from .typing import convert


class Kind(Enum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"


def _kind_of(value: Any) -> Kind:
    # bool before int (bool is subclass of int)
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.TEXT
    raise PyFrameTypeError(
        f"DynamicValue holds bool, float or str, not {type(value).__name__}"
    )


@dataclass(frozen=True)
class DynamicValue:
    """
    A read-only value that is exactly one of boolean, number or text.

    Attributes
    ----------
    value : bool | float | str
        The payload; ints are stored as floats
    kind : Kind
        Which variant is active

    Examples
    --------
    >>> DynamicValue(True).kind
    <Kind.BOOLEAN: 'boolean'>
    >>> DynamicValue(1).extract(float)
    1.0
    >>> DynamicValue(";").extract(str)
    ';'
    """

    value: Any
    kind: Kind = field(init=False)

    def __post_init__(self):
        kind = _kind_of(self.value)
        if kind is Kind.NUMBER:
            object.__setattr__(self, "value", float(self.value))
        object.__setattr__(self, "kind", kind)

    def __repr__(self):
        return f"DynamicValue({self.value!r})"

    def copy(self) -> "DynamicValue":
        return DynamicValue(self.value)

    def _stream_text(self) -> str:
        """Render a boolean/number the way a C-style output stream does."""
        if self.kind is Kind.BOOLEAN:
            return "1" if self.value else "0"
        return f"{self.value:g}"

    def extract(self, kind: Type[Any]) -> Any:
        """
        Return the payload as the requested kind.

        Text is only extracted from a text value, and numbers/booleans only
        from a number or boolean value. A number or boolean goes through a
        text round-trip ("1", "2.5") and is read back with convert(), so
        DynamicValue(True).extract(float) is 1.0 and
        DynamicValue(0.5).extract(int) is 0.

        Raises
        ------
        PyFrameTypeError
            If the active variant cannot be extracted as kind
        """
        if kind is str:
            if self.kind is not Kind.TEXT:
                raise PyFrameTypeError(
                    f"Cannot extract {self.kind.value} value {self.value!r} as text"
                )
            return self.value

        if self.kind is Kind.TEXT:
            name = getattr(kind, "__name__", repr(kind))
            raise PyFrameTypeError(
                f"Cannot extract text value {self.value!r} as {name}"
            )
        return convert(self._stream_text(), kind)
