class PyFrameError(Exception):
    """Base exception for py-frame library."""
    pass


class PyFrameIOError(PyFrameError, OSError):
    """Raised when a source file cannot be read or a destination cannot be written."""
    pass


class PyFrameStructureError(PyFrameError, ValueError):
    """Raised when a parsed row's cell count differs from the header's."""

    def __init__(self, line, expected, actual):
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"line[{line}] element size between header and row is different. "
            f"header's element size : {expected} row's element size : {actual}"
        )


class PyFrameKeyError(PyFrameError, KeyError):
    """Raised when a column/key is missing."""

    def __str__(self):
        # KeyError.__str__ wraps the message in quotes
        return str(self.args[0]) if self.args else ""


class PyFrameIndexError(PyFrameError, IndexError):
    """Raised when a row index or slice bound is out of range."""
    pass


class PyFrameShapeError(PyFrameError, ValueError):
    """Raised when a conversion needs a shape the frame does not have."""
    pass


class PyFrameSizeMismatchError(PyFrameError, ValueError):
    """Raised when a replacement header has the wrong length."""
    pass


class PyFrameTypeError(PyFrameError, TypeError):
    """Raised for invalid types in API calls."""
    pass


class PyFrameValueError(PyFrameError, ValueError):
    """Raised for invalid argument values."""
    pass
