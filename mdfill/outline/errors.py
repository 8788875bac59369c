"""Exceptions raised by the outline extractor in strict mode."""


class OutlineError(Exception):
    """Base class for outline extraction errors."""


class MalformedLineError(OutlineError):
    """A definition entry line that carries no value."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")
