from __future__ import annotations


class TabulatorError(ValueError):
    """Base class for errors reported against a single source."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class ParseError(TabulatorError):
    """The source could not be read or is not well-formed JSON."""


class ConversionError(TabulatorError):
    """Rows could not be built or exported from an otherwise valid document."""
