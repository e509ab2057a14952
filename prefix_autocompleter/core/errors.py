# errors.py - exception types raised by the autocompleter package


class AutocompleteError(Exception):
    """Base class for errors raised by prefix_autocompleter."""


class InvalidArgument(AutocompleteError, ValueError):
    """Raised when a call violates a precondition (missing arg, negative weight, etc)."""


class TermFileError(AutocompleteError, ValueError):
    """Raised when a term file cannot be parsed."""

    def __init__(self, path: str, line_no: int, msg: str) -> None:
        self.path = path
        self.line_no = line_no
        super().__init__(f"{path}:{line_no}: {msg}")
