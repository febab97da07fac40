"""
Errors raised while reading barren land rectangles.

Every error derives from FarmInputError so the command line can report
any invalid input with a single handler.
"""

from .types import Rectangle


class FarmInputError(ValueError):
    """Raised when the barren land input cannot describe a farm."""

    pass


class MalformedInput(FarmInputError):
    """Raised when a rectangle does not parse into exactly four integers."""

    def __init__(self, raw: str, reason: str) -> None:
        super().__init__(f"Malformed rectangle {raw!r}: {reason}")
        self.raw = raw


class InvalidCoordinates(FarmInputError):
    """Raised when a rectangle's corners are negative, inverted or out of bounds."""

    def __init__(self, rectangle: Rectangle, reason: str) -> None:
        super().__init__(f"Invalid coordinates '{rectangle}': {reason}")
        self.rectangle = rectangle


class NoInputProvided(FarmInputError):
    """Raised when no barren land rectangle is given."""

    def __init__(self) -> None:
        super().__init__("No barren land rectangles provided")
