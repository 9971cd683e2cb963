class OpponentError(Exception):
    """Base class for errors raised by the opponent engine."""


class NoLegalMoves(OpponentError):
    """Raised when asked to move in a position with no legal moves."""

    def __init__(self, fen):
        super().__init__(f"No legal moves available in position {fen}")
        self.fen = fen


class PersonaNotFound(OpponentError, KeyError):
    """Raised when a persona lookup misses the catalog."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown persona: {self.name!r}"


class CatalogError(OpponentError):
    """Raised when persona data fails validation while the catalog loads."""
