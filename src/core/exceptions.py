"""
Custom exceptions shared across layers.

Domain errors (bad input text, squares off the board) propagate up to whoever called the parse/query.
Boundary errors are raised from the request model validators.
"""


class ChessError(Exception):
    """Base class for every error raised on purpose by this package."""


class InvalidTileCharError(ChessError):
    """A character in the compact board text is not one of PRNBQK / prnbqk / '.'"""


class OutOfBoundsError(ChessError):
    """A square was queried that does not lie on the board."""


class BoardDimensionError(ChessError):
    """Board dimensions are not positive, or the text does not fit on the board."""


class InvalidRequestError(ChessError):
    """Request could not be validated at the boundary layer."""


class NoPlayerError(ChessError):
    """Player-specific information was requested for an empty tile's owner (Owner.NONE)."""
