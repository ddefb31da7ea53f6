"""Exceptions raised by the terminal chess viewer."""


class ChessTuiError(Exception):
    """Base class for all chess_tui errors."""


class MoveParseError(ChessTuiError):
    """The move text could not be read as a move in the current position."""

    def __init__(self, text, reason=""):
        self.text = text
        self.reason = reason
        super().__init__(f"{text} is not a valid move!")


class MoveApplicationError(ChessTuiError):
    """A parsed move could not be applied to the current position."""

    def __init__(self, move, reason="illegal move"):
        self.move = move
        self.reason = reason
        super().__init__(f"cannot apply {move}: {reason}")


class BackendInitError(ChessTuiError):
    """The terminal could not be acquired."""
