"""
Thin adapter over python-chess.

Positions are handled as values: nothing here mutates the board it is given,
applying a move returns a new board.
"""

import chess

from chess_tui.errors import MoveApplicationError, MoveParseError


def initial_position():
    """Return the standard starting position."""
    return chess.Board()


def position_from_fen(fen):
    """Build a position from a FEN string, raising ValueError if it is invalid."""
    board = chess.Board(fen)
    if not board.is_valid():
        raise ValueError(f"illegal position: {fen}")
    return board


def piece_at(position, index):
    """
    Look up a square by linear index.

    Returns:
        Tuple of (piece_type, color), both None for an empty square
    """
    piece = position.piece_at(index)
    if piece is None:
        return None, None
    return piece.piece_type, piece.color


def side_to_move(position):
    """Color whose turn it is (chess.WHITE or chess.BLACK)."""
    return position.turn


def parse_move(text, position):
    """Parse SAN move text against a position."""
    try:
        return position.parse_san(text)
    except ValueError as e:
        # InvalidMoveError, IllegalMoveError and AmbiguousMoveError all land here
        raise MoveParseError(text, str(e)) from e


def apply_move(position, move):
    """Return the position after playing move, leaving the original untouched."""
    if not position.is_legal(move):
        raise MoveApplicationError(move)
    new_position = position.copy()
    new_position.push(move)
    return new_position
