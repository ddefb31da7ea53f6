"""
Value types shared by the match state and the renderer, plus the mapping
between visual board cells and python-chess square indices.
"""

from enum import Enum

import chess


class Orientation(Enum):
    """Which side of the board is drawn at the bottom of the screen."""
    FROM_WHITE_SIDE = "white"
    FROM_BLACK_SIDE = "black"

    @property
    def bottom_color(self):
        """Color whose pieces start at the bottom of the screen."""
        return chess.WHITE if self is Orientation.FROM_WHITE_SIDE else chess.BLACK


class Player:
    """A participant of the match with its remaining clock time."""

    def __init__(self, name, rating, title="", clock=0):
        """
        Create a player.

        Args:
            name: Display name
            rating: Non-negative rating
            title: Optional title abbreviation ("GM", "IM", ...), empty for none
            clock: Remaining time in whole seconds
        """
        if rating < 0:
            raise ValueError(f"rating must be non-negative, got {rating}")
        if clock < 0:
            raise ValueError(f"clock must be non-negative, got {clock}")
        self.name = name
        self.title = title or None
        self.rating = int(rating)
        self.clock = int(clock)

    def consume_second(self):
        """Take one second off the clock, never going below zero."""
        if self.clock > 0:
            self.clock -= 1
        return self.clock

    @property
    def flag_fallen(self):
        return self.clock == 0

    def __repr__(self):
        title = f"{self.title} " if self.title else ""
        return f"Player({title}{self.name}, {self.rating}, {self.clock}s)"


def board_index(row, col, orientation):
    """
    Translate a visual cell to a python-chess square index.

    Viewed from white, visual row 0 is rank 8. Viewed from black, visual
    row 0 is rank 1 and the files run h to a.
    """
    if not (0 <= row < 8 and 0 <= col < 8):
        raise ValueError(f"cell out of board: ({row}, {col})")
    if orientation is Orientation.FROM_WHITE_SIDE:
        return (7 - row) * 8 + col
    return row * 8 + (7 - col)


def visual_cell(index, orientation):
    """Inverse of board_index: the (row, col) at which a square is drawn."""
    if not 0 <= index < 64:
        raise ValueError(f"square index out of board: {index}")
    rank, file = divmod(index, 8)
    if orientation is Orientation.FROM_WHITE_SIDE:
        return 7 - rank, file
    return rank, 7 - file


def rank_labels(orientation):
    """Rank numbers for visual rows 0..7."""
    return [str(chess.square_rank(board_index(row, 0, orientation)) + 1)
            for row in range(8)]


def file_labels(orientation):
    """File letters for visual columns 0..7."""
    return [chess.FILE_NAMES[chess.square_file(board_index(0, col, orientation))]
            for col in range(8)]


def format_clock(seconds):
    """Format remaining seconds as mm:ss."""
    minutes, seconds = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{seconds:02d}"
