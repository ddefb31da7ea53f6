import logging
import time

import chess

from chess_tui import rules
from chess_tui.types import Orientation

logger = logging.getLogger(__name__)


class MatchState:
    """
    Everything the viewer shows: the position, both players and their clocks.

    Only the side to move has its clock running; there is no separate
    running/paused state.
    """

    def __init__(self, white, black, position=None, orientation=Orientation.FROM_WHITE_SIDE,
                 clock=time.monotonic):
        """
        Initialize the match.

        Args:
            white: Player with the white pieces
            black: Player with the black pieces
            position: Starting chess.Board, the standard position if None
            orientation: Which side is drawn at the bottom
            clock: Zero-argument callable returning a timestamp in seconds
        """
        self.white = white
        self.black = black
        self.position = position if position is not None else rules.initial_position()
        self.orientation = orientation
        self.message = ""
        self._clock = clock
        self.last_tick = clock()

    @property
    def side_to_move(self):
        return rules.side_to_move(self.position)

    def player(self, color):
        """Get the player for chess.WHITE or chess.BLACK."""
        return self.white if color == chess.WHITE else self.black

    @property
    def active_player(self):
        return self.player(self.side_to_move)

    def tick(self):
        """
        Advance the active clock by at most one second.

        Returns:
            True if a second was consumed
        """
        now = self._clock()
        if now - self.last_tick < 1:
            return False

        player = self.active_player
        was_running = not player.flag_fallen
        player.consume_second()
        self.last_tick = now
        if was_running and player.flag_fallen:
            logger.info("%s ran out of time", player.name)
        return True
