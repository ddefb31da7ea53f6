import logging

from chess_tui import rules
from chess_tui.constants import MAX_INPUT_BUFFER_SIZE
from chess_tui.errors import MoveApplicationError, MoveParseError

logger = logging.getLogger(__name__)


class MoveInputEditor:
    """Bounded line editor for SAN move text, submitted against the match position."""

    def __init__(self, match, capacity=MAX_INPUT_BUFFER_SIZE):
        self.match = match
        self.capacity = capacity
        self._chars = []

    @property
    def text(self):
        return ''.join(self._chars)

    def __len__(self):
        return len(self._chars)

    def append(self, char):
        """Add one alphanumeric character; anything else, or a full buffer, is ignored."""
        if len(char) != 1 or not char.isalnum():
            return False
        if len(self._chars) >= self.capacity:
            return False
        self._chars.append(char)
        return True

    def backspace(self):
        if self._chars:
            self._chars.pop()

    def clear(self):
        self._chars = []

    def submit(self):
        """
        Play the buffered move on the match position.

        A move that cannot be parsed sets the status message. A parsed move
        that cannot be applied leaves the position and the message alone.
        The buffer is emptied either way.

        Returns:
            True if the position changed
        """
        text = self.text
        self.match.message = ""
        self.clear()

        try:
            move = rules.parse_move(text, self.match.position)
            self.match.position = rules.apply_move(self.match.position, move)
        except MoveParseError as e:
            logger.info("rejected move text %r: %s", text, e.reason)
            self.match.message = str(e)
            return False
        except MoveApplicationError as e:
            logger.debug("dropped %s: %s", e.move, e.reason)
            return False

        logger.info("played %s", text)
        return True
