import logging

from chess_tui.app import App
from chess_tui.constants import (
    INPUT_BOX_COLUMN, INPUT_BOX_HEIGHT, INPUT_BOX_ROW, INPUT_BOX_WIDTH, THEMES,
)
from chess_tui.input_editor import MoveInputEditor
from chess_tui.renderer import BoardRenderer

logger = logging.getLogger(__name__)

ENTER_KEYS = ('\r', '\n')
BACKSPACE_KEYS = ('\x7f', '\x08')
QUIT_KEYS = ('\x1b', '\x03')  # Escape, Ctrl+C in raw mode


class BoardApp(App):
    """The board screen: one match, one move prompt."""

    def __init__(self, match):
        self.match = match
        self.editor = MoveInputEditor(match)
        self.renderer = None
        self.input_region = None

    def init(self, screen):
        for theme_id, (foreground, background) in THEMES.items():
            screen.register_theme(theme_id, foreground, background)
        self.renderer = BoardRenderer(screen)
        self.input_region = screen.region(INPUT_BOX_HEIGHT, INPUT_BOX_WIDTH,
                                          INPUT_BOX_ROW, INPUT_BOX_COLUMN)
        logger.info("board screen ready: %r vs %r", self.match.white, self.match.black)

    def tick(self):
        self.match.tick()

    def render(self, screen):
        self.renderer.render(self.match, self.input_region, self.editor.text)

    def handle_input(self, key):
        """Route a keystroke to the move editor."""
        name = getattr(key, 'name', None)
        char = str(key)

        if name == 'KEY_ENTER' or char in ENTER_KEYS:
            self.editor.submit()
        elif name in ('KEY_BACKSPACE', 'KEY_DELETE') or char in BACKSPACE_KEYS:
            self.editor.backspace()
        elif name == 'KEY_ESCAPE' or char in QUIT_KEYS:
            logger.info("quit requested")
            return False
        elif not getattr(key, 'is_sequence', False) and len(char) == 1:
            self.editor.append(char)
        return True
