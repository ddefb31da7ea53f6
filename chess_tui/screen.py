"""
Terminal backend adapter built on blessed.

Drawing calls are buffered and written to the terminal in one go on
refresh(), so a full repaint every tick does not flicker.
"""

import contextlib
import logging

from blessed import Terminal

from chess_tui.errors import BackendInitError

logger = logging.getLogger(__name__)


class Region:
    """A rectangular sub-area of the screen with its own origin."""

    def __init__(self, screen, height, width, row, col):
        self.screen = screen
        self.height = height
        self.width = width
        self.row = row
        self.col = col

    def clear(self):
        """Blank every cell of the region."""
        for dy in range(self.height):
            self.screen.paint(self.row + dy, self.col, ' ' * self.width)

    def draw_box(self, theme=None):
        """Draw a single-line border along the region edges."""
        inner = self.width - 2
        self.screen.paint(self.row, self.col, "┌" + "─" * inner + "┐", theme)
        for dy in range(1, self.height - 1):
            self.screen.paint(self.row + dy, self.col, "│", theme)
            self.screen.paint(self.row + dy, self.col + self.width - 1, "│", theme)
        self.screen.paint(self.row + self.height - 1, self.col, "└" + "─" * inner + "┘", theme)

    def paint(self, row, col, text, theme=None, reverse=False):
        """Paint text relative to the region origin, clipped to its width."""
        text = text[:max(0, self.width - col)]
        self.screen.paint(self.row + row, self.col + col, text, theme, reverse)


class Screen:
    """Character grid addressed by (row, column) with named color themes."""

    def __init__(self, term=None, stream=None):
        self.term = term or Terminal(stream=stream)
        self.themes = {}
        self._buffer = []

    @contextlib.contextmanager
    def session(self, raw_mode=False):
        """
        Hold the terminal for the lifetime of the application loop.

        Args:
            raw_mode: Use raw mode (Ctrl+C arrives as a key) instead of cbreak
        """
        if not self.term.is_a_tty:
            raise BackendInitError("this program must be run in a terminal")

        stack = contextlib.ExitStack()
        try:
            stack.enter_context(self.term.fullscreen())
            stack.enter_context(self.term.raw() if raw_mode else self.term.cbreak())
            stack.enter_context(self.term.hidden_cursor())
        except OSError as e:
            stack.close()
            raise BackendInitError(f"cannot acquire terminal: {e}") from e

        with stack:
            logger.info("terminal acquired (%s, %d colors, raw=%s)",
                        self.term.kind, self.term.number_of_colors, raw_mode)
            self._write(self.term.clear)
            try:
                yield self
            finally:
                logger.info("terminal released")

    def register_theme(self, theme_id, foreground, background=None):
        """
        Register a (foreground, background) pair under a small integer id.

        Colors are RGB tuples; None keeps the terminal default.
        """
        style = ''
        if foreground is not None:
            style += self.term.color_rgb(*foreground)
        if background is not None:
            style += self.term.on_color_rgb(*background)
        self.themes[theme_id] = style

    def paint(self, row, col, text, theme=None, reverse=False):
        """Queue text at (row, col) with an optional theme and reverse video."""
        style = self.themes.get(theme, '') if theme is not None else ''
        if reverse:
            style += self.term.reverse
        if style:
            text = style + text + self.term.normal
        self._buffer.append(self.term.move_yx(row, col) + text)

    def clear_line(self, row, col=0):
        """Blank from (row, col) to the end of the line."""
        self._buffer.append(self.term.move_yx(row, col) + self.term.normal + self.term.clear_eol)

    def region(self, height, width, row, col):
        return Region(self, height, width, row, col)

    def poll(self, timeout):
        """
        Wait at most timeout seconds for one keystroke.

        Returns:
            The blessed Keystroke, or None if nothing was pressed
        """
        key = self.term.inkey(timeout=timeout)
        return key if key else None

    def refresh(self):
        """Write every queued drawing call to the terminal."""
        if self._buffer:
            self._write(''.join(self._buffer))
            self._buffer = []

    def _write(self, text):
        self.term.stream.write(text)
        self.term.stream.flush()
