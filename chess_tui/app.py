"""
Application loop driver.

Any screen implementing App can be run; the driver only knows the four
lifecycle calls.
"""

import logging
from abc import ABC, abstractmethod

from chess_tui.constants import POLL_TIMEOUT

logger = logging.getLogger(__name__)


class App(ABC):
    """Lifecycle every screen run by the driver implements."""

    @abstractmethod
    def init(self, screen):
        """Called once before the first render: register themes, create regions."""

    @abstractmethod
    def tick(self):
        """Advance time-based state. Called every iteration, keypress or not."""

    @abstractmethod
    def render(self, screen):
        """Repaint everything. Must not change application state."""

    @abstractmethod
    def handle_input(self, key):
        """
        React to one keystroke.

        Returns:
            False to stop the loop
        """


def run(app, screen, raw_mode=False, timeout=POLL_TIMEOUT):
    """
    Drive app until its input handler asks to stop.

    Each iteration ticks, renders and then waits at most timeout seconds for
    a key, so the screen keeps updating while nobody types.
    """
    with screen.session(raw_mode):
        app.init(screen)
        iterations = 0
        while True:
            iterations += 1
            app.tick()
            app.render(screen)
            screen.refresh()

            key = screen.poll(timeout)
            if key is None:
                continue
            if not app.handle_input(key):
                break
        logger.info("loop finished after %d iterations", iterations)
