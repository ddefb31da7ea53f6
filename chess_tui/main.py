"""
Terminal Chess - a board viewer with clocks and standard algebraic notation input.
"""

import logging
import signal
import sys

from chess_tui.app import run
from chess_tui.board_app import BoardApp
from chess_tui.config import parse_args
from chess_tui.errors import BackendInitError
from chess_tui.log import setup_logging
from chess_tui.match import MatchState
from chess_tui.screen import Screen
from chess_tui.utils import check_terminal_support, get_platform_info

logger = logging.getLogger(__name__)


def signal_handler(sig, frame):
    """Handle Ctrl+C to exit gracefully."""
    sys.exit(0)


def main(argv=None, screen=None):
    """Main entry point for the viewer."""
    settings = parse_args(argv)
    setup_logging(settings.log_file, settings.verbose)
    logger.info("starting on %s", get_platform_info())

    # Register signal handler for Ctrl+C
    signal.signal(signal.SIGINT, signal_handler)

    white, black = settings.make_players()
    match = MatchState(white, black, settings.make_position(), settings.orientation)

    screen = screen or Screen()
    check_terminal_support(screen.term)
    try:
        run(BoardApp(match), screen, raw_mode=settings.raw_mode,
            timeout=settings.poll_timeout)
    except BackendInitError as e:
        logger.error("cannot start: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
