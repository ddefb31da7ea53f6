import argparse

from chess_tui import rules
from chess_tui.constants import DEFAULT_BLACK, DEFAULT_CLOCK_SECONDS, DEFAULT_WHITE, POLL_TIMEOUT
from chess_tui.types import Orientation, Player


class Settings:
    """Startup configuration for one viewer session."""

    def __init__(self, white=None, black=None, clock_seconds=DEFAULT_CLOCK_SECONDS,
                 orientation=Orientation.FROM_WHITE_SIDE, fen=None, raw_mode=False,
                 poll_timeout=POLL_TIMEOUT, log_file=None, verbose=False):
        self.white = white or DEFAULT_WHITE
        self.black = black or DEFAULT_BLACK
        self.clock_seconds = clock_seconds
        self.orientation = orientation
        self.fen = fen
        self.raw_mode = raw_mode
        self.poll_timeout = poll_timeout
        self.log_file = log_file
        self.verbose = verbose

    def make_players(self):
        """Build the (white, black) players with full clocks."""
        white_name, white_rating, white_title = self.white
        black_name, black_rating, black_title = self.black
        return (Player(white_name, white_rating, white_title, self.clock_seconds),
                Player(black_name, black_rating, black_title, self.clock_seconds))

    def make_position(self):
        if self.fen:
            return rules.position_from_fen(self.fen)
        return rules.initial_position()


def _non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(prog="chess-tui", description="Terminal chess board viewer")

    parser.add_argument('--orientation', '-o', choices=['white', 'black'], default='white',
                        help='Side drawn at the bottom of the board (default: white)')
    parser.add_argument('--clock', '-c', type=_non_negative_int, default=DEFAULT_CLOCK_SECONDS,
                        help=f'Seconds on each clock (default: {DEFAULT_CLOCK_SECONDS})')
    parser.add_argument('--fen', type=str,
                        help='Start from this FEN instead of the initial position')

    # Players
    for color, (name, rating, title) in (('white', DEFAULT_WHITE), ('black', DEFAULT_BLACK)):
        parser.add_argument(f'--{color}', default=name, metavar='NAME',
                            help=f'{color.capitalize()} player name (default: {name})')
        parser.add_argument(f'--{color}-rating', type=_non_negative_int, default=rating,
                            metavar='N', help=f'{color.capitalize()} rating (default: {rating})')
        parser.add_argument(f'--{color}-title', default=title, metavar='TITLE',
                            help=f'{color.capitalize()} title, e.g. GM')

    # Terminal
    parser.add_argument('--raw', action='store_true',
                        help='Put the terminal in raw mode instead of cbreak')
    parser.add_argument('--log-file', type=str,
                        help='Write log records to this file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log debug records')
    return parser


def parse_args(argv=None):
    """Parse command-line arguments into Settings."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.fen:
        try:
            rules.position_from_fen(args.fen)
        except ValueError as e:
            parser.error(f"invalid --fen: {e}")

    orientation = (Orientation.FROM_WHITE_SIDE if args.orientation == 'white'
                   else Orientation.FROM_BLACK_SIDE)
    return Settings(
        white=(args.white, args.white_rating, args.white_title),
        black=(args.black, args.black_rating, args.black_title),
        clock_seconds=args.clock,
        orientation=orientation,
        fen=args.fen,
        raw_mode=args.raw,
        log_file=args.log_file,
        verbose=args.verbose,
    )
