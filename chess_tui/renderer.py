import chess

from chess_tui import rules
from chess_tui.constants import (
    BOARD_POSITION_X, BOARD_POSITION_Y, CELL_WIDTH, EMPTY_GLYPH, INPUT_CURSOR,
    MESSAGE_ROW, PANEL_OFFSET_X, PIECE_GLYPHS, PLAYER_BULLET,
    THEME_BOARD_CELL_BLACK_BLACK_PIECE, THEME_BOARD_CELL_BLACK_WHITE_PIECE,
    THEME_BOARD_CELL_WHITE_BLACK_PIECE, THEME_BOARD_CELL_WHITE_WHITE_PIECE,
    THEME_BOARD_HINT, THEME_BOARD_TEXT_BLACK, THEME_BOARD_TEXT_WHITE,
)
from chess_tui.types import board_index, file_labels, format_clock, rank_labels

# (light cell, piece color) -> theme
CELL_THEMES = {
    (True, chess.WHITE): THEME_BOARD_CELL_WHITE_WHITE_PIECE,
    (True, chess.BLACK): THEME_BOARD_CELL_WHITE_BLACK_PIECE,
    (False, chess.WHITE): THEME_BOARD_CELL_BLACK_WHITE_PIECE,
    (False, chess.BLACK): THEME_BOARD_CELL_BLACK_BLACK_PIECE,
}


def cell_paint(position, row, col, orientation):
    """
    Compute what a visual board cell looks like.

    Returns:
        Tuple of (text, theme id)
    """
    is_light = (row + col) % 2 == 0
    piece_type, color = rules.piece_at(position, board_index(row, col, orientation))
    glyph = PIECE_GLYPHS[piece_type] if piece_type is not None else EMPTY_GLYPH
    # Empty cells take the white-piece theme; only the background shows
    if color is None:
        color = chess.WHITE
    return glyph + ' ', CELL_THEMES[(is_light, color)]


class BoardRenderer:
    """Paints the board, hints, player panel, status line and input box."""

    def __init__(self, screen):
        self.screen = screen
        self.origin_x = BOARD_POSITION_X
        self.origin_y = BOARD_POSITION_Y

    def render_board(self, position, orientation):
        """Paint the 64 cells and the rank/file hints."""
        self.render_hints(orientation)
        for row in range(8):
            for col in range(8):
                text, theme = cell_paint(position, row, col, orientation)
                self.screen.paint(self.origin_y + row, self.origin_x + col * CELL_WIDTH, text, theme)

    def render_hints(self, orientation):
        """Rank numbers down the left side, file letters below the board."""
        for row, label in enumerate(rank_labels(orientation)):
            self.screen.paint(self.origin_y + row, self.origin_x - 2, label, THEME_BOARD_HINT)
        self.screen.paint(self.origin_y + 8, self.origin_x, ' '.join(file_labels(orientation)),
                          THEME_BOARD_HINT)

    def render_players(self, match):
        """
        Paint both players next to the board.

        The player at the bottom of the board is drawn on the last board row,
        the other one on the first; each clock sits on the adjacent inner row.
        """
        x = self.origin_x + PANEL_OFFSET_X
        bottom_color = match.orientation.bottom_color
        to_move = match.side_to_move

        for color in (chess.WHITE, chess.BLACK):
            player = match.player(color)
            if color == bottom_color:
                name_row, clock_row = self.origin_y + 7, self.origin_y + 6
            else:
                name_row, clock_row = self.origin_y, self.origin_y + 1
            self._render_player(name_row, x, player, color)

            self.screen.clear_line(clock_row, x)
            self.screen.paint(clock_row, x + 2, f" {format_clock(player.clock)} ",
                              THEME_BOARD_TEXT_WHITE, reverse=color == to_move)

    def _render_player(self, row, x, player, color):
        bullet_theme = THEME_BOARD_TEXT_WHITE if color == chess.WHITE else THEME_BOARD_TEXT_BLACK
        self.screen.clear_line(row, x)
        self.screen.paint(row, x, PLAYER_BULLET + ' ', bullet_theme)
        x += 2

        label = f"{player.title} {player.name} " if player.title else f"{player.name} "
        self.screen.paint(row, x, label, THEME_BOARD_TEXT_WHITE)
        x += len(label)

        self.screen.paint(row, x, f"({player.rating})", THEME_BOARD_HINT)

    def render_message(self, message):
        self.screen.clear_line(MESSAGE_ROW, self.origin_x)
        if message:
            self.screen.paint(MESSAGE_ROW, self.origin_x, message, THEME_BOARD_TEXT_WHITE)

    def render_input_box(self, region, text):
        """Draw the bordered move prompt with the current buffer."""
        region.clear()
        region.draw_box()
        region.paint(1, 2, f"Your move: {text}{INPUT_CURSOR}")

    def render(self, match, input_region, input_text):
        """Full repaint of the match screen."""
        self.render_board(match.position, match.orientation)
        self.render_message(match.message)
        self.render_input_box(input_region, input_text)
        self.render_players(match)
