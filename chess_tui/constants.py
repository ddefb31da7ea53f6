"""
Layout, theme and default values shared by the terminal chess viewer.
"""

import chess

# Top-left corner of the board in terminal cells (row, column)
BOARD_POSITION_Y = 1
BOARD_POSITION_X = 3

# Each board cell is a glyph followed by a space
CELL_WIDTH = 2

# Side panel starts to the right of the board
PANEL_OFFSET_X = 18

# Status message line sits below the file letters
MESSAGE_ROW = BOARD_POSITION_Y + 9

# Move input box (height, width, row, column)
INPUT_BOX_HEIGHT = 3
INPUT_BOX_WIDTH = 32
INPUT_BOX_ROW = 12
INPUT_BOX_COLUMN = 0

MAX_INPUT_BUFFER_SIZE = 16

# Seconds to wait for a keystroke before running the next tick
POLL_TIMEOUT = 0.2

# Theme ids, registered once at startup
THEME_BOARD_HINT = 1
THEME_BOARD_TEXT_WHITE = 2
THEME_BOARD_TEXT_BLACK = 3
THEME_BOARD_CELL_WHITE_WHITE_PIECE = 4
THEME_BOARD_CELL_WHITE_BLACK_PIECE = 5
THEME_BOARD_CELL_BLACK_WHITE_PIECE = 6
THEME_BOARD_CELL_BLACK_BLACK_PIECE = 7

# Palette (RGB)
COLOR_BLACK = (18, 19, 24)
COLOR_WHITE = (255, 255, 255)
COLOR_LIGHT_CELL = (130, 139, 184)
COLOR_DARK_CELL = (66, 71, 94)

# theme id -> (foreground, background); None keeps the terminal default
THEMES = {
    THEME_BOARD_HINT: (COLOR_DARK_CELL, None),
    THEME_BOARD_TEXT_WHITE: (COLOR_WHITE, None),
    THEME_BOARD_TEXT_BLACK: (COLOR_BLACK, None),
    THEME_BOARD_CELL_WHITE_WHITE_PIECE: (COLOR_WHITE, COLOR_LIGHT_CELL),
    THEME_BOARD_CELL_WHITE_BLACK_PIECE: (COLOR_BLACK, COLOR_LIGHT_CELL),
    THEME_BOARD_CELL_BLACK_WHITE_PIECE: (COLOR_WHITE, COLOR_DARK_CELL),
    THEME_BOARD_CELL_BLACK_BLACK_PIECE: (COLOR_BLACK, COLOR_DARK_CELL),
}

# Same glyph for both colors, the theme carries the piece color
PIECE_GLYPHS = {
    chess.PAWN: '♟',
    chess.KNIGHT: '♞',
    chess.BISHOP: '♝',
    chess.ROOK: '♜',
    chess.QUEEN: '♛',
    chess.KING: '♚',
}
EMPTY_GLYPH = ' '

PLAYER_BULLET = '●'
INPUT_CURSOR = '█'

# Default match setup
DEFAULT_CLOCK_SECONDS = 600
DEFAULT_WHITE = ("huy", 2000, "")
DEFAULT_BLACK = ("gmhuy", 3000, "GM")
