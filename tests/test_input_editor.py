import chess
import pytest

from chess_tui.constants import MAX_INPUT_BUFFER_SIZE
from chess_tui.input_editor import MoveInputEditor


def _type(editor, text):
    for char in text:
        editor.append(char)


@pytest.fixture
def editor(match):
    return MoveInputEditor(match)


class TestEditing:
    def test_append_alphanumeric(self, editor):
        assert editor.append("N")
        assert editor.append("3")
        assert editor.text == "N3"

    @pytest.mark.parametrize("char", ["+", "#", "=", "-", " ", "\t", "ab"])
    def test_append_rejects_other_characters(self, editor, char):
        assert not editor.append(char)
        assert editor.text == ""

    def test_capacity_enforced(self, editor):
        _type(editor, "a" * MAX_INPUT_BUFFER_SIZE)
        assert len(editor) == MAX_INPUT_BUFFER_SIZE
        assert not editor.append("b")
        assert editor.text == "a" * MAX_INPUT_BUFFER_SIZE

    def test_backspace(self, editor):
        _type(editor, "Nf3")
        editor.backspace()
        assert editor.text == "Nf"

    def test_backspace_on_empty_buffer(self, editor):
        editor.backspace()
        assert editor.text == ""


class TestSubmit:
    def test_valid_move_is_played(self, editor, match):
        _type(editor, "e4")
        assert editor.submit()
        assert match.position.piece_at(chess.E4) == chess.Piece(chess.PAWN, chess.WHITE)
        assert match.position.piece_at(chess.E2) is None
        assert match.position.turn == chess.BLACK
        assert editor.text == ""
        assert match.message == ""

    def test_unparsable_move_sets_message(self, editor, match):
        before = match.position.fen()
        _type(editor, "zz9")
        assert not editor.submit()
        assert match.position.fen() == before
        assert match.message == "zz9 is not a valid move!"
        assert editor.text == ""

    def test_illegal_move_is_reported_as_invalid(self, editor, match):
        _type(editor, "e5")
        editor.submit()
        assert match.message == "e5 is not a valid move!"

    def test_unapplicable_move_is_silent(self, editor, match):
        match.message = "old message"
        before = match.position.fen()
        _type(editor, "0000")
        assert not editor.submit()
        assert match.position.fen() == before
        assert match.message == ""
        assert editor.text == ""

    def test_message_cleared_by_next_submit(self, editor, match):
        _type(editor, "zz9")
        editor.submit()
        _type(editor, "Nf3")
        editor.submit()
        assert match.message == ""
        assert match.position.piece_at(chess.F3) == chess.Piece(chess.KNIGHT, chess.WHITE)

    def test_empty_submit(self, editor, match):
        editor.submit()
        assert match.message == " is not a valid move!"
        assert match.position.fen() == chess.STARTING_FEN

    def test_sequence_of_moves(self, editor, match):
        for san in ("e4", "e5", "Nf3", "Nc6"):
            _type(editor, san)
            assert editor.submit()
        assert match.position.fullmove_number == 3
        assert match.position.turn == chess.WHITE
