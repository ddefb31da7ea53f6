import chess

from chess_tui import rules
from chess_tui.match import MatchState
from chess_tui.types import Player


def _play(match, san):
    match.position = rules.apply_move(match.position, rules.parse_move(san, match.position))


class TestMatchState:
    def test_defaults_to_initial_position(self, match):
        assert match.position.fen() == chess.STARTING_FEN
        assert match.message == ""

    def test_player_by_color(self, match, players):
        white, black = players
        assert match.player(chess.WHITE) is white
        assert match.player(chess.BLACK) is black
        assert match.active_player is white


class TestClockTick:
    def test_no_change_before_a_second(self, match, clock):
        clock.advance(0.99)
        assert not match.tick()
        assert match.white.clock == 600
        assert match.black.clock == 600

    def test_only_side_to_move_counts(self, match, clock):
        clock.advance(1.0)
        assert match.tick()
        assert match.white.clock == 599
        assert match.black.clock == 600

    def test_one_second_per_tick_at_most(self, match, clock):
        clock.advance(7.5)
        match.tick()
        assert match.white.clock == 599
        # the timestamp moved to now, so the next tick waits a full second again
        assert not match.tick()
        assert match.white.clock == 599

    def test_fraction_is_not_carried(self, match, clock):
        clock.advance(1.5)
        match.tick()
        clock.advance(0.5)
        assert not match.tick()
        clock.advance(0.5)
        assert match.tick()
        assert match.white.clock == 598

    def test_black_counts_after_white_moves(self, match, clock):
        _play(match, "e4")
        clock.advance(1)
        match.tick()
        assert match.white.clock == 600
        assert match.black.clock == 599

    def test_clock_never_negative(self, clock):
        match = MatchState(Player("a", 1500, clock=2), Player("b", 1500, clock=2), clock=clock)
        history = [match.white.clock]
        for _ in range(5):
            clock.advance(1)
            match.tick()
            history.append(match.white.clock)
        assert history == [2, 1, 0, 0, 0, 0]
        assert all(later <= earlier for earlier, later in zip(history, history[1:]))
        assert match.black.clock == 2
