"""Shared pytest fixtures: a recording screen and a controllable clock."""

import pytest

from chess_tui.match import MatchState
from chess_tui.types import Orientation, Player
from fakes import FakeClock, FakeScreen


@pytest.fixture
def clock():
    return FakeClock(1000.0)


@pytest.fixture
def players():
    return Player("huy", 2000, "", 600), Player("gmhuy", 3000, "GM", 600)


@pytest.fixture
def match(players, clock):
    white, black = players
    return MatchState(white, black, orientation=Orientation.FROM_WHITE_SIDE, clock=clock)


@pytest.fixture
def screen():
    return FakeScreen()
