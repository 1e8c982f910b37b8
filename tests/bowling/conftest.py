from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from bowling.game.app.game import BowlingGame
from bowling.game.core.models import GameConfig, ScoreCard


def play(game: BowlingGame, rolls: Iterable[int]) -> BowlingGame:
    for pins in rolls:
        game.roll(pins)
    return game


@pytest.fixture
def default_config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def card() -> ScoreCard:
    return ScoreCard()


@pytest.fixture
def game_factory() -> Callable[..., BowlingGame]:
    def _make(max_pins_per_frame: int = 10, max_frames: int = 10) -> BowlingGame:
        return BowlingGame(max_pins_per_frame=max_pins_per_frame, max_frames=max_frames)

    return _make


@pytest.fixture
def played() -> Callable[..., BowlingGame]:
    def _play(rolls: Iterable[int], *, max_pins_per_frame: int = 10, max_frames: int = 10) -> BowlingGame:
        return play(BowlingGame(max_pins_per_frame, max_frames), rolls)

    return _play
