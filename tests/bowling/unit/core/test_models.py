from __future__ import annotations

import pytest

from bowling.game.core.models import FrameState, GameConfig, ScoreCard


def test_game_config_defaults() -> None:
    config = GameConfig()
    assert config.max_pins_per_frame == 10
    assert config.max_frames == 10


@pytest.mark.parametrize(
    ("pins", "frames"),
    [(0, 10), (10, 0), (-1, 3)],
)
def test_game_config_rejects_non_positive_limits(pins: int, frames: int) -> None:
    with pytest.raises(ValueError):
        GameConfig(max_pins_per_frame=pins, max_frames=frames)


def test_frame_state_multipliers() -> None:
    assert FrameState.FIRST_BOWL.multiplier == 1
    assert FrameState.SECOND_BOWL.multiplier == 1
    assert FrameState.FIRST_BOWL_AFTER_SPARE.multiplier == 2
    assert FrameState.FIRST_BOWL_AFTER_STRIKE.multiplier == 2
    assert FrameState.FIRST_BOWL_AFTER_TWO_STRIKES.multiplier == 3
    assert FrameState.SECOND_BOWL_AFTER_STRIKE.multiplier == 2


def test_score_card_starts_empty() -> None:
    card = ScoreCard()
    assert (card.score, card.partial_frame_score, card.completed_frame_count) == (0, 0, 0)
