"""Core domain models used by scoring logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_MAX_PINS_PER_FRAME = 10
DEFAULT_MAX_FRAMES = 10


class FrameState(StrEnum):
    """Position inside a frame plus the bonus carried over from earlier frames."""

    FIRST_BOWL = "FIRST_BOWL"
    SECOND_BOWL = "SECOND_BOWL"
    FIRST_BOWL_AFTER_SPARE = "FIRST_BOWL_AFTER_SPARE"
    FIRST_BOWL_AFTER_STRIKE = "FIRST_BOWL_AFTER_STRIKE"
    FIRST_BOWL_AFTER_TWO_STRIKES = "FIRST_BOWL_AFTER_TWO_STRIKES"
    SECOND_BOWL_AFTER_STRIKE = "SECOND_BOWL_AFTER_STRIKE"
    FINISHED = "FINISHED"

    @property
    def multiplier(self) -> int:
        return SCORE_MULTIPLIERS[self]


SCORE_MULTIPLIERS: dict[FrameState, int] = {
    FrameState.FIRST_BOWL: 1,
    FrameState.SECOND_BOWL: 1,
    FrameState.FIRST_BOWL_AFTER_SPARE: 2,
    FrameState.FIRST_BOWL_AFTER_STRIKE: 2,
    FrameState.FIRST_BOWL_AFTER_TWO_STRIKES: 3,
    FrameState.SECOND_BOWL_AFTER_STRIKE: 2,
    FrameState.FINISHED: 0,
}


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game limits."""

    max_pins_per_frame: int = DEFAULT_MAX_PINS_PER_FRAME
    max_frames: int = DEFAULT_MAX_FRAMES

    def __post_init__(self) -> None:
        if self.max_pins_per_frame < 1:
            raise ValueError(f"max_pins_per_frame must be >= 1, got {self.max_pins_per_frame}")
        if self.max_frames < 1:
            raise ValueError(f"max_frames must be >= 1, got {self.max_frames}")


@dataclass(slots=True)
class ScoreCard:
    """Mutable scoring context shared by rule effects."""

    score: int = 0
    partial_frame_score: int = 0
    completed_frame_count: int = 0
