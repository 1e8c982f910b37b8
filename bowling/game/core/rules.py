"""Frame resolution and scoring rules.

Transition functions are pure: they read the card and return the next state, or
``None`` when the pin count cannot happen from the current position. Effects mutate
the ``ScoreCard`` they are given and nothing else.
"""

from __future__ import annotations

from bowling.game.core.models import FrameState, GameConfig, ScoreCard

# state -> (target when pins remain standing, target when the frame is cleared)
FIRST_BOWL_TARGETS: dict[FrameState, tuple[FrameState, FrameState]] = {
    FrameState.FIRST_BOWL: (FrameState.SECOND_BOWL, FrameState.FIRST_BOWL_AFTER_STRIKE),
    FrameState.FIRST_BOWL_AFTER_SPARE: (
        FrameState.SECOND_BOWL,
        FrameState.FIRST_BOWL_AFTER_STRIKE,
    ),
    FrameState.FIRST_BOWL_AFTER_STRIKE: (
        FrameState.SECOND_BOWL_AFTER_STRIKE,
        FrameState.FIRST_BOWL_AFTER_TWO_STRIKES,
    ),
    FrameState.FIRST_BOWL_AFTER_TWO_STRIKES: (
        FrameState.SECOND_BOWL_AFTER_STRIKE,
        FrameState.FIRST_BOWL_AFTER_TWO_STRIKES,
    ),
}

SECOND_BOWL_TARGETS: dict[FrameState, tuple[FrameState, FrameState]] = {
    FrameState.SECOND_BOWL: (FrameState.FIRST_BOWL, FrameState.FIRST_BOWL_AFTER_SPARE),
    FrameState.SECOND_BOWL_AFTER_STRIKE: (FrameState.FIRST_BOWL, FrameState.FIRST_BOWL_AFTER_SPARE),
}


def first_bowl_target(
    config: GameConfig,
    pins: int,
    *,
    open_target: FrameState,
    strike_target: FrameState,
) -> FrameState | None:
    """Resolve the state that follows the first bowl of a frame."""
    if pins < 0:
        return None
    if pins < config.max_pins_per_frame:
        return open_target
    if pins == config.max_pins_per_frame:
        return strike_target
    return None


def second_bowl_target(
    card: ScoreCard,
    config: GameConfig,
    pins: int,
    *,
    open_target: FrameState,
    spare_target: FrameState,
) -> FrameState | None:
    """Resolve the state that follows the second bowl of a frame."""
    if pins < 0:
        return None
    frame_pins = card.partial_frame_score + pins
    if frame_pins < config.max_pins_per_frame:
        return open_target
    if frame_pins == config.max_pins_per_frame:
        return spare_target
    return None


def add_points(card: ScoreCard, pins: int, *, multiplier: int) -> None:
    card.score += pins * multiplier


def record_first_bowl(card: ScoreCard, config: GameConfig, pins: int) -> None:
    """Keep the pins for the second bowl, or close the frame on a strike."""
    if pins < config.max_pins_per_frame:
        card.partial_frame_score = pins
    else:
        card.completed_frame_count += 1


def record_second_bowl(card: ScoreCard) -> None:
    # A second bowl always closes the frame.
    card.partial_frame_score = 0
    card.completed_frame_count += 1


def score_first_bowl(card: ScoreCard, config: GameConfig, pins: int, *, multiplier: int) -> None:
    add_points(card, pins, multiplier=multiplier)
    record_first_bowl(card, config, pins)


def score_second_bowl(card: ScoreCard, pins: int, *, multiplier: int) -> None:
    add_points(card, pins, multiplier=multiplier)
    record_second_bowl(card)


def frames_exhausted(card: ScoreCard, config: GameConfig) -> bool:
    return card.completed_frame_count >= config.max_frames
