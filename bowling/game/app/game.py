"""Bowling game session driven by the engine state machine."""

from __future__ import annotations

from bowling.game.app.rule_table import build_guards, build_hooks, build_rule_table
from bowling.game.core.models import (
    DEFAULT_MAX_FRAMES,
    DEFAULT_MAX_PINS_PER_FRAME,
    FrameState,
    GameConfig,
    ScoreCard,
)
from bowling.game.infra.config import load_game_config
from engine.api import StateMachine, create_state_machine, get_logger

logger = get_logger(__name__)


class BowlingGame:
    """Running score for a sequence of rolls.

    Bonuses for spares and strikes are applied as multipliers on the rolls that
    follow them, so the score is final after every roll and never revised. Once the
    last frame is complete every further roll is ignored.
    """

    def __init__(
        self,
        max_pins_per_frame: int = DEFAULT_MAX_PINS_PER_FRAME,
        max_frames: int = DEFAULT_MAX_FRAMES,
    ) -> None:
        self._config = GameConfig(max_pins_per_frame=max_pins_per_frame, max_frames=max_frames)
        self._card = ScoreCard()
        self._machine: StateMachine[FrameState, int] = create_state_machine(
            build_rule_table(self._card, self._config),
            FrameState.FIRST_BOWL,
            guards=build_guards(self._card, self._config),
            hooks=build_hooks(self._card, self._config),
            name="bowling",
        )
        self._finish_logged = False

    @classmethod
    def from_config(cls, config: GameConfig) -> BowlingGame:
        return cls(max_pins_per_frame=config.max_pins_per_frame, max_frames=config.max_frames)

    @property
    def config(self) -> GameConfig:
        return self._config

    def roll(self, pins: int) -> None:
        """Record one roll.

        Raises ``InvalidTransitionError`` when the pin count is impossible for the
        current frame, leaving the game unchanged.
        """
        if isinstance(pins, bool) or not isinstance(pins, int):
            raise TypeError(f"pins must be an int, got {type(pins).__name__}")
        self._machine.on(pins)
        logger.debug(
            "bowling_roll pins=%d state=%s score=%d frames=%d",
            pins,
            self._machine.get_current_state(),
            self._card.score,
            self._card.completed_frame_count,
        )
        if not self._finish_logged and self.is_finished():
            self._finish_logged = True
            logger.info(
                "bowling_game_finished score=%d frames=%d",
                self._card.score,
                self._card.completed_frame_count,
            )

    def get_score(self) -> int:
        return self._card.score

    def get_completed_frame_count(self) -> int:
        return self._card.completed_frame_count

    def get_state(self) -> FrameState:
        return self._machine.get_current_state()

    def is_finished(self) -> bool:
        return self._machine.get_current_state() is FrameState.FINISHED


def create_game(config: GameConfig | None = None) -> BowlingGame:
    """Create a game from explicit limits or from ``BOWLING_*`` env vars."""
    return BowlingGame.from_config(config if config is not None else load_game_config())
