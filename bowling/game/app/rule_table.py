"""Rule-table wiring of scoring rules onto the engine state machine."""

from __future__ import annotations

from functools import partial

from bowling.game.core.models import FrameState, GameConfig, ScoreCard
from bowling.game.core.rules import (
    FIRST_BOWL_TARGETS,
    SECOND_BOWL_TARGETS,
    first_bowl_target,
    frames_exhausted,
    score_first_bowl,
    score_second_bowl,
    second_bowl_target,
)
from engine.api import EffectHook, StateRule, TransitionContext, TransitionGuard, absorbing_rule

type FrameRule = StateRule[FrameState, int]


def build_rule_table(card: ScoreCard, config: GameConfig) -> dict[FrameState, FrameRule]:
    """Build one rule per frame state, bound to ``card`` and ``config``."""
    rules: dict[FrameState, FrameRule] = {}
    for state, (open_target, strike_target) in FIRST_BOWL_TARGETS.items():
        rules[state] = StateRule(
            transition=partial(
                first_bowl_target,
                config,
                open_target=open_target,
                strike_target=strike_target,
            ),
            effect=partial(score_first_bowl, card, config, multiplier=state.multiplier),
        )
    for state, (open_target, spare_target) in SECOND_BOWL_TARGETS.items():
        rules[state] = StateRule(
            transition=partial(
                second_bowl_target,
                card,
                config,
                open_target=open_target,
                spare_target=spare_target,
            ),
            effect=partial(score_second_bowl, card, multiplier=state.multiplier),
        )
    rules[FrameState.FINISHED] = absorbing_rule(FrameState.FINISHED)
    return rules


def finish_on_max_frames(
    card: ScoreCard, config: GameConfig, pins: int, state: FrameState
) -> FrameState | None:
    """Redirect every roll to FINISHED once all frames are complete."""
    if frames_exhausted(card, config):
        return FrameState.FINISHED
    return None


def lock_when_finished(
    card: ScoreCard, config: GameConfig, context: TransitionContext[FrameState, int]
) -> FrameState | None:
    """Force FINISHED right after the roll that completes the last frame."""
    if frames_exhausted(card, config) and context.target is not FrameState.FINISHED:
        return FrameState.FINISHED
    return None


def build_guards(card: ScoreCard, config: GameConfig) -> tuple[TransitionGuard[FrameState, int], ...]:
    return (partial(finish_on_max_frames, card, config),)


def build_hooks(card: ScoreCard, config: GameConfig) -> tuple[EffectHook[FrameState, int], ...]:
    return (partial(lock_when_finished, card, config),)
