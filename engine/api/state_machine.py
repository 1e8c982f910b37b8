"""Public table-driven state-machine API contracts."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from typing import Protocol

type TransitionFn[TState, TEvent] = Callable[[TEvent], TState | None]
type EffectFn[TEvent] = Callable[[TEvent], None]


@dataclass(frozen=True, slots=True)
class StateRule[TState, TEvent]:
    """Behavior bound to one state: pure transition plus post-commit effect."""

    transition: TransitionFn[TState, TEvent]
    effect: EffectFn[TEvent]


@dataclass(frozen=True, slots=True)
class TransitionContext[TState, TEvent]:
    """Committed step passed to effect hooks."""

    event: TEvent
    source: TState
    target: TState
    redirected: bool = False


# Guards run before the rule's transition; the first non-None result redirects the step.
type TransitionGuard[TState, TEvent] = Callable[[TEvent, TState], TState | None]
# Hooks run after the effect; a non-None result forces the current state.
type EffectHook[TState, TEvent] = Callable[[TransitionContext[TState, TEvent]], TState | None]


def noop_effect(event: object) -> None:
    """Effect that does nothing."""


def absorbing_rule[TState: Hashable, TEvent](state: TState) -> StateRule[TState, TEvent]:
    """Build a terminal rule that maps every event back to ``state``."""
    return StateRule(transition=lambda _event: state, effect=noop_effect)


class StateMachine[TState: Hashable, TEvent](Protocol):
    """Public state-machine contract."""

    @property
    def name(self) -> str:
        """Return label used in log records."""

    @property
    def state(self) -> TState:
        """Return current state."""

    @property
    def states(self) -> tuple[TState, ...]:
        """Return registered states in table order."""

    def on(self, event: TEvent) -> None:
        """Transition on one event, then run its effect."""

    def reset_current_state(self, state: TState) -> None:
        """Overwrite current state without validation."""

    def get_current_state(self) -> TState:
        """Return current state."""

    def has_state(self, state: object) -> bool:
        """Return whether state is registered."""


def create_state_machine[TState: Hashable, TEvent](
    rules: Mapping[TState, StateRule[TState, TEvent]],
    initial_state: TState,
    *,
    guards: tuple[TransitionGuard[TState, TEvent], ...] = (),
    hooks: tuple[EffectHook[TState, TEvent], ...] = (),
    name: str = "state_machine",
    trace_transitions: bool | None = None,
) -> StateMachine[TState, TEvent]:
    """Create default engine state-machine implementation."""
    from engine.runtime.state_machine import RuntimeStateMachine

    return RuntimeStateMachine(
        rules,
        initial_state,
        guards=guards,
        hooks=hooks,
        name=name,
        trace_transitions=trace_transitions,
    )


__all__ = [
    "EffectFn",
    "EffectHook",
    "StateMachine",
    "StateRule",
    "TransitionContext",
    "TransitionFn",
    "TransitionGuard",
    "absorbing_rule",
    "create_state_machine",
    "noop_effect",
]
