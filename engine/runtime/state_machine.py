"""Table-driven state-machine executor."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from types import MappingProxyType

from engine.api.errors import ConfigurationError, InvalidTransitionError, UnknownStateError
from engine.api.state_machine import EffectHook, StateRule, TransitionContext, TransitionGuard
from engine.runtime.debug_config import enabled_transition_trace

logger = logging.getLogger(__name__)


class RuntimeStateMachine[TState: Hashable, TEvent]:
    """Deterministic rule-table executor.

    Each ``on`` call resolves the rule of the current state, derives the next state,
    validates it against the table, commits it, and only then runs the effect. Guards
    and hooks are evaluated in registration order around that core step.

    Not thread-safe; callers sharing an instance across threads must lock around it.
    """

    def __init__(
        self,
        rules: Mapping[TState, StateRule[TState, TEvent]],
        initial_state: TState,
        *,
        guards: tuple[TransitionGuard[TState, TEvent], ...] = (),
        hooks: tuple[EffectHook[TState, TEvent], ...] = (),
        name: str = "state_machine",
        trace_transitions: bool | None = None,
    ) -> None:
        if not rules:
            raise ConfigurationError(f"{name}: rule table must not be empty")
        if initial_state not in rules:
            raise ConfigurationError(
                f"{name}: initial state {initial_state!r} does not exist in rule table"
            )
        self._rules: Mapping[TState, StateRule[TState, TEvent]] = MappingProxyType(dict(rules))
        self._state = initial_state
        self._guards = tuple(guards)
        self._hooks = tuple(hooks)
        self._name = name
        if trace_transitions is None:
            trace_transitions = enabled_transition_trace()
        self._trace = bool(trace_transitions)

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> TState:
        return self._state

    @property
    def states(self) -> tuple[TState, ...]:
        return tuple(self._rules)

    def get_current_state(self) -> TState:
        return self._state

    def has_state(self, state: object) -> bool:
        try:
            return state in self._rules
        except TypeError:
            return False

    def reset_current_state(self, state: TState) -> None:
        """Overwrite current state pointer; membership is checked by the next ``on``."""
        if self._trace:
            logger.debug(
                "state_machine_reset machine=%s from=%r to=%r", self._name, self._state, state
            )
        self._state = state

    def on(self, event: TEvent) -> None:
        """Execute one step for ``event``."""
        source = self._state
        if not self.has_state(source):
            logger.error("state_machine_unknown_current machine=%s state=%r", self._name, source)
            raise UnknownStateError(source)
        rule = self._rules[source]

        target = self._run_guards(event, source)
        redirected = target is not None
        if target is None:
            target = rule.transition(event)
            if target is None:
                logger.debug(
                    "state_machine_rejected machine=%s state=%r event=%r",
                    self._name,
                    source,
                    event,
                )
                raise InvalidTransitionError(event, source)

        if not self.has_state(target):
            logger.error(
                "state_machine_unknown_target machine=%s source=%r target=%r event=%r",
                self._name,
                source,
                target,
                event,
            )
            raise UnknownStateError(target, event=event, source=source)

        self._state = target
        if self._trace:
            logger.debug(
                "state_machine_transition",
                extra={
                    "machine": self._name,
                    "source": repr(source),
                    "target": repr(target),
                    "event": repr(event),
                    "redirected": redirected,
                },
            )
        if not redirected:
            rule.effect(event)

        context = TransitionContext(event=event, source=source, target=target, redirected=redirected)
        for hook in self._hooks:
            forced = hook(context)
            if forced is not None:
                logger.debug(
                    "state_machine_forced machine=%s target=%r forced=%r", self._name, target, forced
                )
                self.reset_current_state(forced)

    def _run_guards(self, event: TEvent, source: TState) -> TState | None:
        for guard in self._guards:
            target = guard(event, source)
            if target is not None:
                return target
        return None


StateMachine = RuntimeStateMachine
