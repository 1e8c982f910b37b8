"""Public state-machine error taxonomy."""

from __future__ import annotations


class StateMachineError(Exception):
    """Base class for all state-machine failures."""


class ConfigurationError(StateMachineError):
    """Rule table rejected at construction time."""


class InvalidTransitionError(StateMachineError):
    """Event has no meaningful next state from the current state."""

    def __init__(self, event: object, state: object) -> None:
        self.event = event
        self.state = state
        super().__init__(
            f"event {event!r} acting on state {state!r} does not result in a meaningful next state"
        )


class UnknownStateError(StateMachineError):
    """State is not registered in the rule table.

    Raised both when a transition resolves to an unregistered state and when the
    current state pointer was reset to one. ``event`` and ``source`` are ``None``
    for the latter.
    """

    def __init__(self, state: object, *, event: object = None, source: object = None) -> None:
        self.state = state
        self.event = event
        self.source = source
        if source is None:
            message = f"current state {state!r} is not registered in the rule table"
        else:
            message = (
                f"encountered unknown state {state!r} when event {event!r} acts on state {source!r}"
            )
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "InvalidTransitionError",
    "StateMachineError",
    "UnknownStateError",
]
