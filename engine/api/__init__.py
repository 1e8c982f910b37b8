"""Public engine API contracts."""

from engine.api.errors import (
    ConfigurationError,
    InvalidTransitionError,
    StateMachineError,
    UnknownStateError,
)
from engine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging, get_logger
from engine.api.state_machine import (
    EffectFn,
    EffectHook,
    StateMachine,
    StateRule,
    TransitionContext,
    TransitionFn,
    TransitionGuard,
    absorbing_rule,
    create_state_machine,
    noop_effect,
)

__all__ = [
    "ConfigurationError",
    "EffectFn",
    "EffectHook",
    "EngineLoggingConfig",
    "InvalidTransitionError",
    "JsonFormatter",
    "StateMachine",
    "StateMachineError",
    "StateRule",
    "TransitionContext",
    "TransitionFn",
    "TransitionGuard",
    "UnknownStateError",
    "absorbing_rule",
    "configure_logging",
    "create_state_machine",
    "get_logger",
    "noop_effect",
]
