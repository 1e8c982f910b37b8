"""Engine runtime modules."""

from engine.api.state_machine import StateRule, TransitionContext
from engine.runtime.debug_config import DebugConfig, load_debug_config
from engine.runtime.logging import configure_engine_logging, setup_engine_logging
from engine.runtime.state_machine import RuntimeStateMachine, StateMachine

__all__ = [
    "DebugConfig",
    "RuntimeStateMachine",
    "StateMachine",
    "StateRule",
    "TransitionContext",
    "configure_engine_logging",
    "load_debug_config",
    "setup_engine_logging",
]
