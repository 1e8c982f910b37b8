from __future__ import annotations

import pytest

from engine.api import (
    ConfigurationError,
    InvalidTransitionError,
    StateMachineError,
    StateRule,
    UnknownStateError,
    absorbing_rule,
    create_state_machine,
    noop_effect,
)
from engine.runtime.state_machine import RuntimeStateMachine


def test_create_state_machine_returns_runtime_implementation() -> None:
    machine = create_state_machine({"idle": absorbing_rule("idle")}, "idle", name="factory")
    assert isinstance(machine, RuntimeStateMachine)
    assert machine.name == "factory"
    assert machine.get_current_state() == "idle"


def test_absorbing_rule_maps_every_event_to_itself() -> None:
    rule: StateRule[str, object] = absorbing_rule("done")
    assert rule.transition(1) == "done"
    assert rule.transition(None) == "done"
    assert rule.effect is noop_effect


def test_create_state_machine_wires_guards_and_hooks() -> None:
    forced: list[str] = []

    def hook(context) -> str | None:
        forced.append(context.target)
        return None

    machine = create_state_machine(
        {
            "open": StateRule(transition=lambda e: "open", effect=noop_effect),
            "closed": absorbing_rule("closed"),
        },
        "open",
        guards=(lambda event, state: "closed" if event == "close" else None,),
        hooks=(hook,),
    )
    machine.on("noop")
    machine.on("close")
    assert machine.get_current_state() == "closed"
    assert forced == ["open", "closed"]


def test_errors_share_common_base() -> None:
    assert issubclass(ConfigurationError, StateMachineError)
    assert issubclass(InvalidTransitionError, StateMachineError)
    assert issubclass(UnknownStateError, StateMachineError)


def test_error_messages_carry_diagnostic_values() -> None:
    invalid = InvalidTransitionError(11, "FIRST")
    assert "11" in str(invalid)
    assert "'FIRST'" in str(invalid)

    unknown_target = UnknownStateError("ghost", event=3, source="a")
    assert "'ghost'" in str(unknown_target)
    assert "'a'" in str(unknown_target)

    unknown_current = UnknownStateError("ghost")
    assert "current state" in str(unknown_current)


def test_create_state_machine_validates_eagerly() -> None:
    with pytest.raises(ConfigurationError, match="initial state"):
        create_state_machine({"a": absorbing_rule("a")}, "b")
