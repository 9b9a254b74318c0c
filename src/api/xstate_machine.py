"""
Delete confirmation machine on xstate-python.

The machine is plain XState JSON (flows/delete_confirmation.json), so it can be
opened in Stately Studio. ConfirmationMachine is the ConfirmationFlow the
ContactService drives: the service keeps the current state value on its
pending delete and asks the machine for the next one.
"""

import json
import os
from pathlib import Path

from xstate.machine import Machine

from agenda.application import CANCELLED, CONFIRMED


def _repo_root() -> Path:
    return Path(__file__).resolve().parent.parent.parent


def get_machine_path() -> Path:
    """Return path to the machine JSON (XSTATE_MACHINE_PATH env or flows/delete_confirmation.json)."""
    path = os.environ.get("XSTATE_MACHINE_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return _repo_root() / "flows" / "delete_confirmation.json"


def load_machine(path: Path | None = None) -> dict:
    """Load the machine config. It must start somewhere and be able to end confirmed or cancelled."""
    config = json.loads((path or get_machine_path()).read_text(encoding="utf-8"))
    states = config.get("states")
    if "initial" not in config or not isinstance(states, dict):
        raise ValueError("Machine must have 'initial' and 'states'")
    if config["initial"] not in states:
        raise ValueError(f"initial state '{config['initial']}' must be a state")
    for required in (CONFIRMED, CANCELLED):
        if required not in states:
            raise ValueError(f"Machine must have a '{required}' state")
    return config


class ConfirmationMachine:
    """ConfirmationFlow backed by an xstate-python Machine."""

    def __init__(self, config: dict) -> None:
        self.initial: str = config["initial"]
        self._machine = Machine(config)

    def advance(self, state_value: str, event: str) -> str | None:
        """Next state value for (state_value, event), or None if the event is not handled."""
        try:
            state = self._machine.state_from(state_value)
            next_state = self._machine.transition(state, event)
        except (ValueError, KeyError):
            return None
        if next_state.value == state_value:
            return None
        return next_state.value


_machine_cache: ConfirmationMachine | None = None


def get_machine(cache: bool = True) -> ConfirmationMachine:
    """Build the machine from get_machine_path() (cached by default)."""
    global _machine_cache
    if cache and _machine_cache is not None:
        return _machine_cache
    _machine_cache = ConfirmationMachine(load_machine())
    return _machine_cache
