"""Tests for the delete confirmation machine and the messages YAML loader."""

import pytest

from agenda.application import CANCELLED, CONFIRMED, PENDING_CONFIRMATION
from api.messages import get_messages_path, load_messages
from api.xstate_machine import ConfirmationMachine, get_machine_path, load_machine


@pytest.fixture
def machine() -> ConfirmationMachine:
    return ConfirmationMachine(load_machine())


def test_load_machine():
    path = get_machine_path()
    assert path.name == "delete_confirmation.json"
    config = load_machine(path)
    assert config["initial"] == PENDING_CONFIRMATION
    assert set(config["states"]) == {PENDING_CONFIRMATION, CONFIRMED, CANCELLED}


def test_initial_state(machine):
    assert machine.initial == PENDING_CONFIRMATION


def test_confirm_and_cancel_transitions(machine):
    assert machine.advance(PENDING_CONFIRMATION, "CONFIRM") == CONFIRMED
    assert machine.advance(PENDING_CONFIRMATION, "CANCEL") == CANCELLED


def test_resolved_states_do_not_transition(machine):
    assert machine.advance(CONFIRMED, "CANCEL") is None
    assert machine.advance(CANCELLED, "CONFIRM") is None


def test_unknown_event_has_no_transition(machine):
    assert machine.advance(PENDING_CONFIRMATION, "OTHER") is None


def test_load_machine_invalid_initial(tmp_path):
    (tmp_path / "machine.json").write_text(
        '{"id": "m", "initial": "missing", "states": {"a": {}}}'
    )
    with pytest.raises(ValueError, match="initial state.*must be a state"):
        load_machine(tmp_path / "machine.json")


def test_load_machine_requires_resolved_states(tmp_path):
    (tmp_path / "machine.json").write_text(
        '{"id": "m", "initial": "a", "states": {"a": {}, "confirmed": {}}}'
    )
    with pytest.raises(ValueError, match="'cancelled' state"):
        load_machine(tmp_path / "machine.json")


def test_load_messages():
    path = get_messages_path()
    assert path.name == "messages.yaml"
    messages = load_messages(path)
    assert messages["invalid_id"] == "Invalid contact ID."
    assert messages["not_found"] == "Contact not found."
    assert "delete" in messages["delete_prompt"].lower()


def test_load_messages_missing_required(tmp_path):
    (tmp_path / "messages.yaml").write_text('invalid_id: "x"\nnot_found: "y"\n')
    with pytest.raises(ValueError, match="Missing message 'delete_prompt'"):
        load_messages(tmp_path / "messages.yaml")


def test_load_messages_env_override(tmp_path, monkeypatch):
    target = tmp_path / "custom.yaml"
    target.write_text(
        'invalid_id: "ID de contacte no vàlid."\n'
        'not_found: "No s\'ha trobat el contacte."\n'
        'delete_prompt: "Estàs segur?"\n',
        encoding="utf-8",
    )
    monkeypatch.setenv("AGENDA_MESSAGES_PATH", str(target))
    assert get_messages_path() == target.resolve()
    assert load_messages()["delete_prompt"] == "Estàs segur?"
