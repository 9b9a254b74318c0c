"""Load and validate the YAML file of user-facing messages."""

import os
from pathlib import Path

import yaml

REQUIRED_MESSAGES = ("invalid_id", "not_found", "delete_prompt")


def _repo_root() -> Path:
    """Return repo root (parent of src)."""
    return Path(__file__).resolve().parent.parent.parent


def get_messages_path() -> Path:
    """Return path to the messages YAML (AGENDA_MESSAGES_PATH env or flows/messages.yaml)."""
    default = _repo_root() / "flows" / "messages.yaml"
    path = os.environ.get("AGENDA_MESSAGES_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_messages(path: Path | None = None) -> dict[str, str]:
    """Load messages YAML and return message id -> text."""
    if path is None:
        path = get_messages_path()
    raw = path.read_text(encoding="utf-8")
    messages = yaml.safe_load(raw)
    if not isinstance(messages, dict):
        raise ValueError("Messages YAML must be a dict")
    for message_id in REQUIRED_MESSAGES:
        if message_id not in messages:
            raise ValueError(f"Missing message '{message_id}'")
    for message_id, text in messages.items():
        if not isinstance(text, str):
            raise ValueError(f"Message '{message_id}' must be a string")
    return messages


_messages_cache: dict[str, str] | None = None


def get_messages(cache: bool = True) -> dict[str, str]:
    """Load messages (cached by default). Pass cache=False to reload."""
    global _messages_cache
    if cache and _messages_cache is not None:
        return _messages_cache
    _messages_cache = load_messages()
    return _messages_cache
