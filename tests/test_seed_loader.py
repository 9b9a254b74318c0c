"""Tests for SeedLoader: file and HTTP sources, failures fall back to an empty list."""

import asyncio
import json
import logging

import httpx

from agenda.domain import Contact
from agenda.infrastructure import SeedLoader

SEED = [{"id": 1, "name": "Ana", "email": "a@x.com", "telefon": "111"}]


def _load(loader: SeedLoader) -> list[Contact]:
    return asyncio.run(loader.load())


def _transport(status: int, body: str) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/contacts.json"
        return httpx.Response(status, text=body)

    return httpx.MockTransport(handler)


def test_file_source(tmp_path) -> None:
    path = tmp_path / "contacts.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    assert _load(SeedLoader(path)) == [
        Contact(id=1, name="Ana", email="a@x.com", phone="111")
    ]


def test_missing_file_returns_empty_and_logs(tmp_path, caplog) -> None:
    with caplog.at_level(logging.ERROR):
        assert _load(SeedLoader(tmp_path / "missing.json")) == []
    assert "Could not load seed contacts" in caplog.text


def test_malformed_content_returns_empty(tmp_path, caplog) -> None:
    path = tmp_path / "contacts.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert _load(SeedLoader(path)) == []
    assert "not a valid contact list" in caplog.text


def test_deeply_nested_seed_returns_empty(tmp_path, caplog) -> None:
    path = tmp_path / "contacts.json"
    path.write_text("[" * 200_000 + "]" * 200_000, encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert _load(SeedLoader(path)) == []
    assert "not a valid contact list" in caplog.text


def test_duplicate_ids_in_seed_return_empty(tmp_path) -> None:
    path = tmp_path / "contacts.json"
    path.write_text(json.dumps([{"id": 1}, {"id": 1}]), encoding="utf-8")
    assert _load(SeedLoader(path)) == []


def test_http_source() -> None:
    loader = SeedLoader(
        "http://seed.test/contacts.json", transport=_transport(200, json.dumps(SEED))
    )
    assert _load(loader) == [Contact(id=1, name="Ana", email="a@x.com", phone="111")]


def test_http_non_success_returns_empty(caplog) -> None:
    loader = SeedLoader(
        "http://seed.test/contacts.json", transport=_transport(404, "Not Found")
    )
    with caplog.at_level(logging.WARNING):
        assert _load(loader) == []
    assert "404" in caplog.text


def test_http_unreachable_returns_empty() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    loader = SeedLoader(
        "http://seed.test/contacts.json", transport=httpx.MockTransport(handler)
    )
    assert _load(loader) == []


def test_repo_seed_file_is_valid() -> None:
    from pathlib import Path

    path = Path(__file__).resolve().parent.parent / "data" / "contacts.json"
    contacts = _load(SeedLoader(path))
    assert len(contacts) == 3
    assert [c.id for c in contacts] == [1, 2, 3]
