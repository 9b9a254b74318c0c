"""Seed loader: initial contacts from a static JSON resource (file path or URL)."""

import asyncio
import json
import logging
from pathlib import Path

import httpx

from agenda.domain import Contact
from agenda.infrastructure.records import contacts_from_records

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class SeedLoader:
    """Implements SeedSource. Any failure is logged and yields an empty list; no retry.

    transport is passed to httpx.AsyncClient (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        source: str | Path,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._source = str(source)
        self._transport = transport

    @property
    def source(self) -> str:
        return self._source

    async def _fetch_text(self) -> str:
        if _is_url(self._source):
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self._source)
                response.raise_for_status()
                return response.text
        return await asyncio.to_thread(Path(self._source).read_text, encoding="utf-8")

    async def load(self) -> list[Contact]:
        try:
            text = await self._fetch_text()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Seed resource %s answered %s", self._source, exc.response.status_code
            )
            return []
        except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError):
            logger.exception("Could not load seed contacts from %s", self._source)
            return []
        try:
            return contacts_from_records(json.loads(text))
        except (ValueError, RecursionError):
            logger.exception("Seed resource %s is not a valid contact list", self._source)
            return []
