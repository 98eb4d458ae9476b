"""
Record source interface.

A record source serves the five collections the dashboard aggregates.
Each fetch is independent and may fail on its own.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class RecordSource(Protocol):
    async def get_dozenten(self) -> list[dict[str, Any]]: ...

    async def get_raeume(self) -> list[dict[str, Any]]: ...

    async def get_teilnehmer(self) -> list[dict[str, Any]]: ...

    async def get_kurse(self) -> list[dict[str, Any]]: ...

    async def get_anmeldungen(self) -> list[dict[str, Any]]: ...


class InMemoryRecordSource:
    """Serves collections that are already materialised in memory.

    Missing collections are served as empty lists. Each fetch returns a
    fresh list so callers cannot mutate the stored snapshot's order.
    """

    def __init__(self, collections: Mapping[str, list] | None = None):
        self.collections = dict(collections or {})

    def _get(self, name: str) -> list[dict[str, Any]]:
        records = list(self.collections.get(name, []))
        logger.debug("Serving %d %s records from memory", len(records), name)
        return records

    async def get_dozenten(self) -> list[dict[str, Any]]:
        return self._get("dozenten")

    async def get_raeume(self) -> list[dict[str, Any]]:
        return self._get("raeume")

    async def get_teilnehmer(self) -> list[dict[str, Any]]:
        return self._get("teilnehmer")

    async def get_kurse(self) -> list[dict[str, Any]]:
        return self._get("kurse")

    async def get_anmeldungen(self) -> list[dict[str, Any]]:
        return self._get("anmeldungen")
