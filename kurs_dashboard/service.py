"""Load cycle for the dashboard: fetch all collections, aggregate, publish."""

import asyncio
import logging

from .config import COLLECTIONS
from .dashboard import Stats, get_stats
from .exceptions import CollectionLoadError
from .loaders.base import RecordSource

logger = logging.getLogger(__name__)


async def fetch_collections(source: RecordSource) -> dict[str, list]:
    """
    Fetch the five collections concurrently.

    All fetches are started at once and awaited together. If any of them
    fails the whole fetch fails with CollectionLoadError for the first
    failing collection in COLLECTIONS order; no partial result is returned.
    """
    fetchers = {
        "dozenten": source.get_dozenten,
        "raeume": source.get_raeume,
        "teilnehmer": source.get_teilnehmer,
        "kurse": source.get_kurse,
        "anmeldungen": source.get_anmeldungen,
    }
    names = list(COLLECTIONS)

    results = await asyncio.gather(
        *(fetchers[name]() for name in names),
        return_exceptions=True,
    )

    collections: dict[str, list] = {}
    for name, result in zip(names, results):
        if isinstance(result, BaseException):
            raise CollectionLoadError(name, result) from result
        collections[name] = list(result)
    return collections


class DashboardService:
    """Holds the current Stats and refreshes it from a record source.

    Every load() is one cycle with its own generation number. A cycle's
    result is published only if no newer cycle has published already, so
    overlapping reloads end with the freshest snapshot. A failed cycle
    leaves the current Stats untouched.
    """

    def __init__(self, source: RecordSource):
        self.source = source
        self.stats: Stats | None = None
        self.last_error: CollectionLoadError | None = None
        self._generation = 0
        self._published_generation = 0
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def generation(self) -> int:
        """Generation of the currently published Stats (0 before the first)."""
        return self._published_generation

    async def load(self) -> Stats | None:
        """Run one load cycle and return the current Stats afterwards."""
        self._generation += 1
        generation = self._generation
        self._in_flight += 1

        try:
            collections = await fetch_collections(self.source)
        except CollectionLoadError as exc:
            logger.exception("Load cycle %d failed, keeping previous stats", generation)
            if generation > self._published_generation:
                self.last_error = exc
            return self.stats
        finally:
            self._in_flight -= 1

        stats = get_stats(**collections)

        if generation < self._published_generation:
            logger.info(
                "Discarding stats of cycle %d, cycle %d already published",
                generation, self._published_generation,
            )
            return self.stats

        self.stats = stats
        self._published_generation = generation
        self.last_error = None
        logger.info("Published stats of cycle %d", generation)
        return stats
