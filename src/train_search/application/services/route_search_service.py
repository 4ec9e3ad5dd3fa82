"""Route search service."""

import logging
from typing import TYPE_CHECKING

from train_search.application.route_search import search_trains
from train_search.domain.errors import TrainSearchError, UpstreamFetchError
from train_search.domain.models import ItineraryResult, Train

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from train_search.domain.ports import TrainRepository


class RouteSearchService:
    """Searches direct itineraries on a fresh snapshot of the schedule store."""

    def __init__(self, train_repository: "TrainRepository") -> None:
        """Initialize with a train repository."""
        self._train_repository = train_repository

    async def search(self, source: str, destination: str) -> list[ItineraryResult]:
        """Fetch all trains and return the direct itineraries from source to destination."""
        trains = await self._fetch_trains()
        results = search_trains(trains, source, destination)
        logger.info(
            f"Search {source!r} -> {destination!r}: "
            f"{len(results)} of {len(trains)} train(s) match"
        )
        return results

    async def _fetch_trains(self) -> list[Train]:
        try:
            return await self._train_repository.fetch_all_trains()
        except TrainSearchError:
            raise
        except Exception as e:
            logger.error(f"Schedule store fetch failed: {e}")
            raise UpstreamFetchError() from e
