"""Route search service port."""

from typing import Protocol

from train_search.domain.models.itinerary_result import ItineraryResult


class RouteSearchService(Protocol):
    """Port for searching direct itineraries between two stations."""

    async def search(self, source: str, destination: str) -> list[ItineraryResult]:
        """Find every train serving source before destination.

        Args:
            source: Station the passenger boards at.
            destination: Station the passenger leaves the train at.

        Returns:
            One result per qualifying train, in store order.
        """
        ...
