"""Application layer - use cases built on the domain."""

from train_search.application.route_search import (
    FARE_PER_DISTANCE_UNIT,
    format_price,
    search_trains,
)
from train_search.application.services import RouteSearchService, TrainRegistrationService

__all__ = [
    "FARE_PER_DISTANCE_UNIT",
    "RouteSearchService",
    "TrainRegistrationService",
    "format_price",
    "search_trains",
]
