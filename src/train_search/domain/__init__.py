"""Domain layer - core business logic and models."""

from train_search.domain.errors import (
    InvalidDataError,
    TrainSearchError,
    UpstreamFetchError,
)
from train_search.domain.models import FieldError, ItineraryResult, Stop, Train
from train_search.domain.ports import (
    RouteSearchService,
    ServerAdapter,
    TrainRegistrationService,
    TrainRepository,
)

__all__ = [
    "FieldError",
    "InvalidDataError",
    "ItineraryResult",
    "RouteSearchService",
    "ServerAdapter",
    "Stop",
    "Train",
    "TrainRegistrationService",
    "TrainRepository",
    "TrainSearchError",
    "UpstreamFetchError",
]
