"""Domain models for train search."""

from train_search.domain.models.field_error import FieldError
from train_search.domain.models.itinerary_result import ItineraryResult
from train_search.domain.models.stop import Stop
from train_search.domain.models.train import Train

__all__ = [
    "FieldError",
    "ItineraryResult",
    "Stop",
    "Train",
]
