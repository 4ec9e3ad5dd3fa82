"""JSON formatting of domain objects for API responses."""

from typing import Any

from train_search.domain.models import FieldError, ItineraryResult, Train


def format_itinerary(itinerary: ItineraryResult) -> dict[str, Any]:
    return {
        "train": itinerary.train,
        "starting": itinerary.starting,
        "reaching": itinerary.reaching,
        "distance": itinerary.distance,
        "price": itinerary.price,
    }


def format_train(train: Train) -> dict[str, Any]:
    return {
        "name": train.name,
        "stops": [
            {
                "station": stop.station,
                "distanceFromPrevious": stop.distance_from_previous,
                "departureTime": stop.departure_time,
            }
            for stop in train.stops
        ],
    }


def format_field_errors(field_errors: list[FieldError]) -> dict[str, Any]:
    """Body of a 422 response."""
    return {"errors": [field_error.model_dump() for field_error in field_errors]}


def format_error(message: str) -> dict[str, Any]:
    """Body of every other error response."""
    return {"error": {"message": message}}
