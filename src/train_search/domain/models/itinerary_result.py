"""Itinerary result domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ItineraryResult:
    """Priced, timed summary of one direct segment on a single train."""

    train: str
    starting: str
    reaching: str
    distance: float
    price: str  # always two decimals, e.g. "12.50"
