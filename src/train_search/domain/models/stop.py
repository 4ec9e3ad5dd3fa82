"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """A single station entry within a train's ordered route."""

    station: str
    distance_from_previous: float  # 0 for the first stop by convention
    departure_time: str  # "HH:mm", kept opaque
