"""Wire schemas for train records and search queries.

Field names follow the public JSON API (camelCase); the domain models use
snake_case. Validation messages are keyed by wire field name so API clients
get one human-readable message per offending field.
"""

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from train_search.domain.models import FieldError, Stop, Train

DEPARTURE_TIME_PATTERN = re.compile(r"([0-1]?[0-9]|2[0-3]):[0-5][0-9]")
_NUMERIC_PATTERN = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")

FIELD_MESSAGES = {
    "name": "Train name is required",
    "station": "Station name is required",
    "distanceFromPrevious": "Distance from previous station must be a number",
    "departureTime": "Departure time must be in HH:mm format",
    "source": "Source station is required",
    "destination": "Destination station is required",
}
DEFAULT_FIELD_MESSAGE = "Invalid value"


class StopPayload(BaseModel):
    """A stop as submitted by API clients or listed in the train catalog."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    station: str = Field(min_length=1)
    distance_from_previous: int | float = Field(alias="distanceFromPrevious")
    departure_time: str = Field(alias="departureTime")

    @field_validator("distance_from_previous", mode="before")
    @classmethod
    def validate_distance(cls, v: Any) -> int | float:
        """Accept finite numbers and numeric strings; reject booleans.

        Whole values are stored as ints, so 100.0 and "100.0" both read back as 100.
        """
        if isinstance(v, bool):
            raise ValueError("distance must be a number")
        if isinstance(v, str) and _NUMERIC_PATTERN.fullmatch(v):
            v = float(v) if "." in v else int(v)
        if isinstance(v, int):
            return v
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("distance must be finite")
            return int(v) if v.is_integer() else v
        raise ValueError("distance must be a number")

    @field_validator("departure_time")
    @classmethod
    def validate_departure_time(cls, v: str) -> str:
        """Validate departure time is a 24-hour HH:mm string."""
        if not DEPARTURE_TIME_PATTERN.fullmatch(v):
            raise ValueError("departure time must be in HH:mm format")
        return v

    def to_domain(self) -> Stop:
        return Stop(
            station=self.station,
            distance_from_previous=self.distance_from_previous,
            departure_time=self.departure_time,
        )


class TrainPayload(BaseModel):
    """A train as submitted by API clients or listed in the train catalog."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    stops: list[StopPayload] = Field(default_factory=list)

    def to_domain(self) -> Train:
        return Train(name=self.name, stops=tuple(stop.to_domain() for stop in self.stops))


class SearchQuery(BaseModel):
    """Query parameters of a direct route search."""

    model_config = ConfigDict(extra="ignore")

    source: str = Field(min_length=1)
    destination: str = Field(min_length=1)


def _format_param(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic location as a dotted path, e.g. ``stops[0].station``."""
    param = ""
    for part in loc:
        if isinstance(part, int):
            param += f"[{part}]"
        else:
            param = f"{param}.{part}" if param else part
    return param


def to_field_errors(exc: ValidationError, location: str) -> list[FieldError]:
    """Convert a pydantic validation error into field errors for API clients.

    Args:
        exc: The validation error raised while parsing a request.
        location: Where the fields came from ("body" or "query").
    """
    field_errors: list[FieldError] = []
    for error in exc.errors():
        loc = tuple(error["loc"])
        field_names = [part for part in loc if isinstance(part, str)]
        field_name = field_names[-1] if field_names else ""
        value = None if error["type"] == "missing" else error.get("input")
        field_errors.append(
            FieldError(
                msg=FIELD_MESSAGES.get(field_name, DEFAULT_FIELD_MESSAGE),
                param=_format_param(loc),
                location=location,
                value=value,
            )
        )
    return field_errors
