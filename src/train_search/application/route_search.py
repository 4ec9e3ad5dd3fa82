"""Direct route search over train stop sequences.

A train qualifies for a (source, destination) query when it stops at the
source strictly before the destination. Station lookup always uses the first
matching stop, so a train that lists a station twice is only ever matched on
its first occurrence.

The trip distance is the sum of ``distance_from_previous`` over the stops from
the source up to and including the destination. The source stop's own value
(the leg arriving at the source) is part of that sum.
"""

import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Context, Decimal

from train_search.domain.errors import InvalidDataError
from train_search.domain.models import ItineraryResult, Stop, Train

FARE_PER_DISTANCE_UNIT = 1.25

_CENTS = Decimal("0.01")
# Wide enough to quantize any finite float to cents.
_PRICE_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_price(distance: float) -> str:
    """Price a distance and render it with exactly two decimals.

    Rounds half away from zero on the exact binary value of the product, so
    12.5 renders as "12.50" and 0.125 as "0.13".
    """
    price = distance * FARE_PER_DISTANCE_UNIT
    return str(Decimal(price).quantize(_CENTS, context=_PRICE_CONTEXT))


def _find_stop_index(stops: Sequence[Stop], station: str) -> int | None:
    for index, stop in enumerate(stops):
        if stop.station == station:
            return index
    return None


def _checked_distance(train: Train, stop: Stop) -> float:
    value = stop.distance_from_previous
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or not math.isfinite(value)
    ):
        raise InvalidDataError(
            f"Train '{train.name}' has a non-numeric distance at station "
            f"'{stop.station}': {value!r}"
        )
    return value


def _build_itinerary(train: Train, source: str, destination: str) -> ItineraryResult | None:
    source_index = _find_stop_index(train.stops, source)
    destination_index = _find_stop_index(train.stops, destination)

    if source_index is None or destination_index is None:
        return None
    if source_index >= destination_index:
        return None

    segment = train.stops[source_index : destination_index + 1]
    # Plain left-to-right addition; sum() compensates float error from 3.12 on.
    distance: float = 0
    for stop in segment:
        distance += _checked_distance(train, stop)

    return ItineraryResult(
        train=train.name,
        starting=train.stops[source_index].departure_time,
        reaching=train.stops[destination_index].departure_time,
        distance=distance,
        price=format_price(distance),
    )


def search_trains(
    trains: Sequence[Train], source: str, destination: str
) -> list[ItineraryResult]:
    """Find every train that serves source before destination.

    Args:
        trains: Snapshot of all trains, in store order.
        source: Station to board at.
        destination: Station to leave the train at.

    Returns:
        One itinerary per qualifying train, in the same relative order as
        ``trains``. Trains missing either station, or serving them in the
        wrong order, are left out.

    Raises:
        InvalidDataError: A distance in a qualifying segment is not a finite
            number.
    """
    results: list[ItineraryResult] = []
    for train in trains:
        itinerary = _build_itinerary(train, source, destination)
        if itinerary is not None:
            results.append(itinerary)
    return results
