"""Departure and arrival classification of instantaneous flight states.

Each state is classified on its own, without any history: the decision only
relies on the distance to the airport, the barometric altitude, the track
angle and the vertical rate of the current state vector.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Tuple

from ..core import geodesy as geo
from ..core.flight import FlightState
from ..core.structure import Airport
from ..data.frankfurt import EASTERLY_HEADING, FRA, WESTERLY_HEADING

_log = logging.getLogger(__name__)

# Beyond these limits, an aircraft is not considered for landing
ARRIVING_MAX_ALTITUDE = 4000  # m
ARRIVING_MAX_DISTANCE = 80  # km

DepartureRule = Callable[[FlightState, Airport], bool]


def _climbing_near_airport(flight: FlightState, airport: Airport) -> bool:
    return (
        flight.distance < 30  # type: ignore
        and flight.vertical_rate is not None
        and flight.vertical_rate > 2
    )


def _climbing_low_and_close(flight: FlightState, airport: Airport) -> bool:
    return (
        flight.distance < 15  # type: ignore
        and flight.altitude < 1500  # type: ignore
        and flight.vertical_rate is not None
        and flight.vertical_rate > 0.5
    )


def _aligned_with_departure_runway(
    flight: FlightState, airport: Airport
) -> bool:
    # runway 18/36 is used for departures only
    return (
        flight.distance < 25  # type: ignore
        and flight.altitude < 2000  # type: ignore
        and flight.track is not None
        and (
            abs(geo.angle_diff(flight.track, 180)) < 25
            or abs(geo.angle_diff(flight.track, 360)) < 25
        )
        and flight.vertical_rate is not None
        and flight.vertical_rate > 0
    )


def _moving_away_from_airport(flight: FlightState, airport: Airport) -> bool:
    if (
        flight.distance < 40  # type: ignore
        and flight.altitude < 3000  # type: ignore
        and flight.track is not None
        and flight.vertical_rate is not None
        and flight.vertical_rate > 1
    ):
        # the track matches the bearing from the airport to the aircraft
        outbound = geo.bearing(*airport.latlon, *flight.latlon)
        return abs(geo.angle_diff(flight.track, outbound)) < 40
    return False


# Evaluated in this order, the first matching rule wins
DEPARTURE_RULES: Tuple[DepartureRule, ...] = (
    _climbing_near_airport,
    _climbing_low_and_close,
    _aligned_with_departure_runway,
    _moving_away_from_airport,
)


def is_departing(flight: FlightState, airport: Airport = FRA) -> bool:
    """Returns True if the flight seems to be taking off from the airport.

    The distance to the airport must have been computed beforehand. Flights
    with an unknown distance or altitude are never departing.
    """
    if flight.distance is None or flight.altitude is None:
        return False
    return any(rule(flight, airport) for rule in DEPARTURE_RULES)


def is_arriving(flight: FlightState, airport: Airport = FRA) -> bool:
    """Returns True if the flight seems to be on approach to the airport.

    The flight must be low and close enough, not departing, not climbing
    significantly, roughly aligned with one of the landing directions and,
    unless already very close, tracking towards the airport.
    """
    if flight.altitude is None or flight.track is None:
        return False
    if flight.distance is None or flight.distance > ARRIVING_MAX_DISTANCE:
        return False
    if flight.altitude > ARRIVING_MAX_ALTITUDE:
        return False

    if is_departing(flight, airport):
        return False

    if flight.vertical_rate is not None and flight.vertical_rate > 3:
        return False

    if (
        abs(geo.angle_diff(flight.track, WESTERLY_HEADING)) > 50
        and abs(geo.angle_diff(flight.track, EASTERLY_HEADING)) > 50
    ):
        return False

    if flight.distance > 5:
        inbound = geo.bearing(*flight.latlon, *airport.latlon)
        if abs(geo.angle_diff(flight.track, inbound)) > 70:
            return False

    return True


class FlightPhaseClassifier:
    """Classifies flight states as departing, arriving, or neither.

    :param airport: the reference point for distances and bearings

    The distance to the airport is always recomputed before classification.

    >>> from runwaycast.core.flight import FlightState
    >>> flight = FlightState("3c6444", 50.05, 8.70, altitude=1000,
    ...     track=250, vertical_rate=-3)
    >>> classified = FlightPhaseClassifier().apply(flight)
    >>> classified.arriving, classified.departing
    (True, False)

    """

    def __init__(self, airport: Airport = FRA) -> None:
        self.airport = airport

    def apply(self, flight: FlightState) -> FlightState:
        flight = replace(
            flight,
            distance=float(
                geo.distance(*flight.latlon, *self.airport.latlon)
            ),
        )
        flight = replace(
            flight,
            departing=is_departing(flight, self.airport),
            arriving=is_arriving(flight, self.airport),
            runway=None,
            confidence=0.0,
        )
        _log.debug(
            f"{flight.name}: {flight.distance:.1f} km, "
            f"departing={flight.departing}, arriving={flight.arriving}"
        )
        return flight
