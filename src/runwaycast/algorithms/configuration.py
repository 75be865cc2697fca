from __future__ import annotations

import logging
from typing import Iterable, NamedTuple

from ..core import geodesy as geo
from ..core.flight import FlightState
from ..core.structure import Configuration
from .phases import ARRIVING_MAX_ALTITUDE, ARRIVING_MAX_DISTANCE

_log = logging.getLogger(__name__)

# Reference headings for voting, in degrees
WESTERLY_VOTE_HEADING = 250
EASTERLY_VOTE_HEADING = 70
VOTE_TOLERANCE = 40

# Westerly operations are the most frequent ones (about 75% of the time)
DEFAULT_CONFIGURATION = Configuration.westerly


class ConfigurationVotes(NamedTuple):
    westerly: int
    easterly: int
    candidates: int


def is_candidate(flight: FlightState) -> bool:
    """Low, close and actively descending aircraft take part in the vote."""
    return (
        flight.altitude is not None
        and flight.altitude < ARRIVING_MAX_ALTITUDE
        and flight.track is not None
        and flight.vertical_rate is not None
        and flight.vertical_rate < -1
        and flight.distance is not None
        and flight.distance < ARRIVING_MAX_DISTANCE
    )


def count_votes(flights: Iterable[FlightState]) -> ConfigurationVotes:
    westerly = easterly = candidates = 0
    for flight in flights:
        if not is_candidate(flight):
            continue
        candidates += 1
        # a candidate may vote for both configurations, or for none
        if (
            abs(geo.angle_diff(flight.track, WESTERLY_VOTE_HEADING))
            < VOTE_TOLERANCE
        ):
            westerly += 1
        if (
            abs(geo.angle_diff(flight.track, EASTERLY_VOTE_HEADING))
            < VOTE_TOLERANCE
        ):
            easterly += 1
    return ConfigurationVotes(westerly, easterly, candidates)


def detect_configuration(flights: Iterable[FlightState]) -> Configuration:
    """Detects the active landing configuration of the airport.

    :param flights: flights that are arriving, or at least not departing

    Each descending aircraft close to the airport votes for the configuration
    matching its track angle. Westerly wins ties, and is also returned when
    no aircraft takes part in the vote.
    """
    votes = count_votes(flights)
    _log.debug(f"Configuration votes: {votes}")

    if votes.candidates == 0:
        return DEFAULT_CONFIGURATION

    if votes.westerly >= votes.easterly:
        return Configuration.westerly
    return Configuration.easterly
