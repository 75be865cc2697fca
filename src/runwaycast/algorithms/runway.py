from __future__ import annotations

import logging
from typing import NamedTuple, Optional

import pandas as pd

from ..core import geodesy as geo
from ..core.flight import FlightState
from ..core.structure import Configuration, Runway
from ..data.frankfurt import landing_runways

_log = logging.getLogger(__name__)

# Weight of the track angle penalty, in km per half-turn
HEADING_PENALTY = 5


class RunwayPrediction(NamedTuple):
    runway: Optional[str]
    confidence: float


NO_PREDICTION = RunwayPrediction(None, 0.0)


def runway_score(flight: FlightState, runway: Runway) -> float:
    """Scores how likely a flight is to land on a runway (lower is better).

    The score adds the cross-track distance (in km) to the extended
    centerline of the runway and a penalty proportional to the difference
    between the track angle of the aircraft and the runway heading.
    """
    xtd = geo.cross_track(
        *flight.latlon, *runway.threshold.latlon, *runway.opposite.latlon
    )
    penalty = abs(geo.angle_diff(flight.track, runway.heading)) / 180
    return float(xtd + penalty * HEADING_PENALTY)


def runway_scores(
    flight: FlightState, configuration: Configuration
) -> pd.Series:
    """Returns the score of each landing runway of the configuration, in the
    reference order of the configuration."""
    runways = landing_runways(configuration)
    return pd.Series(
        [runway_score(flight, runway) for runway in runways],
        index=[runway.name for runway in runways],
        dtype=float,
    )


def predict_runway(
    flight: FlightState, configuration: Configuration
) -> RunwayPrediction:
    """Predicts the landing runway of an arriving flight.

    :param flight: a classified flight state
    :param configuration: the active configuration, shared by all flights
        of the same batch

    Flights which are not arriving get no runway and a null confidence.

    The confidence grows with the separation between the best score and
    another score of the configuration, then is adjusted for well aligned
    aircraft close to the airport, aircraft far away, and descending
    aircraft.
    """
    if not flight.arriving:
        return NO_PREDICTION

    scores = runway_scores(flight, configuration)
    _log.debug(f"{flight.name}: {scores.round(3).to_dict()}")

    # the first runway of the configuration wins ties
    best_runway: Optional[str] = None
    best_score = float("inf")
    for name, score in scores.items():
        if score < best_score:
            best_runway, best_score = str(name), score
    if best_runway is None:  # all scores are NaN
        return NO_PREDICTION

    # not necessarily the second best score
    other_score = next(
        (score for score in scores if score != best_score), best_score
    )
    confidence = min(1.0, 0.5 + (other_score - best_score) * 0.5)

    first_runway = landing_runways(configuration)[0]
    aligned = abs(geo.angle_diff(flight.track, first_runway.heading)) < 10
    if flight.distance < 20 and aligned:  # type: ignore
        confidence = min(1.0, confidence + 0.2)

    if flight.distance > 50:  # type: ignore
        confidence *= 0.6
    elif flight.distance > 30:  # type: ignore
        confidence *= 0.8

    if flight.vertical_rate is not None and flight.vertical_rate < -2:
        confidence = min(1.0, confidence + 0.1)

    confidence = max(0.0, min(1.0, confidence))
    return RunwayPrediction(best_runway, float(confidence))
