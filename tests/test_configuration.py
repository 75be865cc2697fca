from runwaycast.algorithms.configuration import (
    count_votes,
    detect_configuration,
    is_candidate,
)
from runwaycast.core import Configuration, FlightState


def descending(track: float, **kwargs: float) -> FlightState:
    params = dict(distance=20, altitude=2000, vertical_rate=-4)
    params.update(kwargs)
    return FlightState("3c6444", 50.0, 8.7, track=track, **params)


def test_no_candidate() -> None:
    assert detect_configuration([]) == Configuration.westerly

    # level or climbing aircraft do not vote
    flights = [
        descending(70, vertical_rate=0),
        descending(70, vertical_rate=-0.5),
        descending(70, altitude=5000),
        descending(70, distance=85),
    ]
    assert not any(is_candidate(f) for f in flights)
    assert count_votes(flights).candidates == 0
    assert detect_configuration(flights) == Configuration.westerly


def test_missing_fields() -> None:
    flight = descending(70)
    assert is_candidate(flight)
    flight.vertical_rate = None
    assert not is_candidate(flight)
    flight = descending(70)
    flight.altitude = None
    assert not is_candidate(flight)


def test_easterly() -> None:
    flights = [descending(70), descending(65), descending(250)]
    assert count_votes(flights) == (1, 2, 3)
    assert detect_configuration(flights) == Configuration.easterly


def test_westerly_wins_ties() -> None:
    flights = [descending(70), descending(250)]
    assert detect_configuration(flights) == Configuration.westerly

    # candidates voting for neither configuration
    flights = [descending(160), descending(340)]
    votes = count_votes(flights)
    assert votes.candidates == 2
    assert votes.westerly == votes.easterly == 0
    assert detect_configuration(flights) == Configuration.westerly


def test_vote_tolerance() -> None:
    assert count_votes([descending(70 + 39.9)]) == (0, 1, 1)
    assert count_votes([descending(70 + 40)]) == (0, 0, 1)
    assert count_votes([descending(250 - 39.9)]) == (1, 0, 1)
    assert count_votes([descending(250 + 40)]) == (0, 0, 1)
    assert detect_configuration([descending(30.5)]) == Configuration.easterly
