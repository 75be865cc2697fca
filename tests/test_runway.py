from typing import Any, Dict

import pytest

from runwaycast.algorithms import runway as runway_module
from runwaycast.algorithms.phases import FlightPhaseClassifier
from runwaycast.algorithms.runway import (
    RunwayPrediction,
    predict_runway,
    runway_scores,
)
from runwaycast.core import Configuration, FlightState, Runway
from runwaycast.data import RUNWAYS


def on_centerline(
    great_circle: Any, name: str, t: float, **kwargs: Any
) -> FlightState:
    runway = RUNWAYS[name]
    point = great_circle(runway.threshold, runway.opposite, t)
    params: Dict[str, Any] = dict(
        altitude=1000, track=runway.heading, vertical_rate=-3.5
    )
    params.update(kwargs)
    flight = FlightState("3c6444", *point.latlon, **params)
    return FlightPhaseClassifier().apply(flight)


def test_not_arriving() -> None:
    flight = FlightState(
        "3c6444", 50.0, 8.7, distance=10, altitude=1000, track=90
    )
    assert not flight.arriving
    for configuration in Configuration:
        assert predict_runway(flight, configuration) == (None, 0)


def test_on_threshold(great_circle: Any) -> None:
    flight = on_centerline(great_circle, "25C", 0)
    assert flight.arriving
    scores = runway_scores(flight, Configuration.westerly)
    assert scores.index.to_list() == ["25R", "25C", "25L"]
    assert scores["25C"] == pytest.approx(0, abs=1e-6)
    assert scores.idxmin() == "25C"

    prediction = predict_runway(flight, Configuration.westerly)
    assert prediction.runway == "25C"
    assert prediction.confidence == 1


def test_extended_centerline(great_circle: Any) -> None:
    # about 15 km east of the threshold, on final approach
    flight = on_centerline(great_circle, "25C", 4, track=249)
    assert flight.arriving
    assert flight.distance < 20
    assert predict_runway(flight, Configuration.westerly).runway == "25C"

    for name in ("07L", "07C", "07R"):
        flight = on_centerline(great_circle, name, 4)
        assert flight.arriving
        prediction = predict_runway(flight, Configuration.easterly)
        assert prediction.runway == name
        assert 0 <= prediction.confidence <= 1


def test_far_away(great_circle: Any) -> None:
    # about 59 km away: confidence is reduced
    flight = on_centerline(
        great_circle, "25C", 15, altitude=3500, vertical_rate=-1.5
    )
    assert flight.arriving
    assert 50 < flight.distance < 80  # type: ignore
    prediction = predict_runway(flight, Configuration.westerly)
    assert prediction.runway == "25C"
    assert prediction.confidence == pytest.approx(0.6)

    # about 39 km away, descending
    flight = on_centerline(
        great_circle, "25C", 10, altitude=3000, vertical_rate=-3
    )
    assert flight.arriving
    assert 30 < flight.distance < 50  # type: ignore
    prediction = predict_runway(flight, Configuration.westerly)
    assert prediction.confidence == pytest.approx(0.9)


def test_wrong_configuration(great_circle: Any) -> None:
    # the configuration is imposed, even against the track angle
    flight = on_centerline(great_circle, "25L", 4)
    prediction = predict_runway(flight, Configuration.easterly)
    assert prediction.runway in ("07L", "07C", "07R")
    assert 0 <= prediction.confidence <= 1


def fake_scores(monkeypatch: Any, scores: Dict[str, float]) -> None:
    def runway_score(flight: FlightState, runway: Runway) -> float:
        return scores[runway.name]

    monkeypatch.setattr(runway_module, "runway_score", runway_score)


# far enough and not descending fast: no confidence adjustment
ARRIVING = FlightState(
    "3c6444",
    50.0,
    8.9,
    distance=25,
    altitude=2000,
    track=249,
    vertical_rate=-1,
    arriving=True,
)


def test_first_runway_wins_ties(monkeypatch: Any) -> None:
    fake_scores(monkeypatch, {"25R": 1.0, "25C": 1.0, "25L": 3.0})
    prediction = predict_runway(ARRIVING, Configuration.westerly)
    assert prediction == RunwayPrediction("25R", 1.0)

    fake_scores(monkeypatch, {"25R": 2.0, "25C": 1.0, "25L": 1.0})
    prediction = predict_runway(ARRIVING, Configuration.westerly)
    assert prediction.runway == "25C"


def test_equal_scores(monkeypatch: Any) -> None:
    fake_scores(monkeypatch, {"25R": 1.0, "25C": 1.0, "25L": 1.0})
    prediction = predict_runway(ARRIVING, Configuration.westerly)
    assert prediction == RunwayPrediction("25R", 0.5)


def test_separation_first_other_score(monkeypatch: Any) -> None:
    # the separation is computed with the first score different from the
    # best one, not with the second best score
    fake_scores(monkeypatch, {"25R": 1.2, "25C": 1.0, "25L": 1.1})
    prediction = predict_runway(ARRIVING, Configuration.westerly)
    assert prediction.runway == "25C"
    assert prediction.confidence == pytest.approx(0.6)


def test_confidence_adjustments(monkeypatch: Any) -> None:
    from dataclasses import replace

    fake_scores(monkeypatch, {"25R": 1.2, "25C": 1.0, "25L": 1.1})

    # close and well aligned
    flight = replace(ARRIVING, distance=15, track=255)
    assert predict_runway(flight, Configuration.westerly).confidence == (
        pytest.approx(0.8)
    )
    # close but not aligned enough
    flight = replace(ARRIVING, distance=15, track=260)
    assert predict_runway(flight, Configuration.westerly).confidence == (
        pytest.approx(0.6)
    )
    # descending
    flight = replace(ARRIVING, vertical_rate=-2.5)
    assert predict_runway(flight, Configuration.westerly).confidence == (
        pytest.approx(0.7)
    )
    # far away
    flight = replace(ARRIVING, distance=60)
    assert predict_runway(flight, Configuration.westerly).confidence == (
        pytest.approx(0.36)
    )
    # all together
    flight = replace(ARRIVING, distance=35, vertical_rate=-3)
    assert predict_runway(flight, Configuration.westerly).confidence == (
        pytest.approx(0.58)
    )


def test_unknown_scores(monkeypatch: Any) -> None:
    nan = float("nan")
    fake_scores(monkeypatch, {"25R": nan, "25C": nan, "25L": nan})
    prediction = predict_runway(ARRIVING, Configuration.westerly)
    assert prediction == RunwayPrediction(None, 0.0)
