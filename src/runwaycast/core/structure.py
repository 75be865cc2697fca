from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import rich.repr

from . import types as tt
from .mixins import PointMixin


class AirportNamedTuple(NamedTuple):
    elevation: tt.altitude
    iata: str
    icao: str
    latitude: tt.angle
    longitude: tt.angle
    name: str


class Airport(AirportNamedTuple, PointMixin):
    def __rich_repr__(self) -> rich.repr.Result:
        yield self.icao
        yield "iata", self.iata
        yield "name", self.name
        yield "latlon", self.latlon
        yield "elevation", self.elevation

    def __repr__(self) -> str:
        return f"{self.icao}/{self.iata}: {self.name}"


class Point(NamedTuple):
    latitude: tt.angle
    longitude: tt.angle

    @property
    def latlon(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


class Configuration(Enum):
    """The landing direction in use at the airport, driven by the prevailing
    wind.

    """

    westerly = "westerly"
    easterly = "easterly"

    @classmethod
    def parse(cls, value: str | Configuration) -> Configuration:
        if isinstance(value, Configuration):
            return value
        try:
            return cls[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown runway configuration {value!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Runway:
    """A runway designation, seen from its landing end.

    The threshold is the point where aircraft landing on this designation
    touch down; the opposite point is the far end of the same strip.

    """

    name: str
    threshold: Point
    opposite: Point
    heading: tt.angle
    configuration: Configuration
    label: str = ""
    color: str = "#5b6478"

    def __repr__(self) -> str:
        return f"Runway {self.name}: {self.threshold.latlon}"


@dataclass(frozen=True)
class RunwayStrip:
    """A physical runway, drawn between its two ends."""

    name: str
    start: Point
    stop: Point
    landing: bool

    def geojson(self) -> dict[str, object]:
        return {
            "type": "LineString",
            "coordinates": (
                (self.start.longitude, self.start.latitude),
                (self.stop.longitude, self.stop.latitude),
            ),
        }
