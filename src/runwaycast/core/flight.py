from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

import rich.repr

from . import types as tt
from .mixins import PointMixin


def _optional_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    # pandas represents missing values as NaN
    if math.isnan(value):
        return None
    return value


@dataclass
class FlightState(PointMixin):
    """The state of one aircraft for one processing cycle.

    Raw fields come straight from the telemetry source. Derived fields
    (``distance``, ``departing``, ``arriving``, ``runway`` and
    ``confidence``) are filled in by
    :func:`~runwaycast.algorithms.prediction.run_predictions`.

    Units follow the OpenSky REST API: altitudes in meters, speeds and
    vertical rates in meters per second, distances in kilometers.

    """

    icao24: str
    latitude: tt.angle
    longitude: tt.angle
    callsign: Optional[str] = None
    altitude: Optional[tt.altitude] = None
    groundspeed: Optional[tt.speed] = None
    track: Optional[tt.angle] = None
    vertical_rate: Optional[tt.vertical_rate] = None
    onground: bool = False

    distance: Optional[tt.distance] = None
    departing: bool = False
    arriving: bool = False
    runway: Optional[str] = None
    confidence: float = 0.0

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> FlightState:
        """Builds a flight state from a raw record, e.g. a row of the
        DataFrame returned by
        :meth:`~runwaycast.data.opensky.OpenSky.api_states_dataframe`.

        Only raw fields are read: derived fields are left to their default
        values.
        """
        callsign = record.get("callsign")
        if isinstance(callsign, str):
            callsign = callsign.strip() or None
        else:
            callsign = None  # NaN
        return cls(
            icao24=str(record["icao24"]),
            latitude=float(record["latitude"]),
            longitude=float(record["longitude"]),
            callsign=callsign,
            altitude=_optional_float(record.get("altitude")),
            groundspeed=_optional_float(record.get("groundspeed")),
            track=_optional_float(record.get("track")),
            vertical_rate=_optional_float(record.get("vertical_rate")),
            onground=bool(record.get("onground", False)),
        )

    @property
    def name(self) -> str:
        return self.callsign or self.icao24

    def asdict(self) -> dict[str, Any]:
        return asdict(self)

    def __rich_repr__(self) -> rich.repr.Result:
        yield self.icao24
        yield "callsign", self.callsign, None
        yield "latlon", self.latlon
        yield "altitude", self.altitude, None
        yield "track", self.track, None
        yield "vertical_rate", self.vertical_rate, None
        yield "distance", self.distance, None
        yield "runway", self.runway, None
        yield "confidence", self.confidence, 0.0
