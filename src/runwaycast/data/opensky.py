from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

import pandas as pd

from ..core import types as tt
from ..core.flight import FlightState

_log = logging.getLogger(__name__)


class OpenSky:
    """Wraps the ``states/all`` endpoint of the OpenSky Network REST API.

    :param url: the endpoint returning current state vectors
    :param bounds: the default bounding box for the request, as a tuple
        (west, south, east, north) or any object with a ``bounds`` attribute
    :param username: optional OpenSky credentials
    :param password: optional OpenSky credentials
    :param client: an optional :class:`httpx.Client`, e.g. for tests

    """

    _json_columns = [
        "icao24",
        "callsign",
        "origin_country",
        "last_position",
        "timestamp",
        "longitude",
        "latitude",
        "altitude",
        "onground",
        "groundspeed",
        "track",
        "vertical_rate",
        "sensors",
        "geoaltitude",
        "squawk",
        "spi",
        "position_source",
    ]

    def __init__(
        self,
        url: str,
        bounds: None | tt.bounds | tt.HasBounds = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = 10,
    ) -> None:
        self.url = url
        self.bounds = bounds
        self.auth = (
            (username, password)
            if username is not None and password is not None
            else None
        )
        self.client = (
            client if client is not None else httpx.Client(timeout=timeout)
        )

    def api_states_dataframe(
        self, bounds: None | tt.bounds | tt.HasBounds = None
    ) -> pd.DataFrame:
        """Returns the current state vectors as a DataFrame.

        Column names follow the naming used across the library: ``altitude``
        for the barometric altitude, ``track`` for the true track angle,
        ``groundspeed`` and ``vertical_rate``. Units are left untouched.

        Records without a position and aircraft on ground are removed.
        """
        if bounds is None:
            bounds = self.bounds

        params: dict[str, Any] = dict()
        if bounds is not None:
            try:
                # thinking of shapely bounds attribute (in this order)
                west, south, east, north = bounds.bounds  # type: ignore
            except AttributeError:
                west, south, east, north = bounds  # type: ignore
            params = dict(lamin=south, lamax=north, lomin=west, lomax=east)

        c = self.client.get(self.url, params=params, auth=self.auth)
        c.raise_for_status()

        states = c.json().get("states") or []
        _log.info(f"{len(states)} state vectors received")
        width = len(self._json_columns)
        r = pd.DataFrame.from_records(
            # some records come without the last position_source field
            [(list(state) + [None] * width)[:width] for state in states],
            columns=self._json_columns,
        )
        r = r.drop(["origin_country", "spi", "sensors"], axis=1)
        r = r.assign(callsign=r.callsign.str.strip())
        return filter_airborne(r)

    def api_states(
        self, bounds: None | tt.bounds | tt.HasBounds = None
    ) -> list[FlightState]:
        """Returns the current state vectors of airborne aircraft."""
        df = self.api_states_dataframe(bounds)
        return [
            FlightState.from_record(record)
            for record in df.to_dict(orient="records")
        ]

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> OpenSky:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def filter_airborne(df: pd.DataFrame) -> pd.DataFrame:
    """Removes records with an unknown position and aircraft on ground."""
    mask = df.latitude.notna() & df.longitude.notna()
    if "onground" in df.columns:
        mask &= ~df.onground.eq(True)
    return df.loc[mask].reset_index(drop=True)
