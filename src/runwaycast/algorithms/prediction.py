from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, ClassVar, Iterable, Iterator, Optional

from rich.console import Console, ConsoleOptions, RenderResult

import pandas as pd

from ..core.flight import FlightState
from ..core.mixins import DataFrameMixin
from ..core.structure import Airport, Configuration
from ..data.frankfurt import CONFIGURATIONS, FRA, RUNWAYS, landing_runways
from .configuration import detect_configuration
from .phases import (
    ARRIVING_MAX_ALTITUDE,
    ARRIVING_MAX_DISTANCE,
    FlightPhaseClassifier,
)
from .runway import predict_runway

_log = logging.getLogger(__name__)


class PredictionResult(DataFrameMixin):
    """The outcome of one prediction cycle: all classified flights, and the
    runway configuration shared by all of them.

    Iterating on the result yields the flights, in the order of the input.
    The ``data`` attribute is a DataFrame with one line per aircraft.

    """

    __slots__ = ("flights", "configuration")

    columns_options: ClassVar[dict[str, dict[str, Any]]] = dict(  # type: ignore
        flight=dict(),
        runway=dict(justify="center"),
        confidence=dict(justify="right"),
        altitude=dict(justify="right"),
        speed=dict(justify="right"),
        distance=dict(justify="right"),
    )
    max_rows = 20

    def __init__(
        self, flights: Iterable[FlightState], configuration: Configuration
    ) -> None:
        self.flights = tuple(flights)
        self.configuration = configuration

    @property
    def data(self) -> pd.DataFrame:  # type: ignore
        return pd.DataFrame.from_records(
            [flight.asdict() for flight in self.flights],
            columns=list(FlightState.__dataclass_fields__),
        )

    def __iter__(self) -> Iterator[FlightState]:
        yield from self.flights

    def __len__(self) -> int:
        return len(self.flights)

    def __getitem__(self, icao24: str) -> FlightState:
        elt = next((f for f in self.flights if f.icao24 == icao24), None)
        if elt is None:
            raise KeyError(icao24)
        return elt

    @property
    def label(self) -> str:
        """A short description of the active configuration."""
        runways = "/".join(CONFIGURATIONS[self.configuration])
        return f"{self.configuration.value.capitalize()} Ops ({runways})"

    def arrivals(self, search: Optional[str] = None) -> list[FlightState]:
        """Selects the flights worth listing to an observer of arrivals.

        Flights with a predicted runway come with all low flights close to
        the airport, sorted by distance to the airport.

        :param search: keeps only flights with a callsign or a transponder
            code containing this string (case insensitive)

        """
        selected = [
            flight
            for flight in self.flights
            if flight.runway is not None
            or (
                flight.distance is not None
                and flight.distance < ARRIVING_MAX_DISTANCE
                and flight.altitude is not None
                and flight.altitude < ARRIVING_MAX_ALTITUDE
            )
        ]
        if search:
            query = search.lower()
            selected = [
                flight
                for flight in selected
                if (flight.callsign and query in flight.callsign.lower())
                or query in flight.icao24.lower()
            ]
        return sorted(
            selected,
            key=lambda f: f.distance if f.distance is not None else 999,
        )

    @property
    def legend(self) -> str:
        """Console markup for the landing runways of the configuration,
        each one with its own color."""
        return "  ".join(
            f"[{runway.color}]■[/] {runway.label}"
            for runway in landing_runways(self.configuration)
        )

    def arrival_table(
        self, search: Optional[str] = None
    ) -> Optional[_ArrivalTable]:
        """Renders :meth:`arrivals` as a rich table, with the predicted
        runway in its color. Returns None if no flight is selected."""
        arrivals = self.arrivals(search)
        if len(arrivals) == 0:
            return None

        return _ArrivalTable(
            pd.DataFrame.from_records(
                [
                    dict(
                        flight=f.name,
                        runway=_runway_badge(f.runway),
                        confidence=f"{round(f.confidence * 100)}%"
                        if f.runway is not None
                        else "",
                        # feet and knots, for an aviation audience
                        altitude=f"{round(f.altitude * 3.281):,}ft"
                        if f.altitude is not None
                        else "-",
                        speed=f"{round(f.groundspeed * 1.944)}kts"
                        if f.groundspeed is not None
                        else "-",
                        distance=f"{f.distance:.1f}km"
                        if f.distance is not None
                        else "-",
                    )
                    for f in arrivals
                ],
                columns=list(self.columns_options),
            ),
            self.columns_options,
            self.max_rows,
        )

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        yield f"[bold]{self.label}[/bold]"
        yield self.legend

        table = self.arrival_table()
        if table is None:
            yield "No arriving flights detected"
            return
        yield table


def _runway_badge(name: Optional[str]) -> str:
    if name is None:
        return "N/A"
    return f"[bold {RUNWAYS[name].color}]{name}[/]"


class _ArrivalTable(DataFrameMixin):
    def __init__(
        self,
        data: pd.DataFrame,
        columns_options: dict[str, dict[str, Any]],
        max_rows: int,
    ) -> None:
        self.data = data
        self.columns_options = columns_options
        self.max_rows = max_rows


def run_predictions(
    flights: Iterable[FlightState], airport: Airport = FRA
) -> PredictionResult:
    """Runs a full prediction cycle on a batch of flight states.

    :param flights: airborne flight states with a known position; on-ground
        aircraft must be filtered out beforehand
    :param airport: the reference point for distances and bearings

    Input flight states are not modified: the result holds new flight
    states with all derived fields recomputed from the raw fields.

    The configuration is detected once for the whole batch, from flights
    which are arriving or at least not departing, before any runway is
    predicted.
    """
    classifier = FlightPhaseClassifier(airport)
    classified = [classifier.apply(flight) for flight in flights]

    configuration = detect_configuration(
        f for f in classified if f.arriving or not f.departing
    )
    _log.info(
        f"{len(classified)} flights, "
        f"{sum(f.arriving for f in classified)} arriving, "
        f"{configuration} configuration"
    )

    predicted = []
    for flight in classified:
        runway, confidence = predict_runway(flight, configuration)
        predicted.append(replace(flight, runway=runway, confidence=confidence))

    return PredictionResult(predicted, configuration)
