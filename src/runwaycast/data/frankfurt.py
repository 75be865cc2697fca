"""Static description of Frankfurt am Main airport (EDDF/FRA).

Runway thresholds come from the AIP Germany. Physical layout, north to south:

- 07L/25R: north-west runway (2800 m), landings only;
- 07C/25C: center runway (4000 m), landings and departures;
- 07R/25L: south runway (4000 m), landings only;
- 18/36: west runway, north-south oriented (4000 m), departures only.

"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..core.structure import Airport, Configuration, Point, Runway, RunwayStrip

FRA = Airport(
    elevation=111,
    iata="FRA",
    icao="EDDF",
    latitude=50.0267,
    longitude=8.5584,
    name="Frankfurt am Main Airport",
)

# Landing headings, in degrees
WESTERLY_HEADING = 249
EASTERLY_HEADING = 69

_NW_WEST = Point(50.0371, 8.4971)
_NW_EAST = Point(50.0458, 8.5337)
_CENTER_WEST = Point(50.0326, 8.5346)
_CENTER_EAST = Point(50.0451, 8.5870)
_SOUTH_WEST = Point(50.0275, 8.5342)
_SOUTH_EAST = Point(50.0401, 8.5865)

RUNWAYS: Mapping[str, Runway] = MappingProxyType(
    {
        runway.name: runway
        for runway in (
            Runway(
                "25R",
                threshold=_NW_WEST,
                opposite=_NW_EAST,
                heading=WESTERLY_HEADING,
                configuration=Configuration.westerly,
                label="25R (NW Runway)",
                color="#3b82f6",
            ),
            Runway(
                "25C",
                threshold=_CENTER_WEST,
                opposite=_CENTER_EAST,
                heading=WESTERLY_HEADING,
                configuration=Configuration.westerly,
                label="25C (Center)",
                color="#8b5cf6",
            ),
            Runway(
                "25L",
                threshold=_SOUTH_WEST,
                opposite=_SOUTH_EAST,
                heading=WESTERLY_HEADING,
                configuration=Configuration.westerly,
                label="25L (South Runway)",
                color="#10b981",
            ),
            Runway(
                "07L",
                threshold=_NW_EAST,
                opposite=_NW_WEST,
                heading=EASTERLY_HEADING,
                configuration=Configuration.easterly,
                label="07L (NW Runway)",
                color="#f59e0b",
            ),
            Runway(
                "07C",
                threshold=_CENTER_EAST,
                opposite=_CENTER_WEST,
                heading=EASTERLY_HEADING,
                configuration=Configuration.easterly,
                label="07C (Center)",
                color="#a855f7",
            ),
            Runway(
                "07R",
                threshold=_SOUTH_EAST,
                opposite=_SOUTH_WEST,
                heading=EASTERLY_HEADING,
                configuration=Configuration.easterly,
                label="07R (South Runway)",
                color="#ef4444",
            ),
        )
    }
)

# The order matters: ties in runway scores go to the first runway listed.
CONFIGURATIONS: Mapping[Configuration, tuple[str, ...]] = MappingProxyType(
    {
        Configuration.westerly: ("25R", "25C", "25L"),
        Configuration.easterly: ("07L", "07C", "07R"),
    }
)

RUNWAY_STRIPS: tuple[RunwayStrip, ...] = (
    RunwayStrip("07L/25R", _NW_WEST, _NW_EAST, landing=True),
    RunwayStrip("07C/25C", _CENTER_WEST, _CENTER_EAST, landing=True),
    RunwayStrip("07R/25L", _SOUTH_WEST, _SOUTH_EAST, landing=True),
    RunwayStrip(
        "18/36",
        Point(50.0342, 8.5259),
        Point(49.9985, 8.5263),
        landing=False,
    ),
)


def landing_runways(configuration: Configuration) -> tuple[Runway, ...]:
    """Returns the runways used for landing in a given configuration, in
    their reference order."""
    return tuple(RUNWAYS[name] for name in CONFIGURATIONS[configuration])
