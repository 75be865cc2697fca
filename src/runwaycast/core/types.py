from __future__ import annotations

from typing import Tuple

from typing_extensions import Annotated, Protocol


class HasBounds(Protocol):
    @property
    def bounds(self) -> tuple[float, float, float, float]: ...


## Types for physical units

angle = Annotated[float, "degree"]
altitude = Annotated[float, "m"]
distance = Annotated[float, "km"]
speed = Annotated[float, "m/s"]
vertical_rate = Annotated[float, "m/s"]

# west, south, east, north
bounds = Tuple[float, float, float, float]
