import logging
from pathlib import Path
from typing import Any

import dotenv
import numpy as np
import pytest

from runwaycast.core import Point


def pytest_configure(config: Any) -> None:
    _log = logging.getLogger()
    _log.setLevel(logging.INFO)

    dotenv.load_dotenv(Path(__file__).parent / "tests.env")


def on_great_circle(p1: Point, p2: Point, t: float) -> Point:
    """Returns a point of the great circle going through p1 and p2.

    t = 0 returns p1, t = 1 returns p2, larger values go beyond p2.
    """

    def to_vector(p: Point) -> np.ndarray:
        lat, lon = np.radians(p.latitude), np.radians(p.longitude)
        return np.array(
            [np.cos(lat) * np.cos(lon), np.cos(lat) * np.sin(lon), np.sin(lat)]
        )

    v1, v2 = to_vector(p1), to_vector(p2)
    v = v1 + t * (v2 - v1)
    v = v / np.linalg.norm(v)
    return Point(
        float(np.degrees(np.arcsin(v[2]))),
        float(np.degrees(np.arctan2(v[1], v[0]))),
    )


@pytest.fixture
def great_circle() -> Any:
    return on_great_circle
