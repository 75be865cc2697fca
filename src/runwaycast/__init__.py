import configparser
import logging
import os
from importlib.metadata import version
from pathlib import Path
from typing import TypedDict

import dotenv
from appdirs import user_config_dir

__version__ = version("runwaycast")
__all__ = ["config_dir", "config_file", "refresh_interval"]

# Set up the library root logger
_log = logging.getLogger(__name__)

dotenv.load_dotenv()

# -- Configuration management --

if (xdg_config := os.environ.get("XDG_CONFIG_HOME")) is not None:
    config_dir = Path(xdg_config) / "runwaycast"
else:
    config_dir = Path(user_config_dir("runwaycast"))
config_file = config_dir / "runwaycast.conf"

if not config_dir.exists():  # coverage: ignore
    config_template = (Path(__file__).parent / "runwaycast.conf").read_text()
    config_dir.mkdir(parents=True)
    config_file.write_text(config_template)

config = configparser.ConfigParser()
config.read(config_file.as_posix())


class Resolution(TypedDict, total=False):
    category: str
    name: str
    environment_variable: str
    default: str


NAME_RESOLUTION: dict[str, Resolution] = {
    "refresh_interval": dict(
        environment_variable="RUNWAYCAST_REFRESH_INTERVAL",
        category="global",
        name="refresh_interval",
        default="15",
    ),
    "opensky_url": dict(
        environment_variable="RUNWAYCAST_OPENSKY_URL",
        category="opensky",
        name="url",
        default="https://opensky-network.org/api/states/all",
    ),
    "bounds": dict(
        environment_variable="RUNWAYCAST_BOUNDS",
        category="opensky",
        name="bounds",
        default="8.05, 49.75, 9.05, 50.30",
    ),
    "opensky_username": dict(
        environment_variable="OPENSKY_USERNAME",
        category="opensky",
        name="username",
    ),
    "opensky_password": dict(
        environment_variable="OPENSKY_PASSWORD",
        category="opensky",
        name="password",
    ),
}


def get_config(
    category: None | str = None,
    name: None | str = None,
    environment_variable: None | str = None,
    default: None | str = None,
) -> None | str:
    if category is not None and name is not None:
        if value := config.get(category, name, fallback=None):
            return value

    if environment_variable is not None:
        if (value := os.environ.get(environment_variable)) is not None:
            return value

    if default is not None:
        return default

    return None


def parse_bounds(value: str) -> tuple[float, float, float, float]:
    """Parses a bounding box written as "west, south, east, north"."""
    elts = [float(elt) for elt in value.split(",")]
    if len(elts) != 4:
        raise ValueError(f"Four values expected for bounds, got {value!r}")
    west, south, east, north = elts
    return west, south, east, north


_refresh_interval_str = get_config(**NAME_RESOLUTION["refresh_interval"])
refresh_interval = float(_refresh_interval_str)  # type: ignore
_log.info(f"Selected refresh interval: {refresh_interval}s")
opensky_url: str = get_config(**NAME_RESOLUTION["opensky_url"])  # type: ignore
_log.info(f"Selected OpenSky endpoint: {opensky_url}")
bounds = parse_bounds(get_config(**NAME_RESOLUTION["bounds"]))  # type: ignore
_log.info(f"Selected bounds: {bounds}")
