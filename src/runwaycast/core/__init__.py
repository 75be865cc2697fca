import logging

from .flight import FlightState
from .structure import Airport, Configuration, Point, Runway, RunwayStrip

__all__ = [
    "Airport",
    "Configuration",
    "FlightState",
    "Point",
    "Runway",
    "RunwayStrip",
    "loglevel",
]


def loglevel(mode: str) -> None:
    """
    Changes the log level of the libraries root logger.

    :param mode:
        New log level.
    """
    _log = logging.getLogger("runwaycast")
    if not any(isinstance(h, logging.StreamHandler) for h in _log.handlers):
        _log.addHandler(logging.StreamHandler())
        _log.info("Setting a default StreamHandler")
    _log.setLevel(getattr(logging, mode))
