import logging
from typing import TYPE_CHECKING, Any, Dict

from .. import NAME_RESOLUTION, bounds, get_config, opensky_url
from .frankfurt import CONFIGURATIONS, FRA, RUNWAY_STRIPS, RUNWAYS

if TYPE_CHECKING:
    from .opensky import OpenSky

__all__ = [
    "CONFIGURATIONS",
    "FRA",
    "RUNWAYS",
    "RUNWAY_STRIPS",
    "opensky",
]

opensky: "OpenSky"

_cached_imports: Dict[str, Any] = dict()

_log = logging.getLogger(__name__)


def __getattr__(name: str) -> Any:
    res: Any
    if name in _cached_imports.keys():
        return _cached_imports[name]

    if name == "opensky":
        from .opensky import OpenSky

        res = OpenSky(
            opensky_url,
            bounds=bounds,
            username=get_config(**NAME_RESOLUTION["opensky_username"]),
            password=get_config(**NAME_RESOLUTION["opensky_password"]),
        )
        _cached_imports[name] = res
        return res

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
