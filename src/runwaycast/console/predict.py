import argparse
import logging
import time
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

import httpx
from rich.console import Console

if TYPE_CHECKING:
    from ..algorithms.prediction import PredictionResult
    from ..data.opensky import OpenSky

_log = logging.getLogger(__name__)


def cycle(
    opensky: "OpenSky", console: Console, search: Optional[str] = None
) -> Optional["PredictionResult"]:
    """Runs one prediction cycle on fresh state vectors.

    Returns None, and skips the cycle, if state vectors are not available.
    """
    from ..algorithms.prediction import run_predictions

    try:
        flights = opensky.api_states()
    except httpx.HTTPError as exc:
        _log.warning(f"Connection error: {exc}")
        console.print("[red]Connection error[/red]")
        return None
    except ValueError as exc:
        # e.g. a busy page served instead of JSON content
        _log.warning(f"Invalid response: {exc}")
        console.print("[red]Invalid response[/red]")
        return None

    result = run_predictions(flights)

    console.print(f"Live: {len(result)} aircraft, {datetime.now():%H:%M:%S}")
    if search:
        console.print(f"Filter: {search!r}")
        console.print(f"[bold]{result.label}[/bold]")
        console.print(result.legend)
        table = result.arrival_table(search)
        console.print(table if table is not None else "No matching flights")
    else:
        console.print(result)

    return result


def main(args_list: List[str]) -> None:
    from .. import bounds, parse_bounds, refresh_interval
    from ..core import loglevel

    parser = argparse.ArgumentParser(
        prog="runwaycast predict",
        description="Predict landing runways at Frankfurt airport "
        "from live OpenSky state vectors",
    )

    parser.add_argument(
        "--watch",
        "-w",
        dest="watch",
        action="store_true",
        help="run a new prediction cycle at a fixed interval",
    )
    parser.add_argument(
        "--interval",
        "-i",
        dest="interval",
        type=float,
        default=refresh_interval,
        help=f"seconds between two cycles (default: {refresh_interval})",
    )
    parser.add_argument(
        "--search",
        "-s",
        dest="search",
        default=None,
        help="only display flights matching this callsign or icao24",
    )
    parser.add_argument(
        "--bounds",
        "-b",
        dest="bounds",
        type=parse_bounds,
        default=bounds,
        help='bounding box as "west, south, east, north"',
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        action="count",
        default=0,
        help="display logging messages",
    )

    args = parser.parse_args(args_list)

    if args.verbose == 1:
        loglevel("INFO")
    elif args.verbose >= 2:
        loglevel("DEBUG")

    from ..data import opensky

    opensky.bounds = args.bounds
    console = Console()

    cycle(opensky, console, args.search)
    while args.watch:
        time.sleep(args.interval)
        cycle(opensky, console, args.search)
