import argparse
import importlib
import pkgutil
from importlib.metadata import entry_points
from types import ModuleType
from typing import Any, Dict, List, Optional


def available_commands() -> Dict[str, Any]:
    """Collects subcommands: modules of this package with a ``main``
    function, then plugins registered in the ``runwaycast.console`` entry
    point group. Each subcommand is called with the remaining arguments.
    """
    commands: Dict[str, Any] = {}
    package = importlib.import_module(__name__)
    for module_info in pkgutil.iter_modules(package.__path__):
        module: ModuleType = importlib.import_module(
            f"{__name__}.{module_info.name}"
        )
        if hasattr(module, "main"):
            commands[module_info.name] = module
    for entry_point in entry_points(group="runwaycast.console"):
        commands[entry_point.name] = entry_point.load()
    return commands


def main(args_list: Optional[List[str]] = None) -> None:
    commands = available_commands()

    parser = argparse.ArgumentParser(
        prog="runwaycast",
        description="Landing runway prediction at Frankfurt airport",
        epilog="Type runwaycast <command> -h for help about a command",
    )
    parser.add_argument("command", choices=sorted(commands))
    parser.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="arguments passed on to the command",
    )

    args = parser.parse_args(args_list)
    commands[args.command].main(args.args)
