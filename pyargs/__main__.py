import logging
import sys
from typing import List, Optional

import numpy as np

from . import __version__
from .exceptions import ParseError
from .parameters import Parameters
from .parse import parse
from .values import Boolean, Incremental, Integer, String, Unit

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def build_parameters():
    parameters = Parameters()
    handles = {
        "help": parameters.add("h,help", "Show this help text"),
        "version": parameters.add("version", "Show version information"),
        "verbose": parameters.add("v,verbose", "Log more once parsed, repeat for debug output", Incremental(Unit)),
        "name": parameters.add("n,name", "Name to greet", String(), "NAME"),
        "count": parameters.add("c,count", "How many times to greet", Integer(np.int32), "N"),
        "enable": parameters.add("enable", "Turn greeting on or off", Boolean(), "BOOL"),
        "tag": parameters.add("t,tag", "Attach a tag, may be repeated", Incremental(String()), "TAG"),
    }
    return parameters, handles


def format_error(error: ParseError) -> str:
    info = error.info
    marker = " " * (info.error_column - 1) + "^" * max(info.error_width, 1)
    return f"{error}\n  {info.command_line}\n  {marker}"


def main(argv: Optional[List[Optional[str]]] = None) -> int:
    if argv is None:
        argv = sys.argv
    parameters, handles = build_parameters()
    logging.basicConfig(level=logging.WARNING, format="%(name)s: %(message)s")

    try:
        arguments = parse(argv, parameters)
    except ParseError as e:
        print(format_error(e), file=sys.stderr)
        return 2

    verbosity = min(len(arguments[handles["verbose"]]), len(LOG_LEVELS) - 1)
    # only records emitted after parsing are affected
    logging.getLogger("pyargs").setLevel(LOG_LEVELS[verbosity])

    program = arguments.program_name or "pyargs"
    if arguments[handles["help"]]:
        print(f"Usage:\n  {program} [OPTION...]\n")
        print(parameters.help_string(), end="")
        return 0
    if arguments[handles["version"]]:
        print(f"{program} {__version__}")
        return 0

    if not arguments.get(handles["enable"], True):
        logging.getLogger("pyargs").info("Greeting disabled")
        return 0

    name = arguments.get(handles["name"], "world")
    tags = arguments[handles["tag"]]
    suffix = f" [{', '.join(tags)}]" if tags else ""
    for _ in range(int(arguments.get(handles["count"], 1))):
        print(f"Hello, {name}!{suffix}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
