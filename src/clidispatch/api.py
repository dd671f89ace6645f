## clidispatch — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import CommandSpec, OptionSpec, ResolvedOption, Failure, State, value_of
from .errors import *
from .catalog import Catalog, MAX_COMMANDS, MAX_OPTIONS
from .dispatcher import Dispatcher, DispatchConfig
from .runner import start, start_with_args, process_args


def dispatch(commands, options, args, **config) -> None:
    Dispatcher(commands, options, DispatchConfig(**config)).dispatch(args)

def parse(commands, options, args, **config) -> tuple[CommandSpec, list[ResolvedOption]]:
    return Dispatcher(commands, options, DispatchConfig(**config)).parse(args)
