## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# clidispatch — A minimal command-line argument parsing and dispatch engine.
#

import os
import sys
from typing import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import replace

from .types import CommandSpec, OptionSpec
from .dispatcher import Dispatcher, DispatchConfig


def debug_from_env() -> bool:
    return os.environ.get("CLIDISPATCH_DEBUG", "") not in ("", "0")


@contextmanager
def process_args(argv: Sequence[str] | None = None) -> Iterator[tuple[str, ...]]:
    """Snapshot of the invocation's tokens, program name first, held for one dispatch cycle."""
    yield tuple(sys.argv if argv is None else argv)


def start_with_args(commands: Iterable[CommandSpec], options: Iterable[OptionSpec], args: Sequence[str],
                    debug: bool = False, config: DispatchConfig | None = None) -> None:
    config = config or DispatchConfig()
    if debug: config = replace(config, debug=True)
    Dispatcher(commands, options, config).dispatch(args)


def start(commands: Iterable[CommandSpec], options: Iterable[OptionSpec] = (), debug: bool | None = None,
          config: DispatchConfig | None = None) -> None:
    # Catalog limits are checked before the process arguments are touched.
    config = config or DispatchConfig()
    config = replace(config, debug=debug_from_env() if debug is None else debug)
    dispatcher = Dispatcher(commands, options, config)
    dispatcher.check_catalog()
    with process_args() as args:
        dispatcher.dispatch(args)
