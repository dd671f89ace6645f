## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# clidispatch — A minimal command-line argument parsing and dispatch engine.
#

import sys
from typing import Sequence

import click

from .types import CommandSpec, OptionSpec, ResolvedOption, Failure, value_of
from .errors import DispatchError, NoArgsProvided
from .dispatcher import Dispatcher, DispatchConfig
from .runner import debug_from_env
from .formatting import write_without_ansi, format_error


USAGE = """usage: clidispatch [--debug] [--plain] [--strict] COMMAND [OPTIONS]

commands:
  hello   Greet someone, `-n/--name NAME` to choose who.
  help    Show this message."""


def hello_fn(options: Sequence[ResolvedOption]) -> bool:
    print(f"Hello, {value_of(options, 'name') or 'World'}!")
    return True

def help_fn(options: Sequence[ResolvedOption]) -> bool:
    print(USAGE)
    return True

def name_fn(value: str) -> bool | Failure:
    if not value.isprintable():
        return Failure("name contains non-printable characters")
    return True


COMMANDS = (
    CommandSpec('hello', hello_fn, optional=('name',)),
    CommandSpec('help', help_fn),
)

OPTIONS = (
    OptionSpec('name', 'n', 'name', handler=name_fn),
)


def _handle_exception(exc: DispatchError) -> None:
    print(format_error(exc), file=sys.stderr)
    if isinstance(exc, NoArgsProvided):
        print(f"\033[90m{USAGE}\033[0m", file=sys.stderr)


@click.command(context_settings={'ignore_unknown_options': True, 'allow_interspersed_args': False})
@click.option('--debug', '-d', is_flag=True, help='Trace each dispatch stage to stderr (or set CLIDISPATCH_DEBUG).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from the output.')
@click.option('--strict', is_flag=True, help='Reject catalogs that declare a name twice.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, debug: bool, plain: bool, strict: bool, tokens: tuple[str, ...]) -> None:
    if plain:
        sys.stdout.write = write_without_ansi(sys.stdout.write)
        sys.stderr.write = write_without_ansi(sys.stderr.write)

    dispatcher = Dispatcher(COMMANDS, OPTIONS, DispatchConfig(debug=debug or debug_from_env(), strict=strict))
    try:
        dispatcher.dispatch((ctx.info_name, *tokens))
    except DispatchError as exc:
        _handle_exception(exc)
        ctx.exit(1)
    ctx.exit(0)


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='clidispatch')


if __name__ == "__main__":
    main()
