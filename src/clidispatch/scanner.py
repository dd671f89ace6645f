## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# clidispatch — A minimal command-line argument parsing and dispatch engine.
#

from typing import Callable, Sequence

from .types import ResolvedOption
from .errors import UnknownOption, UnexpectedArgument, TooManyOptions
from .catalog import Catalog, MAX_OPTIONS


def is_option_token(token: str, marker: str = '-') -> bool:
    return token.startswith(marker)

def option_name_of(token: str, marker: str = '-') -> str | None:
    """Strip one or two leading markers from an option token; `None` for bare values."""
    if not token.startswith(marker): return None
    name = token[len(marker):]
    return name[len(marker):] if name.startswith(marker) else name


def scan_options(tokens: Sequence[str], catalog: Catalog, *, marker: str = '-', max_options: int = MAX_OPTIONS,
                 trace: Callable[[str, str], None] | None = None) -> list[ResolvedOption]:
    """Resolve option tokens left to right, attaching at most one following value to each."""
    resolved: list[ResolvedOption] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if (stripped := option_name_of(token, marker)) is None:
            if trace: trace("Unexpected argument", token)
            raise UnexpectedArgument(f"Unexpected argument `{token}`.", token=token)

        if (spec := catalog.find_option(stripped)) is None:
            if trace: trace("Unknown option", token)
            raise UnknownOption(f"Unknown option `{token}`.", token=token)

        value = ""
        if index + 1 < len(tokens) and not is_option_token(tokens[index + 1], marker):
            index += 1
            value = tokens[index]

        if len(resolved) >= max_options:
            if trace: trace("Too many options", token)
            raise TooManyOptions(f"More than {max_options} options given.", token=token, name=spec.name)

        resolved.append(spec.resolved(value))
        index += 1
    return resolved
