## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from typing import Sequence

from .types import ResolvedOption
from .errors import DispatchError


_BANNERS = {
    'NoArgsProvided': "NO COMMAND.",
    'UnknownCommand': "UNKNOWN COMMAND.",
    'UnknownOption': "UNKNOWN OPTION.",
    'MissingRequiredOption': "MISSING OPTION.",
    'UnexpectedArgument': "UNEXPECTED ARGUMENT.",
    'CommandExecutionFailed': "EXECUTION FAILED.",
    'TooManyCommands': "CATALOG ERROR.",
    'TooManyOptions': "TOO MANY OPTIONS.",
    'DuplicateName': "CATALOG ERROR.",
}


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_trace(label: str, detail: str = '') -> str:
    return f"\033[90mtrace :\033[0m {label}: \033[97m{detail}\033[0m" if detail else f"\033[90mtrace :\033[0m {label}."

def format_options(options: Sequence[ResolvedOption]) -> str:
    if not options: return '∅'
    return ' '.join(f"{opt.name}={opt.value!r}" if opt.value else opt.name for opt in options)

def format_error(exc: DispatchError) -> str:
    banner = _BANNERS.get(exc.kind, "DISPATCH ERROR.")
    detail = str(exc)
    if exc.reason and exc.reason not in detail:
        detail += f" \033[90m({exc.reason})\033[0m"
    return f"\033[30;43m {banner} \033[0m {detail} (Error: \033[33m{exc.kind}\033[0m)"
