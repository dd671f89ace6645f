## clidispatch — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable, Literal, NamedTuple, Sequence
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Failure:
    """Handler result that reports failure, optionally saying why.  Always falsy."""
    reason: str = ""

    def __bool__(self):
        return False


HandlerResult = bool | Failure
CommandHandler = Callable[[Sequence["ResolvedOption"]], HandlerResult]
OptionHandler = Callable[[str], HandlerResult]


def is_success(result: Any) -> bool:
    # Handlers follow a boolean contract; anything falsy, `None` included, is a failure.
    return bool(result)

def failure_reason(result: Any) -> str:
    if isinstance(result, Failure): return result.reason
    return ""


@dataclass(frozen=True)
class CommandSpec:
    name: str
    handler: CommandHandler
    required: tuple[str, ...] = ()    # logical option names that must be present
    optional: tuple[str, ...] = ()    # documentation only, never enforced

    def __post_init__(self):
        # A bare string names one option, it is not a sequence of one-letter names.
        for attr in ('required', 'optional'):
            names = getattr(self, attr)
            object.__setattr__(self, attr, (names,) if isinstance(names, str) else tuple(names))


@dataclass(frozen=True)
class OptionSpec:
    name: str                         # logical name, independent of -s/--long forms
    short: str                        # single character, e.g. `n` for -n
    long: str                         # e.g. `name` for --name
    handler: OptionHandler | None = None
    value: str = field(default="", compare=False)

    def __post_init__(self):
        if len(self.short) != 1:
            raise ValueError(f"Short form of option `{self.name}` must be a single character, got `{self.short}`.")

    def resolved(self, value: str) -> "ResolvedOption":
        """Copy of this catalog entry carrying the value found on one command line."""
        return ResolvedOption(replace(self, value=value), value)


class ResolvedOption(NamedTuple):
    spec: OptionSpec
    value: str

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def handler(self) -> OptionHandler | None:
        return self.spec.handler

    def __repr__(self):
        return f"<{self.spec.name}={self.value!r}>"


def value_of(options: Sequence[ResolvedOption], name: str, default: str | None = None) -> str | None:
    """Value of the first resolved option with logical `name`, or `default` if absent."""
    return next((opt.value for opt in options if opt.name == name), default)


class State:
    RESOLVING = 'resolving'
    SCANNING = 'scanning'
    VALIDATING = 'validating'
    EXECUTING_COMMAND = 'executing-command'
    EXECUTING_OPTIONS = 'executing-options'
    DONE = 'done'
    ERROR = 'error'

StateName = Literal['resolving', 'scanning', 'validating', 'executing-command', 'executing-options', 'done', 'error']
