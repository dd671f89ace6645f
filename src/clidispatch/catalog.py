## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable
from dataclasses import dataclass

from .types import CommandSpec, OptionSpec
from .errors import TooManyCommands, TooManyOptions, DuplicateName


MAX_COMMANDS = 10
MAX_OPTIONS = 20


@dataclass(frozen=True)
class Catalog:
    """Caller-declared commands and options available to a dispatch cycle.  Order is priority."""
    commands: tuple[CommandSpec, ...]
    options: tuple[OptionSpec, ...]

    @classmethod
    def from_specs(cls, commands: Iterable[CommandSpec], options: Iterable[OptionSpec] = ()) -> "Catalog":
        return cls(commands=tuple(commands), options=tuple(options))

    def check_capacity(self, max_commands: int = MAX_COMMANDS, max_options: int = MAX_OPTIONS) -> None:
        if len(self.commands) > max_commands:
            raise TooManyCommands(f"Catalog declares {len(self.commands)} commands, at most {max_commands} supported.")
        if len(self.options) > max_options:
            raise TooManyOptions(f"Catalog declares {len(self.options)} options, at most {max_options} supported.")

    def check_unique(self) -> None:
        """Reject entries that could never be reached because an earlier one shadows them."""
        seen = set()
        for cmd in self.commands:
            if cmd.name in seen:
                raise DuplicateName(f"Command `{cmd.name}` is declared more than once.", name=cmd.name)
            seen.add(cmd.name)

        names, forms = set(), set()
        for opt in self.options:
            if opt.name in names:
                raise DuplicateName(f"Option `{opt.name}` is declared more than once.", name=opt.name)
            names.add(opt.name)
            # Short `x` and long `x` are the same stripped token, so both share one namespace.
            for form in dict.fromkeys((opt.short, opt.long)):
                if form in forms:
                    raise DuplicateName(f"Option form `{form}` of `{opt.name}` is already taken.", name=opt.name, token=form)
                forms.add(form)

    def find_command(self, name: str) -> CommandSpec | None:
        return next((cmd for cmd in self.commands if cmd.name == name), None)

    def find_option(self, stripped: str) -> OptionSpec | None:
        """Match a marker-stripped token by long form, or by short form when one character long."""
        for opt in self.options:
            if stripped == opt.long or (len(stripped) == 1 and stripped == opt.short):
                return opt
        return None
