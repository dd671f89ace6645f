## clidispatch — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
from typing import Iterable, Sequence, TextIO
from dataclasses import dataclass

from .types import CommandSpec, OptionSpec, ResolvedOption, State, StateName, is_success, failure_reason
from .errors import NoArgsProvided, UnknownCommand, MissingRequiredOption, CommandExecutionFailed
from .catalog import Catalog, MAX_COMMANDS, MAX_OPTIONS
from .scanner import scan_options
from .formatting import format_trace, format_options


@dataclass(frozen=True)
class DispatchConfig:
    max_commands: int = MAX_COMMANDS
    max_options: int = MAX_OPTIONS
    marker: str = '-'
    debug: bool = False
    strict: bool = False    # reject duplicate names instead of letting the first one win


class Dispatcher:
    """Matches an argument vector against a fixed catalog, then runs the command and option handlers.

    Token 0 is the program name and is skipped, token 1 selects the command, and the rest
    are options with their values.  Every stage fails fast with a `DispatchError` subclass.
    """

    def __init__(self, commands: Iterable[CommandSpec], options: Iterable[OptionSpec] = (),
                 config: DispatchConfig | None = None, *, file: TextIO | None = None):
        self.catalog = Catalog.from_specs(commands, options)
        self.config = config or DispatchConfig()
        self.file = file
        self.state: StateName | None = None

    def _trace(self, label: str, detail: str = '') -> None:
        if not self.config.debug: return
        print(format_trace(label, detail), file=self.file if self.file is not None else sys.stderr)

    # Stages ──────────────────────────────────────────────────────────────────────────────────
    def check_catalog(self) -> None:
        try:
            self.catalog.check_capacity(self.config.max_commands, self.config.max_options)
            if self.config.strict:
                self.catalog.check_unique()
        except Exception:
            self.state = State.ERROR
            raise

    def resolve_command(self, args: Sequence[str]) -> CommandSpec:
        self.state = State.RESOLVING
        if len(args) < 2:
            self._trace("No command provided by user")
            raise NoArgsProvided("No command provided.")
        if (cmd := self.catalog.find_command(args[1])) is None:
            self._trace("Unknown command", args[1])
            raise UnknownCommand(f"Unknown command `{args[1]}`.", token=args[1])
        self._trace("Detected command", cmd.name)
        return cmd

    def scan(self, args: Sequence[str]) -> list[ResolvedOption]:
        self.state = State.SCANNING
        options = scan_options(args[2:], self.catalog, marker=self.config.marker,
                               max_options=self.config.max_options, trace=self._trace)
        self._trace("Detected options", format_options(options))
        return options

    def validate(self, cmd: CommandSpec, options: Sequence[ResolvedOption]) -> None:
        self.state = State.VALIDATING
        present = {opt.name for opt in options}
        for name in cmd.required:
            if name not in present:
                self._trace("Missing required option", name)
                raise MissingRequiredOption(f"Command `{cmd.name}` requires option `{name}`.", name=name)

    def execute(self, cmd: CommandSpec, options: Sequence[ResolvedOption]) -> None:
        self.state = State.EXECUTING_COMMAND
        options = tuple(options)
        if not is_success(result := cmd.handler(options)):
            reason = failure_reason(result)
            self._trace("Command handler failed", cmd.name)
            raise CommandExecutionFailed(f"Command `{cmd.name}` failed.", name=cmd.name, reason=reason or None)

        # Handlers that already ran keep their side effects if a later one fails.
        self.state = State.EXECUTING_OPTIONS
        for opt in options:
            if opt.handler is None: continue
            if not is_success(result := opt.handler(opt.value)):
                reason = failure_reason(result)
                self._trace("Option handler failed", opt.name)
                raise CommandExecutionFailed(f"Option `{opt.name}` of command `{cmd.name}` failed.",
                                             name=opt.name, token=opt.value, reason=reason or None)

    # Entry points ────────────────────────────────────────────────────────────────────────────
    def parse(self, args: Sequence[str]) -> tuple[CommandSpec, list[ResolvedOption]]:
        """Resolve, scan and validate without running any handler."""
        try:
            self.check_catalog()
            cmd = self.resolve_command(args)
            options = self.scan(args)
            self.validate(cmd, options)
        except Exception:
            self.state = State.ERROR
            raise
        return cmd, options

    def dispatch(self, args: Sequence[str]) -> None:
        cmd, options = self.parse(args)
        try:
            self.execute(cmd, options)
        except Exception:
            self.state = State.ERROR
            raise
        self.state = State.DONE
        self._trace("Command executed successfully", cmd.name)
