## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class DispatchError(Exception):
    kind: str = "DispatchError"

    def __init__(self, message: str = "", *, token=None, name=None, reason=None):
        """Base class for all errors raised during a dispatch cycle."""
        super().__init__(message or self.kind)
        self.token: str | None = token
        self.name: str | None = name
        self.reason: str | None = reason


class NoArgsProvided(DispatchError, ValueError):
    kind = "NoArgsProvided"

class UnknownCommand(DispatchError, LookupError):
    kind = "UnknownCommand"

class UnknownOption(DispatchError, LookupError):
    kind = "UnknownOption"

class MissingRequiredOption(DispatchError, ValueError):
    kind = "MissingRequiredOption"

class UnexpectedArgument(DispatchError, ValueError):
    kind = "UnexpectedArgument"


class CommandExecutionFailed(DispatchError, RuntimeError):
    """A command handler, or one of the option handlers after it, reported failure."""
    kind = "CommandExecutionFailed"


class TooManyCommands(DispatchError, OverflowError):
    kind = "TooManyCommands"

class TooManyOptions(DispatchError, OverflowError):
    """Raised for an oversized option catalog and for too many options on one command line."""
    kind = "TooManyOptions"


class DuplicateName(DispatchError, ValueError):
    """Only raised by strict catalogs; lenient ones let the first entry shadow the rest."""
    kind = "DuplicateName"
