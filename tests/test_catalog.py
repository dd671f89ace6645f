## clidispatch — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from clidispatch.types import CommandSpec, OptionSpec
from clidispatch.catalog import Catalog, MAX_COMMANDS, MAX_OPTIONS
from clidispatch.errors import TooManyCommands, TooManyOptions, DuplicateName


def _noop(options): return True


def test_find_command_first_match_wins():
    first, second = CommandSpec('go', _noop, required=('a',)), CommandSpec('go', _noop)
    catalog = Catalog.from_specs([first, second])
    assert catalog.find_command('go') is first
    assert catalog.find_command('stop') is None


def test_find_option_by_long_or_short_form():
    opt = OptionSpec('name', 'n', 'name')
    catalog = Catalog.from_specs([], [OptionSpec('verbose', 'v', 'verbose'), opt])
    assert catalog.find_option('name') is opt
    assert catalog.find_option('n') is opt
    assert catalog.find_option('N') is None


def test_capacity_limits():
    Catalog.from_specs([CommandSpec(f"c{i}", _noop) for i in range(MAX_COMMANDS)]).check_capacity()
    with pytest.raises(TooManyCommands):
        Catalog.from_specs([CommandSpec(f"c{i}", _noop) for i in range(MAX_COMMANDS + 1)]).check_capacity()
    options = [OptionSpec(f"o{i}", str(i % 10), f"opt{i}") for i in range(MAX_OPTIONS + 1)]
    with pytest.raises(TooManyOptions):
        Catalog.from_specs([], options).check_capacity()


def test_capacity_limits_are_configurable():
    catalog = Catalog.from_specs([CommandSpec('a', _noop), CommandSpec('b', _noop)])
    with pytest.raises(TooManyCommands):
        catalog.check_capacity(max_commands=1)


def test_check_unique_accepts_distinct_names():
    Catalog.from_specs([CommandSpec('a', _noop), CommandSpec('b', _noop)],
                       [OptionSpec('name', 'n', 'name'), OptionSpec('x', 'x', 'x')]).check_unique()


@pytest.mark.parametrize("options", [
    [OptionSpec('name', 'n', 'name'), OptionSpec('name', 'm', 'moniker')],
    [OptionSpec('name', 'n', 'name'), OptionSpec('number', 'n', 'number')],
    [OptionSpec('name', 'n', 'name'), OptionSpec('other', 'o', 'name')],
    [OptionSpec('next', 'x', 'n'), OptionSpec('name', 'n', 'name')],
])
def test_check_unique_rejects_unreachable_options(options):
    with pytest.raises(DuplicateName):
        Catalog.from_specs([], options).check_unique()


def test_specs_are_immutable():
    cmd = CommandSpec('go', _noop, required=['a'])
    assert cmd.required == ('a',)
    with pytest.raises(AttributeError):
        cmd.name = 'stop'


def test_bare_string_names_a_single_option():
    cmd = CommandSpec('hello', _noop, required='name', optional='verbose')
    assert cmd.required == ('name',)
    assert cmd.optional == ('verbose',)


def test_option_catalog_at_capacity_is_accepted():
    options = [OptionSpec(f"o{i}", chr(ord('a') + i), f"opt{i}") for i in range(MAX_OPTIONS)]
    Catalog.from_specs([], options).check_capacity()


def test_short_form_must_be_single_character():
    with pytest.raises(ValueError):
        OptionSpec('name', 'nm', 'name')
