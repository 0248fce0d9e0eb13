"""
Option table of the EFP input file. Every run setting is declared once in :obj:`OPTIONS` with its keyword, the
textual default, the parser and an optional range check. Defaults are obtained by parsing the default text, so
they are always in the grammar accepted for explicit input.
"""
import logging
import os
import sys
from typing import Any, Callable, NamedTuple, Optional

from efpmd.configuration import Configuration
from efpmd.parsers.errors import ErrorKind, InputError
from efpmd.parsers.scalars import *
from efpmd.parsers.stream import Cursor

log = logging.getLogger(__name__)

__all__ = [
    "EFP_DATA_DIR",
    "Option",
    "OPTIONS",
    "get_option",
    "parse_field",
    "set_defaults",
    "print_options",
]

# Fragment parameter library shipped with libefp
EFP_DATA_DIR = os.environ.get(
    "EFP_DATA_DIR", os.path.join(sys.prefix, "share", "libefp", "fraglib")
)


class Option(NamedTuple):
    """
    Entry of the option table.

    Args:
        name (str): Keyword starting the input line.
        default (str): Default value, in input file syntax.
        parser (callable): Parser for the value, see :obj:`efpmd.parsers.scalars`.
        check (callable, optional): Predicate the parsed value has to satisfy.
        attribute (str): Field of :obj:`efpmd.configuration.Configuration` set by the option.
    """

    name: str
    default: str
    parser: Callable[[Cursor], Optional[Match]]
    check: Optional[Callable[[Any], bool]]
    attribute: str


# No name may be a prefix of a name listed after it
OPTIONS = (
    Option("run_type", "sp", parse_run_type, None, "run_type"),
    Option("coord", "xyzabc", parse_coord, None, "coord_type"),
    Option("units", "angs", parse_units, None, "units_factor"),
    Option("terms", "elec pol disp xr", parse_terms, None, "terms"),
    Option("elec_damp", "screen", parse_elec_damp, None, "elec_damp"),
    Option("disp_damp", "tt", parse_disp_damp, None, "disp_damp"),
    Option("pol_damp", "tt", parse_pol_damp, None, "pol_damp"),
    Option("hess_delta", "0.001", parse_double, double_gt_zero, "hess_delta"),
    Option("max_steps", "100", parse_int, int_gt_zero, "max_steps"),
    Option("print_step", "1", parse_int, int_gt_zero, "print_step"),
    Option("temperature", "300.0", parse_double, double_gt_zero, "target_temperature"),
    Option("time_step", "1.0", parse_double, double_gt_zero, "time_step"),
    Option("ensemble", "nve", parse_ensemble, None, "ensemble_type"),
    Option("thermostat_tau", "1.0e3", parse_double, double_gt_zero, "thermostat_tau"),
    Option("opt_tol", "1.0e-4", parse_double, double_gt_zero, "opt_tol"),
    Option(
        "fraglib_path", '"{:s}"'.format(EFP_DATA_DIR), parse_string, None, "fraglib_path"
    ),
    Option("userlib_path", ".", parse_string, None, "userlib_path"),
)


def get_option(name: str) -> Option:
    for option in OPTIONS:
        if option.name == name:
            return option
    raise KeyError("Unrecognized option {:s}".format(name))


def set_defaults(config: Configuration):
    """
    Fill all option fields of the configuration by parsing the default text of each option.

    Args:
        config (efpmd.configuration.Configuration): Configuration to initialize.
    """
    for option in OPTIONS:
        match = option.parser(Cursor(option.default))
        assert match is not None, "Invalid default for option {:s}".format(option.name)
        setattr(config, option.attribute, match.value)


def parse_field(cursor: Cursor, config: Configuration):
    """
    Parse a single ``<option> <value>`` line and store the value in the configuration.

    Args:
        cursor (efpmd.parsers.stream.Cursor): Start of the option keyword.
        config (efpmd.configuration.Configuration): Configuration to update.

    Raises:
        InputError: If the option is unknown, its value can not be parsed or is out of range, or if anything
                    follows the value.
    """
    for option in OPTIONS:
        if cursor.startswith(option.name):
            break
    else:
        raise InputError(
            ErrorKind.UNKNOWN_OPTION,
            "unknown option in input file: {:s}".format(cursor.rest.strip()),
            cursor.line_number,
        )

    cursor = cursor.advance(len(option.name)).skip_space()
    match = option.parser(cursor)

    if match is None:
        raise InputError(
            ErrorKind.INCORRECT_VALUE,
            "incorrect value for option {:s}".format(option.name),
            cursor.line_number,
        )

    if option.check is not None and not option.check(match.value):
        raise InputError(
            ErrorKind.OUT_OF_RANGE,
            "option {:s} value is out of range".format(option.name),
            cursor.line_number,
        )

    if not match.cursor.skip_space().at_end():
        raise InputError(
            ErrorKind.TRAILING_INPUT,
            "only one option per line is allowed",
            cursor.line_number,
        )

    setattr(config, option.attribute, match.value)
    log.debug("Set option {:s} to {}".format(option.name, match.value))


def print_options():
    """
    Print all options of the input file together with their defaults.
    """
    print("Available options:\n")
    for option in OPTIONS:
        print("{:s}".format(option.name))
        print("-" * len(option.name))
        print(f"    default: {option.default}")
        print()
