"""
Loading of EFP input files. An input file holds one option per line followed by the fragment blocks::

    run_type md
    coord points
    units bohr

    fragment h2o
    0.0 0.0 0.0
    1.0 0.0 0.0
    0.0 1.0 0.0

Input is case insensitive, lines starting with ``#`` are comments. Files are read as Latin-1, so any byte sequence
decodes.
"""
import io
import os
import logging
from typing import TextIO, Union

from efpmd import units as efp_units
from efpmd.configuration import Configuration
from efpmd.definitions import FRAGMENT_KEYWORD, LENGTH_COORDS
from efpmd.parsers.errors import ErrorKind, InputError
from efpmd.parsers.fragments import parse_fragment
from efpmd.parsers.options import parse_field, set_defaults
from efpmd.parsers.stream import LineStream

log = logging.getLogger(__name__)

__all__ = ["parse_config", "load_config", "loads", "convert_to_atomic_units"]


def convert_to_atomic_units(config: Configuration):
    """
    Convert the length and time quantities of a fully read configuration to atomic units. Must be called exactly
    once per configuration.

    Args:
        config (efpmd.configuration.Configuration): Configuration in input units.
    """
    config.time_step = efp_units.fs * config.time_step
    config.thermostat_tau = efp_units.fs * config.thermostat_tau

    # Euler angles and rotation matrices carry no length
    n_convert = LENGTH_COORDS[config.coord_type]

    for frag in config.frags:
        frag.coord[:n_convert] *= config.units_factor


def load_config(file: TextIO) -> Configuration:
    """
    Read a configuration from an open text stream.

    Args:
        file (TextIO): EFP input.

    Returns:
        efpmd.configuration.Configuration: Configuration with all quantities in atomic units.

    Raises:
        InputError: If the input is malformed or contains no fragments.
    """
    config = Configuration()
    set_defaults(config)

    stream = LineStream(file)
    cursor = stream.next_line()

    while cursor is not None:
        # comments start in the first column
        if cursor.startswith("#"):
            cursor = stream.next_line()
            continue

        cursor = cursor.skip_space()

        if cursor.at_end():
            cursor = stream.next_line()
            continue

        if cursor.startswith(FRAGMENT_KEYWORD):
            fragment, cursor = parse_fragment(
                stream, cursor.advance(len(FRAGMENT_KEYWORD)), config.coord_type
            )
            config.frags.append(fragment)
            continue

        coord_type = config.coord_type
        parse_field(cursor, config)

        if config.frags and config.coord_type is not coord_type:
            raise InputError(
                ErrorKind.COORD_TYPE_CHANGED,
                "coordinate type must be set before the first fragment",
                cursor.line_number,
            )

        cursor = stream.next_line()

    if config.n_frags < 1:
        raise InputError(
            ErrorKind.NO_FRAGMENTS, "at least one fragment must be specified"
        )

    convert_to_atomic_units(config)

    log.info(
        "Loaded {:s} run with {:d} fragment(s)".format(
            config.run_type.value, config.n_frags
        )
    )

    return config


def parse_config(path: Union[str, os.PathLike]) -> Configuration:
    """
    Read a configuration from an EFP input file.

    Args:
        path (str, os.PathLike): Path to the input file.

    Returns:
        efpmd.configuration.Configuration: Configuration with all quantities in atomic units.

    Raises:
        InputError: If the file can not be opened or its content is malformed.
    """
    log.info("Reading input from {}".format(path))

    try:
        file = open(path, "r", encoding="latin-1")
    except OSError as e:
        raise InputError(
            ErrorKind.FILE_ACCESS, "unable to open input file {}".format(path)
        ) from e

    with file:
        return load_config(file)


def loads(text: str) -> Configuration:
    """Read a configuration from a string holding the input file content."""
    return load_config(io.StringIO(text))
