"""
Parsers for the values found in EFP input files. Each parser takes a :obj:`efpmd.parsers.stream.Cursor` and
returns a :obj:`Match` holding the value and the cursor after it, or ``None`` if the text at the cursor is not
a value of the requested type. Parsers never raise on malformed input, so they can be used to probe the input.
"""
import re
from functools import partial
from typing import Any, Mapping, NamedTuple, Optional

from efpmd import units as efp_units
from efpmd.definitions import (
    CoordType,
    DispDamp,
    ElecDamp,
    EnsembleType,
    PolDamp,
    RunType,
    Term,
)
from efpmd.parsers.stream import Cursor

__all__ = [
    "Match",
    "parse_string",
    "parse_int",
    "parse_double",
    "parse_enum",
    "parse_terms",
    "parse_run_type",
    "parse_coord",
    "parse_units",
    "parse_elec_damp",
    "parse_disp_damp",
    "parse_pol_damp",
    "parse_ensemble",
    "int_gt_zero",
    "double_gt_zero",
]


class Match(NamedTuple):
    value: Any
    cursor: Cursor


# Same literals as strtol(..., 10) and strtod in the C locale, hexadecimal floats excepted
_int_pattern = re.compile(r"\s*[+-]?[0-9]+")
_double_pattern = re.compile(
    r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def parse_string(cursor: Cursor) -> Optional[Match]:
    """
    Read a bare word or a double quoted string. Quoted strings are returned without the quotes and may contain
    spaces, an unterminated quote does not match.
    """
    cursor = cursor.skip_space()

    if cursor.at_end():
        return None

    line, start = cursor.line, cursor.pos

    if line[start] == '"':
        end = line.find('"', start + 1)
        if end < 0:
            return None
        return Match(line[start + 1 : end], cursor.move_to(end + 1))

    end = start
    while end < len(line) and not line[end].isspace():
        end += 1

    return Match(line[start:end], cursor.move_to(end))


def parse_int(cursor: Cursor) -> Optional[Match]:
    match = _int_pattern.match(cursor.line, cursor.pos)

    if match is None:
        return None

    return Match(int(match.group()), cursor.move_to(match.end()))


def parse_double(cursor: Cursor) -> Optional[Match]:
    match = _double_pattern.match(cursor.line, cursor.pos)

    if match is None:
        return None

    return Match(float(match.group()), cursor.move_to(match.end()))


def parse_enum(cursor: Cursor, table: Mapping[str, Any]) -> Optional[Match]:
    """
    Match one of the names in ``table`` at the cursor position. If several names are prefixes of the input, the
    longest one wins. Only the name itself is consumed, so trailing characters are left for the caller to reject.

    Args:
        cursor (Cursor): Current position in the line.
        table (dict): Names mapped to the values they stand for.

    Returns:
        Match: Value of the matched name, or None.
    """
    name = None

    for candidate in table:
        if cursor.startswith(candidate) and (name is None or len(candidate) > len(name)):
            name = candidate

    if name is None:
        return None

    return Match(table[name], cursor.advance(len(name)))


RUN_TYPES = {t.value: t for t in RunType}
COORD_TYPES = {t.value: t for t in CoordType}
ELEC_DAMPS = {t.value: t for t in ElecDamp}
DISP_DAMPS = {t.value: t for t in DispDamp}
POL_DAMPS = {t.value: t for t in PolDamp}
ENSEMBLE_TYPES = {t.value: t for t in EnsembleType}

# Length units of the input, as factors to atomic units
LENGTH_UNITS = {
    "bohr": efp_units.Bohr,
    "angs": efp_units.Angstrom,
}

TERMS = {
    "elec": Term.ELEC,
    "pol": Term.POL,
    "disp": Term.DISP,
    "xr": Term.XR,
}

parse_run_type = partial(parse_enum, table=RUN_TYPES)
parse_coord = partial(parse_enum, table=COORD_TYPES)
parse_units = partial(parse_enum, table=LENGTH_UNITS)
parse_elec_damp = partial(parse_enum, table=ELEC_DAMPS)
parse_disp_damp = partial(parse_enum, table=DISP_DAMPS)
parse_pol_damp = partial(parse_enum, table=POL_DAMPS)
parse_ensemble = partial(parse_enum, table=ENSEMBLE_TYPES)


def parse_terms(cursor: Cursor) -> Optional[Match]:
    """
    Read the rest of the line as a list of energy terms, e.g. ``elec pol``. Fails if any word is not a term or if
    no term is given.
    """
    terms = Term(0)
    cursor = cursor.skip_space()

    while not cursor.at_end():
        match = parse_enum(cursor, TERMS)
        if match is None:
            return None
        terms |= match.value
        cursor = match.cursor.skip_space()

    if not terms:
        return None

    return Match(terms, cursor)


def int_gt_zero(value: int) -> bool:
    return value > 0


def double_gt_zero(value: float) -> bool:
    return value > 0.0
