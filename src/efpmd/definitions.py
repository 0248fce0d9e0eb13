"""
Closed vocabularies of the EFP input file. Enumeration values are the keywords accepted in the input.
"""
from enum import Enum, IntFlag

__all__ = [
    "RunType",
    "CoordType",
    "ElecDamp",
    "DispDamp",
    "PolDamp",
    "EnsembleType",
    "Term",
    "FRAGMENT_KEYWORD",
    "VELOCITY_KEYWORD",
    "MAX_COORD",
    "N_VELOCITIES",
    "COORD_SHAPES",
    "LENGTH_COORDS",
]


class RunType(Enum):
    SP = "sp"  #: single point energy
    GRAD = "grad"  #: energy gradient
    HESS = "hess"  #: numerical hessian
    OPT = "opt"  #: geometry optimization
    MD = "md"  #: molecular dynamics


class CoordType(Enum):
    POINTS = "points"  #: three points per fragment
    XYZABC = "xyzabc"  #: center of mass and Euler angles
    ROTMAT = "rotmat"  #: center of mass and rotation matrix


class ElecDamp(Enum):
    SCREEN = "screen"
    OVERLAP = "overlap"
    OFF = "off"


class DispDamp(Enum):
    TT = "tt"
    OVERLAP = "overlap"
    OFF = "off"


class PolDamp(Enum):
    TT = "tt"
    OFF = "off"


class EnsembleType(Enum):
    NVE = "nve"
    NVT = "nvt"


class Term(IntFlag):
    ELEC = 1 << 0  #: electrostatics
    POL = 1 << 1  #: polarization
    DISP = 1 << 2  #: dispersion
    XR = 1 << 3  #: exchange repulsion


FRAGMENT_KEYWORD = "fragment"
VELOCITY_KEYWORD = "velocity"

#: capacity of the fragment coordinate array
MAX_COORD = 12
N_VELOCITIES = 6

#: rows and columns of the coordinate block for each representation
COORD_SHAPES = {
    CoordType.XYZABC: (1, 6),
    CoordType.POINTS: (3, 3),
    CoordType.ROTMAT: (4, 3),
}

#: number of leading coordinate values carrying a length
LENGTH_COORDS = {
    CoordType.XYZABC: 3,
    CoordType.POINTS: 9,
    CoordType.ROTMAT: 3,
}
