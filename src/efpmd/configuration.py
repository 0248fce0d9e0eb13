"""
Containers for a parsed EFP run. A :obj:`Configuration` is filled by
:obj:`efpmd.parsers.input_parser.load_config` and handed to the simulation driver.
"""
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np

from efpmd.definitions import (
    COORD_SHAPES,
    MAX_COORD,
    N_VELOCITIES,
    CoordType,
    DispDamp,
    ElecDamp,
    EnsembleType,
    PolDamp,
    RunType,
    Term,
)

__all__ = ["Fragment", "Configuration"]


@dataclass(eq=False)
class Fragment:
    """
    One rigid EFP fragment.

    Args:
        name (str): Fragment type, used to look up the fragment parameters in the libraries.
        coord (numpy.ndarray): Coordinates, only the leading values are occupied. How many and how they are
                               interpreted is fixed by the coordinate representation of the run.
        vel (numpy.ndarray): Translational and angular velocities, zero unless given in the input.
    """

    name: str
    coord: np.ndarray = field(default_factory=lambda: np.zeros(MAX_COORD))
    vel: np.ndarray = field(default_factory=lambda: np.zeros(N_VELOCITIES))

    def get_coordinates(self, coord_type: CoordType) -> np.ndarray:
        """
        Occupied part of the coordinate array, shaped as the rows of the input block.

        Args:
            coord_type (efpmd.definitions.CoordType): Coordinate representation of the run.

        Returns:
            numpy.ndarray: n_rows x n_cols view on the coordinates.
        """
        n_rows, n_cols = COORD_SHAPES[coord_type]
        return self.coord[: n_rows * n_cols].reshape(n_rows, n_cols)


@dataclass
class Configuration:
    """
    All settings of an EFP run together with the fragments of the system. Every field except ``frags`` is
    populated from the option table in :obj:`efpmd.parsers.options`. Time and length quantities are stored in
    atomic units once loading is complete.
    """

    run_type: Optional[RunType] = None
    coord_type: Optional[CoordType] = None
    units_factor: Optional[float] = None
    terms: Term = Term(0)
    elec_damp: Optional[ElecDamp] = None
    disp_damp: Optional[DispDamp] = None
    pol_damp: Optional[PolDamp] = None
    hess_delta: Optional[float] = None
    max_steps: Optional[int] = None
    print_step: Optional[int] = None
    target_temperature: Optional[float] = None
    time_step: Optional[float] = None
    ensemble_type: Optional[EnsembleType] = None
    thermostat_tau: Optional[float] = None
    opt_tol: Optional[float] = None
    fraglib_path: Optional[str] = None
    userlib_path: Optional[str] = None
    frags: List[Fragment] = field(default_factory=list)

    @property
    def n_frags(self) -> int:
        return len(self.frags)

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain python representation of the configuration, suitable for yaml output.
        Enumerations are replaced by their keywords and only occupied coordinates are listed.
        """
        config = {}
        for f in fields(self):
            if f.name == "frags":
                continue
            value = getattr(self, f.name)
            if isinstance(value, Term):
                value = [t.name.lower() for t in Term if t in value]
            elif isinstance(value, Enum):
                value = value.value
            elif isinstance(value, np.floating):
                # numpy scalars from the unit conversion
                value = float(value)
            config[f.name] = value

        config["frags"] = []
        for frag in self.frags:
            coord = frag.get_coordinates(self.coord_type)
            config["frags"].append(
                {
                    "name": frag.name,
                    "coord": coord.tolist(),
                    "vel": frag.vel.tolist(),
                }
            )

        return config
