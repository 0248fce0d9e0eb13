from ase import units as aseunits
from ase.units import Units
import numpy as np

__all__ = ["setup_efp_units"]

# Internal units (EFP internal -> ASE internal), atomic units throughout
__efp_base_units__ = {
    "energy": aseunits.Hartree,
    "length": aseunits.Bohr,
    "mass": aseunits._me / aseunits._amu,  # electron mass in Dalton
}


def setup_efp_units(efp_base_units):
    """
    Define the units used by the EFP driver. Energy, length and mass form the base from which the time unit is
    derived, so that the internal frame is the atomic unit system.

    Args:
        efp_base_units (dict): Dictionary defining the basic units of the simulation in ASE units.

    Returns:
        dict(str, float): conversion factors from the named units to the internal frame.
    """
    units = Units(efp_base_units)

    # Derived units (EFP internal -> ASE internal)
    units["time"] = units["length"] * np.sqrt(units["mass"] / units["energy"])

    # Length units of the input file
    units["Angstrom"] = aseunits.Angstrom / units["length"]
    units["Bohr"] = aseunits.Bohr / units["length"]

    # Time unit of the input file
    units["fs"] = aseunits.fs / units["time"]

    return units


# Placeholders for expected unit entries
(energy, length, mass, time, Angstrom, Bohr, fs) = [0.0] * 7

globals().update(setup_efp_units(__efp_base_units__))
