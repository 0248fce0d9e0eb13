import pytest
from ase import units

import efpmd.units as efp_units


def test_atomic_units():
    assert efp_units.Bohr == pytest.approx(1.0)
    assert efp_units.energy == pytest.approx(units.Hartree)
    assert efp_units.Angstrom == pytest.approx(1.0 / units.Bohr)
    assert efp_units.Angstrom == pytest.approx(1.8897261, rel=1e-6)


def test_time_unit():
    # one femtosecond is about 41.34 atomic time units
    assert efp_units.fs == pytest.approx(1e-15 / units._aut, rel=1e-6)
    assert efp_units.time == pytest.approx(units._aut * units.s, rel=1e-6)


def test_setup_efp_units():
    base_units = {"energy": units.eV, "length": units.Angstrom, "mass": 1.0}
    custom = efp_units.setup_efp_units(base_units)

    assert custom["Angstrom"] == pytest.approx(1.0)
    assert custom["Bohr"] == pytest.approx(units.Bohr)
    assert custom["fs"] == pytest.approx(units.fs / custom["time"])
