import os

import pytest

from efpmd.definitions import CoordType


@pytest.fixture
def water_dimer_path(shared_datadir):
    return os.path.join(shared_datadir, "water_dimer.in")


@pytest.fixture
def benzene_md_path(shared_datadir):
    return os.path.join(shared_datadir, "benzene_md.in")


@pytest.fixture
def methanol_rotmat_path(shared_datadir):
    return os.path.join(shared_datadir, "methanol_rotmat.in")


@pytest.fixture
def no_fragments_path(shared_datadir):
    return os.path.join(shared_datadir, "no_fragments.in")


# coordinate blocks for each representation, one list entry per row
_coord_blocks = {
    CoordType.XYZABC: [[1.0, 2.0, 3.0, 0.1, 0.2, 0.3]],
    CoordType.POINTS: [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]],
    CoordType.ROTMAT: [
        [1.0, 2.0, 3.0],
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
    ],
}


@pytest.fixture(params=list(_coord_blocks), ids=lambda c: c.value)
def coord_type(request):
    return request.param


@pytest.fixture
def coord_block(coord_type):
    return _coord_blocks[coord_type]


def format_block(rows):
    return "\n".join(" ".join(str(v) for v in row) for row in rows)


@pytest.fixture
def single_fragment_input(coord_type, coord_block):
    """
    Input text with a single fragment in the representation selected by ``coord_type``.
    """
    return "coord {:s}\nunits bohr\nfragment h2o\n{:s}\n".format(
        coord_type.value, format_block(coord_block)
    )


@pytest.fixture
def xyzabc_fragment():
    return "fragment h2o\n0.0 0.0 0.0 0.0 0.0 0.0\n"
