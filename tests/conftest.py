"""
Pytest fixtures: a small excerpt in cty.dat format.
"""

import pytest

from hamcty.cty import CTY

CTY_SAMPLE = """\
Fed. Rep. of Germany:     14:  28:  EU:   51.00:   -10.00:    -1.0:  DL:
    DA,DB,DC,DD,DE,DF,DG,DH,DI,DJ,DK,DL,DM,DN,DO,DP,DQ,DR,Y2,Y3,Y4,Y5,
    Y6,Y7,Y8,Y9,=DL0IGA[27],=DK0PF/P<50.0/-8.0>;
Singapore:                28:  54:  AS:    1.37:  -103.78:    -8.0:  9V:
    9V,S6;
Scarborough Reef:         27:  50:  AS:   15.08:  -117.72:    -8.0:  BS7:
    BS7,=BS7H;
China:                    24:  44:  AS:   36.00:  -102.00:    -8.0:  BY:
    3H,3H0(23)[42],BS,BY,BY0(23)[42]~8~;
European Turkey:          20:  39:  EU:   41.02:   -28.97:    -2.0:  *TA1:
    TA1;
Antarctica:               13:  74:  SA:  -90.00:     0.00:     0.0:  CE9:
    CE9,=VP8PJ(13)[73]{SA}<-63.2/57.9>~-3~;
"""


@pytest.fixture
def cty_file(tmp_path):
    """Write the sample to a temporary cty.dat."""
    path = tmp_path / "cty.dat"
    path.write_text(CTY_SAMPLE, encoding="latin-1")
    return str(path)


@pytest.fixture
def cty(cty_file):
    """Table loaded from the sample."""
    return CTY.from_file(cty_file)


@pytest.fixture
def write_cty(tmp_path):
    """Write arbitrary cty.dat content, return the path."""
    def _write(content, name="cty.dat"):
        path = tmp_path / name
        path.write_text(content, encoding="latin-1")
        return str(path)
    return _write
