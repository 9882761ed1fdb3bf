import pytest


# Upper block LE -> TE, optional blank separator, lower block LE -> TE.
SAMPLE_DAT = """NACA 0012-ish TEST AIRFOIL
       4.       4.

  0.0000000  0.0000000
  0.3000000  0.0600000
  0.7000000  0.0350000
  1.0000000  0.0000000

  0.0000000  0.0000000
  0.3000000 -0.0500000
  0.7000000 -0.0300000
  1.0000000  0.0000000
"""

# End-to-end example: upper (1,0) (0.5,0.2) (0,0), lower (0,0) (0.5,-0.1).
TINY_DAT = """tiny
3. 2.

1 0
0.5 0.2
0 0
0 0
0.5 -0.1
"""


@pytest.fixture
def sample_text():
    return SAMPLE_DAT


@pytest.fixture
def tiny_text():
    return TINY_DAT


@pytest.fixture
def settings(tmp_path):
    from config.settings import build_settings
    return build_settings({"paths": {"data_dir": str(tmp_path / "data")}})
