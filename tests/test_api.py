import io

import ezdxf
import numpy as np
import pytest

from geometry.api import load_profile, build_contour, scale_contour, run_pipeline
from geometry.errors import DegenerateThickness, InvalidScaleParameters, ProfileError


def test_end_to_end_example(tiny_text):
    profile = load_profile(tiny_text)
    out = run_pipeline(profile, 100, 40)
    np.testing.assert_allclose(out.loop, [[0, 0], [50, 40], [100, 0], [50, -20]])
    assert out.csv_text == (
        "0.000000,0.000000\n"
        "50.000000,40.000000\n"
        "100.000000,0.000000\n"
        "50.000000,-20.000000\n"
    )
    assert out.max_thickness == pytest.approx(40.0, abs=1e-4)


def test_csv_and_dxf_share_loop_order(sample_text):
    out = run_pipeline(load_profile(sample_text), 180, 0)
    csv_pts = [tuple(float(v) for v in row.split(",")) for row in out.csv_text.splitlines()]
    doc = ezdxf.read(io.StringIO(out.dxf_bytes.decode("utf-8")))
    dxf_pts = [(v[0], v[1]) for v in doc.modelspace().query("POLYLINE")[0].points()]
    assert len(csv_pts) == len(dxf_pts) == out.loop.shape[0] == 7
    np.testing.assert_allclose(csv_pts, out.loop, atol=1e-6)
    np.testing.assert_allclose(dxf_pts, out.loop, atol=1e-9)


def test_repeated_runs_do_not_compound(tiny_text):
    profile = load_profile(tiny_text)
    first = run_pipeline(profile, 100)
    run_pipeline(profile, 300, 25)
    again = run_pipeline(profile, 100)
    np.testing.assert_array_equal(first.loop, again.loop)
    assert profile.points[1].tolist() == [0.5, 0.2]


def test_build_and_scale_helpers(tiny_text):
    loop = build_contour(load_profile(tiny_text))
    np.testing.assert_allclose(scale_contour(loop, 100), [[0, 0], [50, 20], [100, 0], [50, -10]])


def test_errors_propagate():
    below = "t\n2. 2.\n\n1 0\n0 0\n0 0\n1 -0.1\n"
    with pytest.raises(DegenerateThickness):
        run_pipeline(load_profile(below), 100, 10)
    with pytest.raises(InvalidScaleParameters):
        run_pipeline(load_profile(below), 0)
    with pytest.raises(ProfileError):
        load_profile("t\nabc. 2.\n\n")
