import numpy as np
import pytest

from geometry.errors import (
    MalformedHeader, MalformedCoordinateLine, PointCountMismatch, ParseError,
)
from geometry.loaders.dat_loader import parse_header, parse_lednicer, load_dat


def test_parse_header_dot_delimited():
    header = parse_header("       35.       35.")
    assert header.upper_count == 35
    assert header.lower_count == 35
    assert header.total == 70
    assert header.loop_length == 69


def test_parse_sample_profile(sample_text):
    profile = parse_lednicer(sample_text)
    assert profile.title == "NACA 0012-ish TEST AIRFOIL"
    assert profile.header.upper_count == 4
    assert profile.header.lower_count == 4
    assert profile.points.shape == (8, 2)
    # File order is preserved: upper block then lower block.
    assert profile.points[1].tolist() == [0.3, 0.06]
    assert profile.points[5].tolist() == [0.3, -0.05]
    assert profile.upper.shape == (4, 2)
    assert profile.lower[0].tolist() == [0.0, 0.0]


def test_points_are_read_only(tiny_text):
    profile = parse_lednicer(tiny_text)
    with pytest.raises(ValueError):
        profile.points[0, 0] = 5.0


def test_blank_separator_is_optional(tiny_text):
    with_gap = tiny_text.replace("0 0\n0 0\n", "0 0\n\n0 0\n")
    a = parse_lednicer(tiny_text)
    b = parse_lednicer(with_gap)
    np.testing.assert_array_equal(a.points, b.points)


def test_tabs_and_crlf_tolerated():
    text = "t\r\n2. 2.\r\n\r\n0\t0\r\n1   0.1\r\n0 0\r\n1 -0.1\r\n"
    profile = parse_lednicer(text)
    assert profile.points.tolist() == [[0, 0], [1, 0.1], [0, 0], [1, -0.1]]


def test_line_two_is_skipped_unconditionally():
    text = "t\n1. 2.\nnot blank at all\n0 0\n0 0\n1 0\n"
    assert parse_lednicer(text).points.shape == (3, 2)


def test_malformed_header():
    text = "t\nabc. 2.\n\n0 0\n"
    with pytest.raises(MalformedHeader) as exc:
        parse_lednicer(text)
    assert exc.value.context["line"] == 2
    assert "abc" in str(exc.value)


def test_header_without_dot():
    with pytest.raises(MalformedHeader):
        parse_header("35 35")


def test_negative_header_count():
    with pytest.raises(MalformedHeader):
        parse_header("-1. 2.")


def test_missing_header_line():
    with pytest.raises(MalformedHeader):
        parse_lednicer("only a title")


@pytest.mark.parametrize("row", ["0.1", "0.1 0.2 0.3", "x 0.2", "0.1 nan"])
def test_malformed_coordinate_line(row):
    text = "t\n1. 1.\n\n0 0\n{}\n".format(row)
    with pytest.raises(MalformedCoordinateLine) as exc:
        parse_lednicer(text)
    assert exc.value.context["line"] == 5


def test_point_count_mismatch():
    text = "t\n3. 2.\n\n1 0\n0.5 0.2\n0 0\n0 0\n"
    with pytest.raises(PointCountMismatch) as exc:
        parse_lednicer(text)
    assert exc.value.context["declared"] == 5
    assert exc.value.context["found"] == 4
    assert isinstance(exc.value, ParseError)


def test_load_dat_uses_stem_when_title_blank(tmp_path, tiny_text):
    path = tmp_path / "clarky.dat"
    path.write_text("\n" + tiny_text.split("\n", 1)[1], encoding="utf-8")
    profile = load_dat(str(path))
    assert profile.title == "clarky"
    assert profile.source == str(path)
    assert profile.points.shape == (5, 2)
