import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from geometry.profile import frozen_array  # noqa: E402
from post.plot_geo import plot_contour  # noqa: E402


def test_plot_contour_saves_png(tmp_path):
    loop = frozen_array([(0, 0), (50, 20), (100, 0), (50, -10)])
    path = tmp_path / "preview.png"
    plot_contour(loop, name="tiny", show=False, save_path=str(path))
    assert path.is_file() and path.stat().st_size > 0


def test_plot_contour_rejects_empty():
    with pytest.raises(ValueError):
        plot_contour(frozen_array([]), show=False)
