import numpy as np
import pytest

pytest.importorskip("tensorflow")

from fractal_ppm.config import RenderParameters  # noqa: E402
from fractal_ppm.renderer import render_image  # noqa: E402
from fractal_ppm.vectorized import evaluate_grid  # noqa: E402


@pytest.fixture(scope="module")
def params():
    return RenderParameters(width=16, height=12, max_iter=50)


@pytest.fixture(scope="module")
def reference(params):
    return render_image(params, backend="python")


def test_grid_shapes(params):
    grid = evaluate_grid(params)
    assert grid.steps.shape == (12, 16)
    assert grid.magnitude_squared.shape == (12, 16)
    assert grid.inside.dtype == bool


def test_escaped_pixels_crossed_the_horizon(params):
    grid = evaluate_grid(params)
    assert (grid.magnitude_squared[~grid.inside] > 4.0).all()
    assert (grid.steps[grid.inside] == params.max_iter).all()


def test_matches_per_pixel_rendering(params, reference):
    result = render_image(params, backend="tensorflow")

    np.testing.assert_array_equal(result.inside, reference.inside)
    np.testing.assert_allclose(
        result.smooth[~result.inside], reference.smooth[~reference.inside], rtol=1e-9
    )
    assert result.pixels.shape == reference.pixels.shape
    assert (result.pixels[result.inside] == 0).all()


def test_progress_reported_once(params):
    calls = []
    render_image(params, backend="tensorflow", progress=lambda done, total: calls.append((done, total)))
    assert calls == [(192, 192)]
