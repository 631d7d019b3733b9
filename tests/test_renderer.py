import numpy as np
import pytest

from fractal_ppm.complex_plane import map_screen_to_complex
from fractal_ppm.config import ConfigurationError, RenderParameters
from fractal_ppm.escape import escape_time
from fractal_ppm.palette import Color, color_for
from fractal_ppm.ppm import ppm_bytes
from fractal_ppm.renderer import render_image


def test_two_pixel_row_in_x_order():
    result = render_image(RenderParameters(width=2, height=1, max_iter=1))

    colors = result.colors()
    assert len(colors) == 2
    # x=0 is c=-1.5-1.5i which escapes at once; x=1 is c=-1.5i which needs more steps.
    assert colors[0] == color_for(escape_time(map_screen_to_complex(0, 0, 2, 1), 1))
    assert colors[0] == Color(12, 9, 7)
    assert colors[1] == Color(0, 0, 0)
    assert result.inside.tolist() == [[False, True]]


def test_buffer_is_row_major():
    params = RenderParameters(width=5, height=4, max_iter=30)
    result = render_image(params)

    assert result.pixels.shape == (4, 5, 3)
    assert result.buffer.shape == (20, 3)
    for y in range(params.height):
        for x in range(params.width):
            time = escape_time(map_screen_to_complex(x, y, params.width, params.height), params.max_iter)
            assert tuple(result.buffer[y * params.width + x]) == color_for(time)


def test_smooth_is_nan_only_inside_the_set():
    result = render_image(RenderParameters(width=12, height=12, max_iter=40))

    assert result.inside.any()
    assert not result.inside.all()
    assert np.isnan(result.smooth[result.inside]).all()
    assert np.isfinite(result.smooth[~result.inside]).all()
    assert (result.pixels[result.inside] == 0).all()


def test_progress_reports_each_row_without_changing_result():
    params = RenderParameters(width=6, height=3, max_iter=25)
    calls = []

    observed = render_image(params, progress=lambda done, total: calls.append((done, total)))
    silent = render_image(params)

    assert calls == [(6, 18), (12, 18), (18, 18)]
    np.testing.assert_array_equal(observed.pixels, silent.pixels)


def test_rendering_is_deterministic():
    params = RenderParameters(width=9, height=7, max_iter=60)
    first = render_image(params)
    second = render_image(params)
    assert ppm_bytes(9, 7, first.pixels) == ppm_bytes(9, 7, second.pixels)


@pytest.mark.parametrize("width,height,max_iter", [(0, 1, 1), (1, 0, 1), (1, 1, 0)])
def test_invalid_parameters_fail_before_rendering(width, height, max_iter):
    with pytest.raises(ConfigurationError):
        RenderParameters(width=width, height=height, max_iter=max_iter)


def test_unknown_backend_is_rejected():
    with pytest.raises(ConfigurationError):
        render_image(RenderParameters(1, 1, 1), backend="cuda")
