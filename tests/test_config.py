import pytest

from fractal_ppm.config import ConfigurationError, RenderParameters, Settings, load_settings, require_positive


def test_default_settings():
    assert load_settings({}) == Settings(verbose=False, backend="python")


@pytest.mark.parametrize("raw,expected", [("1", True), ("yes", True), ("ON", True), ("0", False), ("", False)])
def test_verbose_flag(raw, expected):
    assert load_settings({"FRACTAL_PPM_VERBOSE": raw}).verbose is expected


def test_backend_is_case_insensitive():
    assert load_settings({"FRACTAL_PPM_BACKEND": " TensorFlow "}).backend == "tensorflow"


@pytest.mark.parametrize("env", [
    {"FRACTAL_PPM_BACKEND": "gpu"},
    {"FRACTAL_PPM_VERBOSE": "maybe"},
])
def test_invalid_settings(env):
    with pytest.raises(ConfigurationError):
        load_settings(env)


def test_pixel_count():
    assert RenderParameters(width=7, height=3, max_iter=1).pixel_count == 21


@pytest.mark.parametrize("value", [True, 2.0, "3"])
def test_require_positive_wants_integers(value):
    with pytest.raises(ConfigurationError):
        require_positive("width", value)


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
