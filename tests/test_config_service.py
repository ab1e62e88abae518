from pathlib import Path

import pytest

from imgascii.models.config_model import CliOptions, Configuration, LuminanceMode
from imgascii.services.config_service import parse_ratio, resolve_configuration, resolve_grid


@pytest.mark.parametrize("text", ["1:2", "1/2", " 1:2 ", "2.5/5"])
def test_parse_ratio(text):
    assert parse_ratio(text, 1.0) == pytest.approx(0.5)


@pytest.mark.parametrize("text", ["garbage", "", "a:b", "0:2", "2:0", "-1:2", "1:2:3", "nan:1"])
def test_parse_ratio_keeps_prior_value(text):
    assert parse_ratio(text, 0.75) == 0.75


def test_one_cell_per_pixel_without_target():
    assert resolve_grid(None, None, 640, 480) == (640, 480)


def test_columns_derived_with_ceiling():
    assert resolve_grid(None, 4, 3, 10) == (2, 4)


def test_rows_derived_with_ceiling():
    assert resolve_grid(2, None, 3, 10) == (2, 7)


def test_both_targets_used_as_given():
    assert resolve_grid(8, 3, 100, 100) == (8, 3)


def test_resolve_fixed_step_configuration():
    options = CliOptions(perceived=True, row_step=2, input_path=Path("in.png"))
    config = resolve_configuration(options, 5, 5)
    assert config.fixed_step
    assert (config.columns, config.rows) == (5, 3)
    assert config.mode is LuminanceMode.PERCEIVED
    assert config.output_path is None


def test_resolve_cell_count_configuration():
    options = CliOptions(columns=20, font_ratio=1.0, inverted=True, trailing_spaces=0)
    config = resolve_configuration(options, 40, 10)
    assert not config.fixed_step
    assert (config.columns, config.rows) == (20, 5)
    assert config.inverted
    assert config.trailing_spaces == 0


def test_configuration_is_immutable_and_validated():
    config = resolve_configuration(CliOptions(), 2, 2)
    with pytest.raises(AttributeError):
        config.columns = 3
    with pytest.raises(ValueError):
        Configuration(
            mode=LuminanceMode.STANDARD,
            inverted=False,
            trailing_spaces=9,
            columns=0,
            rows=1,
            font_ratio=0.5,
            input_path=None,
            output_path=None,
        )
