from __future__ import annotations

import pytest

from modgrid.domain.entities import LayoutConfig, Module, ResponsiveMode
from modgrid.domain.errors import UseCaseError
from modgrid.domain.state import LayoutState
from modgrid.usecases.update_layout_config import UpdateLayoutConfig


def test_columns_are_clamped_and_modules_untouched() -> None:
    state = LayoutState(config=LayoutConfig(desktop_columns=12))
    state.modules[1] = Module(id=1, col=12, row=1, mobile_col=2)

    config = UpdateLayoutConfig()(state, desktop_columns="20", target_columns=0)

    assert config.desktop_columns == 12
    assert config.target_columns == 1
    assert state.config is config
    assert state.modules[1].col == 12
    assert state.modules[1].mobile_col == 2


def test_unsupported_mode_is_rejected_without_change() -> None:
    state = LayoutState()
    with pytest.raises(UseCaseError) as excinfo:
        UpdateLayoutConfig()(state, responsive_mode="center")
    assert excinfo.value.code == "UNSUPPORTED_MODE"
    assert state.config.responsive_mode is ResponsiveMode.REFLOW


def test_unknown_mode_token() -> None:
    with pytest.raises(UseCaseError) as excinfo:
        UpdateLayoutConfig()(LayoutState(), responsive_mode="zigzag")
    assert excinfo.value.code == "INVALID_MODE"


def test_unknown_setting_is_a_programming_error() -> None:
    with pytest.raises(ValueError):
        UpdateLayoutConfig()(LayoutState(), columns=4)
