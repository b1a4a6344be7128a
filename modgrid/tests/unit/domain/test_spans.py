from __future__ import annotations

import pytest

from modgrid.domain.entities import Module
from modgrid.domain.spans import (
    auto_mobile_span,
    desktop_span,
    has_span_warning,
    mobile_span,
)


def test_auto_span_keeps_proportion() -> None:
    assert auto_mobile_span(3, 6, 2) == 1
    assert auto_mobile_span(6, 6, 2) == 2
    assert auto_mobile_span(4, 12, 6) == 2
    assert auto_mobile_span(6, 12, 4) == 2


def test_auto_span_rounds_half_away_from_zero() -> None:
    # 1/4 * 2 = 0.5 -> 1 ; 3/4 * 2 = 1.5 -> 2 ; 7/12 * 6 = 3.5 -> 4
    assert auto_mobile_span(1, 4, 2) == 1
    assert auto_mobile_span(3, 4, 2) == 2
    assert auto_mobile_span(7, 12, 6) == 4


def test_auto_span_never_below_one_column() -> None:
    assert auto_mobile_span(1, 12, 1) == 1
    assert auto_mobile_span(1, 12, 2) == 1


@pytest.mark.parametrize("desktop", range(1, 13))
@pytest.mark.parametrize("target", range(1, 13))
def test_auto_span_always_within_target(desktop: int, target: int) -> None:
    for col in range(1, desktop + 1):
        span = auto_mobile_span(col, desktop, target)
        assert 1 <= span <= target


def test_manual_override_wins() -> None:
    module = Module(id=1, col=3, row=2, mobile_col=2)
    assert mobile_span(module, 6, 2) == 2
    assert mobile_span(Module(id=2, col=6, row=1, mobile_col=1), 6, 4) == 1


def test_override_clamped_when_target_shrinks() -> None:
    module = Module(id=1, col=3, row=2, mobile_col=4)
    assert mobile_span(module, 6, 2) == 2


def test_col_out_of_range_after_columns_shrink_is_clamped_at_derivation() -> None:
    module = Module(id=1, col=12, row=1)
    assert desktop_span(module, 6) == 6
    assert mobile_span(module, 6, 2) == 2
    assert module.col == 12


def test_mobile_span_is_pure() -> None:
    module = Module(id=1, col=5, row=1)
    assert mobile_span(module, 6, 4) == mobile_span(module, 6, 4) == 3


def test_warning_only_without_override() -> None:
    wide = Module(id=1, col=4, row=1)
    assert has_span_warning(wide, 2) is True
    assert has_span_warning(Module(id=2, col=4, row=1, mobile_col=2), 2) is False
    assert has_span_warning(Module(id=3, col=2, row=1), 2) is False
