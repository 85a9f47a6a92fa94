"""
Tests for the divider drag state machine.
"""

import pytest

from whiteboard.grid.resize import (
    ContainerSize,
    DraggingPanel,
    DraggingRow,
    Idle,
    PanelDivider,
    Point,
    ResizeController,
    RowDivider,
    parse_divider_id,
)
from test_fixtures import THIRD, make_grid

# 100 units wide/high, so a pointer delta of d is a d% change
CONTAINER = ContainerSize(100, 100)


@pytest.fixture
def controller():
    return ResizeController()


class TestParseDividerId:
    """Tests for parse_divider_id."""

    def test_row_divider(self):
        assert parse_divider_id("row-divider-1") == RowDivider(1)

    def test_panel_divider(self):
        assert parse_divider_id("panel-divider-2-0") == PanelDivider(2, 0)

    def test_ids_round_trip_through_targets(self):
        assert parse_divider_id(RowDivider(0).divider_id) == RowDivider(0)
        assert parse_divider_id(PanelDivider(1, 1).divider_id) == PanelDivider(1, 1)

    @pytest.mark.parametrize("value", [None, "", "panel-3", "row-divider-x", "panel-divider-1"])
    def test_not_a_divider(self, value):
        assert parse_divider_id(value) is None


class TestPress:
    """Tests for starting a drag."""

    def test_starts_idle(self, controller):
        assert isinstance(controller.state, Idle)
        assert controller.is_idle

    def test_row_divider_press(self, controller, grid):
        assert controller.press(grid, RowDivider(0), Point(10, 20))
        assert controller.state == DraggingRow(row_index=0, last_y=20)

    def test_panel_divider_press(self, controller, grid):
        assert controller.press(grid, PanelDivider(1, 0), Point(30, 70))
        assert controller.state == DraggingPanel(row_index=1, panel_index=0, last_x=30)

    def test_last_row_has_no_divider(self, controller, grid):
        assert not controller.press(grid, RowDivider(1), Point(0, 0))
        assert controller.is_idle

    def test_last_panel_has_no_divider(self, controller, grid):
        assert not controller.press(grid, PanelDivider(0, 1), Point(0, 0))
        assert controller.is_idle

    def test_missing_row(self, controller, grid):
        assert not controller.press(grid, PanelDivider(4, 0), Point(0, 0))

    def test_unknown_target(self, controller, grid):
        assert not controller.press(grid, None, Point(0, 0))

    def test_second_press_rejected(self, controller, grid):
        """Only one drag at a time, whichever axis it is on."""
        assert controller.press(grid, RowDivider(0), Point(0, 50))
        assert not controller.press(grid, PanelDivider(0, 0), Point(50, 10))
        assert controller.state == DraggingRow(row_index=0, last_y=50)


class TestMove:
    """Tests for applying pointer movement."""

    def test_idle_move_is_noop(self, controller, grid):
        assert controller.move(grid, Point(5, 5), CONTAINER) is grid

    def test_scenario_panel_drag(self, controller):
        """Three panels at a third each; dragging the first divider by 5%."""
        grid = make_grid([100], [[THIRD, THIRD, THIRD]])
        controller.press(grid, PanelDivider(0, 0), Point(33, 50))
        result = controller.move(grid, Point(38, 50), CONTAINER)
        assert result.widths(0) == pytest.approx([THIRD + 5, THIRD - 5, THIRD])
        assert result.rows[0].panels[2] == grid.rows[0].panels[2]

    def test_cumulative_moves(self, controller):
        grid = make_grid([100], [[THIRD, THIRD, THIRD]])
        controller.press(grid, PanelDivider(0, 0), Point(33, 50))
        for x in (34, 35, 36, 37, 38):
            grid = controller.move(grid, Point(x, 50), CONTAINER)
        assert grid.widths(0) == pytest.approx([THIRD + 5, THIRD - 5, THIRD])

    def test_row_drag(self, controller, grid):
        controller.press(grid, RowDivider(0), Point(0, 50))
        result = controller.move(grid, Point(0, 40), CONTAINER)
        assert result.heights() == pytest.approx([40, 60])
        assert result.rows[0].panels == grid.rows[0].panels

    def test_uses_container_dimension_for_axis(self, controller, grid):
        """Rows scale by height, panels by width."""
        container = ContainerSize(width=200, height=50)
        controller.press(grid, RowDivider(0), Point(0, 10))
        result = controller.move(grid, Point(0, 15), container)
        assert result.heights() == pytest.approx([60, 40])

        controller.release()
        controller.press(result, PanelDivider(0, 0), Point(10, 0))
        result = controller.move(result, Point(30, 0), container)
        assert result.widths(0) == pytest.approx([60, 40])

    def test_live_container_size(self, controller, grid):
        """A resized window changes the scale of the next move only."""
        controller.press(grid, PanelDivider(0, 0), Point(0, 0))
        grid = controller.move(grid, Point(10, 0), ContainerSize(100, 100))
        grid = controller.move(grid, Point(20, 0), ContainerSize(200, 100))
        assert grid.widths(0) == pytest.approx([65, 35])

    def test_conservation(self, controller):
        """Only the two siblings change; the sum stays at 100."""
        grid = make_grid([20, 30, 50], [[100], [100], [100]])
        controller.press(grid, RowDivider(1), Point(0, 50))
        result = controller.move(grid, Point(0, 57), CONTAINER)
        assert result.heights() == pytest.approx([20, 37, 43])
        assert result.rows[0] == grid.rows[0]
        assert sum(result.heights()) == pytest.approx(100)

    def test_other_rows_untouched_by_panel_drag(self, controller, grid):
        controller.press(grid, PanelDivider(0, 0), Point(50, 0))
        result = controller.move(grid, Point(60, 0), CONTAINER)
        assert result.rows[1] is grid.rows[1]
        assert result.heights() == grid.heights()

    def test_zero_delta_is_noop(self, controller, grid):
        controller.press(grid, RowDivider(0), Point(0, 50))
        assert controller.move(grid, Point(12, 50), CONTAINER) is grid

    def test_zero_container_is_noop(self, controller, grid):
        controller.press(grid, RowDivider(0), Point(0, 50))
        assert controller.move(grid, Point(0, 60), ContainerSize(0, 0)) is grid
        assert controller.state == DraggingRow(row_index=0, last_y=60)


class TestMinimumSize:
    """Tests for the 10% floor."""

    def test_scenario_rejected_move(self, controller):
        """A move that would leave 8% is dropped but still moves the baseline."""
        grid = make_grid([100], [[30, 20, 50]])
        controller.press(grid, PanelDivider(0, 0), Point(30, 0))

        result = controller.move(grid, Point(42, 0), CONTAINER)
        assert result is grid
        assert controller.state == DraggingPanel(row_index=0, panel_index=0, last_x=42)

        # Back by 3 from where the pointer actually was, not from 30
        result = controller.move(result, Point(39, 0), CONTAINER)
        assert result.widths(0) == pytest.approx([27, 23, 50])

    def test_exactly_minimum_allowed(self, controller):
        grid = make_grid([100], [[30, 20, 50]])
        controller.press(grid, PanelDivider(0, 0), Point(30, 0))
        result = controller.move(grid, Point(40, 0), CONTAINER)
        assert result.widths(0) == pytest.approx([40, 10, 50])

    def test_row_floor(self, controller):
        grid = make_grid([15, 85], [[100], [100]])
        controller.press(grid, RowDivider(0), Point(0, 15))
        assert controller.move(grid, Point(0, 9), CONTAINER) is grid

    def test_never_below_minimum(self, controller):
        """Wild pointer movement never produces a sibling under 10%."""
        import random

        rng = random.Random(42)
        grid = make_grid([100], [[THIRD, THIRD, THIRD]])
        controller.press(grid, PanelDivider(0, 1), Point(50, 0))
        for _ in range(300):
            grid = controller.move(grid, Point(rng.uniform(-50, 150), 0), CONTAINER)
            assert min(grid.widths(0)) >= 10
            assert sum(grid.widths(0)) == pytest.approx(100)


class TestRelease:
    """Tests for ending a drag."""

    def test_release_returns_to_idle(self, controller, grid):
        controller.press(grid, RowDivider(0), Point(0, 0))
        controller.release()
        assert controller.is_idle

    def test_moves_after_release_ignored(self, controller, grid):
        controller.press(grid, RowDivider(0), Point(0, 50))
        controller.release()
        assert controller.move(grid, Point(0, 70), CONTAINER) is grid

    def test_release_when_idle(self, controller):
        controller.release()
        assert controller.is_idle

    def test_new_drag_after_release(self, controller, grid):
        controller.press(grid, RowDivider(0), Point(0, 0))
        controller.release()
        assert controller.press(grid, PanelDivider(0, 0), Point(0, 0))

    def test_force_release(self, controller, grid):
        controller.press(grid, PanelDivider(0, 0), Point(0, 0))
        assert controller.force_release("focus lost")
        assert controller.is_idle

    def test_force_release_when_idle(self, controller):
        assert not controller.force_release("focus lost")
