"""Unit tests for the Grid interface and ArrayGrid."""

import numpy as np
import pytest

from grid_plotter import ArrayGrid, DimensionMismatch, Grid
from grid_plotter.grid import check_2d


class CubeGrid(Grid):
    """Minimal 3D grid, only useful to check rejection."""

    def dimensions(self):
        return (2, 2, 2)

    def is_occupied(self, index):
        return False

    def occupancy(self, index):
        return 0.0

    def value(self, index):
        return float(index)


class TestGridInterface:

    def test_grid_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Grid()

    def test_incomplete_grid_cannot_be_instantiated(self):
        class NoValues(Grid):
            def dimensions(self):
                return (1, 1)

            def is_occupied(self, index):
                return False

            def occupancy(self, index):
                return 0.0

        with pytest.raises(TypeError):
            NoValues()

    def test_generic_cell_count_and_max_value(self):
        grid = CubeGrid()
        assert grid.cell_count() == 8
        assert grid.max_value() == 7.0

    def test_generic_max_value_ignores_nan(self):
        class NanFirst(CubeGrid):
            def value(self, index):
                return float("nan") if index == 0 else float(index)

        assert NanFirst().max_value() == 7.0

    def test_check_2d_rejects_3d(self):
        with pytest.raises(DimensionMismatch) as err:
            check_2d(CubeGrid())
        assert err.value.shape == (2, 2, 2)

    def test_check_2d_rejects_empty(self):
        grid = ArrayGrid(np.zeros((0, 3)))
        with pytest.raises(DimensionMismatch):
            check_2d(grid)


class TestArrayGrid:

    def test_dimensions_are_width_height(self):
        grid = ArrayGrid(np.zeros((3, 5)))
        assert grid.dimensions() == (5, 3)
        assert grid.cell_count() == 15

    def test_index_is_row_major_from_bottom(self):
        occupancy = np.zeros((2, 3), dtype=bool)
        occupancy[1, 2] = True  # row 1, col 2
        grid = ArrayGrid(occupancy)
        assert grid.index_of(2, 1) == 5
        assert grid.is_occupied(5)
        assert not any(grid.is_occupied(i) for i in range(5))

    def test_from_text_puts_first_line_on_top(self, maze):
        assert maze.dimensions() == (4, 3)
        # "#..." is the last text line, i.e. y = 0
        assert maze.is_occupied(maze.index_of(0, 0))
        assert maze.is_occupied(maze.index_of(1, 1))
        assert maze.is_occupied(maze.index_of(2, 2))
        assert not maze.is_occupied(maze.index_of(0, 2))

    def test_from_text_rejects_ragged_rows(self):
        with pytest.raises(DimensionMismatch):
            ArrayGrid.from_text(["..", "..."])

    def test_occupancy_threshold(self):
        grid = ArrayGrid([[0.2, 0.5, 0.9]], occupied_threshold=0.5)
        assert [grid.is_occupied(i) for i in range(3)] == [False, True, True]
        assert grid.occupancy(0) == pytest.approx(0.2)

    def test_values_default_to_zero(self):
        grid = ArrayGrid(np.zeros((2, 2)))
        assert grid.max_value() == 0.0

    def test_max_value_ignores_nan(self):
        grid = ArrayGrid(np.zeros((1, 3)), values=[[np.nan, 1.0, 2.0]])
        assert grid.max_value() == 2.0

    def test_max_value_all_nan(self):
        grid = ArrayGrid(np.zeros((1, 2)), values=[[np.nan, np.nan]])
        assert np.isnan(grid.max_value())

    def test_values_shape_must_match(self):
        with pytest.raises(DimensionMismatch):
            ArrayGrid(np.zeros((2, 2)), values=np.zeros((2, 3)))

    def test_non_2d_occupancy_rejected(self):
        with pytest.raises(DimensionMismatch):
            ArrayGrid(np.zeros((2, 2, 2)))

    def test_setters_mutate_cells(self):
        grid = ArrayGrid(np.zeros((2, 2)))
        grid.set_value(3, 4.5)
        grid.set_occupancy(0, 1.0)
        assert grid.value(3) == 4.5
        assert grid.max_value() == 4.5
        assert grid.is_occupied(0)

    def test_index_out_of_range(self):
        grid = ArrayGrid(np.zeros((2, 2)))
        with pytest.raises(IndexError):
            grid.value(4)
