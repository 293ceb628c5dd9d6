"""Unit tests for the grid_plotter package."""
