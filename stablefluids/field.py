"""Scalar fields over the simulation grid.

A field stores one float per cell in a numpy array of shape (ny, nx), so the
column index i varies fastest. Indexing goes through (i, j) to match the
grid's (column, row) convention: ``field[i, j]`` is ``field.data[j, i]``.
The outer ring of cells is the ghost layer owned by the boundary handler.
"""

from enum import IntEnum

import numpy as np


class BoundaryPolicy(IntEnum):
    """How ghost cells are derived from their interior neighbour."""

    REGULAR = 0  # copy, zero gradient
    MIRROR_X = 1  # negate across the left/right edges (velocity x)
    MIRROR_Y = 2  # negate across the top/bottom edges (velocity y)


class Field:
    """Dense 2D scalar array over the grid, ghost ring included."""

    def __init__(self, nx: int, ny: int):
        self.data = np.zeros((ny, nx), dtype=np.float64)

    @property
    def nx(self) -> int:
        return self.data.shape[1]

    @property
    def ny(self) -> int:
        return self.data.shape[0]

    @property
    def shape(self):
        return self.data.shape

    @property
    def interior(self) -> np.ndarray:
        """View of the simulated cells, ghost ring excluded."""
        return self.data[1:-1, 1:-1]

    def _check(self, key):
        i, j = key
        if not (0 <= i < self.nx and 0 <= j < self.ny):
            raise IndexError(f"cell ({i}, {j}) outside {self.nx}x{self.ny} field")
        return j, i

    def __getitem__(self, key) -> float:
        return float(self.data[self._check(key)])

    def __setitem__(self, key, value):
        self.data[self._check(key)] = value

    def swap(self, other: "Field"):
        """Exchange storage with another field of the same shape, no copy."""
        if other.data.shape != self.data.shape:
            raise ValueError(f"cannot swap fields of shape {self.data.shape} and {other.data.shape}")
        self.data, other.data = other.data, self.data

    def fill(self, value: float):
        self.data.fill(value)

    def copy(self) -> "Field":
        field = Field(self.nx, self.ny)
        field.data[:] = self.data
        return field

    def __repr__(self):
        return f"Field(nx={self.nx}, ny={self.ny})"


class SimulationState:
    """Density and the two velocity components of one buffer slot."""

    def __init__(self, nx: int, ny: int):
        self.density = Field(nx, ny)
        self.vel_x = Field(nx, ny)
        self.vel_y = Field(nx, ny)

    def swap_velocity(self, other: "SimulationState"):
        self.vel_x.swap(other.vel_x)
        self.vel_y.swap(other.vel_y)

    def swap_density(self, other: "SimulationState"):
        self.density.swap(other.density)

    def clear(self):
        self.density.fill(0.0)
        self.vel_x.fill(0.0)
        self.vel_y.fill(0.0)
