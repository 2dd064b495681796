"""Shared fixtures for the solver tests."""

import numpy as np
import pytest

from stablefluids import SimulationConfig


class RecordingGrid:
    """Stands in for Grid2D without a GL context."""

    def __init__(self):
        self.colors = {}
        self.uploads = 0
        self.renders = 0

    def update_colors(self, indices, colors):
        for idx, color in zip(indices, colors):
            self.colors[int(idx)] = float(color)

    def update_buffer(self):
        self.uploads += 1

    def render(self):
        self.renders += 1


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def small_config():
    """12x12 tiles of unit size: a 10x10 interior with no decay or viscosity."""
    return SimulationConfig(
        width=12,
        height=12,
        cell_size=1,
        viscosity=0.0,
        diffusion_factor=0.001,
        dissolve_factor=0.0,
    )


@pytest.fixture
def pointer_config():
    """12x12 tiles of 10 pixels each."""
    return SimulationConfig(width=120, height=120, cell_size=10, input_speed=5.0, density_impulse=0.6)


@pytest.fixture
def recording_grid():
    return RecordingGrid()
