"""Simulation configuration.

All tunable constants live here. They are fixed when the simulation is
constructed; the grid resolution is derived from the physical window size and
the cell size.
"""

from dataclasses import dataclass, asdict


@dataclass
class SimulationConfig:
    """Grid geometry and physical constants of the fluid."""

    # Physical size of the simulated area (window pixels) and of one cell
    width: int = 640
    height: int = 480
    cell_size: int = 8

    viscosity: float = 1e-6  # diffusion of velocity
    diffusion_factor: float = 1e-5  # diffusion of density
    dissolve_factor: float = 0.1  # density lost per second
    input_speed: float = 5.0  # pointer delta to velocity scale
    density_impulse: float = 0.6  # density added per frame while pressed

    iterations: int = 20  # Gauss-Seidel sweeps for diffusion and projection

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.num_tiles_x < 3 or self.num_tiles_y < 3:
            raise ValueError(
                f"grid of {self.num_tiles_x}x{self.num_tiles_y} tiles is too small, "
                "need at least 3 tiles per axis"
            )
        for name in ("viscosity", "diffusion_factor", "dissolve_factor", "input_speed", "density_impulse"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.iterations <= 0:
            raise ValueError(f"iterations must be positive, got {self.iterations}")

    @property
    def num_tiles_x(self) -> int:
        return self.width // self.cell_size

    @property
    def num_tiles_y(self) -> int:
        return self.height // self.cell_size

    @property
    def num_tiles_middle_x(self) -> int:
        """Interior columns, excluding the ghost ring."""
        return self.num_tiles_x - 2

    @property
    def num_tiles_middle_y(self) -> int:
        """Interior rows, excluding the ghost ring."""
        return self.num_tiles_y - 2

    def to_dict(self):
        return asdict(self)
