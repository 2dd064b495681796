"""Per-frame stable fluids step.

Holds the two state buffers and sequences the kernels:

- external force from the pointer
- velocity: diffuse, project, self-advect, project
- density: diffuse, advect
- dissolve, clamp and push the density to the display grid

Buffers are swapped, never copied, so that each kernel writes into the slot
whose contents it has just moved into ``previous``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .advection import advect
from .config import SimulationConfig
from .diffusion import diffuse
from .field import BoundaryPolicy, SimulationState
from .mesh import interior_vertex_indices
from .projection import project

log = logging.getLogger(__name__)

REGULAR = int(BoundaryPolicy.REGULAR)
MIRROR_X = int(BoundaryPolicy.MIRROR_X)
MIRROR_Y = int(BoundaryPolicy.MIRROR_Y)

MAX_DENSITY = 2.0


@dataclass
class PointerState:
    """Pointer position in grid space (origin bottom left) and primary button."""

    x: float
    y: float
    pressed: bool = False


class Simulation:
    def __init__(self, config: Optional[SimulationConfig] = None, grid=None):
        self.config = config if config is not None else SimulationConfig()
        self.grid = grid

        self.nx = self.config.num_tiles_x
        self.ny = self.config.num_tiles_y
        self.current = SimulationState(self.nx, self.ny)
        self.previous = SimulationState(self.nx, self.ny)

        self._last_pointer = None
        self._color_indices = interior_vertex_indices(self.nx, self.ny)

        log.debug(
            "Simulation grid %dx%d tiles (%dx%d interior)",
            self.nx, self.ny, self.config.num_tiles_middle_x, self.config.num_tiles_middle_y,
        )

    def reset(self):
        self.current.clear()
        self.previous.clear()
        self._last_pointer = None
        log.debug("Simulation reset")

    # ------------------------------------------------------------------
    # Per-frame pipeline
    # ------------------------------------------------------------------

    def step(self, delta_time: float, pointer: Optional[PointerState] = None):
        if pointer is not None:
            self.apply_pointer(pointer, delta_time)
        self.velocity_step(delta_time)
        self.density_step(delta_time)
        self.dissolve(delta_time)
        self.present()

    def apply_pointer(self, pointer: PointerState, delta_time: float):
        """Inject density and velocity at the cell under the pointer.

        The velocity is proportional to the pointer motion since the last
        call. Pointers outside the interior are ignored.
        """
        if self._last_pointer is None:
            dx = dy = 0.0
        else:
            dx = pointer.x - self._last_pointer[0]
            dy = pointer.y - self._last_pointer[1]
        self._last_pointer = (pointer.x, pointer.y)

        i = int(np.floor(pointer.x / self.config.cell_size))
        j = int(np.floor(pointer.y / self.config.cell_size))
        if not (1 <= i <= self.nx - 2 and 1 <= j <= self.ny - 2):
            return

        if pointer.pressed:
            self.current.density.data[j, i] += self.config.density_impulse

        scale = self.config.input_speed * delta_time
        self.current.vel_x.data[j, i] = scale * dx
        self.current.vel_y.data[j, i] = scale * dy

    def velocity_step(self, delta_time: float):
        cur, prev = self.current, self.previous
        iterations = self.config.iterations

        cur.swap_velocity(prev)
        diffuse(MIRROR_X, cur.vel_x.data, prev.vel_x.data, self.config.viscosity, delta_time, iterations)
        diffuse(MIRROR_Y, cur.vel_y.data, prev.vel_y.data, self.config.viscosity, delta_time, iterations)
        project(cur.vel_x.data, cur.vel_y.data, prev.vel_x.data, prev.vel_y.data, iterations)

        cur.swap_velocity(prev)
        u0, v0 = prev.vel_x.data, prev.vel_y.data
        advect(MIRROR_X, cur.vel_x.data, u0, u0, v0, delta_time)
        advect(MIRROR_Y, cur.vel_y.data, v0, u0, v0, delta_time)
        project(cur.vel_x.data, cur.vel_y.data, prev.vel_x.data, prev.vel_y.data, iterations)

    def density_step(self, delta_time: float):
        cur, prev = self.current, self.previous

        cur.swap_density(prev)
        diffuse(
            REGULAR, cur.density.data, prev.density.data,
            self.config.diffusion_factor, delta_time, self.config.iterations,
        )
        cur.swap_density(prev)
        advect(REGULAR, cur.density.data, prev.density.data, cur.vel_x.data, cur.vel_y.data, delta_time)

    def dissolve(self, delta_time: float):
        interior = self.current.density.interior
        np.clip(interior - self.config.dissolve_factor * delta_time, 0.0, MAX_DENSITY, out=interior)

    def present(self):
        if self.grid is None:
            return
        self.grid.update_colors(self._color_indices, self.current.density.interior.flatten())
        self.grid.update_buffer()
        self.grid.render()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def total_density(self) -> float:
        return float(self.current.density.interior.sum())

    def image_data(self) -> np.ndarray:
        """Interior density as an 8-bit grey RGB image, bottom row first."""
        grey = (np.clip(self.current.density.interior, 0, 1) * 255).astype(np.uint8)
        return np.stack([grey, grey, grey], axis=2)
