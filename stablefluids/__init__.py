"""Interactive 2D stable fluids simulation."""

from .config import SimulationConfig
from .field import BoundaryPolicy, Field, SimulationState
from .boundary import apply_boundary, set_bounds
from .diffusion import diffuse
from .advection import advect
from .projection import project
from .simulation import PointerState, Simulation

__all__ = [
    "SimulationConfig",
    "BoundaryPolicy",
    "Field",
    "SimulationState",
    "apply_boundary",
    "set_bounds",
    "diffuse",
    "advect",
    "project",
    "PointerState",
    "Simulation",
]
