"""
Godunov reconstruct-evolve-average (REA) finite volume solver for
du/dt + a du/dx = 0           (1D)
or
du/dt + a du/dx + b du/dy = 0 (2D, dimensional splitting)
on periodic uniform meshes
"""

from rea_advection.errors import (
    ConfigurationError,
    DimensionError,
    IntegrationError,
    REAError,
)
from rea_advection.parameters import SimulationParameters1D, SimulationParameters2D
from rea_advection.schemes import (
    Limiter,
    LimiterKind,
    NoReconstruction,
    Slope,
    SlopeKind,
    select_scheme,
)
from rea_advection.advection1d import AdvectionSolver1D
from rea_advection.advection2d import AdvectionSolver2D
