# Godunov REA solver in one dimension
import inspect
import numpy as np
from rea_advection.advection import AdvectionSolver
from rea_advection.analytical import advection1d_solution
from rea_advection.errors import ConfigurationError
from rea_advection.initial_conditions import generate_ic
from rea_advection.parameters import SimulationParameters1D
from rea_advection.quadrature import EPSABS, EPSREL, cell_average_1d
from rea_advection.rea import rea_step
from rea_advection.schemes import compute_slopes
from rea_advection.utils import as_cell_averages


class AdvectionSolver1D(AdvectionSolver):
    """
    args:
        params:         SimulationParameters1D
        u0:             initial profile f(x), preset name for generate_ic, or cell
                        averages (nx,)
        progress_bar:   whether to print a progress bar in the loop
        epsabs:         absolute tolerance of the cell average quadrature
        epsrel:         relative tolerance of the cell average quadrature
        limit:          maximum number of quadrature subintervals
    returns:
        self.snapshots: [{t: t0, u: u0}, ...]
    """

    def __init__(
        self,
        params: SimulationParameters1D,
        u0="rectangular",
        progress_bar: bool = True,
        epsabs: float = EPSABS,
        epsrel: float = EPSREL,
        limit: int = 50,
    ):
        if not isinstance(params, SimulationParameters1D):
            raise ConfigurationError(
                f"Expected SimulationParameters1D, got {type(params).__name__}"
            )

        # spatial discretization
        self.x = params.x
        self.hx = params.hx
        self.nx = params.nx

        # advection speed and CFL number of the sweep
        self.a = params.adv_speed
        self.courant_x = params.courant_x

        # initial condition
        if isinstance(u0, str):
            u0 = generate_ic(u0, ndim=1)
        if callable(u0):
            self.profile = u0
            u0_arr = cell_average_1d(
                u0, self.x, self.hx, epsabs=epsabs, epsrel=epsrel, limit=limit
            )
        else:
            self.profile = None
            u0_arr = as_cell_averages(u0, (self.nx,))

        super().__init__(
            params, u0_arr, cell_volume=self.hx, progress_bar=progress_bar
        )

    def sweep_x(self, u: np.ndarray, dt: float) -> np.ndarray:
        """
        args:
            u:  cell averages (..., nx)
            dt: time step
        returns:
            REA update of every line along x (..., nx)
        """
        slopes = compute_slopes(self.scheme, u, self.hx)
        return rea_step(u, slopes, a=self.a, h=self.hx, dt=dt, courant=self.courant_x)

    def exact(self, t: float) -> np.ndarray:
        self._require_profile()
        return advection1d_solution(self.x, t - self.t_init, self.a, self.profile)

    def rea(self):
        """
        march the cell averages with Godunov's REA scheme
        """

        def step(u0, t0, dt):
            return self.sweep_x(u0, dt)

        self.integrate(step=step, method_name=inspect.currentframe().f_code.co_name)
