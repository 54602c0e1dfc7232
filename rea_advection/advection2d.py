# Godunov REA solver in two dimensions with dimensional splitting
import inspect
import numpy as np
from rea_advection.advection import AdvectionSolver
from rea_advection.analytical import advection2d_solution
from rea_advection.errors import ConfigurationError
from rea_advection.initial_conditions import generate_ic
from rea_advection.parameters import SimulationParameters2D
from rea_advection.quadrature import EPSABS, EPSREL, cell_average_2d
from rea_advection.rea import rea_step
from rea_advection.schemes import compute_slopes
from rea_advection.utils import as_cell_averages


class AdvectionSolver2D(AdvectionSolver):
    """
    each time step sweeps every row along x, then every column of the x updated
    solution along y. every sweep is the 1d REA update
    args:
        params:         SimulationParameters2D
        u0:             initial profile f(x, y), preset name for generate_ic, or cell
                        averages (ny, nx)
        progress_bar:   whether to print progress bars for the cell averages and
                        the time loop
        epsabs:         absolute tolerance of the cell average quadrature
        epsrel:         relative tolerance of the cell average quadrature
    returns:
        self.snapshots: [{t: t0, u: u0}, ...], u0 of shape (ny, nx)
    """

    def __init__(
        self,
        params: SimulationParameters2D,
        u0="rectangular2d",
        progress_bar: bool = True,
        epsabs: float = EPSABS,
        epsrel: float = EPSREL,
    ):
        if not isinstance(params, SimulationParameters2D):
            raise ConfigurationError(
                f"Expected SimulationParameters2D, got {type(params).__name__}"
            )

        # spatial discretization
        self.x, self.y = params.x, params.y
        self.hx, self.hy = params.hx, params.hy
        self.nx, self.ny = params.nx, params.ny

        # advection speeds and CFL numbers of the sweeps
        self.a, self.b = params.adv_speed_x, params.adv_speed_y
        self.courant_x, self.courant_y = params.courant_x, params.courant_y

        # initial condition
        if isinstance(u0, str):
            u0 = generate_ic(u0, ndim=2)
        if callable(u0):
            self.profile = u0
            u0_arr = cell_average_2d(
                u0,
                self.x,
                self.y,
                self.hx,
                self.hy,
                epsabs=epsabs,
                epsrel=epsrel,
                progress_bar=progress_bar,
            )
        else:
            self.profile = None
            u0_arr = as_cell_averages(u0, (self.ny, self.nx))

        super().__init__(
            params,
            u0_arr,
            cell_volume=self.hx * self.hy,
            progress_bar=progress_bar,
        )

    def sweep_x(self, u: np.ndarray, dt: float) -> np.ndarray:
        """
        args:
            u:  cell averages (ny, nx)
            dt: time step
        returns:
            REA update of every row along x (ny, nx)
        """
        slopes = compute_slopes(self.scheme, u, self.hx)
        return rea_step(u, slopes, a=self.a, h=self.hx, dt=dt, courant=self.courant_x)

    def sweep_y(self, u: np.ndarray, dt: float) -> np.ndarray:
        """
        args:
            u:  cell averages (ny, nx)
            dt: time step
        returns:
            REA update of every column along y (ny, nx)
        """
        columns = u.T
        slopes = compute_slopes(self.scheme, columns, self.hy)
        unew = rea_step(
            columns, slopes, a=self.b, h=self.hy, dt=dt, courant=self.courant_y
        )
        return np.ascontiguousarray(unew.T)

    def exact(self, t: float) -> np.ndarray:
        self._require_profile()
        return advection2d_solution(
            self.x, self.y, t - self.t_init, self.a, self.b, self.profile
        )

    def rea(self):
        """
        march the cell averages with Godunov's REA scheme and dimensional splitting
        """

        def step(u0, t0, dt):
            # all rows are swept before any column
            return self.sweep_y(self.sweep_x(u0, dt), dt)

        self.integrate(step=step, method_name=inspect.currentframe().f_code.co_name)
