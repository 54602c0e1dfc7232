"""
defines the AdvectionSolver base class, the bookkeeping shared by the 1D and 2D
Godunov REA solvers of
du/dt + a du/dx = 0               (1D)
or
du/dt + a du/dx + b du/dy = 0     (2D)
where u are cell volume averages on a periodic mesh
"""

import abc
import numpy as np
from rea_advection.errors import ConfigurationError
from rea_advection.integrate import Integrator
from rea_advection.utils import distinct_cells, mass


def norm_of(du: np.ndarray, norm: str, cell_volume: float) -> float:
    """
    args:
        du:             difference of two solutions, periodic images removed
        norm:           'l1', 'l2', or 'inf'
        cell_volume:    hx or hx * hy
    returns:
        norm of du
    """
    if norm == "l1":
        return np.sum(np.abs(du)) * cell_volume
    if norm == "l2":
        return np.sqrt(np.sum(np.power(du, 2)) * cell_volume)
    if norm == "inf":
        return np.max(np.abs(du))
    raise ConfigurationError(f"Invalid norm {norm!r}, expected 'l1', 'l2' or 'inf'")


class AdvectionSolver(Integrator):
    """
    args:
        params:         SimulationParameters1D or SimulationParameters2D
        u0:             initial cell averages
        cell_volume:    hx or hx * hy
        progress_bar:   whether to print a progress bar in the loop
    returns:
        self.snapshots: [{t: t0, u: u0}, ...], one per time level before the last
        self.u_final:   cell averages at the last time level
    """

    def __init__(
        self, params, u0: np.ndarray, cell_volume: float, progress_bar: bool = True
    ):
        self.params = params
        self.scheme = params.scheme
        self.cell_volume = cell_volume
        self.u_init = u0.copy()

        # initialize timeseries lists
        self.mass_history = [mass(u0, cell_volume)]
        self.min_history = [np.min(u0)]
        self.max_history = [np.max(u0)]

        super().__init__(
            u0=u0,
            dt=params.t_step,
            nt=params.nt,
            t0=params.t_init,
            progress_bar=progress_bar,
        )

    @property
    def t(self) -> np.ndarray:
        """
        times of the snapshots (# of snapshots,)
        """
        return np.array([snapshot["t"] for snapshot in self.snapshots])

    @property
    def u(self) -> np.ndarray:
        """
        stacked snapshots (# of snapshots, nx) or (# of snapshots, ny, nx)
        """
        if not self.snapshots:
            return np.empty((0,) + self.u0.shape)
        return np.array([snapshot["u"] for snapshot in self.snapshots])

    @property
    def u_final(self) -> np.ndarray:
        return self.u0

    @abc.abstractmethod
    def exact(self, t: float) -> np.ndarray:
        """
        analytical solution at time t on the mesh
        """
        pass

    def _require_profile(self):
        if self.profile is None:
            raise ConfigurationError(
                "The analytical solution needs an initial profile, the solver was "
                "initialized from cell averages"
            )

    def error(self, norm: str = "l1") -> float:
        """
        args:
            norm:   'l1', 'l2', or 'inf'
        returns:
            error of the current time level against the analytical solution
        """
        du = distinct_cells(self.u0 - self.exact(self.t0))
        return norm_of(du, norm, self.cell_volume)

    def periodic_error(self, norm: str = "l1") -> float:
        """
        args:
            norm:   'l1', 'l2', or 'inf'
        returns:
            difference between the current and the initial time level
        """
        du = distinct_cells(self.u0 - self.u_init)
        return norm_of(du, norm, self.cell_volume)

    def step_cleanup(self):
        self.mass_history.append(mass(self.u0, self.cell_volume))
        self.min_history.append(np.min(self.u0))
        self.max_history.append(np.max(self.u0))

    def post_integrate(self):
        drift = self.mass_history[-1] - self.mass_history[0]
        print(
            f"{self.scheme.title}: {self.step_count} steps up to t = {self.t0:.2f} in "
            f"{self.solution_time:.2f} s, mass drift {drift:.3e}"
        )
