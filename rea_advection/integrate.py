import time
import numpy as np
from tqdm import tqdm
from rea_advection.errors import ConfigurationError


class Integrator:
    """
    for a system with a state vector u and a one step update u1 = step(u0), march u
    over nt uniformly spaced time levels, recording every level before it is replaced
    """

    def __init__(
        self,
        u0: np.ndarray,
        dt: float,
        nt: int,
        t0: float = 0.0,
        progress_bar: bool = False,
    ):
        """
        args:
            u0              np array, initial state
            dt              timestep
            nt              number of time levels, including t0
            t0              starting time
            progress_bar    whether to print a progress bar in the loop
        """
        if nt < 1:
            raise ConfigurationError(f"Number of time levels must be positive: {nt}")
        self.u0 = u0
        self.t_init = t0
        self.t0 = t0
        self.dt = dt
        self.nt = nt
        self.step_count = 0
        self.snapshots = []
        self.solution_time = 0.0

        # progress bar
        self.progress_bar = progress_bar
        if self.progress_bar:
            self.update_printout = self.update_progress_bar
        else:
            self.update_printout = lambda *args: None

    def snapshot(self):
        """
        datalogging of the current time level
        """
        self.snapshots.append({"t": self.t0, "u": self.u0})

    def step_cleanup(self):
        """
        runs after each update of self.t0
        """
        pass

    def pre_integrate(self, method_name: str) -> bool:
        """
        args:
            method_name name of integration method
        returns:
            bool    whether or not to proceed
        """
        if self.step_count >= self.nt - 1:
            print(f"{method_name}: all {self.nt} time levels already computed")
            return False
        return True

    def post_integrate(self):
        """
        teardown procedures
        """
        pass

    def integrate(self, step, method_name: str):
        """
        args:
            step            function to calculate u1 from (u0, t0, dt)
            method_name     name of integrating step
        overwrites:
            t0, u0, snapshots
        """
        if not self.pre_integrate(method_name=method_name):
            return

        # initialize progress bar
        progress_bar = None
        if self.progress_bar:
            bar_format = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}]"
            progress_bar = tqdm(
                total=self.nt - 1, initial=self.step_count, bar_format=bar_format
            )

        # time loop
        starting_time = time.time()
        try:
            while self.step_count < self.nt - 1:
                self.snapshot()
                u1 = step(u0=self.u0, t0=self.t0, dt=self.dt)
                self.u0 = u1
                self.step_count += 1
                self.t0 = self.t_init + self.step_count * self.dt
                self.step_cleanup()
                self.update_printout(progress_bar)
        finally:
            self.solution_time += time.time() - starting_time
            if self.progress_bar:
                progress_bar.close()
        self.post_integrate()

    def update_progress_bar(self, progress_bar):
        progress_bar.n = self.step_count
        progress_bar.refresh()
