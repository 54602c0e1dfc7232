import pytest
import numpy as np
import rea_advection.integrate as integrate
from rea_advection.errors import ConfigurationError, IntegrationError
from rea_advection.integrate import Integrator


class Doubling(Integrator):
    """
    u1 = 2 u0, counting cleanups and teardowns
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.cleanups = 0
        self.teardowns = 0

    def step_cleanup(self):
        self.cleanups += 1

    def post_integrate(self):
        self.teardowns += 1

    def double(self):
        def step(u0, t0, dt):
            return 2 * u0

        self.integrate(step=step, method_name="double")


@pytest.mark.parametrize("nt", [1, 2, 5, 10])
def test_number_of_steps(nt):
    solver = Doubling(np.ones(3), dt=0.5, nt=nt, t0=1.0)
    solver.double()
    assert solver.step_count == nt - 1
    assert len(solver.snapshots) == nt - 1
    assert solver.cleanups == nt - 1
    assert solver.u0 == pytest.approx(2 ** (nt - 1))
    assert solver.t0 == pytest.approx(1.0 + 0.5 * (nt - 1))


def test_snapshots_precede_each_step():
    solver = Doubling(np.ones(2), dt=0.1, nt=4)
    solver.double()
    times = [snapshot["t"] for snapshot in solver.snapshots]
    values = [snapshot["u"][0] for snapshot in solver.snapshots]
    assert times == pytest.approx([0.0, 0.1, 0.2])
    assert values == [1, 2, 4]


def test_time_levels_do_not_accumulate_round_off():
    solver = Doubling(np.zeros(1), dt=0.1, nt=1001)
    solver.double()
    assert solver.t0 == 0.1 * 1000


def test_completed_integration(capsys):
    solver = Doubling(np.ones(2), dt=0.1, nt=3)
    solver.double()
    capsys.readouterr()
    solver.double()
    assert "already computed" in capsys.readouterr().out
    assert solver.step_count == 2
    assert solver.teardowns == 1


def test_progress_bar():
    solver = Doubling(np.ones(2), dt=0.1, nt=6, progress_bar=True)
    solver.double()
    assert solver.step_count == 5
    assert solver.solution_time >= 0


def test_invalid_number_of_time_levels():
    with pytest.raises(ConfigurationError):
        Integrator(np.ones(2), dt=0.1, nt=0)


class RecordingBar:
    """
    stands in for tqdm, remembers whether it was closed
    """

    instances = []

    def __init__(self, *args, **kwargs):
        self.n = 0
        self.closed = False
        RecordingBar.instances.append(self)

    def refresh(self):
        pass

    def close(self):
        self.closed = True


def test_progress_bar_is_closed_when_a_step_fails(monkeypatch):
    monkeypatch.setattr(integrate, "tqdm", RecordingBar)
    RecordingBar.instances.clear()
    solver = Doubling(np.ones(2), dt=0.1, nt=6, progress_bar=True)

    def failing_step(u0, t0, dt):
        if solver.step_count == 2:
            raise IntegrationError("step failed")
        return 2 * u0

    with pytest.raises(IntegrationError):
        solver.integrate(step=failing_step, method_name="failing")
    assert len(RecordingBar.instances) == 1
    assert RecordingBar.instances[0].closed
    assert solver.step_count == 2
    assert len(solver.snapshots) == 3
    assert solver.teardowns == 0
