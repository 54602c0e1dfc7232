from rea_advection import AdvectionSolver1D, SimulationParameters1D
from rea_advection.initial_conditions import generate_ic
import rea_advection.plotting as plotting

profile_config = dict(x0=15, width=5, height=5)

simulation_config = {
    "t_init": 0,
    "t_final": 100,
    "t_step": 0.1,
    "x_init": 0,
    "x_final": 50,
    "adv_speed": 0.75,
    "CFL_number": 0.7,
    "Limiter": "superbee",
    "Slope": False,
}

params = SimulationParameters1D.from_dict(simulation_config)
solver = AdvectionSolver1D(params, u0=generate_ic("rectangular", **profile_config))
solver.rea()

print(f"l1 error against the analytical solution = {solver.error('l1')}")
plotting.lineplot(solver, ylim=(-1, 6))
plotting.animate(solver, savepath="advection1d.gif")
