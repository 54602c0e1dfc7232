from rea_advection import AdvectionSolver2D, SimulationParameters2D
from rea_advection.initial_conditions import generate_ic
import rea_advection.plotting as plotting

profile_config = dict(q0=(0, 0), widths=(4, 4), height=4)

simulation_config = {
    "t_init": 0,
    "t_final": 20,
    "t_step": 0.1,
    "x_init": -10,
    "x_final": 10,
    "y_init": -10,
    "y_final": 10,
    "adv_speed_x": 0.2,
    "adv_speed_y": 0.5,
    "CFL_number": 0.7,
    "Limiter": False,
    "Slope": "centered",
}

# the cell averages of the initial profile may take a minute
params = SimulationParameters2D.from_dict(simulation_config)
solver = AdvectionSolver2D(params, u0=generate_ic("rectangular2d", **profile_config))
solver.rea()

plotting.heatmap(solver, clim=(0, 4))
plotting.animate(solver, savepath="advection2d.gif")
