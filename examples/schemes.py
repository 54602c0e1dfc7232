from rea_advection import AdvectionSolver1D, SimulationParameters1D
from rea_advection.utils import total_variation

shared_config = dict(
    t_init=0,
    t_final=50 / 0.75,
    t_step=0.1,
    x_init=0,
    x_final=50,
    adv_speed=0.75,
    courant=0.7,
)

scheme_configs = [
    dict(),
    dict(slope="upwind"),
    dict(slope="downwind"),
    dict(slope="centered"),
    dict(limiter="minmod"),
    dict(limiter="superbee"),
    dict(limiter="mc"),
]

for scheme_config in scheme_configs:
    params = SimulationParameters1D(**shared_config, **scheme_config)
    solution = AdvectionSolver1D(params, u0="rectangular", progress_bar=False)
    solution.rea()
    print(params.scheme.title)
    print(f"l1 error = {solution.error(norm='l1')}")
    print(f"total variation = {total_variation(solution.u_final)}")
    print()
