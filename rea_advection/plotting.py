import numpy as np
import matplotlib.pyplot as plt
from matplotlib import animation
from rea_advection.errors import ConfigurationError

colors = {
    "blue": "#1f77b4",
    "red": "#d62728",
}


def _frame(solver, frame: int):
    return solver.t[frame], solver.u[frame]


def _finish(fig, show: bool, savepath: str):
    if savepath is not None:
        fig.savefig(savepath, dpi=300)
    if show:
        plt.show()
    else:
        plt.close(fig)


def lineplot(
    solver,
    frame: int = -1,
    ylim: tuple = None,
    show: bool = True,
    savepath: str = None,
):
    """
    numerical vs analytical solution of a 1d solver at one snapshot
    args:
        solver:     AdvectionSolver1D after integration
        frame:      snapshot index
        ylim:       (lower, upper) or None
        show:       whether to show the figure
        savepath:   where to save the figure, if not None
    """
    t, u = _frame(solver, frame)
    fig = plt.figure(figsize=(7, 5))
    if solver.profile is not None:
        plt.plot(solver.x, solver.exact(t), color=colors["blue"], label="analytical")
    plt.plot(solver.x, u, color=colors["red"], label="numerical")
    plt.xlabel("x")
    plt.ylabel("q(x, t)")
    if ylim is not None:
        plt.ylim(*ylim)
    plt.title(f"{solver.scheme.title}  t = {t:.2f} s")
    plt.legend(loc="upper right")
    _finish(fig, show, savepath)
    return fig


def heatmap(
    solver,
    frame: int = -1,
    clim: tuple = None,
    show: bool = True,
    savepath: str = None,
):
    """
    cell averages of a 2d solver at one snapshot
    args:
        solver:     AdvectionSolver2D after integration
        frame:      snapshot index
        clim:       (lower, upper) of the colormap, solution range if None
        show:       whether to show the figure
        savepath:   where to save the figure, if not None
    """
    t, u = _frame(solver, frame)
    clim = (np.min(solver.u), np.max(solver.u)) if clim is None else clim
    bounds = [solver.x[0], solver.x[-1], solver.y[0], solver.y[-1]]
    fig = plt.figure(figsize=(7, 5))
    plt.imshow(
        u, extent=bounds, origin="lower", cmap="turbo", vmin=clim[0], vmax=clim[1]
    )
    plt.colorbar()
    plt.xlabel("x")
    plt.ylabel("y")
    plt.title(f"{solver.scheme.title}  t = {t:.2f} s")
    _finish(fig, show, savepath)
    return fig


def animate(solver, savepath: str, every: int = 5, fps: int = 20):
    """
    write the snapshots of a 1d or 2d solver to an animated gif
    args:
        solver:     AdvectionSolver1D or AdvectionSolver2D after integration
        savepath:   path of the gif
        every:      plot every nth snapshot
        fps:        frames per second
    returns:
        savepath
    """
    if not solver.snapshots:
        raise ConfigurationError("No snapshots to animate, run the solver first")
    frames = range(0, len(solver.snapshots), every)
    fig, ax = plt.subplots(figsize=(7, 5))
    u = solver.u
    if u.ndim == 2:
        if solver.profile is not None:
            (exact_line,) = ax.plot(
                solver.x, solver.exact(solver.t[0]), color=colors["blue"]
            )
            exact_line.set_label("analytical")
        (numerical_line,) = ax.plot(solver.x, u[0], color=colors["red"])
        numerical_line.set_label("numerical")
        margin = 0.1 * (np.max(u) - np.min(u) + 1e-12)
        ax.set_ylim(np.min(u) - margin, np.max(u) + margin)
        ax.set_xlabel("x")
        ax.set_ylabel("q(x, t)")
        ax.legend(loc="upper right")

        def update(n):
            if solver.profile is not None:
                exact_line.set_ydata(solver.exact(solver.t[n]))
            numerical_line.set_ydata(u[n])
            ax.set_title(f"{solver.scheme.title}  t = {solver.t[n]:.2f} s")

    else:
        bounds = [solver.x[0], solver.x[-1], solver.y[0], solver.y[-1]]
        image = ax.imshow(
            u[0],
            extent=bounds,
            origin="lower",
            cmap="turbo",
            vmin=np.min(u),
            vmax=np.max(u),
        )
        fig.colorbar(image, ax=ax)
        ax.set_xlabel("x")
        ax.set_ylabel("y")

        def update(n):
            image.set_data(u[n])
            ax.set_title(f"{solver.scheme.title}  t = {solver.t[n]:.2f} s")

    anim = animation.FuncAnimation(fig, update, frames=frames)
    anim.save(savepath, writer=animation.PillowWriter(fps=fps))
    plt.close(fig)
    return savepath
