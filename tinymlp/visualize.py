import matplotlib.pyplot as plt
import numpy as np


def plot_cost_history(
        cost_history, max_error=None, ax=None,
        cost_kwargs=dict(c='b', ls='-', lw=2),
        threshold_kwargs=dict(c='r', ls='--', lw=1)):
    """ Plot the per-epoch training cost on a logarithmic axis

    Parameters
    ----------
    cost_history: sequence of float
        The cost recorded after each epoch, e.g., `FitResult.cost_history`.

    max_error: float, default=None
        If given, the convergence threshold is drawn as a horizontal line.

    ax: matplotlib.axes.Axes, default=None
        The axes to draw on. A new figure is created if None.

    cost_kwargs: args
        Any keyword arguments that can be passed to `matplotlib.pyplot.plot`.

    threshold_kwargs: args
        Any keyword arguments that can be passed to
        `matplotlib.axes.Axes.axhline`.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    cost_history = np.asarray(cost_history, dtype=float)

    if cost_history.ndim != 1 or cost_history.size == 0:
        raise ValueError("`cost_history` must be a non-empty 1d sequence.")

    if ax is None:
        fig = plt.figure(figsize=(6, 4))
        ax = fig.add_subplot(1, 1, 1)

    epochs = np.arange(cost_history.size) + 1
    ax.plot(epochs, cost_history, label='cost', **cost_kwargs)

    if max_error is not None and max_error > 0:
        ax.axhline(max_error, label='max error', **threshold_kwargs)

    ax.set_yscale('log')
    ax.set_xlabel('Epoch')
    ax.set_ylabel('RMS error')
    ax.legend()

    return ax
