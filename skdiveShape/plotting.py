"""Plotting module

These are considered low-level functions that do not handle the
higher-level classes of the package.

"""

import pandas as pd
import matplotlib.pyplot as plt

_ELEMENT_COLORS = {"wiggle": "C3", "step": "C4"}


def _plot_phase_cat(points, phase_cat, ax, legend=True):
    """Scatter plot and legend of depth coloured by categories"""
    cats = phase_cat.cat.categories
    cat_codes = phase_cat.cat.codes
    scatter = ax.scatter(points["time"], points["depth"], s=12, marker="o",
                         c=cat_codes, zorder=3)
    if legend:
        handles, _ = scatter.legend_elements()
        # legend_elements only reports categories present in the data
        present = [cats[i] for i in sorted(cat_codes.unique())]
        ax.legend(handles, present, loc="lower right",
                  ncol=len(present))


def _plot_elements(elements, ax):
    """Shade a vertical span for each element"""
    for _, row in elements.iterrows():
        ax.axvspan(row["start_time"], row["end_time"],
                   facecolor=_ELEMENT_COLORS.get(row["type"], "gray"),
                   edgecolor=None, alpha=0.2)


def plot_dive(points, elements=None, ledge_depth=None, bottom=None,
              xlab="time [s]", ylab_depth="depth [m]", leg_title=None,
              **kwargs):
    """Plot a dive profile with its phases and elements

    Parameters
    ----------
    points : pandas.DataFrame
        Dive points with `time` and `depth` columns, and optionally a
        categorical `phase` column.
    elements : pandas.DataFrame, optional
        DataFrame with columns `type`, `start_time`, and `end_time`, with
        one row per element to shade.
    ledge_depth : float, optional
        Depth to draw as a horizontal line.
    bottom : 2-tuple/list, optional
        Beginning and ending times of the bottom phase, drawn as vertical
        lines.
    xlab : str, optional
        Label for ``x`` axis.
    ylab_depth : str, optional
        Label for ``y`` axis for depth.
    leg_title : str, optional
        Title for the plot legend (e.g. dive number being plotted).
    **kwargs : optional keyword arguments
        Passed to `matplotlib.pyplot.subplots`.

    Returns
    -------
    tuple
        Pyplot Figure and Axes instances.

    """
    fig, ax = plt.subplots(1, 1, **kwargs)
    ax.plot(points["time"], points["depth"], linewidth=0.7, color="k")
    ax.axhline(0, linestyle="--", linewidth=0.75, color="k")
    ax.set_xlabel(xlab)
    ax.set_ylabel(ylab_depth)

    if "phase" in points.columns:
        phase_cat = pd.Series(points["phase"]).astype("category")
        _plot_phase_cat(points, phase_cat, ax)
    if elements is not None and elements.shape[0] > 0:
        _plot_elements(elements, ax)
    if ledge_depth is not None:
        ax.axhline(ledge_depth, linestyle=":", linewidth=0.75, color="C1")
    if bottom is not None:
        for btime in bottom:
            ax.axvline(btime, linestyle="--", linewidth=0.5, color="k")
    if leg_title is not None:
        ax.set_title(leg_title)

    ax.invert_yaxis()
    fig.tight_layout()

    return(fig, ax)
