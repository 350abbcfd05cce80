"""Detection of dive elements from vertical velocity

Two kinds of elements are recognized:

wiggle
    A local reversal in vertical motion, i.e. three consecutive runs of
    vertical velocity with alternating sign.  Both dips (descending,
    ascending, descending) and peaks are captured.
step
    A sustained period of slow downward motion, with vertical velocity
    between zero and a ceiling for a minimum number of points.

.. autosummary::

   find_wiggles
   find_steps
   identify_elements

"""

import logging
import pandas as pd
from skdiveShape.helpers import rle_key, extract_element

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

__all__ = ["find_wiggles", "find_steps", "identify_elements"]

# Window of sign runs making up a wiggle, and stride between windows
_WIGGLE_RUNS = 3
_WIGGLE_STRIDE = 2


def _sign_runs(points):
    """List maximal runs of constant vertical velocity sign

    Points with zero velocity are ignored.

    """
    moving = points[points["vert_vel"] != 0]
    run_id = rle_key(moving["vert_vel"] > 0)
    return [grp for _, grp in moving.groupby(run_id, sort=True)]


def find_wiggles(points):
    """Find all wiggles in a dive

    The first run of constant velocity sign is discarded, since it lacks
    the reversal preceding it.  Windows of three runs, overlapping by one
    run, are taken from the rest.  Each wiggle comprises all points in the
    first two runs and the first point of the third.

    Parameters
    ----------
    points : pandas.DataFrame
        Dive points with `time`, `depth`, and `vert_vel` columns.

    Returns
    -------
    out : list
        List of :class:`~skdiveShape.records.Element` in chronological
        order.

    Examples
    --------
    >>> points = pd.DataFrame({"time": [0, 1, 2, 3, 4],
    ...                        "depth": [3, 2, 3, 2, 3],
    ...                        "vert_vel": [-1, 1, -1, 1, 0]})
    >>> [(x.start_time, x.end_time) for x in find_wiggles(points)]
    [(1.0, 3.0)]

    """
    runs = _sign_runs(points)[1:]
    wiggles = []
    for i in range(0, len(runs) - _WIGGLE_RUNS + 1, _WIGGLE_STRIDE):
        first, second, third = runs[i:i + _WIGGLE_RUNS]
        wpoints = pd.concat((first, second, third.iloc[:1]))
        wiggles.append(extract_element("wiggle", wpoints))

    return wiggles


def find_steps(points, min_step_points=5, max_step_vel=0.35):
    """Find all steps in a dive

    Parameters
    ----------
    points : pandas.DataFrame
        Dive points with `time`, `depth`, and `vert_vel` columns.
    min_step_points : int, optional
        Minimum number of consecutive points in a step.
    max_step_vel : float, optional
        Vertical velocity ceiling (exclusive) for step points.

    Returns
    -------
    out : list
        List of :class:`~skdiveShape.records.Element` in chronological
        order.

    """
    vvel = points["vert_vel"]
    is_step = (vvel > 0) & (vvel < max_step_vel)
    run_id = rle_key(is_step)
    steps = []
    for _, grp in points.groupby(run_id, sort=True):
        if is_step.loc[grp.index[0]] and grp.shape[0] >= min_step_points:
            steps.append(extract_element("step", grp))

    return steps


def identify_elements(dive, min_step_points=5, max_step_vel=0.35):
    """Return a copy of `dive` with its wiggles and steps

    Parameters
    ----------
    dive : Dive
        Dive with vertical velocity in its points.
    min_step_points : int, optional
        Passed to :func:`find_steps`.
    max_step_vel : float, optional
        Passed to :func:`find_steps`.

    Returns
    -------
    out : Dive

    """
    wiggles = find_wiggles(dive.points)
    steps = find_steps(dive.points, min_step_points=min_step_points,
                       max_step_vel=max_step_vel)
    logger.debug("Dive {}: {} wiggles, {} steps"
                 .format(dive.index, len(wiggles), len(steps)))
    return dive._replace(elements=tuple(wiggles + steps))
