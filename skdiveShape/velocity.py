"""Vertical velocity of dive points

"""

import logging
import numpy as np

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

__all__ = ["DegenerateTimestampError", "vert_vel", "dive_vert_vel"]


class DegenerateTimestampError(ValueError):
    """Consecutive samples share the same timestamp"""


def vert_vel(points):
    """Calculate vertical velocity as forward slope of depth over time

    Parameters
    ----------
    points : pandas.DataFrame
        Time-ordered points with `time` and `depth` columns.

    Returns
    -------
    out : pandas.DataFrame
        Copy of `points` with additional column `vert_vel`.  The last point
        has no successor, so its velocity is zero.

    Raises
    ------
    DegenerateTimestampError
        If two consecutive points have the same time.

    """
    times = points["time"].to_numpy(dtype=float)
    depths = points["depth"].to_numpy(dtype=float)
    dtimes = np.diff(times)
    degenerate = dtimes == 0
    if degenerate.any():
        msg = ("Consecutive samples share timestamps: {}"
               .format(times[:-1][degenerate].tolist()))
        logger.error(msg)
        raise DegenerateTimestampError(msg)

    vvel = np.append(np.diff(depths) / dtimes, 0.0)
    return points.assign(vert_vel=vvel)


def dive_vert_vel(dive):
    """Return a copy of `dive` with vertical velocity in its points

    Parameters
    ----------
    dive : Dive

    Returns
    -------
    out : Dive

    """
    return dive._replace(points=vert_vel(dive.points))
