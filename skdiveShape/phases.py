"""Bottom phase location, dive phase labelling, and bottom quantities

The bottom phase begins with the first element reaching the ledge depth,
and ends with the last such element.  When no element reaches the ledge,
the bottom phase reduces to the instant of maximum depth.  Descent and
ascent phases are all points before and after the bottom phase,
respectively.

"""

import logging
import numpy as np
import pandas as pd
from skdiveShape.records import BottomPhase, PHASES

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

__all__ = ["locate_bottom_phase", "label_phases", "get_bottom_wiggles",
           "describe_bottom_phase"]


def locate_bottom_phase(dive):
    """Return a copy of `dive` with the bottom phase bounds

    Bounds are the earliest start and latest end of elements whose maximum
    depth reaches the ledge depth, irrespective of element order.

    Parameters
    ----------
    dive : Dive
        Dive with elements identified.

    Returns
    -------
    out : Dive

    """
    candidates = [x for x in dive.elements
                  if x.max_depth >= dive.ledge_depth]
    if candidates:
        start_time = min(x.start_time for x in candidates)
        end_time = max(x.end_time for x in candidates)
    else:
        start_time = end_time = dive.max_depth_time

    bottom = BottomPhase(start_time=start_time, end_time=end_time,
                         duration=end_time - start_time)
    return dive._replace(bottom_phase=bottom)


def label_phases(dive):
    """Return a copy of `dive` with the phase of each point

    Parameters
    ----------
    dive : Dive
        Dive with bottom phase bounds.

    Returns
    -------
    out : Dive
        The points gain a categorical `phase` column.

    """
    times = dive.points["time"].to_numpy()
    bottom = dive.bottom_phase
    labels = np.select([times < bottom.start_time,
                        times > bottom.end_time],
                       [PHASES[0], PHASES[2]], default=PHASES[1])
    phase = pd.Categorical(labels, categories=PHASES)
    return dive._replace(points=dive.points.assign(phase=phase))


def get_bottom_wiggles(dive):
    """Wiggles lying entirely within the bottom phase

    Parameters
    ----------
    dive : Dive

    Returns
    -------
    out : list

    """
    bottom = dive.bottom_phase
    return [x for x in dive.elements
            if (x.type == "wiggle" and
                x.start_time >= bottom.start_time and
                x.end_time <= bottom.end_time)]


def describe_bottom_phase(dive):
    """Return a copy of `dive` with bottom depth range and wiggle count

    Parameters
    ----------
    dive : Dive
        Dive with labelled phases.

    Returns
    -------
    out : Dive

    """
    points = dive.points
    bottom_depths = points.loc[points["phase"] == PHASES[1], "depth"]
    depth_range = float(bottom_depths.max() - bottom_depths.min())
    count_wiggles = len(get_bottom_wiggles(dive))
    bottom = dive.bottom_phase._replace(depth_range=depth_range,
                                        count_wiggles=count_wiggles)
    return dive._replace(bottom_phase=bottom)
