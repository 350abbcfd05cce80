r"""Dive shape indices and categories

Four indices describe the bottom phase of a dive:

broadness index
    :math:`bottom\ duration / dive\ duration`
depth range index
    :math:`bottom\ depth\ range / max\ depth`
symmetry index
    :math:`(max\ depth\ time - bottom\ start) / bottom\ duration`
raggedness index
    Sum of depth ranges of the wiggles in the bottom phase.

Dives are then categorized into the first matching shape:

1. ``V``: broadness index below a threshold.
2. ``u``: one wiggle in the bottom phase.
3. ``U``: two or more wiggles in the bottom phase.
4. ``W``: a bottom phase wiggle shallower than the ledge depth.
5. ``undefined``: none of the above.

"""

import logging
from skdiveShape.phases import get_bottom_wiggles

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

__all__ = ["describe_dive_shape", "classify_shape",
           "categorize_dive_shape"]


def describe_dive_shape(dive):
    """Return a copy of `dive` with bottom phase shape indices

    Indices with a zero denominator are set to zero.

    Parameters
    ----------
    dive : Dive
        Dive with a quantified bottom phase.

    Returns
    -------
    out : Dive

    """
    bottom = dive.bottom_phase

    if dive.duration > 0:
        broadness_idx = bottom.duration / dive.duration
    else:
        broadness_idx = 0.0

    if dive.max_depth > 0:
        depth_range_idx = bottom.depth_range / dive.max_depth
    else:
        depth_range_idx = 0.0

    if bottom.duration > 0:
        symmetry_idx = ((dive.max_depth_time - bottom.start_time) /
                        bottom.duration)
    else:
        symmetry_idx = 0.0

    raggedness_idx = float(sum(x.depth_range
                               for x in get_bottom_wiggles(dive)))

    bottom = bottom._replace(broadness_idx=broadness_idx,
                             depth_range_idx=depth_range_idx,
                             symmetry_idx=symmetry_idx,
                             raggedness_idx=raggedness_idx)
    return dive._replace(bottom_phase=bottom)


def classify_shape(broadness_idx, bottom_wiggles, ledge_depth,
                   broadness_thr=0.015):
    """Categorize a dive shape

    Rules are evaluated in priority order, and the first match wins.

    Parameters
    ----------
    broadness_idx : float
    bottom_wiggles : list
        Wiggle elements in the bottom phase.
    ledge_depth : float
    broadness_thr : float, optional
        Broadness index below which a dive is ``V``-shaped.

    Returns
    -------
    out : str

    Examples
    --------
    >>> classify_shape(0.01, [], 2.25)
    'V'
    >>> classify_shape(0.5, [], 2.25)
    'undefined'

    """
    nwiggles = len(bottom_wiggles)
    if broadness_idx < broadness_thr:
        return "V"
    elif nwiggles == 1:
        return "u"
    elif nwiggles >= 2:
        return "U"
    elif any(x.max_depth < ledge_depth for x in bottom_wiggles):
        return "W"
    return "undefined"


def categorize_dive_shape(dive, broadness_thr=0.015):
    """Return a copy of `dive` with its shape category

    Parameters
    ----------
    dive : Dive
        Dive with shape indices.
    broadness_thr : float, optional
        Passed to :func:`classify_shape`.

    Returns
    -------
    out : Dive

    """
    shape = classify_shape(dive.bottom_phase.broadness_idx,
                           get_bottom_wiggles(dive), dive.ledge_depth,
                           broadness_thr=broadness_thr)
    return dive._replace(shape=shape)
