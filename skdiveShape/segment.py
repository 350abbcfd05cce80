"""Dive segmentation and description

Samples are split into alternating surface and submerged periods, using
a minimum depth threshold.  Surface periods are numbered with negative
integers and submerged periods (dives) with positive integers, in
chronological order: surface period ``-n`` is followed by dive ``n``.

.. autosummary::

   identify_dives
   split_dives
   describe_dive

"""

import logging
import numpy as np
from skdiveShape.helpers import rle_key, as_samples
from skdiveShape.records import Dive

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

__all__ = ["identify_dives", "split_dives", "describe_dive"]


def identify_dives(samples, min_depth=1):
    """Label samples with surface period and dive indices

    Leading samples at or below `min_depth` are dropped, since the record
    must begin at the surface for the first dive to be complete.

    Parameters
    ----------
    samples : pandas.DataFrame or iterable of mappings
        Time-ordered samples with `time` and `depth`.
    min_depth : float, optional
        Depth threshold; samples shallower than this are at the surface.

    Returns
    -------
    out : pandas.DataFrame
        Remaining samples with an additional integer column `dive_id`.

    Examples
    --------
    >>> samples = [dict(time=t, depth=d)
    ...            for t, d in enumerate([3, 0, 1, 2, 1, 0])]
    >>> identify_dives(samples)["dive_id"].tolist()
    [-1, 1, 1, 1, -2]

    """
    samples_df = as_samples(samples)
    submerged = samples_df["depth"] >= min_depth

    if samples_df.empty:
        logger.warning("No samples found")
        return samples_df.assign(dive_id=np.array([], dtype=int))

    if submerged.all():
        logger.warning("No surface samples shallower than {} found"
                       .format(min_depth))
        return samples_df.iloc[0:0].assign(dive_id=np.array([], dtype=int))

    first_surface = int(np.argmax(~submerged.to_numpy()))
    trimmed = samples_df.iloc[first_surface:].reset_index(drop=True)
    # Runs alternate starting with a surface run, so odd runs are surface
    run_id = rle_key(submerged.iloc[first_surface:]
                     .reset_index(drop=True)).to_numpy()
    dive_id = np.where(run_id % 2 == 1, -((run_id + 1) // 2), run_id // 2)

    logger.info("Finished detecting dives")
    return trimmed.assign(dive_id=dive_id.astype(int))


def split_dives(labelled):
    """Group labelled samples into surface periods and dives

    Parameters
    ----------
    labelled : pandas.DataFrame
        Output from :func:`identify_dives`.

    Returns
    -------
    out : list
        List of ``(dive_id, points)`` tuples in chronological order, where
        `points` is a DataFrame with `time` and `depth` columns.

    """
    grouped = labelled.groupby("dive_id", sort=False)
    return [(int(name), grp.drop(columns="dive_id").reset_index(drop=True))
            for name, grp in grouped]


def describe_dive(index, points, ledge_fraction=0.75):
    """Build a dive record with its descriptive statistics

    Parameters
    ----------
    index : int
        Dive number.
    points : pandas.DataFrame
        The dive's samples, with `time` and `depth` columns.
    ledge_fraction : float, optional
        Fraction of maximum depth defining the ledge depth.

    Returns
    -------
    out : Dive

    """
    times = points["time"].to_numpy()
    depths = points["depth"].to_numpy()
    # argmax returns the first occurrence, i.e. earliest time
    imax = int(np.argmax(depths))
    max_depth = float(depths[imax])

    return Dive(index=index,
                start_time=float(times[0]),
                end_time=float(times[-1]),
                duration=float(times[-1] - times[0]),
                max_depth=max_depth,
                max_depth_time=float(times[imax]),
                ledge_depth=max_depth * ledge_fraction,
                points=points.reset_index(drop=True))
