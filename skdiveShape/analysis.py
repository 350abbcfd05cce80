"""Dive shape analysis of time-depth samples

The analysis runs as a sequence of steps, each returning an extended copy
of the records produced by the previous one:

1. Identification of dives (:func:`~skdiveShape.segment.identify_dives`)
2. Description of dives (:func:`~skdiveShape.segment.describe_dive`)
3. Vertical velocity (:func:`~skdiveShape.velocity.dive_vert_vel`)
4. Identification of wiggles and steps
   (:func:`~skdiveShape.elements.identify_elements`)
5. Bottom phase location and phase labelling
   (:func:`~skdiveShape.phases.locate_bottom_phase`,
   :func:`~skdiveShape.phases.label_phases`)
6. Description of the bottom phase
   (:func:`~skdiveShape.phases.describe_bottom_phase`)
7. Shape indices (:func:`~skdiveShape.shape.describe_dive_shape`)
8. Shape category (:func:`~skdiveShape.shape.categorize_dive_shape`)

Dives are independent of each other from step 2 onwards, so they can be
analyzed concurrently.

"""

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
import pandas as pd
from skdiveShape.segment import identify_dives, split_dives, describe_dive
from skdiveShape.velocity import dive_vert_vel
from skdiveShape.elements import identify_elements
from skdiveShape.phases import (locate_bottom_phase, label_phases,
                                describe_bottom_phase)
from skdiveShape.shape import describe_dive_shape, categorize_dive_shape
from skdiveShape.shapeconfig import ShapeParams
from skdiveShape.records import Element, SHAPES

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

__all__ = ["analyze_dive", "analyze_dives", "dive_stats",
           "elements_table"]

_DIVE_COLS = ["start_time", "end_time", "duration", "max_depth",
              "max_depth_time", "ledge_depth"]
_BOTTOM_COLS = ["start_time", "end_time", "duration", "depth_range",
                "count_wiggles", "broadness_idx", "depth_range_idx",
                "symmetry_idx", "raggedness_idx"]


def analyze_dive(dive, params):
    """Run the per-dive analysis steps on a described dive

    Parameters
    ----------
    dive : Dive
        Dive record from :func:`~skdiveShape.segment.describe_dive`.
    params : ShapeParams

    Returns
    -------
    out : Dive
        Fully populated dive record.

    """
    dive = dive_vert_vel(dive)
    dive = identify_elements(dive, min_step_points=params.min_step_points,
                             max_step_vel=params.max_step_vel)
    dive = locate_bottom_phase(dive)
    dive = label_phases(dive)
    dive = describe_bottom_phase(dive)
    dive = describe_dive_shape(dive)
    return categorize_dive_shape(dive, broadness_thr=params.broadness_thr)


def analyze_dives(samples, params=None, n_jobs=None):
    """Identify dives and categorize their shapes

    Parameters
    ----------
    samples : pandas.DataFrame or iterable of mappings
        Time-ordered samples with `time` and `depth`.
    params : ShapeParams, optional
        Analysis thresholds.  Defaults are used if not provided.
    n_jobs : int, optional
        Number of worker threads analyzing dives concurrently.  Dives are
        analyzed sequentially if not provided.

    Returns
    -------
    out : tuple
        :class:`~skdiveShape.records.Dive` records in ascending dive
        number.  Surface periods are not included.

    Examples
    --------
    >>> samples = [dict(time=t, depth=d)
    ...            for t, d in enumerate([0, 1, 2, 3, 2, 1, 0])]
    >>> dives = analyze_dives(samples)
    >>> dives[0].index, dives[0].shape
    (1, 'V')

    """
    if params is None:
        params = ShapeParams()

    labelled = identify_dives(samples, min_depth=params.min_depth)
    described = [describe_dive(idx, points,
                               ledge_fraction=params.ledge_fraction)
                 for idx, points in split_dives(labelled) if idx > 0]
    if not described:
        logger.warning("No dives found")
        return ()

    analyze = partial(analyze_dive, params=params)
    if n_jobs is None or n_jobs <= 1:
        dives = [analyze(x) for x in described]
    else:
        with ThreadPoolExecutor(max_workers=n_jobs) as executor:
            dives = list(executor.map(analyze, described))

    logger.info("Finished analyzing {} dives".format(len(dives)))
    return tuple(sorted(dives, key=lambda x: x.index))


def dive_stats(dives):
    """Summarize dive records in a table

    Parameters
    ----------
    dives : iterable
        :class:`~skdiveShape.records.Dive` records.

    Returns
    -------
    out : pandas.DataFrame
        DataFrame indexed by `dive_id`, with dive statistics, bottom phase
        statistics (prefixed with "bottom_"), shape indices and a
        categorical `shape` column.

    """
    dives = list(dives)
    rows = []
    for dive in dives:
        row = {col: getattr(dive, col) for col in _DIVE_COLS}
        bottom = dive.bottom_phase._asdict()
        for col in _BOTTOM_COLS:
            if col.endswith("_idx"):
                row[col] = bottom[col]
            else:
                row["bottom_" + col] = bottom[col]
        row["shape"] = dive.shape
        rows.append(row)

    columns = (_DIVE_COLS +
               [x if x.endswith("_idx") else "bottom_" + x
                for x in _BOTTOM_COLS] + ["shape"])
    stats = pd.DataFrame(rows, columns=columns,
                         index=pd.Index([x.index for x in dives],
                                        name="dive_id", dtype=int))
    stats["shape"] = pd.Categorical(stats["shape"], categories=SHAPES)
    return stats


def elements_table(dive):
    """Tabulate the elements of a dive

    Parameters
    ----------
    dive : Dive

    Returns
    -------
    out : pandas.DataFrame
        One row per element, sorted by start time.

    """
    elements = pd.DataFrame(list(dive.elements), columns=Element._fields)
    return (elements.sort_values("start_time", kind="stable")
            .reset_index(drop=True))
