"""Utilities to help with simple and repetitive tasks

"""

import logging
import numpy as np
import pandas as pd
from skdiveShape.records import Element

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

__all__ = ["rle_key", "as_samples", "extract_element", "to_epoch_seconds"]

_SAMPLE_COLS = ["time", "depth"]


def rle_key(x):
    """Emulate a run length encoder

    Assigns a numerical sequence identifying run lengths in input Series.

    Parameters
    ----------
    x : pandas.Series
        Series with data to encode.

    Returns
    -------
    out : pandas.Series

    Examples
    --------
    >>> ss = pd.Series([True, True, False, False, False, True])
    >>> rle_key(ss).tolist()
    [1, 1, 2, 2, 2, 3]

    """
    xout = x.ne(x.shift()).cumsum()
    return(xout)


def as_samples(samples):
    """Coerce input samples into a DataFrame with `time` and `depth`

    Parameters
    ----------
    samples : pandas.DataFrame or iterable of mappings
        Time-ordered samples, each with `time` and `depth` keys.

    Returns
    -------
    out : pandas.DataFrame
        Copy with float columns `time` and `depth`, and a fresh
        ``RangeIndex``.

    """
    if isinstance(samples, pd.DataFrame):
        samples_df = samples
    else:
        records = list(samples)
        if records:
            samples_df = pd.DataFrame(records)
        else:
            samples_df = pd.DataFrame(columns=_SAMPLE_COLS)

    missing = [x for x in _SAMPLE_COLS if x not in samples_df.columns]
    if missing:
        msg = ("Samples lack required columns: {}.\nAvailable columns: {}"
               .format(missing, list(samples_df.columns)))
        logger.error(msg)
        raise KeyError(msg)

    return (samples_df[_SAMPLE_COLS].astype(float)
            .reset_index(drop=True))


def extract_element(etype, points):
    """Describe the points making up an element

    Parameters
    ----------
    etype : {"wiggle", "step"}
    points : pandas.DataFrame
        Chronologically ordered points with columns `time` and `depth`.

    Returns
    -------
    out : Element

    """
    times = points["time"].to_numpy()
    depths = points["depth"].to_numpy()
    start_time, end_time = times[0], times[-1]
    min_depth, max_depth = depths.min(), depths.max()

    return Element(type=etype,
                   start_time=float(start_time),
                   end_time=float(end_time),
                   duration=float(end_time - start_time),
                   min_depth=float(min_depth),
                   max_depth=float(max_depth),
                   depth_range=float(max_depth - min_depth))


def to_epoch_seconds(times):
    """Convert datetime-like values to seconds since the Unix epoch

    Parameters
    ----------
    times : array_like
        Datetime-like values; timezone-naive values are taken as UTC.

    Returns
    -------
    out : numpy.ndarray

    """
    dtimes = pd.DatetimeIndex(times)
    if dtimes.tz is not None:
        dtimes = dtimes.tz_convert("UTC").tz_localize(None)
    secs = ((dtimes - pd.Timestamp("1970-01-01")) /
            pd.Timedelta(1, unit="s"))
    return(np.asarray(secs, dtype=float))
