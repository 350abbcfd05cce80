"""Base definition of the TDR input data

"""

import logging
import numpy as np
import pandas as pd
import xarray as xr
from skdiveShape.helpers import to_epoch_seconds

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

# Lotek CSV exports: header lines, and column positions
_LOTEK_HEADER_LINES = 3
_LOTEK_COLS = [1, 2, 3]
_LOTEK_TIME_FMT = "%m/%d/%Y %H:%M:%S"


class TDRSource:
    """Define TDR data source

    Use xarray.Dataset to ensure pseudo-standard metadata

    Attributes
    ----------
    tdr_file : str
        String indicating the file where the data comes from.
    tdr : xarray.Dataset
        Dataset with input data.
    depth_name : str
        Name of data variable with depth measurements.
    time_name : str
        Name of the time dimension in the dataset.

    Examples
    --------
    >>> from skdiveShape.tests import sample_tdr
    >>> tdrX = sample_tdr("TDRSource")
    >>> print(tdrX)  # doctest: +ELLIPSIS
    Time-Depth Recorder -- Class TDRSource object ...

    """
    def __init__(self, dataset, depth_name="depth", time_name="timestamp",
                 tdr_filename=None):
        """Set up attributes for TDRSource objects

        Parameters
        ----------
        dataset : xarray.Dataset
            Dataset containing depth, and optionally other DataArrays.
        depth_name : str, optional
            Name of data variable with depth measurements.
        time_name : str, optional
            Name of the time dimension in the dataset.
        tdr_filename : str
            Name of the file from which `dataset` originated.

        """
        if depth_name not in dataset.data_vars:
            msg = ("\'{}\' is not found.\nAvailable variables: {}"
                   .format(depth_name, list(dataset.data_vars)))
            logger.error(msg)
            raise KeyError(msg)

        self.tdr = dataset
        self.depth_name = depth_name
        self.time_name = time_name
        self.tdr_file = tdr_filename

    @classmethod
    def read_netcdf(cls, tdr_file, depth_name="depth", time_name="timestamp",
                    **kwargs):
        """Instantiate object by loading Dataset from NetCDF file

        Parameters
        ----------
        tdr_file : str
            As first argument for :func:`xarray.load_dataset`.
        depth_name : str, optional
            Name of data variable with depth measurements. Default: "depth".
        time_name : str, optional
            Name of the time dimension in the dataset.
        **kwargs : optional keyword arguments
            Arguments passed to :func:`xarray.load_dataset`.

        Returns
        -------
        obj : TDRSource or TDR
            Class matches the caller.

        """
        dataset = xr.load_dataset(tdr_file, **kwargs)
        return cls(dataset, depth_name=depth_name, time_name=time_name,
                   tdr_filename=str(tdr_file))

    @classmethod
    def read_lotek(cls, tdr_file, depth_name="depth", time_name="timestamp",
                   **kwargs):
        """Instantiate object by parsing a Lotek CSV export

        The file begins with a fixed header of three lines, followed by
        rows with the date (month/day/year) in the second column, the time
        of day in the third, and depth in the fourth.

        Parameters
        ----------
        tdr_file : str
            As first argument for :func:`pandas.read_csv`.
        depth_name : str, optional
            Name to give the depth variable in the dataset.
        time_name : str, optional
            Name to give the time dimension in the dataset.
        **kwargs : optional keyword arguments
            Arguments passed to :func:`pandas.read_csv`.

        Returns
        -------
        obj : TDRSource or TDR
            Class matches the caller.

        """
        raw = pd.read_csv(tdr_file, skiprows=_LOTEK_HEADER_LINES,
                          header=None, usecols=_LOTEK_COLS,
                          dtype=str, skipinitialspace=True, **kwargs)
        date_col, time_col, depth_col = _LOTEK_COLS
        times = pd.to_datetime(raw[date_col].str.strip() + " " +
                               raw[time_col].str.strip(),
                               format=_LOTEK_TIME_FMT)
        depth = raw[depth_col].astype(float).to_numpy()
        dataset = xr.Dataset({depth_name: ((time_name,), depth)},
                             coords={time_name: times.to_numpy()})
        dataset[depth_name].attrs["units"] = "m"
        dataset.attrs["source"] = "Lotek CSV export"
        logger.info("Read {} samples from {}"
                    .format(depth.size, tdr_file))
        return cls(dataset, depth_name=depth_name, time_name=time_name,
                   tdr_filename=str(tdr_file))

    def __str__(self):
        x = self.tdr
        depth_ser = self.depth.to_series()
        objcls = ("Time-Depth Recorder -- Class {} object\n"
                  .format(self.__class__.__name__))
        src = "{0:<20} {1}\n".format("Source File", self.tdr_file)
        nsamples = "{0:<20} {1}\n".format("Number of Samples",
                                          depth_ser.shape[0])
        if depth_ser.shape[0] > 0:
            beg_time, end_time = depth_ser.index[0], depth_ser.index[-1]
            dur_time = end_time - beg_time
        else:
            beg_time = end_time = dur_time = None
        beg = "{0:<20} {1}\n".format("Sampling Begins", beg_time)
        end = "{0:<20} {1}\n".format("Sampling Ends", end_time)
        dur = "{0:<20} {1}\n".format("Total duration", dur_time)
        drange = "{0:<20} [{1},{2}]\n".format("Measured depth range",
                                              depth_ser.min(),
                                              depth_ser.max())
        others = "{0:<20} {1}\n".format("Other variables",
                                        [x for x in list(x.keys())
                                         if x != self.depth_name])
        attr_list = "Attributes:\n"
        for key, val in sorted(x.attrs.items()):
            attr_list += "{0:>35}: {1}\n".format(key, val)
        attr_list = attr_list.rstrip("\n")

        return (objcls + src + nsamples + beg + end + dur + drange +
                others + attr_list)

    def _get_depth(self):
        return self.tdr[self.depth_name]

    depth = property(_get_depth)
    """Return depth array

    Returns
    -------
    xarray.DataArray

    """

    def _get_samples(self):
        depth_ser = self.depth.to_series().dropna()
        times = depth_ser.index
        if isinstance(times, pd.DatetimeIndex):
            time_num = to_epoch_seconds(times)
        else:
            time_num = np.asarray(times, dtype=float)

        return pd.DataFrame({"time": time_num,
                             "depth": depth_ser.to_numpy(dtype=float)})

    samples = property(_get_samples)
    """Return time and depth samples for analysis

    Samples with missing depth are dropped.  Datetime stamps are converted
    to seconds since the Unix epoch.

    Returns
    -------
    pandas.DataFrame

    """
