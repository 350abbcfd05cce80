"""TDR objects holding dive shape analysis results

"""

import copy
import logging
import pandas as pd
from skdiveShape.tdrsource import TDRSource
from skdiveShape.analysis import analyze_dives, dive_stats, elements_table
import skdiveShape.plotting as plotting
import skdiveShape.shapeconfig as shapeconfig
from skdiveShape.records import SHAPES

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

_READ_FORMATS = ["netcdf", "lotek"]


class TDR(TDRSource):
    """Base class encapsulating TDR objects and dive shape analysis

    TDR subclasses `TDRSource` to provide dive identification, dive
    element detection, and dive shape categorization.

    See help(TDRSource) for inherited attributes.

    Attributes
    ----------
    dives : tuple
        :class:`~skdiveShape.records.Dive` records from the latest
        analysis, in ascending dive number.
    params : ShapeParams
        Thresholds used in the latest analysis.

    Examples
    --------
    Construct an instance from the sample record

    >>> from skdiveShape.tests import sample_tdr
    >>> tdrX = sample_tdr()
    >>> tdrX.analyze_dives()
    >>> tdrX.dive_stats()["shape"].tolist()
    ['U', 'undefined']

    """

    def __init__(self, *args, **kwargs):
        """Set up attributes for TDR objects

        Parameters
        ----------
        *args : positional arguments
            Passed to :meth:`TDRSource.__init__`
        **kwargs : keyword arguments
            Passed to :meth:`TDRSource.__init__`

        """
        TDRSource.__init__(self, *args, **kwargs)
        self.dives = None
        self.params = None

    def __str__(self):
        base = TDRSource.__str__(self)
        if self.dives is None:
            ndives = None
        else:
            ndives = len(self.dives)
        return (base +
                ("\n{0:<20} {1}\n{2:<20} {3}"
                 .format("Number of dives:", ndives,
                         "Shape parameters:", self.params)))

    def analyze_dives(self, params=None, n_jobs=None):
        """Identify dives and categorize their shapes

        Set the `dives` and `params` attributes.

        Parameters
        ----------
        params : ShapeParams, optional
            Analysis thresholds.  Defaults are used if not provided.
        n_jobs : int, optional
            Passed to :func:`~skdiveShape.analysis.analyze_dives`.

        """
        if params is None:
            params = shapeconfig.ShapeParams()

        self.dives = analyze_dives(self.samples, params=params,
                                   n_jobs=n_jobs)
        self.params = params
        logger.info("Finished analyzing dive shapes")

    def _get_dives(self):
        if self.dives is None:
            msg = "Dives not available; run `analyze_dives` first."
            logger.error(msg)
            raise LookupError(msg)
        return self.dives

    def get_dive(self, diveNo):
        """Retrieve the record for a given dive

        Parameters
        ----------
        diveNo : int
            Dive number (1-based).

        Returns
        -------
        out : Dive

        """
        dives = {x.index: x for x in self._get_dives()}
        try:
            dive = dives[diveNo]
        except KeyError:
            msg = ("Dive {} is not found.\nAvailable dives: 1-{}"
                   .format(diveNo, len(dives)))
            logger.error(msg)
            raise KeyError(msg)

        return dive

    def dive_stats(self):
        """Calculate dive statistics and shape indices for all dives

        Returns
        -------
        out : pandas.DataFrame
            See :func:`~skdiveShape.analysis.dive_stats`.

        Examples
        --------
        >>> from skdiveShape.tests import sample_tdr
        >>> tdrX = sample_tdr()
        >>> tdrX.analyze_dives()
        >>> tdrX.dive_stats().shape
        (2, 16)

        """
        return dive_stats(self._get_dives())

    def shape_counts(self):
        """Number of dives in each shape category

        Returns
        -------
        out : pandas.Series

        """
        shapes = pd.Categorical([x.shape for x in self._get_dives()],
                                categories=SHAPES)
        return (pd.Series(shapes).value_counts(sort=False)
                .rename("count").rename_axis("shape"))

    def extract_dives(self, diveNo):
        """Extract the points corresponding to a particular set of dives

        Parameters
        ----------
        diveNo : int or array_like
            Dive number(s) (1-based) to extract.

        Returns
        -------
        out : pandas.DataFrame
            Points indexed by `dive_id`, with columns `time`, `depth`,
            `vert_vel`, and `phase`.

        """
        if pd.api.types.is_list_like(diveNo):
            dive_nos = list(diveNo)
        else:
            dive_nos = [diveNo]

        dives = [self.get_dive(x) for x in dive_nos]
        return pd.concat([x.points for x in dives],
                         keys=[x.index for x in dives],
                         names=["dive_id", None]).droplevel(1)

    def get_elements(self, diveNo):
        """Retrieve the wiggles and steps in a given dive

        Parameters
        ----------
        diveNo : int
            Dive number (1-based).

        Returns
        -------
        out : pandas.DataFrame
            See :func:`~skdiveShape.analysis.elements_table`.

        """
        return elements_table(self.get_dive(diveNo))

    def plot_dive(self, diveNo, **kwargs):
        """Plot a dive profile, with phases and elements

        Parameters
        ----------
        diveNo : int
            Dive number (1-based).
        **kwargs : optional keyword arguments
            Arguments passed to :func:`~skdiveShape.plotting.plot_dive`.

        Returns
        -------
        tuple
            :class:`~matplotlib.figure.Figure`,
            :class:`~matplotlib.axes.Axes` instances.

        """
        dive = self.get_dive(diveNo)
        bottom = dive.bottom_phase
        title = "Dive {} ({})".format(diveNo, dive.shape)
        return plotting.plot_dive(dive.points,
                                  elements=elements_table(dive),
                                  ledge_depth=dive.ledge_depth,
                                  bottom=(bottom.start_time,
                                          bottom.end_time),
                                  leg_title=title, **kwargs)


def analyze(tdr_file, config_file=None):
    """Perform all dive shape analysis operations

    This function is a convenience wrapper around reading a TDR file and
    :meth:`TDR.analyze_dives`, guided by a configuration file (JSON).

    Parameters
    ----------
    tdr_file : str, Path or xarray.backends.*DataStore
        Path to the NetCDF or Lotek CSV file, as set by the "format" key
        of the "read" configuration section.
    config_file : str
        A valid string path for dive shape configuration file.

    Returns
    -------
    out : TDR

    See Also
    --------
    dump_config_template : configuration template

    """
    if config_file is None:
        config = copy.deepcopy(shapeconfig._DEFAULT_CONFIG)
    else:
        config = shapeconfig.read_config(config_file)

    pkg_logger = logging.getLogger("skdiveShape")
    pkg_logger.setLevel(config["log_level"])

    read_config = dict(config["read"])
    fmt = read_config.pop("format")
    load_kwargs = read_config.pop("load_dataset_kwargs")
    if fmt not in _READ_FORMATS:
        msg = "format must be one of: {}".format(_READ_FORMATS)
        logger.error(msg)
        raise KeyError(msg)
    reader = getattr(TDR, "read_{}".format(fmt))
    logger.info("Reading config: {}, {}".format(read_config, load_kwargs))
    tdr = reader(tdr_file, **read_config, **load_kwargs)

    params = shapeconfig.ShapeParams.from_config(config)
    logger.info("Thresholds config: {}".format(params))
    tdr.analyze_dives(params, n_jobs=config["n_jobs"])

    return(tdr)
