"""Read and write dive shape analysis configuration files

"""
import copy
import json
from collections import namedtuple

__all__ = ["ShapeParams", "dump_config_template", "dump_config",
           "read_config"]

_DEFAULT_CONFIG = {
    'log_level': "INFO",
    'read': {
        'format': "netcdf",
        'depth_name': "depth",
        'time_name': "timestamp",
        'load_dataset_kwargs': {}
    },
    'thresholds': {
        'min_depth': 1,
        'ledge_fraction': 0.75,
        'min_step_points': 5,
        'max_step_vel': 0.35,
        'broadness_thr': 0.015
    },
    'n_jobs': None
}

_DUMP_INDENT = 4

_ShapeParams = namedtuple("ShapeParams",
                          list(_DEFAULT_CONFIG["thresholds"].keys()),
                          defaults=list(_DEFAULT_CONFIG["thresholds"]
                                        .values()))


class ShapeParams(_ShapeParams):
    """Thresholds controlling dive shape analysis

    Attributes
    ----------
    min_depth : float
        Depth below which samples are considered at the surface.
    ledge_fraction : float
        Fraction of maximum depth defining the ledge depth of a dive.
    min_step_points : int
        Minimum number of points in a step.
    max_step_vel : float
        Vertical velocity ceiling for step points.
    broadness_thr : float
        Broadness index below which a dive is ``V``-shaped.

    Examples
    --------
    >>> ShapeParams(min_depth=4).min_depth
    4

    """
    __slots__ = ()

    @classmethod
    def from_config(cls, config):
        """Instantiate from a configuration dictionary

        Parameters
        ----------
        config : dict
            Dictionary with a "thresholds" key, as read by
            :func:`read_config`.  Missing thresholds take default values.

        Returns
        -------
        out : ShapeParams

        """
        return cls(**config.get("thresholds", {}))


def dump_config_template(fname):
    """Dump configuration template file

    Dump a json configuration template file to set up dive shape analysis.

    Parameters
    ----------
    fname : str
        A valid string path for output file.

    Examples
    --------
    >>> dump_config_template("shape_config.json")  # doctest: +SKIP

    Edit the file to your specifications.

    """
    with open(fname, "w") as ofile:
        json.dump(_DEFAULT_CONFIG, ofile, indent=_DUMP_INDENT)


def read_config(config_file):
    """Read configuration file into dictionary

    Sections missing from the file take default values.

    Parameters
    ----------
    config_file : str
        A valid string path for input file.

    Returns
    -------
    out : dict

    """
    with open(config_file, "r") as ifile:
        config_in = json.load(ifile)

    config = copy.deepcopy(_DEFAULT_CONFIG)
    for key, val in config_in.items():
        if isinstance(val, dict) and isinstance(config.get(key), dict):
            config[key].update(val)
        else:
            config[key] = val

    return(config)


def dump_config(fname, config_dict):
    """Dump configuration dictionary to file

    Dump a dictionary onto a JSON configuration file to set up dive shape
    analysis.

    Parameters
    ----------
    fname : str
        A valid string path for output file.
    config_dict : dict
        Dictionary to dump.

    """
    with open(fname, "w") as ofile:
        json.dump(config_dict, ofile, indent=_DUMP_INDENT)
