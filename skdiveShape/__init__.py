"""Dive shape analysis of time-depth recorder data

The :class:`TDR` class encapsulates the analysis of `TDR` records, read
from a NetCDF data file or a Lotek CSV export, to categorize the shape of
each dive.

Dives are identified as periods deeper than a minimum depth, and their
vertical velocity is used to detect elements (wiggles and steps).
Elements reaching the ledge depth of a dive delimit its bottom phase, and
indices describing the bottom phase are used to categorize the dive into
one of the shapes ``V``, ``u``, ``U``, ``W``, or ``undefined``.
Thresholds for these steps are set in a :class:`ShapeParams` object, or
in a configuration file used by function :func:`analyze`.  The standard
approach follows the logical processing sequence described below:

1. Identification of dives
2. Description of dives
3. Calculation of vertical velocity
4. Detection of wiggles and steps
5. Detection of the bottom phase and labelling of dive phases
6. Description of the bottom phase
7. Calculation of shape indices
8. Categorization of dive shape

Analysis
--------

.. autosummary::

   TDR.read_netcdf
   TDR.read_lotek
   TDR.analyze_dives
   analyze_dives

Summaries and plotting
----------------------

.. autosummary::

   TDR.dive_stats
   TDR.shape_counts
   TDR.plot_dive

Accessors
---------

.. autosummary::

   TDR.get_dive
   TDR.extract_dives
   TDR.get_elements

Functions
---------

.. autosummary::

   analyze
   dump_config_template

"""

from skdiveShape.tdr import TDR, analyze
from skdiveShape.analysis import analyze_dives, dive_stats
from skdiveShape.shapeconfig import ShapeParams, dump_config_template
from skdiveShape.velocity import DegenerateTimestampError

__author__ = "Sebastian Luque <spluque@gmail.com>"
__license__ = "AGPLv3"
__version__ = "0.1.0"
__all__ = ["TDR", "analyze", "analyze_dives", "dive_stats", "ShapeParams",
           "dump_config_template", "DegenerateTimestampError"]
