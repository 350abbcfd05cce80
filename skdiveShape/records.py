"""Records produced by the dive shape analysis

All records are immutable named tuples.  Each stage of the analysis
returns an extended copy of the record it receives (via ``_replace``),
so dives can be processed independently of each other.

"""

from collections import namedtuple

__all__ = ["Element", "BottomPhase", "Dive", "PHASES", "SHAPES",
           "ELEMENT_TYPES"]

PHASES = ["descent", "bottom", "ascent"]
SHAPES = ["V", "u", "U", "W", "undefined"]
ELEMENT_TYPES = ["wiggle", "step"]

Element = namedtuple("Element", ["type", "start_time", "end_time",
                                 "duration", "min_depth", "max_depth",
                                 "depth_range"])
Element.__doc__ = """Sub-dive kinematic feature (wiggle or step)"""

BottomPhase = namedtuple("BottomPhase",
                         ["start_time", "end_time", "duration",
                          "depth_range", "count_wiggles",
                          "broadness_idx", "depth_range_idx",
                          "symmetry_idx", "raggedness_idx"],
                         defaults=(None,) * 6)
BottomPhase.__doc__ = """Bottom phase bounds, quantities and shape indices

Only the bounds and duration are set when the bottom phase is first
located; the remaining fields are filled by later stages.

"""

Dive = namedtuple("Dive", ["index", "start_time", "end_time", "duration",
                           "max_depth", "max_depth_time", "ledge_depth",
                           "points", "elements", "bottom_phase", "shape"],
                  defaults=(None,) * 3)
Dive.__doc__ = """A single submerged period between two surface periods

Attributes
----------
index : int
    Chronological dive number, starting at 1.
points : pandas.DataFrame
    Dive samples, with columns ``time`` and ``depth``, extended with
    ``vert_vel`` and ``phase`` as the analysis proceeds.
elements : tuple
    :class:`Element` records; wiggles followed by steps.
bottom_phase : BottomPhase
shape : str
    One of :data:`SHAPES`.

"""
