"""scikit-diveShape tests"""

from .get_sample_data import (sample_samples, sample_tdr,  # noqa: F401
                              surface_bounded)
