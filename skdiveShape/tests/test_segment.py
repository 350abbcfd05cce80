"""Unit test for dive identification and description

"""

import unittest as ut
import numpy as np
import numpy.testing as npt
import pandas as pd
from skdiveShape.segment import identify_dives, split_dives, describe_dive
from skdiveShape.tests import sample_samples


def _samples(depths, times=None):
    if times is None:
        times = np.arange(len(depths), dtype=float)
    return pd.DataFrame({"time": times, "depth": depths})


class TestSegment(ut.TestCase):
    """Test dive identification functions

    """
    def test_single_dive(self):
        labelled = identify_dives(_samples([0, 1, 2, 3, 2, 1, 0]),
                                  min_depth=1)
        npt.assert_array_equal(labelled["dive_id"],
                               [-1, 1, 1, 1, 1, 1, -2])
        groups = split_dives(labelled)
        self.assertEqual([x[0] for x in groups], [-1, 1, -2])
        dive_points = groups[1][1]
        npt.assert_array_equal(dive_points["time"], [1, 2, 3, 4, 5])
        npt.assert_array_equal(dive_points["depth"], [1, 2, 3, 2, 1])
        self.assertNotIn("dive_id", dive_points.columns)

    def test_drop_leading_dive(self):
        labelled = identify_dives(_samples([5, 4, 0, 2, 0]), min_depth=1)
        npt.assert_array_equal(labelled["time"], [2, 3, 4])
        npt.assert_array_equal(labelled["dive_id"], [-1, 1, -2])

    def test_alternating_indices(self):
        labelled = identify_dives(sample_samples(), min_depth=1)
        ids = labelled["dive_id"]
        self.assertEqual(ids.unique().tolist(), [-1, 1, -2, 2, -3])
        self.assertEqual((ids == 1).sum(), 11)
        self.assertEqual((ids == 2).sum(), 13)

    def test_empty(self):
        labelled = identify_dives(_samples([]))
        self.assertEqual(labelled.shape[0], 0)
        self.assertEqual(split_dives(labelled), [])

    def test_no_surface(self):
        labelled = identify_dives(_samples([2, 3, 4, 3, 2]))
        self.assertEqual(labelled.shape[0], 0)
        self.assertEqual(split_dives(labelled), [])

    def test_min_depth(self):
        depths = [0, 1, 2, 3, 2, 1, 0]
        labelled = identify_dives(_samples(depths), min_depth=2)
        npt.assert_array_equal(labelled["dive_id"],
                               [-1, -1, 1, 1, 1, -2, -2])

    def test_mapping_input(self):
        samples = [{"time": 0, "depth": 0}, {"time": 1, "depth": 3},
                   {"time": 2, "depth": 0}]
        labelled = identify_dives(samples)
        npt.assert_array_equal(labelled["dive_id"], [-1, 1, -2])

    def test_missing_columns(self):
        samples = pd.DataFrame({"time": [0, 1], "pressure": [0, 1]})
        self.assertRaises(KeyError, identify_dives, samples)

    def test_missing_keys(self):
        samples = [{"time": 0, "dep": 0}, {"time": 1, "dep": 3},
                   {"time": 2, "dep": 0}]
        self.assertRaises(KeyError, identify_dives, samples)
        self.assertEqual(identify_dives([]).shape[0], 0)


class TestDescribeDive(ut.TestCase):
    """Test dive description

    """
    def test_describe(self):
        points = _samples([1, 2, 4, 3, 4, 1], times=np.arange(1, 7.0))
        dive = describe_dive(3, points, ledge_fraction=0.75)
        self.assertEqual(dive.index, 3)
        self.assertEqual(dive.start_time, 1)
        self.assertEqual(dive.end_time, 6)
        self.assertEqual(dive.duration, 5)
        self.assertEqual(dive.max_depth, 4)
        # Earliest time at maximum depth
        self.assertEqual(dive.max_depth_time, 3)
        self.assertEqual(dive.ledge_depth, 3)
        self.assertIsNone(dive.elements)
        self.assertIsNone(dive.bottom_phase)
        self.assertIsNone(dive.shape)

    def test_single_point(self):
        dive = describe_dive(1, _samples([2.0], times=[10.0]))
        self.assertEqual(dive.duration, 0)
        self.assertEqual(dive.max_depth_time, 10)
        self.assertEqual(dive.ledge_depth, 1.5)


if __name__ == '__main__':
    ut.main()
