"""Unit test for dive shape indices and categories

"""

import unittest as ut
import numpy as np
import pandas as pd
from skdiveShape.records import Element, BottomPhase
from skdiveShape.segment import describe_dive
from skdiveShape.shape import (describe_dive_shape, classify_shape,
                               categorize_dive_shape)


def _wiggle(start_time, end_time, min_depth, max_depth):
    return Element(type="wiggle", start_time=start_time,
                   end_time=end_time, duration=end_time - start_time,
                   min_depth=min_depth, max_depth=max_depth,
                   depth_range=max_depth - min_depth)


def _dive(depths, bottom, elements=()):
    times = np.arange(1, len(depths) + 1, dtype=float)
    points = pd.DataFrame({"time": times, "depth": depths})
    dive = describe_dive(1, points, ledge_fraction=0.75)
    return dive._replace(elements=tuple(elements), bottom_phase=bottom)


class TestShapeIndices(ut.TestCase):
    """Test shape index calculation

    """
    def test_indices(self):
        elements = [_wiggle(3, 6, 2.0, 4.0), _wiggle(6, 8, 3.0, 4.0)]
        bottom = BottomPhase(start_time=3, end_time=8, duration=5,
                             depth_range=2, count_wiggles=2)
        dive = describe_dive_shape(
            _dive([1, 2, 3, 2, 3, 4, 3, 4, 3, 2, 1], bottom, elements))
        bottom = dive.bottom_phase
        self.assertAlmostEqual(bottom.broadness_idx, 0.5)
        self.assertAlmostEqual(bottom.depth_range_idx, 0.5)
        self.assertAlmostEqual(bottom.symmetry_idx, 0.6)
        self.assertAlmostEqual(bottom.raggedness_idx, 3)

    def test_zero_bottom_duration(self):
        bottom = BottomPhase(start_time=3, end_time=3, duration=0,
                             depth_range=0, count_wiggles=0)
        dive = describe_dive_shape(_dive([1, 2, 3, 2, 1], bottom))
        bottom = dive.bottom_phase
        self.assertEqual(bottom.broadness_idx, 0)
        self.assertEqual(bottom.depth_range_idx, 0)
        self.assertEqual(bottom.symmetry_idx, 0)
        self.assertEqual(bottom.raggedness_idx, 0)

    def test_zero_dive_duration(self):
        bottom = BottomPhase(start_time=1, end_time=1, duration=0,
                             depth_range=0, count_wiggles=0)
        dive = describe_dive_shape(_dive([2], bottom))
        self.assertEqual(dive.bottom_phase.broadness_idx, 0)
        self.assertEqual(dive.bottom_phase.symmetry_idx, 0)

    def test_raggedness_bottom_only(self):
        elements = [_wiggle(2, 4, 2.0, 3.0), _wiggle(5, 7, 1.0, 1.5)]
        bottom = BottomPhase(start_time=2, end_time=4, duration=2,
                             depth_range=1, count_wiggles=1)
        dive = describe_dive_shape(
            _dive([1, 2, 3, 2, 1.5, 1, 1.5, 1], bottom, elements))
        self.assertAlmostEqual(dive.bottom_phase.raggedness_idx, 1)


class TestClassifyShape(ut.TestCase):
    """Test shape categories and their priority

    """
    def setUp(self):
        self.deep = _wiggle(3, 5, 2.5, 3.0)
        self.shallow = _wiggle(5, 7, 1.0, 2.0)

    def test_V(self):
        self.assertEqual(classify_shape(0.0, [], 2.25), "V")
        # V takes precedence over wiggles
        self.assertEqual(classify_shape(0.01, [self.deep, self.deep],
                                        2.25), "V")

    def test_u(self):
        self.assertEqual(classify_shape(0.5, [self.deep], 2.25), "u")
        # u takes precedence over W
        self.assertEqual(classify_shape(0.5, [self.shallow], 2.25), "u")

    def test_U(self):
        self.assertEqual(classify_shape(0.5, [self.deep, self.shallow],
                                        2.25), "U")

    def test_undefined(self):
        self.assertEqual(classify_shape(0.5, [], 2.25), "undefined")

    def test_threshold(self):
        self.assertEqual(classify_shape(0.015, [], 2.25), "undefined")
        self.assertEqual(classify_shape(0.015, [], 2.25,
                                        broadness_thr=0.02), "V")

    def test_categorize(self):
        elements = [_wiggle(3, 5, 2.0, 3.0)]
        bottom = BottomPhase(start_time=3, end_time=5, duration=2,
                             depth_range=1, count_wiggles=1,
                             broadness_idx=2 / 6)
        dive = _dive([1, 2, 3, 2, 3, 2, 1], bottom, elements)
        self.assertEqual(categorize_dive_shape(dive).shape, "u")
        self.assertEqual(categorize_dive_shape(dive, broadness_thr=0.5)
                         .shape, "V")


if __name__ == '__main__':
    ut.main()
