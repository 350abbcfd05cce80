"""Unit test for TDRSource class

"""

import os
import unittest as ut
import numpy.testing as npt
from tempfile import NamedTemporaryFile
import pandas as pd
import xarray as xr
import skdiveShape.tdrsource as tdrsrc
from skdiveShape.tdr import TDR
from skdiveShape.tests import sample_tdr

_LOTEK_CSV = """Lotek LAT150 export
Serial,0867
Rec #,Date,Time,Pressure[dBars]
1,7/30/2013,09:32:53,0.0
2,7/30/2013,09:32:54,1.5
3,7/30/2013,09:32:55,3.0
4,7/30/2013,09:32:56,2.0
5,7/30/2013,09:32:57,0.0
"""


class TestTDRSource(ut.TestCase):
    """Test `TDRSource` class methods

    """
    def setUp(self):
        # An instance to work with
        self.tdrX = sample_tdr("TDRSource")

    def test_init(self):
        self.assertIsInstance(self.tdrX, tdrsrc.TDRSource)
        self.assertIsInstance(self.tdrX.tdr, xr.Dataset)
        dataset = self.tdrX.tdr
        self.assertRaises(KeyError, tdrsrc.TDRSource, dataset,
                          depth_name="foo")

    def test_str(self):
        self.assertIn("Class TDRSource object", self.tdrX.__str__())

    def test_get_depth(self):
        depth = self.tdrX.depth
        self.assertIsInstance(depth, xr.DataArray)

    def test_samples(self):
        samples = self.tdrX.samples
        self.assertIsInstance(samples, pd.DataFrame)
        self.assertEqual(samples.columns.tolist(), ["time", "depth"])
        self.assertEqual(samples.shape[0], 29)
        self.assertEqual(samples["time"].iloc[0], 1375176773.0)
        npt.assert_array_equal(samples["time"].diff().iloc[1:], 1)

    def test_samples_missing_depth(self):
        dataset = self.tdrX.tdr.copy(deep=True)
        dataset["depth"][3] = float("nan")
        tdrX = tdrsrc.TDRSource(dataset)
        self.assertEqual(tdrX.samples.shape[0], 28)

    def test_numeric_time(self):
        dataset = xr.Dataset({"depth": (("time",), [0.0, 2.0, 0.0])},
                             coords={"time": [10.0, 20.0, 30.0]})
        tdrX = tdrsrc.TDRSource(dataset, time_name="time")
        npt.assert_array_equal(tdrX.samples["time"], [10, 20, 30])

    def test_read_lotek(self):
        csvfile = NamedTemporaryFile("w", prefix="skdiveShape_",
                                     suffix=".csv", delete=False)
        csvfile.write(_LOTEK_CSV)
        csvfile.close()
        tdrX = TDR.read_lotek(csvfile.name)
        os.remove(csvfile.name)
        self.assertIsInstance(tdrX, TDR)
        self.assertEqual(tdrX.tdr_file, csvfile.name)
        samples = tdrX.samples
        npt.assert_array_equal(samples["depth"], [0, 1.5, 3, 2, 0])
        npt.assert_array_equal(samples["time"] - samples["time"].iloc[0],
                               [0, 1, 2, 3, 4])
        self.assertEqual(samples["time"].iloc[0], 1375176773.0)
        tdrX.analyze_dives()
        self.assertEqual(len(tdrX.dives), 1)

    def test_read_netcdf(self):
        ncfile = NamedTemporaryFile(prefix="skdiveShape_", suffix=".nc",
                                    delete=False)
        ncfile.close()
        self.tdrX.tdr.to_netcdf(ncfile.name)
        tdrX = tdrsrc.TDRSource.read_netcdf(ncfile.name,
                                            depth_name="depth",
                                            time_name="timestamp")
        os.remove(ncfile.name)
        self.assertIsInstance(tdrX, tdrsrc.TDRSource)
        npt.assert_array_equal(tdrX.samples["depth"],
                               self.tdrX.samples["depth"])
        npt.assert_array_equal(tdrX.samples["time"],
                               self.tdrX.samples["time"])


if __name__ == '__main__':
    ut.main()
