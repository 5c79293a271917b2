import unittest

import numpy as np

from hic_expected.doublearray import LargeDoubleArray
from hic_expected.expected import HiCUnit, NormalizationType
from hic_expected.expected_function import ExpectedValueFunction
from hic_expected.Ps import expected_to_df, plot_expected_curve

class TestExpectedCurve(unittest.TestCase):
    def setUp(self):
        self.func = ExpectedValueFunction(
            NormalizationType.NONE, HiCUnit.BP, 1000,
            LargeDoubleArray.from_array([8.0, 4.0, 2.0, 1.0]),
            {1: 2.0}
        )
    def test_expected_to_df(self):
        df = expected_to_df(self.func)
        self.assertEqual(list(df.columns), ["dist", "s_bp", "expected"])
        np.testing.assert_array_equal(df["s_bp"], [0, 1000, 2000, 3000])
        np.testing.assert_array_equal(df["expected"], [8, 4, 2, 1])
        scaled = expected_to_df(self.func, chr_idx=1)
        np.testing.assert_array_equal(scaled["expected"], [4, 2, 1, 0.5])
    def test_plot(self):
        fig = plot_expected_curve(expected_to_df(self.func))
        self.assertEqual(len(fig.data), 1)
        # dist 0 is left out of the log axis
        self.assertEqual(len(fig.data[0].x), 3)
        self.assertEqual(fig.layout.xaxis.type, "log")

if __name__ == '__main__':
    unittest.main()
