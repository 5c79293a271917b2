import unittest

import pandas as pd

from hic_expected.binnify import bin_pairs
from hic_expected.genome import ChromosomeHandler

class TestBinPairs(unittest.TestCase):
    def setUp(self):
        self.handler = ChromosomeHandler.from_chromsizes({"chr1": 1000, "chr2": 2000})
    def test_bin_pairs(self):
        pairs = pd.DataFrame(
            {
                "chr1" : ["chr1", "chr1", "chr1", "chr2", "chr1", "chrM"],
                "pos1" : [10, 20, 150, 1999, 5, 1],
                "chr2" : ["chr1", "chr1", "chr1", "chr2", "chr2", "chrM"],
                "pos2" : [90, 30, 990, 1000, 5, 2],
            }
        )
        contacts = bin_pairs(pairs, self.handler, 100)
        self.assertEqual(list(contacts.columns), ["chrom_idx", "bin1", "bin2", "count"])
        # inter and unknown-chromosome pairs are dropped
        self.assertEqual(contacts["count"].sum(), 4)
        records = set(map(tuple, contacts.values.tolist()))
        self.assertEqual(
            records,
            {(1, 0, 0, 2.0), (1, 1, 9, 1.0), (2, 19, 10, 1.0)}
        )
    def test_outside_chromosome_length(self):
        """Pairs past the chromosome end would give distances past the curve."""
        pairs = pd.DataFrame(
            {
                "chr1" : ["chr1", "chr1", "chr1", "chr2"],
                "pos1" : [10, 5000, 10, 1000],
                "chr2" : ["chr1", "chr1", "chr1", "chr2"],
                "pos2" : [5000, 20, 1000, 2000],
            }
        )
        with self.assertLogs("hic_expected.binnify", level="WARNING") as logs:
            contacts = bin_pairs(pairs, self.handler, 100)
        self.assertIn("2 pairs outside", logs.output[0])
        records = set(map(tuple, contacts.values.tolist()))
        self.assertEqual(records, {(1, 0, 10, 1.0), (2, 10, 20, 1.0)})
    def test_empty(self):
        pairs = pd.DataFrame({"chr1": ["chr1"], "pos1": [1], "chr2": ["chr2"], "pos2": [1]})
        contacts = bin_pairs(pairs, self.handler, 100)
        self.assertEqual(len(contacts), 0)

if __name__ == '__main__':
    unittest.main()
