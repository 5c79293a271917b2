import unittest

import numpy as np
import pandas as pd

from hic_expected.expected import ExpectedValueCalculation
from hic_expected.genome import ChromosomeHandler
from hic_expected.paracalc import add_contacts, mt

class TestParacalc(unittest.TestCase):
    def test_mt(self):
        result = mt(lambda x, y: x * y)(range(10), 3, num_workers=2, progress=False)
        self.assertEqual(sorted(result), [i * 3 for i in range(10)])
    def test_add_contacts(self):
        handler = ChromosomeHandler.from_chromsizes({"chr1": 10000, "chr2": 5000})
        rng = np.random.default_rng(42)
        n = 5000
        contacts = pd.DataFrame(
            {
                "chrom_idx" : rng.integers(1, 3, n),
                "bin1" : rng.integers(0, 50, n),
                "bin2" : rng.integers(0, 50, n),
                "count" : rng.integers(1, 5, n).astype(float),
            }
        )
        calc = ExpectedValueCalculation(handler, 100)
        fed = add_contacts(calc, contacts, num_workers=4, chunksize=333, progress=False)
        self.assertEqual(fed, n)
        dist = (contacts["bin1"] - contacts["bin2"]).abs()
        expected = contacts.groupby(dist)["count"].sum()
        for d, total in expected.items():
            self.assertEqual(calc.actual_distances[d], total)
        by_chrom = contacts.groupby("chrom_idx")["count"].sum()
        for chr_idx, total in by_chrom.items():
            self.assertEqual(calc.chromosome_counts[chr_idx], total)

if __name__ == '__main__':
    unittest.main()
