import gzip
import os
import shutil
import unittest

from hic_expected.hicio import divide_name, parse_pairs

PAIRS_HEADER = (
    "## pairs format v1.0\n"
    "#chromsize: chr1 1000\n"
    "#chromsize: chr2 2000\n"
    "#columns: readID chr1 pos1 chr2 pos2 strand1 strand2\n"
)
PAIRS_BODY = (
    "r1\tchr1\t10\tchr1\t90\t+\t-\n"
    "r2\tchr1\t150\tchr1\t990\t-\t-\n"
    "r3\tchr2\t1000\tchr2\t1999\t+\t+\n"
    "r4\tchr1\t5\tchr2\t5\t+\t+\n"
)
def write_pairs(filep, header=PAIRS_HEADER, body=PAIRS_BODY):
    with gzip.open(filep, "wt") as f:
        f.write(header)
        f.write(body)
    return filep

class TestParsePairs(unittest.TestCase):
    def setUp(self):
        self.output_dir = os.path.join(os.path.dirname(__file__), "output", "test_hicio")
        os.makedirs(self.output_dir, exist_ok=True)
    def tearDown(self):
        shutil.rmtree(self.output_dir, ignore_errors=True)
    def test_parse_pairs(self):
        filep = write_pairs(os.path.join(self.output_dir, "sample1.pairs.gz"))
        pairs = parse_pairs(filep)
        self.assertEqual(len(pairs), 4)
        self.assertEqual(list(pairs.columns), "readID chr1 pos1 chr2 pos2 strand1 strand2".split())
        self.assertEqual(pairs.attrs["name"], "sample1")
        self.assertEqual(pairs.attrs["chromosomes"], ["chr1", "chr2"])
        self.assertEqual(pairs.attrs["lengths"], [1000, 2000])
        self.assertEqual(pairs["pos2"].tolist(), [90, 990, 1999, 5])
    def test_no_columns(self):
        filep = write_pairs(
            os.path.join(self.output_dir, "bad.pairs.gz"),
            header="## pairs format v1.0\n"
        )
        with self.assertRaises(ValueError):
            parse_pairs(filep)
    def test_divide_name(self):
        self.assertEqual(divide_name("/a/b/name.pairs.gz"), ("name", ".pairs.gz"))
        self.assertEqual(divide_name("name"), ("name", ""))

if __name__ == '__main__':
    unittest.main()
