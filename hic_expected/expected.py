"""
Compute an "expected" contact density vector from pair data.

Three steps to use ExpectedValueCalculation:
    (1) instantiate it with a ChromosomeHandler (the genome) and a bin size
    (2) loop through the binned pair data, calling add_distance for each
        pixel; this may be done from several threads
    (3) when the data loop is complete, call compute_density (or
        get_expected_value_function, which computes and packs the result)

Example:
    handler = ChromosomeHandler.from_chromsizes("mm10.len.tsv")
    calc = ExpectedValueCalculation(handler, 100000, NormalizationType.NONE)
    for chrom_idx, bin1, bin2, count in contacts.itertuples(index=False):
        calc.add_distance(chrom_idx, bin1, bin2, count)
    func = calc.get_expected_value_function()
    func.get_expected_value(1, 10)
"""
import logging
import math
import threading
from collections import namedtuple
from enum import Enum

import numpy as np

from .doublearray import LargeDoubleArray
from .expected_function import ExpectedValueFunction

logger = logging.getLogger(__name__)

# sparsity cutoff, 400 reads ~ 5% shot noise
MIN_VALS_NEEDED = 400
ROLLING_MEDIAN_RADIUS = 100

class NormalizationType(Enum):
    NONE = "NONE"
    VC = "VC"
    VC_SQRT = "VC_SQRT"
    KR = "KR"
    SCALE = "SCALE"

class HiCUnit(Enum):
    BP = "BP"
    FRAG = "FRAG"

ContactRecord = namedtuple("ContactRecord", "bin_x bin_y counts")

def is_valid_norm_value(v):
    """
    A weight is usable when it is a finite positive number.
    """
    return v is not None and math.isfinite(v) and v > 0
def adaptive_window_average(actual_distances, possible_distances, max_num_bins, min_vals=MIN_VALS_NEEDED):
    """
    Windowed observed/possible ratio along the distance axis.
    The window around each distance is widened until it holds at least
    min_vals observations, and shrunk back symmetrically where data is dense.
    Input:
        actual_distances: observed weight sum per distance
        possible_distances: number of bin pairs per distance
        max_num_bins: number of distances to compute
        min_vals: sparsity floor
    Output:
        np.ndarray of length max_num_bins
    """
    max_num_bins = int(max_num_bins)
    avg = np.zeros(max_num_bins, dtype=np.float64)
    if max_num_bins == 0:
        return avg
    # plain floats, indexing numpy scalars one by one is slow
    actual = [float(v) for v in actual_distances[:max_num_bins]]
    possible = [float(v) for v in possible_distances[:max_num_bins]]

    num_sum = actual[0]
    den_sum = possible[0]
    bound1 = 0
    bound2 = 0
    for ii in range(max_num_bins):
        if num_sum < min_vals:
            # only runs from a cold start; afterwards the window keeps >= min_vals
            while num_sum < min_vals and bound2 < max_num_bins - 1:
                bound2 += 1
                num_sum += actual[bound2]
                den_sum += possible[bound2]
        elif bound2 - bound1 > 0:
            while bound2 - bound1 > 0 and num_sum - actual[bound1] - actual[bound2] >= min_vals:
                num_sum = num_sum - actual[bound1] - actual[bound2]
                den_sum = den_sum - possible[bound1] - possible[bound2]
                bound1 += 1
                bound2 -= 1
        avg[ii] = num_sum / den_sum if den_sum != 0 else np.nan
        # grow by 2 to keep the window centered on the next distance
        if bound2 + 2 < max_num_bins:
            num_sum += actual[bound2 + 1] + actual[bound2 + 2]
            den_sum += possible[bound2 + 1] + possible[bound2 + 2]
            bound2 += 2
        elif bound2 + 1 < max_num_bins:
            num_sum += actual[bound2 + 1]
            den_sum += possible[bound2 + 1]
            bound2 += 1
        # else bound2 is at the limit already
    return avg
class ExpectedValueCalculation:
    """
    Genome-wide expected density and per-chromosome scale factors.

    add_distance is thread safe. compute_density must only run after all
    add_distance calls have returned; ordering is up to the caller.
    bin_size must be positive, a zero bin size raises ZeroDivisionError.
    """
    def __init__(self, chromosome_handler, bin_size, norm_type=NormalizationType.NONE):
        """
        Input:
            chromosome_handler: ChromosomeHandler, genome used for sizes
            bin_size: resolution in bp
            norm_type: NormalizationType of the weights fed in, carried to the output
        """
        self.norm_type = norm_type
        self.bin_size = int(bin_size)
        self._lock = threading.Lock()

        max_num_chromosomes = chromosome_handler.get_max_chrom_index() + 1
        self.chromosomes_map = [None] * max_num_chromosomes
        max_len = 0
        for chromosome in chromosome_handler.get_chromosome_array_without_all_by_all():
            if chromosome is not None:
                self.chromosomes_map[chromosome.index] = chromosome
                max_len = max(max_len, int(chromosome.length))

        self.number_of_bins = max_len // self.bin_size + 1
        self.chromosome_counts = np.zeros(max_num_chromosomes, dtype=np.float64)
        self.chr_scale_factors = np.zeros(max_num_chromosomes, dtype=np.float64)
        self.actual_distances = np.zeros(self.number_of_bins, dtype=np.float64)
        self.possible_distances = np.zeros(self.number_of_bins, dtype=np.float64)
        self.max_num_bins = 0
        self.density_avg = None
    def _known_chromosome(self, chr_idx):
        return 0 <= chr_idx < len(self.chromosomes_map) and self.chromosomes_map[chr_idx] is not None
    def add_distance(self, chr_idx, bin1, bin2, weight):
        """
        Add an observed pixel. Called for each binned pair in the data set.
        Non-finite weights and unknown chromosomes are skipped.
        A distance past the longest chromosome raises IndexError and leaves
        the accumulators untouched.
        Input:
            chr_idx: index of the chromosome the pixel is on
            bin1, bin2: positions in bins
            weight: contact count (or normalized value)
        """
        if not math.isfinite(weight):
            return
        chr_idx = int(chr_idx)
        if not self._known_chromosome(chr_idx):
            return
        dist = abs(int(bin1) - int(bin2))
        if dist >= self.number_of_bins:
            raise IndexError(f"distance {dist} out of range for {self.number_of_bins} bins")
        with self._lock:
            self.chromosome_counts[chr_idx] += weight
            self.actual_distances[dist] += weight
    def add_contact_record(self, chr_idx, record):
        if is_valid_norm_value(record.counts):
            self.add_distance(chr_idx, record.bin_x, record.bin_y, record.counts)
    def _counted_chromosomes(self):
        # chromosomes with at least one read
        return [
            (z, chrom) for z, chrom in enumerate(self.chromosomes_map)
            if chrom is not None and self.chromosome_counts[z] >= 1
            ]
    def compute_density(self):
        """
        Compute the density: the genome-wide average of observed over
        possible contacts at each distance, smoothed, plus the scale factor
        of every chromosome that makes its expected total equal its observed
        total.
        "possible distances" is the number of slots on each diagonal, so
        sum along a diagonal / slots gives a uniform expected density.
        """
        with self._lock:
            counted = self._counted_chromosomes()
            n_chr_bins = np.zeros(len(self.chromosomes_map), dtype=np.int64)
            for z, chrom in counted:
                n_chr_bins[z] = int(chrom.length) // self.bin_size
            max_num_bins = int(max((n_chr_bins[z] for z, _ in counted), default=0))

            possible_distances = np.zeros(self.number_of_bins, dtype=np.float64)
            for z, _ in counted:
                n = int(n_chr_bins[z])
                possible_distances[:n] += np.arange(n, 0, -1, dtype=np.float64)
            logger.debug(
                "%d chromosomes counted, max # bins %d of %d",
                len(counted), max_num_bins, self.number_of_bins
                )

            density = LargeDoubleArray.from_array(
                adaptive_window_average(self.actual_distances, possible_distances, max_num_bins)
                )
            density.rolling_median(ROLLING_MEDIAN_RADIUS)

            # scale factor: sum of expected over the chromosome's upper triangle / observed
            density_values = density.to_numpy()
            chr_scale_factors = np.zeros(len(self.chromosomes_map), dtype=np.float64)
            for z, _ in counted:
                n = min(int(n_chr_bins[z]), max_num_bins)
                diag_lengths = n_chr_bins[z] - np.arange(n, dtype=np.float64)
                expected_count = float(np.sum(diag_lengths * density_values[:n]))
                chr_scale_factors[z] = expected_count / self.chromosome_counts[z]

            self.possible_distances = possible_distances
            self.max_num_bins = max_num_bins
            self.density_avg = density
            self.chr_scale_factors = chr_scale_factors
    def get_chr_scale_factors(self):
        """
        Chromosome index -> scale factor, only for factors > 0.
        """
        scale_factors = {}
        for z, factor in enumerate(self.chr_scale_factors):
            if factor > 0:
                scale_factors[z] = float(factor)
            elif self.chromosomes_map[z] is not None and self.chromosome_counts[z] != 0:
                logger.debug("No valid scale factor for chromosome %d (%s)", z, factor)
        return scale_factors
    def get_type(self):
        return self.norm_type
    def get_expected_value_function(self):
        self.compute_density()
        return ExpectedValueFunction(
            self.norm_type, HiCUnit.BP, self.bin_size,
            self.density_avg, self.get_chr_scale_factors()
            )
