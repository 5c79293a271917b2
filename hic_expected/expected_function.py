import numpy as np

class ExpectedValueFunction:
    """
    Expected contact value at a distance, bound to a computed density curve
    and per-chromosome scale factors.
    Chromosomes without a scale factor are not scaled.
    """
    def __init__(self, norm_type, unit, bin_size, expected_values, norm_factors):
        """
        Input:
            norm_type: NormalizationType the curve was computed from
            unit: HiCUnit of bin_size
            bin_size: resolution
            expected_values: LargeDoubleArray, expected value per distance
            norm_factors: dict, chromosome index -> scale factor
        """
        self.norm_type = norm_type
        self.unit = unit
        self.bin_size = bin_size
        self.expected_values = expected_values
        self.norm_factors = dict(norm_factors) if norm_factors is not None else {}
    def _norm_factor(self, chr_idx):
        return self.norm_factors.get(chr_idx, 1.0)
    def get_expected_value(self, chr_idx, distance):
        """
        Input:
            chr_idx: chromosome index
            distance: distance in bins; clamped into the curve,
                distances past the end use the last value
        Output:
            float
        """
        length = len(self.expected_values)
        if length == 0:
            raise ValueError("Empty expected curve.")
        distance = min(max(int(distance), 0), length - 1)
        return self.expected_values.get(distance) / self._norm_factor(chr_idx)
    def get_expected_values_no_normalization(self):
        return self.expected_values.to_numpy()
    def get_expected_values_with_normalization(self, chr_idx):
        return self.expected_values.to_numpy() / self._norm_factor(chr_idx)
    def get_norm_factors(self):
        return dict(self.norm_factors)
    def get_type(self):
        return self.norm_type
    def get_unit(self):
        return self.unit
    def get_bin_size(self):
        return self.bin_size
    def get_length(self):
        return np.int64(len(self.expected_values))
