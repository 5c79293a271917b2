import numpy as np
import pandas as pd

class LargeDoubleArray:
    """
    float64 sequence addressed by 64-bit indexes.
    Genome-wide bin counts at fine resolution can outgrow 32-bit sized
    containers, so lengths and indexes are kept as int64.
    """
    def __init__(self, length):
        """
        Input:
            length: number of elements, all set to 0.0
        """
        length = int(length)
        if length < 0:
            raise ValueError("length must be non-negative")
        self._values = np.zeros(np.int64(length), dtype=np.float64)
    @classmethod
    def from_array(cls, values):
        arr = cls(0)
        arr._values = np.array(values, dtype=np.float64).ravel()
        return arr
    def _check_index(self, i):
        i = int(i)
        if i < 0 or i >= len(self._values):
            raise IndexError(f"index {i} out of range for length {len(self._values)}")
        return i
    def get(self, i):
        return float(self._values[self._check_index(i)])
    def set(self, i, value):
        self._values[self._check_index(i)] = value
    def __getitem__(self, i):
        return self.get(i)
    def __setitem__(self, i, value):
        self.set(i, value)
    def __len__(self):
        return len(self._values)
    def get_length(self):
        return np.int64(len(self._values))
    def get_last_value(self):
        return self.get(len(self._values) - 1)
    def to_numpy(self):
        return self._values.copy()
    def rolling_median(self, radius):
        """
        Replace each element with the median of [i-radius, i+radius].
        Windows are clipped at both ends, not padded or wrapped.
        All medians come from the values before the transform.
        NaN values are left out of each window's median, so a NaN is
        replaced by its neighbours' median; only an all-NaN window stays NaN.
        Input:
            radius: half window size, int >= 0
        """
        radius = int(radius)
        if radius < 0:
            raise ValueError("radius must be non-negative")
        if len(self._values) == 0:
            return self
        s = pd.Series(self._values.copy(), dtype="float64")
        self._values = s.rolling(
            window=2 * radius + 1, center=True, min_periods=1
            ).median().to_numpy()
        return self
    def __repr__(self):
        return f"LargeDoubleArray(length={len(self._values)})"
