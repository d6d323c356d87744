import numpy as np
from scipy.stats import median_abs_deviation

from .reducer import Reducer


class MadStd(Reducer):
    """Robust standard deviation derived from the median absolute deviation.

    The MAD is scaled by ~1.4826, so that it is consistent with the standard deviation of a normal distribution.
    """

    def __init__(self, *args, **kwargs):
        """Initializes a new MAD-based dispersion reducer."""
        Reducer.__init__(self, *args, **kwargs)

    def __call__(self, values: np.ndarray) -> float:
        if len(values) == 0:
            return 0.
        return median_abs_deviation(values, scale='normal')


__all__ = ['MadStd']
