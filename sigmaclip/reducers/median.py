import numpy as np

from .reducer import Reducer
from ..utils.select import fast_median


class Median(Reducer):
    """Median of the values, calculated by selection instead of a full sort.

    The given values are partially reordered in place. For an empty set, zero is returned.
    """

    def __init__(self, *args, **kwargs):
        """Initializes a new median reducer."""
        Reducer.__init__(self, *args, **kwargs)

    def __call__(self, values: np.ndarray) -> float:
        return fast_median(values)


__all__ = ['Median']
