import numpy as np

from .reducer import Reducer


class Mean(Reducer):
    """Arithmetic mean of the values, zero for an empty set."""

    def __init__(self, *args, **kwargs):
        """Initializes a new mean reducer."""
        Reducer.__init__(self, *args, **kwargs)

    def __call__(self, values: np.ndarray) -> float:
        return np.mean(values) if len(values) > 0 else 0.


__all__ = ['Mean']
