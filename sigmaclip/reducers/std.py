import numpy as np

from .reducer import Reducer


class Std(Reducer):
    """Standard deviation of the values.

    With too few values for the given delta degrees of freedom, i.e. a single value for the default sample standard
    deviation, the dispersion is defined as zero instead of NaN. Thus a single surviving value is bounded by itself and
    remains good.
    """

    def __init__(self, ddof: int = 1, *args, **kwargs):
        """Initializes a new standard deviation reducer.

        Args:
            ddof: Delta degrees of freedom, 1 for sample and 0 for population standard deviation.
        """
        Reducer.__init__(self, *args, **kwargs)
        if ddof < 0:
            raise ValueError('Delta degrees of freedom must not be negative.')
        self._ddof = ddof

    def __call__(self, values: np.ndarray) -> float:
        """Calculates the standard deviation of the given values.

        Args:
            values: Finite values.

        Returns:
            Standard deviation or 0, if there are not more values than degrees of freedom.
        """
        if len(values) <= self._ddof:
            return 0.
        return np.std(values, ddof=self._ddof)


__all__ = ['Std']
