import numpy as np

from ..object import sigmaclipObject


class Reducer(sigmaclipObject):
    """Reducer is the base class for all objects that reduce a set of values to a single scalar, e.g. a central
    value or a dispersion.

    Reducers are called once per clipping iteration on the values still considered good. They may reorder the given
    values in place, but must not keep a reference to them after returning.
    """

    def __init__(self, *args, **kwargs):
        """Initialize a new reducer."""
        sigmaclipObject.__init__(self, *args, **kwargs)

    def __call__(self, values: np.ndarray) -> float:
        """Reduces the given values to a scalar.

        Args:
            values: Finite values to reduce.

        Returns:
            Single scalar value.
        """
        raise NotImplementedError


__all__ = ['Reducer']
