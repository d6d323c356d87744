import logging
from typing import Callable, Tuple, Union

import numpy as np

from .object import sigmaclipObject
from .reducers import get_reducer


log = logging.getLogger(__name__)

# type for reducer definitions
ReducerDefinition = Union[Callable, str, dict]


class SigmaClip(sigmaclipObject):
    """Iterative sigma clipping.

    In each iteration, a central value and a dispersion are calculated from the values that have not been rejected
    yet, the bounds [center - sigma_lower * spread, center + sigma_upper * spread] are derived and all values outside
    of them are rejected. Iterations stop, when no more values are rejected, no values are left, or the maximum number
    of iterations is reached. Bounds are inclusive on both ends.

    Non-finite values and values flagged as bad in an optional mask never enter the statistics. During the iterations,
    the surviving values are kept in the first part of a scratch buffer, which can be passed in by the caller to avoid
    reallocating the scratch storage when clipping many arrays of the same size. Temporary masks are still created in
    each iteration. A buffer must never be used by two calls at the same time.
    """

    def __init__(self, sigma_lower: float = 3, sigma_upper: float = 3, maxiter: int = 5,
                 cent_reducer: ReducerDefinition = 'median', std_reducer: ReducerDefinition = 'std',
                 bad: bool = True, *args, **kwargs):
        """Initializes a new sigma clipper.

        Args:
            sigma_lower: Number of dispersions below the central value for lower bound.
            sigma_upper: Number of dispersions above the central value for upper bound.
            maxiter: Maximum number of iterations, -1 for no limit.
            cent_reducer: Reducer for central value, see get_reducer() for possible definitions.
            std_reducer: Reducer for dispersion, see get_reducer() for possible definitions.
            bad: Value in masks that denotes a bad datum.

        Raises:
            ValueError: If any of the parameters is invalid.
        """
        sigmaclipObject.__init__(self, *args, **kwargs)

        # check sigmas
        if not (sigma_lower >= 0 and sigma_upper >= 0):
            raise ValueError('Sigmas must not be negative, got %s/%s.' % (sigma_lower, sigma_upper))
        self.sigma_lower = float(sigma_lower)
        self.sigma_upper = float(sigma_upper)

        # check maxiter
        if int(maxiter) != maxiter or maxiter < -1:
            raise ValueError('Maximum number of iterations must be an integer >= -1, got %s.' % maxiter)
        self.maxiter = int(maxiter)

        # reducers
        self.cent_reducer = get_reducer(cent_reducer, log=self._log)
        self.std_reducer = get_reducer(std_reducer, log=self._log)
        self.bad = bool(bad)

    @classmethod
    def from_config(cls, config: dict, log: logging.Logger = None) -> 'SigmaClip':
        """Create a new sigma clipper from a configuration dictionary.

        Args:
            config: Dictionary with parameters for constructor.
            log: Logger to use.

        Returns:
            New sigma clipper.
        """
        return cls(**({} if config is None else config), log=log)

    @staticmethod
    def _check_data(data) -> np.ndarray:
        """Returns data as numpy array and makes sure that it contains real numbers."""
        data = np.asarray(data)
        if not np.issubdtype(data.dtype, np.floating) and not np.issubdtype(data.dtype, np.integer):
            raise TypeError('Only real-valued data can be clipped, got %s.' % data.dtype)
        return data

    @staticmethod
    def _check_mask(mask, data: np.ndarray) -> Union[np.ndarray, None]:
        """Returns mask as boolean numpy array of same shape as data."""
        if mask is None:
            return None
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != data.shape:
            raise ValueError('Shape of mask %s does not match shape of data %s.' % (mask.shape, data.shape))
        return mask

    @staticmethod
    def _check_buffer(buffer: np.ndarray, data: np.ndarray) -> np.ndarray:
        """Returns a buffer that is large enough for the given data, allocating one, if none is given."""

        # create new one? integers are promoted to float
        if buffer is None:
            return np.empty(data.size, dtype=data.dtype if np.issubdtype(data.dtype, np.floating) else np.float64)

        # check given one
        if not isinstance(buffer, np.ndarray) or buffer.ndim != 1:
            raise ValueError('Buffer must be a one-dimensional numpy array.')
        if buffer.size < data.size:
            raise ValueError('Buffer of size %d is too small for data of size %d.' % (buffer.size, data.size))
        if not np.can_cast(data.dtype, buffer.dtype, casting='safe'):
            raise ValueError('Buffer of type %s cannot hold data of type %s.' % (buffer.dtype, data.dtype))
        if not buffer.flags.writeable:
            raise ValueError('Buffer is not writeable.')
        return buffer

    def bounds(self, data, mask=None, buffer: np.ndarray = None) -> Tuple[float, float]:
        """Calculates lower and upper bounds for good values in the given data.

        Args:
            data: Data to calculate bounds for, the data itself is not modified.
            mask: If given, boolean mask of same shape as data, values flagged as bad are excluded from statistics.
            buffer: If given, one-dimensional scratch array with at least as many elements as data, reused instead of
                allocating new scratch storage. Integer data is stored as float64, if no buffer is given.

        Returns:
            Tuple of lower and upper bound. If there are no valid values at all, (0, 0) is returned.
        """

        # check input
        data = self._check_data(data)
        mask = self._check_mask(mask, data)
        buffer = self._check_buffer(buffer, data)

        # finite values, not masked as bad
        values = data.ravel()
        valid = np.isfinite(values)
        if mask is not None:
            valid &= mask.ravel() != self.bad

        # nothing left?
        count = np.count_nonzero(valid)
        if count == 0:
            zero = data.dtype.type(0)
            return zero, zero

        # copy valid values into buffer
        buffer[:count] = values[valid]

        # iterate
        iteration = 0
        while True:
            # current good values
            live = buffer[:count]

            # calculate bounds
            center = self.cent_reducer(live)
            spread = self.std_reducer(live)
            lower = center - spread * self.sigma_lower
            upper = center + spread * self.sigma_upper

            # values within bounds
            good = (live >= lower) & (live <= upper)
            new_count = np.count_nonzero(good)
            self.log.debug('Iteration %d: center=%g, spread=%g, bounds=[%g, %g], %d of %d values good.',
                           iteration + 1, center, spread, lower, upper, new_count, count)

            # converged?
            if new_count == count:
                return lower, upper

            # move good values to the front of the buffer
            buffer[:new_count] = live[good]
            count = new_count
            iteration += 1

            # maximum number of iterations reached?
            if self.maxiter != -1 and iteration >= self.maxiter:
                self.log.debug('Reached maximum number of iterations.')
                return lower, upper

            # no values left?
            if count == 0:
                self.log.debug('No values left within bounds.')
                return lower, upper

    @staticmethod
    def _outliers(data: np.ndarray, lower: float, upper: float) -> np.ndarray:
        """Returns a mask with all non-finite values and all values outside of the given bounds."""
        with np.errstate(invalid='ignore'):
            return ~np.isfinite(data) | (data < lower) | (data > upper)

    def mask(self, data, mask=None, buffer: np.ndarray = None, out: np.ndarray = None) -> np.ndarray:
        """Creates an outlier mask for the given data.

        Args:
            data: Data to create mask for, not modified.
            mask: If given, values flagged as bad are excluded from statistics and marked as outliers.
            buffer: If given, scratch buffer for calculating the bounds.
            out: If given, boolean array of same shape as data to write mask into.

        Returns:
            Boolean mask that is True for all outliers, non-finite values and values flagged in given mask.
        """

        # check input
        data = self._check_data(data)
        mask = self._check_mask(mask, data)
        if out is not None and (not isinstance(out, np.ndarray) or out.shape != data.shape or out.dtype != bool):
            raise ValueError('Output mask must be a boolean array of shape %s.' % (data.shape,))

        # get bounds
        lower, upper = self.bounds(data, mask=mask, buffer=buffer)

        # create mask
        outliers = self._outliers(data, lower, upper)
        if mask is not None:
            outliers |= mask == self.bad

        # write into output array?
        if out is not None:
            out[...] = outliers
            return out
        return outliers

    def clip_inplace(self, data: np.ndarray, mask=None, buffer: np.ndarray = None) -> np.ndarray:
        """Sigma clips the given array in place by replacing all outliers with NaN.

        Values that are NaN already stay NaN, non-finite values are always replaced. The given mask only affects the
        calculation of the bounds.

        Args:
            data: Floating point numpy array to clip.
            mask: If given, values flagged as bad are excluded from statistics.
            buffer: If given, scratch buffer for calculating the bounds.

        Returns:
            The given array.

        Raises:
            TypeError: If data is not a floating point numpy array.
        """

        # check type
        if not isinstance(data, np.ndarray):
            raise TypeError('Only numpy arrays can be clipped in place.')
        if not np.issubdtype(data.dtype, np.floating):
            raise TypeError('Only floating point arrays can be clipped in place, got %s.' % data.dtype)

        # get bounds and replace outliers
        lower, upper = self.bounds(data, mask=mask, buffer=buffer)
        data[self._outliers(data, lower, upper)] = np.nan
        return data

    def clip(self, data, mask=None, buffer: np.ndarray = None) -> np.ndarray:
        """Sigma clips a copy of the given data, see clip_inplace.

        Integer data is converted to float64, floating point data keeps its type.

        Args:
            data: Data to clip, not modified.
            mask: If given, values flagged as bad are excluded from statistics.
            buffer: If given, scratch buffer for calculating the bounds.

        Returns:
            Clipped copy of data.
        """
        data = self._check_data(data)
        dtype = data.dtype if np.issubdtype(data.dtype, np.floating) else np.float64
        return self.clip_inplace(np.array(data, dtype=dtype), mask=mask, buffer=buffer)

    def clip_rows(self, data: np.ndarray, mask=None, inplace: bool = False) -> Tuple[np.ndarray, np.ndarray]:
        """Sigma clips each row of a 2D array separately, reusing a single scratch buffer for all rows.

        Args:
            data: 2D array to clip.
            mask: If given, values flagged as bad are excluded from statistics.
            inplace: If True, data is clipped in place, otherwise a copy is clipped.

        Returns:
            Tuple of clipped array and array of shape (nrows, 2) containing lower and upper bound for each row.
        """

        # check input
        if inplace:
            if not isinstance(data, np.ndarray) or not np.issubdtype(data.dtype, np.floating):
                raise TypeError('Only floating point numpy arrays can be clipped in place.')
            out = data
        else:
            data = self._check_data(data)
            out = np.array(data, dtype=data.dtype if np.issubdtype(data.dtype, np.floating) else np.float64)
        if out.ndim != 2:
            raise ValueError('Only 2D arrays can be clipped row-wise, got %d dimensions.' % out.ndim)
        mask = self._check_mask(mask, out)

        # one buffer for all rows
        buffer = np.empty(out.shape[1], dtype=out.dtype)
        bounds = np.empty((out.shape[0], 2), dtype=np.float64)

        # loop rows
        for i in range(out.shape[0]):
            row_mask = None if mask is None else mask[i]
            row = out[i]
            lower, upper = self.bounds(row, mask=row_mask, buffer=buffer)
            row[self._outliers(row, lower, upper)] = np.nan
            bounds[i] = lower, upper

        # finished
        self.log.debug('Clipped %d rows.', out.shape[0])
        return out, bounds

    def stats(self, data, mask=None, buffer: np.ndarray = None) -> Tuple[float, float, float]:
        """Calculates mean, median and (population) standard deviation of the values that survive clipping.

        Args:
            data: Data to calculate statistics for, not modified.
            mask: If given, values flagged as bad are excluded from statistics.
            buffer: If given, scratch buffer for calculating the bounds.

        Returns:
            Tuple of mean, median and standard deviation. NaN for all of them, if no values survive.
        """

        # get good values
        data = self._check_data(data)
        good = data[~self.mask(data, mask=mask, buffer=buffer)]

        # nothing left?
        if good.size == 0:
            return np.nan, np.nan, np.nan

        # calculate stats
        return np.mean(good), np.median(good), np.std(good)


def compute_bounds(data, mask=None, buffer: np.ndarray = None, sigma_lower: float = 3, sigma_upper: float = 3,
                   cent_reducer: ReducerDefinition = 'median', std_reducer: ReducerDefinition = 'std',
                   maxiter: int = 5, bad: bool = True) -> Tuple[float, float]:
    """Calculates lower and upper bounds for good values in data by iterative sigma clipping.

    Args:
        data: Data to calculate bounds for.
        mask: If given, boolean mask of same shape as data, values equal to bad are excluded from statistics.
        buffer: If given, one-dimensional scratch array with at least as many elements as data.
        sigma_lower: Number of dispersions below the central value for lower bound.
        sigma_upper: Number of dispersions above the central value for upper bound.
        cent_reducer: Reducer for central value, defaults to a selection-based median.
        std_reducer: Reducer for dispersion, defaults to sample standard deviation.
        maxiter: Maximum number of iterations, -1 for no limit.
        bad: Value in mask that denotes a bad datum.

    Returns:
        Tuple of lower and upper bound, (0, 0) if data contains no valid values.
    """
    clipper = SigmaClip(sigma_lower=sigma_lower, sigma_upper=sigma_upper, maxiter=maxiter,
                        cent_reducer=cent_reducer, std_reducer=std_reducer, bad=bad, log=log)
    return clipper.bounds(data, mask=mask, buffer=buffer)


def clip_to_mask(data, mask=None, buffer: np.ndarray = None, out: np.ndarray = None, sigma_lower: float = 3,
                 sigma_upper: float = 3, cent_reducer: ReducerDefinition = 'median',
                 std_reducer: ReducerDefinition = 'std', maxiter: int = 5, bad: bool = True) -> np.ndarray:
    """Sigma clips data and returns a mask that is True for all outliers. Data is not modified.

    Non-finite values and values flagged as bad in the given mask are always marked. See compute_bounds() for the
    other parameters.

    Args:
        out: If given, boolean array of same shape as data to write mask into.

    Returns:
        Boolean outlier mask.
    """
    clipper = SigmaClip(sigma_lower=sigma_lower, sigma_upper=sigma_upper, maxiter=maxiter,
                        cent_reducer=cent_reducer, std_reducer=std_reducer, bad=bad, log=log)
    return clipper.mask(data, mask=mask, buffer=buffer, out=out)


def clip_in_place(data: np.ndarray, mask=None, buffer: np.ndarray = None, sigma_lower: float = 3,
                  sigma_upper: float = 3, cent_reducer: ReducerDefinition = 'median',
                  std_reducer: ReducerDefinition = 'std', maxiter: int = 5, bad: bool = True) -> np.ndarray:
    """Sigma clips a floating point array in place, replacing all outliers with NaN.

    See compute_bounds() for the parameters.

    Returns:
        The given array.
    """
    clipper = SigmaClip(sigma_lower=sigma_lower, sigma_upper=sigma_upper, maxiter=maxiter,
                        cent_reducer=cent_reducer, std_reducer=std_reducer, bad=bad, log=log)
    return clipper.clip_inplace(data, mask=mask, buffer=buffer)


def clip_copy(data, mask=None, buffer: np.ndarray = None, sigma_lower: float = 3, sigma_upper: float = 3,
              cent_reducer: ReducerDefinition = 'median', std_reducer: ReducerDefinition = 'std',
              maxiter: int = 5, bad: bool = True) -> np.ndarray:
    """Sigma clips a copy of data, replacing all outliers with NaN. Integer data is converted to float64.

    See compute_bounds() for the parameters.

    Returns:
        Clipped copy of data.
    """
    clipper = SigmaClip(sigma_lower=sigma_lower, sigma_upper=sigma_upper, maxiter=maxiter,
                        cent_reducer=cent_reducer, std_reducer=std_reducer, bad=bad, log=log)
    return clipper.clip(data, mask=mask, buffer=buffer)


__all__ = ['SigmaClip', 'compute_bounds', 'clip_to_mask', 'clip_in_place', 'clip_copy']
