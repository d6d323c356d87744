from typing import MutableSequence

import numpy as np


def kth_smallest(a: MutableSequence, k: int):
    """Partially sorts the given sequence in place so that the element at rank k is the k-th smallest.

    After the call, all elements before position k-1 are smaller than or equal to it and all elements
    after it are larger than or equal to it. Uses a two-pointer partition with the element at rank k as
    pivot, narrowing the active range to the side containing k, which runs in O(n) expected time.

    The sequence must not contain NaNs, since comparisons with them break the partition.

    Args:
        a: Mutable sequence to select from, e.g. a numpy array or a view into one.
        k: 1-based rank of the element to select.

    Returns:
        The k-th smallest value, which is now stored at a[k - 1].

    Raises:
        ValueError: If k is not in [1, len(a)].
    """

    # check rank
    n = len(a)
    if k < 1 or k > n:
        raise ValueError('Rank %d out of range for sequence of length %d.' % (k, n))

    # work with 0-based index
    k -= 1
    left, right = 0, n - 1

    # narrow range until it collapses on k
    while left < right:
        pivot = a[k]
        i, j = left, right

        # partition
        while True:
            while a[i] < pivot:
                i += 1
            while pivot < a[j]:
                j -= 1
            if i <= j:
                a[i], a[j] = a[j], a[i]
                i += 1
                j -= 1
            if i > j:
                break

        # continue on side that contains k
        if j < k:
            left = i
        if k < i:
            right = j

    return a[k]


def fast_median(a: MutableSequence):
    """Median of a sequence using selection instead of sorting. The sequence is reordered in place.

    For an empty sequence, zero of the sequence's value type is returned, which is only a safe default
    and not a meaningful median.

    Args:
        a: Mutable sequence without NaNs.

    Returns:
        Median of the sequence.
    """

    # empty?
    n = len(a)
    if n == 0:
        return a.dtype.type(0) if isinstance(a, np.ndarray) else 0.

    # even number of elements requires average of both middle ones
    if n % 2 == 0:
        m1 = kth_smallest(a, n // 2)
        m2 = kth_smallest(a, n // 2 + 1)
        return 0.5 * m1 + 0.5 * m2
    else:
        return kth_smallest(a, (n + 1) // 2)


__all__ = ['kth_smallest', 'fast_median']
