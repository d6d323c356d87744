import numpy as np
import pytest

from sigmaclip.utils.select import kth_smallest, fast_median


class TestKthSmallest(object):
    def test_random(self, rng):
        for n in range(1, 60):
            # random array and random rank
            a = rng.normal(0., 1., n)
            expected = np.sort(a)
            k = rng.randint(1, n + 1)

            # select
            value = kth_smallest(a, k)

            # check value and partial order
            assert value == expected[k - 1]
            assert a[k - 1] == value
            assert np.all(a[:k - 1] <= value)
            assert np.all(a[k:] >= value)

            # still same elements
            assert np.array_equal(np.sort(a), expected)

    def test_duplicates(self, rng):
        # many equal values
        a = rng.randint(0, 3, 101).astype(float)
        expected = np.sort(a)

        # every rank
        for k in range(1, len(a) + 1):
            assert kth_smallest(a, k) == expected[k - 1]

    def test_list(self):
        a = [5, 1, 4, 2, 3]
        assert kth_smallest(a, 1) == 1
        assert kth_smallest(a, 5) == 5
        assert kth_smallest(a, 3) == 3
        assert sorted(a) == [1, 2, 3, 4, 5]

    def test_invalid_rank(self):
        with pytest.raises(ValueError):
            kth_smallest(np.array([1., 2.]), 0)
        with pytest.raises(ValueError):
            kth_smallest(np.array([1., 2.]), 3)


class TestFastMedian(object):
    def test_random(self, rng):
        for n in range(1, 201):
            # random array
            a = rng.normal(0., 1., n)
            s = np.sort(a)

            # median from sorted array
            if n % 2 == 0:
                expected = 0.5 * (s[n // 2 - 1] + s[n // 2])
            else:
                expected = s[n // 2]

            # compare
            assert fast_median(a.copy()) == expected

    def test_numpy(self, rng):
        for n in [1, 5, 10, 100, 101]:
            a = rng.normal(0., 1., n)
            assert fast_median(a.copy()) == pytest.approx(np.median(a))

    def test_small(self):
        assert fast_median(np.array([1., 3., 2.])) == 2.
        assert fast_median(np.array([4., 1., 3., 2.])) == 2.5
        assert fast_median([7.]) == 7.

    def test_view(self):
        # median of a view reorders only the view
        a = np.array([9., 3., 1., 2., 100., -100.])
        assert fast_median(a[:4]) == 2.5
        assert np.array_equal(a[4:], [100., -100.])

    def test_narrow_integers(self):
        # average of both middle values must not overflow
        assert fast_median(np.array([200, 200], dtype=np.uint8)) == 200.
        assert fast_median(np.array([255, 254, 255, 254], dtype=np.uint8)) == 254.5
        assert fast_median(np.array([40000, 40001], dtype=np.uint16)) == 40000.5
        assert fast_median(np.array([32767, 32766], dtype=np.int16)) == 32766.5
        assert fast_median(np.array([-32768, -32767], dtype=np.int16)) == -32767.5

    def test_empty(self):
        # zero of the value type
        m = fast_median(np.array([], dtype=np.float32))
        assert m == 0
        assert isinstance(m, np.float32)
        assert fast_median([]) == 0.
