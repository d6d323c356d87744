import logging

import numpy as np
import pytest
from scipy.stats import median_abs_deviation

from sigmaclip.reducers import Median, Mean, Std, MadStd, get_reducer


def custom_center(values):
    return 42.


class TestReducers(object):
    def test_median(self, rng):
        a = rng.normal(10., 2., 101)
        assert Median()(a.copy()) == np.median(a)
        assert Median()(np.array([])) == 0.

    def test_mean(self, rng):
        a = rng.normal(10., 2., 100)
        assert Mean()(a) == pytest.approx(np.mean(a))
        assert Mean()(np.array([])) == 0.

    def test_std(self, rng):
        a = rng.normal(10., 2., 100)
        assert Std()(a) == pytest.approx(np.std(a, ddof=1))
        assert Std(ddof=0)(a) == pytest.approx(np.std(a))

    def test_std_single(self):
        # a single value has no dispersion
        assert Std()(np.array([5.])) == 0.
        assert Std()(np.array([])) == 0.
        assert Std(ddof=0)(np.array([5.])) == 0.

    def test_std_invalid(self):
        with pytest.raises(ValueError):
            Std(ddof=-1)

    def test_mad_std(self, rng):
        a = rng.normal(10., 2., 1000)
        assert MadStd()(a) == pytest.approx(median_abs_deviation(a, scale='normal'))
        assert MadStd()(a) == pytest.approx(2., rel=0.1)
        assert MadStd()(np.array([])) == 0.


class TestGetReducer(object):
    def test_callable(self):
        func = lambda x: 1.
        assert get_reducer(func) is func

    def test_short_name(self):
        assert isinstance(get_reducer('median'), Median)
        assert isinstance(get_reducer('Mean'), Mean)
        assert isinstance(get_reducer('mad_std'), MadStd)

    def test_class_name(self):
        assert isinstance(get_reducer('sigmaclip.reducers.Std'), Std)

    def test_function_name(self):
        assert get_reducer('numpy.mean') is np.mean

    def test_dict(self):
        # parameters are passed to constructor
        red = get_reducer({'class': 'sigmaclip.reducers.Std', 'ddof': 0})
        assert isinstance(red, Std)
        assert red(np.array([5.])) == 0.
        assert red(np.array([1., 3.])) == 1.

        # short name in dict
        red = get_reducer({'class': 'std', 'ddof': 0})
        assert red(np.array([1., 3.])) == 1.

    def test_logger(self):
        log = logging.getLogger('sigmaclip.test')
        assert get_reducer('median', log=log).log is log

    def test_invalid(self):
        with pytest.raises(ValueError):
            get_reducer(42)
        with pytest.raises(ValueError):
            get_reducer({'ddof': 1})
        with pytest.raises(ValueError):
            get_reducer('sigmaclip.version.VERSION')
        with pytest.raises(ValueError):
            get_reducer('unknown')
