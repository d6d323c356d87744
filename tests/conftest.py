import pytest
import numpy as np


@pytest.fixture()
def rng():
    yield np.random.RandomState(42)


@pytest.fixture()
def outlier_data():
    # normally distributed data limited to two sigma, so that only the three strong outliers get clipped
    data = np.clip(np.random.RandomState(1).normal(100., 1., 1000), 98., 102.)
    data[[10, 542, 750]] = [0., 200., -50.]
    yield data
