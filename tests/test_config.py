import io

import numpy as np
import pytest

from sigmaclip import SigmaClip
from sigmaclip.config import load_config
from sigmaclip.reducers import Mean, Std


class TestLoadConfig(object):
    def test_default(self):
        # load config
        config = load_config(io.StringIO(
            'sigma_lower: 2\n'
            'sigma_upper: 2.5\n'
            'maxiter: -1\n'
            'cent_reducer: mean\n'
            'std_reducer:\n'
            '  class: sigmaclip.reducers.Std\n'
            '  ddof: 0\n'
        ))
        assert config['sigma_lower'] == 2
        assert config['std_reducer'] == {'class': 'sigmaclip.reducers.Std', 'ddof': 0}

        # create clipper from it
        clipper = SigmaClip.from_config(config)
        assert clipper.sigma_upper == 2.5
        assert clipper.maxiter == -1
        assert isinstance(clipper.cent_reducer, Mean)
        assert isinstance(clipper.std_reducer, Std)
        assert clipper.std_reducer(np.array([1., 3.])) == 1.

    def test_empty(self):
        assert load_config(None) == {}
        assert load_config(io.StringIO('')) == {}

    def test_file(self, tmpdir):
        filename = str(tmpdir.join('sigmaclip.yaml'))
        with open(filename, 'w') as f:
            f.write('sigma_upper: 4\n')
        with open(filename, 'r') as f:
            assert load_config(f) == {'sigma_upper': 4}

    def test_unknown(self):
        with pytest.raises(ValueError):
            load_config(io.StringIO('sigma: 3\n'))

    def test_no_mapping(self):
        with pytest.raises(ValueError):
            load_config(io.StringIO('- 1\n- 2\n'))
