import logging
from typing import IO, Union

import yaml


log = logging.getLogger(__name__)

# options accepted in a configuration
OPTIONS = ['sigma_lower', 'sigma_upper', 'maxiter', 'cent_reducer', 'std_reducer', 'bad']


def load_config(stream: Union[IO, str, None]) -> dict:
    """Loads a sigma clipping configuration from a YAML document.

    Example:
        sigma_lower: 3
        sigma_upper: 2.5
        maxiter: -1
        cent_reducer: median
        std_reducer:
          class: sigmaclip.reducers.Std
          ddof: 0

    Args:
        stream: Open file or string containing YAML. None gives an empty configuration.

    Returns:
        Dictionary with configuration.

    Raises:
        ValueError: If configuration is not a mapping or contains unknown options.
    """

    # nothing?
    if stream is None:
        return {}

    # load YAML
    config = yaml.load(stream, Loader=yaml.FullLoader)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError('Configuration must be a mapping of options.')

    # check options
    unknown = [key for key in config.keys() if key not in OPTIONS]
    if len(unknown) > 0:
        raise ValueError('Unknown options in configuration: %s' % ', '.join(map(str, unknown)))

    # finished
    log.debug('Loaded configuration: %s', config)
    return config


__all__ = ['OPTIONS', 'load_config']
