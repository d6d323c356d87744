import logging
from typing import Callable, Union

from ..object import sigmaclipObject
from .reducer import Reducer
from .median import Median
from .mean import Mean
from .std import Std
from .madstd import MadStd


# short names for reducers usable in configurations
REDUCERS = {
    'median': Median,
    'mean': Mean,
    'std': Std,
    'mad_std': MadStd
}


def get_reducer(definition: Union[Callable, str, dict], log: logging.Logger = None) -> Callable:
    """Get a reducer from the given definition.

    Args:
        definition: Either a callable, the short name of a reducer, the full name of a class or function including
            its modules, or a dict with a "class" element and parameters for the constructor.
        log: Logger for newly created reducers.

    Returns:
        Callable that reduces an array to a scalar.

    Raises:
        ValueError: If definition is invalid.
    """

    if callable(definition):
        # got a callable already
        return definition

    elif isinstance(definition, str):
        # short name?
        if definition.lower() in REDUCERS:
            return REDUCERS[definition.lower()](log=log)

        # full name of class or function
        obj = sigmaclipObject.get_class_from_string(definition)
        if isinstance(obj, type):
            obj = sigmaclipObject.create_object({'class': definition}, log=log)

    elif isinstance(definition, dict):
        # short name in dict?
        cfg = dict(definition)
        name = cfg.get('class')
        if isinstance(name, str) and name.lower() in REDUCERS:
            return REDUCERS[cfg.pop('class').lower()](**cfg, log=log)

        # create object
        obj = sigmaclipObject.create_object(cfg, log=log)

    else:
        raise ValueError('Unknown type for reducer definition.')

    # check result
    if not callable(obj):
        raise ValueError('Reducer "%s" is not callable.' % definition)
    return obj


__all__ = ['Reducer', 'Median', 'Mean', 'Std', 'MadStd', 'REDUCERS', 'get_reducer']
