import logging


class sigmaclipObject(object):
    """Base class for all configurable objects in sigmaclip."""

    def __init__(self, log: logging.Logger = None, *args, **kwargs):
        """Initializes a new object.

        Args:
            log: Logging instance to use.
        """
        self._log = log

    @property
    def log(self) -> logging.Logger:
        """Get logger for this object.

        Returns:
            Logger to use for this object.
        """
        return self._log if self._log is not None else logging.getLogger()

    @staticmethod
    def get_class_from_string(class_name: str) -> object:
        """Take a class (or function) name as a string and return the actual class

        Args:
            class_name: Full name of class including its modules.

        Returns:
            Actual class.

        Raises:
            ValueError: If name does not contain a module.
        """

        # split parts of class name, i.e. modules and class
        parts = class_name.split('.')
        if len(parts) < 2:
            raise ValueError('Name "%s" does not contain a module.' % class_name)

        # join module name
        module_name = ".".join(parts[:-1])

        # import module
        cls = __import__(module_name)

        # fetch class and return it
        for comp in parts[1:]:
            cls = getattr(cls, comp)
        return cls

    @staticmethod
    def create_object(config: dict, log: logging.Logger = None, *args, **kwargs) -> object:
        """Create a new object from a dict.

        Args:
            config: Dictionary with a "class" element to create object from.
            log: Logger to use for new object.

        Returns:
            New object created from config.

        Raises:
            ValueError: Cannot copy config dictionary or no class name given.
        """

        # copy config
        try:
            cfg = dict(config)
        except (TypeError, ValueError):
            raise ValueError('Cannot copy dict: %s' % config)

        # get class name
        class_name = cfg.pop('class', None)
        if class_name is None:
            raise ValueError('No class name given.')

        # create class
        cls = sigmaclipObject.get_class_from_string(class_name)

        # only pass logger to our own objects
        if isinstance(cls, type) and issubclass(cls, sigmaclipObject):
            return cls(*args, **kwargs, **cfg, log=log)
        return cls(*args, **kwargs, **cfg)


def create_object(config: dict, log: logging.Logger = None, *args, **kwargs) -> object:
    """Create a new object from a dict, see sigmaclipObject.create_object."""
    return sigmaclipObject.create_object(config, log, *args, **kwargs)


__all__ = ['sigmaclipObject', 'create_object']
