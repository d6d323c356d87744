VERSION = '0.3'


def version() -> str:
    """Returns the version of sigmaclip.

    Returns:
        Version string.
    """
    return VERSION


__all__ = ['VERSION', 'version']
