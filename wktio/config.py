import logging
import os

STRICT_LINESTRINGS_ENV = "WKTIO_STRICT_LINESTRINGS"


def strict_linestrings():
    """
    Whether the writer should refuse LineStrings with an unpaired trailing ordinate,
    rather than dropping it. Set WKTIO_STRICT_LINESTRINGS to anything to turn this on.
    """
    return bool(os.environ.get(STRICT_LINESTRINGS_ENV))


def configure_logging(verbose=0):
    """
    Sets up logging for an application that uses wktio.
    default == WARNING; 1 == INFO; 2 or more == DEBUG
    wktio never calls this itself.
    """
    log_level = logging.WARNING - min(10 * verbose, 20)
    if verbose >= 2:
        fmt = "%(asctime)s T%(thread)d %(levelname)s %(name)s [%(filename)s:%(lineno)d] - %(message)s"
    else:
        fmt = "%(asctime)s %(levelname)s %(name)s - %(message)s"
    logging.basicConfig(level=log_level, format=fmt)
    logging.getLogger("wktio").setLevel(log_level)
