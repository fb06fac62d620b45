import logging
import sys


logger = logging.getLogger("semvergate")

_handler = None


def configure_logging(debug: bool, quiet: bool = False):
    """
    Configures the ``semvergate`` logger for CLI output.

    Messages go to stdout without decoration. ``debug`` wins over ``quiet``;
    ``quiet`` only lets warnings and errors through. The handler is bound to
    the current ``sys.stdout`` on every call and replaces the previous one.
    """
    global _handler

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)

    if debug:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logger.setLevel(log_level)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = handler
    logger.addHandler(handler)
