import logging
import time

log_date_format = "%Y-%m-%d %H:%M:%S"


def get_log_formatter():
    """ "[LEVEL] timestamp message" with UTC timestamps """
    formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(name)s: %(message)s", datefmt=log_date_format)
    formatter.converter = time.gmtime
    return formatter


def init_logging(level=logging.INFO, stream=None):
    """
    Send the package's log records to a stream (stderr by default).
    Calling it again only updates the level.
    """
    logger = logging.getLogger("playfair")
    logger.setLevel(level)
    for handler in logger.handlers:
        if getattr(handler, "_playfair_stream", False):
            handler.setLevel(level)
            return logger
    ch = logging.StreamHandler(stream)
    ch.setLevel(level)
    ch.setFormatter(get_log_formatter())
    ch._playfair_stream = True
    logger.addHandler(ch)
    return logger
