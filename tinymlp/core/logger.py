import logging


LOGGER_NAME = 'tinymlp'


def setup_logging(filename=None, level=logging.INFO, stdout=True):
    """ Sets up logging formatting, etc for the `tinymlp` loggers

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file (which is
        overwritten).

    level: int, default=logging.INFO
        The level of the `tinymlp` logger.

    stdout: bool, default=True
        If True, log records are written to a stream handler.

    Returns
    -------
    logger: logging.Logger
        The configured package logger. Calling this function again
        replaces the handlers added by the previous call.
    """
    line_fmt = ("[%(asctime)s] [%(name)s:%(lineno)d] "
                "%(levelname)-8s %(message)s")
    date_fmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=line_fmt, datefmt=date_fmt)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if filename is not None:
        fhandler = logging.FileHandler(filename, mode='w')
        fhandler.setFormatter(formatter)
        logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger
