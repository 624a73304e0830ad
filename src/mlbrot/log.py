# -*- coding: utf-8 -*-
import os
import datetime
import logging
import sys
import enum

import mlbrot as mb

verbosity_list = (
    "warn @ console",
    "warn + info @ console",
    "debug @ console + log",
    "debug2 @ console + log",
)

verbosity_enum = enum.Enum(
    "verbosity_enum",
    verbosity_list,
    module=__name__
)

# console level, file level (None: no log file)
_LEVELS = {
    0: (logging.WARNING, None),
    1: (logging.INFO, None),
    2: (logging.INFO, logging.DEBUG),
    3: (logging.INFO, logging.NOTSET),
}


def verbosity_level(verbosity):
    """ Returns the integer verbosity level 0..3 for a verbosity str
    (one of `verbosity_list`, or its index as a str) or an int """
    if isinstance(verbosity, str):
        if verbosity.isdigit():
            return verbosity_level(int(verbosity))
        try:
            # Enum values start at 1
            return verbosity_enum[verbosity].value - 1
        except KeyError:
            raise ValueError(f"Unknown verbosity: {verbosity}") from None
    if isinstance(verbosity, int) and 0 <= verbosity < len(verbosity_list):
        return verbosity
    raise ValueError(f"Unknown verbosity: {verbosity}")


def set_log_handlers(verbosity):
    """
    Sets the verbosity level for the "mlbrot" logger, replacing any
    previously installed handler.

    Parameters
    ----------
    verbosity: str | int
        One of `verbosity_list` or its index 0..3. From level 2, a log file
        is also started in `mlbrot.settings.log_directory`.

    Returns
    -------
    logger: the "mlbrot" logging.Logger
    """
    _verbosity = verbosity_level(verbosity)
    console_level, file_level = _LEVELS[_verbosity]

    logger = logging.getLogger("mlbrot")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG if _verbosity >= 2 else console_level)

    ch = logging.StreamHandler(sys.stderr if _verbosity == 0 else sys.stdout)
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s\n  %(message)s'
    ))
    logger.addHandler(ch)

    if file_level is None:
        return logger

    if mb.settings.log_directory is None:
        logger.warning(
            "Unable to start file logger: "
            "mb.settings.log_directory not specified"
        )
        return logger

    file_prefix = datetime.datetime.now().strftime("%Y-%m-%d_%Hh%M_%S")
    file_config = os.path.join(
        mb.settings.log_directory, f'{file_prefix}_mlbrot.log'
    )
    mb.utils.mkdir_p(mb.settings.log_directory)
    fh = logging.FileHandler(file_config)
    fh.setLevel(file_level)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(threadName)s - "
        "%(filename)s: %(funcName)s\n  %(message)s"
    ))
    logger.addHandler(fh)
    logger.info(
        f"mlbrot {mb.__version__}, started file logger: {file_config}"
    )
    return logger
