# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
import sys


LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'

# Level names accepted on the command line and in config files
LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class PatchFormatError(ValueError):
    pass


def resolve_level(level):
    """Turn a level name like 'WARN' into its numeric logging level.

    Numeric levels and None are passed through unchanged.
    """
    if level is None or isinstance(level, int):
        return level
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError('Unknown log level %r, expected one of %r' % (level, LOG_LEVELS))
    return getattr(logging, name)


def init_logging(level=logging.INFO, stream=None):
    """Sets up logging for jpdiff entry points.

    Log records go to stderr (or `stream`), keeping stdout free
    for the patch output. Sets the log level for all jpdiff loggers
    to `level`, unless `level` is given as `None`.
    """
    logging.basicConfig(format=LOG_FORMAT, level=resolve_level(level),
                        stream=stream or sys.stderr)
    logging.captureWarnings(True)


def set_jpdiff_log_level(level, set_main=True):
    """Set a log level for jpdiff loggers"""
    level = resolve_level(level)
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('jpdiff')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
