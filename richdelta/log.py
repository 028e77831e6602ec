# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'


class DeltaFormatError(ValueError):
    """Raised for ops, attributes or embeds that cannot be represented."""


def get_level(name):
    """Translate a configured level name (e.g. 'WARN') to a logging level."""
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError('Unknown log level name: %r' % (name,))
    return level


def init_logging(level=logging.INFO):
    """Sets up logging for the richdelta command line.

    `level` may be a logging level or a configured level name.
    Only the richdelta logger is set to `level`, the root logger
    just gets a handler and the log format.
    """
    if isinstance(level, str):
        level = get_level(level)
    logging.basicConfig(format=LOG_FORMAT)
    logging.captureWarnings(True)
    set_richdelta_log_level(level, set_main=False)


def set_richdelta_log_level(level, set_main=True):
    """Set a log level for richdelta loggers"""
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('richdelta')

debug = logger.debug
info = logger.info
warning = logger.warning
