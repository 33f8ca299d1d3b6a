# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


# Record format of the command line entry points
LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class DeltaFormatError(ValueError):
    """A change record or serialized change list is malformed."""


def init_logging(level=logging.INFO):
    """Configure the root logger for a deepdelta command.

    Only the command line entry points call this, through the
    --log-level argument. Library users configure logging themselves.
    """
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.captureWarnings(True)


def set_deepdelta_log_level(level, set_main=True):
    """Set the level of the deepdelta logger.

    With set_main, the root logger gets the same level.
    """
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('deepdelta')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
