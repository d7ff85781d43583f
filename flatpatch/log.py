# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Logging for flatpatch.

Records go to the 'flatpatch' logger. Handlers and formatting are left
to the application using the library.
"""

import logging


class PatchFormatError(ValueError):
    pass


def set_flatpatch_log_level(level, set_main=True):
    """Set the level of the flatpatch logger.

    With set_main, the root logger gets the same level.
    """
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('flatpatch')

debug = logger.debug
