# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class PatchFormatError(ValueError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for applications using immers.

    Sets the log level for all immers loggers to `level`,
    unless `level` is given as `None`, in which case the
    configured `Global.log_level` is used.
    """
    if level is None:
        from .config import build_config
        level = build_config('global')['log_level']
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_immers_log_level(level, set_main=True):
    """Set a log level for immers loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('immers')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
