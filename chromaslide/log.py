#
# chromaslide - Copyright (C) 2026 The chromaslide developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#
import logging

import colorlog
from wrapt import synchronized


LOG_FORMAT = ' %(name)s/%(levelname)-8s | %(message)s'
COLOR_LOG_FORMAT = ' %(log_color)s%(name)s/%(levelname)-8s%(reset)s |' \
                   ' %(log_color)s%(message)s%(reset)s'


class Log(object):
    """
    Logger factory for chromaslide

    Call get() with a dotted tag (e.g. 'chromaslide.channel') to obtain
    a cached logger. Colored output and a package-wide level can be
    selected before the first logger is created.
    """

    _LOGGERS = {}
    _use_color = False
    _level = logging.WARNING


    @classmethod
    def _make_handler(cls) -> logging.Handler:
        if cls._use_color:
            handler = colorlog.StreamHandler()
            handler.setFormatter(colorlog.ColoredFormatter(COLOR_LOG_FORMAT))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler


    @synchronized
    @classmethod
    def get(cls, tag: str) -> logging.Logger:
        """
        Get the logger for the given tag, creating it on first use

        :param tag: the log tag
        :return: the logger instance
        """
        if tag not in cls._LOGGERS:
            logger = logging.getLogger(tag)
            logger.addHandler(cls._make_handler())
            logger.setLevel(cls._level)
            logger.propagate = False

            cls._LOGGERS[tag] = logger

        return cls._LOGGERS[tag]


    @synchronized
    @classmethod
    def set_level(cls, level):
        """
        Change the level of every chromaslide logger, including
        those created later.

        :param level: a logging level (int or name)
        """
        cls._level = level
        for logger in cls._LOGGERS.values():
            logger.setLevel(level)


    @classmethod
    def enable_color(cls, enable: bool):
        """
        Enable colored output. Only loggers created after this
        call are affected.
        """
        cls._use_color = enable
