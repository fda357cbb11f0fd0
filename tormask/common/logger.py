# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging
from typing import Any, Dict, Optional

from .constants import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


SINGLE_CHAR_TO_LEVEL = {
    'D': 'DEBUG',
    'I': 'INFO',
    'W': 'WARNING',
    'E': 'ERROR',
    'C': 'CRITICAL',
}


def single_char_to_level(char: str) -> Any:
    return getattr(logging, SINGLE_CHAR_TO_LEVEL[char.upper()[0]])


class Logger:
    """Logging setup for the command line shell.

    Library modules only ever call ``logging.getLogger(__name__)``,
    handlers are installed here and nowhere else.
    """

    @staticmethod
    def level(log_level: str = DEFAULT_LOG_LEVEL, verbose: bool = False) -> int:
        if verbose:
            return logging.DEBUG
        return int(single_char_to_level(log_level))

    @staticmethod
    def setup(
            log_file: Optional[str] = DEFAULT_LOG_FILE,
            log_level: str = DEFAULT_LOG_LEVEL,
            log_format: str = DEFAULT_LOG_FORMAT,
            verbose: bool = False,
    ) -> None:
        kwargs: Dict[str, Any] = {
            'level': Logger.level(log_level, verbose),
            'format': log_format,
        }
        if log_file:    # pragma: no cover
            kwargs['filename'] = log_file
            kwargs['filemode'] = 'a'
        logging.basicConfig(**kwargs)
