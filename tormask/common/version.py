# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Tuple, Union


__version__ = '0.1.0'


def _to_int_or_str(inp: str) -> Union[int, str]:
    try:
        return int(inp)
    except ValueError:
        return inp


VERSION = tuple(map(_to_int_or_str, __version__.split('.')))


__all__ = '__version__', 'VERSION'
