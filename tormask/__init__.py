# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from .main import main, entry_point, relay
from .socks import Socks4Session, resolve, resolve_target
from .common.config import ProxyConfig


__all__ = [
    # PyPi package entry_point.
    'entry_point',
    # Embed tormask.
    'main',
    'relay',
    'resolve',
    'resolve_target',
    'Socks4Session',
    'ProxyConfig',
]
