# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       conn
"""
from .types import tcpConnectionTypes
from .server import TcpServerConnection
from .connection import TcpConnection, TcpConnectionUninitializedException


__all__ = [
    'TcpConnection',
    'TcpConnectionUninitializedException',
    'TcpServerConnection',
    'tcpConnectionTypes',
]
