# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Optional

from .types import tcpConnectionTypes
from .connection import TcpConnection, TcpConnectionUninitializedException
from ...common.types import HostPort, TcpSocket
from ...common.utils import new_socket_connection
from ...common.constants import DEFAULT_TIMEOUT


class TcpServerConnection(TcpConnection):
    """Outbound connection, here always towards the SOCKS4 proxy."""

    def __init__(self, host: str, port: int) -> None:
        super().__init__(tcpConnectionTypes.SERVER)
        self._conn: Optional[TcpSocket] = None
        self.addr: HostPort = (host, port)
        self.closed = True

    @property
    def connection(self) -> TcpSocket:
        if self._conn is None:
            raise TcpConnectionUninitializedException()
        return self._conn

    def connect(
            self,
            addr: Optional[HostPort] = None,
            timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        assert self._conn is None
        self._conn = new_socket_connection(
            addr or self.addr,
            timeout=timeout,
        )
        self.closed = False
