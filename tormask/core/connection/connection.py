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

from abc import ABC, abstractmethod
from typing import Optional

from ...common.types import TcpSocket
from ...common.constants import DEFAULT_BUFFER_SIZE

from .types import tcpConnectionTypes

logger = logging.getLogger(__name__)


class TcpConnectionUninitializedException(Exception):
    pass


class TcpConnection(ABC):
    """TCP server/client connection abstraction.

    Implement the connection property abstract method to return
    a socket connection object.  All I/O is blocking; callers
    must handle OSError raised by send/recv.
    """

    def __init__(self, tag: int) -> None:
        self.tag: str = 'server' if tag == tcpConnectionTypes.SERVER else 'client'
        self.closed: bool = False

    @property
    @abstractmethod
    def connection(self) -> TcpSocket:
        """Must return the socket connection to use in this class."""
        raise TcpConnectionUninitializedException()     # pragma: no cover

    def sendall(self, data: bytes) -> None:
        """Write all of data, or raise."""
        self.connection.sendall(data)
        logger.debug('sent %d bytes to %s', len(data), self.tag)

    def recv(
            self, buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> Optional[memoryview]:
        """Users must handle socket.error exceptions"""
        data: bytes = self.connection.recv(buffer_size)
        if len(data) == 0:
            return None
        logger.debug(
            'received %d bytes from %s' %
            (len(data), self.tag),
        )
        return memoryview(data)

    def recv_exactly(self, size: int) -> bytes:
        """Block until exactly size bytes have arrived.

        Returns fewer bytes only when the peer closes early."""
        chunks = []
        remaining = size
        while remaining > 0:
            data = self.recv(remaining)
            if data is None:
                break
            chunks.append(data.tobytes())
            remaining -= len(data)
        return b''.join(chunks)

    def close(self) -> bool:
        if not self.closed:
            self.connection.close()
            self.closed = True
            logger.debug('closed connection to %s', self.tag)
        return self.closed
