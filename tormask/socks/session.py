# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       tunneled
"""
import logging

from types import TracebackType
from typing import NamedTuple, Optional, Type

from .codes import describe_reply_code
from .packet import Socks4ReplyPacket, encode_request, decode_reply
from .resolver import ResolvedTarget
from ..exception import DialError, ProxyRejectedError, ReadError, ShortReadError
from ..exception import Socks4SessionStateError, WriteError
from ..common.config import ProxyConfig
from ..common.constants import SOCKS4_REPLY_SIZE
from ..core.connection import TcpServerConnection

logger = logging.getLogger(__name__)


Socks4SessionStates = NamedTuple(
    'Socks4SessionStates', [
        ('IDLE', str),
        ('CONNECTED', str),
        ('REQUEST_SENT', str),
        ('REPLY_RECEIVED', str),
        ('TUNNELED', str),
        ('FAILED', str),
    ],
)
socks4SessionStates = Socks4SessionStates(
    'idle', 'connected', 'request-sent',
    'reply-received', 'tunneled', 'failed',
)


class Socks4Session:
    """Drives a SOCKS4 CONNECT handshake over one proxy connection.

    ``idle -> connected -> request-sent -> reply-received``, then
    ``tunneled`` when the proxy grants the request and ``failed``
    otherwise.  Both are terminal, a session is never reset nor
    reconnected.  Any error closes the proxy connection before
    propagating.

    Use as a context manager so that the connection is closed
    exactly once whichever way the block exits::

        with Socks4Session(ProxyConfig()) as session:
            conn = session.handshake(target)
            conn.sendall(b'...')
    """

    def __init__(self, config: Optional[ProxyConfig] = None) -> None:
        self.config: ProxyConfig = config or ProxyConfig()
        self.state: str = socks4SessionStates.IDLE
        self.reply: Optional[Socks4ReplyPacket] = None
        self.upstream: TcpServerConnection = TcpServerConnection(
            self.config.hostname, self.config.port,
        )

    def _expect(self, state: str, operation: str) -> None:
        if self.state != state:
            raise Socks4SessionStateError(self.state, operation)

    def _transition(self, state: str) -> None:
        logger.debug('Session %s -> %s', self.state, state)
        self.state = state

    def _fail(self) -> None:
        self._transition(socks4SessionStates.FAILED)
        self.close()

    @property
    def is_tunneled(self) -> bool:
        return self.state == socks4SessionStates.TUNNELED

    def connect(self) -> None:
        self._expect(socks4SessionStates.IDLE, 'connect')
        host, port = self.config.addr
        try:
            self.upstream.connect(timeout=self.config.timeout)
        except OSError as e:
            self._transition(socks4SessionStates.FAILED)
            raise DialError(host, port, str(e) or e.__class__.__name__) from e
        logger.debug('Connected to proxy %s:%d', host, port)
        self._transition(socks4SessionStates.CONNECTED)

    def send_request(self, target: ResolvedTarget) -> None:
        self._expect(socks4SessionStates.CONNECTED, 'send request')
        try:
            request = encode_request(
                target.address, target.port, self.config.user_id,
            )
        except Exception:
            self._fail()
            raise
        try:
            self.upstream.sendall(request)
        except OSError as e:
            self._fail()
            raise WriteError(str(e)) from e
        self._transition(socks4SessionStates.REQUEST_SENT)

    def read_reply(self) -> Socks4ReplyPacket:
        self._expect(socks4SessionStates.REQUEST_SENT, 'read reply')
        try:
            raw = self.upstream.recv_exactly(SOCKS4_REPLY_SIZE)
        except OSError as e:
            self._fail()
            raise ReadError(str(e)) from e
        try:
            self.reply = decode_reply(raw)
        except ShortReadError:
            self._fail()
            raise
        self._transition(socks4SessionStates.REPLY_RECEIVED)
        return self.reply

    def check_reply(self, reply: Socks4ReplyPacket) -> None:
        self._expect(socks4SessionStates.REPLY_RECEIVED, 'check reply')
        if not reply.is_granted:
            self._fail()
            raise ProxyRejectedError(reply.cd, describe_reply_code(reply.cd))
        self._transition(socks4SessionStates.TUNNELED)

    def handshake(self, target: ResolvedTarget) -> TcpServerConnection:
        """Runs the complete handshake and returns the tunnel.

        The returned connection carries raw application bytes,
        no further SOCKS framing happens on it."""
        self.connect()
        self.send_request(target)
        self.check_reply(self.read_reply())
        logger.debug(
            'Connected through proxy to %s:%d', target.host, target.port,
        )
        return self.upstream

    def close(self) -> None:
        self.upstream.close()

    def __enter__(self) -> 'Socks4Session':
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc_val: Optional[BaseException],
            exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
