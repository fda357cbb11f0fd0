# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import threading
import unittest

from typing import List, Optional

from tormask.main import relay
from tormask.common.config import ProxyConfig
from tormask.exception import ProxyRejectedError, ShortReadError
from tormask.socks import Socks4Packet, Socks4ReplyPacket, Socks4Session, resolve_target


HTTP_RESPONSE = b'HTTP/1.1 200 OK\r\nContent-Length: 0\r\n\r\n'


class MockSocks4Proxy(threading.Thread):
    """Accepts a single connection, answers the handshake with
    ``reply`` and, when granted, echoes an HTTP response to
    whatever is sent next."""

    def __init__(self, reply: bytes) -> None:
        super().__init__(daemon=True)
        self.reply = reply
        self.requests: List[bytes] = []
        self.request: Optional[Socks4Packet] = None
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.bind(('127.0.0.1', 0))
        self.sock.listen(1)
        self.port: int = self.sock.getsockname()[1]

    def run(self) -> None:
        conn, _ = self.sock.accept()
        try:
            raw = b''
            while not raw.endswith(b'\x00') or len(raw) < 9:
                chunk = conn.recv(1024)
                if not chunk:
                    return
                raw += chunk
            self.request = Socks4Packet()
            self.request.parse(memoryview(raw))
            conn.sendall(self.reply)
            if len(self.reply) < 8 or self.reply[1:2] != b'\x5a':
                return
            data = conn.recv(4096)
            if data:
                self.requests.append(data)
                conn.sendall(HTTP_RESPONSE)
        finally:
            conn.close()
            self.sock.close()


def granted() -> bytes:
    reply = Socks4ReplyPacket()
    reply.cd = 90
    return reply.pack()


class TestAgainstMockProxy(unittest.TestCase):

    def start(self, reply: bytes) -> MockSocks4Proxy:
        proxy = MockSocks4Proxy(reply)
        proxy.start()
        self.addCleanup(proxy.join, 5)
        return proxy

    def test_relay(self) -> None:
        proxy = self.start(granted())
        config = ProxyConfig(port=proxy.port, user_id=b'tester')
        response = relay('93.184.216.34', 80, config)
        proxy.join(5)
        self.assertEqual(response, HTTP_RESPONSE)
        assert proxy.request is not None
        self.assertEqual(proxy.request.dstport, 80)
        self.assertEqual(proxy.request.dstip, bytes([93, 184, 216, 34]))
        self.assertEqual(proxy.request.userid, b'tester')
        self.assertEqual(
            proxy.requests,
            [b'HEAD / HTTP/1.1\r\nHost: 93.184.216.34\r\n\r\n'],
        )

    def test_rejected(self) -> None:
        proxy = self.start(b'\x00\x5b\x00\x00\x00\x00\x00\x00')
        session = Socks4Session(ProxyConfig(port=proxy.port))
        with self.assertRaises(ProxyRejectedError) as ctx:
            session.handshake(resolve_target('127.0.0.1', 8080))
        self.assertEqual(ctx.exception.code, 91)
        self.assertTrue(session.upstream.closed)

    def test_peer_closes_mid_reply(self) -> None:
        proxy = self.start(b'\x00\x5a\x00')
        with Socks4Session(ProxyConfig(port=proxy.port)) as session:
            with self.assertRaises(ShortReadError):
                session.handshake(resolve_target('127.0.0.1', 8080))
