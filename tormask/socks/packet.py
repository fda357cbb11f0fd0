# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import struct

from typing import Optional, Union

from .codes import socks4ReplyCodes
from ..exception import InvalidAddressError, ShortReadError
from ..common.utils import bytes_
from ..common.constants import NULL, SOCKS4_VERSION, SOCKS4_CONNECT, SOCKS4_HEADER_SIZE, SOCKS4_REPLY_SIZE


class Socks4Packet:
    """SOCKS4 connect request.

    Layout is ``vn cd dstport dstip userid NULL``.  ``userid`` is
    variable length and terminated by exactly one NULL byte, so
    identifiers are never truncated nor padded to a fixed block.
    """

    def __init__(self) -> None:
        # 1 byte, must be equal to 4
        self.vn: Optional[int] = None
        # 1 byte
        self.cd: Optional[int] = None
        # 2 bytes
        self.dstport: Optional[int] = None
        # 4 bytes
        self.dstip: Optional[bytes] = None
        # Variable bytes, NULL terminated
        self.userid: Optional[bytes] = None

    def parse(self, raw: memoryview) -> None:
        if len(raw) < SOCKS4_HEADER_SIZE + 1:
            raise ShortReadError(SOCKS4_HEADER_SIZE + 1, len(raw))
        cursor = 0
        # Parse vn
        if raw[cursor] != SOCKS4_VERSION:
            raise ValueError('unsupported SOCKS version %d' % raw[cursor])
        self.vn = SOCKS4_VERSION
        cursor += 1
        # Parse cd
        self.cd = raw[cursor]
        cursor += 1
        # Parse dstport
        self.dstport = struct.unpack('!H', raw[cursor:cursor+2])[0]
        cursor += 2
        # Parse dstip
        self.dstip = struct.unpack('!4s', raw[cursor:cursor+4])[0]
        cursor += 4
        # Parse userid
        ulen = len(raw) - cursor - 1
        userid = struct.unpack(
            '!%ds' % ulen, raw[cursor:cursor+ulen],
        )[0]
        cursor += ulen
        # Must be null terminated, with no NULL inside userid
        if raw[cursor] != NULL[0]:
            raise ValueError('user-id is not NULL terminated')
        if NULL in userid:
            raise ValueError('user-id must not contain NULL bytes')
        self.userid = userid

    def pack(self) -> bytes:
        user_id = self.userid or b''
        return struct.pack(
            '!BBH4s%ds' % len(user_id),
            self.vn, self.cd,
            self.dstport, self.dstip,
            user_id,
        ) + NULL


class Socks4ReplyPacket:
    """SOCKS4 reply, always 8 bytes.

    Only ``cd`` matters to a client.  ``vn`` is conventionally 0 and
    is never validated, ``dstport`` and ``dstip`` are unused.
    """

    def __init__(self) -> None:
        self.vn: Optional[int] = None
        self.cd: Optional[int] = None
        self.dstport: Optional[int] = None
        self.dstip: Optional[bytes] = None

    @property
    def is_granted(self) -> bool:
        return self.cd == socks4ReplyCodes.GRANTED

    def parse(self, raw: Union[bytes, memoryview]) -> None:
        if len(raw) < SOCKS4_REPLY_SIZE:
            raise ShortReadError(SOCKS4_REPLY_SIZE, len(raw))
        self.vn, self.cd, self.dstport, self.dstip = struct.unpack(
            '!BBH4s', raw[:SOCKS4_REPLY_SIZE],
        )

    def pack(self) -> bytes:
        return struct.pack(
            '!BBH4s',
            self.vn or 0, self.cd,
            self.dstport or 0, self.dstip or b'\x00' * 4,
        )


def encode_request(
        address: bytes,
        port: int,
        user_id: Union[str, bytes],
) -> bytes:
    """Returns wire bytes of a SOCKS4 CONNECT request."""
    if len(address) != 4:
        raise InvalidAddressError(address, 'SOCKS4 requires a 4 byte IPv4 address')
    if not 0 <= port <= 0xFFFF:
        raise InvalidAddressError(port, 'port must fit in 16 bits')
    userid = bytes_(user_id)
    if NULL in userid:
        raise ValueError('user-id must not contain NULL bytes')
    pkt = Socks4Packet()
    pkt.vn = SOCKS4_VERSION
    pkt.cd = SOCKS4_CONNECT
    pkt.dstport = port
    pkt.dstip = bytes(address)
    pkt.userid = userid
    return pkt.pack()


def decode_reply(raw: Union[bytes, memoryview]) -> Socks4ReplyPacket:
    """Decodes exactly 8 bytes of proxy reply.

    Raises :exc:`ShortReadError` for anything shorter, a
    partially populated reply is never returned."""
    reply = Socks4ReplyPacket()
    reply.parse(raw)
    return reply
