# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       Submodules
"""
from .codes import Socks4ReplyCodes, socks4ReplyCodes, describe_reply_code
from .packet import Socks4Packet, Socks4ReplyPacket, encode_request, decode_reply
from .session import Socks4Session, Socks4SessionStates, socks4SessionStates
from .resolver import ResolvedTarget, resolve, resolve_target, select_ipv4


__all__ = [
    'Socks4Packet',
    'Socks4ReplyPacket',
    'encode_request',
    'decode_reply',
    'socks4ReplyCodes',
    'Socks4ReplyCodes',
    'describe_reply_code',
    'Socks4Session',
    'Socks4SessionStates',
    'socks4SessionStates',
    'ResolvedTarget',
    'resolve',
    'resolve_target',
    'select_ipv4',
]
