# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       identd
"""
from typing import NamedTuple


Socks4ReplyCodes = NamedTuple(
    'Socks4ReplyCodes', [
        ('GRANTED', int),
        ('REJECTED', int),
        ('IDENTD_UNREACHABLE', int),
        ('IDENTD_AUTH_MISMATCH', int),
    ],
)

socks4ReplyCodes = Socks4ReplyCodes(90, 91, 92, 93)

REPLY_CODE_DESCRIPTIONS = {
    socks4ReplyCodes.GRANTED: 'request granted',
    socks4ReplyCodes.REJECTED: 'request rejected or failed',
    socks4ReplyCodes.IDENTD_UNREACHABLE:
        'request rejected because client is not running identd',
    socks4ReplyCodes.IDENTD_AUTH_MISMATCH:
        'request rejected because identd could not confirm the user-id',
}


def describe_reply_code(code: int) -> str:
    return REPLY_CODE_DESCRIPTIONS.get(code, 'unknown reply code')
