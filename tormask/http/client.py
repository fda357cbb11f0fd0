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

from typing import Union

from ..exception import HttpIOError
from ..common.utils import build_http_request, bytes_
from ..common.constants import DEFAULT_BUFFER_SIZE, DEFAULT_HTTP_METHOD, DEFAULT_HTTP_PATH
from ..core.connection import TcpConnection


logger = logging.getLogger(__name__)


def head(
    conn: TcpConnection,
    host: Union[str, bytes],
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> bytes:
    """Sends a single HEAD request over conn and performs one read.

    The response is returned verbatim, it is neither parsed nor
    read until complete.  Returns empty bytes if peer closes
    without responding."""
    request = build_http_request(
        DEFAULT_HTTP_METHOD, DEFAULT_HTTP_PATH,
        headers={
            b'Host': bytes_(host),
        },
    )
    try:
        conn.sendall(request)
    except OSError as e:
        raise HttpIOError('cannot send HTTP request: %s' % e) from e
    try:
        response = conn.recv(buffer_size)
    except OSError as e:
        raise HttpIOError('cannot read HTTP response: %s' % e) from e
    if response is None:
        logger.debug('Peer closed without an HTTP response')
        return b''
    return response.tobytes()
