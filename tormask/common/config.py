# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import argparse
import ipaddress

from typing import Any, Union

from .flag import flags
from .utils import bytes_, text_
from ..exception import ConfigurationError
from .types import HostPort
from .constants import DEFAULT_PROXY_HOSTNAME, DEFAULT_PROXY_PORT, DEFAULT_USER_ID, DEFAULT_TIMEOUT, NULL


flags.add_argument(
    '--proxy-hostname',
    type=str,
    default=str(DEFAULT_PROXY_HOSTNAME),
    help='Default: %s.  SOCKS4 proxy hostname.' % DEFAULT_PROXY_HOSTNAME,
)

flags.add_argument(
    '--proxy-port',
    type=int,
    default=DEFAULT_PROXY_PORT,
    help='Default: %d.  SOCKS4 proxy port.' % DEFAULT_PROXY_PORT,
)

flags.add_argument(
    '--user-id',
    type=str,
    default=text_(DEFAULT_USER_ID),
    help='Default: %s.  User-id sent within the SOCKS4 connect request.' % text_(
        DEFAULT_USER_ID,
    ),
)

flags.add_argument(
    '--timeout',
    type=float,
    default=DEFAULT_TIMEOUT,
    help='Default: %d.  Seconds to wait for the proxy connection to establish.' % DEFAULT_TIMEOUT,
)


class ProxyConfig:
    """Where and how to reach the SOCKS4 proxy.

    Passed into :class:`tormask.socks.Socks4Session` so that tests can
    point a session at a mock proxy listening on an ephemeral port."""

    def __init__(
            self,
            hostname: Union[str, ipaddress.IPv4Address] = DEFAULT_PROXY_HOSTNAME,
            port: int = DEFAULT_PROXY_PORT,
            user_id: Union[str, bytes] = DEFAULT_USER_ID,
            timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.hostname: str = str(hostname)
        self.port: int = port
        self.user_id: bytes = bytes_(user_id)
        if NULL in self.user_id:
            raise ConfigurationError('user-id must not contain NULL bytes')
        self.timeout: float = timeout

    @property
    def addr(self) -> HostPort:
        return (self.hostname, self.port)

    @staticmethod
    def from_flags(args: argparse.Namespace) -> 'ProxyConfig':
        return ProxyConfig(
            hostname=args.proxy_hostname,
            port=args.proxy_port,
            user_id=args.user_id,
            timeout=args.timeout,
        )

    def __repr__(self) -> str:
        return 'ProxyConfig(%s:%d, user_id=%r, timeout=%s)' % (
            self.hostname, self.port, self.user_id, self.timeout,
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ProxyConfig):
            return NotImplemented
        return self.addr == other.addr and \
            self.user_id == other.user_id and \
            self.timeout == other.timeout
