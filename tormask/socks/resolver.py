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
import logging
import ipaddress

from typing import Iterable, List, NamedTuple

from ..exception import InvalidAddressError, NoIPv4Error, ResolutionError
from ..common.types import Ipv4Octets

logger = logging.getLogger(__name__)


class ResolvedTarget(NamedTuple):
    """Destination the proxy is asked to connect to."""
    address: Ipv4Octets
    port: int

    @property
    def host(self) -> str:
        return socket.inet_ntoa(self.address)


def select_ipv4(host: str, candidates: Iterable[str]) -> Ipv4Octets:
    """Returns octets of the first IPv4 candidate in given order.

    IPv6 candidates are skipped, never selected.  Raises
    :exc:`NoIPv4Error` when no IPv4 candidate exists."""
    for candidate in candidates:
        try:
            ip = ipaddress.ip_address(candidate)
        except ValueError:
            logger.debug('Skipping non-address candidate %r for %s', candidate, host)
            continue
        if ip.version != 4:
            logger.debug('Skipping IPv6 candidate %s for %s', candidate, host)
            continue
        return ip.packed
    raise NoIPv4Error(host)


def lookup(host: str) -> List[str]:
    """Single name lookup, candidates in system order."""
    try:
        infos = socket.getaddrinfo(
            host, None, socket.AF_UNSPEC, socket.SOCK_STREAM,
        )
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(host, str(e)) from e
    candidates: List[str] = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        if sockaddr[0] not in candidates:
            candidates.append(sockaddr[0])
    return candidates


def resolve(host: str) -> Ipv4Octets:
    """Turns a hostname or IPv4 literal into 4 address octets.

    Literals are returned as is without any lookup.  IPv6 literals
    cannot be carried by SOCKS4 and raise :exc:`InvalidAddressError`."""
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        ip = None
    if ip is not None:
        if ip.version != 4:
            raise InvalidAddressError(host, 'SOCKS4 supports IPv4 destinations only')
        return ip.packed
    if not host:
        raise InvalidAddressError(host, 'empty hostname')
    candidates = lookup(host)
    logger.debug('%s resolved to %s', host, ', '.join(candidates))
    return select_ipv4(host, candidates)


def resolve_target(host: str, port: int) -> ResolvedTarget:
    if not 0 < port <= 0xFFFF:
        raise InvalidAddressError(port, 'port must be within 1-65535')
    return ResolvedTarget(resolve(host), port)
