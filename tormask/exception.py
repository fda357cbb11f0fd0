# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Any, Optional


class TormaskException(Exception):
    """Top level :exc:`TormaskException` exception class.

    Every failure raised while resolving, dialing, handshaking
    or exchanging HTTP inherits from it.  None of them are
    recoverable, the command line shell exits with 1 on all."""

    def __init__(self, message: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message or 'Reason unknown')


class ResolutionError(TormaskException):
    """Name lookup itself failed."""

    def __init__(self, host: str, reason: str, **kwargs: Any) -> None:
        self.host: str = host
        self.reason: str = reason
        super().__init__('cannot resolve %s: %s' % (host, reason), **kwargs)


class NoIPv4Error(TormaskException):
    """Name lookup succeeded but returned IPv6 candidates only."""

    def __init__(self, host: str, **kwargs: Any) -> None:
        self.host: str = host
        super().__init__('no IPv4 address found for %s' % host, **kwargs)


class InvalidAddressError(TormaskException):
    """Malformed or unsupported (e.g. IPv6) destination address or port."""

    def __init__(self, address: Any, reason: str, **kwargs: Any) -> None:
        self.address: Any = address
        self.reason: str = reason
        super().__init__('invalid address %r: %s' % (address, reason), **kwargs)


class DialError(TormaskException):
    """Unable to establish connection with the proxy, includes timeouts."""

    def __init__(self, host: str, port: int, reason: str, **kwargs: Any) -> None:
        self.host: str = host
        self.port: int = port
        self.reason: str = reason
        super().__init__(
            'cannot connect to proxy %s:%d: %s' % (host, port, reason), **kwargs,
        )


class WriteError(TormaskException):

    def __init__(self, reason: str, **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__('cannot send request: %s' % reason, **kwargs)


class ReadError(TormaskException):

    def __init__(self, reason: str, **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__('cannot read reply: %s' % reason, **kwargs)


class ShortReadError(ReadError):
    """Peer closed before the expected number of bytes arrived."""

    def __init__(self, expected: int, received: int, **kwargs: Any) -> None:
        self.expected: int = expected
        self.received: int = received
        super().__init__(
            'expected %d bytes, received %d' % (expected, received), **kwargs,
        )


class ProxyRejectedError(TormaskException):
    """Proxy replied with a status other than request granted."""

    def __init__(
            self, code: int,
            description: Optional[str] = None,
            **kwargs: Any,
    ) -> None:
        self.code: int = code
        self.description: str = description or 'unknown reply code'
        super().__init__(
            'proxy rejected request: %d (%s)' % (code, self.description), **kwargs,
        )


class HttpIOError(TormaskException):

    def __init__(self, reason: str, **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__('HTTP exchange failed: %s' % reason, **kwargs)


class Socks4SessionStateError(TormaskException):
    """Session operation invoked out of order."""

    def __init__(self, state: str, operation: str, **kwargs: Any) -> None:
        self.state: str = state
        self.operation: str = operation
        super().__init__(
            'cannot %s while session is %s' % (operation, state), **kwargs,
        )


class ConfigurationError(TormaskException, ValueError):
    """Proxy settings that cannot be put on the wire."""

    def __init__(self, reason: str, **kwargs: Any) -> None:
        self.reason: str = reason
        super().__init__('invalid configuration: %s' % reason, **kwargs)
