# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import logging

from typing import Any, List, Optional

from .http import head
from .socks import Socks4Session, resolve_target
from .exception import TormaskException, ResolutionError, NoIPv4Error, InvalidAddressError
from .exception import DialError, WriteError, ReadError, ProxyRejectedError, HttpIOError
from .exception import ConfigurationError
from .common.flag import FlagParser, flags
from .common.utils import text_
from .common.config import ProxyConfig
from .common.constants import (
    DEFAULT_URL, DEFAULT_IP, DEFAULT_PORT, DEFAULT_VERBOSE, DEFAULT_VERSION,
    DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT, DEFAULT_BUFFER_SIZE,
)


logger = logging.getLogger(__name__)


flags.add_argument(
    '-u', '--url',
    type=str,
    default=DEFAULT_URL,
    help='Hostname to connect to through the proxy.',
)

flags.add_argument(
    '-i', '--ip',
    type=str,
    default=DEFAULT_IP,
    help='IPv4 address to connect to through the proxy.  Takes precedence over --url.',
)

flags.add_argument(
    '-p', '--port',
    type=int,
    default=DEFAULT_PORT,
    help='Required.  Destination port to connect to.',
)

flags.add_argument(
    '-v', '--verbose',
    action='store_true',
    default=DEFAULT_VERBOSE,
    help='Default: False.  Print progress and enable debug logging.',
)

flags.add_argument(
    '--version',
    action='store_true',
    default=DEFAULT_VERSION,
    help='Prints tormask version.',
)

flags.add_argument(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    help='Valid options: DEBUG, INFO (default), WARNING, ERROR, CRITICAL. '
    'Both upper and lowercase values are allowed. '
    'You may also simply use the leading character e.g. --log-level d',
)

flags.add_argument(
    '--log-file',
    type=str,
    default=DEFAULT_LOG_FILE,
    help='Default: sys.stdout. Log file destination.',
)

flags.add_argument(
    '--log-format',
    type=str,
    default=DEFAULT_LOG_FORMAT,
    help='Log format for Python logger.',
)


ERROR_PREFIXES = (
    ((ResolutionError, NoIPv4Error), 'Error resolving host'),
    ((InvalidAddressError,), 'Error creating request'),
    ((DialError,), 'Error connecting to proxy'),
    ((WriteError,), 'Error sending request'),
    ((ReadError,), 'Error reading response'),
    ((ProxyRejectedError,), 'Failed to connect'),
    ((HttpIOError,), 'Error during HTTP exchange'),
    ((ConfigurationError,), 'Error in configuration'),
)


def diagnostic(e: TormaskException) -> str:
    for klasses, prefix in ERROR_PREFIXES:
        if isinstance(e, klasses):
            return '%s: %s' % (prefix, e)
    return 'Error: %s' % e


def relay(
        host: str,
        port: int,
        config: ProxyConfig,
        verbose: bool = False,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> bytes:
    """Resolve, handshake with the proxy, then exchange one HEAD request.

    Returns the raw response bytes.  The proxy connection is
    closed before returning or raising."""
    target = resolve_target(host, port)
    with Socks4Session(config) as session:
        session.connect()
        if verbose:
            print('Connected to proxy...')
        session.send_request(target)
        session.check_reply(session.read_reply())
        if verbose:
            print('Connected through proxy to %s:%d' % (target.host, target.port))
        return head(session.upstream, target.host, buffer_size)


def main(input_args: Optional[List[str]] = None, **opts: Any) -> int:
    args = FlagParser.initialize(input_args, **opts)
    try:
        config = ProxyConfig.from_flags(args)
        logger.debug('Using %r', config)
        response = relay(args.host, args.port, config, verbose=args.verbose)
    except TormaskException as e:
        logger.debug('Relay failed', exc_info=e)
        print(diagnostic(e), file=sys.stderr)
        return 1
    print(text_(response, errors='replace'))
    return 0


def entry_point() -> None:
    sys.exit(main(sys.argv[1:]))
