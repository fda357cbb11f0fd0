# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import ipaddress


CRLF = b'\r\n'
COLON = b':'
WHITESPACE = b' '
SLASH = b'/'
NULL = b'\x00'
HTTP_1_1 = b'HTTP/1.1'

# SOCKS4 wire sizes
SOCKS4_VERSION = 4
SOCKS4_CONNECT = 1
SOCKS4_HEADER_SIZE = 8
SOCKS4_REPLY_SIZE = 8

# Defaults
DEFAULT_PROXY_HOSTNAME = ipaddress.IPv4Address('127.0.0.1')
DEFAULT_PROXY_PORT = 9050
DEFAULT_USER_ID = b'tormask'
DEFAULT_TIMEOUT = 10
DEFAULT_BUFFER_SIZE = 4096
DEFAULT_HTTP_METHOD = b'HEAD'
DEFAULT_HTTP_PATH = SLASH
DEFAULT_PORT = 0
DEFAULT_URL = None
DEFAULT_IP = None
DEFAULT_VERBOSE = False
DEFAULT_VERSION = False
DEFAULT_LOG_FILE = None
DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] ' + \
    '%(module)s.%(funcName)s:%(lineno)d - %(message)s'

USAGE = '%(prog)s [-u url | -i ip] -p port [-v]'
