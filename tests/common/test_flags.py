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
import unittest
from unittest import mock

from tormask.common.flag import FlagParser
from tormask.common.config import ProxyConfig
from tormask.common.logger import Logger, single_char_to_level
from tormask.common.version import __version__
from tormask.exception import ConfigurationError


@mock.patch('tormask.common.flag.Logger.setup')
class TestFlags(unittest.TestCase):

    def test_defaults(self, mock_logger_setup: mock.Mock) -> None:
        args = FlagParser.initialize(['-u', 'example.com', '-p', '80'])
        self.assertEqual(args.host, 'example.com')
        self.assertEqual(args.port, 80)
        self.assertFalse(args.verbose)
        self.assertEqual(args.proxy_hostname, '127.0.0.1')
        self.assertEqual(args.proxy_port, 9050)
        self.assertEqual(args.user_id, b'tormask')
        self.assertEqual(args.timeout, 10)
        mock_logger_setup.assert_called_once_with(
            None, 'INFO', args.log_format, False,
        )

    def test_ip_takes_precedence_over_url(self, _mock_logger_setup: mock.Mock) -> None:
        args = FlagParser.initialize(
            ['-u', 'example.com', '-i', '93.184.216.34', '-p', '80', '-v'],
        )
        self.assertEqual(args.host, '93.184.216.34')
        self.assertTrue(args.verbose)

    def test_proxy_flags(self, _mock_logger_setup: mock.Mock) -> None:
        args = FlagParser.initialize([
            '-i', '10.0.0.1', '-p', '22',
            '--proxy-hostname', '192.168.1.1',
            '--proxy-port', '1080',
            '--user-id', 'someone',
            '--timeout', '2.5',
        ])
        config = ProxyConfig.from_flags(args)
        self.assertEqual(config.addr, ('192.168.1.1', 1080))
        self.assertEqual(config.user_id, b'someone')
        self.assertEqual(config.timeout, 2.5)

    def test_opts_override_flags(self, _mock_logger_setup: mock.Mock) -> None:
        args = FlagParser.initialize(
            ['-i', '10.0.0.1', '-p', '22', '--proxy-port', '1080'],
            proxy_port=9999, user_id='embedded',
        )
        self.assertEqual(args.proxy_port, 9999)
        self.assertEqual(args.user_id, b'embedded')

    @mock.patch('sys.stderr')
    def test_missing_target(self, _mock_stderr: mock.Mock, mock_logger_setup: mock.Mock) -> None:
        with self.assertRaises(SystemExit) as ctx:
            FlagParser.initialize(['-p', '80'])
        self.assertEqual(ctx.exception.code, 1)
        mock_logger_setup.assert_not_called()

    @mock.patch('sys.stderr')
    def test_missing_port(self, _mock_stderr: mock.Mock, _mock_logger_setup: mock.Mock) -> None:
        with self.assertRaises(SystemExit) as ctx:
            FlagParser.initialize(['-u', 'example.com'])
        self.assertEqual(ctx.exception.code, 1)

    @mock.patch('sys.stderr')
    def test_bad_port_value(self, _mock_stderr: mock.Mock, _mock_logger_setup: mock.Mock) -> None:
        with self.assertRaises(SystemExit) as ctx:
            FlagParser.initialize(['-u', 'example.com', '-p', 'eighty'])
        self.assertEqual(ctx.exception.code, 1)

    @mock.patch('builtins.print')
    def test_version(self, mock_print: mock.Mock, _mock_logger_setup: mock.Mock) -> None:
        with self.assertRaises(SystemExit) as ctx:
            FlagParser.initialize(['--version'])
        self.assertEqual(ctx.exception.code, 0)
        mock_print.assert_called_once_with(__version__)


class TestLogger(unittest.TestCase):

    def test_single_char_to_level(self) -> None:
        self.assertEqual(single_char_to_level('d'), logging.DEBUG)
        self.assertEqual(single_char_to_level('INFO'), logging.INFO)
        self.assertEqual(single_char_to_level('Warning'), logging.WARNING)

    def test_verbose_forces_debug(self) -> None:
        self.assertEqual(Logger.level('E', verbose=True), logging.DEBUG)
        self.assertEqual(Logger.level('E'), logging.ERROR)

    @mock.patch('logging.basicConfig')
    def test_setup(self, mock_basic_config: mock.Mock) -> None:
        Logger.setup(None, 'W', '%(message)s')
        mock_basic_config.assert_called_once_with(
            level=logging.WARNING, format='%(message)s',
        )


class TestProxyConfig(unittest.TestCase):

    def test_defaults(self) -> None:
        config = ProxyConfig()
        self.assertEqual(config.addr, ('127.0.0.1', 9050))
        self.assertEqual(config.user_id, b'tormask')
        self.assertEqual(config.timeout, 10)
        self.assertEqual(config, ProxyConfig(hostname='127.0.0.1'))

    def test_rejects_null_in_user_id(self) -> None:
        with self.assertRaises(ConfigurationError):
            ProxyConfig(user_id=b'to\x00rmask')
