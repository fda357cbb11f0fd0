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
import argparse

from typing import Optional, List, Any, NoReturn

from .utils import bytes_
from .logger import Logger
from .constants import USAGE
from .version import __version__


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad input, tormask exits with 1 on every error."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, '%s: error: %s\n' % (self.prog, message))


class FlagParser:
    """Wrapper around argparse module.

    Import `flag.flags` and use `add_argument` API
    to define custom flags within respective Python files.
    Flags must be registered at module import time, never
    from within a function which may run more than once.
    """

    def __init__(self) -> None:
        self.args: Optional[argparse.Namespace] = None
        self.actions: List[str] = []
        self.parser = ArgumentParser(
            prog='tormask',
            usage=USAGE,
            description='tormask v%s' % __version__,
        )

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register a flag."""
        action = self.parser.add_argument(*args, **kwargs)
        self.actions.append(action.dest)
        return action

    def parse_args(
            self, input_args: Optional[List[str]],
    ) -> argparse.Namespace:
        """Parse flags from input arguments."""
        self.args = self.parser.parse_args(input_args)
        return self.args

    def usage(self) -> NoReturn:
        self.parser.print_usage(sys.stderr)
        sys.exit(1)

    @staticmethod
    def initialize(
        input_args: Optional[List[str]] = None,
        **opts: Any,
    ) -> argparse.Namespace:
        if input_args is None:
            input_args = []

        args = flags.parse_args(input_args)

        # Print version and exit
        if args.version:
            print(__version__)
            sys.exit(0)

        # A target and a non-zero port are both mandatory
        if (not args.url and not args.ip) or not args.port:
            flags.usage()

        Logger.setup(
            args.log_file, args.log_level,
            args.log_format, args.verbose,
        )

        # Literal IP takes precedence over URL when both are given
        args.host = args.ip or args.url

        # Values passed as keyword arguments override
        # command line flags, which is what embedding
        # and tests rely upon.
        args.proxy_hostname = opts.get('proxy_hostname', args.proxy_hostname)
        args.proxy_port = int(opts.get('proxy_port', args.proxy_port))
        args.user_id = bytes_(opts.get('user_id', args.user_id))
        args.timeout = float(opts.get('timeout', args.timeout))
        return args


flags = FlagParser()
