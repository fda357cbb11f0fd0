# -*- coding: utf-8 -*-
"""
    tormask
    ~~~~~~~
    Tunnel a single TCP connection through a SOCKS4 proxy
    and issue one HTTP HEAD request over it.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from typing import Any


class Assertions:
    """unittest style assertions for pytest style test classes."""

    def assertTrue(self, obj: Any) -> None:
        assert obj

    def assertFalse(self, obj: Any) -> None:
        assert not obj

    def assertIsNone(self, obj: Any) -> None:
        assert obj is None

    def assertEqual(self, obj1: Any, obj2: Any) -> None:
        assert obj1 == obj2
