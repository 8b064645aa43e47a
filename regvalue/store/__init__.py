# SPDX-License-Identifier: LGPL-3.0-or-later
# regvalue/store/__init__.py
"""
Key-store boundary.

- base: KeyStore (get_raw / set_raw)
- memory: in-process dict store
- hivex_store: offline hive via a python-hivex handle
- values: typed get_value / set_value helpers
"""
from .base import KeyStore
from .hivex_store import HivexKeyStore
from .memory import MemoryKeyStore
from .values import get_value, set_value

__all__ = ["KeyStore", "MemoryKeyStore", "HivexKeyStore", "get_value", "set_value"]
