# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/store/memory.py
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Hashable, Iterator, Optional, Tuple

from ..codec.raw import RawValue
from ..core.exceptions import AccessDenied, ValueNotFound
from ..core.logger import Log
from ..core.logging_utils import payload_ctx
from .base import KeyStore


class MemoryKeyStore(KeyStore):
    """
    Dict-backed key-store. Value names are case-insensitive, as in the
    Windows registry; the spelling of the first write is kept.
    """

    def __init__(self, *, read_only: bool = False, logger: Optional[logging.Logger] = None):
        self.read_only = read_only
        self.logger = Log.bind(logger or logging.getLogger(__name__), store="memory")
        self._lock = threading.Lock()
        self._values: Dict[Tuple[Hashable, str], Tuple[str, RawValue]] = {}

    @staticmethod
    def _slot(key: Hashable, name: str) -> Tuple[Hashable, str]:
        return key, name.casefold()

    def get_raw(self, key: Any, name: str) -> RawValue:
        with self._lock:
            hit = self._values.get(self._slot(key, name))
        if hit is None:
            raise ValueNotFound(f"value {name!r} not found", context={"key": key, "name": name})
        return hit[1]

    def set_raw(self, key: Any, name: str, raw: RawValue) -> None:
        if self.read_only:
            raise AccessDenied(f"store is read-only; cannot set {name!r}", context={"key": key, "name": name})
        slot = self._slot(key, name)
        with self._lock:
            prev = self._values.get(slot)
            self._values[slot] = (prev[0] if prev else name, raw)
        Log.trace(self.logger, "set %r", name, key=key, **payload_ctx(raw.type_tag, raw.data))

    def items(self, key: Hashable) -> Iterator[Tuple[str, RawValue]]:
        """Snapshot of (name, raw) pairs stored under `key`."""
        with self._lock:
            snap = [(n, r) for (k, _), (n, r) in self._values.items() if k == key]
        return iter(snap)

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
