# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/store/hivex_store.py
"""
Key-store over an open python-hivex handle (offline hive files).

Keys are hivex node ids. Values travel as hivex value dicts:
    {"key": <name>, "t": <type tag>, "value": <bytes>}

The handle is duck-typed; hivex itself is only imported for type checking,
so this module loads on hosts without the libguestfs bindings.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Union

from ..codec.raw import RawValue
from ..core.exceptions import AccessDenied, KeyStoreError, ValueNotFound
from ..core.logger import Log
from ..core.logging_utils import payload_ctx
from .base import KeyStore

if TYPE_CHECKING:  # pragma: no cover
    import hivex  # type: ignore

NodeLike = Union[int, None]


def _node_id(n: NodeLike) -> int:
    """Convert node to int, treating None as 0."""
    if n is None:
        return 0
    try:
        return int(n)
    except (TypeError, ValueError):
        return 0


class HivexKeyStore(KeyStore):
    def __init__(self, h: "hivex.Hivex", *, write: bool = False, logger: Optional[logging.Logger] = None):
        self.h = h
        self.write = write
        self.logger = Log.bind(logger or logging.getLogger(__name__), store="hivex")

    def _require_node(self, node: NodeLike, name: str) -> int:
        nid = _node_id(node)
        if nid == 0:
            raise KeyStoreError(f"invalid registry node for value {name!r}", context={"node": node, "name": name})
        return nid

    def get_raw(self, key: Any, name: str) -> RawValue:
        nid = self._require_node(key, name)
        try:
            # hivex returns the value handle, 0/None when missing
            vh = self.h.node_get_value(nid, name)
        except RuntimeError as e:
            # python-hivex raises RuntimeError(errno text) for a missing value
            raise ValueNotFound(f"value {name!r} not found", cause=e, context={"node": nid, "name": name}) from e

        if not vh:
            raise ValueNotFound(f"value {name!r} not found", context={"node": nid, "name": name})

        if isinstance(vh, dict):
            raw = RawValue.from_hivex(vh)
        else:
            t, data = self.h.value_value(vh)
            raw = RawValue(int(t), bytes(data))

        self.logger.debug("hivex read %r", name, extra={"ctx": {"node": nid, **payload_ctx(raw.type_tag, raw.data)}})
        return raw

    def set_raw(self, key: Any, name: str, raw: RawValue) -> None:
        if not self.write:
            raise AccessDenied(f"hive opened read-only; cannot set {name!r}", context={"name": name})
        nid = self._require_node(key, name)
        try:
            self.h.node_set_value(nid, raw.to_hivex(name))
        except RuntimeError as e:
            raise KeyStoreError(f"hivex failed to set {name!r}: {e}", cause=e, context={"node": nid}) from e
        self.logger.debug("hivex set %r", name, extra={"ctx": {"node": nid, **payload_ctx(raw.type_tag, raw.data)}})
