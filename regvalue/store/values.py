# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/store/values.py
"""
Typed reads and writes on top of a KeyStore.

    n = get_value(store, node, "Start", int)
    set_value(store, node, "ImagePath", RegExpandSz(r"%SystemRoot%\\system32\\drivers\\viostor.sys"))
"""
from __future__ import annotations

from typing import Any

from ..codec.adapters import Writable, coerce, project
from ..codec.model import TypedValue
from .base import KeyStore


def get_value(store: KeyStore, key: Any, name: str, target: Any = TypedValue) -> Any:
    """Read `name` under `key` and project it to `target` (see adapters.project)."""
    return project(store.get_raw(key, name), target)


def set_value(store: KeyStore, key: Any, name: str, value: Writable) -> None:
    """Encode `value` (str, u32 int, TypedValue, RawRegistryData or RawValue) and write it."""
    store.set_raw(key, name, coerce(value))
