# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/store/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..codec.raw import RawValue


class KeyStore(ABC):
    """
    The two primitives the codec needs from a registry backend.

    `key` is whatever the backend uses to address a key (a handle, a hivex
    node id, a path); the codec never looks inside it.

    Implementations raise ValueNotFound / AccessDenied / KeyStoreError.
    """

    @abstractmethod
    def get_raw(self, key: Any, name: str) -> RawValue:
        ...

    @abstractmethod
    def set_raw(self, key: Any, name: str, raw: RawValue) -> None:
        ...
