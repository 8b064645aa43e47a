# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/codec/raw.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

from ..core.exceptions import MalformedValue
from .types import U32_MAX

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class RawValue:
    """
    A registry value as the key-store hands it out: type tag + byte buffer.

    No width checks happen here; an unknown tag is a legal RawValue.
    """
    type_tag: int
    data: bytes = b""

    def __post_init__(self) -> None:
        tag = int(self.type_tag)
        if not 0 <= tag <= U32_MAX:
            raise ValueError(f"type tag out of u32 range: {tag}")
        object.__setattr__(self, "type_tag", tag)
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def to_hivex(self, name: str) -> Dict[str, Any]:
        """Value dict in the shape hivex's node_set_value() expects."""
        return {"key": name, "t": self.type_tag, "value": self.data}

    @classmethod
    def from_hivex(cls, v: Dict[str, Any]) -> "RawValue":
        """Build from a hivex value dict ({"key", "t", "value"})."""
        raw = v.get("value")
        if raw is None:
            raw = b""
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise MalformedValue(
                "hivex value payload is not bytes",
                context={"key": v.get("key"), "payload_type": type(raw).__name__},
            )
        return cls(int(v.get("t", 0)), bytes(raw))

    @classmethod
    def from_hex(cls, type_tag: int, text: str) -> "RawValue":
        """Parse a hex string; whitespace, ':' and ',' separators are allowed."""
        cleaned = "".join(ch for ch in text if ch not in " \t\r\n:,")
        try:
            data = bytes.fromhex(cleaned)
        except ValueError as e:
            raise MalformedValue(f"invalid hex payload: {e}", cause=e) from e
        return cls(type_tag, data)
