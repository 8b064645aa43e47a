# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/codec/adapters.py
"""
Convenience conversions between registry values and plain Python types.

A small, closed table:

  str  <- REG_SZ, REG_EXPAND_SZ, REG_MULTI_SZ (entries joined with '\\n')
  u32  <- REG_DWORD (little-endian only; REG_DWORD_BIG_ENDIAN is rejected)
  u64  <- REG_QWORD

Writing goes the other way: str -> REG_SZ, u32 -> REG_DWORD, u64 -> REG_QWORD.
Anything else (REG_EXPAND_SZ, REG_MULTI_SZ, big-endian DWORD, links, resource
lists) is built by constructing the variant directly.

RawRegistryData is the escape hatch: tag + bytes, copied verbatim.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..core.exceptions import TypeMismatch
from . import primitives as P
from .codec import decode, encode
from .model import (
    RegDwordLittleEndian,
    RegExpandSz,
    RegMultiSz,
    RegQword,
    RegSz,
    TypedValue,
)
from .raw import RawValue
from .types import U32_MAX, RegType, is_known_tag


def _mismatch(value: Any, wanted: str) -> TypeMismatch:
    got = value.type_tag.reg_name if isinstance(value, TypedValue) else type(value).__name__
    return TypeMismatch(f"cannot read {got} as {wanted}", context={"got": got, "wanted": wanted})


# ---------------------------------------------------------------------------
# TypedValue -> plain
# ---------------------------------------------------------------------------


def to_str(value: TypedValue) -> str:
    if isinstance(value, (RegSz, RegExpandSz)):
        return value.text
    if isinstance(value, RegMultiSz):
        return "\n".join(value.items)
    raise _mismatch(value, "str")


def to_u32(value: TypedValue) -> int:
    if isinstance(value, RegDwordLittleEndian):
        return value.value
    raise _mismatch(value, "u32")


def to_u64(value: TypedValue) -> int:
    if isinstance(value, RegQword):
        return value.value
    raise _mismatch(value, "u64")


# ---------------------------------------------------------------------------
# plain -> TypedValue
# ---------------------------------------------------------------------------


def from_str(text: str) -> RegSz:
    return RegSz(text)


def from_u32(n: int) -> RegDwordLittleEndian:
    return RegDwordLittleEndian(n)


def from_u64(n: int) -> RegQword:
    return RegQword(n)


# ---------------------------------------------------------------------------
# Wide (OS) strings: every code unit kept, nulls included
# ---------------------------------------------------------------------------

_WIDE_TAGS = (RegType.SZ, RegType.EXPAND_SZ, RegType.MULTI_SZ)


def to_wide_str(raw: RawValue) -> str:
    """
    Raw UTF-16 content of a string value with nothing trimmed or replaced.

    Unlike to_str(), terminators and REG_MULTI_SZ separators stay as U+0000
    and unpaired surrogates are kept.
    """
    if raw.type_tag not in _WIDE_TAGS:
        got = RegType(raw.type_tag).reg_name if is_known_tag(raw.type_tag) else str(raw.type_tag)
        raise TypeMismatch(f"cannot read {got} as wide string", context={"got": got, "wanted": "wide str"})
    return P.decode_utf16_units(raw.data, lossy=False)


def from_wide_str(text: str) -> RawValue:
    """REG_SZ from already-wide text; no terminator is added."""
    return RawValue(int(RegType.SZ), P.encode_utf16(text, terminate=False))


# ---------------------------------------------------------------------------
# Raw passthrough
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RawRegistryData:
    """Uninterpreted registry data. Any tag is accepted, including unknown ones."""
    type_tag: int
    data: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "type_tag", int(self.type_tag))
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_raw(cls, raw: RawValue) -> "RawRegistryData":
        return cls(raw.type_tag, raw.data)

    def to_raw(self) -> RawValue:
        return RawValue(self.type_tag, self.data)


# ---------------------------------------------------------------------------
# Generic dispatch (used by store.values)
# ---------------------------------------------------------------------------

Writable = Union[str, int, RawRegistryData, TypedValue, RawValue]


def project(raw: RawValue, target: Any = TypedValue) -> Any:
    """
    Read a raw value as `target`:
      TypedValue       -> decoded variant (any kind)
      a variant class  -> decoded variant, TypeMismatch if it is another kind
      str / int        -> to_str() / to_u32() of the decoded value
      RawRegistryData  -> verbatim copy, never fails
    """
    if target is RawRegistryData:
        return RawRegistryData.from_raw(raw)
    if target is RawValue:
        return raw

    if target is str:
        return to_str(decode(raw))
    if target is int:
        return to_u32(decode(raw))

    if isinstance(target, type) and issubclass(target, TypedValue):
        value = decode(raw)
        if target is not TypedValue and not isinstance(value, target):
            raise _mismatch(value, target.__name__)
        return value

    raise TypeError(f"unsupported projection target: {target!r}")


def coerce(obj: Writable) -> RawValue:
    """Turn a str / u32 int / RawRegistryData / TypedValue into a RawValue."""
    if isinstance(obj, RawValue):
        return obj
    if isinstance(obj, RawRegistryData):
        return obj.to_raw()
    if isinstance(obj, TypedValue):
        return encode(obj)
    if isinstance(obj, str):
        return encode(from_str(obj))
    if isinstance(obj, bool):
        raise TypeError("bool is not a registry value; use an int")
    if isinstance(obj, int):
        if obj > U32_MAX:
            raise ValueError(f"{obj} does not fit in REG_DWORD; use from_u64() for REG_QWORD")
        return encode(from_u32(obj))
    raise TypeError(f"cannot store {type(obj).__name__} as a registry value")
