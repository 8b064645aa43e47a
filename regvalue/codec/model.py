# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/codec/model.py
"""
Strongly-typed registry data.

One frozen dataclass per registry data kind. The numeric tag of each kind
comes from TAG_FOR_VARIANT, never from the payload.

Null-terminated storage caveats:
  * an empty REG_SZ and a missing string look the same on the wire
  * RegMultiSz(["data"]) -> ["data"], RegMultiSz([]) -> [],
    RegMultiSz(["a", "", "b"]) -> ["a", "", "b"], but
    RegMultiSz([""]) -> [] (trailing empty strings merge into the terminator)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple, Type

from .types import U32_MAX, U64_MAX, RegType


class TypedValue:
    """Base of every registry data variant."""

    __slots__ = ()

    @property
    def type_tag(self) -> RegType:
        return TAG_FOR_VARIANT[type(self)]


def _check_uint(cls_name: str, value: int, limit: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{cls_name} expects an int, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{cls_name} value out of range: {value}")
    return value


def _check_text(cls_name: str, text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"{cls_name} expects str, got {type(text).__name__}")
    # U+0000 is the wire terminator
    if "\x00" in text:
        raise ValueError(f"{cls_name} text may not contain U+0000")
    return text


@dataclass(frozen=True)
class RegNone(TypedValue):
    pass


@dataclass(frozen=True)
class RegSz(TypedValue):
    """A normal string."""
    text: str = ""

    def __post_init__(self) -> None:
        _check_text("RegSz", self.text)


@dataclass(frozen=True)
class RegExpandSz(TypedValue):
    """A string with unexpanded environment references, e.g. '%SystemRoot%'."""
    text: str = ""

    def __post_init__(self) -> None:
        _check_text("RegExpandSz", self.text)


@dataclass(frozen=True)
class RegLink(TypedValue):
    """Symbolic link target."""
    text: str = ""

    def __post_init__(self) -> None:
        _check_text("RegLink", self.text)


@dataclass(frozen=True)
class RegMultiSz(TypedValue):
    items: Tuple[str, ...] = field(default_factory=tuple)

    def __init__(self, items: Iterable[str] = ()) -> None:
        if isinstance(items, str):
            raise TypeError("RegMultiSz expects an iterable of str, not a single str")
        t = tuple(items)
        for s in t:
            _check_text("RegMultiSz", s)
        object.__setattr__(self, "items", t)


@dataclass(frozen=True)
class _Opaque(TypedValue):
    data: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{type(self).__name__} expects bytes, got {type(self.data).__name__}")
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class RegBinary(_Opaque):
    """Simple binary data."""


@dataclass(frozen=True)
class RegResourceList(_Opaque):
    """Hardware resource list; format is not interpreted."""


@dataclass(frozen=True)
class RegFullResourceDescriptor(_Opaque):
    """Full resource descriptor; format is not interpreted."""


@dataclass(frozen=True)
class RegResourceRequirementsList(_Opaque):
    """Resource requirements list; format is not interpreted."""


@dataclass(frozen=True)
class RegDwordLittleEndian(TypedValue):
    value: int = 0

    def __post_init__(self) -> None:
        _check_uint("RegDwordLittleEndian", self.value, U32_MAX)


@dataclass(frozen=True)
class RegDwordBigEndian(TypedValue):
    value: int = 0

    def __post_init__(self) -> None:
        _check_uint("RegDwordBigEndian", self.value, U32_MAX)


@dataclass(frozen=True)
class RegQword(TypedValue):
    """64-bit integer, little-endian only (there is no big-endian QWORD)."""
    value: int = 0

    def __post_init__(self) -> None:
        _check_uint("RegQword", self.value, U64_MAX)


# ---------------------------------------------------------------------------
# Tag table (single source of truth for both codec directions)
# ---------------------------------------------------------------------------

VARIANT_FOR_TAG: Dict[RegType, Type[TypedValue]] = {
    RegType.NONE: RegNone,
    RegType.SZ: RegSz,
    RegType.EXPAND_SZ: RegExpandSz,
    RegType.BINARY: RegBinary,
    RegType.DWORD: RegDwordLittleEndian,
    RegType.DWORD_BIG_ENDIAN: RegDwordBigEndian,
    RegType.LINK: RegLink,
    RegType.MULTI_SZ: RegMultiSz,
    RegType.RESOURCE_LIST: RegResourceList,
    RegType.FULL_RESOURCE_DESCRIPTOR: RegFullResourceDescriptor,
    RegType.RESOURCE_REQUIREMENTS_LIST: RegResourceRequirementsList,
    RegType.QWORD: RegQword,
}

TAG_FOR_VARIANT: Dict[Type[TypedValue], RegType] = {v: k for k, v in VARIANT_FOR_TAG.items()}

TEXT_VARIANTS = (RegSz, RegExpandSz, RegLink)
OPAQUE_VARIANTS = (RegBinary, RegResourceList, RegFullResourceDescriptor, RegResourceRequirementsList)
