# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/codec/types.py
"""
Registry value type tags.

The numeric values are fixed by the Windows registry type enumeration
(winnt.h) and are what hivex reports in a value dict's "t" field.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Dict, Union

from ..core.exceptions import UnsupportedType

U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF


class RegType(IntEnum):
    NONE = 0
    SZ = 1
    EXPAND_SZ = 2
    BINARY = 3
    DWORD = 4
    DWORD_BIG_ENDIAN = 5
    LINK = 6
    MULTI_SZ = 7
    RESOURCE_LIST = 8
    FULL_RESOURCE_DESCRIPTOR = 9
    RESOURCE_REQUIREMENTS_LIST = 10
    QWORD = 11

    # aliases
    DWORD_LITTLE_ENDIAN = 4
    QWORD_LITTLE_ENDIAN = 11

    @property
    def reg_name(self) -> str:
        """Canonical REG_* spelling, e.g. 'REG_MULTI_SZ'."""
        return f"REG_{self.name}"

    @classmethod
    def parse(cls, v: Union[str, int, "RegType"]) -> "RegType":
        """
        Accept 'REG_SZ', 'SZ', 'sz', 'reg_dword_little_endian', 7, '7' or '0x7'.
        """
        if isinstance(v, RegType):
            return v
        if isinstance(v, int):
            try:
                return cls(v)
            except ValueError:
                raise UnsupportedType(f"unknown registry type tag {v}", context={"tag": v}) from None

        s = str(v).strip()
        try:
            return cls.parse(int(s, 0))
        except ValueError:
            pass

        name = s.upper().replace("-", "_")
        if name.startswith("REG_"):
            name = name[4:]
        member = cls.__members__.get(name)
        if member is None:
            raise UnsupportedType(f"unknown registry type name {s!r}", context={"type": s})
        return member


# Tags whose payload is a fixed-width integer.
FIXED_WIDTH: Dict[RegType, int] = {
    RegType.DWORD: 4,
    RegType.DWORD_BIG_ENDIAN: 4,
    RegType.QWORD: 8,
}

# Tags whose payload is UTF-16LE text (must be even-length on the wire).
UTF16_TAGS = frozenset({RegType.SZ, RegType.EXPAND_SZ, RegType.LINK, RegType.MULTI_SZ})


def is_known_tag(tag: int) -> bool:
    return tag in RegType._value2member_map_
