# SPDX-License-Identifier: LGPL-3.0-or-later
# regvalue/codec/__init__.py
"""
Registry value codec.

- types: RegType tag enumeration
- raw: RawValue (tag + bytes)
- primitives: integer / UTF-16 helpers
- model: TypedValue variants and the tag table
- codec: RawValue <-> TypedValue
- adapters: plain str/int views and the RawRegistryData passthrough
- serialize: JSON-friendly dicts
"""
from .adapters import (
    RawRegistryData,
    coerce,
    from_str,
    from_u32,
    from_u64,
    from_wide_str,
    project,
    to_str,
    to_u32,
    to_u64,
    to_wide_str,
)
from .codec import RegistryCodec, decode, encode
from .model import (
    RegBinary,
    RegDwordBigEndian,
    RegDwordLittleEndian,
    RegExpandSz,
    RegFullResourceDescriptor,
    RegLink,
    RegMultiSz,
    RegNone,
    RegQword,
    RegResourceList,
    RegResourceRequirementsList,
    RegSz,
    TypedValue,
)
from .raw import RawValue
from .types import RegType

__all__ = [
    "RegType",
    "RawValue",
    "TypedValue",
    "RegNone",
    "RegSz",
    "RegExpandSz",
    "RegBinary",
    "RegDwordLittleEndian",
    "RegDwordBigEndian",
    "RegLink",
    "RegMultiSz",
    "RegResourceList",
    "RegFullResourceDescriptor",
    "RegResourceRequirementsList",
    "RegQword",
    "RegistryCodec",
    "decode",
    "encode",
    "RawRegistryData",
    "to_str",
    "to_u32",
    "to_u64",
    "from_str",
    "from_u32",
    "from_u64",
    "to_wide_str",
    "from_wide_str",
    "project",
    "coerce",
]
