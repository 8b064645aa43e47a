# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/__init__.py
"""
regvalue - Windows registry value codec

Converts between raw registry values (type tag + bytes, as handed out by the
registry API or by hivex for offline hives) and typed Python values.

Usage as a library:

    from regvalue import RawValue, RegMultiSz, decode, encode, to_str

    raw = encode(RegMultiSz(["viostor", "netkvm"]))
    value = decode(RawValue(7, raw.data))
    print(to_str(value))
"""

__version__ = "0.1.0"

from .codec import (
    RawRegistryData,
    RawValue,
    RegBinary,
    RegDwordBigEndian,
    RegDwordLittleEndian,
    RegExpandSz,
    RegFullResourceDescriptor,
    RegistryCodec,
    RegLink,
    RegMultiSz,
    RegNone,
    RegQword,
    RegResourceList,
    RegResourceRequirementsList,
    RegSz,
    RegType,
    TypedValue,
    decode,
    encode,
    from_str,
    from_u32,
    from_u64,
    from_wide_str,
    to_str,
    to_u32,
    to_u64,
    to_wide_str,
)
from .core.exceptions import (
    AccessDenied,
    KeyStoreError,
    MalformedValue,
    RegValueError,
    TypeMismatch,
    UnsupportedType,
    ValueNotFound,
)
from .store import HivexKeyStore, KeyStore, MemoryKeyStore, get_value, set_value

__all__ = [
    "__version__",
    # codec
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
    # adapters
    "RawRegistryData",
    "to_str",
    "to_u32",
    "to_u64",
    "from_str",
    "from_u32",
    "from_u64",
    "to_wide_str",
    "from_wide_str",
    # stores
    "KeyStore",
    "MemoryKeyStore",
    "HivexKeyStore",
    "get_value",
    "set_value",
    # errors
    "RegValueError",
    "UnsupportedType",
    "MalformedValue",
    "TypeMismatch",
    "KeyStoreError",
    "ValueNotFound",
    "AccessDenied",
]
