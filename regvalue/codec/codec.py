# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/codec/codec.py
"""
RawValue <-> TypedValue conversion.

Both directions dispatch through the tag table in model.py, so a tag and its
variant can never drift apart.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ..core.exceptions import MalformedValue, UnsupportedType
from ..core.logger import Log
from ..core.logging_utils import payload_ctx
from . import primitives as P
from .model import (
    TAG_FOR_VARIANT,
    VARIANT_FOR_TAG,
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
from .types import RegType, is_known_tag

_Decoder = Callable[[bytes], TypedValue]
_Encoder = Callable[[TypedValue], bytes]

_DECODERS: Dict[RegType, _Decoder] = {
    RegType.NONE: lambda b: RegNone(),
    RegType.SZ: lambda b: RegSz(P.decode_sz(b)),
    RegType.EXPAND_SZ: lambda b: RegExpandSz(P.decode_sz(b)),
    RegType.BINARY: lambda b: RegBinary(b),
    RegType.DWORD: lambda b: RegDwordLittleEndian(P.decode_u32(b)),
    RegType.DWORD_BIG_ENDIAN: lambda b: RegDwordBigEndian(P.decode_u32(b, big_endian=True)),
    RegType.LINK: lambda b: RegLink(P.decode_sz(b)),
    RegType.MULTI_SZ: lambda b: RegMultiSz(P.decode_multi_sz(b)),
    RegType.RESOURCE_LIST: lambda b: RegResourceList(b),
    RegType.FULL_RESOURCE_DESCRIPTOR: lambda b: RegFullResourceDescriptor(b),
    RegType.RESOURCE_REQUIREMENTS_LIST: lambda b: RegResourceRequirementsList(b),
    RegType.QWORD: lambda b: RegQword(P.decode_u64(b)),
}

_ENCODERS: Dict[RegType, _Encoder] = {
    RegType.NONE: lambda v: b"",
    RegType.SZ: lambda v: P.encode_utf16(v.text),  # type: ignore[attr-defined]
    RegType.EXPAND_SZ: lambda v: P.encode_utf16(v.text),  # type: ignore[attr-defined]
    RegType.BINARY: lambda v: v.data,  # type: ignore[attr-defined]
    RegType.DWORD: lambda v: P.encode_u32(v.value),  # type: ignore[attr-defined]
    RegType.DWORD_BIG_ENDIAN: lambda v: P.encode_u32(v.value, big_endian=True),  # type: ignore[attr-defined]
    RegType.LINK: lambda v: P.encode_utf16(v.text),  # type: ignore[attr-defined]
    RegType.MULTI_SZ: lambda v: P.encode_multi_sz(v.items),  # type: ignore[attr-defined]
    RegType.RESOURCE_LIST: lambda v: v.data,  # type: ignore[attr-defined]
    RegType.FULL_RESOURCE_DESCRIPTOR: lambda v: v.data,  # type: ignore[attr-defined]
    RegType.RESOURCE_REQUIREMENTS_LIST: lambda v: v.data,  # type: ignore[attr-defined]
    RegType.QWORD: lambda v: P.encode_u64(v.value),  # type: ignore[attr-defined]
}

if not set(_DECODERS) == set(_ENCODERS) == set(VARIANT_FOR_TAG):
    raise RuntimeError("codec tables do not cover the same registry types")


class RegistryCodec:
    """
    Stateless converter between RawValue and TypedValue.

    Holds only a logger; one instance can be shared across threads.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = Log.bind(logger or logging.getLogger(__name__), component="codec")

    def decode(self, raw: RawValue) -> TypedValue:
        if not is_known_tag(raw.type_tag):
            raise UnsupportedType(
                f"unsupported registry type tag {raw.type_tag}",
                context={"tag": raw.type_tag, "bytes": len(raw.data)},
            )
        tag = RegType(raw.type_tag)

        if tag is RegType.NONE and raw.data:
            self.logger.debug("Dropping %d stray byte(s) on REG_NONE value", len(raw.data))

        try:
            value = _DECODERS[tag](raw.data)
        except MalformedValue as e:
            raise e.with_context(type=tag.reg_name)

        Log.trace(self.logger, "decoded %s", tag.reg_name, **payload_ctx(raw.type_tag, raw.data))
        return value

    def encode(self, value: TypedValue) -> RawValue:
        tag = TAG_FOR_VARIANT.get(type(value))
        if tag is None:
            raise TypeError(f"not a registry value: {type(value).__name__}")
        data = _ENCODERS[tag](value)
        Log.trace(self.logger, "encoded %s", tag.reg_name, **payload_ctx(tag, data))
        return RawValue(int(tag), data)


_default = RegistryCodec()


def decode(raw: RawValue) -> TypedValue:
    """Decode a raw (tag, bytes) pair into its typed variant."""
    return _default.decode(raw)


def encode(value: TypedValue) -> RawValue:
    """Encode a typed variant into its raw (tag, bytes) pair."""
    return _default.encode(value)
