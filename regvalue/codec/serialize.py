# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/codec/serialize.py
"""
JSON-friendly dicts for registry values (used by the CLI and reports).

  {"type": "REG_MULTI_SZ", "tag": 7, "value": ["a", "b"]}
  {"type": "REG_BINARY",   "tag": 3, "value": "deadbeef"}
"""
from __future__ import annotations

from typing import Any, Dict

from ..core.exceptions import MalformedValue, UnsupportedType
from .model import (
    OPAQUE_VARIANTS,
    TEXT_VARIANTS,
    VARIANT_FOR_TAG,
    RegDwordBigEndian,
    RegDwordLittleEndian,
    RegMultiSz,
    RegNone,
    RegQword,
    TypedValue,
)
from .types import RegType

_INT_VARIANTS = (RegDwordLittleEndian, RegDwordBigEndian, RegQword)


def to_dict(value: TypedValue) -> Dict[str, Any]:
    tag = value.type_tag
    d: Dict[str, Any] = {"type": tag.reg_name, "tag": int(tag)}

    if isinstance(value, RegNone):
        d["value"] = None
    elif isinstance(value, TEXT_VARIANTS):
        d["value"] = value.text
    elif isinstance(value, RegMultiSz):
        d["value"] = list(value.items)
    elif isinstance(value, _INT_VARIANTS):
        d["value"] = value.value
    elif isinstance(value, OPAQUE_VARIANTS):
        d["value"] = value.data.hex()
    else:
        raise TypeError(f"not a registry value: {type(value).__name__}")
    return d


def _text_value(cls: Any, v: Any) -> TypedValue:
    if cls is not RegMultiSz:
        return cls("" if v is None else str(v))
    if v is None:
        return RegMultiSz()
    if isinstance(v, str):
        return RegMultiSz(v.split("\n"))
    return RegMultiSz(str(x) for x in v)


def from_dict(d: Dict[str, Any]) -> TypedValue:
    """Inverse of to_dict(). "type" wins over "tag" when both are present."""
    if "type" in d:
        tag = RegType.parse(d["type"])
    elif "tag" in d:
        tag = RegType.parse(d["tag"])
    else:
        raise UnsupportedType("value dict has neither 'type' nor 'tag'")

    cls = VARIANT_FOR_TAG[tag]
    v = d.get("value")

    if cls is RegNone:
        return RegNone()
    if cls in TEXT_VARIANTS or cls is RegMultiSz:
        try:
            return _text_value(cls, v)
        except ValueError as e:
            raise MalformedValue(f"invalid {tag.reg_name} text: {e}", cause=e) from e
    if cls in _INT_VARIANTS:
        try:
            return cls(int(v, 0) if isinstance(v, str) else int(v))  # type: ignore[call-arg]
        except (TypeError, ValueError) as e:
            raise MalformedValue(f"invalid {tag.reg_name} integer: {v!r}", cause=e) from e

    # opaque
    try:
        return cls(bytes.fromhex(v or ""))  # type: ignore[call-arg]
    except (TypeError, ValueError) as e:
        raise MalformedValue(f"invalid {tag.reg_name} hex payload", cause=e) from e
