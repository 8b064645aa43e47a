# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/codec/primitives.py
"""
Fixed-width integer and UTF-16 helpers used by the registry codec.

Integers are converted with explicit width + byte order and a length check;
text is UTF-16LE as stored by the registry.
"""
from __future__ import annotations

from typing import Iterable, List

from ..core.exceptions import MalformedValue
from .raw import BytesLike
from .types import U32_MAX, U64_MAX

_NUL = "\x00"


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def _encode_uint(value: int, width: int, limit: int, big_endian: bool) -> bytes:
    v = int(value)
    if not 0 <= v <= limit:
        raise ValueError(f"value {v} does not fit in {width * 8} unsigned bits")
    return v.to_bytes(width, "big" if big_endian else "little", signed=False)


def _decode_uint(data: BytesLike, width: int, big_endian: bool) -> int:
    b = bytes(data)
    if len(b) != width:
        raise MalformedValue(
            f"expected {width} bytes for a {width * 8}-bit integer, got {len(b)}",
            context={"expected": width, "actual": len(b)},
        )
    return int.from_bytes(b, "big" if big_endian else "little", signed=False)


def encode_u32(value: int, *, big_endian: bool = False) -> bytes:
    return _encode_uint(value, 4, U32_MAX, big_endian)


def encode_u64(value: int, *, big_endian: bool = False) -> bytes:
    return _encode_uint(value, 8, U64_MAX, big_endian)


def decode_u32(data: BytesLike, *, big_endian: bool = False) -> int:
    return _decode_uint(data, 4, big_endian)


def decode_u64(data: BytesLike, *, big_endian: bool = False) -> int:
    return _decode_uint(data, 8, big_endian)


# ---------------------------------------------------------------------------
# UTF-16 text
# ---------------------------------------------------------------------------


def encode_utf16(text: str, *, terminate: bool = True) -> bytes:
    """
    Encode text as UTF-16LE code units.

    terminate=True appends one U+0000 (REG_SZ / REG_EXPAND_SZ / REG_LINK).
    Lone surrogates are written through as-is.
    """
    s = text + _NUL if terminate else text
    return s.encode("utf-16le", errors="surrogatepass")


def decode_utf16_units(data: BytesLike, *, lossy: bool = True) -> str:
    """
    Decode UTF-16LE code units without trimming anything.

    lossy=True replaces invalid surrogate sequences with U+FFFD; lossy=False
    keeps them as lone surrogates in the returned str.
    """
    b = bytes(data)
    if len(b) % 2:
        raise MalformedValue(
            f"UTF-16 payload has odd length {len(b)}",
            context={"length": len(b)},
        )
    return b.decode("utf-16le", errors="replace" if lossy else "surrogatepass")


def decode_utf16(data: BytesLike) -> str:
    """Lossy decode, then strip every trailing U+0000."""
    return decode_utf16_units(data).rstrip(_NUL)


def decode_sz(data: BytesLike) -> str:
    """Single-string payload: text up to the first U+0000."""
    return decode_utf16(data).split(_NUL, 1)[0]


def encode_multi_sz(items: Iterable[str]) -> bytes:
    """
    REG_MULTI_SZ: each string null-terminated, plus one extra null at the end.
    An empty list encodes as a single null code unit.
    """
    return b"".join(encode_utf16(s) for s in items) + encode_utf16("", terminate=True)


def decode_multi_sz(data: BytesLike) -> List[str]:
    """
    Split a REG_MULTI_SZ payload on U+0000 after trimming trailing nulls.

    Trailing empty strings cannot be told apart from the terminator, so
    [""] and [] both decode as [].
    """
    s = decode_utf16(data)
    if not s:
        return []
    return s.split(_NUL)
