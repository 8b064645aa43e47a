# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
"""
Log fields for registry payloads.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


def hexdump_preview(data: Optional[bytes], limit: int = 32) -> str:
    """Short hex preview of a payload for debug logs."""
    if not data:
        return "<empty>"
    head = bytes(data[:limit]).hex(" ")
    if len(data) > limit:
        return f"{head} ... ({len(data)} bytes)"
    return head


def payload_ctx(type_tag: int, data: Optional[bytes], *, limit: int = 16) -> Dict[str, Any]:
    """`ctx` fields describing one raw value: tag, size and a hex preview."""
    return {"tag": int(type_tag), "size": len(data or b""), "data": hexdump_preview(data, limit)}
