# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# regvalue/cli/commands.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TextIO

from rich.console import Console
from rich.table import Table

from ..codec import adapters as A
from ..codec.codec import decode, encode
from ..codec.raw import RawValue
from ..codec.serialize import from_dict, to_dict
from ..codec.types import FIXED_WIDTH, UTF16_TAGS, RegType
from ..core.exceptions import UsageError


def _resolve_type(args: argparse.Namespace) -> RegType:
    t = getattr(args, "type", None) or getattr(args, "default_type", None)
    if t is None:
        raise UsageError("no --type given and no default_type configured")
    return RegType.parse(t)


def _emit(out: TextIO, obj: Any, indent: Optional[int], *, ascii_only: bool = False) -> None:
    # wide strings may hold lone surrogates, which only survive as \u escapes
    out.write(json.dumps(obj, indent=indent, ensure_ascii=ascii_only))
    out.write("\n")


def _read_payload(args: argparse.Namespace) -> bytes:
    if args.file == "-":
        return sys.stdin.buffer.read()
    if args.file:
        return Path(args.file).expanduser().read_bytes()
    return b""


def cmd_decode(logger: logging.Logger, args: argparse.Namespace, out: TextIO) -> int:
    tag = _resolve_type(args)
    if args.hex is not None:
        raw = RawValue.from_hex(int(tag), args.hex)
    else:
        raw = RawValue(int(tag), _read_payload(args))
    logger.info("Decoding %s (%d bytes)", tag.reg_name, len(raw.data))

    proj = args.project
    result: Any
    if proj == "raw":
        rd = A.RawRegistryData.from_raw(raw)
        result = {"tag": rd.type_tag, "hex": rd.data.hex()}
    elif proj == "wide":
        result = A.to_wide_str(raw)
    else:
        value = decode(raw)
        if proj == "str":
            result = A.to_str(value)
        elif proj == "u32":
            result = A.to_u32(value)
        elif proj == "u64":
            result = A.to_u64(value)
        else:
            result = to_dict(value)

    _emit(out, result, args.indent, ascii_only=(proj == "wide"))
    return 0


def _value_from_cli(tag: RegType, values: List[str]) -> Dict[str, Any]:
    if tag is RegType.MULTI_SZ:
        return {"type": tag.reg_name, "value": list(values)}
    if tag is RegType.NONE:
        return {"type": tag.reg_name, "value": None}
    if len(values) != 1:
        raise UsageError(f"{tag.reg_name} takes exactly one --value, got {len(values)}")
    return {"type": tag.reg_name, "value": values[0]}


def cmd_encode(logger: logging.Logger, args: argparse.Namespace, out: TextIO) -> int:
    tag = _resolve_type(args)
    value = from_dict(_value_from_cli(tag, args.values))
    raw = encode(value)
    logger.info("Encoded %s into %d bytes", tag.reg_name, len(raw.data))
    _emit(out, {"type": tag.reg_name, "tag": raw.type_tag, "hex": raw.data.hex()}, args.indent)
    return 0


def _tag_rows() -> List[List[str]]:
    rows = []
    for tag in sorted(set(RegType), key=int):
        if tag in FIXED_WIDTH:
            wire = f"{FIXED_WIDTH[tag]} bytes, {'big' if tag is RegType.DWORD_BIG_ENDIAN else 'little'}-endian"
        elif tag in UTF16_TAGS:
            wire = "UTF-16LE, null-terminated"
        elif tag is RegType.NONE:
            wire = "-"
        else:
            wire = "opaque bytes"
        rows.append([str(int(tag)), tag.reg_name, wire])
    return rows


def cmd_tags(logger: logging.Logger, args: argparse.Namespace, out: TextIO) -> int:
    rows = _tag_rows()
    if out.isatty():
        table = Table(title="Registry value types")
        table.add_column("Tag", justify="right", style="bold cyan")
        table.add_column("Name", style="green")
        table.add_column("Wire format")
        for r in rows:
            table.add_row(*r)
        Console(file=out).print(table)
    else:
        for r in rows:
            out.write("\t".join(r) + "\n")
    return 0


COMMANDS: Dict[str, Callable[[logging.Logger, argparse.Namespace, TextIO], int]] = {
    "decode": cmd_decode,
    "encode": cmd_encode,
    "tags": cmd_tags,
}
