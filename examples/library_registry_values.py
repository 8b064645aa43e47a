#!/usr/bin/env python3
# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Example: Reading and writing typed registry values with regvalue.

This example demonstrates:
- Decoding raw (tag + bytes) values into typed variants
- Projecting values to plain str / int
- Storing values through a key store
- Passing unknown tags through untouched

Usage:
    python library_registry_values.py
"""

import logging

from regvalue import (
    MalformedValue,
    MemoryKeyStore,
    RawValue,
    RegExpandSz,
    RegMultiSz,
    decode,
    encode,
    get_value,
    set_value,
    to_str,
)
from regvalue.codec import RawRegistryData

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

SERVICE_KEY = r"SYSTEM\CurrentControlSet\Services\viostor"


def decode_examples():
    """Decode a few raw payloads as they come out of a hive."""
    raw = RawValue(7, "viostor\0netkvm\0\0".encode("utf-16-le"))
    value = decode(raw)
    logger.info(f"MULTI_SZ decoded:  {list(value.items)}")
    logger.info(f"As a single str:   {to_str(value)!r}")

    try:
        decode(RawValue(4, b"\x01\x02"))
    except MalformedValue as e:
        logger.info(f"Short DWORD rejected: {e} {e.context}")


def store_examples():
    """Write and read service values through an in-memory key store."""
    store = MemoryKeyStore()

    set_value(store, SERVICE_KEY, "Start", 0)
    set_value(store, SERVICE_KEY, "ImagePath", RegExpandSz(r"system32\drivers\viostor.sys"))
    set_value(store, SERVICE_KEY, "DependOnService", RegMultiSz(["storport"]))
    set_value(store, SERVICE_KEY, "VendorBlob", RawRegistryData(0x10001, b"\xca\xfe"))

    logger.info(f"Start:        {get_value(store, SERVICE_KEY, 'start', int)}")
    logger.info(f"ImagePath:    {get_value(store, SERVICE_KEY, 'ImagePath', str)}")
    logger.info(f"Dependencies: {get_value(store, SERVICE_KEY, 'DependOnService')}")
    logger.info(f"VendorBlob:   {get_value(store, SERVICE_KEY, 'VendorBlob', RawRegistryData)}")

    for name, raw in store.items(SERVICE_KEY):
        logger.info(f"  {name:<16} tag={raw.type_tag:<6} bytes={raw.data.hex()}")


def main():
    decode_examples()
    store_examples()

    raw = encode(RegMultiSz(["a", "b"]))
    logger.info(f"Encoded MULTI_SZ: {raw.data.hex()}")


if __name__ == "__main__":
    main()
