# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for value variants, type tags and RawValue."""
from __future__ import annotations

import dataclasses

import pytest

from regvalue.codec import (
    RawValue,
    RegBinary,
    RegDwordLittleEndian,
    RegExpandSz,
    RegLink,
    RegMultiSz,
    RegQword,
    RegResourceList,
    RegSz,
    RegType,
    decode,
    encode,
)
from regvalue.codec.model import TAG_FOR_VARIANT, VARIANT_FOR_TAG
from regvalue.core.exceptions import MalformedValue, UnsupportedType


@pytest.mark.unit
class TestRegType:
    def test_numeric_values(self):
        expected = {
            "NONE": 0,
            "SZ": 1,
            "EXPAND_SZ": 2,
            "BINARY": 3,
            "DWORD": 4,
            "DWORD_BIG_ENDIAN": 5,
            "LINK": 6,
            "MULTI_SZ": 7,
            "RESOURCE_LIST": 8,
            "FULL_RESOURCE_DESCRIPTOR": 9,
            "RESOURCE_REQUIREMENTS_LIST": 10,
            "QWORD": 11,
        }
        assert {t.name: int(t) for t in RegType} == expected

    def test_aliases(self):
        assert RegType.DWORD_LITTLE_ENDIAN is RegType.DWORD
        assert RegType.QWORD_LITTLE_ENDIAN is RegType.QWORD

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("REG_SZ", RegType.SZ),
            ("sz", RegType.SZ),
            ("reg-multi-sz", RegType.MULTI_SZ),
            ("REG_DWORD_LITTLE_ENDIAN", RegType.DWORD),
            ("11", RegType.QWORD),
            ("0x5", RegType.DWORD_BIG_ENDIAN),
            (3, RegType.BINARY),
        ],
    )
    def test_parse(self, text, expected):
        assert RegType.parse(text) is expected

    @pytest.mark.parametrize("bad", ["REG_FOO", 12, "999"])
    def test_parse_unknown(self, bad):
        with pytest.raises(UnsupportedType):
            RegType.parse(bad)

    def test_reg_name(self):
        assert RegType.MULTI_SZ.reg_name == "REG_MULTI_SZ"


@pytest.mark.unit
class TestTagTable:
    def test_table_covers_every_tag(self):
        assert set(VARIANT_FOR_TAG) == set(RegType)
        assert len(TAG_FOR_VARIANT) == len(VARIANT_FOR_TAG)

    def test_tag_is_independent_of_payload(self):
        assert RegSz("").type_tag is RegSz("x" * 100).type_tag is RegType.SZ


@pytest.mark.unit
class TestVariants:
    def test_values_are_immutable(self):
        v = RegSz("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.text = "b"  # type: ignore[misc]

    def test_multi_sz_stores_tuple(self):
        v = RegMultiSz(["a", "b"])
        assert v.items == ("a", "b")
        assert v == RegMultiSz(("a", "b"))
        assert hash(v) == hash(RegMultiSz(iter(["a", "b"])))

    def test_multi_sz_rejects_bare_string(self):
        with pytest.raises(TypeError):
            RegMultiSz("abc")

    def test_opaque_kinds_do_not_compare_equal(self):
        assert RegBinary(b"x") != RegResourceList(b"x")

    def test_bytearray_is_copied(self):
        buf = bytearray(b"ab")
        v = RegBinary(buf)
        buf[0] = 0
        assert v.data == b"ab"

    @pytest.mark.parametrize("n", [-1, 0x1_0000_0000])
    def test_dword_range(self, n):
        with pytest.raises(ValueError):
            RegDwordLittleEndian(n)

    def test_qword_range(self):
        RegQword(0xFFFFFFFFFFFFFFFF)
        with pytest.raises(ValueError):
            RegQword(0x1_0000_0000_0000_0000)

    def test_bool_is_not_an_integer_value(self):
        with pytest.raises(TypeError):
            RegDwordLittleEndian(True)

    def test_text_must_be_str(self):
        with pytest.raises(TypeError):
            RegSz(b"bytes")  # type: ignore[arg-type]

    @pytest.mark.parametrize("cls", [RegSz, RegExpandSz, RegLink])
    @pytest.mark.parametrize("text", ["a\x00", "\x00", "a\x00b"])
    def test_text_rejects_nul(self, cls, text):
        with pytest.raises(ValueError):
            cls(text)

    def test_multi_sz_item_rejects_nul(self):
        with pytest.raises(ValueError):
            RegMultiSz(["ok", "a\x00b"])

    @pytest.mark.parametrize(
        "value",
        [RegSz("C:\\Windows"), RegExpandSz("%SystemRoot%"), RegLink("\\Registry\\Machine"), RegMultiSz(["a", "", "b"])],
    )
    def test_text_survives_encode_decode(self, value):
        assert decode(encode(value)) == value


@pytest.mark.unit
class TestRawValue:
    def test_unknown_tag_allowed(self):
        assert RawValue(0x1234, b"x").type_tag == 0x1234

    def test_tag_range(self):
        with pytest.raises(ValueError):
            RawValue(-1, b"")
        with pytest.raises(ValueError):
            RawValue(0x1_0000_0000, b"")

    def test_hivex_dict_round_trip(self):
        raw = RawValue(4, b"\x01\x00\x00\x00")
        d = raw.to_hivex("Start")
        assert d == {"key": "Start", "t": 4, "value": b"\x01\x00\x00\x00"}
        assert RawValue.from_hivex(d) == raw

    def test_hivex_dict_with_non_bytes(self):
        with pytest.raises(MalformedValue):
            RawValue.from_hivex({"key": "x", "t": 1, "value": "text"})

    def test_from_hex(self):
        assert RawValue.from_hex(3, "de:ad be,ef").data == b"\xde\xad\xbe\xef"
        with pytest.raises(MalformedValue):
            RawValue.from_hex(3, "zz")
