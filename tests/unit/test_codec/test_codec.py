# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for RawValue <-> TypedValue conversion."""
from __future__ import annotations

import logging

import pytest

from regvalue.codec import (
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
    decode,
    encode,
)
from regvalue.core.exceptions import MalformedValue, UnsupportedType

ROUND_TRIP = [
    RegNone(),
    RegSz("ProgramFilesDir"),
    RegSz(""),
    RegExpandSz(r"%SystemRoot%\system32\drivers\viostor.sys"),
    RegLink(r"\Registry\Machine\System\ControlSet001"),
    RegDwordLittleEndian(0),
    RegDwordLittleEndian(0xFFFFFFFF),
    RegDwordBigEndian(0x01020304),
    RegQword(0x0102030405060708),
    RegMultiSz(["viostor", "netkvm", "vioscsi"]),
    RegMultiSz([]),
    RegMultiSz(["a", "", "b"]),
    RegBinary(b"\x00\x01\xfe\xff"),
    RegResourceList(b"\x01\x00\x00\x00"),
    RegFullResourceDescriptor(b""),
    RegResourceRequirementsList(b"\xaa" * 17),
]


@pytest.mark.unit
class TestRoundTrip:
    @pytest.mark.parametrize("value", ROUND_TRIP, ids=lambda v: type(v).__name__)
    def test_decode_encode(self, value):
        raw = encode(value)
        assert raw.type_tag == value.type_tag
        assert decode(raw) == value

    def test_multi_sz_single_empty_string_is_lost(self):
        assert decode(encode(RegMultiSz([""]))) == RegMultiSz([])

    def test_opaque_payload_preserved_byte_for_byte(self):
        blob = bytes(range(256))
        raw = RawValue(int(RegType.BINARY), blob)
        assert encode(decode(raw)).data == blob


@pytest.mark.unit
class TestWireLayout:
    def test_dword_endianness(self):
        assert encode(RegDwordLittleEndian(0x01020304)).data == bytes([4, 3, 2, 1])
        assert encode(RegDwordBigEndian(0x01020304)).data == bytes([1, 2, 3, 4])

    def test_tags_match_windows(self):
        assert encode(RegSz("x")).type_tag == 1
        assert encode(RegExpandSz("x")).type_tag == 2
        assert encode(RegDwordBigEndian(1)).type_tag == 5
        assert encode(RegMultiSz(["x"])).type_tag == 7
        assert encode(RegQword(1)).type_tag == 11

    def test_sz_is_null_terminated(self):
        assert encode(RegSz("hi")).data == b"h\x00i\x00\x00\x00"

    def test_none_has_no_payload(self):
        assert encode(RegNone()).data == b""


@pytest.mark.unit
class TestDecodeErrors:
    def test_unknown_tag(self):
        with pytest.raises(UnsupportedType) as exc_info:
            decode(RawValue(999, b""))
        assert exc_info.value.context["tag"] == 999

    def test_qword_with_four_bytes(self):
        with pytest.raises(MalformedValue) as exc_info:
            decode(RawValue(int(RegType.QWORD), b"\x00" * 4))
        assert exc_info.value.context["type"] == "REG_QWORD"

    def test_dword_with_eight_bytes(self):
        with pytest.raises(MalformedValue):
            decode(RawValue(int(RegType.DWORD), b"\x00" * 8))

    @pytest.mark.parametrize("tag", [RegType.SZ, RegType.EXPAND_SZ, RegType.LINK, RegType.MULTI_SZ])
    def test_odd_length_text(self, tag):
        with pytest.raises(MalformedValue):
            decode(RawValue(int(tag), b"a\x00b"))

    def test_encode_rejects_non_values(self):
        with pytest.raises(TypeError):
            encode("plain string")  # type: ignore[arg-type]


@pytest.mark.unit
class TestDecodeDetails:
    def test_sz_trailing_nulls_trimmed(self):
        raw = RawValue(int(RegType.SZ), "abc".encode("utf-16le") + b"\x00" * 6)
        value = decode(raw)
        assert value == RegSz("abc")
        assert "\x00" not in value.text

    def test_none_with_stray_bytes(self, caplog):
        codec = RegistryCodec(logging.getLogger("test.codec"))
        with caplog.at_level(logging.DEBUG, logger="test.codec"):
            assert codec.decode(RawValue(0, b"\x01\x02")) == RegNone()
        assert "stray" in caplog.text

    def test_unpaired_surrogate_decodes_lossy(self):
        raw = RawValue(int(RegType.SZ), b"\x00\xdc" + b"\x00\x00")
        assert decode(raw) == RegSz("\ufffd")

    def test_multi_sz_payload(self):
        raw = RawValue(int(RegType.MULTI_SZ), "a\x00bc\x00\x00".encode("utf-16le"))
        assert decode(raw) == RegMultiSz(["a", "bc"])

    @pytest.mark.parametrize("tag,cls", [(RegType.SZ, RegSz), (RegType.EXPAND_SZ, RegExpandSz), (RegType.LINK, RegLink)])
    def test_single_string_stops_at_first_null(self, tag, cls):
        raw = RawValue(int(tag), "C:\\boot\x00stale tail\x00\x00".encode("utf-16le"))
        assert decode(raw) == cls("C:\\boot")

    def test_decoded_text_encodes_back(self):
        raw = RawValue(int(RegType.SZ), "a\x00b\x00".encode("utf-16le"))
        value = decode(raw)
        assert decode(encode(value)) == value


@pytest.mark.unit
class TestCodecTables:
    def test_every_tag_has_a_decoder_and_an_encoder(self):
        from regvalue.codec import codec as codec_mod

        assert set(codec_mod._DECODERS) == set(RegType)
        assert set(codec_mod._ENCODERS) == set(RegType)
