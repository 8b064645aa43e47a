# SPDX-License-Identifier: LGPL-3.0-or-later
"""End-to-end tests for the regvalue command line."""
from __future__ import annotations

import io
import json

import pytest

from regvalue.__main__ import main


def _run(argv):
    out = io.StringIO()
    rc = main(argv, out=out)
    return rc, out.getvalue()


@pytest.mark.unit
class TestDecode:
    def test_multi_sz(self):
        rc, out = _run(["decode", "--type", "REG_MULTI_SZ", "--hex", "61 00 00 00 62 00 00 00 00 00"])
        assert rc == 0
        assert json.loads(out) == {"type": "REG_MULTI_SZ", "tag": 7, "value": ["a", "b"]}

    def test_projection_to_str(self):
        rc, out = _run(["decode", "--type", "7", "--hex", "6100000062000000", "--as", "str"])
        assert rc == 0
        assert json.loads(out) == "a\nb"

    def test_raw_projection(self):
        rc, out = _run(["decode", "--type", "REG_BINARY", "--hex", "cafe", "--as", "raw"])
        assert rc == 0
        assert json.loads(out) == {"tag": 3, "hex": "cafe"}

    def test_from_file(self, tmp_path):
        p = tmp_path / "payload.bin"
        p.write_bytes(b"\x04\x03\x02\x01")
        rc, out = _run(["decode", "--type", "DWORD", "--file", str(p), "--as", "u32"])
        assert rc == 0
        assert json.loads(out) == 0x01020304

    def test_malformed(self):
        rc, out = _run(["decode", "--type", "REG_QWORD", "--hex", "00000000"])
        assert rc == 4
        assert out == ""

    def test_unknown_type(self):
        rc, _ = _run(["decode", "--type", "999", "--hex", "00"])
        assert rc == 3

    def test_type_mismatch(self):
        rc, _ = _run(["decode", "--type", "DWORD_BIG_ENDIAN", "--hex", "01020304", "--as", "u32"])
        assert rc == 5

    def test_default_type_from_config(self, tmp_path):
        cfg = tmp_path / "regvalue.yaml"
        cfg.write_text("default_type: REG_DWORD\nindent: 2\n", encoding="utf-8")
        rc, out = _run(["--config", str(cfg), "decode", "--hex", "34120000"])
        assert rc == 0
        assert json.loads(out)["value"] == 0x1234
        assert "\n  " in out

    def test_wide_keeps_lone_surrogates(self):
        rc, out = _run(["decode", "--type", "SZ", "--hex", "00d8 6100 0000", "--as", "wide"])
        assert rc == 0
        assert out.strip() == '"\\ud800a\\u0000"'
        assert json.loads(out) == "\ud800a\x00"

    def test_missing_type(self):
        rc, _ = _run(["decode", "--hex", "00"])
        assert rc == 2


@pytest.mark.unit
class TestEncode:
    def test_big_endian_dword(self):
        rc, out = _run(["encode", "--type", "REG_DWORD_BIG_ENDIAN", "--value", "0x01020304"])
        assert rc == 0
        assert json.loads(out) == {"type": "REG_DWORD_BIG_ENDIAN", "tag": 5, "hex": "01020304"}

    def test_multi_sz(self):
        rc, out = _run(["encode", "--type", "MULTI_SZ", "--value", "a", "--value", "b"])
        assert rc == 0
        assert json.loads(out)["hex"] == "61000000620000000000"

    def test_sz(self):
        rc, out = _run(["encode", "--type", "SZ", "--value", "hi"])
        assert json.loads(out)["hex"] == "680069000000"

    def test_out_of_range(self):
        rc, _ = _run(["encode", "--type", "DWORD", "--value", str(2**32)])
        assert rc == 4

    def test_too_many_values(self):
        rc, _ = _run(["encode", "--type", "SZ", "--value", "a", "--value", "b"])
        assert rc == 2

    def test_missing_value(self, capsys):
        rc, out = _run(["encode", "--type", "REG_DWORD"])
        assert rc == 2
        assert out == ""
        assert "takes exactly one --value" in capsys.readouterr().err

    def test_nul_in_text(self):
        rc, _ = _run(["encode", "--type", "SZ", "--value", "a\x00b"])
        assert rc == 4


@pytest.mark.unit
class TestMisc:
    def test_tags_plain_output(self):
        rc, out = _run(["tags"])
        assert rc == 0
        lines = out.strip().splitlines()
        assert len(lines) == 12
        assert lines[0].split("\t")[:2] == ["0", "REG_NONE"]
        assert lines[-1].split("\t")[:2] == ["11", "REG_QWORD"]

    def test_bad_config_file(self, tmp_path):
        cfg = tmp_path / "bad.yaml"
        cfg.write_text("- not a mapping\n", encoding="utf-8")
        rc, _ = _run(["--config", str(cfg), "tags"])
        assert rc == 2

    def test_dump_config(self, tmp_path, capsys):
        cfg = tmp_path / "a.yaml"
        cfg.write_text("indent: 3\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(cfg), "--dump-config", "tags"])
        assert exc_info.value.code == 0
        assert json.loads(capsys.readouterr().out) == {"indent": 3}

    def test_no_command(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
