"""Tests for the seqrec command line."""
from __future__ import annotations

from seqrec.cli import main


class TestCli:

    def test_renders_record(self, pascal_path, pascal_bytes, capsys):
        assert main([str(pascal_path)]) == 0
        assert capsys.readouterr().out == pascal_bytes.decode("utf-8")

    def test_validate_and_roundtrip_pass(self, pascal_path, capsys):
        assert main([str(pascal_path), "--validate", "--check-roundtrip", "--terms"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("1,1,1,1,2,1,")
        assert out.endswith(",11,1\n")

    def test_validate_fails(self, tmp_path, a000001_text, capsys):
        path = tmp_path / "A000001.seq"
        path.write_text(a000001_text, encoding="utf-8")
        assert main([str(path), "--validate"]) == 1
        assert "missing required field: T" in capsys.readouterr().err

    def test_roundtrip_mismatch(self, tmp_path, a000001_text, capsys):
        path = tmp_path / "A000001.seq"
        path.write_text("\n" + a000001_text, encoding="utf-8")
        assert main([str(path), "--check-roundtrip"]) == 1
        assert "round trip mismatch" in capsys.readouterr().err

    def test_keywords(self, pascal_path, capsys):
        assert main([str(pascal_path), "--keywords"]) == 0
        assert capsys.readouterr().out == "nonn,tabl,nice,easy,core,look,hear,changed\n"

    def test_summary(self, pascal_path, capsys):
        assert main([str(pascal_path), "--summary"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("A007318\tM0082 N0028\t412\tPascal's triangle")

    def test_parse_error(self, tmp_path, capsys):
        path = tmp_path / "bad.seq"
        path.write_text("%K A000001 nonn,bogus\n", encoding="utf-8")
        assert main([str(path)]) == 2
        assert capsys.readouterr().err.startswith("error: invalid keyword")

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.seq")]) == 2
        assert "error:" in capsys.readouterr().err

    def test_summary_keeps_identity_and_zero_revision(self, tmp_path, capsys):
        path = tmp_path / "B000001.seq"
        path.write_text("%I B000001 #0 Jan 01 2000\n%N B000001 Name.\n", encoding="utf-8")
        assert main([str(path), "--summary"]) == 0
        assert capsys.readouterr().out == "B000001\t\t0\tName.\n"

    def test_list_keywords(self, capsys):
        assert main(["--list-keywords"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 31
        assert lines[0] == "base\tdependent on base used for sequence"
        assert lines[-1].startswith("word\t")

    def test_invalid_utf8_written_back_unchanged(self, tmp_path, capsysbinary):
        data = b"%C A000001 caf\xe9 latin-1\n"
        path = tmp_path / "latin1.seq"
        path.write_bytes(data)
        assert main([str(path), "--check-roundtrip"]) == 0
        assert capsysbinary.readouterr().out == data
