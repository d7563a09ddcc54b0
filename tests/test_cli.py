"""Tests for the command-line interface.

WHY: The CLI is the only place where configuration strings, file I/O and
the wrapping core meet. Errors must surface as exit code 1 with a message on
stderr, and stdout must carry nothing but the reflowed text.

HOW: main() is called in-process with an explicit argv; pytest's tmp_path,
capsys and monkeypatch fixtures provide files, captured streams and stdin.
"""

import io

import pytest

from docwrap.cli import main


class TestCLIOutput:

    def test_file_to_stdout(self, tmp_path, capsys):
        src = tmp_path / "input.md"
        src.write_text("This is a test sentence.\n", encoding="utf-8")

        main([str(src), "--max-length", "5", "--style", "greedy"])

        captured = capsys.readouterr()
        assert captured.out == "This\nis a\ntest\nsentence.\n"
        assert captured.err == ""

    def test_stdin_to_file(self, tmp_path, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("This is a test."))
        dest = tmp_path / "out.md"

        main(["-", "-o", str(dest), "--max-length", "10", "--style", "equal",
              "--indent", "  ", "--continuation-indent", "    "])

        assert dest.read_text(encoding="utf-8") == "  This\n    is a\n    test.\n"
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Wrote reflowed text to" in captured.err

    def test_max_length_off_echoes_input(self, tmp_path, capsys):
        src = tmp_path / "input.md"
        src.write_text("a  b   c\n", encoding="utf-8")

        main([str(src), "--max-length", "off"])

        assert capsys.readouterr().out == "a  b   c\n"

    def test_empty_input(self, tmp_path, capsys):
        src = tmp_path / "empty.md"
        src.write_text("", encoding="utf-8")

        main([str(src), "--max-length", "10"])

        assert capsys.readouterr().out == ""


class TestCLIErrors:

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.md")])
        assert exc.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_style(self, tmp_path, capsys):
        src = tmp_path / "input.md"
        src.write_text("text", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(src), "--style", "justify"])
        assert exc.value.code == 1
        assert "Unknown wrapping style" in capsys.readouterr().err

    def test_bad_max_length(self, tmp_path, capsys):
        src = tmp_path / "input.md"
        src.write_text("text", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main([str(src), "--max-length", "0"])
        assert exc.value.code == 1
        assert "at least 1" in capsys.readouterr().err

    def test_input_that_is_not_utf8(self, tmp_path, capsys):
        src = tmp_path / "latin1.md"
        src.write_bytes(b"caf\xe9 text\n")
        with pytest.raises(SystemExit) as exc:
            main([str(src)])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert captured.out == ""
