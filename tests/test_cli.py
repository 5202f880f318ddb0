import io

import pytest

from minilang.cli import main


def test_cli_joins_arguments_and_prints_tree(capsys):
    exit_code = main(["x", ":=", "2", "+", "3"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "\n".join(
        [
            "=== Abstract Syntax Tree ===",
            "Program",
            "  Assignment: x",
            "    BinaryExpr '+'",
            "      IntegerLiteral: 2",
            "      IntegerLiteral: 3",
            "",
            "Program is syntactically correct.",
            "",
        ]
    )
    assert captured.err == ""


def test_cli_reads_stdin_when_no_arguments(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("a := 1\nb := a ^ 2\n"))

    exit_code = main([])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "  Assignment: b" in out
    assert "Program is syntactically correct." in out


def test_cli_reads_file(capsys, tmp_path):
    path = tmp_path / "prog.mini"
    path.write_text("y := 4.5\n", encoding="utf-8")

    exit_code = main(["--file", str(path)])

    assert exit_code == 0
    assert "RealLiteral: 4.5" in capsys.readouterr().out


def test_cli_missing_file(capsys, tmp_path):
    exit_code = main(["-f", str(tmp_path / "missing.mini")])

    assert exit_code == 2
    assert capsys.readouterr().err.startswith("Cannot read")


def test_cli_prints_tokens_on_request(capsys):
    main(["--tokens", "a := 1"])

    out = capsys.readouterr().out
    assert out.startswith("=== Tokens ===\nIDENTIFIER 'a' at 1:1\nASSIGNMENT ':=' at 1:3\n")


def test_cli_reports_syntax_error_on_stderr(capsys):
    exit_code = main(["x", "5"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err == (
        "Compilation error: Expected ':=' after identifier 'x' at line 1, column 3\n"
    )


def test_cli_reports_lexical_error_on_stderr(capsys):
    exit_code = main(["x := 12."])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.err == "Compilation error: Lexical error at 1:8 -> Illegal character: '.'\n"


def test_cli_handles_long_exponent_chain(capsys):
    exit_code = main(["x := " + "^".join(["2"] * 1500)])

    assert exit_code == 0
    assert capsys.readouterr().out.endswith("Program is syntactically correct.\n")


def test_cli_reports_undecodable_file(capsys, tmp_path):
    path = tmp_path / "binary.mini"
    path.write_bytes(b"x := 1 \xff\n")

    exit_code = main(["-f", str(path)])

    assert exit_code == 2
    assert capsys.readouterr().err == f"Cannot read {path}: not valid UTF-8 (byte 7)\n"


def test_cli_reports_undecodable_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xff"), encoding="utf-8"))

    exit_code = main([])

    assert exit_code == 2
    assert capsys.readouterr().err == "Cannot read standard input: not valid UTF-8 (byte 0)\n"


def test_cli_rejects_arguments_together_with_file(capsys, tmp_path):
    path = tmp_path / "prog.mini"
    path.write_text("y := 1\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["-f", str(path), "x := 2"])

    assert excinfo.value.code == 2
    assert "not both" in capsys.readouterr().err
