from __future__ import annotations

import io
import textwrap

import pytest

from braillify.cli import main

FACE_BRAILLE = textwrap.dedent(
    """
    ⢀⠔⢊⡉⠉⠉⢉⡉⠒⢄
    ⡎⠀⠈⠁⢠⠀⠈⠁⠀⠈
    ⠱⡈⠒⠤⠤⠤⠤⠒⠁⡰
    ⠀⠈⠑⠒⠒⠒⠒⠒⠉⠀
    """
).strip()


@pytest.fixture
def face_file(tmp_path):
    path = tmp_path / "face.txt"
    path.write_text(
        textwrap.dedent(
            """
            000001111111111100000
            000110000000000011000
            001000000000000000100
            010001100000011000010
            010001100000011000010
            100000000000000000001
            100000000100000000001
            100000000100000000001
            100100000000000010001
            010011000000001100010
            010000111111110000010
            001000000000000000100
            000110000000000011000
            000001111111111100000
            """
        ).lstrip(),
        encoding="utf-8",
    )
    return path


def test_cli_bitmap(face_file, capsys):
    assert main(["--bitmap", str(face_file)]) == 0
    assert capsys.readouterr().out == FACE_BRAILLE + "\n"


def test_cli_text(tmp_path, capsys):
    path = tmp_path / "code.py"
    path.write_text("ab\ncd\n", encoding="utf-8")

    assert main([str(path), "-w", "4"]) == 0
    assert capsys.readouterr().out == "⠛⠀\n"


def test_cli_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("  x \n    \n"))

    assert main(["-", "--width", "5"]) == 0
    assert capsys.readouterr().out == "⠀⠁\n"


def test_cli_invert(tmp_path, capsys):
    path = tmp_path / "blank.txt"
    path.write_text("..\n..\n..\n..\n", encoding="utf-8")

    assert main(["-b", "-i", str(path)]) == 0
    assert capsys.readouterr().out == "⣿\n"


def test_cli_decode(tmp_path, capsys):
    path = tmp_path / "glyph.txt"
    path.write_text("⠛\n", encoding="utf-8")

    assert main(["--decode", str(path)]) == 0
    assert capsys.readouterr().out == "##\n##\n..\n..\n"


def test_cli_output_file(face_file, tmp_path, capsys):
    output = tmp_path / "face.braille"

    assert main(["--bitmap", str(face_file), "-o", str(output), "-v"]) == 0
    assert output.read_text(encoding="utf-8") == FACE_BRAILLE + "\n"

    captured = capsys.readouterr()
    assert captured.out == ""
    assert f"Writing output to {output}" in captured.err


def test_cli_errors(tmp_path, capsys):
    path = tmp_path / "ragged.txt"
    path.write_text("###\n#\n", encoding="utf-8")

    assert main(["--bitmap", str(path)]) == 1
    assert capsys.readouterr().err.startswith("braillify: ")

    assert main([str(tmp_path / "missing.txt"), "-w", "10"]) == 1
    assert "braillify: " in capsys.readouterr().err

    binary = tmp_path / "binary.txt"
    binary.write_bytes(b"ab\xff\xfe\ncd\n")
    assert main([str(binary), "-w", "4"]) == 1
    assert capsys.readouterr().err.startswith("braillify: ")

    with pytest.raises(SystemExit):
        main(["-w", "0", str(path)])
    with pytest.raises(SystemExit):
        main(["--bitmap", "--decode", str(path)])
