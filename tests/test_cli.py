import pytest

from filediff import __version__, main as cli
from filediff.services import diff_engine

RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"


@pytest.fixture
def write(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, newline="")
        return str(path)

    return _write


def test_identical_files(write, capsys):
    a = write("a.txt", "x\ny\nz\n")
    b = write("b.txt", "x\ny\nz\n")

    assert cli.main([a, b]) == 0
    assert capsys.readouterr().out == "No differences found between files.\n"


def test_changed_line(write, capsys):
    a = write("file1", "a\nb\nc\n")
    b = write("file2", "a\nx\nc\n")

    assert cli.main([a, b]) == 0
    assert capsys.readouterr().out == (
        f"{RED}[-file1] b{RESET}\n"
        f"{GREEN}[+file2] x{RESET}\n"
    )


def test_empty_first_file(write, capsys):
    a = write("empty.txt", "")
    b = write("new.txt", "new\n")

    assert cli.main([a, b]) == 0
    assert capsys.readouterr().out == f"{GREEN}[+new.txt] new{RESET}\n"


def test_no_color(write, capsys):
    a = write("a.txt", "old\n")
    b = write("b.txt", "new\n")

    assert cli.main(["--no-color", a, b]) == 0
    assert capsys.readouterr().out == "[-a.txt] old\n[+b.txt] new\n"


def test_color_never(write, capsys):
    a = write("a.txt", "old\n")
    b = write("b.txt", "old\nnew\n")

    assert cli.main(["--color", "never", a, b]) == 0
    assert capsys.readouterr().out == "[+b.txt] new\n"


def test_auto_color_is_off_when_not_a_tty(write, capsys):
    a = write("a.txt", "old\n")
    b = write("b.txt", "new\n")

    assert cli.main(["--color", "auto", a, b]) == 0
    assert RESET not in capsys.readouterr().out


def test_encoding_option(tmp_path, capsys):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_bytes(b"caf\xe9\n")
    b.write_bytes(b"cafe\n")

    assert cli.main(["--no-color", "--encoding", "latin-1", str(a), str(b)]) == 0
    assert capsys.readouterr().out == "[-a.txt] café\n[+b.txt] cafe\n"


def test_verbose_writes_progress_to_stderr(write, capsys):
    a = write("a.txt", "same\n")
    b = write("b.txt", "same\n")

    assert cli.main(["-v", a, b]) == 0
    captured = capsys.readouterr()
    assert "[FileDiff]" in captured.err
    assert "[FileReader]" in captured.err
    assert "[FileDiff]" not in captured.out


@pytest.mark.parametrize("argv", [[], ["only-one.txt"], ["a.txt", "b.txt", "c.txt"]])
def test_wrong_argument_count(argv, monkeypatch, capsys):
    def fail(*args, **kwargs):
        raise AssertionError("no file access expected")

    monkeypatch.setattr(cli, "run_comparison", fail)

    assert cli.main(argv) == 1
    assert "usage: filediff" in capsys.readouterr().err


def test_missing_first_file(write, tmp_path, monkeypatch, capsys):
    def fail(*args, **kwargs):
        raise AssertionError("diff engine must not run")

    monkeypatch.setattr(diff_engine, "diff", fail)
    missing = str(tmp_path / "missing.txt")
    b = write("b.txt", "content\n")

    assert cli.main([missing, b]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert f'Error reading file "{missing}"' in captured.err
    assert "Error comparing files:" in captured.err


def test_unexpected_error_is_reported(write, monkeypatch, capsys):
    def boom(a, b):
        raise RuntimeError("engine exploded")

    monkeypatch.setattr(diff_engine, "diff", boom)
    a = write("a.txt", "1\n")
    b = write("b.txt", "2\n")

    assert cli.main([a, b]) == 1
    assert "Error comparing files: RuntimeError: engine exploded" in capsys.readouterr().err


def test_version(capsys):
    assert cli.main(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_invalid_color_choice_returns_one(write, capsys):
    a = write("a.txt", "1\n")
    b = write("b.txt", "1\n")

    assert cli.main(["--color", "sometimes", a, b]) == 1
    assert "usage: filediff" in capsys.readouterr().err
