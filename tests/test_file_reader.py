import asyncio

import pytest

from filediff.services.file_reader import FileReadError, read_pair, read_text_file


def test_reads_content_and_basename(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"one\r\ntwo\n")

    source = read_text_file(str(path))

    assert source.filename == "notes.txt"
    assert source.content == "one\r\ntwo\n"
    assert source.path == str(path.resolve())


def test_missing_file_names_the_path(tmp_path, capsys):
    missing = str(tmp_path / "nope.txt")

    with pytest.raises(FileReadError) as exc_info:
        read_text_file(missing)

    assert exc_info.value.path == missing
    assert f'Error reading file "{missing}"' in capsys.readouterr().err


def test_undecodable_file_is_a_read_error(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    with pytest.raises(FileReadError):
        read_text_file(str(path))

    assert read_text_file(str(path), encoding="latin-1").content == "café\n"


def test_directory_is_a_read_error(tmp_path):
    with pytest.raises(FileReadError):
        read_text_file(str(tmp_path))


def test_read_pair_returns_both_in_order(tmp_path):
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_text("1\n")
    second.write_text("2\n")

    source_a, source_b = asyncio.run(read_pair(str(first), str(second)))

    assert (source_a.filename, source_a.content) == ("first.txt", "1\n")
    assert (source_b.filename, source_b.content) == ("second.txt", "2\n")


def test_read_pair_fails_when_first_file_is_missing(tmp_path):
    second = tmp_path / "second.txt"
    second.write_text("2\n")
    missing = str(tmp_path / "missing.txt")

    with pytest.raises(FileReadError) as exc_info:
        asyncio.run(read_pair(missing, str(second)))

    assert exc_info.value.path == missing


def test_read_pair_fails_when_second_file_is_missing(tmp_path):
    first = tmp_path / "first.txt"
    first.write_text("1\n")
    missing = str(tmp_path / "missing.txt")

    with pytest.raises(FileReadError) as exc_info:
        asyncio.run(read_pair(str(first), missing))

    assert exc_info.value.path == missing


def test_verbose_read_is_traced(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("abc\n")

    read_text_file(str(path), verbose=True)

    err = capsys.readouterr().err
    assert "[FileReader]" in err
    assert "notes.txt" in err


def test_quiet_read_prints_nothing(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("abc\n")

    read_text_file(str(path))

    assert capsys.readouterr().err == ""
