"""
Tests for input reading and file writing helpers.
"""

import io
import os
import sys

import pytest

from certjson.utils.errors import ReadError, WriteError
from certjson.utils.fileio import read_input, write_file


class TestReadInput:
    """Test reading from files and stdin."""

    def test_reads_file(self, tmp_path):
        path = tmp_path / "in.json"
        path.write_bytes(b'{"cert": "x"}')
        assert read_input(str(path)) == b'{"cert": "x"}'

    def test_reads_stdin(self, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"from stdin")))
        assert read_input("-") == b"from stdin"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReadError, match="Failed to read input") as excinfo:
            read_input(str(tmp_path / "missing.json"))
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)


class TestWriteFile:
    """Test writing artifact files."""

    def test_text_is_utf8(self, tmp_path):
        path = tmp_path / "out.pem"
        write_file(str(path), "café", 0o644)
        assert path.read_bytes() == "café".encode("utf-8")

    def test_mode_is_exact(self, tmp_path):
        path = tmp_path / "out.pem"
        old_umask = os.umask(0o077)
        try:
            write_file(str(path), "x", 0o664)
        finally:
            os.umask(old_umask)
        assert os.stat(path).st_mode & 0o777 == 0o664

    def test_directory_target(self, tmp_path):
        with pytest.raises(WriteError):
            write_file(str(tmp_path), b"x", 0o644)

    def test_lone_surrogate_replaced(self, tmp_path):
        path = tmp_path / "out.pem"
        write_file(str(path), "x\ud800y", 0o644)
        assert path.read_bytes() == b"x?y"
