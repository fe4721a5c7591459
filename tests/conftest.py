"""Test configuration and fixtures for file_type_enum."""

import os
import socket
import sys
import tempfile

import pytest


@pytest.fixture
def regular_file(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("hello")
    return path


@pytest.fixture
def directory(tmp_path):
    path = tmp_path / "dir"
    path.mkdir()
    return path


@pytest.fixture
def make_symlink(tmp_path):
    """Return a factory creating a symlink in tmp_path, skipping where symlinks are unavailable."""

    def _make_symlink(name, target, target_is_directory=False):
        link = tmp_path / name
        try:
            os.symlink(target, link, target_is_directory=target_is_directory)
        except (OSError, NotImplementedError):
            # On some platforms (like Windows) creating symlinks might require special permissions
            pytest.skip("Symlink creation not supported on this platform/environment")
        return link

    return _make_symlink


@pytest.fixture
def fifo(tmp_path):
    if not hasattr(os, "mkfifo"):
        pytest.skip("Named pipes not supported on this platform")
    path = tmp_path / "pipe"
    try:
        os.mkfifo(path)
    except OSError:
        pytest.skip("Named pipe creation not supported on this filesystem")
    return path


@pytest.fixture
def unix_socket():
    if sys.platform == "win32" or not hasattr(socket, "AF_UNIX"):
        pytest.skip("Unix domain sockets not supported on this platform")
    # Socket paths are limited to ~100 bytes, which pytest's tmp_path can exceed
    with tempfile.TemporaryDirectory(prefix="fte") as directory:
        path = os.path.join(directory, "s")
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.bind(path)
        except OSError:
            sock.close()
            pytest.skip("Unix domain socket creation not supported here")
        try:
            yield path
        finally:
            sock.close()
