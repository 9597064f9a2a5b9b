"""Shared fixtures."""

import shutil
import socket
import tempfile
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config lookup at an empty directory and clear env overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("NCSPOT_REMOTE_SOCKET", "NCSPOT_REMOTE_PROCESS", "NCSPOT_REMOTE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "config" / "ncspot-remote"


@pytest.fixture
def short_dir():
    """Short temp dir; AF_UNIX paths are limited to ~100 bytes."""
    path = Path(tempfile.mkdtemp(prefix="ncs-", dir="/tmp"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def listening_socket(short_dir):
    """A bound, listening Unix socket standing in for ncspot.

    Yields (path, server_socket).
    """
    path = short_dir / "ncspot.sock"
    server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    server.bind(str(path))
    server.listen(1)
    server.settimeout(2.0)
    try:
        yield path, server
    finally:
        server.close()


@pytest.fixture
def read_all():
    """Accept one connection on a server socket and read until the client closes."""

    def _read(server: socket.socket) -> bytes:
        conn, _ = server.accept()
        with conn:
            conn.settimeout(2.0)
            data = b""
            while True:
                chunk = conn.recv(4096)
                if not chunk:
                    break
                data += chunk
        return data

    return _read
