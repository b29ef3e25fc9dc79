"""Archive builders shared by the test suite."""

from __future__ import annotations

import io

import pytest

from pytarscan.utils.common import get_logger


RECORD = 512


def _put(block: bytearray, offset: int, width: int, value: bytes) -> None:
    assert len(value) <= width, f"{value!r} does not fit in {width} bytes"
    block[offset:offset + len(value)] = value


def make_header(
    name,
    size: int = 0,
    *,
    typeflag: bytes = b"0",
    magic: bytes = b"ustar\0",
    version: bytes = b"00",
    size_field: bytes | None = None,
) -> bytes:
    if isinstance(name, str):
        name = name.encode()

    block = bytearray(RECORD)
    _put(block, 0, 100, name)
    _put(block, 100, 8, b"0000644\0")
    _put(block, 108, 8, b"0001750\0")
    _put(block, 116, 8, b"0001750\0")
    _put(block, 124, 12, size_field if size_field is not None else b"%011o\0" % size)
    _put(block, 136, 12, b"%011o\0" % 1700000000)
    _put(block, 156, 1, typeflag)
    _put(block, 257, 6, magic)
    _put(block, 263, 2, version)

    block[148:156] = b" " * 8
    block[148:156] = b"%06o\0 " % sum(block)
    return bytes(block)


def make_entry(name, data: bytes = b"", **header_kwargs) -> bytes:
    padding = -len(data) % RECORD
    return make_header(name, len(data), **header_kwargs) + data + bytes(padding)


def make_archive(*entries: bytes, zero_blocks: int = 2) -> bytes:
    return b"".join(entries) + bytes(RECORD * zero_blocks)


@pytest.fixture
def header():
    return make_header


@pytest.fixture
def entry():
    return make_entry


@pytest.fixture
def archive():
    return make_archive


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def write_archive(tmp_path):
    def _write(data: bytes, name: str = "archive.tar"):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture(autouse=True)
def _silence_package_logger():
    yield
    # drop handlers bound to streams of the finished test
    get_logger(verbose=False)
