from __future__ import annotations

import zipfile

import pytest

from loveprobe.core.readers import (
    FolderEntryReader,
    PackageEntryReader,
    open_entry_reader,
    read_entry,
)
from loveprobe.exceptions import (
    EmptyEntryError,
    EntryDecodeError,
    EntryNotFoundError,
    EntryReadError,
)

CONF = 'function love.conf(t)\n    t.version = "11.3"\nend\n'


def test_reader_selection(make_folder, make_package):
    assert isinstance(open_entry_reader(make_folder({"main.lua": ""})), FolderEntryReader)
    assert isinstance(open_entry_reader(make_package({"conf.lua": CONF})), PackageEntryReader)


def test_read_from_folder(make_folder):
    folder = make_folder({"main.lua": "", "conf.lua": CONF})
    assert read_entry(folder, "conf.lua") == CONF


def test_read_from_package(make_package):
    package = make_package({"conf.lua": CONF, "main.lua": ""})
    assert read_entry(package, "conf.lua") == CONF


def test_read_stored_package_entry(make_package):
    package = make_package({"conf.lua": CONF}, compression=zipfile.ZIP_STORED)
    assert read_entry(package, "conf.lua") == CONF


def test_missing_file_in_folder(make_folder):
    folder = make_folder({"main.lua": ""})
    with pytest.raises(EntryNotFoundError) as excinfo:
        read_entry(folder, "conf.lua")
    assert excinfo.value.error_code == "ENTRY_NOT_FOUND"
    assert excinfo.value.details["entry_name"] == "conf.lua"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_missing_folder(tmp_path):
    with pytest.raises(EntryNotFoundError):
        read_entry(tmp_path / "nowhere", "conf.lua")


def test_directory_entry_cannot_be_opened(make_folder):
    folder = make_folder({"conf.lua/placeholder": ""})
    with pytest.raises(EntryNotFoundError):
        read_entry(folder, "conf.lua")


def test_missing_archive(tmp_path):
    with pytest.raises(EntryNotFoundError):
        read_entry(tmp_path / "missing.love", "conf.lua")


def test_missing_archive_entry(make_package):
    package = make_package({"main.lua": ""})
    with pytest.raises(EntryNotFoundError):
        read_entry(package, "conf.lua")


def test_archive_entry_names_are_exact(make_package):
    package = make_package({"Conf.lua": CONF, "game/conf.lua": CONF})
    with pytest.raises(EntryNotFoundError):
        read_entry(package, "conf.lua")
    assert read_entry(package, "game/conf.lua") == CONF


def test_corrupt_archive(tmp_path):
    package = tmp_path / "broken.love"
    package.write_bytes(b"this is not a zip file")
    with pytest.raises(EntryNotFoundError):
        read_entry(package, "conf.lua")


def test_empty_folder_entry(make_folder):
    folder = make_folder({"main.lua": "", "conf.lua": ""})
    with pytest.raises(EmptyEntryError) as excinfo:
        read_entry(folder, "conf.lua")
    assert excinfo.value.error_code == "ENTRY_EMPTY"


def test_empty_package_entry(make_package):
    package = make_package({"conf.lua": b""})
    with pytest.raises(EmptyEntryError):
        read_entry(package, "conf.lua")


def test_undecodable_folder_entry(make_folder):
    folder = make_folder({"conf.lua": b"\xff\xfe\x00version"})
    with pytest.raises(EntryDecodeError) as excinfo:
        read_entry(folder, "conf.lua")
    assert excinfo.value.details["encoding"] == "utf-8"
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_undecodable_package_entry(make_package):
    package = make_package({"conf.lua": b"\xc3\x28"})
    with pytest.raises(EntryDecodeError):
        read_entry(package, "conf.lua")


def test_all_read_errors_share_a_base(make_folder):
    folder = make_folder({})
    with pytest.raises(EntryReadError):
        read_entry(folder, "conf.lua")


def test_non_ascii_text_is_decoded(make_package):
    text = '-- Spiel für LÖVE\nt.version = "11.4"\n'
    package = make_package({"conf.lua": text})
    assert read_entry(package, "conf.lua") == text


# =============================================================================
# Damaged packages
# =============================================================================

LOCAL_HEADER = b"PK\x03\x04"
CENTRAL_HEADER = b"PK\x01\x02"


def _patch_package(package, patch) -> None:
    data = bytearray(package.read_bytes())
    patch(data, data.index(LOCAL_HEADER), data.index(CENTRAL_HEADER))
    package.write_bytes(bytes(data))


def test_encrypted_entry_cannot_be_opened(make_package):
    package = make_package({"conf.lua": CONF}, compression=zipfile.ZIP_STORED)

    def set_encrypted_flag(data, local, central):
        data[local + 6] |= 0x01
        data[central + 8] |= 0x01

    _patch_package(package, set_encrypted_flag)
    with pytest.raises(EntryNotFoundError) as excinfo:
        read_entry(package, "conf.lua")
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_corrupt_deflate_stream_cannot_be_opened(make_package):
    package = make_package({"conf.lua": CONF * 20})

    def break_stream(data, local, central):
        name_len = int.from_bytes(data[local + 26:local + 28], "little")
        extra_len = int.from_bytes(data[local + 28:local + 30], "little")
        start = local + 30 + name_len + extra_len
        data[start:start + 4] = b"\xff\xff\xff\xff"

    _patch_package(package, break_stream)
    with pytest.raises(EntryNotFoundError):
        read_entry(package, "conf.lua")


def test_unsupported_compression_cannot_be_opened(make_package):
    package = make_package({"conf.lua": CONF}, compression=zipfile.ZIP_STORED)

    def set_unknown_method(data, local, central):
        data[local + 8:local + 10] = (99).to_bytes(2, "little")
        data[central + 10:central + 12] = (99).to_bytes(2, "little")

    _patch_package(package, set_unknown_method)
    with pytest.raises(EntryNotFoundError) as excinfo:
        read_entry(package, "conf.lua")
    assert isinstance(excinfo.value.__cause__, NotImplementedError)
