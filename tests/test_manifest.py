import xml.etree.ElementTree as ET

import pytest

from ktoolkit.manifest import (
    RESOURCE_FILES,
    check_data_checksum,
    check_manifest,
    get_keycode,
    write_data_checksum,
    write_manifest,
)
from ktoolkit.md5sum import md5_of_file

FILES = ["Element/a.xml", "Element/b.xml", "rank.json"]
MANIFEST = "Element/md5.xml"


@pytest.fixture
def resources(tmp_path):
    for i, name in enumerate(FILES):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(f"content {i}".encode())
    write_manifest(tmp_path, tmp_path / MANIFEST, FILES, "1.18")
    return tmp_path


def test_manifest_contents(resources):
    root = ET.parse(resources / MANIFEST).getroot()
    assert root.tag == "file"
    assert root.get("version") == "1.18"
    assert [e.get("src") for e in root] == FILES
    assert [e.text for e in root] == [md5_of_file(resources / n) for n in FILES]


def test_check_passes(resources):
    assert check_manifest(resources, MANIFEST, FILES, "") == 1


def test_check_detects_tampering(resources):
    (resources / "Element/b.xml").write_bytes(b"changed")
    assert check_manifest(resources, MANIFEST, FILES, "") == 0


def test_check_detects_missing_file(resources):
    (resources / "rank.json").unlink()
    assert check_manifest(resources, MANIFEST, FILES, "") == 0


def test_check_missing_manifest(tmp_path):
    assert check_manifest(tmp_path, MANIFEST, FILES, "") == 0


def test_check_order_mismatch(resources):
    reordered = [FILES[1], FILES[0], FILES[2]]
    assert check_manifest(resources, MANIFEST, reordered, "") == 0


def test_find_path_returns_index(resources):
    assert check_manifest(resources, MANIFEST, FILES, "rank.json") == 2


def test_find_path_after_mismatch(resources):
    (resources / "Element/a.xml").write_bytes(b"changed")
    assert check_manifest(resources, MANIFEST, FILES, "rank.json") == 0


def test_default_file_list_manifest(tmp_path):
    for i, name in enumerate(RESOURCE_FILES):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(f"resource {i}".encode())
    write_manifest(tmp_path, tmp_path / MANIFEST, RESOURCE_FILES, "1.18")
    root = ET.parse(tmp_path / MANIFEST).getroot()
    sources = [e.get("src") for e in root]
    assert sources[0] == "Element/Bullet/Amaterasu.xml"
    assert sources[-1] == "rank2.json"
    assert len(set(sources)) == len(sources)
    assert (
        check_manifest(tmp_path, MANIFEST, RESOURCE_FILES, "rank2.json")
        == len(RESOURCE_FILES) - 1
    )


def test_get_keycode(tmp_path):
    path = tmp_path / "key"
    path.write_bytes(b"abc")
    assert get_keycode(path) == "d6963,983cd"


def test_data_checksum_round_trip(tmp_path):
    db = tmp_path / "sql.db"
    db.write_bytes(b"records")
    checksum = tmp_path / "CheckMD5_113.xml"
    write_data_checksum(db, checksum)
    root = ET.parse(checksum).getroot()
    assert root.tag == "data"
    assert [e.text for e in root] == [md5_of_file(db)]
    assert check_data_checksum(db, checksum) is True


def test_data_checksum_detects_change(tmp_path):
    db = tmp_path / "sql.db"
    db.write_bytes(b"records")
    checksum = tmp_path / "check.xml"
    write_data_checksum(db, checksum)
    db.write_bytes(b"edited records")
    assert check_data_checksum(db, checksum) is False


def test_data_checksum_missing_file(tmp_path):
    db = tmp_path / "sql.db"
    db.write_bytes(b"records")
    assert check_data_checksum(db, tmp_path / "absent.xml") is False


def test_data_checksum_empty_root(tmp_path):
    db = tmp_path / "sql.db"
    db.write_bytes(b"records")
    checksum = tmp_path / "check.xml"
    checksum.write_text('<?xml version="1.0"?><data></data>')
    assert check_data_checksum(db, checksum) is False