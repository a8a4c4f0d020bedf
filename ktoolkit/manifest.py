"""Checksum manifests for game resources and for the record database.

A resource manifest is an XML document whose root ``<file>`` element holds
one ``<path src="...">checksum</path>`` child per resource, in a fixed
order.  The data checksum file holds the checksum of the record database
under a ``<data>`` root, so that tampering with the database can be noticed.
"""

import os
import xml.etree.ElementTree as ET

from .md5sum import md5_of_file

DEFAULT_VERSION = "1.18"
DEFAULT_MANIFEST = "Element/md5.xml"

_BULLETS = (
    "Amaterasu", "FlyKnife", "HiraishinKunai", "HugeSRK", "Kusuri",
    "PaperSpear", "PaperSrk", "Shintenshin", "TentenSRK",
)

_MONSTERS = (
    "Bikyu", "Bug", "BugPillar", "BugTomado", "ChuiDi", "CircleMark",
    "ClayBird", "Crash", "Crash2", "DeidaraBom", "Dogs", "FakeDeidara",
    "FakeItachi", "FakeMinato", "FakeShino", "FakeTobirama", "FireRain",
    "FudonSRK", "FudonSRK2", "Hasan", "HiraishinMark", "InkBird",
    "InkDragon", "ItachiSusano", "Kage", "KageBom", "KageFeng", "KageHand",
    "KageHands", "Kaiten", "Kubi", "Kuroari", "LeeBom", "Mine", "Mouse",
    "Paku", "PaperRain", "Qilin", "QuanRen", "Sabaku", "SakuraBom",
    "Sanbao", "SandBall", "SandHand", "SandWave", "SasukeSusano", "Shark",
    "Shark2", "Shenwei", "Shenwei2", "Shoryu", "SmallSlug", "Snake",
    "Spider", "Steam", "Suiji", "Suijin", "SuiRyuDan", "TamaBomb", "Tenmu",
    "ThunderWave", "Tiger", "TodonPillar", "Traps", "Tsukuyomi", "Tuji",
    "Tuji2", "WaterBom", "WaterBullet", "Wave", "Yataikuzu", "Yominuma",
)

_FLOGS = (
    "ObitoFlog", "FemalePainFlog", "IzumoFlog", "KakashiFlog",
    "KotetsuFlog", "PainFlog",
)

_TOWERS = ("CenterDate", "TowerDate")

_CHARACTERS = (
    "Akamaru", "Asuma", "Centipede", "Chiyo", "Choji", "Deidara", "DogWall",
    "Gaara", "Han", "Hidan", "Hinata", "Hiruzen", "ImmortalSasuke", "Ino",
    "Itachi", "Jiraiya", "Jugo", "Kakashi", "Kakuzu", "Kankuro", "Karasu",
    "Karin", "Kiba", "Kisame", "Konan", "Kurama", "Lee", "MaskFudon",
    "MaskKadon", "MaskRaidon", "Minato", "Naruto", "Neji", "Parents",
    "RikudoNaruto", "RockLee", "Roshi", "SageJiraiya", "SageNaruto", "Sai",
    "Sakura", "Sanshouuo", "Saso", "Sasuke", "Shikamaru", "Shino", "Slug",
    "Suigetsu", "Tenten", "Tobi", "Tobirama", "Tsunade",
)

RESOURCE_FILES = (
    tuple(f"Element/Bullet/{name}.xml" for name in _BULLETS)
    + tuple(f"Element/Monster/{name}.xml" for name in _MONSTERS)
    + tuple(f"Element/Flog/{name}.xml" for name in _FLOGS)
    + tuple(f"Element/Tower/{name}.xml" for name in _TOWERS)
    + tuple(f"Element/{name}/{name}.xml" for name in _CHARACTERS)
    + tuple(f"Tiles/{n}.tmx" for n in range(1, 6))
    + ("rank.json", "rank2.json")
)


def _write_xml(root, output):
    tree = ET.ElementTree(root)
    ET.indent(tree)
    with open(os.fspath(output), "wb") as handle:
        tree.write(handle, encoding="UTF-8", xml_declaration=True)


def _children(path):
    root = ET.parse(os.fspath(path)).getroot()
    return list(root)


def write_manifest(resource_dir, output, files=None, version=DEFAULT_VERSION):
    """Write a manifest of the checksums of ``files`` under ``resource_dir``."""
    files = RESOURCE_FILES if files is None else files
    root = ET.Element("file", {"version": version})
    for name in files:
        element = ET.SubElement(root, "path", {"src": name})
        element.text = md5_of_file(os.path.join(resource_dir, name))
    _write_xml(root, output)


def check_manifest(resource_dir, manifest_path=DEFAULT_MANIFEST, files=None, find_path=""):
    """Check the resources against the manifest.

    Returns 1 when every entry names the expected file and its checksum
    matches, 0 when the manifest is missing or anything differs, and the
    entry's index when ``find_path`` is reached before any mismatch.
    """
    files = RESOURCE_FILES if files is None else files
    manifest = os.path.join(resource_dir, manifest_path)
    if not os.path.isfile(manifest):
        return 0
    for index, element in enumerate(_children(manifest)):
        if index >= len(files):
            return 0
        src = next(iter(element.attrib.values()), None)
        name = files[index]
        if src != name:
            return 0
        if find_path and find_path == name:
            return index
        try:
            actual = md5_of_file(os.path.join(resource_dir, name))
        except FileNotFoundError:
            return 0
        if actual != (element.text or ""):
            return 0
    return 1


def get_keycode(path):
    """Return a short key built from two slices of the file's checksum."""
    digest = md5_of_file(path)
    return f"{digest[16:21]},{digest[6:11]}"


def write_data_checksum(db_path, checksum_path):
    """Record the checksum of the database at ``db_path``."""
    root = ET.Element("data")
    ET.SubElement(root, "path").text = md5_of_file(db_path)
    _write_xml(root, checksum_path)


def check_data_checksum(db_path, checksum_path):
    """Whether the database still matches every recorded checksum."""
    if not os.path.isfile(os.fspath(checksum_path)):
        return False
    entries = _children(checksum_path)
    if not entries:
        return False
    try:
        actual = md5_of_file(db_path)
    except FileNotFoundError:
        return False
    return all((entry.text or "") == actual for entry in entries)