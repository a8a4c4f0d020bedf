import os

import pytest

from ktoolkit.actions import clear_folder, list_files, read_actions, sound_list

ACTION_XML = """<?xml version="1.0" encoding="UTF-8"?>
<actions>
  <action name="idle">
    <data>
      <item key="speed">10</item>
      <item key="range">40</item>
    </data>
    <frame>
      <frameName>idle_01.png</frameName>
      <delay time="delay">0.1</delay>
    </frame>
  </action>
  <action name="walk">
    <frame>
      <frameName>walk_01.png</frameName>
    </frame>
  </action>
</actions>
"""

SOUND_XML = """<?xml version="1.0" encoding="UTF-8"?>
<list>
  <sound name="Naruto">Audio/Naruto/a.ogg</sound>
  <sound name="Sakura">Audio/Sakura/a.ogg</sound>
  <sound name="Naruto">Audio/Naruto/b.ogg</sound>
</list>
"""


@pytest.fixture
def action_file(tmp_path):
    path = tmp_path / "actions.xml"
    path.write_text(ACTION_XML, encoding="utf-8")
    return path


def test_read_actions_data_and_frames(action_file):
    actions = read_actions(action_file)
    assert len(actions) == 2
    data, frames = actions[0]
    assert data == [("speed", "10"), ("range", "40")]
    assert frames == [("frameName", "idle_01.png"), ("delay", "0.1")]


def test_read_actions_without_data_node(action_file):
    data, frames = read_actions(action_file)[1]
    assert data == []
    assert frames == [("frameName", "walk_01.png")]


def test_read_actions_entry_without_attribute(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("<a><action n='x'><data><item>1</item></data></action></a>", encoding="utf-8")
    with pytest.raises(ValueError):
        read_actions(path)


def test_sound_list_filters_by_name(tmp_path):
    path = tmp_path / "list.xml"
    path.write_text(SOUND_XML, encoding="utf-8")
    assert sound_list(path, "Naruto") == ["Audio/Naruto/a.ogg", "Audio/Naruto/b.ogg"]
    assert sound_list(path, "Sakura") == ["Audio/Sakura/a.ogg"]
    assert sound_list(path, "Lee") == []


def test_sound_list_missing_file(tmp_path):
    assert sound_list(tmp_path / "none.xml", "Naruto") == []


def _make_tree(root):
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deep" / "c.txt").write_text("c")


def test_list_files_finds_all(tmp_path):
    _make_tree(tmp_path)
    found = list_files(tmp_path)
    expected = {
        os.path.join(str(tmp_path), "a.txt"),
        os.path.join(str(tmp_path), "sub", "b.txt"),
        os.path.join(str(tmp_path), "sub", "deep", "c.txt"),
    }
    assert set(found) == expected
    assert len(found) == len(expected)


def test_list_files_missing_folder(tmp_path):
    assert list_files(tmp_path / "missing") == []


def test_clear_folder_removes_files_keeps_dirs(tmp_path):
    _make_tree(tmp_path)
    assert clear_folder(tmp_path) == 3
    assert list_files(tmp_path) == []
    assert (tmp_path / "sub" / "deep").is_dir()


def test_clear_folder_missing(tmp_path):
    assert clear_folder(tmp_path / "missing") == 0