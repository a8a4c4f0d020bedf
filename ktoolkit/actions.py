"""Readers for action description files, sound lists and resource folders."""

import os
import xml.etree.ElementTree as ET

_FRAME_NODE = "frame"
_FRAME_NAME = "frameName"


def _first_attribute(element):
    try:
        return next(iter(element.attrib.values()))
    except StopIteration:
        raise ValueError(f"element <{element.tag}> has no attribute") from None


def _root(path):
    return ET.parse(os.fspath(path)).getroot()


def read_actions(path):
    """Read an action file into a list of ``(data, frames)`` pairs.

    Each action element of the root contributes one pair.  ``data`` holds
    ``(key, value)`` tuples from every node other than ``<frame>``, keyed by
    the first attribute of each entry.  ``frames`` holds the entries of
    ``<frame>`` nodes, keyed by their first attribute, except that a
    ``<frameName>`` entry is keyed by its own tag.
    """
    actions = []
    for action in _root(path):
        data = []
        frames = []
        for node in action:
            if node.tag != _FRAME_NODE:
                for entry in node:
                    data.append((_first_attribute(entry), entry.text or ""))
            else:
                for entry in node:
                    key = entry.tag if entry.tag == _FRAME_NAME else _first_attribute(entry)
                    frames.append((key, entry.text or ""))
        actions.append((data, frames))
    return actions


def sound_list(list_path, list_name):
    """Return the sound paths listed under ``list_name``, in file order.

    A missing list file yields no sounds.
    """
    if not os.path.isfile(os.fspath(list_path)):
        return []
    return [
        entry.text or ""
        for entry in _root(list_path)
        if _first_attribute(entry) == list_name
    ]


def clear_folder(folder):
    """Delete every file below ``folder``, keeping the directories.

    Returns the number of files removed; a folder that cannot be opened
    is left alone and counts as zero.
    """
    if not os.path.isdir(os.fspath(folder)):
        return 0
    removed = 0
    for path in list_files(folder):
        os.remove(path)
        removed += 1
    return removed


def list_files(folder):
    """Return the paths of all files below ``folder``, depth first, sorted by name."""
    folder = os.fspath(folder)
    if not os.path.isdir(folder):
        return []
    found = []
    for current, dirs, files in os.walk(folder):
        dirs.sort()
        found.extend(os.path.join(current, name) for name in sorted(files))
    return found