# ktoolkit

Helpers for a game's resource and save-data handling, with no dependencies
beyond the standard library.

## Modules

- `ktoolkit.md5sum`: an MD5 checksum written in plain Python.
  `MD5Checksum` takes data in pieces through `update()`, which accepts
  bytes-like data or text (encoded as UTF-8) and returns the checksum object.
  `hexdigest()` returns 32 lower-case hex digits. `md5_of_string(text)` and
  `md5_of_file(path)` are one-call shortcuts.
- `ktoolkit.md5tables`: the MD5 constants and `padding(message_length)`,
  which returns the bytes that finish a message of that length.
- `ktoolkit.manifest`: resource checksum manifests in XML.
  - `write_manifest(resource_dir, output, files=None, version="1.18")` writes
    a `<file version="...">` root with one `<path src="...">checksum</path>`
    per file. When `files` is left out, the built-in list `RESOURCE_FILES` is
    used.
  - `check_manifest(resource_dir, manifest_path="Element/md5.xml", files=None, find_path="")`
    returns `1` when every entry names the expected file in order and its
    checksum matches. It returns `0` when the manifest is missing or anything
    differs. When `find_path` is reached before any mismatch, it returns that
    entry's index.
  - `get_keycode(path)` returns `"<digest[16:21]>,<digest[6:11]>"` made from
    the file's checksum.
  - `write_data_checksum(db_path, checksum_path)` and
    `check_data_checksum(db_path, checksum_path)` record the checksum of a
    database file under a `<data>` root and check it against the file.
- `ktoolkit.cipher`: the shift cipher used for stored values.
  - `encode(text, key)` shifts each character by `key`, modulo 256, and
    appends the key as the last character.
  - `decode(text)` reverses `encode`.
  - `random_key(low, span, rng=None)` picks a key in `low .. low + span - 1`.

  Keys and characters must lie in 0..255; any other value raises `ValueError`.
- `ktoolkit.records`: `RecordStore(directory, rng=None)` keeps an SQLite
  database, `sql.db`, in `directory`. Every value it stores is passed through
  the cipher. After each change it rewrites `CheckMD5_113.xml` next to the
  database.
  - `init_tables()` creates the `GameRecord` and `CharRecord` tables and
    fills them on first use, one row per name in `HEROES`.
  - `read_coin()` returns the decoded coin count. `clamp_coin()` caps it and
    returns whether it changed.
  - `save_value(table, column, value)` stores a value in every row of a table.
  - `read_value(table, column, value, target_column)` looks up a value in the
    matching row.
  - `save_char_value(table, related_column, value, target_column, target_value, is_plus)`
    updates a value in the matching row.
  - `encode_data(data)` returns the MD5 of a string.

  Table and column names must be plain identifiers; any other name raises
  `ValueError`.
- `ktoolkit.actions`: readers for XML files and folders.
  - `read_actions(path)` reads an action file into a list of
    `(data, frames)` pairs of `(key, value)` tuples.
  - `sound_list(list_path, list_name)` returns the sound paths listed under a
    name. A missing list file gives an empty list.
  - `list_files(folder)` returns every file below a folder, sorted by name.
  - `clear_folder(folder)` deletes those files, keeps the directories, and
    returns how many files it removed.
- `ktoolkit.motion`: touch and motion logic with no rendering engine.
  - `Shake` jitters a position around its start.
  - `ScrollLayer` follows vertical drags and snaps its position into range on
    release. The defaults are `total_rows=100`, `line_height=26` and
    `min_y=154`.
  - `ScrollItem` claims touches inside its rectangle and sets `menu_visible`
    when a touch ends.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from ktoolkit.md5sum import md5_of_string
from ktoolkit.cipher import encode, decode

md5_of_string("abc")        # '900150983cd24fb0d6963f7d28e17f72'

hidden = encode("120", 50)
decode(hidden)              # '120'
```

```python
import random
from ktoolkit.records import RecordStore

store = RecordStore("savedir", random.Random(1))
store.init_tables()
store.save_value("GameRecord", "coin", "500")
store.read_coin()           # '500'
```

```python
from ktoolkit.motion import Shake

shake = Shake.with_strength(0.5, 4.0)
shake.start((100.0, 200.0))
shake.update(0.5)           # a position near (100, 200)
shake.stop()                # (100.0, 200.0)
```

## What it does not do

This is a library only; it installs no command.

It draws nothing and plays nothing:

- `motion` computes positions and touch responses, but displays nothing.
- `sound_list` returns sound file paths without loading or playing any audio.
- There are no on-screen tips or outlined text labels.