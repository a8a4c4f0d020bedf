"""Game record store kept in an SQLite database with obscured values.

Every stored value is passed through the shift cipher, and after each
change the checksum of the database file is written next to it.
"""

import os
import random
import re
import sqlite3
from contextlib import closing

from .cipher import decode, encode, random_key
from .manifest import write_data_checksum
from .md5sum import md5_of_string

DB_NAME = "sql.db"
CHECKSUM_NAME = "CheckMD5_113.xml"

HEROES = (
    "Konan", "Sakura", "Naruto", "Sai", "Deidara",
    "Kakashi", "Itachi", "Tenten", "Jiraiya", "Suigetsu",
    "Tsunade", "Tobirama", "Neji", "Ino", "Asuma", "Gaara",
    "Karin", "Sasuke", "Hidan", "Choji", "Kankuro",
    "Shino", "Minato", "Tobi", "Kakuzu", "Hinata",
    "Shikamaru", "Chiyo", "Kisame",
    "Hiruzen", "Kiba", "Jugo", "Lee",
)

INITIAL_COIN = "n>"
COIN_CAP = "uuuuu<"
_TEXT_COLUMNS = ("column3", "column4")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _atoi(text):
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def _ident(name):
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise ValueError(f"invalid SQL identifier: {name!r}")
    return f'"{name}"'


def encode_data(data):
    """Return the hex MD5 checksum of ``data``."""
    return md5_of_string(data)


class RecordStore:
    """Character and coin records stored in ``directory``."""

    def __init__(self, directory, rng=None):
        self.directory = os.fspath(directory)
        self._rng = rng if rng is not None else random.Random()

    @property
    def db_path(self):
        return os.path.join(self.directory, DB_NAME)

    @property
    def checksum_path(self):
        return os.path.join(self.directory, CHECKSUM_NAME)

    def _connect(self):
        return closing(sqlite3.connect(self.db_path, isolation_level=None))

    def _update_checksum(self):
        write_data_checksum(self.db_path, self.checksum_path)

    @staticmethod
    def _table_exists(conn, name):
        row = conn.execute(
            "select 1 from sqlite_master where type='table' and name=?", (name,)
        ).fetchone()
        return row is not None

    def init_tables(self):
        """Create the record tables and fill them on first use."""
        with self._connect() as conn:
            conn.execute("drop table if exists Achievement")
            conn.execute(
                "create table if not exists CharRecord (name char(20) primary key,"
                "column1 char(10),column2 char(10),column3 char(10))"
            )
            if not self._table_exists(conn, "GameRecord"):
                conn.execute(
                    "create table if not exists GameRecord "
                    "(id char(10) primary key,coin char(20),version char(20))"
                )
                conn.execute(
                    "insert into GameRecord values(1,?,'1')", (INITIAL_COIN,)
                )
                self._update_checksum()
            (count,) = conn.execute("select count(*) from CharRecord").fetchone()
            if count:
                return
            for hero in HEROES:
                name = encode(hero, random_key(40, 50, self._rng))
                column1 = encode("0", random_key(40, 60, self._rng))
                column2 = encode("0", random_key(40, 60, self._rng))
                column3 = encode("", random_key(40, 60, self._rng))
                conn.execute(
                    "insert into CharRecord values(?,?,?,?)",
                    (name, column1, column2, column3),
                )
        self._update_checksum()

    @staticmethod
    def _read_coin(conn):
        row = conn.execute("select coin from GameRecord").fetchone()
        if row is None or row[0] is None:
            raise LookupError("no coin record")
        return decode(row[0])

    def _clamp(self, conn):
        if _atoi(self._read_coin(conn)) > _atoi(decode(COIN_CAP)):
            conn.execute("update GameRecord set coin=?", (COIN_CAP,))
            return True
        return False

    def clamp_coin(self):
        """Cap the stored coin count; return whether it was changed."""
        with self._connect() as conn:
            changed = self._clamp(conn)
        if changed:
            self._update_checksum()
        return changed

    def save_value(self, table, column, value):
        """Store ``value`` encoded in ``column`` of every row of ``table``.

        Returns False when the database rejects the update.
        """
        encoded = encode(value, random_key(40, 60, self._rng))
        statement = f"update {_ident(table)} set {_ident(column)}=?"
        try:
            with self._connect() as conn:
                conn.execute(statement, (encoded,))
        except sqlite3.Error:
            return False
        self._update_checksum()
        return True

    def read_coin(self):
        """Return the decoded coin count as text."""
        with self._connect() as conn:
            return self._read_coin(conn)

    @staticmethod
    def _find(conn, table, column, value, target_column):
        statement = f"select {_ident(column)},{_ident(target_column)} from {_ident(table)}"
        for key, target in conn.execute(statement):
            if key is None or not key:
                continue
            if decode(key) == value:
                return key, decode(target) if target else ""
        return "", ""

    def read_value(self, table, column, value, target_column):
        """Return ``target_column`` of the row whose ``column`` decodes to ``value``.

        Text columns come back as stored; others as a whole number in text,
        "0" when the row is missing.
        """
        with self._connect() as conn:
            _, target = self._find(conn, table, column, value, target_column)
        if target_column in _TEXT_COLUMNS:
            return target
        return str(_atoi(target))

    def save_char_value(self, table, related_column, value, target_column, target_value, is_plus):
        """Set ``target_column`` of the matching row to ``target_value``.

        With ``is_plus`` the new value is put in front of the old one, and
        the coin count is capped afterwards.
        """
        with self._connect() as conn:
            key, target = self._find(conn, table, related_column, value, target_column)
            saved = target_value + target if is_plus else target_value
            encoded = encode(saved, random_key(40, 50, self._rng))
            conn.execute(
                f"update {_ident(table)} set {_ident(target_column)}=? "
                f"where {_ident(related_column)}=?",
                (encoded, key),
            )
            if is_plus:
                self._clamp(conn)
        self._update_checksum()