"""Connection parameters: connect strings, data source names and odbc.ini lookups."""

from __future__ import annotations

import configparser
import os
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Optional, TextIO, Union

__all__ = ["ConnectParams", "SYS_ODBC_INI", "default_ini_paths"]

SYS_ODBC_INI = "/etc/odbc.ini"

_C_SPACE = " \t\n\v\f\r"
_MAX_PARAM_LEN = 511

PathLike = Union[str, "os.PathLike[str]"]


def default_ini_paths() -> list[Path]:
    """The user's odbc.ini followed by the system-wide one."""
    return [Path.home() / ".odbc.ini", Path(SYS_ODBC_INI)]


def _strip_name(name: str) -> str:
    # Trailing blanks are dropped, but the first character is always kept.
    return name[:1] + name[1:].rstrip(_C_SPACE)


def _parse_pairs(connect_string: str) -> Iterator[tuple[str, str]]:
    """Split ``name=value;`` pairs.

    When a value has no terminating ``;`` the scan resumes at the start of
    that value, so ``a=b=c`` yields both ``a`` -> ``b=c`` and ``b`` -> ``c``.
    """
    s = connect_string
    eq = s.find("=")
    while eq != -1:
        name = s[:eq]
        s = s[eq + 1:]
        semi = s.find(";")
        if semi != -1:
            value = s[:semi]
            s = s[semi + 1:]
        else:
            value = s
        yield _strip_name(name), value.lstrip(_C_SPACE)
        eq = s.find("=")


def _extract_after(keyword: str, connect_string: str) -> Optional[str]:
    start = connect_string.find(keyword)
    if start == -1:
        return None
    eq = connect_string.find("=", start)
    if eq == -1:
        return None
    rest = connect_string[eq + 1:].lstrip(_C_SPACE)
    return rest.split(";", 1)[0]


def _lookup_ini(path: Path, section: str, name: str) -> Optional[str]:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=(";", "#"),
        interpolation=None,
        strict=False,
    )
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            parser.read_file(handle)
    except (OSError, configparser.Error):
        return None
    wanted = section.lower()
    for candidate in parser.sections():
        if candidate.lower() == wanted and parser.has_option(candidate, name):
            return parser.get(candidate, name)
    return None


class ConnectParams:
    """Parameters of one connection: the data source name and connect-string pairs."""

    def __init__(self) -> None:
        self.dsn_name: str = ""
        self.ini_file_name: Optional[str] = None
        self.table: dict[str, str] = {}

    def set_connect_string(self, connect_string: str) -> None:
        """Merge the ``name=value`` pairs of ``connect_string``; later names win."""
        for name, value in _parse_pairs(connect_string):
            self.table[name] = value

    def extract_dsn(self, connect_string: str) -> Optional[str]:
        """Take the DSN out of ``connect_string`` and remember it; None if absent."""
        dsn = _extract_after("DSN", connect_string)
        if dsn is not None:
            self.dsn_name = dsn
        return dsn

    def extract_dbq(self, connect_string: str) -> Optional[str]:
        """Take the DBQ (database file) out of ``connect_string``; None if absent.

        The value is remembered in place of the data source name.
        """
        dbq = _extract_after("DBQ", connect_string)
        if dbq is not None:
            self.dsn_name = dbq
        return dbq

    def get(self, name: str) -> Optional[str]:
        """The value given for ``name`` in a connect string, or None."""
        return self.table.get(name)

    def get_connect_param(
        self, name: str, ini_paths: Optional[Iterable[PathLike]] = None
    ) -> Optional[str]:
        """Look ``name`` up in the data source's section of odbc.ini.

        The files in ``ini_paths`` (by default the user's, then the system's)
        are searched in order; an empty value counts as not found.
        """
        if not self.dsn_name:
            return None
        paths = default_ini_paths() if ini_paths is None else ini_paths
        for path in paths:
            value = _lookup_ini(Path(path), self.dsn_name, name)
            if value:
                return value[:_MAX_PARAM_LEN]
        return None

    def dump(self, out: Optional[TextIO] = None) -> None:
        """Write every connect-string parameter to ``out`` (standard output by default)."""
        stream = sys.stdout if out is None else out
        sys.stderr.write(f"Parameter values for DSN: {self.dsn_name}\n")
        if self.ini_file_name is not None:
            sys.stderr.write(f"Ini File is {self.ini_file_name}\n")
        for key, value in self.table.items():
            stream.write(f"Parameter: {key}, Value: {value}\n")