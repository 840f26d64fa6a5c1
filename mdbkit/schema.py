"""Table, column and catalog definitions, including in-memory work tables."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = [
    "ColumnType",
    "ObjectType",
    "Column",
    "CatalogEntry",
    "TableDef",
    "fill_temp_col",
    "create_temp_table",
    "is_user_table",
    "is_system_table",
    "MAX_OBJ_NAME",
]

MAX_OBJ_NAME = 256

_SYSTEM_FLAGS = 0x80000002


class ColumnType(enum.IntEnum):
    """Storage types of table columns."""

    BOOL = 0x01
    BYTE = 0x02
    INT = 0x03
    LONGINT = 0x04
    MONEY = 0x05
    FLOAT = 0x06
    DOUBLE = 0x07
    DATETIME = 0x08
    BINARY = 0x09
    TEXT = 0x0A
    OLE = 0x0B
    MEMO = 0x0C
    REPID = 0x0F
    NUMERIC = 0x10
    COMPLEX = 0x12

    def fixed_size(self) -> int:
        """Bytes a value of this type occupies in the fixed part of a row."""
        return _FIXED_SIZES.get(self, 0)


_FIXED_SIZES = {
    ColumnType.BOOL: 0,
    ColumnType.BYTE: 1,
    ColumnType.INT: 2,
    ColumnType.LONGINT: 4,
    ColumnType.MONEY: 8,
    ColumnType.FLOAT: 4,
    ColumnType.DOUBLE: 8,
    ColumnType.DATETIME: 8,
    ColumnType.REPID: 16,
    ColumnType.NUMERIC: 17,
    ColumnType.COMPLEX: 4,
}


class ObjectType(enum.IntEnum):
    """Kinds of object listed in the catalog."""

    ANY = -1
    FORM = 0
    TABLE = 1
    MACRO = 2
    SYSTEM_TABLE = 3
    REPORT = 4
    QUERY = 5
    LINKED_TABLE = 6
    MODULE = 7
    RELATIONSHIP = 8
    UNKNOWN_09 = 9
    UNKNOWN_0A = 10
    DATABASE_PROPERTY = 11


def _truncate_name(name: str) -> str:
    return name[:MAX_OBJ_NAME]


@dataclass
class Column:
    """A column definition."""

    name: str = ""
    col_type: ColumnType = ColumnType.TEXT
    col_size: int = 0
    col_num: int = 0
    var_col_num: int = 0
    row_col_num: int = 0
    fixed_offset: int = 0
    is_fixed: bool = False
    is_long_auto: bool = False
    is_uuid_auto: bool = False
    col_scale: int = 0
    col_prec: int = 0
    props: Optional[Mapping[str, str]] = None
    sargs: list = field(default_factory=list)

    def get_prop(self, key: str) -> Optional[str]:
        """The column property ``key``, or None when absent."""
        if self.props is None:
            return None
        return self.props.get(key)

    def is_shortdate(self) -> bool:
        """Whether the column is formatted as a short date."""
        return self.get_prop("Format") == "Short Date"


@dataclass
class CatalogEntry:
    """One object listed in the database catalog."""

    object_name: str = ""
    object_type: int = ObjectType.TABLE
    table_pg: int = 0
    flags: int = 0
    props: list = field(default_factory=list)


@dataclass
class TableDef:
    """A table definition with its columns."""

    entry: CatalogEntry
    name: str = ""
    columns: list[Column] = field(default_factory=list)
    num_rows: int = 0
    num_var_cols: int = 0
    num_idxs: int = 0
    num_real_idxs: int = 0
    first_data_pg: int = 0
    usage_map: bytes = b""
    free_usage_map: bytes = b""
    is_temp_table: bool = False
    props: Optional[Mapping[str, str]] = None
    sarg_tree: Any = None

    def __post_init__(self) -> None:
        if not self.name:
            self.name = _truncate_name(self.entry.object_name)

    @property
    def num_cols(self) -> int:
        return len(self.columns)

    def get_prop(self, key: str) -> Optional[str]:
        """The table property ``key``, or None when absent."""
        if self.props is None:
            return None
        return self.props.get(key)

    def find_column(self, name: str) -> Optional[Column]:
        """The column called ``name``, compared without regard to ASCII case."""
        wanted = name.lower()
        return next((col for col in self.columns if col.name.lower() == wanted), None)

    def sort_columns(self) -> None:
        """Order the columns by column number."""
        self.columns.sort(key=lambda col: col.col_num)

    def add_temp_column(self, column: Column) -> Column:
        """Append a copy of ``column``, numbering it after the existing ones."""
        added = dataclasses.replace(column, col_num=self.num_cols, sargs=list(column.sargs))
        if not added.is_fixed:
            added.var_col_num = self.num_var_cols
            self.num_var_cols += 1
        self.columns.append(added)
        return added

    def end_temp_columns(self) -> None:
        """Lay out the fixed columns one after another; call after adding all columns."""
        start = 0
        for col in self.columns:
            if col.is_fixed:
                col.fixed_offset = start
                start += col.col_size


def fill_temp_col(name: str, col_size: int, col_type: ColumnType, is_fixed: bool) -> Column:
    """Build a column for a work table; only text and memo columns keep ``col_size``."""
    col_type = ColumnType(col_type)
    if col_type in (ColumnType.TEXT, ColumnType.MEMO):
        size = col_size
    else:
        size = col_type.fixed_size()
    return Column(
        name=_truncate_name(name),
        col_type=col_type,
        col_size=size,
        is_fixed=bool(is_fixed),
    )


def create_temp_table(name: str) -> TableDef:
    """An empty in-memory table backed by a stand-in catalog entry."""
    entry = CatalogEntry(
        object_name=_truncate_name(name),
        object_type=ObjectType.TABLE,
        table_pg=0,
    )
    return TableDef(entry=entry, is_temp_table=True)


def is_user_table(entry: CatalogEntry) -> bool:
    """Whether ``entry`` is a table that is not a system table."""
    return entry.object_type == ObjectType.TABLE and not entry.flags & _SYSTEM_FLAGS


def is_system_table(entry: CatalogEntry) -> bool:
    """Whether ``entry`` is a system table."""
    return entry.object_type == ObjectType.TABLE and bool(entry.flags & _SYSTEM_FLAGS)