"""Page layout helpers: fresh data and leaf pages, free space and page encryption."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

from .rc4 import rc4

__all__ = [
    "PageFormat",
    "TempPageStore",
    "JET3_FORMAT",
    "JET4_FORMAT",
    "new_data_page",
    "new_leaf_page",
    "free_space",
    "encrypt_page",
]

_DATA_PAGE_SIGNATURE = 0x0101
_LEAF_PAGE_SIGNATURE = 0x0104


@dataclass(frozen=True)
class PageFormat:
    """The page size and the position of the row count on data pages."""

    pg_size: int
    row_count_offset: int

    def __post_init__(self) -> None:
        if self.row_count_offset < 8:
            raise ValueError(f"row count offset too small: {self.row_count_offset}")
        if self.pg_size <= self.row_count_offset + 2:
            raise ValueError(
                f"page size {self.pg_size} leaves no room after the row count"
            )


JET3_FORMAT = PageFormat(pg_size=2048, row_count_offset=0x08)
JET4_FORMAT = PageFormat(pg_size=4096, row_count_offset=0x0C)


def _get16(page: bytes, offset: int) -> int:
    return struct.unpack_from("<H", page, offset)[0]


def _put16(page: bytearray, offset: int, value: int) -> None:
    struct.pack_into("<H", page, offset, value & 0xFFFF)


def _put32(page: bytearray, offset: int, value: int) -> None:
    struct.pack_into("<I", page, offset, value & 0xFFFFFFFF)


def new_data_page(fmt: PageFormat, table_pg: int) -> bytearray:
    """An empty data page belonging to the table defined on ``table_pg``."""
    page = bytearray(fmt.pg_size)
    _put16(page, 0, _DATA_PAGE_SIGNATURE)
    _put16(page, 2, fmt.pg_size - fmt.row_count_offset - 2)
    _put32(page, 4, table_pg)
    return page


def new_leaf_page(fmt: PageFormat, table_pg: int) -> bytearray:
    """An empty index leaf page belonging to the table defined on ``table_pg``."""
    page = bytearray(fmt.pg_size)
    _put16(page, 0, _LEAF_PAGE_SIGNATURE)
    _put32(page, 4, table_pg)
    return page


def free_space(page: bytes, fmt: PageFormat) -> int:
    """Bytes between the end of the row offset table and the lowest row."""
    rco = fmt.row_count_offset
    rows = _get16(page, rco)
    free_start = rco + 2 + rows * 2
    free_end = _get16(page, rco + rows * 2)
    return free_end - free_start


def encrypt_page(page: bytes, db_key: int, pg: int) -> bytes:
    """Encrypt (or decrypt) page ``pg`` with the database key.

    Page 0 and databases without a key are stored in the clear and come
    back unchanged.
    """
    if pg == 0 or db_key == 0:
        return bytes(page)
    key = struct.pack("<I", (db_key ^ pg) & 0xFFFFFFFF)
    return rc4(key, page)


class TempPageStore:
    """In-memory data pages holding the rows of a work table."""

    def __init__(self, fmt: PageFormat, table_pg: int = 0) -> None:
        self.fmt = fmt
        self.table_pg = table_pg
        self.pages: list[bytearray] = []

    def add_row(self, row: bytes) -> int:
        """Store ``row`` on the last page, starting a new one when it is full.

        Returns the number of rows on the page that received the row.
        """
        fmt = self.fmt
        rco = fmt.row_count_offset
        row = bytes(row)
        size = len(row)
        if size + 2 > fmt.pg_size - rco - 2:
            raise ValueError(f"row of {size} bytes does not fit on a page")

        if not self.pages or _get16(self.pages[-1], 2) < size + 2:
            self.pages.append(new_data_page(fmt, self.table_pg))
        page = self.pages[-1]

        num_rows = _get16(page, rco)
        pos = fmt.pg_size if num_rows == 0 else _get16(page, rco + num_rows * 2)

        pos -= size
        page[pos:pos + size] = row
        _put16(page, rco + 2 + num_rows * 2, pos)
        num_rows += 1
        _put16(page, rco, num_rows)
        _put16(page, 2, pos - rco - 2 - num_rows * 2)
        return num_rows

    def rows(self) -> Iterator[bytes]:
        """The stored rows, page by page, in the order they were added."""
        rco = self.fmt.row_count_offset
        for page in self.pages:
            end = self.fmt.pg_size
            for i in range(_get16(page, rco)):
                start = _get16(page, rco + 2 + i * 2)
                yield bytes(page[start:end])
                end = start