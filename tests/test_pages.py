import struct

import pytest

from mdbkit.pages import (
    JET3_FORMAT,
    JET4_FORMAT,
    PageFormat,
    TempPageStore,
    encrypt_page,
    free_space,
    new_data_page,
    new_leaf_page,
)


def test_new_data_page_header():
    page = new_data_page(JET4_FORMAT, 0x1234)
    assert len(page) == JET4_FORMAT.pg_size
    assert page[0:2] == b"\x01\x01"
    free = struct.unpack_from("<H", page, 2)[0]
    assert free == JET4_FORMAT.pg_size - JET4_FORMAT.row_count_offset - 2
    assert struct.unpack_from("<I", page, 4)[0] == 0x1234
    assert struct.unpack_from("<H", page, JET4_FORMAT.row_count_offset)[0] == 0


def test_new_leaf_page_header():
    page = new_leaf_page(JET3_FORMAT, 77)
    assert len(page) == JET3_FORMAT.pg_size
    assert page[0:2] == b"\x04\x01"
    assert struct.unpack_from("<H", page, 2)[0] == 0
    assert struct.unpack_from("<I", page, 4)[0] == 77


def test_rows_round_trip():
    store = TempPageStore(JET4_FORMAT, 5)
    rows = [b"alpha", b"b", b"\x00\x01\x02\x03", b"delta row"]
    numbers = [store.add_row(r) for r in rows]
    assert numbers == [1, 2, 3, 4]
    assert list(store.rows()) == rows
    assert len(store.pages) == 1


def test_free_space_matches_header():
    store = TempPageStore(JET4_FORMAT)
    for data in (b"x" * 10, b"y" * 33, b"z"):
        store.add_row(data)
        page = store.pages[-1]
        assert free_space(page, JET4_FORMAT) == struct.unpack_from("<H", page, 2)[0]


def test_free_space_decreases_by_row_and_slot():
    store = TempPageStore(JET3_FORMAT)
    store.add_row(b"a" * 10)
    before = free_space(store.pages[-1], JET3_FORMAT)
    store.add_row(b"b" * 20)
    after = free_space(store.pages[-1], JET3_FORMAT)
    assert before - after == 22


def test_spills_onto_new_page():
    fmt = PageFormat(pg_size=64, row_count_offset=8)
    store = TempPageStore(fmt, 3)
    rows = [bytes([i]) * 20 for i in range(5)]
    for r in rows:
        store.add_row(r)
    assert len(store.pages) > 1
    assert list(store.rows()) == rows
    for page in store.pages:
        assert struct.unpack_from("<I", page, 4)[0] == 3
        assert free_space(page, fmt) >= 0


def test_row_too_large_raises():
    fmt = PageFormat(pg_size=64, row_count_offset=8)
    store = TempPageStore(fmt)
    with pytest.raises(ValueError):
        store.add_row(b"q" * 60)


def test_invalid_format_raises():
    with pytest.raises(ValueError):
        PageFormat(pg_size=10, row_count_offset=8)


def test_encrypt_page_zero_is_clear():
    page = bytes(range(256)) * 8
    assert encrypt_page(page, 0xDEADBEEF, 0) == page
    assert encrypt_page(page, 0, 9) == page


def test_encrypt_page_round_trip():
    page = bytes(new_data_page(JET3_FORMAT, 12))
    encrypted = encrypt_page(page, 0x6B39DAC7, 3)
    assert encrypted != page
    assert len(encrypted) == len(page)
    assert encrypt_page(encrypted, 0x6B39DAC7, 3) == page


def test_encrypt_page_depends_on_page_number():
    page = bytes(JET3_FORMAT.pg_size)
    assert encrypt_page(page, 0x1111, 1) != encrypt_page(page, 0x1111, 2)