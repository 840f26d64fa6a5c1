# mdbkit

Pure-Python building blocks for working with Microsoft Access (Jet 3 / Jet 4)
database pages: rendering currency and numeric values as text, the RC4 page
cipher, data-page layout and free-space accounting, in-memory work tables,
table and column definitions, a page-read counter and ODBC-style connection
strings.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `mdbkit.money`
  - `money_to_string(data)`: an 8-byte little-endian currency value as a
    decimal string with four places. Raises `ValueError` if fewer than 8
    bytes are given.
  - `numeric_to_string(data, scale, prec)`: a 17-byte NUMERIC value (a sign
    byte followed by four 32-bit words, most significant word first) as a
    decimal string; `prec` gives the number of fraction digits.
- `mdbkit.rc4`
  - `RC4(key)`: an RC4 keystream; `process(data)` encrypts or decrypts and
    successive calls continue the stream. An empty key raises `ValueError`.
  - `rc4(key, data)`: one-shot use of a fresh keystream.
- `mdbkit.stats`
  - `Statistics`: counts physical page reads. `start()` and `stop()` switch
    collection on and off, `record_read()` adds one read while collecting,
    and `dump(out=None)` writes `Physical Page Reads: N` (to standard output
    by default).
- `mdbkit.schema`
  - `ColumnType` (with `fixed_size()`), `ObjectType`, `Column`,
    `CatalogEntry` and `TableDef`.
  - `Column.get_prop(key)` / `TableDef.get_prop(key)` look up properties;
    `Column.is_shortdate()` checks for the `"Short Date"` format.
  - `TableDef.find_column(name)` (ASCII case-insensitive),
    `sort_columns()`, `add_temp_column(column)` and `end_temp_columns()`,
    which lays out the fixed columns one after another.
  - `fill_temp_col(name, col_size, col_type, is_fixed)` and
    `create_temp_table(name)` build work-table definitions;
    `is_user_table(entry)` and `is_system_table(entry)` classify catalog
    entries by their flags.
- `mdbkit.pages`
  - `PageFormat(pg_size, row_count_offset)`, with `JET3_FORMAT` (2048-byte
    pages) and `JET4_FORMAT` (4096-byte pages).
  - `new_data_page(fmt, table_pg)`, `new_leaf_page(fmt, table_pg)` and
    `free_space(page, fmt)`.
  - `encrypt_page(page, db_key, pg)`: RC4 with the database key XOR the page
    number; page 0 and a zero key leave the page unchanged.
  - `TempPageStore(fmt, table_pg=0)`: in-memory data pages; `add_row(row)`
    stores a row (starting a new page when the last one is full) and
    `rows()` yields the rows back in the order they were added.
- `mdbkit.connectparams`
  - `ConnectParams`: `set_connect_string(s)` merges `name=value;` pairs,
    `get(name)` returns one, `extract_dsn(s)` and `extract_dbq(s)` pull out
    the `DSN` or `DBQ` value, `get_connect_param(name, ini_paths=None)`
    looks the name up in the data source's section of `odbc.ini` files
    (by default `~/.odbc.ini`, then `/etc/odbc.ini`), and `dump(out=None)`
    lists the parameters.

## Example

```python
from mdbkit.money import money_to_string
from mdbkit.rc4 import rc4
from mdbkit.pages import JET4_FORMAT, TempPageStore
from mdbkit.schema import ColumnType, create_temp_table, fill_temp_col
from mdbkit.connectparams import ConnectParams

print(money_to_string((12345).to_bytes(8, "little", signed=True)))  # 1.2345
print(rc4(b"Key", b"Plaintext").hex())  # bbf316e8d940af0ad3

table = create_temp_table("#work")
table.add_temp_column(fill_temp_col("id", 0, ColumnType.LONGINT, True))
table.add_temp_column(fill_temp_col("name", 64, ColumnType.TEXT, False))
table.end_temp_columns()

store = TempPageStore(JET4_FORMAT)
store.add_row(b"first row")
print(list(store.rows()))  # [b'first row']

params = ConnectParams()
params.set_connect_string("DSN=orders;Database=/data/orders.mdb")
print(params.get("Database"))  # /data/orders.mdb
print(params.extract_dsn("DSN=orders;Database=/data/orders.mdb"))  # orders
```

Connection-string names keep any leading blanks, so write pairs without a
space after the `;`.

## What this package does not do

- It does not open database files or read the catalog, table definitions,
  columns or rows from disk; `TableDef` and `CatalogEntry` are filled in by
  the caller.
- It does not pack or unpack row buffers, decode property blocks, or
  evaluate WHERE-clause search conditions.
- It does not write pages back to a file or maintain indexes.
- It has no command-line tool and no ODBC driver; `ConnectParams` only
  handles connection strings and `odbc.ini` lookups.