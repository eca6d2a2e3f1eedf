# flashkv

A small key-value database. It keeps its keys in memory. Records are appended
as fixed-size entries to an emulated flash region, and the database is rebuilt
from that region when it starts.

## Modules

### `flashkv.record`

- `Record(key, value)` is a frozen dataclass. The key may be up to 32 bytes of
  UTF-8 (`MAX_KEY_LEN`) and the value up to 128 bytes (`MAX_VALUE_LEN`). A
  longer key or value raises `ValueError`.
- `Record.to_bytes()` returns a `RECORD_SIZE` (160) byte block. The block holds
  the key field and then the value field, and each field is padded with NUL
  bytes.
- `Record.from_bytes(data)` decodes such a block and strips trailing NULs. It
  raises `ValueError` when the length is wrong or the bytes are not valid UTF-8.

### `flashkv.flash`

- `FlashMemory(start=DB_START, size=DB_SIZE)` is an in-memory region that
  starts erased, with every byte `0xFF`. The defaults cover `0x080F0000` to
  `0x080F1000`. A `start` below `FLASH_BASE` (`0x08000000`) raises
  `FlashError`.
- `read(address, length)` returns bytes from the region.
- `write(address, data)` programs bytes. The address and the data length must
  both be multiples of 8. Programming can only clear bits, as on NOR flash, so a
  write ANDs the new data into the old contents.
- `erase_page(address)` resets the 2048-byte page that contains `address` to
  `0xFF`. Only the part of the page inside the region is reset.
- An address outside the region, or a misaligned write, raises `FlashError`.

### `flashkv.db`

- `Database(flash=None, max_records=16)` holds at most `max_records` distinct
  keys. When no flash region is given it creates a new `FlashMemory`. Creating
  a `Database` calls `restore()`.
- `create(key, value)` inserts a key or replaces its value. It raises
  `DatabaseFull` when a new key would go past the limit.
- `read(key)` returns the value, or `None` when the key is absent.
- `update(key, value)` replaces the value of an existing key. `delete(key)`
  removes a key. Both raise `KeyNotFound` when the key is missing.
- `persist(record)` appends a `Record` to the flash log at `next_offset`. It
  raises `FlashFull` when the region has no room left. A flash error during the
  write is raised as `DatabaseError`.
- `restore()` clears the store and reads slots from the start of the region
  until it reaches one that does not decode as a record, such as an erased
  slot. Later records for the same key win. Keys beyond `max_records` are
  dropped.
- `len(db)` is the number of keys held.
- `DatabaseFull`, `KeyNotFound` and `FlashFull` are subclasses of
  `DatabaseError`.
- `MAX_RECORDS` is 16 and `SIMULATED_MAX_RECORDS` is 4.

### `flashkv.demo`

- `run_demo(flash=None, max_records=16)` stores `temp = 24.5C`, persists it,
  opens a fresh `Database` on the same region and reports the restored value.
  It then creates and persists `key0`, `key1`, … until a create or a persist
  fails. It returns the messages it produced as a list of strings.
- `main(argv=None)` runs the demo and prints those messages.

## Example

```python
from flashkv.flash import FlashMemory
from flashkv.db import Database
from flashkv.record import Record

flash = FlashMemory(0x080F0000, 0x1000)
db = Database(flash, 16)
db.create("temp", "24.5C")
db.persist(Record("temp", "24.5C"))

rebooted = Database(flash, 16)   # restores from flash
print(rebooted.read("temp"))     # 24.5C
```

## Demo

```
flashkv-demo
flashkv-demo --max-records 8
flashkv-demo --simulate-constraints
```

`--simulate-constraints` limits the database to 4 records. If you give both
options, it overrides `--max-records`.

## What it does not do

- The flash region exists only in process memory. Nothing is written to disk,
  and the data is lost when the `FlashMemory` object goes away.
- `create`, `update` and `delete` change only the in-memory store. Only
  `persist` writes to flash, so updates and deletions are not recorded in the
  log.
- The log is never compacted. `Database` does not call `erase_page`, so once
  the region is full, `persist` raises `FlashFull` until you erase the region
  yourself.

## Tests

```
pip install -e .[test]
pytest
```