"""Command that exercises the database against a simulated flash region."""

from __future__ import annotations

import argparse

from .db import MAX_RECORDS, SIMULATED_MAX_RECORDS, Database, DatabaseError
from .flash import FlashMemory
from .record import Record


def run_demo(flash: FlashMemory | None = None, max_records: int = MAX_RECORDS) -> list[str]:
    """Store, restore and fill the database; return the messages produced."""
    flash = flash if flash is not None else FlashMemory()
    lines: list[str] = []

    db = Database(flash, max_records)
    key, value = "temp", "24.5C"
    try:
        db.create(key, value)
    except DatabaseError:
        pass
    try:
        db.persist(Record(key, value))
    except DatabaseError:
        pass

    db = Database(flash, max_records)
    db.restore()

    restored = db.read(key)
    if restored is not None:
        lines.append(f"Restored value: {restored}")
    else:
        lines.append("Key not found after restore")

    for index in range(max_records + 2):
        record = Record(f"key{index}", f"val{index}")
        failed = False
        try:
            db.create(record.key, record.value)
        except DatabaseError:
            failed = True
        try:
            db.persist(record)
        except DatabaseError:
            failed = True
        if failed:
            lines.append(f"DB full at record {index}")
            break

    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="flashkv", description=run_demo.__doc__)
    parser.add_argument("--max-records", type=int, default=MAX_RECORDS)
    parser.add_argument(
        "--simulate-constraints",
        action="store_true",
        help=f"limit the database to {SIMULATED_MAX_RECORDS} records",
    )
    args = parser.parse_args(argv)
    limit = SIMULATED_MAX_RECORDS if args.simulate_constraints else args.max_records
    if limit < 1:
        parser.error("--max-records must be at least 1")
    for line in run_demo(max_records=limit):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())