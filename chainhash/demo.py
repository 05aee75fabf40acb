"""Scripted walk-through of the hash table's behaviour."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from chainhash.table import HashTable

_RULE = "###############\n"


def _report(out: TextIO, table: HashTable, name: str, flag: bool) -> None:
    out.write(str(table))
    out.write(f"{name} = {int(flag)}\n")


def _table_creation(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test table creation\n")
    out.write("Table:\n")
    table = HashTable(3)
    out.write(str(table))
    out.write("Put values into table:\n")
    table.insert("hello")
    table.insert("world")
    out.write(str(table))
    out.write(_RULE)


def _insert_steps(out: TextIO, table: HashTable, steps: Sequence[tuple[str, str]]) -> None:
    for position, (label, key) in enumerate(steps):
        out.write(label)
        _report(out, table, "isInserted", table.insert(key))
        if position < len(steps) - 1:
            out.write("\n")


def _insert(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test insert\n")
    _insert_steps(
        out,
        HashTable(10),
        [
            ("Insert hello:\n", "hello"),
            ("Insert world\n", "world"),
            ("Insert apple:\n", "apple"),
            ("Insert hello:\n", "hello"),
        ],
    )
    out.write(_RULE)


def _insert_duplicates(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test insert duplicates\n")
    _insert_steps(
        out,
        HashTable(10),
        [
            ("Insert yellow:\n", "yellow"),
            ("Insert white\n", "white"),
            ("Insert black:\n", "black"),
            ("Insert white:\n", "white"),
            ("Insert yellow:\n", "yellow"),
        ],
    )
    out.write(_RULE)


def _insert_collision(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test insert collision\n")
    out.write("Create table with size = 3\n")
    table = HashTable(3)
    for key in ("hello", "world", "apple", "banana"):
        out.write(f"Insert {key}:\n")
        table.insert(key)
        out.write(str(table))
        out.write("\n")
    out.write("Collisions:\n")
    out.write(table.format_all_collisions())
    out.write(_RULE)


def _remove_steps(out: TextIO, table: HashTable, keys: Sequence[str], trailing: bool) -> None:
    for position, key in enumerate(keys):
        out.write(f"Remove {key}\n")
        _report(out, table, "isRemoved", table.remove(key))
        if trailing or position < len(keys) - 1:
            out.write("\n")


def _filled(size: int, keys: Sequence[str]) -> HashTable:
    table = HashTable(size)
    for key in keys:
        table.insert(key)
    return table


def _remove(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test remove\n")
    table = _filled(10, ["Moscow", "London", "Madrid", "Berlin", "Paris", "Oslo"])
    out.write("Created table with keys inside:\n")
    out.write(str(table))
    out.write("\n")
    _remove_steps(
        out, table, ["Moscow", "Berlin", "Moscow", "Paris", "Oslo", "Paris"], trailing=False
    )
    out.write(_RULE)


def _remove_duplicates(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test remove duplicates\n")
    table = _filled(10, ["cow", "cat", "dog", "bear"])
    out.write("Created table with keys inside:\n")
    out.write(str(table))
    out.write("\n")
    _remove_steps(out, table, ["cow", "dog", "cow", "dog"], trailing=True)
    out.write(_RULE)


def _write_hashes(out: TextIO, table: HashTable, keys: Sequence[str]) -> None:
    for key in keys:
        out.write(f"{key} hash: {table.hash(key)}\n")


def _print_all_collisions(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test print all collisions\n")
    keys = ["Moscow", "London", "Madrid", "Berlin"]
    table = _filled(3, keys)
    out.write("Created table with size = 3:\n")
    out.write(str(table))
    _write_hashes(out, table, keys)
    out.write("\n")
    out.write("Collision expected: Moscow and Madrid\n")
    out.write("\n")
    out.write("Call printCollisions():\n")
    out.write(table.format_all_collisions())
    out.write(_RULE)


def _print_certain_collisions(out: TextIO) -> None:
    out.write(_RULE)
    out.write("Test print collisions with certain hash\n")
    keys = ["Moscow", "London", "Madrid", "Berlin", "Roma", "Paris"]
    table = _filled(3, keys)
    out.write("Created table with size = 3:\n")
    out.write(str(table))
    _write_hashes(out, table, keys)
    out.write("\n")
    out.write("Collision expected: Moscow and Madrid. hash = 2\n")
    out.write("Collision expected: Berlin and Paris. hash = 1\n")
    out.write("Collision expected: London and Roma. hash = 0\n")
    out.write("\n")
    for hash_value in (2, 1, 0):
        out.write(f"Call printCollisions({hash_value}):\n")
        out.write(table.format_collisions(hash_value))
    out.write(_RULE)


def _different_sources(out: TextIO) -> None:
    out.write(_RULE)
    out.write("test different memory types of keys inside hashTable:\n")
    out.write("Created empty table with size = 5\n")
    table = HashTable(5)
    out.write(str(table))
    out.write("Insert string-literal (static memory) to table:\n")
    table.insert("Moscow")
    out.write(str(table))
    out.write("\n")
    out.write("Insert char-array from auto-memory:\n")
    table.insert("".join(["T", "o", "k", "y", "o"]))
    out.write(str(table))
    out.write(_RULE)


def _different_sources_duplicates(out: TextIO) -> None:
    out.write(_RULE)
    out.write("test different memory types keys duplicates:\n")
    out.write("Created empty table with size = 5\n")
    table = HashTable(5)
    out.write(str(table))
    out.write("Insert string-literal (static memory) to table:\n")
    inserted = table.insert("Moscow")
    out.write(str(table))
    out.write(f"IsInserted: {int(inserted)}\n")
    out.write("\n")
    out.write("Insert the same char-array key from auto-memory:\n")
    inserted = table.insert("".join(["M", "o", "s", "c", "o", "w"]))
    out.write(str(table))
    out.write(f"IsInserted: {int(inserted)}\n")
    out.write(_RULE)


_DEMOS: tuple[Callable[[TextIO], None], ...] = (
    _table_creation,
    _insert,
    _insert_duplicates,
    _insert_collision,
    _remove,
    _remove_duplicates,
    _print_all_collisions,
    _print_certain_collisions,
    _different_sources,
    _different_sources_duplicates,
)


def run_demos(out: TextIO) -> None:
    """Write every demonstration, in order, to ``out``."""
    for demo in _DEMOS:
        demo(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run all demonstrations on standard output."""
    run_demos(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())