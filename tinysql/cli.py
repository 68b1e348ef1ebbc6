"""Command that builds and prints a small demonstration table."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from tinysql.table import Table
from tinysql.values import SQLChar, Varchar


def build_demo_table() -> Table:
    """A table exercising every kind of column and NULL filling."""
    table = Table()
    table.insert_column("test", "INTEGER")
    table.insert_column("Name", "TEXT")

    to_add: dict[str, object] = {"test": 1}
    table.insert_row(to_add)

    to_add["Name"] = "heh"
    table.insert_row(to_add)

    table.insert_column("variableCharacter", "VARCHAR", 10)
    empty: dict[str, object] = {}
    table.insert_row(empty)

    empty["variableCharacter"] = Varchar.for_column(
        table, "variableCharacter", "exactlyTen"
    )
    table.insert_row(empty)

    empty["variableCharacter"] = Varchar("lesser", 10)
    table.insert_row(empty)

    table.insert_column("setchar", "CHAR", 10)
    to_add["setchar"] = SQLChar("lesser", 10)
    table.insert_row(to_add)

    return table


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tinysql", description="Print a demonstration table."
    )
    parser.parse_args(argv)
    build_demo_table().show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())