#!/usr/bin/env python3
"""
Basic Usage Example - container utilities

This script walks through the same operations on a list, a set and a dict:
- Lookup with both failure contracts
- Membership testing
- Insertion, directly and through an Inserter
- Walking a container with a Cursor

Run: python examples/basic_usage.py
"""

from typing import Any, Iterable

from container_utils import (
    Cursor,
    ElementNotFound,
    Inserter,
    contains,
    find,
    insert_into,
    inserter_for,
    locate,
    try_find,
)
from container_utils.config import configure


def collect_words(lines: Iterable[str], sink: Inserter[str]) -> None:
    """Insert every word of ``lines`` into whatever ``sink`` wraps."""
    for line in lines:
        for word in line.split():
            sink.insert(word.lower())


def show(label: str, value: Any) -> None:
    print(f"   {label:<32} {value!r}")


def main() -> None:
    configure({"logging": {"level": "DEBUG"}, "lookup": {"log_misses": True}})

    print("1. Sequence lookup and insertion")
    numbers = [3, 1, 4]
    show("find(numbers, 1)", find(numbers, 1))
    show("contains(numbers, 9)", contains(numbers, 9))
    try:
        find(numbers, 9)
    except ElementNotFound as e:
        show("find(numbers, 9) raised", str(e))
    insert_into(numbers, 5)
    show("after insert_into(numbers, 5)", numbers)
    print()

    print("2. Map lookup")
    scores = {"a": 1, "b": 2}
    show("find(scores, 'a')", find(scores, "a"))
    show("try_find(scores, 'z')", try_find(scores, "z"))
    locate(scores, "a").value = 10
    show("after locate(...).value = 10", scores)
    print()

    print("3. Collecting into any container")
    text = ["The quick brown fox", "the lazy dog"]
    as_list: list = []
    as_set: set = set()
    collect_words(text, inserter_for(as_list))
    collect_words(text, inserter_for(as_set))
    show("list keeps every word", as_list)
    show("set keeps unique words", sorted(as_set))
    print()

    print("4. Cursors")
    cursor = Cursor.over(scores)
    while not cursor.at_end():
        show(f"position {cursor.position}", cursor.value)
        cursor.advance()
    print()

    print("Done.")


if __name__ == "__main__":
    main()
