import sys
from typing import Any

from .buckets import Entry


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def format_value(value: Any) -> str:
    if value is None:
        return "nil"
    return str(value)


def format_entry(entry: Entry) -> str:
    return f"{entry.key}={format_value(entry.value)}"
