from .shared import format_entry, printf
from .table import Table


def dump_table(table: Table, name: str):
    printf(
        "== {0:s} (size {1:d}, capacity {2:d}) ==\n",
        name,
        table.size(),
        table.capacity,
    )

    for index, chain in enumerate(table.buckets.chains):
        if not chain:
            continue
        printf("{0:04d} {1:s}\n", index, " ".join(format_entry(e) for e in chain))
