from dataclasses import dataclass
import sys

from .debug import dump_table
from .shared import format_value, printf, printf_err
from .table import NotFound, Table


@dataclass(frozen=True)
class CommandOk:
    pass


@dataclass(frozen=True)
class CommandError:
    pass


CommandResult = CommandOk | CommandError


def _bool(b: bool) -> str:
    return "true" if b else "false"


def _expect_args(name: str, args: list[str], usage: str, n: int) -> bool:
    if len(args) == n:
        return True
    printf_err("Usage: {0:s}\n", f"{name} {usage}".strip())
    return False


def execute(table: Table, line: str) -> CommandResult:
    words = line.split()
    if not words or words[0].startswith("#"):
        return CommandOk()

    command, args = words[0], words[1:]
    match command:
        case "set":
            if len(args) < 2:
                printf_err("Usage: set KEY VALUE\n")
                return CommandError()
            table.insert(args[0], " ".join(args[1:]))

        case "get":
            if not _expect_args(command, args, "KEY", 1):
                return CommandError()
            value = table.get(args[0])
            if isinstance(value, NotFound):
                printf("not found\n")
            else:
                printf("{0:s}\n", format_value(value))

        case "has":
            if not _expect_args(command, args, "KEY", 1):
                return CommandError()
            printf("{0:s}\n", _bool(table.contains(args[0])))

        case "del":
            if not _expect_args(command, args, "KEY", 1):
                return CommandError()
            printf("{0:s}\n", _bool(table.delete(args[0])))

        case "size":
            if not _expect_args(command, args, "", 0):
                return CommandError()
            printf("{0:d}\n", table.size())

        case "dump":
            if not _expect_args(command, args, "", 0):
                return CommandError()
            dump_table(table, "table")

        case _:
            printf_err("Unknown command '{0:s}'.\n", command)
            return CommandError()

    return CommandOk()


def repl(table: Table):
    while True:
        try:
            inpt = input()
        except EOFError:
            break
        execute(table, inpt)


def run_file(table: Table, filepath: str):
    with open(filepath) as fp:
        for line in fp:
            if isinstance(execute(table, line), CommandError):
                sys.exit(65)


def main():
    table = Table()

    if len(sys.argv) == 1:
        repl(table)
    elif len(sys.argv) == 2:
        run_file(table, sys.argv[1])
    else:
        printf("Usage: chaintable [path]\n")
        sys.exit(64)


if __name__ == "__main__":
    main()
