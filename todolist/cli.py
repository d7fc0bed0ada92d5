"""Command-line interface for the to-do list."""

import sys
from typing import TextIO

from todolist.dates import format_datetime
from todolist.db import ToDoList
from todolist.records import RecordStatus
from todolist.storage import StorageError

HELP_LINES = (
    "To do list",
    "- stats: Display the number and distribution percentage of tasks",
    "- help: ",
    "- list: List all to-do tasks",
    '- add "<content>": Add new task',
    '- edit <id> "<content>": Edit an existing task',
    "- check <id>: Mark a task as completed",
    "- delete <id>: Soft-delete a task",
)


class CommandError(Exception):
    """Raised for invalid command-line usage."""


def _row(*cells: str) -> str:
    return f"{cells[0]:<10} {cells[1]:<20} {cells[2]:<12} {cells[3]:<20}"


def run(argv: list[str], out: TextIO | None = None) -> None:
    """Execute one command given its arguments (without the program name)."""
    out = sys.stdout if out is None else out
    if not argv:
        raise CommandError("Your command is invalid. Use `help` for information.")

    command, args = argv[0], argv[1:]
    if command == "stats":
        todo = ToDoList.load()
        done = todo.count_by_status(RecordStatus.DONE)
        in_progress = todo.count_by_status(RecordStatus.IN_PROGRESS)
        total = done + in_progress
        if total == 0:
            raise CommandError("No tasks to report.")
        print(f"Number of task DONE: {done} ({100 * done // total}%)", file=out)
        print(f"Number of task IN-PROGRESS: {in_progress} ({100 * in_progress // total}%)", file=out)
    elif command == "help":
        for line in HELP_LINES:
            print(line, file=out)
    elif command == "list":
        todo = ToDoList.load()
        print(_row("ID", "Timestamp", "Status", "Content"), file=out)
        for key, record in todo.in_progress():
            print(
                _row(key, format_datetime(record.timestamp), str(record.status), record.content),
                file=out,
            )
    elif command == "add":
        if not args:
            raise CommandError(
                f"Command `{command}` requires <content>. Use `help` for information."
            )
        key = ToDoList.load().add(args[0])
        print(f"Add item successfully. New key: {key}", file=out)
    elif command == "edit":
        if len(args) < 2:
            raise CommandError(
                f"Command `{command}` require <id>, <content>. Use `help` for information."
            )
        ToDoList.load().edit(args[0], args[1])
        print(f"Edit item {args[0]} successfully.", file=out)
    elif command in ("check", "delete"):
        if not args:
            raise CommandError(f"Command `{command}` require <id>. Use `help` for information.")
        todo = ToDoList.load()
        if command == "check":
            todo.check(args[0])
            print(f"Check item {args[0]} successfully.", file=out)
        else:
            todo.delete(args[0])
            print(f"Delete item {args[0]} successfully.", file=out)
    else:
        raise CommandError(f"Unknown command: {command}. Use `help` for information.")


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        run(argv)
    except KeyError as err:
        print(f"Error occurred: {err.args[0]}", file=sys.stderr)
        return 1
    except (CommandError, StorageError, OSError, ValueError) as err:
        print(f"Error occurred: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())