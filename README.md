# todolist

A small command-line to-do list. Tasks are stored one per line in a plain
text file, `./data/db`, relative to the current directory. The list can be
read and edited by hand.

The `data` directory must already exist. The file inside it is created on
first use.

## Installation

```
pip install .
```

## Usage

```
todolist help
todolist add "Buy milk"
todolist list
todolist edit <id> "Buy oat milk"
todolist check <id>
todolist delete <id>
todolist stats
```

The same commands run with `python -m todolist.cli <command> ...`.

Commands:

- `stats` shows how many tasks are done and how many are in progress, each
  with its share in whole percent (rounded down). It reports an error when
  there are no done or in-progress tasks.
- `help` prints the command summary.
- `list` shows every task that is still in progress, with its id, its
  creation time (`DD-MM-YYYY HH:MM:SS`, UTC), its status and its content.
- `add "<content>"` creates a task and prints its new 8-character id.
- `edit <id> "<content>"` replaces the content of a task.
- `check <id>` marks a task as done.
- `delete <id>` marks a task as deleted. The task stays in the file but is
  no longer listed.

On any error the command prints `Error occurred: <message>` to standard
error and exits with status 1. Errors include an unknown command, missing
arguments, an unknown id and a malformed data file.

## Storage format

Each line holds four fields separated by `|||`:

```
<id>|||<unix seconds>|||<content>|||<status>
```

The status is one of `In Progress`, `Done` or `Deleted`. An edit writes the
file again through a temporary file, `./data/tmp`, and then moves it into
place.

## Using it from Python

```python
from todolist.db import ToDoList
from todolist.records import RecordStatus

todo = ToDoList.load("data/db", "data/tmp")
key = todo.add("Write the report")
todo.check(key)
print(todo.count_by_status(RecordStatus.DONE))
for key, record in todo.in_progress():
    print(key, record.content)
```

The modules are:

- `todolist.db`: `ToDoList` has `load`, `in_progress`, `count_by_status`,
  `add`, `edit`, `check` and `delete`. It also provides `short_hash`. An
  unknown key raises `KeyError`.
- `todolist.records`: `Record` holds `timestamp`, `content` and `status`.
  `RecordStatus` has `parse` for reading a stored status.
- `todolist.storage`: `FileStore` has `load`, `add` and `edit`. A malformed
  file raises `StorageError`.
- `todolist.dates`: `format_datetime`, `unix_timestamp_to_date` and
  `is_leap_year`.
- `todolist.cli`: `run(argv, out)` runs one command, and `main(argv)`
  returns the exit status. Usage errors raise `CommandError`.

## Limitations

- Tasks cannot be restored once deleted.
- There are no due dates, priorities or reminders.
- The data file location is fixed to `./data/db` for the command line.