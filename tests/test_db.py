import re

import pytest

from todolist.db import ToDoList, short_hash
from todolist.records import RecordStatus


@pytest.fixture
def paths(tmp_path):
    return str(tmp_path / "db"), str(tmp_path / "tmp")


def test_short_hash_shape_and_determinism():
    key = short_hash("hello")
    assert re.fullmatch(r"[0-9a-f]{8}", key)
    assert short_hash("hello") == key


def test_add_lists_and_persists(paths):
    todo = ToDoList.load(*paths)
    key = todo.add("buy milk")
    assert [(k, r.content) for k, r in todo.in_progress()] == [(key, "buy milk")]
    reloaded = ToDoList.load(*paths)
    assert [(k, r.content) for k, r in reloaded.in_progress()] == [(key, "buy milk")]


def test_check_and_count(paths):
    todo = ToDoList.load(*paths)
    first = todo.add("one")
    todo.add("two")
    todo.check(first)
    assert todo.count_by_status(RecordStatus.DONE) == 1
    assert todo.count_by_status(RecordStatus.IN_PROGRESS) == 1
    reloaded = ToDoList.load(*paths)
    assert reloaded.count_by_status(RecordStatus.DONE) == 1
    assert first not in [k for k, _ in reloaded.in_progress()]


def test_delete_hides_record(paths):
    todo = ToDoList.load(*paths)
    key = todo.add("temp")
    todo.delete(key)
    assert todo.in_progress() == []
    assert ToDoList.load(*paths).count_by_status(RecordStatus.DELETED) == 1


def test_edit_changes_content(paths):
    todo = ToDoList.load(*paths)
    key = todo.add("draft")
    todo.edit(key, "final")
    reloaded = ToDoList.load(*paths)
    assert [r.content for _, r in reloaded.in_progress()] == ["final"]


def test_edit_missing_key(paths):
    todo = ToDoList.load(*paths)
    with pytest.raises(KeyError, match=re.escape("[Edit zz failed] Key is not exist")):
        todo.edit("zz", "x")
    assert todo.in_progress() == []


def test_check_missing_key(paths):
    todo = ToDoList.load(*paths)
    with pytest.raises(KeyError, match=re.escape("[Check zz failed] Key is not exist")):
        todo.check("zz")
    assert todo.count_by_status(RecordStatus.DONE) == 0


def test_delete_missing_key(paths):
    todo = ToDoList.load(*paths)
    with pytest.raises(KeyError, match=re.escape("[Delete zz failed] Key is not exist")):
        todo.delete("zz")
    assert todo.count_by_status(RecordStatus.DELETED) == 0