import pytest

from todolist.records import Record, RecordStatus


@pytest.mark.parametrize("status", list(RecordStatus))
def test_parse_round_trip(status):
    assert RecordStatus.parse(str(status)) is status


@pytest.mark.parametrize(
    "text,expected",
    [
        ("In Progress", RecordStatus.IN_PROGRESS),
        ("Done", RecordStatus.DONE),
        ("Deleted", RecordStatus.DELETED),
    ],
)
def test_text_forms(text, expected):
    parsed = RecordStatus.parse(text)
    assert parsed is expected
    assert str(parsed) == text


def test_parse_unknown():
    with pytest.raises(ValueError, match="Unknown status: Pending"):
        RecordStatus.parse("Pending")


def test_record_default_status_and_equality():
    record = Record(timestamp=10, content="write report")
    assert record.status is RecordStatus.IN_PROGRESS
    assert record == Record(10, "write report", RecordStatus.IN_PROGRESS)