import pytest

from src.attendance_dashboard.attendance_dashboard.core.enums import Seq
from src.attendance_dashboard.attendance_dashboard.core.exceptions import ValidationError
from src.attendance_dashboard.attendance_dashboard.records.model import AttendanceRecord, LogEntry


def _payload(**overrides):
    payload = {
        "_id": {"$oid": "6720a1"},
        "user": "rahul",
        "date": "2024-10-29",
        "seq": "Sign In",
        "log": [
            {"at": "2024-10-29T05:30:00.000Z", "msg": "Started"},
            {"at": "2024-10-29T05:30:09.000Z", "msg": "Sign In successful"},
        ],
        "status": "passed",
        "duration": 9000,
        "error": None,
        "at": "2024-10-29T05:30:10.000Z",
    }
    payload.update(overrides)
    return payload


def test_from_dict_reads_all_fields():
    rec = AttendanceRecord.from_dict(_payload())

    assert rec.seq is Seq.SIGN_IN
    assert rec.date == "2024-10-29"
    assert rec.record_id == "6720a1"
    assert [e.msg for e in rec.log] == ["Started", "Sign In successful"]
    assert rec.duration == 9000
    assert rec.error is None


def test_plain_string_id():
    rec = AttendanceRecord.from_dict(_payload(_id="abc"))

    assert rec.record_id == "abc"


def test_missing_optional_fields():
    payload = _payload(seq="Sign Out")
    for key in ("log", "status", "duration", "error", "at"):
        payload.pop(key)

    rec = AttendanceRecord.from_dict(payload)

    assert rec.seq is Seq.SIGN_OUT
    assert rec.log == ()
    assert rec.status is None
    assert rec.duration is None


def test_unknown_seq_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(_payload(seq="Lunch"))


def test_missing_date_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(_payload(date=""))


def test_non_numeric_duration_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(_payload(duration="9s"))


def test_non_object_is_rejected():
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict(["not", "a", "record"])


def test_records_are_immutable():
    rec = AttendanceRecord.from_dict(_payload())

    with pytest.raises(AttributeError):
        rec.status = "failed"


def test_null_log_fields_become_empty_strings():
    entry = LogEntry.from_dict({"at": None, "msg": None})

    assert entry.msg == ""
    assert entry.at == ""


def test_null_log_fields_inside_record():
    rec = AttendanceRecord.from_dict(_payload(log=[{"at": None, "msg": None}]))

    assert rec.log[0].msg == ""
    assert rec.log[0].at == ""
