from datetime import datetime, timedelta, timezone

import pytest
from pydantic import BaseModel, ValidationError

from ghclient.github.timestamp import Timestamp, format_timestamp, parse_timestamp


class Event(BaseModel):
    at: Timestamp | None = None


REFERENCE = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
REFERENCE_UNIX = 1136214245


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2006-01-02T15:04:05Z", REFERENCE),
        ("2006-01-02T15:04:05+00:00", REFERENCE),
        ("2006-01-02T08:04:05-07:00", REFERENCE),
        (REFERENCE_UNIX, REFERENCE),
        (float(REFERENCE_UNIX), REFERENCE),
        (str(REFERENCE_UNIX), REFERENCE),
        (datetime(2006, 1, 2, 15, 4, 5), REFERENCE),
        (None, None),
        ("", None),
    ],
)
def test_parse_timestamp(value, expected):
    assert parse_timestamp(value) == expected


@pytest.mark.parametrize("value", ["not a date", "2006-13-45T00:00:00Z", True, [1, 2]])
def test_parse_timestamp_invalid(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_parse_timestamp_out_of_range():
    with pytest.raises(ValueError, match="out of range"):
        parse_timestamp(10**20)


@pytest.mark.parametrize(
    "value,microsecond",
    [
        ("2006-01-02T15:04:05.1Z", 100000),
        ("2006-01-02T15:04:05.12Z", 120000),
        ("2006-01-02T15:04:05.123Z", 123000),
        ("2006-01-02T15:04:05.1234Z", 123400),
        ("2006-01-02T15:04:05.123456Z", 123456),
        ("2006-01-02T15:04:05.123456789Z", 123456),
        ("2006-01-02T08:04:05.12-07:00", 120000),
    ],
)
def test_any_fraction_length(value, microsecond):
    assert parse_timestamp(value) == REFERENCE.replace(microsecond=microsecond)


def test_parsed_timestamps_are_aware():
    assert parse_timestamp("2006-01-02T15:04:05").tzinfo is not None
    assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_unix_and_rfc3339_decode_equal():
    """The same instant compares equal however it was written."""
    from_string = Event.model_validate_json('{"at": "2006-01-02T15:04:05Z"}')
    from_unix = Event.model_validate_json(f'{{"at": {REFERENCE_UNIX}}}')

    assert from_string.at == from_unix.at
    assert from_string == from_unix


def test_offset_timestamps_equal_utc():
    a = Event(at="2006-01-02T08:04:05-07:00")
    b = Event(at="2006-01-02T15:04:05Z")
    assert a.at == b.at


@pytest.mark.parametrize(
    "dt,expected",
    [
        (REFERENCE, "2006-01-02T15:04:05Z"),
        (datetime(2006, 1, 2, 15, 4, 5), "2006-01-02T15:04:05Z"),
        (
            datetime(2006, 1, 2, 17, 4, 5, tzinfo=timezone(timedelta(hours=2))),
            "2006-01-02T15:04:05Z",
        ),
        (datetime(2006, 1, 2, 15, 4, 5, 123000, tzinfo=timezone.utc), "2006-01-02T15:04:05.123000Z"),
    ],
)
def test_format_timestamp(dt, expected):
    assert format_timestamp(dt) == expected


def test_encodes_canonically():
    event = Event.model_validate({"at": REFERENCE_UNIX})
    assert event.model_dump(mode="json") == {"at": "2006-01-02T15:04:05Z"}


def test_round_trip_preserves_instant():
    original = Event.model_validate_json('{"at": "2006-01-02T08:04:05.500-07:00"}')
    encoded = original.model_dump_json()
    decoded = Event.model_validate_json(encoded)

    assert decoded.at == original.at
    assert encoded == '{"at":"2006-01-02T15:04:05.500000Z"}'


def test_python_dump_keeps_datetime():
    event = Event(at=REFERENCE_UNIX)
    assert event.model_dump() == {"at": REFERENCE}


def test_null_is_allowed():
    assert Event.model_validate({"at": None}).at is None


def test_invalid_value_is_validation_error():
    with pytest.raises(ValidationError):
        Event.model_validate({"at": "yesterday"})
