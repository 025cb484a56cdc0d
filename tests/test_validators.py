from datetime import datetime

import pytest

from incident_tables.normalizers.validators import REQUIRED_FIELDS, is_complete, is_within_window
from tests.conftest import raw_row


def test_complete_row():
    assert is_complete(raw_row())

@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_required_field(field):
    row = raw_row()
    del row[field]
    assert not is_complete(row)

@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_none_required_field(field):
    assert not is_complete(raw_row(**{field: None}))

def test_location_not_required():
    row = raw_row()
    del row["location"]
    assert is_complete(row)

def test_empty_string_counts_as_present():
    assert is_complete(raw_row(injuries=""))

def test_window_is_strict():
    boundary = datetime(2018, 1, 1)
    assert is_within_window(datetime(2017, 12, 31, 23, 59), boundary)
    assert not is_within_window(boundary, boundary)
    assert not is_within_window(datetime(2018, 6, 1), boundary)

def test_unparseable_date_is_outside_window():
    assert not is_within_window(None, datetime(2018, 1, 1))
