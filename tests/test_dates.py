from datetime import datetime

from incident_tables.normalizers.dates import EPOCH_BOUNDARY, UNPARSEABLE, resolve_date


def test_resolves_long_form_date():
    assert resolve_date("December 31, 2017") == datetime(2017, 12, 31, 0, 0)

def test_resolves_date_with_time():
    assert resolve_date("January 1, 2018 12:00 am") == datetime(2018, 1, 1, 0, 0)

def test_boundary_is_first_midnight_of_2018():
    assert EPOCH_BOUNDARY == datetime(2018, 1, 1, 0, 0)

def test_unparseable_text_gives_sentinel():
    assert resolve_date("???") is UNPARSEABLE

def test_missing_or_blank_gives_sentinel():
    assert resolve_date(None) is UNPARSEABLE
    assert resolve_date("   ") is UNPARSEABLE

def test_resolved_dates_are_comparable():
    assert resolve_date("March 5, 2019") > resolve_date("December 31, 2017")

def test_footnote_marker_in_date_cell():
    assert resolve_date("October 1, 2017[4]") == datetime(2017, 10, 1)
    assert resolve_date("December 14, 2012[1][2]") == datetime(2012, 12, 14)

def test_date_found_inside_surrounding_note():
    assert resolve_date("April 20, 1999 (Columbine)") == datetime(1999, 4, 20)
