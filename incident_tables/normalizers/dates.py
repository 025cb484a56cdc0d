# incident_tables/normalizers/dates.py
import logging
from datetime import datetime
from typing import Optional

import dateparser
from dateparser.search import search_dates

from .text import strip_citations

log = logging.getLogger(__name__)

# Returned for text the parser cannot make sense of. Rows keep it as `date: None`
# and it never satisfies a date window.
UNPARSEABLE = None

ParsedDate = Optional[datetime]

_PARSER_SETTINGS = {
    "RETURN_AS_TIMEZONE_AWARE": False,
    "PREFER_DAY_OF_MONTH": "first",
}


def resolve_date(text: Optional[str]) -> ParsedDate:
    """
    Parse free-form table text ("December 31, 2017", "January 1, 2018 12:00 am")
    into a naive local datetime, or UNPARSEABLE.

    Cells often carry footnotes or notes ("October 1, 2017[4]",
    "April 20, 1999 (Columbine)"). When the cell as a whole is not a date,
    the first date found inside it is used.
    """
    if not isinstance(text, str) or not text.strip():
        return UNPARSEABLE
    cleaned = strip_citations(text).strip()
    try:
        parsed = dateparser.parse(cleaned, languages=["en"], settings=_PARSER_SETTINGS)
        if parsed is None:
            found = search_dates(cleaned, languages=["en"], settings=_PARSER_SETTINGS)
            parsed = found[0][1] if found else None
    except (ValueError, OverflowError):
        log.debug("date parser rejected %r", text)
        return UNPARSEABLE
    return parsed if parsed is not None else UNPARSEABLE


def compute_epoch_boundary() -> datetime:
    boundary = resolve_date("January 1, 2018 12:00 am")
    if boundary is None:
        raise RuntimeError("could not resolve the 2018 boundary date")
    return boundary


# Computed once and shared by every pre-2018 run.
EPOCH_BOUNDARY = compute_epoch_boundary()
