# incident_tables/normalizers/validators.py
from datetime import datetime
from typing import Mapping, Optional

# A row missing any of these is dropped; there are no partial records.
REQUIRED_FIELDS = ("description", "date", "deaths", "injuries")


def is_complete(row: Mapping[str, Optional[str]]) -> bool:
    """True iff every required field is present and not None."""
    return all(row.get(field) is not None for field in REQUIRED_FIELDS)


def is_within_window(resolved: Optional[datetime], boundary: datetime) -> bool:
    """Strictly earlier than `boundary`. An unparseable date is never inside."""
    if resolved is None:
        return False
    return resolved < boundary
