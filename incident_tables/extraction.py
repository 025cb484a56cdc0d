# incident_tables/extraction.py
"""
Contract with the frame extractor.

An extractor is handed an ExtractionSpec and returns a plain mapping such as
{"school_shootings": [{"date": ..., "location": ..., ...}, ...]}. When the page
did not match, the root key is missing or holds something other than a list.
`locate_rows` turns that loose result into an explicit variant so the
post-processors never need to sniff types themselves.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

RawRow = Mapping[str, Optional[str]]
NormalizedRow = Dict[str, Any]


@dataclass(frozen=True)
class ExtractionSpec:
    container_selector: str     # e.g. "#bodyContent"
    row_selector: str           # e.g. ".wikitable tbody tr"
    row_shape: Dict[str, str]   # field name -> cell selector, relative to a row


@dataclass(frozen=True)
class RowsFound:
    rows: List[RawRow]


@dataclass(frozen=True)
class NotFound:
    value: Any                  # the extractor result, handed back untouched


ExtractionResult = Union[RowsFound, NotFound]


def locate_rows(unparsed: Any, root_key: str) -> ExtractionResult:
    """Pick the row list out of an extractor result, or mark it as pass-through."""
    rows = unparsed.get(root_key) if isinstance(unparsed, Mapping) else None
    if isinstance(rows, (list, tuple)):
        return RowsFound(rows=list(rows))
    return NotFound(value=unparsed)
