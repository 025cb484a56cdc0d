# incident_tables/normalizers/pipeline.py
from datetime import datetime
from typing import Any, Callable, List, NamedTuple, Optional, Sequence

from incident_tables.extraction import NormalizedRow, NotFound, RawRow, locate_rows
from .dates import resolve_date
from .geocode import GeocodeEnricher
from .text import extract_perpetrator_parenthetical, strip_citations
from .validators import is_complete, is_within_window

# (extractor result, enricher) -> normalized rows, or the result itself when it had no rows
PostProcessor = Callable[[Any, GeocodeEnricher], Any]


class Casualties(NamedTuple):
    deaths: str
    injuries: str
    perpetrator_died: bool
    perpetrator_injured: bool


def perpetrator_cleanup(deaths: str, injuries: str) -> Casualties:
    """School shootings: strip "(including perpetrator)" and remember whether it was there."""
    d = extract_perpetrator_parenthetical(deaths)
    i = extract_perpetrator_parenthetical(injuries)
    return Casualties(d.cleaned, i.cleaned, d.found_perpetrator, i.found_perpetrator)


def citation_cleanup(deaths: str, injuries: str) -> Casualties:
    """Mass shootings: only footnote markers are removed; no perpetrator info."""
    return Casualties(strip_citations(deaths), strip_citations(injuries), False, False)


def normalize_rows(
    rows: Sequence[RawRow],
    enricher: GeocodeEnricher,
    cleanup: Callable[[str, str], Casualties],
    before: Optional[datetime] = None,
) -> List[NormalizedRow]:
    """
    Turn raw table rows into normalized records, in input order.

    Incomplete rows are skipped. With `before`, rows dated on or after it
    (or with an unparseable date) are skipped too. Fields outside the
    required set pass through untouched.
    """
    out: List[NormalizedRow] = []
    for row in rows:
        if not is_complete(row):
            continue
        resolved = resolve_date(row["date"])
        if before is not None and not is_within_window(resolved, before):
            continue

        casualties = cleanup(row["deaths"], row["injuries"])
        location = row.get("location")
        out.append({
            **row,
            "date": resolved,
            "deaths": casualties.deaths,
            "perpetrator_died": casualties.perpetrator_died,
            "injuries": casualties.injuries,
            "perpetrator_injured": casualties.perpetrator_injured,
            "description": strip_citations(row["description"]),
            "location": location,
            "geocode_results": enricher.resolve(location),
        })
    return out


def process_school_shootings(unparsed: Any, root_key: str, enricher: GeocodeEnricher) -> Any:
    found = locate_rows(unparsed, root_key)
    if isinstance(found, NotFound):
        return found.value
    return normalize_rows(found.rows, enricher, perpetrator_cleanup)


def process_single_year(
    unparsed: Any,
    root_key: str,
    enricher: GeocodeEnricher,
    before: Optional[datetime] = None,
) -> Any:
    """
    Shared by every mass-shootings page. Year pages are already scoped by the
    source, so only the multi-year list passes `before`.
    """
    found = locate_rows(unparsed, root_key)
    if isinstance(found, NotFound):
        return found.value
    return normalize_rows(found.rows, enricher, citation_cleanup, before=before)


def school_shootings_processor(root_key: str) -> PostProcessor:
    def post_process(unparsed: Any, enricher: GeocodeEnricher) -> Any:
        return process_school_shootings(unparsed, root_key, enricher)
    return post_process


def single_year_processor(root_key: str, before: Optional[datetime] = None) -> PostProcessor:
    def post_process(unparsed: Any, enricher: GeocodeEnricher) -> Any:
        return process_single_year(unparsed, root_key, enricher, before=before)
    return post_process
