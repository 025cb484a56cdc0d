from .pipeline import (
    PostProcessor,
    normalize_rows,
    process_school_shootings,
    process_single_year,
    school_shootings_processor,
    single_year_processor,
)
from .text import strip_citations, extract_perpetrator_parenthetical, PerpetratorMatch
from .dates import resolve_date, EPOCH_BOUNDARY, UNPARSEABLE
from .geocode import GeocodeCache, GeocodeEnricher, NominatimProvider, NullProvider
from .validators import is_complete, is_within_window, REQUIRED_FIELDS

__all__ = [
    "PostProcessor",
    "normalize_rows",
    "process_school_shootings",
    "process_single_year",
    "school_shootings_processor",
    "single_year_processor",
    "strip_citations",
    "extract_perpetrator_parenthetical",
    "PerpetratorMatch",
    "resolve_date",
    "EPOCH_BOUNDARY",
    "UNPARSEABLE",
    "GeocodeCache",
    "GeocodeEnricher",
    "NominatimProvider",
    "NullProvider",
    "is_complete",
    "is_within_window",
    "REQUIRED_FIELDS",
]
