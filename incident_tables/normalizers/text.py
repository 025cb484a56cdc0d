# incident_tables/normalizers/text.py
import re
from typing import NamedTuple

# Footnote markers such as "[12]" or "[note 3]", plus any trailing whitespace.
CITATION_RE = re.compile(r"\[.+?\]\s*")

# " (including perpetrator)", " (including the perpetrator)". The word must end right
# before ")", so plural " (2 perpetrators)" is not matched.
PERPETRATOR_RE = re.compile(r" \(.+?perpetrator\)\s*")


class PerpetratorMatch(NamedTuple):
    cleaned: str
    found_perpetrator: bool


def strip_citations(text: str) -> str:
    """Remove every citation bracket from a scraped cell."""
    return CITATION_RE.sub("", text)


def extract_perpetrator_parenthetical(text: str) -> PerpetratorMatch:
    """
    Strip the perpetrator annotation from a casualty count.

    "4 (including perpetrator)" -> PerpetratorMatch("4", True)
    "4"                         -> PerpetratorMatch("4", False)

    The flag reflects the original text, so it is true whenever at least
    one annotation was removed.
    """
    cleaned, count = PERPETRATOR_RE.subn("", text)
    return PerpetratorMatch(cleaned=cleaned, found_perpetrator=count > 0)
