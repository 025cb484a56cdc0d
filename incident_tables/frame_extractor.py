# incident_tables/frame_extractor.py
"""
Page fetch + table-to-rows extraction.

This is the collaborator that feeds the post-processors; the normalizers
never import it. Given an ExtractionSpec it returns {root_key: [row, ...]},
or {} when the container selector matches nothing. A cell selector with no
match leaves that field out of the row, so header rows (only <th> cells)
come through empty and are dropped later as incomplete.
"""
import logging
from typing import Any, Dict, List

import requests
from bs4 import BeautifulSoup

from .extraction import ExtractionSpec

log = logging.getLogger(__name__)


def fetch_page(url: str, session: requests.Session, timeout: float = 30) -> str:
    """GET `url` and return the body. Raises requests.RequestException on failure."""
    r = session.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text


def extract_frame(html: str, spec: ExtractionSpec, root_key: str) -> Dict[str, Any]:
    soup = BeautifulSoup(html, "html.parser")
    container = soup.select_one(spec.container_selector)
    if container is None:
        log.info("container %r not found; nothing extracted", spec.container_selector)
        return {}

    rows: List[Dict[str, str]] = []
    for tr in container.select(spec.row_selector):
        row: Dict[str, str] = {}
        for field, selector in spec.row_shape.items():
            cell = tr.select_one(selector)
            if cell is not None:
                row[field] = cell.get_text().strip()
        rows.append(row)
    return {root_key: rows}


class FrameExtractor:
    """Fetches a template's page and extracts its rows. One Session per app."""
    def __init__(self, session: requests.Session | None = None, timeout: float = 30, user_agent: str | None = None):
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers.update({"User-Agent": user_agent})
        self.timeout = timeout

    def extract(self, url: str, spec: ExtractionSpec, root_key: str) -> Dict[str, Any]:
        html = fetch_page(url, self.session, timeout=self.timeout)
        frame = extract_frame(html, spec, root_key)
        log.info("extracted %d raw rows from %s", len(frame.get(root_key, [])), url)
        return frame

    def close(self) -> None:
        self.session.close()
