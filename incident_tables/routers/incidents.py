import logging
from typing import Any, Dict, List

import requests
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from incident_tables.frame_extractor import FrameExtractor
from incident_tables.normalizers.geocode import GeocodeEnricher
from incident_tables.services import get_enricher, get_extractor
from incident_tables.templates import TEMPLATES, Template

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="", tags=["incidents"])


class TemplateInfo(BaseModel):
    name: str
    route: str
    source_url: str
    root_key: str
    container_selector: str
    row_selector: str
    row_shape: Dict[str, str]


@router.get("/templates", response_model=List[TemplateInfo])
def list_templates() -> List[Dict[str, Any]]:
    """List every registered source template and the shape it extracts."""
    return [t.describe() for t in TEMPLATES.values()]


def run_template(template: Template, extractor: FrameExtractor, enricher: GeocodeEnricher) -> Any:
    """
    Fetch the template's page, extract rows, and post-process them.

    Returns:
        The normalized rows, or the raw extractor result unchanged when the
        page did not contain the expected table.
    """
    try:
        unparsed = extractor.extract(template.source_url, template.extraction, template.root_key)
    except requests.RequestException as e:
        log.exception("fetch failed: template=%s url=%s", template.name, template.source_url)
        raise HTTPException(502, f"Could not fetch {template.source_url}: {e}")
    return template.post_process(unparsed, enricher)


def _make_endpoint(template: Template):
    def endpoint(
        extractor: FrameExtractor = Depends(get_extractor),
        enricher: GeocodeEnricher = Depends(get_enricher),
    ):
        return run_template(template, extractor, enricher)
    endpoint.__name__ = f"get_{template.name}"
    endpoint.__doc__ = f"Normalized rows scraped from {template.source_url}"
    return endpoint


# One GET route per template, e.g. /wikipedia-school-shootings
for _t in TEMPLATES.values():
    router.add_api_route(_t.route, _make_endpoint(_t), methods=["GET"], name=_t.name)
