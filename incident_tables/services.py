# incident_tables/services.py
"""
Construction of the long-lived collaborators and their FastAPI dependencies.

The geocode cache is created once per app (in the lifespan hook) and handed
to every post-processor through `get_enricher`; nothing reaches it through
module globals.
"""
from fastapi import Request

from . import settings
from .frame_extractor import FrameExtractor
from .normalizers.geocode import GeocodeCache, GeocodeEnricher, NominatimProvider, NullProvider


def build_enricher() -> GeocodeEnricher:
    if settings.GEOCODING_ENABLED:
        provider = NominatimProvider(
            user_agent=settings.GEOCODER_USER_AGENT,
            timeout=settings.GEOCODER_TIMEOUT,
            min_delay_seconds=settings.GEOCODER_MIN_DELAY,
            country_codes=settings.GEOCODER_COUNTRY_CODES,
        )
    else:
        provider = NullProvider()
    return GeocodeEnricher(provider, GeocodeCache())


def build_extractor() -> FrameExtractor:
    return FrameExtractor(timeout=settings.HTTP_TIMEOUT, user_agent=settings.HTTP_USER_AGENT)


def get_enricher(request: Request) -> GeocodeEnricher:
    return request.app.state.enricher


def get_extractor(request: Request) -> FrameExtractor:
    return request.app.state.extractor
