# incident_tables/normalizers/geocode.py
import logging
import threading
from typing import Any, Dict, Optional, Protocol

log = logging.getLogger(__name__)

GeocodeResult = Dict[str, Any]

_MISSING = object()


class GeocodeProvider(Protocol):
    def geocode(self, query: str) -> Optional[GeocodeResult]:
        """Return coordinates for `query`, None when nothing matches. May raise."""
        ...


class NullProvider:
    """Used when geocoding is switched off: every location resolves to nothing."""
    def geocode(self, query: str) -> Optional[GeocodeResult]:
        return None


class NominatimProvider:
    """
    OpenStreetMap Nominatim through geopy.
    Calls go through geopy's RateLimiter (Nominatim allows ~1 req/sec).
    """
    def __init__(
        self,
        user_agent: str,
        timeout: float = 10,
        min_delay_seconds: float = 1.0,
        country_codes: Optional[str] = "us",
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.min_delay_seconds = min_delay_seconds
        self.country_codes = country_codes
        self._geocoder = None
        self._rate_limited = None

    def _get_geocode(self):
        """Lazy-initialize the geocoder and its rate limiter."""
        if self._rate_limited is None:
            from geopy.extra.rate_limiter import RateLimiter
            from geopy.geocoders import Nominatim

            self._geocoder = Nominatim(user_agent=self.user_agent, timeout=self.timeout)
            # errors must reach the enricher so they get logged, not turned into None
            self._rate_limited = RateLimiter(
                self._geocoder.geocode,
                min_delay_seconds=self.min_delay_seconds,
                swallow_exceptions=False,
            )
        return self._rate_limited

    def geocode(self, query: str) -> Optional[GeocodeResult]:
        kwargs: Dict[str, Any] = {"exactly_one": True}
        if self.country_codes:
            kwargs["country_codes"] = self.country_codes
        location = self._get_geocode()(query, **kwargs)
        if location is None:
            return None
        return {
            "latitude": float(location.latitude),
            "longitude": float(location.longitude),
            "address": location.address,
            "raw": location.raw,
        }


class GeocodeCache:
    """
    Memoized geocode results keyed by the exact location string.
    Entries live as long as the cache object; nothing is evicted.
    """
    def __init__(self):
        self._entries: Dict[str, GeocodeResult] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default=None):
        with self._lock:
            return self._entries.get(key, default)

    def put(self, key: str, value: GeocodeResult) -> None:
        with self._lock:
            self._entries[key] = value

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class GeocodeEnricher:
    """
    Resolve a raw location string to a geocode mapping.

    Cache hits never touch the provider. Misses call it synchronously and
    store the result (an empty mapping when nothing matched). Provider
    failures are logged and yield {} without being cached, so a later
    call can retry. Concurrent misses on one key are not coalesced.
    """
    def __init__(self, provider: GeocodeProvider, cache: Optional[GeocodeCache] = None):
        self.provider = provider
        self.cache = cache if cache is not None else GeocodeCache()

    def resolve(self, location: Optional[str]) -> GeocodeResult:
        if location is None:
            return {}

        cached = self.cache.get(location, _MISSING)
        if cached is not _MISSING:
            log.debug("geocode cache hit: %r", location)
            return dict(cached)

        log.debug("geocode cache miss: %r", location)
        try:
            found = self.provider.geocode(location)
            result = dict(found) if found else {}
        except Exception:
            log.warning("geocoding failed for location=%r", location, exc_info=True)
            return {}

        self.cache.put(location, result)
        return dict(result)
