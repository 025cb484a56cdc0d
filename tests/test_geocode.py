import logging

from geopy.exc import GeocoderUnavailable

from incident_tables.normalizers.geocode import GeocodeCache, GeocodeEnricher, NullProvider
from tests.conftest import FakeProvider


def test_second_lookup_served_from_cache(enricher, provider):
    first = enricher.resolve("Austin, Texas")
    second = enricher.resolve("Austin, Texas")
    assert first == second == {"latitude": 30.2672, "longitude": -97.7431, "address": "Austin, TX"}
    assert provider.calls == ["Austin, Texas"]

def test_key_is_the_exact_raw_string(enricher, provider):
    enricher.resolve("Austin, Texas")
    enricher.resolve("Austin, Texas ")
    enricher.resolve("austin, texas")
    assert provider.calls == ["Austin, Texas", "Austin, Texas ", "austin, texas"]
    assert len(enricher.cache) == 3

def test_no_match_is_cached_as_empty(enricher, provider):
    assert enricher.resolve("Nowhere, Atlantis") == {}
    assert enricher.resolve("Nowhere, Atlantis") == {}
    assert provider.calls == ["Nowhere, Atlantis"]

def test_failure_returns_empty_and_logs(caplog):
    provider = FakeProvider(fail=GeocoderUnavailable("service down"))
    enricher = GeocodeEnricher(provider)
    with caplog.at_level(logging.WARNING):
        assert enricher.resolve("Austin, Texas") == {}
    assert "geocoding failed" in caplog.text

def test_failure_is_not_cached():
    provider = FakeProvider(fail=OSError("network unreachable"))
    enricher = GeocodeEnricher(provider)
    enricher.resolve("Austin, Texas")
    enricher.resolve("Austin, Texas")
    assert len(provider.calls) == 2
    assert "Austin, Texas" not in enricher.cache

def test_missing_location_skips_provider(enricher, provider):
    assert enricher.resolve(None) == {}
    assert provider.calls == []

def test_results_are_copies(enricher):
    a = enricher.resolve("Austin, Texas")
    a["latitude"] = 0
    assert enricher.resolve("Austin, Texas")["latitude"] == 30.2672

def test_cache_shared_between_enrichers():
    cache = GeocodeCache()
    provider = FakeProvider(results={"Denver, Colorado": {"latitude": 39.74, "longitude": -104.99}})
    GeocodeEnricher(provider, cache).resolve("Denver, Colorado")
    GeocodeEnricher(provider, cache).resolve("Denver, Colorado")
    assert provider.calls == ["Denver, Colorado"]

def test_null_provider_resolves_nothing():
    assert GeocodeEnricher(NullProvider()).resolve("Austin, Texas") == {}

def test_unexpected_provider_error_does_not_drop_row():
    from incident_tables.templates import MASS_SHOOTINGS_2019
    from tests.conftest import raw_row

    enricher = GeocodeEnricher(FakeProvider(fail=RuntimeError("bad payload")))
    [row] = MASS_SHOOTINGS_2019.post_process({"mass_shootings_2019": [raw_row()]}, enricher)
    assert row["geocode_results"] == {}

def test_malformed_provider_payload_gives_empty():
    class BadPayload:
        def geocode(self, query):
            return ["not", "a", "mapping"]

    assert GeocodeEnricher(BadPayload()).resolve("Austin, Texas") == {}
