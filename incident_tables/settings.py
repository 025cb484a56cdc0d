# incident_tables/settings.py
import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Page fetches
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))
HTTP_USER_AGENT = os.getenv("HTTP_USER_AGENT", "incident-tables/0.1 (+https://en.wikipedia.org)")

# Geocoding (Nominatim wants an identifying user agent and <= 1 request/sec)
GEOCODING_ENABLED = _flag("GEOCODING_ENABLED", "true")
GEOCODER_USER_AGENT = os.getenv("GEOCODER_USER_AGENT", "incident-tables")
GEOCODER_TIMEOUT = float(os.getenv("GEOCODER_TIMEOUT", "10"))
GEOCODER_MIN_DELAY = float(os.getenv("GEOCODER_MIN_DELAY", "1.0"))
GEOCODER_COUNTRY_CODES = os.getenv("GEOCODER_COUNTRY_CODES", "us") or None

CORS_ALLOW_ORIGINS = [o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()]
