"""Network services.

Public API:
  - http: session, create_session (retrying requests session)
  - geocoding: geocode, search_places, clear_cache (place-name search)
"""

from grenloc.services.geocoding import clear_cache, geocode, search_places
from grenloc.services.http import create_session, session

__all__ = ["clear_cache", "create_session", "geocode", "search_places", "session"]
