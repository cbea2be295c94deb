"""Geographic helpers: great-circle distance and location label parsing."""

from crew_ping_engine.geo.distance import haversine_miles
from crew_ping_engine.geo.locations import extract_state, lookup_coords

__all__ = ["extract_state", "haversine_miles", "lookup_coords"]
