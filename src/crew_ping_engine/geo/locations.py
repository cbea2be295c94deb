"""Location label parsing: US state inference and known-city coordinates."""

from __future__ import annotations

import re

from crew_ping_core.constants import CITY_COORDS, US_STATES

_STATE_CODES = frozenset(US_STATES.values())
_STATE_NAME_PATTERNS = [
    (re.compile(rf"\b{re.escape(name)}\b"), code)
    for name, code in sorted(US_STATES.items(), key=lambda item: len(item[0]), reverse=True)
]
_WORD_RE = re.compile(r"[a-z]+")


def extract_state(location: str | None) -> str | None:
    """Infer a two-letter US state code from a location label.

    A trailing code ("Katy, TX", "Reno NV") wins; otherwise a full state name
    anywhere in the label ("Columbus, Ohio").
    """
    if not location:
        return None
    lowered = location.lower()

    if "," in lowered:
        tail_words = _WORD_RE.findall(lowered.rsplit(",", 1)[-1])
        candidates = tail_words[:1] + tail_words[-1:]
    else:
        candidates = _WORD_RE.findall(lowered)[-1:]
    for word in candidates:
        if len(word) == 2 and word.upper() in _STATE_CODES:
            return word.upper()

    for pattern, code in _STATE_NAME_PATTERNS:
        if pattern.search(lowered):
            return code
    return None


def lookup_coords(location: str | None) -> tuple[float | None, float | None]:
    """Resolve a known market city in ``location`` to (lat, lon), else (None, None)."""
    if not location:
        return None, None
    lowered = location.lower()
    for city, (lat, lon) in CITY_COORDS.items():
        if city in lowered:
            return lat, lon
    return None, None
