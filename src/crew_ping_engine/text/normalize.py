"""Normalization helpers for certification names, field labels and free text.

Certification matching is an explicit rule cascade rather than a similarity
score: two names match when their normalized forms are equal, when one
contains the other, or when the same holds after removing spaces. This
makes "OSHA-30" match "OSHA 30" and "NFPA70E arc flash" match "NFPA 70E".
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from crew_ping_core.constants import STOP_WORDS

_DASHES_RE = re.compile("[-–—]")
_CERT_STRIP_RE = re.compile(r"[^a-z0-9\s+]")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_KEYWORD_STRIP_RE = re.compile(r"[^a-z0-9\s]")
_TRAILING_PARTIAL_WORD_RE = re.compile(r"\S+$")

_ELLIPSIS = "..."


def normalize_cert(cert: str) -> str:
    """Canonicalize a certification name for fuzzy comparison."""
    text = _DASHES_RE.sub(" ", cert.lower())
    text = _CERT_STRIP_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def match_normalized_certs(a: str, b: str) -> bool:
    """Apply the containment cascade to two names already passed through normalize_cert."""
    if not a or not b:
        return False
    if a == b or a in b or b in a:
        return True
    a_compact = a.replace(" ", "")
    b_compact = b.replace(" ", "")
    return a_compact == b_compact or a_compact in b_compact or b_compact in a_compact


def certs_match(a: str, b: str) -> bool:
    """Return True when two certification names refer to the same credential.

    Symmetric. Blank names never match.
    """
    return match_normalized_certs(normalize_cert(a), normalize_cert(b))


certification_match = certs_match


def holds_cert(held: Iterable[str], required: str) -> bool:
    """Return True if any held certification satisfies ``required``."""
    req = normalize_cert(required)
    return any(match_normalized_certs(normalize_cert(c), req) for c in held)


def missing_certs(held: Iterable[str], required: Iterable[str]) -> list[str]:
    """Return the required certifications not satisfied by ``held``, in order."""
    held_list = list(held)
    return [req for req in required if not holds_cert(held_list, req)]


def normalize_field_label(label: str) -> str:
    """Turn a form label into a snake_case token ("Email Address" -> "email_address")."""
    return _NON_ALNUM_RE.sub("_", label.lower()).strip("_")


def extract_keywords(text: str) -> list[str]:
    """Extract deduplicated content keywords, dropping stop words and short tokens."""
    tokens = _KEYWORD_STRIP_RE.sub(" ", text.lower()).split()
    seen: dict[str, None] = {}
    for token in tokens:
        if len(token) > 2 and token not in STOP_WORDS:
            seen.setdefault(token, None)
    return list(seen)


def truncate_words(text: str, max_length: int) -> str:
    """Truncate ``text`` to ``max_length`` without cutting a word in half."""
    if len(text) <= max_length:
        return text
    if max_length <= len(_ELLIPSIS):
        return text[:max_length]
    cut = text[: max_length - len(_ELLIPSIS)]
    if not text[len(cut)].isspace():
        cut = _TRAILING_PARTIAL_WORD_RE.sub("", cut)
    return cut.rstrip() + _ELLIPSIS
