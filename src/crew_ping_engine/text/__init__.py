"""Text normalization utilities."""

from crew_ping_engine.text.normalize import (
    certification_match,
    certs_match,
    extract_keywords,
    holds_cert,
    missing_certs,
    normalize_cert,
    normalize_field_label,
    truncate_words,
)

__all__ = [
    "certification_match",
    "certs_match",
    "extract_keywords",
    "holds_cert",
    "missing_certs",
    "normalize_cert",
    "normalize_field_label",
    "truncate_words",
]
