"""Tests for certification, label and text normalization."""

from __future__ import annotations

import pytest

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


@pytest.mark.unit
class TestNormalizeCert:
    """Test normalize_cert canonicalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("OSHA-30", "osha 30"),
            ("  NFPA   70E ", "nfpa 70e"),
            ("CompTIA A+", "comptia a+"),
            ("Journeyman (TX)", "journeyman tx"),
            ("BICSI–RCDD", "bicsi rcdd"),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        """Dashes become spaces, punctuation is dropped, whitespace collapses."""
        assert normalize_cert(raw) == expected


@pytest.mark.unit
class TestCertsMatch:
    """Test the containment cascade used for certification matching."""

    def test_dash_and_space_variants_match(self) -> None:
        """OSHA-30 satisfies OSHA 30."""
        assert certs_match("OSHA-30", "OSHA 30")

    def test_compact_form_matches(self) -> None:
        """Spacing differences are tolerated via the compact comparison."""
        assert certs_match("NFPA70E", "NFPA 70E")

    def test_containment_matches(self) -> None:
        """A longer name containing the requirement matches."""
        assert certs_match("NFPA 70E Arc Flash Safety", "NFPA 70E")

    def test_unrelated_certs_do_not_match(self) -> None:
        """Different credentials do not match."""
        assert not certs_match("OSHA 10", "NFPA 70E")

    def test_blank_never_matches(self) -> None:
        """A blank name matches nothing, not even another blank."""
        assert not certs_match("", "OSHA 30")
        assert not certs_match("---", "")

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ("OSHA-30", "OSHA 30"),
            ("NFPA 70E Arc Flash", "nfpa70e"),
            ("OSHA 10", "NFPA 70E"),
            ("", "OSHA 30"),
        ],
    )
    def test_symmetric(self, a: str, b: str) -> None:
        """Swapping the arguments never changes the result."""
        assert certification_match(a, b) == certification_match(b, a)


@pytest.mark.unit
class TestHeldCerts:
    """Test holds_cert and missing_certs."""

    def test_holds_cert(self) -> None:
        """Any held certification can satisfy the requirement."""
        assert holds_cert(["CPR", "osha-30"], "OSHA 30")
        assert not holds_cert([], "OSHA 30")

    def test_missing_certs_in_requirement_order(self) -> None:
        """Unsatisfied requirements keep their requirement order and spelling."""
        held = ["OSHA 30"]
        assert missing_certs(held, ["NFPA 70E", "OSHA 30", "BICSI Installer"]) == [
            "NFPA 70E",
            "BICSI Installer",
        ]


@pytest.mark.unit
class TestFieldLabelsAndKeywords:
    """Test label tokens and keyword extraction."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("Email Address", "email_address"),
            ("Licenses & Certifications", "licenses_certifications"),
            ("Are you authorized to work in the US?", "are_you_authorized_to_work_in_the_us"),
            ("  First Name ", "first_name"),
        ],
    )
    def test_normalize_field_label(self, label: str, expected: str) -> None:
        """Labels become snake_case tokens."""
        assert normalize_field_label(label) == expected

    def test_extract_keywords_drops_stop_words_and_short_tokens(self) -> None:
        """Stop words and tokens of two characters or fewer are dropped."""
        keywords = extract_keywords("Install the switchgear at an MV site, then install conduit.")
        assert "the" not in keywords
        assert "mv" not in keywords
        assert keywords.count("install") == 1
        assert keywords[:2] == ["install", "switchgear"]
        assert "conduit" in keywords


@pytest.mark.unit
class TestTruncateWords:
    """Test word-boundary truncation."""

    def test_short_text_unchanged(self) -> None:
        """Text within the limit is returned as-is."""
        assert truncate_words("short answer", 50) == "short answer"

    def test_partial_word_dropped(self) -> None:
        """A word cut in half is removed before the ellipsis."""
        assert truncate_words("The quick brown fox jumps", 15) == "The quick..."

    def test_single_long_word_is_not_split(self) -> None:
        """When the first word alone overflows, only the ellipsis remains."""
        assert truncate_words("Supercalifragilistic rest", 10) == "..."
        assert truncate_words("Journeyman-electrician", 12) == "..."

    def test_cut_on_word_boundary_keeps_word(self) -> None:
        """A cut that lands just before whitespace keeps the last word."""
        assert truncate_words("alpha beta gamma", 13) == "alpha beta..."

    def test_result_never_exceeds_limit(self) -> None:
        """Truncated output fits in max_length."""
        text = "word " * 200
        assert len(truncate_words(text, 120)) <= 120
