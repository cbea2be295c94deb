"""Tests for screening detection and the rule-based answer generator."""

from __future__ import annotations

import pytest

from crew_ping_core.interfaces.answer_generator import ScreeningAnswerGenerator
from crew_ping_core.models.application import FieldType
from crew_ping_engine.ats.screening import (
    SALARY_ANSWER,
    START_DATE_ANSWER,
    RuleBasedAnswerGenerator,
    find_relevant_excerpt,
    is_screening_question,
)
from tests.mocks.mock_factories import make_field, make_job, make_profile


@pytest.mark.unit
class TestIsScreeningQuestion:
    """Test screening question detection."""

    def test_open_question(self) -> None:
        """Free-text labels with an indicator phrase are screening questions."""
        field = make_field(label="Why are you interested in this role?", type=FieldType.LONGTEXT)
        assert is_screening_question(field)

    def test_choice_is_never_screening(self) -> None:
        """Only text and longtext fields qualify."""
        field = make_field(label="Why relocate?", type=FieldType.CHOICE, options=["A", "B"])
        assert not is_screening_question(field)

    def test_plain_field(self) -> None:
        """Plain data fields are not screening questions."""
        assert not is_screening_question(make_field(label="Email Address"))


@pytest.mark.unit
class TestFindRelevantExcerpt:
    """Test resume excerpt selection."""

    def test_picks_sentences_with_hits(self) -> None:
        """Sentences sharing keywords are returned; others are not."""
        resume = (
            "Led switchgear installation across three hyperscale campuses. "
            "Enjoys fishing with family on weekends and holidays."
        )
        excerpt = find_relevant_excerpt(resume, ["switchgear", "hyperscale"])
        assert excerpt == "Led switchgear installation across three hyperscale campuses."

    def test_no_hits_returns_empty(self) -> None:
        """Nothing is quoted when no sentence matches."""
        assert find_relevant_excerpt("Enjoys fishing with family on weekends.", ["conduit"]) == ""
        assert find_relevant_excerpt("", ["conduit"]) == ""


@pytest.mark.unit
class TestRuleBasedAnswerGenerator:
    """Test answer categories and length limits."""

    def test_satisfies_protocol(self) -> None:
        """The default generator implements the generator protocol."""
        assert isinstance(RuleBasedAnswerGenerator(), ScreeningAnswerGenerator)

    def test_motivation_mentions_job(self) -> None:
        """Why-this-role answers name the job title."""
        field = make_field(label="Why are you interested in this role?", type=FieldType.LONGTEXT)
        answer = RuleBasedAnswerGenerator().generate_answer(make_profile(), make_job(), field)
        assert "Data Center Electrician" in answer
        assert "8 years" in answer

    def test_experience_quotes_resume(self) -> None:
        """Experience answers quote matching resume sentences."""
        field = make_field(label="Describe your relevant experience", type=FieldType.LONGTEXT)
        answer = RuleBasedAnswerGenerator().generate_answer(make_profile(), make_job(), field)
        assert "switchgear installation" in answer

    def test_experience_fallback_without_resume(self) -> None:
        """Without a resume the experience answer is built from the profile."""
        field = make_field(label="Tell us about your experience", type=FieldType.LONGTEXT)
        profile = make_profile(resume_text=None)
        answer = RuleBasedAnswerGenerator().generate_answer(profile, make_job(), field)
        assert "8 years of hands-on experience" in answer
        assert "OSHA 30" in answer

    def test_salary_and_start(self) -> None:
        """Salary and start-date questions get fixed answers."""
        generator = RuleBasedAnswerGenerator()
        salary = generator.generate_answer(
            make_profile(), make_job(), make_field(label="Salary Expectations")
        )
        start = generator.generate_answer(
            make_profile(), make_job(), make_field(label="Available Start Date")
        )
        assert salary == SALARY_ANSWER
        assert start == START_DATE_ANSWER

    def test_singular_year(self) -> None:
        """One year is not pluralized."""
        field = make_field(label="Why this company?", type=FieldType.LONGTEXT)
        answer = RuleBasedAnswerGenerator().generate_answer(
            make_profile(years_experience=1), make_job(), field
        )
        assert "1 year " in answer

    def test_respects_max_length(self) -> None:
        """Answers are truncated on a word boundary with an ellipsis."""
        field = make_field(
            label="Why are you interested in this role?",
            type=FieldType.LONGTEXT,
            max_length=60,
        )
        answer = RuleBasedAnswerGenerator().generate_answer(make_profile(), make_job(), field)
        assert len(answer) <= 60
        assert answer.endswith("...")

    def test_default_length_limit(self) -> None:
        """Without max_length answers are capped at 500 characters."""
        field = make_field(label="Anything else we should know?", type=FieldType.LONGTEXT)
        profile = make_profile(summary="Reliable crew lead. " * 60)
        answer = RuleBasedAnswerGenerator().generate_answer(profile, make_job(), field)
        assert len(answer) <= 500

    def test_cover_letter(self) -> None:
        """The cover letter names the job, company and certifications."""
        letter = RuleBasedAnswerGenerator().cover_letter(make_profile(), make_job())
        assert "Data Center Electrician" in letter
        assert "Atlas Build" in letter
        assert "NFPA 70E" in letter
        assert "available for travel" in letter
