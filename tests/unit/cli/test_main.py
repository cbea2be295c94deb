"""Tests for CLI entrypoint."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from pydantic import TypeAdapter
from typer.testing import CliRunner

from crew_ping_cli.main import app
from crew_ping_core.models.candidate import CandidateRecord
from crew_ping_engine.observability.logging import configure_logging
from tests.mocks.mock_factories import KATY, make_candidate_record, make_job, make_profile

runner = CliRunner()

_TARGETING = ["--cert", "OSHA 30", "--cert", "NFPA 70E", "--location", "Houston, TX"]


@pytest.fixture(autouse=True)
def quiet_logging() -> Iterator[None]:
    """Keep engine log events out of the command output."""
    settings = SimpleNamespace(log_format="console", log_level="CRITICAL")
    configure_logging(settings)  # type: ignore[arg-type]
    with patch("crew_ping_cli.main.configure_logging"):
        yield


@pytest.fixture
def candidates_file(tmp_path: Path) -> Path:
    """Write a strong, a modest and a non-consenting candidate."""
    records = [
        make_candidate_record(profile_id="p-001", last_active=None),
        make_candidate_record(
            profile_id="p-002",
            name="Dana Cruz",
            certifications=[],
            latitude=KATY[0],
            longitude=KATY[1],
            last_active=None,
        ),
        make_candidate_record(profile_id="p-003", sms_opt_in=False, last_active=None),
    ]
    path = tmp_path / "candidates.json"
    path.write_bytes(TypeAdapter(list[CandidateRecord]).dump_json(records))
    return path


@pytest.mark.unit
class TestRankCommand:
    """Test the 'rank' CLI command."""

    def test_rank_json_lists_eligible_in_order(self, candidates_file: Path) -> None:
        """JSON output lists eligible candidates best first."""
        result = runner.invoke(app, ["rank", str(candidates_file), *_TARGETING, "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [row["candidate"]["profile_id"] for row in data] == ["p-001", "p-002"]
        assert data[0]["breakdown"]["cert_score"] == 40
        assert data[0]["score"] == data[0]["breakdown"]["total"]

    def test_rank_all_includes_ineligible(self, candidates_file: Path) -> None:
        """--all keeps ineligible candidates at the end."""
        result = runner.invoke(
            app, ["rank", str(candidates_file), *_TARGETING, "--all", "--json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data[-1]["candidate"]["profile_id"] == "p-003"
        assert data[-1]["eligible"] is False

    def test_rank_table(self, candidates_file: Path) -> None:
        """Table output summarizes eligibility."""
        result = runner.invoke(app, ["rank", str(candidates_file), *_TARGETING])
        assert result.exit_code == 0, result.output
        assert "2/3 eligible" in result.output

    def test_missing_file_exits_1(self, tmp_path: Path) -> None:
        """An unreadable input file is reported with exit code 1."""
        result = runner.invoke(app, ["rank", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_invalid_records_exit_1(self, tmp_path: Path) -> None:
        """Records failing validation are reported with exit code 1."""
        path = tmp_path / "bad.json"
        path.write_text(
            '[{"profile_id": "p", "user_id": "u", "name": "X", "years_experience": -2}]'
        )
        result = runner.invoke(app, ["rank", str(path)])
        assert result.exit_code == 1
        assert "Invalid data" in result.output


@pytest.mark.unit
class TestEstimateCommand:
    """Test the 'estimate' CLI command."""

    def test_estimate_counts(self, candidates_file: Path) -> None:
        """Totals, eligible and top-tier counts are printed."""
        result = runner.invoke(app, ["estimate", str(candidates_file), *_TARGETING])
        assert result.exit_code == 0, result.output
        assert "Total candidates: 3" in result.output
        assert "Eligible: 2" in result.output
        assert "Top tier: 1" in result.output


@pytest.mark.unit
class TestPlanCommand:
    """Test the 'plan' CLI command."""

    def test_plan_json(self, candidates_file: Path) -> None:
        """The plan queues eligible candidates with personalized messages."""
        result = runner.invoke(
            app,
            [
                "plan",
                str(candidates_file),
                *_TARGETING,
                "--name",
                "Houston push",
                "--message",
                "Hi {{name}}, apply at {{link}}",
                "--link",
                "dcjobs.co/test1234",
                "--drip-steps",
                "1",
                "--json",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["recipients"]) == 2
        assert data["recipients"][0]["message"] == "Hi Marcus, apply at dcjobs.co/test1234"
        assert data["estimated_total_cost"] == pytest.approx(
            2 * data["cost_per_ping"] * 2
        )

    def test_plan_generates_link(self, candidates_file: Path) -> None:
        """Without --link a short link on the configured host is generated."""
        result = runner.invoke(
            app,
            [
                "plan",
                str(candidates_file),
                "--name",
                "c",
                "--message",
                "Apply at {{link}}",
                "--json",
            ],
        )
        assert result.exit_code == 0, result.output
        message = json.loads(result.output)["recipients"][0]["message"]
        assert "{{link}}" not in message
        assert "/" in message

    def test_plan_blank_name_exits_1(self, candidates_file: Path) -> None:
        """Invalid campaign input is reported with exit code 1."""
        result = runner.invoke(
            app, ["plan", str(candidates_file), "--name", " ", "--message", "Hi"]
        )
        assert result.exit_code == 1
        assert "Campaign name is required" in result.output


@pytest.mark.unit
class TestDraftCommand:
    """Test the 'draft' CLI command."""

    @pytest.fixture
    def inputs(self, tmp_path: Path) -> tuple[Path, Path]:
        profile = tmp_path / "profile.json"
        job = tmp_path / "job.json"
        profile.write_text(make_profile().model_dump_json())
        job.write_text(make_job().model_dump_json())
        return profile, job

    def test_draft_json(self, inputs: tuple[Path, Path]) -> None:
        """JSON output contains template and synthesized answers."""
        profile, job = inputs
        result = runner.invoke(app, ["draft", str(profile), str(job), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        fields = {f["field_id"]: f for f in data["fields"]}
        assert fields["email"]["value"] == "marcus@example.com"
        assert fields["email"]["confidence"] == 1.0
        assert fields["q_why"]["source"] == "synthesized"
        assert data["ats_platform"] == "workday"

    def test_draft_table(self, inputs: tuple[Path, Path]) -> None:
        """Table output shows the cover letter and warnings."""
        profile, job = inputs
        result = runner.invoke(app, ["draft", str(profile), str(job)])
        assert result.exit_code == 0, result.output
        assert "Cover letter:" in result.output
        assert "Warnings:" in result.output

    def test_unknown_generator_exits_1(self, inputs: tuple[Path, Path]) -> None:
        """An unregistered generator name is reported with exit code 1."""
        profile, job = inputs
        with patch.dict("os.environ", {"CP_ANSWER_GENERATOR": "llm"}):
            result = runner.invoke(app, ["draft", str(profile), str(job)])
        assert result.exit_code == 1
        assert "Unknown answer generator" in result.output


@pytest.mark.unit
class TestVersionCommand:
    """Test the 'version' CLI command."""

    def test_version(self) -> None:
        """Version prints the package version."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "crew-ping v0.1.0" in result.output
