"""CLI entrypoint using typer."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import TypeVar

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from crew_ping_core.config.settings import Settings
from crew_ping_core.exceptions import CrewPingError
from crew_ping_core.models.application import ApplicationDraft, ATSFieldSpec
from crew_ping_core.models.candidate import CandidateProfile, CandidateRecord
from crew_ping_core.models.job import JobPosting
from crew_ping_core.models.targeting import ScoredCandidate, TargetingCriteria
from crew_ping_engine.ats.draft_pipeline import ApplicationDraftPipeline
from crew_ping_engine.campaign.planner import plan_campaign
from crew_ping_engine.factories import create_answer_generator
from crew_ping_engine.geo.locations import lookup_coords
from crew_ping_engine.observability import configure_logging, log_context
from crew_ping_engine.scoring.ranking import (
    eligible_shortlist,
    estimate_match_count,
    rank_candidates,
)

app = typer.Typer(
    name="crew-ping",
    help="Candidate targeting and application drafting for data center trades",
)
console = Console()

T = TypeVar("T")

_CANDIDATES = TypeAdapter(list[CandidateRecord])
_FIELDS = TypeAdapter(list[ATSFieldSpec])
_SCORED = TypeAdapter(list[ScoredCandidate])


def _settings(verbose: bool) -> Settings:
    """Load settings from the environment and configure logging."""
    try:
        settings = Settings()
    except ValidationError as exc:
        raise _fail(f"Invalid configuration:\n{exc}") from exc
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _fail(message: str) -> typer.Exit:
    console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code=1)


def _load(path: Path, adapter: TypeAdapter[T]) -> T:
    """Read and validate a JSON file, exiting with code 1 on failure."""
    try:
        raw = path.read_text()
    except OSError as exc:
        raise _fail(f"Cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        raise _fail(f"Invalid data in {path}:\n{exc}") from exc


def _with_coordinates(record: CandidateRecord) -> CandidateRecord:
    """Fill missing coordinates from the known-city table."""
    if record.has_coordinates:
        return record
    latitude, longitude = lookup_coords(record.location)
    if latitude is None:
        return record
    return record.model_copy(update={"latitude": latitude, "longitude": longitude})


def _criteria(
    certs: list[str] | None,
    location: str | None,
    radius: float | None,
    min_experience: int,
    settings: Settings,
) -> TargetingCriteria:
    latitude, longitude = lookup_coords(location)
    try:
        return TargetingCriteria(
            required_certs=certs or [],
            location=location,
            latitude=latitude,
            longitude=longitude,
            radius_miles=radius if radius is not None else settings.default_radius_miles,
            min_experience=min_experience,
        )
    except ValidationError as exc:
        raise _fail(f"Invalid targeting criteria:\n{exc}") from exc


def _load_candidates(path: Path) -> list[CandidateRecord]:
    return [_with_coordinates(c) for c in _load(path, _CANDIDATES)]


def _ranking_table(ranked: list[ScoredCandidate], title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Score", justify="right")
    table.add_column("Certs", justify="right")
    table.add_column("Prox", justify="right")
    table.add_column("Exp", justify="right")
    table.add_column("Fresh", justify="right")
    table.add_column("Travel", justify="right")
    table.add_column("Status")
    for i, scored in enumerate(ranked, start=1):
        b = scored.breakdown
        status = "eligible" if scored.eligible else "; ".join(scored.disqualify_reasons) or "low"
        table.add_row(
            str(i),
            escape(scored.candidate.name),
            str(b.total),
            str(b.cert_score),
            str(b.proximity_score),
            str(b.experience_score),
            str(b.freshness_score),
            str(b.travel_bonus),
            status,
        )
    return table


@app.command()
def rank(
    candidates_file: Path = typer.Argument(..., help="JSON list of candidate records"),
    cert: list[str] | None = typer.Option(None, "--cert", help="Required certification"),
    location: str | None = typer.Option(None, "--location", help="Target location"),
    radius: float | None = typer.Option(None, "--radius", help="Search radius in miles"),
    min_experience: int = typer.Option(0, "--min-experience", help="Minimum years"),
    limit: int | None = typer.Option(None, "--limit", min=0, help="Max eligible rows to show"),
    show_all: bool = typer.Option(False, "--all", help="Include ineligible candidates"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Rank candidates for a ping campaign."""
    settings = _settings(verbose)
    criteria = _criteria(cert, location, radius, min_experience, settings)
    ranked = rank_candidates(_load_candidates(candidates_file), criteria)

    shortlist_limit = limit if limit is not None else settings.shortlist_limit
    rows = ranked if show_all else eligible_shortlist(ranked, shortlist_limit)
    if as_json:
        typer.echo(_SCORED.dump_json(rows, indent=2).decode())
        return

    eligible = sum(1 for s in ranked if s.eligible)
    console.print(_ranking_table(rows, f"Ranked candidates ({eligible}/{len(ranked)} eligible)"))


@app.command()
def estimate(
    candidates_file: Path = typer.Argument(..., help="JSON list of candidate records"),
    cert: list[str] | None = typer.Option(None, "--cert", help="Required certification"),
    location: str | None = typer.Option(None, "--location", help="Target location"),
    radius: float | None = typer.Option(None, "--radius", help="Search radius in miles"),
    min_experience: int = typer.Option(0, "--min-experience", help="Minimum years"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Preview how many candidates a targeting would reach."""
    settings = _settings(verbose)
    criteria = _criteria(cert, location, radius, min_experience, settings)
    result = estimate_match_count(_load_candidates(candidates_file), criteria)

    console.print(f"[bold]Total candidates:[/bold] {result.total}")
    console.print(f"[bold]Eligible:[/bold] {result.eligible}")
    console.print(f"[bold]Top tier:[/bold] {result.top_tier}")
    console.print(
        f"[dim]Estimated cost: ${result.eligible * settings.cost_per_ping:.2f}[/dim]"
    )


def _print_draft(draft: ApplicationDraft) -> None:
    console.print(
        f"[bold green]{draft.job_title}[/bold green] at {draft.company} "
        f"({draft.ats_platform.value}), match {draft.match_score}/100"
    )
    table = Table(title="Fields")
    table.add_column("Field")
    table.add_column("Value")
    table.add_column("Source")
    table.add_column("Conf.", justify="right")
    for answer in draft.fields:
        table.add_row(
            answer.field_id, escape(answer.value), answer.source.value, f"{answer.confidence:.1f}"
        )
    console.print(table)
    console.print("\n[bold]Cover letter:[/bold]")
    console.print(draft.cover_letter, markup=False)
    if draft.warnings:
        console.print(f"\n[yellow]Warnings: {len(draft.warnings)}[/yellow]")
        for warning in draft.warnings:
            console.print(f"  - {warning}", markup=False)


@app.command()
def draft(
    profile_file: Path = typer.Argument(..., help="JSON candidate profile"),
    job_file: Path = typer.Argument(..., help="JSON job posting"),
    fields_file: Path | None = typer.Option(
        None, "--fields", help="JSON list of form fields (defaults to the platform layout)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Draft an ATS application for one candidate and job."""
    settings = _settings(verbose)
    profile = _load(profile_file, TypeAdapter(CandidateProfile))
    job = _load(job_file, TypeAdapter(JobPosting))
    fields = _load(fields_file, _FIELDS) if fields_file is not None else None

    try:
        generator = create_answer_generator(settings)
    except CrewPingError as exc:
        raise _fail(str(exc)) from exc

    with log_context(job_id=job.id):
        result = ApplicationDraftPipeline(generator=generator).generate(profile, job, fields)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return
    _print_draft(result)


@app.command()
def plan(
    candidates_file: Path = typer.Argument(..., help="JSON list of candidate records"),
    name: str = typer.Option(..., "--name", help="Campaign name"),
    message: str = typer.Option(
        ..., "--message", help="Message template; supports {{name}} and {{link}}"
    ),
    cert: list[str] | None = typer.Option(None, "--cert", help="Required certification"),
    location: str | None = typer.Option(None, "--location", help="Target location"),
    radius: float | None = typer.Option(None, "--radius", help="Search radius in miles"),
    min_experience: int = typer.Option(0, "--min-experience", help="Minimum years"),
    drip_steps: int = typer.Option(0, "--drip-steps", help="Follow-up messages per recipient"),
    link: str | None = typer.Option(None, "--link", help="Campaign link (generated if omitted)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a summary"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Plan a ping campaign; nothing is sent."""
    settings = _settings(verbose)
    criteria = _criteria(cert, location, radius, min_experience, settings)
    ranked = rank_candidates(_load_candidates(candidates_file), criteria)
    campaign_link = link or f"{settings.campaign_link_base}/{uuid.uuid4().hex[:8]}"

    try:
        with log_context(campaign=name):
            result = plan_campaign(
                ranked,
                name=name,
                message=message,
                drip_steps=drip_steps,
                cost_per_ping=settings.cost_per_ping,
                link=campaign_link,
            )
    except CrewPingError as exc:
        raise _fail(str(exc)) from exc

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    console.print(f"[bold green]Campaign:[/bold green] {result.name}")
    console.print(f"  Recipients: {len(result.recipients)}")
    console.print(f"  Drip steps: {result.drip_steps}")
    console.print(f"  Estimated cost: ${result.estimated_total_cost:.2f}")
    if result.top_candidates:
        console.print("\n[bold]Top candidates:[/bold]")
        for recipient in result.top_candidates:
            console.print(f"  {recipient.name} ({recipient.score})")
        console.print("\n[bold]Preview:[/bold]")
        console.print(result.top_candidates[0].message, markup=False)


@app.command()
def version() -> None:
    """Show version."""
    console.print("crew-ping v0.1.0")


if __name__ == "__main__":
    app()
