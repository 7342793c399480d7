from __future__ import annotations

from pathlib import Path

import click
import yaml

from job_portal.config import configure_logging, settings
from job_portal.employer import Employer
from job_portal.models.listing import JobListing
from job_portal.notifications import (
    CompositeNotificationSink,
    LoggingNotificationSink,
    Notification,
    NotificationSink,
)
from job_portal.services.posting_workflow import PostingWorkflow, build_posting_workflow
from job_portal.utils.config import load_listings


class EchoNotificationSink(NotificationSink):
    """Prints notification messages to the terminal."""

    def notify(self, notification: Notification) -> None:
        click.echo(notification.message)


def _build_workflow(verbose: bool) -> PostingWorkflow:
    sinks: list[NotificationSink] = [EchoNotificationSink()]
    if verbose:
        sinks.append(LoggingNotificationSink())
    return build_posting_workflow(notifier=CompositeNotificationSink(sinks))


@click.group()
@click.option("--log-level", type=str, default=None, help="Override LOG_LEVEL.")
@click.option(
    "--log-format",
    type=click.Choice(["json", "console"]),
    default=None,
    help="Override LOG_FORMAT.",
)
@click.option("--verbose", "-v", is_flag=True, help="Also log each notification.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, log_format: str | None, verbose: bool) -> None:
    """Job portal CLI."""
    configure_logging(log_level or settings.log_level, log_format or settings.log_format)
    ctx.ensure_object(dict)
    ctx.obj["workflow"] = _build_workflow(verbose)


@cli.command()
@click.option("--employer", "employer_name", type=str, default=None)
@click.option("--title", type=str, default=None)
@click.option("--description", type=str, default=None)
@click.option("--skills", type=str, default="", show_default=True)
@click.option("--job-type", type=str, default="", show_default=True)
@click.option("--location", type=str, default="", show_default=True)
@click.option("--salary", type=float, default=0.0, show_default=True)
@click.pass_context
def post(
    ctx: click.Context,
    employer_name: str | None,
    title: str | None,
    description: str | None,
    skills: str,
    job_type: str,
    location: str,
    salary: float,
) -> None:
    """Post a single job listing."""
    employer = Employer(employer_name or settings.default_employer_name, ctx.obj["workflow"])
    outcome = employer.post_job_listing(title, description, skills, job_type, location, salary)
    click.echo(str(outcome))
    if not outcome.posted:
        ctx.exit(1)


@cli.command("post-batch")
@click.argument("listings_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--employer", "employer_name", type=str, default=None)
@click.pass_context
def post_batch(ctx: click.Context, listings_file: Path, employer_name: str | None) -> None:
    """Post every listing in a YAML file.

    Each entry may set title, description, skills, job_type (or jobType),
    location and salary; other keys are ignored.
    """
    try:
        file_employer, entries = load_listings(listings_file)
    except (ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e))

    name = employer_name or file_employer or settings.default_employer_name
    employer = Employer(name, ctx.obj["workflow"])

    posted = rejected = 0
    for entry in entries:
        listing = JobListing.from_dict(entry)
        outcome = employer.post_job_listing(
            listing.title,
            listing.description,
            listing.skills,
            listing.job_type,
            listing.location,
            listing.salary,
        )
        click.echo(str(outcome))
        if outcome.posted:
            posted += 1
        else:
            rejected += 1

    click.echo(f"Posted {posted}, rejected {rejected}")


@cli.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Post the sample Software Engineer listing."""
    employer = Employer(settings.default_employer_name, ctx.obj["workflow"])
    outcome = employer.post_job_listing(
        "Software Engineer",
        "Responsible for developing applications.",
        "Java, Spring Boot",
        "Full-Time",
        "Remote",
        85000.00,
    )
    click.echo(str(outcome))


if __name__ == "__main__":
    cli()
