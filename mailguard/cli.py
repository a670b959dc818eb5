"""CLI entry point for mailguard."""

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from .bulk import parse_upload, render_results, validate_many
from .config import configure_logging, settings
from .verifier import EmailValidationResult, get_default_validator

LOG = logging.getLogger("mailguard.cli")


def _format_result(result: EmailValidationResult) -> str:
    mark = "✅" if result is EmailValidationResult.valid else "❌"
    return f"{mark} {result.message}"


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)")
def main(log_level: Optional[str]) -> None:
    """Offline email address validator."""
    configure_logging(log_level)


@main.command()
@click.argument("emails", nargs=-1, required=True)
@click.pass_context
def check(ctx: click.Context, emails: Tuple[str, ...]) -> None:
    """Validate one or more addresses. Exit code 1 if any is not valid."""
    validator = get_default_validator()
    all_valid = True
    for email in emails:
        if len(email) > settings.MAX_INPUT_LENGTH:
            raise click.BadParameter(
                f"longer than {settings.MAX_INPUT_LENGTH} characters", param_hint="EMAILS"
            )
        result = validator.validate(email)
        all_valid = all_valid and result is EmailValidationResult.valid
        click.echo(f"{email}\t{result.value}\t{_format_result(result)}")
    if not all_valid:
        ctx.exit(1)


@main.command()
def repl() -> None:
    """Interactive prompt: type an address, get the result. 'q' quits."""
    validator = get_default_validator()
    stdin = click.get_text_stream("stdin")
    while True:
        click.echo("Enter email (or 'q' to quit): ", nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break

        email = line.rstrip("\r\n")
        if email.lower() == "q":
            break

        if len(email) > settings.MAX_INPUT_LENGTH:
            click.echo(f"❌ Input longer than {settings.MAX_INPUT_LENGTH} characters.")
        else:
            click.echo(_format_result(validator.validate(email)))
        click.echo()


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write results here instead of stdout")
@click.option("--format", "file_format", type=click.Choice(["csv", "txt"]), default="csv",
              help="Results table format")
@click.option("--keep-duplicates", is_flag=True, help="Report every row, even repeated addresses")
def bulk(path: Path, output: Optional[Path], file_format: str, keep_duplicates: bool) -> None:
    """Validate every address in a CSV, TXT, XLSX or XLS file."""
    try:
        emails = parse_upload(path.name, path.read_bytes())
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="PATH")

    LOG.info("Parsed %d addresses from %s", len(emails), path)
    summary = validate_many(emails, validator=get_default_validator(), dedupe=not keep_duplicates)
    table = render_results(summary, file_format)

    if output is None:
        click.echo(table, nl=False)
    else:
        output.write_text(table, encoding="utf-8")

    counts = ", ".join(f"{name}={n}" for name, n in summary.counts.items())
    click.echo(f"total={summary.total} {counts}", err=True)


@main.command()
@click.argument("domains", nargs=-1, required=True)
def tld(domains: Tuple[str, ...]) -> None:
    """Check whether each domain ends in a known top-level domain."""
    validator = get_default_validator()
    for domain in domains:
        known = validator.is_known_tld(domain)
        click.echo(f"{domain}\t{'known' if known else 'unknown'}")


if __name__ == "__main__":
    main()
