import logging
from pathlib import Path
from typing import Annotated

import srsly
import typer
from pydantic import ValidationError

from runesets.catalog import get_entry, iter_entries, resolve_charset
from runesets.errors import InvalidArgumentError, UnknownCharsetError
from runesets.models import SampleRecord, SampleRequest, generate_samples
from runesets.sampler import Sampler, default_sampler
from runesets.stats import check_uniformity

app = typer.Typer(help="Generate random strings from named character sets.")


def _render_validation_error(err: ValidationError) -> str:
    messages = []
    for detail in err.errors():
        loc = ".".join(str(part) for part in detail["loc"])
        msg = detail["msg"]
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)


def _write_records(output: Path, records: list[SampleRecord]) -> None:
    srsly.write_jsonl(output, (record.model_dump() for record in records))


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command("list")
def list_charsets() -> None:
    """List catalog charsets with their sizes."""
    for entry in iter_entries():
        marker = " (composite)" if entry.is_composite else ""
        typer.echo(f"{entry.name}: {entry.size}{marker}")


@app.command()
def show(
    name: Annotated[str, typer.Argument(help="Catalog charset name")],
) -> None:
    """Show a charset's description, constituents and characters."""
    try:
        entry = get_entry(name)
    except UnknownCharsetError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    typer.echo(f"{entry.name}: {entry.description}")
    typer.echo(f"  size: {entry.size}")
    if entry.is_composite:
        typer.echo(f"  constituents: {', '.join(entry.constituents)}")
    typer.echo(f"  chars: {entry.chars}")


@app.command()
def sample(
    charset: Annotated[
        str,
        typer.Option(
            "--charset", "-c", help="Catalog name, or characters with --literal"
        ),
    ] = "ascii",
    length: Annotated[
        int, typer.Option("--length", "-n", help="Code points per string")
    ] = 16,
    count: Annotated[
        int, typer.Option("--count", help="Number of strings")
    ] = 1,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Random seed")
    ] = None,
    literal: Annotated[
        bool,
        typer.Option("--literal", help="Sample from the characters given"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write JSONL records here"),
    ] = None,
) -> None:
    """Print random strings, or write them as JSONL records."""
    try:
        request = SampleRequest(
            charset=charset,
            literal=literal,
            length=length,
            count=count,
            seed=seed,
        )
        records = generate_samples(request)
    except ValidationError as err:
        typer.echo(f"Error: {_render_validation_error(err)}", err=True)
        raise typer.Exit(1) from err
    except InvalidArgumentError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    if output is not None:
        _write_records(output, records)
        typer.echo(f"Wrote {len(records)} samples to {output}")
        return

    for record in records:
        typer.echo(record.text)


@app.command()
def check(
    charset: Annotated[
        str,
        typer.Option(
            "--charset", "-c", help="Catalog name or literal characters"
        ),
    ] = "ascii",
    draws: Annotated[
        int, typer.Option("--draws", help="Number of draws")
    ] = 100_000,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Random seed")
    ] = None,
) -> None:
    """Run a chi-squared uniformity check against a charset."""
    sampler = default_sampler() if seed is None else Sampler(seed=seed)
    try:
        report = check_uniformity(sampler, resolve_charset(charset), draws)
    except InvalidArgumentError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    status = "PASS" if report.passed else "FAIL"
    typer.echo(
        f"{status}: chi2={report.statistic:.3f} "
        f"critical={report.critical_value:.3f} "
        f"categories={report.categories} draws={report.draws}"
    )
    if not report.passed:
        raise typer.Exit(1)
