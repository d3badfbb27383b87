"""Command-line interface for ogcdef.

Provides CLI commands for parsing, code extraction and URN formatting.
"""

import importlib.metadata
import json
import sys
import time
from pathlib import Path

import click

__all__ = ["cli", "NO_MATCH_EXIT_CODE"]

try:
    __version__ = importlib.metadata.version("ogcdef")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.4.0"  # Fallback for development

# Distinct from click's usage error status (2)
NO_MATCH_EXIT_CODE = 3


def _no_match(message: str) -> None:
    click.secho(message, fg="yellow", err=True)
    sys.exit(NO_MATCH_EXIT_CODE)


@click.group()
@click.version_option(version=__version__, prog_name="ogcdef")
def cli() -> None:
    """Parse and format OGC definition identifiers (URN, URL, EPSG:code).

    Use 'ogcdef COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("uri")
@click.option("--json", "as_json", is_flag=True, help="Print the parsed identifier as JSON")
def parse(uri: str, as_json: bool) -> None:
    """Decompose URI into type, authority, version, code and parameters.

    Exits with status 3 if URI is not a recognized URN or URL.

    Examples
    --------
        ogcdef parse urn:ogc:def:crs:EPSG:8.2:4326
        ogcdef parse http://www.opengis.net/gml/srs/epsg.xml#4326 --json
    """
    from ogcdef.uri import parse as parse_uri

    definition = parse_uri(uri)
    if definition is None:
        _no_match(f"Not a recognized identifier: {uri}")
        return

    if as_json:
        click.echo(json.dumps(definition.to_dict(), ensure_ascii=False))
        return

    click.echo(f"type:       {definition.type or ''}")
    click.echo(f"authority:  {definition.authority or ''}")
    click.echo(f"version:    {definition.version or ''}")
    click.echo(f"code:       {definition.code}")
    if definition.parameters is not None:
        click.echo(f"parameters: {', '.join(definition.parameters)}")
    click.echo(f"urn:        {definition.to_urn()}")


@cli.command()
@click.argument("uri")
@click.option("--type", "-t", "type_", default="crs", show_default=True, help="Expected object type")
@click.option("--authority", "-a", default="EPSG", show_default=True, help="Expected authority")
def code(uri: str, type_: str, authority: str) -> None:
    """Print the code of URI for the expected type and authority.

    Accepts bare codes, AUTHORITY:CODE, URNs and HTTP URLs. Exits with
    status 3 if the type or authority does not match.

    Examples
    --------
        ogcdef code EPSG:4326
        ogcdef code urn:ogc:def:uom:EPSG::9001 --type uom
    """
    from ogcdef.uri import code_of

    result = code_of(type_, authority, uri)
    if result is None:
        _no_match(f"No {authority} {type_} code in: {uri}")
        return
    click.echo(result)


@cli.command(name="format")
@click.option("--type", "-t", "type_", required=True, help="Object type (e.g. crs)")
@click.option("--codespace", "-a", required=True, help="Authority (e.g. EPSG)")
@click.option("--code", "-c", "code_", required=True, help="Object code (e.g. 4326)")
@click.option("--version", "-V", "version", default=None, help="Authority version (optional)")
def format_command(type_: str, codespace: str, code_: str, version: str | None) -> None:
    """Print the canonical URN of an authority code.

    Exits with status 3 if type, codespace or code is empty once invalid
    characters are removed.

    Examples
    --------
        ogcdef format -t crs -a EPSG -c 4326
        ogcdef format -t crs -a EPSG -V 8.2 -c 4326
    """
    from ogcdef import format_identifier

    urn = format_identifier(type_, codespace, code_, version=version)
    if urn is None:
        _no_match("Cannot build a URN: type, codespace and code are mandatory")
        return
    click.echo(urn)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--audit-log",
    type=click.Path(),
    default=None,
    help="Write JSONL audit events to this file",
)
@click.option(
    "--keep-comments",
    is_flag=True,
    help="Parse lines starting with '#' instead of skipping them",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def batch(
    input_path: str,
    output: str,
    audit_log: str | None,
    keep_comments: bool,
    verbose: bool,
) -> None:
    """Parse a file containing one identifier per line to JSONL.

    Blank lines and '#' comments are skipped. Unrecognized lines are
    written with "recognized": false and reported in the audit log.

    Examples
    --------
        ogcdef batch identifiers.txt -o parsed.jsonl
        ogcdef batch identifiers.txt -o parsed.jsonl --audit-log events.jsonl
    """
    from ogcdef import BatchConfig, parse_file, write_jsonl
    from ogcdef.audit import AuditLogger, generate_run_id
    from ogcdef.utils import calculate_file_sha256

    config = BatchConfig(comment_prefix=None if keep_comments else "#")
    logger = AuditLogger(generate_run_id(), Path(audit_log)) if audit_log else None
    start = time.perf_counter()

    if verbose:
        click.echo(f"Parsing file: {input_path}", err=True)

    try:
        if logger is not None:
            logger.run_started(command=sys.argv, parameters=config.to_dict())

        results = parse_file(input_path, config=config, logger=logger)
        recognized = sum(1 for r in results if r.recognized)

        if verbose:
            click.echo(f"Recognized {recognized} of {len(results)} identifiers", err=True)
            click.echo(f"Writing to: {output}", err=True)

        written = write_jsonl(results, output)

        if logger is not None:
            logger.artifact_written(
                path=output,
                sha256=calculate_file_sha256(Path(output)),
                stage="write",
                record_count=written,
            )
            logger.run_finished(
                status="success",
                duration_seconds=time.perf_counter() - start,
                lines_processed=len(results),
                lines_recognized=recognized,
            )

        click.secho(
            f"✓ Wrote {written} results to {output} ({recognized} recognized)",
            fg="green",
        )

    except Exception as e:
        if logger is not None:
            logger.error(type(e).__name__, str(e))
            logger.run_finished(status="failed", duration_seconds=time.perf_counter() - start)
        click.secho(f"✗ Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)

    finally:
        if logger is not None:
            logger.close()


if __name__ == "__main__":
    cli()
