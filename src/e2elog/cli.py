import logging
import sys
from pathlib import Path

import typer

from e2elog.core.coverage import Coverage
from e2elog.core.errors import CoverageError
from e2elog.openapi.loader import load_contract
from e2elog.reporters.json_reporter import JsonReporter, OutputMode
from e2elog.reporters.terminal_reporter import TerminalReporter
from e2elog.storage.ndjson_storage import NdjsonStorage


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every skipped record"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@app.command()
def coverage(
    openapi: Path = typer.Option(
        Path("./openapi.yaml"), "--openapi", envvar="E2ELOG_OPENAPI", help="Path to openapi document"
    ),
    logs: Path = typer.Option(
        Path("./logs.ndjson"), "--logs", envvar="E2ELOG_LOGS", help="Path to logs"
    ),
    url_prefix: str = typer.Option(
        "/api/v1", "--url-prefix", envvar="E2ELOG_URL_PREFIX", help="Url prefix to remove"
    ),
    coverage_only: bool = typer.Option(False, "--coverage", help="Coverage ratio only"),
    stats_only: bool = typer.Option(False, "--stats", help="Without endpoint data"),
    format: str = typer.Option("json", "--format", "-f"),
    output: Path | None = typer.Option(None, "--output", "-o"),
) -> None:
    if coverage_only and stats_only:
        raise typer.BadParameter("--coverage and --stats are mutually exclusive.")
    report_format = format.lower().strip()
    if report_format not in ("json", "text"):
        raise typer.BadParameter("Format must be 'json' or 'text'.", param_hint="format")
    if report_format == "text" and (coverage_only or stats_only):
        raise typer.BadParameter(
            "--coverage and --stats only apply to the json format.", param_hint="format"
        )

    try:
        result = Coverage(load_contract(openapi))
        summary = result.load(NdjsonStorage(logs), url_prefix)
    except CoverageError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(code=1)

    if report_format == "text":
        rendered = TerminalReporter(summary).render()
    else:
        mode = OutputMode.full
        if coverage_only:
            mode = OutputMode.coverage
        elif stats_only:
            mode = OutputMode.stats
        rendered = JsonReporter(summary, mode).render()

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
        return
    typer.echo(rendered)


def main() -> None:
    app()


if __name__ == "__main__":
    app()
