from typing import Annotated, NamedTuple

import typer
from loguru import logger

from gresql.config import Settings, load_settings, settings
from gresql.core.errors import QuerySyntaxError
from gresql.core.ports import IIdentifierNormalizer
from gresql.core.registry import ComponentRegistry
from gresql.infrastructure.parsing.extractor import TableExtractor
from gresql.logger import configure_logger
from gresql.services.analyzer import StatementAnalyzer
from gresql.services.collector import FileCollector
from gresql.services.formatter import ResultFormatter
from gresql.services.query import parse_queries
from gresql.services.scan import ScanService

app = typer.Typer(
    help="gresql: grep SQL files for statements by type and target table",
)


class ScanDeps(NamedTuple):
    """Container for resolved scan dependencies."""

    service: ScanService
    collector: FileCollector
    normalizer: IIdentifierNormalizer


def version_callback(value: bool) -> None:
    if value:
        from gresql import __version__

        typer.echo(f"gresql version: {__version__}")
        raise typer.Exit()


def _build_dependencies(config: Settings, workers: int) -> ScanDeps:
    """Dependency Injection Factory driven by gresql.yaml configuration."""
    SegmenterClass = ComponentRegistry.get_segmenter(config.parsing.segmenter)
    NormalizerClass = ComponentRegistry.get_normalizer(config.parsing.identifier_normalizer)

    normalizer = NormalizerClass()
    analyzer = StatementAnalyzer(SegmenterClass(), TableExtractor(normalizer))
    collector = FileCollector(extensions=config.file_extensions, encoding=config.encoding)

    return ScanDeps(
        service=ScanService(analyzer, collector, workers=workers),
        collector=collector,
        normalizer=normalizer,
    )


@app.command(no_args_is_help=True)
def main(
    search: Annotated[
        list[str],
        typer.Option(
            "--search",
            "-s",
            help="Search query '<types>:<table>,...' with types from d, i, m, s, u or '*'. "
            "Repeat to require several queries (AND).",
        ),
    ],
    paths: Annotated[
        list[str] | None,
        typer.Argument(help="Files, directories or glob patterns to search. Defaults to '.'."),
    ] = None,
    delimiter: Annotated[
        str | None, typer.Option("--delimiter", "-d", help="Result field delimiter.")
    ] = None,
    path_only: Annotated[
        bool, typer.Option("--path-only", "-p", help="Only print the paths of matching files.")
    ] = False,
    hide_statement: Annotated[
        bool, typer.Option("--no-statement-text", "-T", help="Don't print statement text.")
    ] = False,
    all_types: Annotated[
        bool,
        typer.Option(
            "--all-types", "-a", help="Let an omitted or '*' type filter match SELECT too."
        ),
    ] = False,
    workers: Annotated[
        int | None, typer.Option("--workers", "-w", help="Number of files scanned in parallel.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output.")] = False,
    config_file: Annotated[
        str | None, typer.Option("--config-file", "-c", help="Path to gresql.yaml file.")
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show the version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Finds SQL files containing statements of the given types that target the given tables."""
    config = settings if config_file is None else load_settings(config_file)
    configure_logger(
        level="DEBUG" if verbose else config.log_level, serialize=config.log_serialize
    )

    try:
        deps = _build_dependencies(config, workers if workers is not None else config.workers)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    try:
        predicates = parse_queries(
            search,
            include_select=all_types or config.include_select_by_default,
            normalizer=deps.normalizer,
        )
    except QuerySyntaxError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    for predicate in predicates:
        logger.debug(
            "Query '{}': types={} tables={}",
            predicate.raw,
            sorted(t.value for t in predicate.statement_types),
            sorted(predicate.tables),
        )

    files = deps.collector.collect(paths or ["."])
    if not files:
        typer.echo("Error: No SQL files found.", err=True)
        raise typer.Exit(code=1)

    results = deps.service.scan(files, predicates)

    formatter = ResultFormatter(
        delimiter=delimiter if delimiter is not None else config.delimiter,
        path_only=path_only,
        hide_statement=hide_statement,
    )
    lines = list(formatter.format(results))
    if not lines:
        logger.info("No statements found")
        return

    for line in lines:
        typer.echo(line)


if __name__ == "__main__":
    app()
