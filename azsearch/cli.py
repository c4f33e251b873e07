"""
azsearch CLI entry point.
"""
import sys
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from azsearch import __version__
from azsearch.catalog import collect_files, load_files
from azsearch.config import AppConfig, load_config
from azsearch.models.resource import Resource
from azsearch.models.search import SearchResult
from azsearch.reporters import json_reporter, markdown
from azsearch.search import SearchEngine

_MATCH_COLORS = {
    "name": "bold green",
    "type": "cyan",
    "resource_group": "magenta",
    "location": "blue",
    "tag": "yellow",
    "filter": "dim",
}


def _load_resources(
    catalog: Tuple[str, ...], config: AppConfig, stderr: Console
) -> List[Resource]:
    """Resolve catalog paths (flag first, then config) and load them. Exits 2 if empty."""
    paths = list(catalog) or config.catalog.paths
    if not paths:
        stderr.print("[red]No catalog given.[/red] Pass --catalog or set catalog.paths in the config.")
        sys.exit(2)

    with stderr.status("[bold]Collecting catalog files…"):
        file_paths = collect_files(paths)

    if not file_paths:
        stderr.print("[red]No files found.[/red]")
        sys.exit(2)

    with stderr.status(f"[bold]Loading {len(file_paths)} file(s)…"):
        resources = load_files(file_paths)

    if not resources:
        stderr.print("[yellow]No resources found in the provided catalog.[/yellow]")
        sys.exit(2)

    stderr.print(f"Loaded [bold]{len(resources)}[/bold] resources.")
    return resources


def _print_results_table(results: List[SearchResult], no_color: bool) -> None:
    tbl = Table(title="Search Results", show_header=True, header_style="bold")
    tbl.add_column("Score", justify="right", width=6)
    tbl.add_column("Resource", width=30)
    tbl.add_column("Type", width=40)
    tbl.add_column("Location", width=12)
    tbl.add_column("Resource Group", width=20)
    tbl.add_column("Match")

    for r in results:
        color = _MATCH_COLORS.get(r.match_type.value, "") if not no_color else ""
        match = f"{r.match_type.value}: {r.match_value}"
        tbl.add_row(
            str(r.score),
            r.resource_name,
            r.resource_type,
            r.location,
            r.resource_group,
            f"[{color}]{match}[/{color}]" if color else match,
        )

    Console(no_color=no_color).print(tbl)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(__version__)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (default: ~/.config/azure-tui/config.yaml).",
)
@click.pass_context
def cli(ctx, config_path: Optional[str]):
    """azsearch — search Azure resource catalogs from the terminal."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


@cli.command()
@click.argument("query")
@click.option(
    "--catalog", "-c",
    multiple=True,
    type=click.Path(),
    help="Catalog snapshot file or directory (az resource list JSON/YAML, .tf). Repeatable.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["table", "json", "markdown"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format.",
)
@click.option("--limit", "-n", type=int, default=None, help="Show at most N results.")
@click.option(
    "--exclude-type",
    multiple=True,
    help="Drop resources whose type contains this text. Repeatable.",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Write the json/markdown report to this file (default: stdout).",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable rich terminal color output.")
@click.pass_context
def search(
    ctx,
    query: str,
    catalog: Tuple[str, ...],
    output_format: str,
    limit: Optional[int],
    exclude_type: Tuple[str, ...],
    output: Optional[str],
    no_color: bool,
) -> None:
    """
    Search the catalog.

    QUERY is free text (e.g. "web*") or filters such as
    "type:vm location:eastus tag:env=prod rg:prod-rg name:api".
    """
    config: AppConfig = ctx.obj["config"]
    stderr = Console(stderr=True, no_color=no_color)

    resources = _load_resources(catalog, config, stderr)

    engine = SearchEngine(exclude_types=list(config.search.exclude_types) + list(exclude_type))
    engine.set_resources(resources)
    results = engine.search(query)

    if limit is None:
        limit = config.search.result_limit
    total = len(results)
    if limit:
        results = results[:limit]

    stderr.print(f"[bold]{total}[/bold] match(es) for [italic]{query}[/italic].")

    fmt = output_format.lower()
    if fmt == "table":
        if results:
            _print_results_table(results, no_color)
        sys.exit(0)

    if fmt == "json":
        content = json_reporter.build_report(query, results, len(resources))
    else:
        content = markdown.build_report(query, results, len(resources))

    if output:
        try:
            with open(output, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(content)
        except OSError as exc:
            stderr.print(f"[red]Write error:[/red] {exc}")
            sys.exit(2)
        stderr.print(f"Report written to [bold]{output}[/bold]")
    else:
        click.echo(content)

    sys.exit(0)


@cli.command()
@click.argument("partial")
@click.option(
    "--catalog", "-c",
    multiple=True,
    type=click.Path(),
    help="Catalog snapshot file or directory. Repeatable.",
)
@click.option("--limit", "-n", type=int, default=None, help="Maximum number of suggestions.")
@click.pass_context
def suggest(ctx, partial: str, catalog: Tuple[str, ...], limit: Optional[int]) -> None:
    """Print autocomplete suggestions for PARTIAL, one per line."""
    config: AppConfig = ctx.obj["config"]
    stderr = Console(stderr=True)

    engine = SearchEngine()
    engine.set_resources(_load_resources(catalog, config, stderr))

    for s in engine.get_suggestions(partial, limit or config.search.suggestion_limit):
        click.echo(s)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
