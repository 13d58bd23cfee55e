"""Command line interface for git monthly reports."""

from pathlib import Path
from typing import List, Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from git_monthly.core.walker import walk_repositories
from git_monthly.models.config import ReportConfig
from git_monthly.models.repository import RepositoryResult

console = Console()


def print_summary(results: List[RepositoryResult]) -> None:
    """Show a table of processed repositories."""
    if not results:
        console.print("[yellow]No repositories found[/yellow]")
        return

    table = Table(title="Monthly report run")
    table.add_column("Repository", style="cyan")
    table.add_column("Remote")
    table.add_column("Commits", justify="right")
    table.add_column("Status")

    for result in results:
        status = "[red]log failed[/red]" if result.failed else "[green]ok[/green]"
        table.add_row(
            escape(result.path.name),
            escape(result.remote_url) or "-",
            str(result.commit_count),
            status,
        )

    console.print(table)
    total = sum(r.commit_count for r in results)
    console.print(f"[green]✅ {total} commits written[/green]")


@click.command()
@click.version_option(package_name="git-monthly-report")
@click.argument(
    "repositories_root", type=click.Path(file_okay=False, path_type=Path)
)
@click.argument("output_dir", type=click.Path(file_okay=False, path_type=Path))
@click.argument("year", type=int)
@click.argument("author")
@click.option(
    "--flush-last/--no-flush-last",
    default=False,
    help="Also report the last commit block of each log",
)
@click.option(
    "--debug-log",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Append progress details to this file",
)
@click.option("--quiet", "-q", is_flag=True, help="Don't print the summary table")
def main(
    repositories_root: Path,
    output_dir: Path,
    year: int,
    author: str,
    flush_last: bool,
    debug_log: Optional[Path],
    quiet: bool,
):
    """Write monthly commit reports for AUTHOR in YEAR.

    Every repository directly below REPOSITORIES_ROOT is scanned and its
    commits are appended to raport_<month>_<year>.txt files in OUTPUT_DIR.
    """
    try:
        config = ReportConfig(
            repositories_root=repositories_root,
            output_dir=output_dir,
            year=year,
            author=author,
            flush_trailing=flush_last,
            debug_log=debug_log,
        )
    except ValidationError as e:
        raise click.BadParameter(e.errors()[0]["msg"], param_hint="AUTHOR") from e

    try:
        results = walk_repositories(config, console=console)
    except OSError as e:
        raise click.ClickException(f"Could not write reports: {e}") from e

    if not quiet:
        print_summary(results)


if __name__ == "__main__":
    main()
