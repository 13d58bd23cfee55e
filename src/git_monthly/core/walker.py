"""Discovery of repositories and the sequential report run."""

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_monthly.core.log_parser import parse_git_log
from git_monthly.core.report_writer import MonthlyReportWriter
from git_monthly.core.repository import GitInvocationError, GitRepository
from git_monthly.models.config import ReportConfig
from git_monthly.models.repository import RepositoryContext, RepositoryResult

GIT_DIR_NAME = ".git"


def discover_repositories(repositories_root: Path) -> List[Path]:
    """Find repository roots exactly one level below the given directory."""
    root = Path(repositories_root)
    if not root.is_dir():
        return []
    return sorted(entry.parent for entry in root.glob(f"*/{GIT_DIR_NAME}"))


def _debug(debug_log: Optional[Path], message: str) -> None:
    if debug_log is None:
        return
    with open(debug_log, "a") as f:
        f.write(f"{message} at {datetime.now()}\n")


def process_repository(
    path: Path,
    config: ReportConfig,
    writer: MonthlyReportWriter,
    console: Console,
) -> RepositoryResult:
    """Fetch, parse and write the commits of a single repository."""
    repository = GitRepository(path)
    result = RepositoryResult(path=path)

    try:
        log_text = repository.log_text(config.year, config.author)
    except GitInvocationError as e:
        console.print(f"[red]ERROR: {escape(e.stderr or str(e))}[/red]")
        _debug(config.debug_log, f"git log failed in {path}: {e}")
        log_text = ""
        result.error = e.stderr or str(e)

    records = parse_git_log(log_text, flush_trailing=config.flush_trailing)
    context = RepositoryContext(path=path, remote_url=repository.remote_url())
    result.remote_url = context.remote_url
    result.commit_count = writer.write(records, context.remote_url)

    _debug(
        config.debug_log,
        f"{context.name}: {result.commit_count} commits written ({context.remote_url or 'no remote'})",
    )
    return result


def walk_repositories(
    config: ReportConfig, console: Optional[Console] = None
) -> List[RepositoryResult]:
    """Process every repository under the configured root, one after another."""
    console = console or Console()
    writer = MonthlyReportWriter(config.output_dir, config.year)

    repositories = discover_repositories(config.repositories_root)
    _debug(
        config.debug_log,
        f"Found {len(repositories)} repositories in {config.repositories_root}",
    )

    results = []
    for path in repositories:
        console.print(f"[dim]Scanning {escape(str(path))}[/dim]")
        results.append(process_repository(path, config, writer, console))
    return results
