"""Monthly report files built from commit records."""

from datetime import datetime
from pathlib import Path
from typing import IO, Iterable, Optional

from git_monthly.models.commit import CommitRecord

REPORT_PREFIX = "raport_"
REPORT_EXTENSION = ".txt"
REPOSITORY_LABEL = "Repository: "


def report_path(output_dir: Path, year: int, month: int) -> Path:
    """Path of the report for one month, e.g. raport_6_2024.txt."""
    return Path(output_dir) / f"{REPORT_PREFIX}{month}_{year}{REPORT_EXTENSION}"


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as "2024-06-05 10:00:00 +00:00"."""
    offset = timestamp.strftime("%z")
    return f"{timestamp:%Y-%m-%d %H:%M:%S} {offset[:3]}:{offset[3:5]}"


def format_header(repository_url: str) -> str:
    return f"{REPOSITORY_LABEL}{repository_url}\n\n\n"


def format_entry(record: CommitRecord, repository_url: str) -> str:
    return (
        f"Date: {format_timestamp(record.timestamp)}\n"
        f"{repository_url}/{record.commit_id}\n"
        f"Message: {record.body}\n\n"
    )


class MonthlyReportWriter:
    """Appends a repository's commits to the report file of each commit month.

    Records are expected newest first, as git log emits them. A new file is
    opened whenever the month changes from one record to the next, and every
    opened file gets its own repository header. Files are only ever appended
    to, so running twice duplicates entries.
    """

    def __init__(self, output_dir: Path, year: int):
        self.output_dir = Path(output_dir)
        self.year = year

    def path_for(self, month: int) -> Path:
        return report_path(self.output_dir, self.year, month)

    def write(self, records: Iterable[CommitRecord], repository_url: str) -> int:
        """Write the records and return how many entries were appended."""
        current_month: Optional[int] = None
        report: Optional[IO[str]] = None
        written = 0

        try:
            for record in records:
                if record.month != current_month:
                    if report is not None:
                        report.close()
                    report = self._open(record.month)
                    report.write(format_header(repository_url))
                    current_month = record.month

                report.write(format_entry(record, repository_url))
                written += 1
        finally:
            if report is not None:
                report.close()

        return written

    def _open(self, month: int) -> IO[str]:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        return open(self.path_for(month), "a", encoding="utf-8")
