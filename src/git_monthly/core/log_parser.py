"""Parsing of `git log --date rfc` output into commit records."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import List, Optional

from git_monthly.models.commit import CommitRecord

# A line starting with this keyword opens a new commit block
COMMIT_MARKER = "commit"
# Label in front of the commit id, e.g. "commit 1a2b3c"
COMMIT_PREFIX = "commit "
# Width of the "Date:   " label on the date line
DATE_PREFIX_WIDTH = len("Date:   ")

# Position of each line within a commit block
ID_LINE = 0
AUTHOR_LINE = 1
DATE_LINE = 2


def git_log_arguments(year: int, author: str) -> List[str]:
    """Build the git log arguments for one author and one calendar year."""
    return [
        "log",
        "--since",
        f"{year}-01-01",
        "--until",
        f"{year}-12-31",
        "--author",
        author,
        "--date",
        "rfc",
    ]


def parse_commit_date(date_line: str) -> Optional[datetime]:
    """Parse the RFC 2822 date from a log date line, None if it is malformed."""
    try:
        parsed = parsedate_to_datetime(date_line[DATE_PREFIX_WIDTH:])
    except (TypeError, ValueError):
        return None
    # "-0000" means the zone is unknown, keep the wall clock as UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _finalize(id_line: str, date_line: str, message: str) -> Optional[CommitRecord]:
    timestamp = parse_commit_date(date_line)
    commit_id = id_line.removeprefix(COMMIT_PREFIX).strip()
    if timestamp is None or not commit_id:
        return None
    return CommitRecord(commit_id=commit_id, timestamp=timestamp, message=message)


def parse_git_log(text: str, flush_trailing: bool = False) -> List[CommitRecord]:
    """Turn raw log output into commit records, keeping the log's order.

    A block is only emitted once the next commit line is seen, so the last
    block of the output is dropped unless ``flush_trailing`` is set. Blocks
    whose date line cannot be parsed are skipped without notice.
    """
    records: List[CommitRecord] = []
    position = 0
    id_line = ""
    date_line = ""
    message = ""
    seen_marker = False

    for line in text.splitlines():
        if line.startswith(COMMIT_MARKER):
            position = 0
            if seen_marker:
                record = _finalize(id_line, date_line, message)
                if record is not None:
                    records.append(record)
                message = ""
            else:
                seen_marker = True

        if position == ID_LINE:
            id_line = line
        elif position == AUTHOR_LINE:
            pass
        elif position == DATE_LINE:
            date_line = line
        else:
            message += line
        position += 1

    if flush_trailing and seen_marker:
        record = _finalize(id_line, date_line, message)
        if record is not None:
            records.append(record)

    return records
