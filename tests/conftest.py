"""Shared fixtures building real git repositories with dated commits."""

import tempfile
from pathlib import Path

import pytest
from git import Actor, Repo

ALICE = Actor("Alice Example", "alice@example.com")
BOB = Actor("Bob Example", "bob@example.com")


def make_repository(path: Path, commits, remote_url=None) -> Repo:
    """Create a repository at path with (author, rfc2822 date, message) commits."""
    path.mkdir(parents=True)
    repo = Repo.init(path)

    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")

    for i, (author, date, message) in enumerate(commits):
        file_path = path / f"file{i}.txt"
        file_path.write_text(f"change {i}\n")
        repo.index.add([file_path.name])
        repo.index.commit(
            message,
            author=author,
            committer=author,
            author_date=date,
            commit_date=date,
        )

    if remote_url:
        repo.create_remote("origin", remote_url)
    return repo


@pytest.fixture
def workspace():
    """Create a temporary directory holding repositories and reports."""
    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        (root / "repos").mkdir()
        yield root


@pytest.fixture
def populated_workspace(workspace):
    """Repositories root with two repositories and a plain directory."""
    repos = workspace / "repos"
    make_repository(
        repos / "alpha",
        [
            (ALICE, "Mon, 12 Jun 2023 09:00:00 +0000", "Last year"),
            (ALICE, "Tue, 12 Mar 2024 09:00:00 +0000", "Start alpha"),
            (ALICE, "Wed, 17 Apr 2024 09:00:00 +0000", "Refine alpha"),
            (BOB, "Thu, 18 Apr 2024 09:00:00 +0000", "Bob's change"),
            (ALICE, "Wed, 12 Jun 2024 09:00:00 +0000", "Ship alpha"),
        ],
        remote_url="https://example.com/team/alpha.git",
    )
    make_repository(
        repos / "beta",
        [
            (BOB, "Fri, 14 Jun 2024 09:00:00 +0000", "Only Bob here"),
            (BOB, "Sat, 15 Jun 2024 09:00:00 +0000", "Bob again"),
        ],
    )
    (repos / "notes").mkdir()
    (repos / "notes" / "todo.txt").write_text("not a repository\n")
    return workspace
