"""Git access for a single repository root."""

from pathlib import Path
from typing import Optional

import git

from git_monthly.core.log_parser import git_log_arguments

GIT_SUFFIX = ".git"


class GitInvocationError(RuntimeError):
    """Raised when a git command exits non-zero or cannot be started."""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


def clean_remote_url(raw_url: str) -> str:
    """Strip the trailing newline and a trailing .git suffix from a remote URL."""
    url = raw_url.strip()
    return url.removesuffix(GIT_SUFFIX)


class GitRepository:
    """Runs git commands with the repository root as working directory."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._git: Optional[git.Git] = None

    @property
    def git_cmd(self) -> git.Git:
        """Get the git command wrapper, creating it if needed."""
        if self._git is None:
            self._git = git.Git(str(self.path))
        return self._git

    def log_text(self, year: int, author: str) -> str:
        """Return raw `git log` output for one author within one year."""
        try:
            return self.git_cmd.execute(["git", *git_log_arguments(year, author)])
        except git.exc.GitCommandError as e:
            stderr = _decode(e.stderr)
            raise GitInvocationError(f"git log failed in {self.path}: {stderr}", stderr)
        except git.exc.CommandError as e:
            raise GitInvocationError(f"Could not run git in {self.path}: {e}", str(e))

    def remote_url(self) -> str:
        """Return the origin URL, or an empty string if it cannot be read."""
        try:
            raw_url = self.git_cmd.remote("get-url", "origin")
        except git.exc.CommandError:
            return ""
        return clean_remote_url(raw_url)


def _decode(stream) -> str:
    if isinstance(stream, bytes):
        stream = stream.decode("utf-8", errors="replace")
    text = (stream or "").strip()
    # GitPython reports stderr as "\n  stderr: '...'"
    if text.startswith("stderr:"):
        text = text[len("stderr:"):].strip().strip("'")
    return text
