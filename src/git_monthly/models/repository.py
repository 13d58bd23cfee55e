"""Repository level models."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel


class RepositoryContext(BaseModel):
    """A repository root paired with its origin URL."""

    path: Path
    remote_url: str = ""

    @property
    def name(self) -> str:
        return self.path.name


class RepositoryResult(BaseModel):
    """Outcome of processing one repository."""

    path: Path
    remote_url: str = ""
    commit_count: int = 0
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        """Check if fetching the log failed."""
        return self.error is not None
