"""Data models for git monthly reports."""

from .commit import CommitRecord
from .config import ReportConfig
from .repository import RepositoryContext, RepositoryResult

__all__ = ["CommitRecord", "ReportConfig", "RepositoryContext", "RepositoryResult"]
