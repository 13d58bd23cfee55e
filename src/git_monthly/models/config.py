"""Run configuration for report generation."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, model_validator


class ReportConfig(BaseModel):
    """Settings for one report run."""

    repositories_root: Path
    output_dir: Path
    year: int
    author: str
    flush_trailing: bool = False
    debug_log: Optional[Path] = None

    @model_validator(mode="after")
    def _check_author(self) -> "ReportConfig":
        if not self.author.strip():
            raise ValueError("author must not be empty")
        return self
