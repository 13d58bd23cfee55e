"""Commit record parsed from git log output."""

from datetime import datetime

from pydantic import BaseModel, field_validator

# Indentation git puts in front of every message line
MESSAGE_INDENT = "    "


class CommitRecord(BaseModel):
    """Represents one commit taken from a repository's log."""

    commit_id: str
    timestamp: datetime
    message: str

    model_config = {"frozen": True}

    @field_validator("timestamp")
    @classmethod
    def _require_timezone(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")
        return value

    @property
    def month(self) -> int:
        """Calendar month of the commit in its own UTC offset."""
        return self.timestamp.month

    @property
    def body(self) -> str:
        """Message text without the leading log indentation."""
        return self.message.removeprefix(MESSAGE_INDENT)
