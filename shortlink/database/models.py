"""Data models for shortlink."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Link:
    """A stored short link. Never updated after creation."""

    original_url: str
    short_code: str
    salt: str
    created_at: datetime
    id: Optional[str] = None

    def with_id(self, link_id: str) -> "Link":
        """Return a copy carrying the store-assigned id."""
        return replace(self, id=link_id)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "original_url": self.original_url,
            "short_code": self.short_code,
            "salt": self.salt,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Link":
        """Create from dictionary."""
        created_at = data["created_at"]
        return cls(
            id=data.get("id"),
            original_url=data["original_url"],
            short_code=data["short_code"],
            salt=data["salt"],
            created_at=created_at if isinstance(created_at, datetime) else datetime.fromisoformat(created_at),
        )
