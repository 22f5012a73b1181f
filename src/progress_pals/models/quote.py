"""Inspirational quote model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    """Static motivational text shown on the dashboard."""

    text: str
    author: str | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "author": self.author}
