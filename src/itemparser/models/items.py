"""Item records produced by reducing highlights."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ItemRecord:
    """A single title/body pair handed to list storage.

    Attributes:
        title: Text of the title-role highlight, if any.
        body: Text of the body-role highlight, if any.
    """

    title: str | None = None
    body: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.body is None

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "body": self.body}
