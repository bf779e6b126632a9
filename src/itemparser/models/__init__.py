"""Data models for the auto-fill parser."""

from itemparser.models.items import ItemRecord
from itemparser.models.spans import Category, Highlight, Role, Span

__all__ = ["Category", "Highlight", "ItemRecord", "Role", "Span"]
