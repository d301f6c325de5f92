"""Pattern categories, match records and the compiled pattern table."""

from .base import Category, HtmlElementMatch, PatternDefinition, PatternMatch
from .table import PATTERN_SOURCES, build_pattern_table

__all__ = [
    "Category",
    "HtmlElementMatch",
    "PatternDefinition",
    "PatternMatch",
    "PATTERN_SOURCES",
    "build_pattern_table",
]
