"""Core pattern models.

This module defines the strongly typed primitives shared by the pattern table
and the registry.  Match spans follow the half‑open interval convention
``[start, end)`` where ``start`` is inclusive and ``end`` is exclusive.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..utils.errors import UnsupportedCategoryError


class Category(Enum):
    """Enumeration of supported pattern categories.

    Member values are the external category names accepted by the public
    API.  Declaration order is the fixed enumeration order.
    """

    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    CREDIT_CARD = "creditCard"
    TIME = "time"
    HTML_TAG = "htmlTag"
    HTML_ELEMENT = "htmlElement"
    HASHTAG = "hashtag"
    CURRENCY = "currency"

    @classmethod
    def parse(cls, value: "Category | str", operation: str = "lookup") -> "Category":
        """Return the member for ``value`` or raise :class:`UnsupportedCategoryError`."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedCategoryError(value, operation) from None

    @classmethod
    def names(cls) -> list[str]:
        """Return the external names in declaration order."""

        return [member.value for member in cls]


@dataclass(slots=True, frozen=True)
class PatternDefinition:
    """A category bound to its pattern source and compiled variants.

    ``scanner`` is used for left‑to‑right extraction, ``anchored`` for whole
    string validation.  Both are compiled once from ``source`` and never
    change afterwards.  ``structured`` marks categories whose matches are
    reported as :class:`HtmlElementMatch` records instead of plain strings.
    """

    category: Category
    source: str
    scanner: re.Pattern[str]
    anchored: re.Pattern[str]
    structured: bool = False

    @property
    def name(self) -> str:
        return self.category.value


@dataclass(slots=True, frozen=True)
class PatternMatch:
    """A single scanning match located in the analysed text."""

    category: Category
    start: int
    end: int
    text: str

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")
        if len(self.text) != self.end - self.start:
            raise ValueError("text length does not match span")

    @property
    def length(self) -> int:
        """Return span length in characters."""

        return self.end - self.start


@dataclass(slots=True, frozen=True)
class HtmlElementMatch:
    """An ``htmlElement`` match split into tag name and inner content."""

    full_match: str
    tag_name: str
    content: str


__all__ = ["Category", "PatternDefinition", "PatternMatch", "HtmlElementMatch"]
