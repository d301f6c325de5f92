"""Registry of named pattern matchers.

:class:`PatternRegistry` owns the fixed, read‑only table mapping each
:class:`~extractor.patterns.base.Category` to its compiled
:class:`~extractor.patterns.base.PatternDefinition`.  Every public operation
resolves its category through :meth:`PatternRegistry.get_definition`, the
single fallible lookup, so an unknown name always surfaces as
:class:`~extractor.utils.errors.UnsupportedCategoryError`.

Scanning uses :meth:`re.Pattern.finditer` and validation
:meth:`re.Pattern.match` on the anchored variant.  Neither keeps a cursor on
the compiled pattern, so a single registry can be shared between threads and
every call starts from the beginning of its own text.

When a configuration bounds ``limits.max_input_chars`` the scanning
operations only look at that many leading characters, dropping any match
that runs up to the cut, and validation rejects longer inputs outright.
Both cases are logged as warnings.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Iterable, Iterator
from typing import TypeAlias

from .config import ExtractorConfig
from .patterns.base import Category, HtmlElementMatch, PatternDefinition, PatternMatch
from .patterns.table import build_pattern_table
from .utils.logging import configure_logging, get_logger

__all__ = [
    "ExtractionResult",
    "PatternRegistry",
    "get_registry",
    "extract",
    "validate",
    "get_supported_categories",
    "iter_matches",
    "extract_all",
]

ExtractionResult: TypeAlias = list[str] | list[HtmlElementMatch]
CategoryLike: TypeAlias = Category | str

log = get_logger(__name__)


class PatternRegistry:
    """Extract and validate text against the fixed set of patterns."""

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self._table: dict[Category, PatternDefinition] = build_pattern_table()
        self._max_input_chars: int | None = None
        if config is not None:
            self._max_input_chars = config.limits.max_input_chars
            configure_logging(config.logging.level)
        log.debug(
            "Built pattern registry with %d categories (max_input_chars=%s)",
            len(self._table),
            self._max_input_chars,
        )

    @property
    def max_input_chars(self) -> int | None:
        return self._max_input_chars

    def get_definition(self, category: CategoryLike, operation: str = "lookup") -> PatternDefinition:
        """Return the definition registered for ``category``.

        Raises
        ------
        UnsupportedCategoryError
            If ``category`` is not one of the registered names.
        """

        return self._table[Category.parse(category, operation)]

    def get_supported_categories(self) -> list[str]:
        """Return every registered category name in definition order."""

        return [category.value for category in self._table]

    def _bounded(self, text: str) -> tuple[str, bool]:
        limit = self._max_input_chars
        if limit is not None and len(text) > limit:
            log.warning("Input of %d chars truncated to %d for scanning", len(text), limit)
            return text[:limit], True
        return text, False

    def _scan(self, category: Category, text: str, truncated: bool) -> Iterator[re.Match[str]]:
        """Yield scanner matches, skipping any that reach a truncation point."""

        for match in self._table[category].scanner.finditer(text):
            if truncated and match.end() == len(text):
                continue
            yield match

    def _collect(self, category: Category, text: str, truncated: bool) -> ExtractionResult:
        matches = self._scan(category, text, truncated)
        if self._table[category].structured:
            return [
                HtmlElementMatch(
                    full_match=match.group(0),
                    tag_name=match.group("tag"),
                    content=match.group("content"),
                )
                for match in matches
            ]
        return [match.group(0) for match in matches]

    def extract(self, category: CategoryLike, text: str) -> ExtractionResult:
        """Return all non‑overlapping matches of ``category`` in ``text``.

        Matches are returned left to right.  ``htmlElement`` matches are
        returned as :class:`HtmlElementMatch` records; every other category
        yields the matched substrings.  An empty list is returned when nothing
        matches.  When the input is truncated to ``max_input_chars`` a match
        running up to the cut is dropped, since it may be a fragment of a
        longer match in the full text.
        """

        definition = self.get_definition(category, "extraction")
        return self._collect(definition.category, *self._bounded(text))

    def iter_matches(self, category: CategoryLike, text: str) -> Iterator[PatternMatch]:
        """Return an iterator of :class:`PatternMatch` spans for ``text``.

        The category is resolved eagerly; matches are produced lazily.
        """

        definition = self.get_definition(category, "extraction")
        return self._iter_spans(definition.category, *self._bounded(text))

    def _iter_spans(self, category: Category, text: str, truncated: bool) -> Iterator[PatternMatch]:
        for match in self._scan(category, text, truncated):
            start, end = match.span()
            yield PatternMatch(category, start, end, match.group(0))

    def extract_all(
        self, text: str, categories: Iterable[CategoryLike] | None = None
    ) -> dict[str, ExtractionResult]:
        """Run :meth:`extract` for several categories.

        ``categories`` defaults to every registered category.  All names are
        resolved before any scanning so an unknown name fails fast.  The
        result is keyed by category name in request order.
        """

        if categories is None:
            requested = list(self._table)
        else:
            requested = [Category.parse(c, "extraction") for c in categories]
        bounded, truncated = self._bounded(text)
        return {c.value: self._collect(c, bounded, truncated) for c in requested}

    def validate(self, category: CategoryLike, text: str) -> bool:
        """Return ``True`` if the whole of ``text`` matches ``category``."""

        definition = self.get_definition(category, "validation")
        limit = self._max_input_chars
        if limit is not None and len(text) > limit:
            log.warning("Input of %d chars exceeds validation limit %d", len(text), limit)
            return False
        return definition.anchored.match(text) is not None


# ---------------------------------------------------------------------------
# Module level default registry
# ---------------------------------------------------------------------------

_default: PatternRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> PatternRegistry:
    """Return the process-wide registry, creating it on first use."""

    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = PatternRegistry()
    return _default


def extract(category: CategoryLike, text: str) -> ExtractionResult:
    """Extract ``category`` matches from ``text`` with the default registry."""

    return get_registry().extract(category, text)


def validate(category: CategoryLike, text: str) -> bool:
    """Validate ``text`` against ``category`` with the default registry."""

    return get_registry().validate(category, text)


def get_supported_categories() -> list[str]:
    return get_registry().get_supported_categories()


def iter_matches(category: CategoryLike, text: str) -> Iterator[PatternMatch]:
    return get_registry().iter_matches(category, text)


def extract_all(
    text: str, categories: Iterable[CategoryLike] | None = None
) -> dict[str, ExtractionResult]:
    return get_registry().extract_all(text, categories)
