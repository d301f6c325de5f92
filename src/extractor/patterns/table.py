"""Pattern sources and compiled pattern table.

Each category owns exactly one hand‑tuned regular expression.  The sources
are pragmatic heuristics rather than formal grammars: the email pattern is
far looser than RFC5322 and the phone pattern only knows North American style
groupings.  They are kept exactly as they are so that results stay stable
across releases.

Word boundaries are ASCII scoped (``(?a:\\b)``) and digits are spelled
``[0-9]``, so accented letters count as non‑word characters and non‑ASCII
digits never match.  Whitespace stays Unicode aware: ``\\s`` accepts
non‑breaking and other Unicode spaces as separators.  Two variants are
compiled per category when the table is built: the scanning form used by
``finditer`` and an anchored form wrapped in ``\\A(?:...)\\Z`` used for whole
string validation.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from .base import Category, PatternDefinition

__all__ = ["FLAGS", "PATTERN_SOURCES", "STRUCTURED", "anchor", "build_pattern_table"]

FLAGS = re.UNICODE

# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------
WB = r"(?a:\b)"
DIGIT = r"[0-9]"

EMAIL_LOCAL = r"[A-Za-z0-9._%+-]+"
EMAIL_DOMAIN = r"[A-Za-z0-9.-]+\.[A-Za-z]{2,}"

URL_SCHEME = r"https?://(?:www\.)?"
URL_HOST = r"[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}"
URL_TAIL = r"[-a-zA-Z0-9()@:%_+.~#?&/=]*"

PHONE_SEP = r"[\s.-]?"

TIME_HOUR = r"(?:[01]?[0-9]|2[0-3])"
TIME_MINUTE = r"[0-5][0-9]"

TAG_NAME = r"[a-zA-Z][a-zA-Z0-9]*"
TAG_ATTRS = rf'(?:\s+{TAG_NAME}(?:="[^"]*")?)*'

CURRENCY_AMOUNT = r"(?:[0-9]{1,3}(?:,[0-9]{3})*|[0-9]+)(?:\.[0-9]{1,2})?"

# ---------------------------------------------------------------------------
# Pattern sources, in category declaration order
# ---------------------------------------------------------------------------
PATTERN_SOURCES: Mapping[Category, str] = MappingProxyType(
    {
        Category.EMAIL: rf"{WB}{EMAIL_LOCAL}@{EMAIL_DOMAIN}{WB}",
        Category.URL: rf"{URL_SCHEME}{URL_HOST}{WB}{URL_TAIL}",
        Category.PHONE: (
            rf"(?:\+{DIGIT}{{1,2}}\s?)?\(?{DIGIT}{{3}}\)?{PHONE_SEP}"
            rf"{DIGIT}{{3}}{PHONE_SEP}{DIGIT}{{4}}"
        ),
        Category.CREDIT_CARD: rf"{WB}(?:{DIGIT}{{4}}[\s-]?){{3}}{DIGIT}{{4}}{WB}",
        Category.TIME: (
            rf"{WB}{TIME_HOUR}:{TIME_MINUTE}(?::{TIME_MINUTE})?\s*(?:AM|PM|am|pm)?{WB}"
        ),
        Category.HTML_TAG: rf"</?{TAG_NAME}{TAG_ATTRS}\s*/?>",
        Category.HTML_ELEMENT: (
            rf"<(?P<tag>{TAG_NAME}){TAG_ATTRS}\s*>(?P<content>[^<]*)</(?P=tag)>"
        ),
        Category.HASHTAG: rf"#[a-zA-Z0-9_]+{WB}",
        Category.CURRENCY: rf"[$€£¥]{CURRENCY_AMOUNT}",
    }
)

# Categories reported as tag name + content records.
STRUCTURED: frozenset[Category] = frozenset({Category.HTML_ELEMENT})


def anchor(source: str) -> str:
    """Return ``source`` constrained to match an entire string."""

    return rf"\A(?:{source})\Z"


def build_pattern_table() -> dict[Category, PatternDefinition]:
    """Compile every pattern source into a :class:`PatternDefinition`.

    The returned mapping has one entry per :class:`Category` in declaration
    order.
    """

    table: dict[Category, PatternDefinition] = {}
    for category in Category:
        source = PATTERN_SOURCES[category]
        table[category] = PatternDefinition(
            category=category,
            source=source,
            scanner=re.compile(source, FLAGS),
            anchored=re.compile(anchor(source), FLAGS),
            structured=category in STRUCTURED,
        )
    return table
