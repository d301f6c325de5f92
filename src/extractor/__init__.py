"""Pattern based extraction of structured data from free-form text.

The package exposes a fixed registry of nine pattern categories (emails,
URLs, phone numbers, credit card digit groups, times, HTML tags and elements,
hashtags and currency amounts) together with module level helpers backed by a
shared default :class:`~extractor.registry.PatternRegistry`::

    >>> import extractor
    >>> extractor.extract("hashtag", "Loving #sunsets and #ocean_views today")
    ['#sunsets', '#ocean_views']
    >>> extractor.validate("time", "23:59:59")
    True
"""

from .config import ExtractorConfig, load_config
from .patterns import Category, HtmlElementMatch, PatternDefinition, PatternMatch
from .registry import (
    PatternRegistry,
    extract,
    extract_all,
    get_registry,
    get_supported_categories,
    iter_matches,
    validate,
)
from .utils.errors import ExtractorError, UnsupportedCategoryError

__version__ = "0.1.0"

__all__ = [
    "Category",
    "ExtractorConfig",
    "ExtractorError",
    "HtmlElementMatch",
    "PatternDefinition",
    "PatternMatch",
    "PatternRegistry",
    "UnsupportedCategoryError",
    "extract",
    "extract_all",
    "get_registry",
    "get_supported_categories",
    "iter_matches",
    "load_config",
    "validate",
    "__version__",
]
