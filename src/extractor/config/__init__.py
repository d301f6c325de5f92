"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. ``EXTRACTOR_MAX_INPUT_CHARS`` and ``EXTRACTOR_LOG_LEVEL`` environment variables
"""

from .schema import ExtractorConfig, load_config

__all__ = ["ExtractorConfig", "load_config"]
