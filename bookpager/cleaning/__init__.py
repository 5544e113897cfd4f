"""Text cleaning for extracted book text.

Responsibilities:
    - Ordered regex replacement of known viewer interface artifacts
    - Space and blank-line normalization

The rule table is tuned to one interactive edition; the mechanism
(ordered replace-with-space, then whitespace normalization) is generic.
"""

from bookpager.cleaning.artifact_cleaner import (
    DEFAULT_ARTIFACT_RULES,
    ArtifactCleaner,
    ArtifactRule,
    clean,
    normalize_whitespace,
)

__all__ = [
    "DEFAULT_ARTIFACT_RULES",
    "ArtifactCleaner",
    "ArtifactRule",
    "clean",
    "normalize_whitespace",
]
