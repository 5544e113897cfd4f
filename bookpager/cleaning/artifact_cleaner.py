"""Removal of viewer interface artifacts from extracted text.

The source edition is an interactive BookVirtual book whose extracted text is
interleaved with toolbar labels, copyright notices and page numbers bleeding
in from running headers. Each artifact is replaced by a single space so that
words on either side are never fused, then whitespace is normalized.

Rules run strictly in table order: a substitution can expose a match for a
later rule, so reordering the table changes behavior.
"""

import logging
import re
from collections.abc import Sequence
from typing import NamedTuple

logger = logging.getLogger(__name__)


class ArtifactRule(NamedTuple):
    """A named regular expression and the text that replaces each match."""

    name: str
    pattern: str
    replacement: str = " "


DEFAULT_ARTIFACT_RULES: tuple[ArtifactRule, ...] = (
    ArtifactRule("fit_page_full_screen", r"Fit Page(?:\s*/?\s*Full(?:\s*Scr\w*)?)?"),
    ArtifactRule("navigate_controls", r"Navigate\s*Contr\w*"),
    ArtifactRule("close_book", r"(?:/\S+\s*)?Off\s*/\s*Close Book"),
    ArtifactRule("internet", r"[^\w\s]{1,3}\s?Internet"),
    ArtifactRule("dangling_en_o", r"\ben O\b"),
    ArtifactRule("dangling_n_o", r"\bn O\b"),
    ArtifactRule("digital_interface", r"Digital Interface by[^\n]*"),
    ArtifactRule("patent_pending", r"U\.S\. Patent Pending[^\n]*"),
    ArtifactRule(
        "copyright",
        r"Copyright\s*©?\s*(?:\d{4}\s*)?BookVirtual Corp(?:oration)?\.?\s*All Rights Reserved\.?",
    ),
    ArtifactRule("trademark", r"BookVirtual™"),
    ArtifactRule("website", r"www\.bookvirtual\.com"),
    ArtifactRule("running_header", r"DOWN THE ?\d+"),
    ArtifactRule("chapter_title_bleed", r"RABBIT-HOLE\. ?\d+"),
    ArtifactRule("letter_number_bleed", r"\bB \d+\b"),
)

_MULTI_SPACE_RE = re.compile(r" {2,}")
_MULTI_NEWLINE_RE = re.compile(r"\n{3,}")


def normalize_whitespace(text: str) -> str:
    """Collapse space runs to one space and 3+ newlines to a paragraph break."""
    text = _MULTI_SPACE_RE.sub(" ", text)
    return _MULTI_NEWLINE_RE.sub("\n\n", text)


class ArtifactCleaner:
    """Applies an ordered artifact rule table, then normalizes whitespace.

    Patterns are compiled once at construction, so a malformed rule fails
    immediately with ``re.error`` rather than on the first document.
    """

    def __init__(self, rules: Sequence[ArtifactRule] = DEFAULT_ARTIFACT_RULES) -> None:
        """Compile the rule table.

        Args:
            rules: Ordered rules. Order is significant.
        """
        self._rules = tuple(rules)
        self._compiled = [
            (rule.name, re.compile(rule.pattern), rule.replacement) for rule in self._rules
        ]

    @property
    def rules(self) -> tuple[ArtifactRule, ...]:
        return self._rules

    def strip_artifacts(self, text: str) -> str:
        """Apply every rule in order without normalizing whitespace."""
        for name, regex, replacement in self._compiled:
            text, count = regex.subn(replacement, text)
            if count:
                logger.debug(f"Artifact rule {name!r} replaced {count} match(es)")
        return text

    def clean(self, raw: str) -> str:
        """Strip artifacts from raw extracted text.

        Args:
            raw: Text as produced by extraction.

        Returns:
            Cleaned text. Leading and trailing whitespace is left in place;
            pages are trimmed individually during pagination.
        """
        return normalize_whitespace(self.strip_artifacts(raw))


_default_cleaner = ArtifactCleaner()


def clean(raw: str, rules: Sequence[ArtifactRule] | None = None) -> str:
    """Clean text with the default rule table or a custom one."""
    if rules is None:
        return _default_cleaner.clean(raw)
    return ArtifactCleaner(rules).clean(raw)
