"""Text matching utilities for relevance scoring."""

from __future__ import annotations

from collections.abc import Iterable


def normalize_text(text: str | None) -> str:
    """Normalize text for comparison.

    Lowercases and trims surrounding whitespace. Inner whitespace is kept
    as-is so that containment checks see the text the user typed.
    """
    if not text:
        return ""
    return str(text).strip().lower()


def normalize_tags(tags: Iterable[str | None]) -> list[str]:
    """Normalize tags. Blank tags are kept as empty strings."""
    return [normalize_text(tag) for tag in tags]


def contains(haystack: str, needle: str) -> bool:
    """Return True if non-empty ``needle`` occurs in non-empty ``haystack``."""
    if not haystack or not needle:
        return False
    return needle in haystack


def overlaps(text: str, tag: str) -> bool:
    """Bidirectional containment between profile text and a tag.

    An empty tag is a substring of any text, so it overlaps every
    non-empty ``text``.
    """
    if not text:
        return False
    return tag in text or text in tag


def any_tag_overlaps(text: str, tags: Iterable[str]) -> bool:
    """Return True if ``text`` overlaps any of the (normalized) tags."""
    return any(overlaps(text, tag) for tag in tags)


def extract_keywords(*texts: str, min_length: int = 4) -> list[str]:
    """Split texts on whitespace and keep tokens of at least ``min_length``.

    Tokens are returned in order and are not deduplicated.
    """
    keywords: list[str] = []
    for text in texts:
        keywords.extend(token for token in text.split() if len(token) >= min_length)
    return keywords


def find_keyword_hits(keywords: Iterable[str], tags: list[str]) -> list[str]:
    """Return the keywords that occur inside at least one tag."""
    return [keyword for keyword in keywords if any(keyword in tag for tag in tags)]
