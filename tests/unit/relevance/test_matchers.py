"""Tests for relevance text matching utilities."""


class TestNormalizeText:
    """Test normalize_text and normalize_tags."""

    def test_normalize_text_lowercases_and_trims(self):
        """normalize_text should lowercase and strip surrounding whitespace."""
        from src.relevance.matchers import normalize_text

        assert normalize_text("  Cancer Research  ") == "cancer research"

    def test_normalize_text_keeps_inner_whitespace(self):
        """Inner whitespace should be preserved."""
        from src.relevance.matchers import normalize_text

        assert normalize_text("Heart  Disease") == "heart  disease"

    def test_normalize_text_handles_none(self):
        """None should normalize to an empty string."""
        from src.relevance.matchers import normalize_text

        assert normalize_text(None) == ""

    def test_normalize_tags_keeps_blank_tags(self):
        """Blank and whitespace-only tags normalize to empty strings."""
        from src.relevance.matchers import normalize_tags

        assert normalize_tags(["Oncology", "", "   ", None]) == ["oncology", "", "", ""]


class TestContainment:
    """Test contains, overlaps and any_tag_overlaps."""

    def test_contains_requires_non_empty_operands(self):
        """Empty needle or haystack never matches."""
        from src.relevance.matchers import contains

        assert contains("oncology", "") is False
        assert contains("", "oncology") is False
        assert contains("pediatric oncology", "oncology") is True

    def test_overlaps_is_bidirectional(self):
        """Either string containing the other counts as an overlap."""
        from src.relevance.matchers import overlaps

        assert overlaps("cancer", "cancer research") is True
        assert overlaps("advanced melanoma", "melanoma") is True
        assert overlaps("cancer", "cardiology") is False

    def test_any_tag_overlaps_with_empty_text_is_false(self):
        """An empty profile text never overlaps a tag."""
        from src.relevance.matchers import any_tag_overlaps

        assert any_tag_overlaps("", ["cancer"]) is False
        assert any_tag_overlaps("", [""]) is False
        assert any_tag_overlaps("cancer", []) is False
        assert any_tag_overlaps("cancer", ["cardiology", "cancer research"]) is True

    def test_blank_tag_overlaps_non_empty_text(self):
        """A blank tag is a substring of any non-empty text."""
        from src.relevance.matchers import any_tag_overlaps, overlaps

        assert overlaps("cancer", "") is True
        assert any_tag_overlaps("cancer", ["", "cardiology"]) is True


class TestKeywords:
    """Test extract_keywords and find_keyword_hits."""

    def test_extract_keywords_drops_short_tokens(self):
        """Tokens shorter than the minimum length should be discarded."""
        from src.relevance.matchers import extract_keywords

        assert extract_keywords("flu and lung cancer") == ["lung", "cancer"]

    def test_extract_keywords_keeps_duplicates_in_order(self):
        """Tokens from several texts are concatenated without deduplication."""
        from src.relevance.matchers import extract_keywords

        assert extract_keywords("breast cancer", "cancer") == [
            "breast",
            "cancer",
            "cancer",
        ]

    def test_extract_keywords_respects_min_length(self):
        """min_length should be configurable."""
        from src.relevance.matchers import extract_keywords

        assert extract_keywords("flu vaccine", min_length=3) == ["flu", "vaccine"]

    def test_extract_keywords_from_empty_text(self):
        """Empty text produces no keywords."""
        from src.relevance.matchers import extract_keywords

        assert extract_keywords("", "   ") == []

    def test_find_keyword_hits_matches_substrings_of_tags(self):
        """A keyword hits when it occurs inside any tag."""
        from src.relevance.matchers import find_keyword_hits

        hits = find_keyword_hits(
            ["cancer", "oncology", "cancer"], ["cancer research", "immunotherapy"]
        )

        assert hits == ["cancer", "cancer"]
