"""Tests for name and id lookup helpers."""

from types import SimpleNamespace

import pytest

from ventureboard.core.matching import match_exact, match_id_prefix


BUSINESSES = [
    SimpleNamespace(id="b-1", name="Startempire Wire", short_name="SEW"),
    SimpleNamespace(id="b-2", name="Acme Labs", short_name="AL"),
    SimpleNamespace(id="b-3", name="SEW", short_name="X"),
]


@pytest.mark.unit
class TestMatchExact:
    """Tests for match_exact."""

    def test_case_insensitive_name(self):
        """Test names match regardless of case and surrounding whitespace."""
        assert match_exact(BUSINESSES, "  acme LABS ", keys=("name", "short_name")) is BUSINESSES[1]

    def test_short_name_fallback(self):
        """Test short names are tried after names."""
        assert match_exact(BUSINESSES, "al", keys=("name", "short_name")) is BUSINESSES[1]

    def test_name_beats_short_name(self):
        """Test an exact name match wins over an earlier item's short name."""
        assert match_exact(BUSINESSES, "sew", keys=("name", "short_name")) is BUSINESSES[2]

    def test_no_partial_match(self):
        """Test substrings do not match."""
        assert match_exact(BUSINESSES, "Acme", keys=("name", "short_name")) is None

    def test_blank_query(self):
        """Test an empty query never matches."""
        assert match_exact(BUSINESSES, "   ") is None


@pytest.mark.unit
class TestMatchIdPrefix:
    """Tests for match_id_prefix."""

    items = [
        SimpleNamespace(id="3f2a9c10-aaaa"),
        SimpleNamespace(id="3f2b0000-bbbb"),
        SimpleNamespace(id="77"),
    ]

    def test_exact_id(self):
        """Test a full id resolves."""
        assert match_id_prefix(self.items, "77") is self.items[2]

    def test_unique_prefix(self):
        """Test a prefix shared by one item resolves."""
        assert match_id_prefix(self.items, "3f2a") is self.items[0]

    def test_ambiguous_prefix(self):
        """Test a prefix shared by several items does not resolve."""
        assert match_id_prefix(self.items, "3f2") is None

    def test_unknown(self):
        """Test an unknown id does not resolve."""
        assert match_id_prefix(self.items, "zzz") is None
