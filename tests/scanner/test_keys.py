"""Tests for flat key clustering."""

from __future__ import annotations

import pytest

from storescope import KeyHeuristics
from storescope.scanner import cluster_keys, extract_pattern


class TestExtractPattern:
    """Test extract_pattern function."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("user:123", "user:*"),
            ("user:1:name", "user:*"),
            ("cache_product_456", "cache_product_*"),
            ("order-5f2b9c", "order-*"),
            ("page:game1", "page:*"),
            ("user:profile_42", "user:*"),
            ("user123", "user*"),
            ("game1", "game*"),
        ],
    )
    def test_identifier_wildcarded(self, key: str, expected: str) -> None:
        """Identifier tokens and digit suffixes should become a wildcard."""
        assert extract_pattern(key) == expected

    def test_first_token_kept_literally(self) -> None:
        """The first token is never wildcarded, even if numeric."""
        assert extract_pattern("42:item:7") == "42:item:*"

    def test_tokens_after_identifier_dropped(self) -> None:
        """Everything after the first identifier collapses into the wildcard."""
        assert extract_pattern("tenant:acme:9:orders:open") == "tenant:acme:*"

    def test_separator_priority(self) -> None:
        """':' is tried before '_' so the colon split wins."""
        assert extract_pattern("app_cache:1001") == "app_cache:*"

    def test_next_separator_tried(self) -> None:
        """A separator without identifier falls through to the next one."""
        assert extract_pattern("order-42-x_y") == "order-*"
        assert extract_pattern("home:page-17-a") == "home:page-*"

    def test_long_hex_run(self) -> None:
        """Keys embedding a long hex run get each run wildcarded."""
        assert extract_pattern("keyabc123def4567890abcdef") == "key*"

    def test_fallback_prefix(self) -> None:
        """Unrecognized keys longer than 5 chars group by a short prefix."""
        assert extract_pattern("settings") == "sett*"
        assert extract_pattern("leaderboard") == "leade*"

    def test_short_key_is_own_pattern(self) -> None:
        """Keys of 5 chars or less cannot be generalized."""
        assert extract_pattern("abc") == "abc"
        assert extract_pattern("a:b1") == "a:b1"

    def test_custom_separators(self) -> None:
        """Separators are configurable."""
        heuristics = KeyHeuristics(separators=("/",))
        assert extract_pattern("tenant/42", heuristics) == "tenant/*"

    def test_custom_suffix_threshold(self) -> None:
        """Digit-suffix detection honors min_suffix_token_length."""
        assert extract_pattern("blogpost:item7") == "blogpost:*"
        heuristics = KeyHeuristics(min_suffix_token_length=10)
        assert extract_pattern("blogpost:item7", heuristics) == "blogp*"


class TestClusterKeys:
    """Test cluster_keys function."""

    def test_empty(self) -> None:
        """No keys, no groups."""
        assert cluster_keys([]) == {}

    def test_ids_truncate_suffix(self) -> None:
        """user:N:name keys share the user:* pattern."""
        keys = ["user:1:name", "user:2:name", "user:3:name"]
        assert cluster_keys(keys) == {"user:*": keys}

    def test_first_seen_order(self) -> None:
        """Patterns and member keys keep first-seen order."""
        keys = ["session:9", "user:1", "session:3", "user:2"]
        groups = cluster_keys(keys)
        assert list(groups) == ["session:*", "user:*"]
        assert groups["session:*"] == ["session:9", "session:3"]

    def test_every_key_in_one_group(self) -> None:
        """Each key lands in exactly one pattern."""
        keys = [f"item:{i}" for i in range(20)] + ["settings", "abc", "x_1"]
        groups = cluster_keys(keys)
        assert sum(len(members) for members in groups.values()) == len(keys)

    def test_idempotent(self) -> None:
        """Clustering the same keys twice gives the same groups."""
        keys = ["a:1", "b:2", "config", "cache_product_4"]
        assert cluster_keys(keys) == cluster_keys(list(keys))
