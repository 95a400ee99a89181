"""Tests for name sanitization."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from base16_sh.core.names import MAX_NAME_LENGTH, canonical_name, sanitize_name


class TestSanitizeName:
    def test_path_traversal_removed(self) -> None:
        assert sanitize_name("../../../etc/passwd") == "etcpasswd"

    def test_keeps_allowed_characters(self) -> None:
        assert sanitize_name("Solarized-Light_2") == "Solarized-Light_2"

    def test_strips_spaces_and_dots(self) -> None:
        assert sanitize_name("one dark.yaml") == "onedarkyaml"

    def test_truncates(self) -> None:
        assert sanitize_name("a" * 300) == "a" * MAX_NAME_LENGTH

    def test_empty(self) -> None:
        assert sanitize_name("/../") == ""

    @given(st.text(max_size=400))
    def test_result_is_always_a_safe_component(self, text: str) -> None:
        """Invariant: output only holds [A-Za-z0-9_-] and fits the length cap."""
        result = sanitize_name(text)
        assert len(result) <= MAX_NAME_LENGTH
        assert all(c.isascii() and (c.isalnum() or c in "-_") for c in result)

    @given(st.text(max_size=100))
    def test_idempotent(self, text: str) -> None:
        once = sanitize_name(text)
        assert sanitize_name(once) == once


class TestCanonicalName:
    def test_lowercases(self) -> None:
        assert canonical_name("Monokai") == "monokai"

    def test_sanitizes(self) -> None:
        assert canonical_name("Tomorrow Night") == "tomorrownight"
