"""Tests for key membership helpers."""

import pytest

from keyedsets import KeyIndex, has_key, key_set


def first_letter(word: str) -> str:
    return word[0]


class TestHasKey:
    """Tests for the linear-scan membership test."""

    def test_finds_shared_key(self):
        assert has_key({"apple", "banana"}, first_letter, "avocado")

    def test_missing_key(self):
        assert not has_key({"apple", "banana"}, first_letter, "cherry")

    def test_none_items_is_empty(self):
        assert not has_key(None, first_letter, "apple")

    def test_empty_items(self):
        assert not has_key(set(), first_letter, "apple")

    def test_rejects_missing_identifier(self):
        with pytest.raises(TypeError, match="identifier must be callable"):
            has_key({"apple"}, None, "apple")


class TestKeySet:
    """Tests for key_set."""

    def test_distinct_keys(self):
        assert key_set(["apple", "avocado", "banana"], first_letter) == frozenset({"a", "b"})

    def test_none_items(self):
        assert key_set(None, first_letter) == frozenset()


class TestKeyIndex:
    """Tests for KeyIndex."""

    def test_contains_element_by_key(self):
        index = KeyIndex({"apple", "banana"}, first_letter)

        assert "avocado" in index
        assert "cherry" not in index

    def test_contains_key(self):
        index = KeyIndex({"apple", "banana"}, first_letter)

        assert index.contains_key("b")
        assert not index.contains_key("c")

    def test_len_and_iter(self):
        index = KeyIndex(["apple", "avocado", "banana"], first_letter)

        assert len(index) == 2
        assert set(index) == {"a", "b"}
        assert index.keys == frozenset({"a", "b"})

    def test_none_items(self):
        index = KeyIndex(None, first_letter)

        assert len(index) == 0
        assert "apple" not in index

    def test_agrees_with_has_key(self):
        words = {"apple", "banana", "cherry"}
        index = KeyIndex(words, first_letter)

        for probe in ("avocado", "blueberry", "date", "elderberry"):
            assert (probe in index) == has_key(words, first_letter, probe)

    def test_repr(self):
        assert repr(KeyIndex({"apple"}, first_letter)) == "KeyIndex(keys=1)"
