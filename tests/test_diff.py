"""Tests for the word diff."""

from tksq.diff import TextDiffer


class TestTextDiffer:
    def test_identical(self):
        result = TextDiffer.diff("same text", "same text")
        assert [s.kind for s in result.segments] == ["equal"]
        assert result.formatted == "same text"
        assert result.added_count == 0
        assert result.removed_count == 0

    def test_removal(self):
        result = TextDiffer.diff("in order to go", "to go")
        assert result.formatted == "[-in order -]to go"
        assert result.removed_count == 2
        assert result.added_count == 0

    def test_replacement(self):
        result = TextDiffer.diff("big cat", "small cat")
        assert result.formatted == "[-big-][+small+] cat"
        assert result.removed_count == 1
        assert result.added_count == 1

    def test_insertion(self):
        result = TextDiffer.diff("a c", "a b c")
        assert result.added_count == 1
        assert "[+" in result.formatted

    def test_empty(self):
        result = TextDiffer.diff("", "")
        assert result.segments == ()
        assert result.formatted == ""

    def test_equal_segments_rebuild_compressed(self):
        original = "Basically we did this in order to save time."
        compressed = "we did this to save time."
        result = TextDiffer.diff(original, compressed)
        rebuilt = "".join(s.text for s in result.segments if s.kind != "removed")
        assert rebuilt == compressed
