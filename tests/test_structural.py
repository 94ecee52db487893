"""Tests for the structural stage."""

import pytest

from tksq.preserver import make_placeholder
from tksq.stages import StructuralStage
from tksq.stages.structural import condense_lists, dedupe_lines


@pytest.fixture
def run(en, make_options):
    stage = StructuralStage()

    def _run(text, level="aggressive", **kwargs):
        return stage.process(text, make_options(en, level=level, **kwargs))

    return _run


class TestDedupe:
    def test_repeated_line_removed(self, run):
        text = "Same line.\nOther line.\nsame   LINE."
        assert run(text).text == "Same line.\nOther line."

    def test_blank_lines_kept(self, run):
        assert run("a\n\nb\n\nc").text == "a\n\nb\n\nc"

    def test_placeholder_lines_kept(self):
        line = f"see {make_placeholder(0)}"
        text = f"{line}\n{line}"
        assert dedupe_lines(text, []) == text

    def test_change_recorded(self):
        changes = []
        dedupe_lines("one\ntwo\none", changes)
        assert len(changes) == 1
        assert changes[0].rule == "structural:dedup-sentence"
        assert changes[0].position == 8

    def test_light_keeps_duplicates(self, run):
        assert run("x\nx", level="light").text == "x\nx"


class TestRepeatedWords:
    def test_collapses_run(self, run):
        assert run("This is very very very important").text == "This is very important"

    def test_keeps_first_casing(self, run):
        assert run("Very very good").text == "Very good"

    def test_short_words_untouched(self, run):
        assert run("go go go").text == "go go go"

    def test_applies_at_light(self, run):
        assert run("really really", level="light").text == "really"


class TestCondenseLists:
    def test_five_items(self, run):
        text = "apples, pears, plums, figs, dates"
        assert run(text).text == "apples; pears; plums; figs; dates"

    def test_four_items_untouched(self, run):
        text = "apples, pears, plums, figs"
        assert run(text).text == text

    def test_only_at_aggressive(self, run):
        text = "apples, pears, plums, figs, dates"
        assert run(text, level="medium").text == text

    def test_never_lengthens(self):
        text = "a,b,c,d,e"
        assert condense_lists(text, []) == text

    def test_indentation_kept(self):
        text = "  one, two, three, four, five"
        assert condense_lists(text, []) == "  one; two; three; four; five"

    def test_empty_item_skipped(self):
        text = "one, two, , four, five"
        assert condense_lists(text, []) == text


def test_code_untouched(run):
    text = "x = 1\nx = 1"
    assert run(text, content_type="code").text == text
