"""Tests for the cleanup stage."""

import pytest

from tksq.stages import CleanupStage


@pytest.fixture
def run(en, make_options):
    stage = CleanupStage()

    def _run(text, dictionary=en, **kwargs):
        return stage.process(text, make_options(dictionary, **kwargs))

    return _run


class TestWhitespace:
    def test_collapses_interior_spaces(self, run):
        assert run("Hello    world").text == "Hello world"

    def test_keeps_indentation(self, run):
        assert run("first line\n    indented   text").text == "first line\n    indented text"

    def test_trims_trailing_whitespace(self, run):
        assert run("trailing   \nnext").text == "trailing\nnext"

    def test_limits_blank_lines(self, run):
        assert run("a\n\n\n\n\nb").text == "a\n\nb"

    def test_strips_outer_whitespace(self, run):
        assert run("\n\n  padded  \n").text == "padded"


class TestFillers:
    def test_single_word(self, run):
        assert run("This is basically done.").text == "This is done."

    def test_phrase_with_following_space(self, run):
        assert run("It goes without saying that we ship.").text == "we ship."

    def test_trailing_comma_removed_with_filler(self, run):
        assert run("Honestly, it works.").text == "it works."

    def test_not_inside_words(self, run):
        assert run("factually correct").text == "factually correct"

    def test_russian_filler(self, run, ru):
        assert run("Это, как бы, важно.", dictionary=ru).text == "Это, важно."

    def test_change_recorded(self, run):
        result = run("This is basically done.")
        assert any(c.rule == "cleanup:filler" for c in result.changes)
        assert any(c.original.lower().startswith("basically") for c in result.changes)


class TestRedundancies:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("The end result is good.", "The result is good."),
            ("We need to revert back now.", "We need to revert now."),
            ("Let us join together.", "Let us join."),
            ("It was absolutely essential.", "It was essential."),
        ],
    )
    def test_english(self, run, text, expected):
        assert run(text).text == expected

    def test_russian(self, run, ru):
        assert run("Это более лучше.", dictionary=ru).text == "Это лучше."


class TestPunctuation:
    def test_double_period(self, run):
        assert run("Done.. Next").text == "Done. Next"

    def test_ellipsis_kept(self, run):
        assert run("Wait... What").text == "Wait... What"

    def test_space_before_punctuation(self, run):
        assert run("Hello , world !").text == "Hello, world!"

    def test_double_comma(self, run):
        assert run("a,, b").text == "a, b"

    def test_capitalize_after_period(self, run):
        assert run("first sentence. second sentence.").text == "first sentence. Second sentence."

    def test_leading_comma(self, run):
        assert run("line one\n, line two").text == "line one\nline two"


class TestContentType:
    def test_code_keeps_fillers(self, run):
        assert run("basically x = 1", content_type="code").text == "basically x = 1"

    def test_code_not_capitalized(self, run):
        assert run("a = 1. b = 2", content_type="code").text == "a = 1. b = 2"

    def test_code_still_normalizes_whitespace(self, run):
        assert run("x = 1   \n\n\n\ny = 2", content_type="code").text == "x = 1\n\ny = 2"

    def test_structured_keeps_fillers(self, run):
        text = '{"note": "basically fine"}'
        assert run(text, content_type="structured").text == text
