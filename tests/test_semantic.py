"""Tests for the semantic stage and the shared rule helpers."""

import pytest

from tksq.dictionaries import DictionaryLoader
from tksq.stages import SemanticStage, is_part_of_identifier, match_case


@pytest.fixture
def run(en, make_options):
    stage = SemanticStage()

    def _run(text, dictionary=en, **kwargs):
        return stage.process(text, make_options(dictionary, **kwargs))

    return _run


class TestSubstitutions:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("We did this in order to save time.", "We did this to save time."),
            ("In order to win, we train.", "To win, we train."),
            ("IN ORDER TO WIN", "TO WIN"),
            ("Due to the fact that it rained, we stayed.", "Because it rained, we stayed."),
            ("The majority of users agree.", "Most users agree."),
            ("We meet on a daily basis.", "We meet daily."),
        ],
    )
    def test_english(self, run, text, expected):
        assert run(text).text == expected

    def test_russian(self, run, ru):
        assert run("В настоящее время мы работаем", dictionary=ru).text == "Сейчас мы работаем"

    def test_russian_inflected_form_untouched(self, run, ru):
        assert run("данные показывают", dictionary=ru).text == "данные показывают"

    def test_custom_override(self, run):
        dictionary = DictionaryLoader.load("general", "en", {"foo bar baz": "FBB"})
        assert run("see foo bar baz", dictionary=dictionary).text == "see FBB"

    def test_changes_tagged(self, run):
        result = run("We did this in order to save time.")
        assert [c.rule for c in result.changes] == ["semantic:substitution"]
        assert result.changes[0].original == "in order to"
        assert result.changes[0].replacement == "to"


class TestAbbreviations:
    def test_skipped_at_light(self, run, programming):
        text = "This function returns a value"
        assert run(text, dictionary=programming, level="light").text == text

    def test_applied_at_medium(self, run, programming):
        result = run("This function returns a value", dictionary=programming)
        assert result.text == "This fn returns a value"
        assert result.changes[0].rule == "semantic:abbreviation"

    def test_identifiers_untouched(self, run, programming):
        text = "call myFunction() and my_function and obj.function and function()"
        assert run(text, dictionary=programming).text == text

    def test_case_kept(self, run, programming):
        assert run("Configuration loaded", dictionary=programming).text == "Config loaded"


class TestContentType:
    @pytest.mark.parametrize("content_type", ["code", "structured"])
    def test_non_prose_untouched(self, run, programming, content_type):
        text = "in order to call the function"
        result = run(text, dictionary=programming, content_type=content_type)
        assert result.text == text
        assert result.changes == []


class TestMatchCase:
    @pytest.mark.parametrize(
        ("original", "replacement", "expected"),
        [
            ("in order to", "to", "to"),
            ("In order to", "to", "To"),
            ("IN ORDER TO", "to", "TO"),
            ("A", "one", "one"),
            ("Basically", "", ""),
        ],
    )
    def test_match_case(self, original, replacement, expected):
        assert match_case(original, replacement) == expected


class TestIdentifierDetection:
    @pytest.mark.parametrize(
        ("text", "word", "expected"),
        [
            ("my_function", "function", True),
            ("obj.function", "function", True),
            ("function()", "function", True),
            ("function_name", "function", True),
            ("myFunction", "Function", True),
            ("call function now", "function", False),
        ],
    )
    def test_is_part_of_identifier(self, text, word, expected):
        start = text.index(word)
        assert is_part_of_identifier(text, start, start + len(word)) is expected
