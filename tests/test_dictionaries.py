"""Tests for dictionary composition and rule data."""

import re

import pytest

from tksq.dictionaries import DictionaryLoader, LanguageRegistry, Rule, merge_layers
from tksq.dictionaries.rules import phrase, regex, word
from tksq.language import build_word_boundary_regex


class TestDictionaryLoader:
    def test_defaults(self, en):
        assert en.language == "en"
        assert en.script == "latin"
        assert en.substitutions["in order to"] == "to"

    def test_general_adds_no_abbreviations(self, en):
        assert len(en.abbreviations) == 0

    def test_domain_overlay(self, programming):
        assert programming.abbreviations["function"] == "fn"
        assert programming.substitutions["pull request"] == "PR"
        # Base language entries are still there.
        assert programming.substitutions["in order to"] == "to"

    def test_overlay_applies_to_every_language(self):
        ru = DictionaryLoader.load("programming", "ru")
        assert ru.abbreviations["configuration"] == "config"
        assert ru.substitutions["в настоящее время"] == "сейчас"

    def test_overrides_lowercased(self):
        dictionary = DictionaryLoader.load("general", "en", {"Foo Bar": "FB"})
        assert dictionary.substitutions["foo bar"] == "FB"
        assert "Foo Bar" not in dictionary.substitutions

    def test_overrides_win_over_domain(self):
        dictionary = DictionaryLoader.load("programming", "en", {"pull request": "pr-x"})
        assert dictionary.substitutions["pull request"] == "pr-x"

    def test_substitutions_are_read_only(self, en):
        with pytest.raises(TypeError):
            en.substitutions["new"] = "value"

    def test_unknown_domain(self):
        with pytest.raises(ValueError, match="Unknown domain: medical") as exc:
            DictionaryLoader.load("medical", "en")
        assert "general" in str(exc.value)
        assert "programming" in str(exc.value)

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="Unknown language: xx") as exc:
            DictionaryLoader.load("general", "xx")
        assert "en, ru" in str(exc.value)

    def test_available_domains(self):
        assert DictionaryLoader.available_domains() == ["general", "programming", "legal", "academic"]

    def test_fillers_lowercased(self, en):
        assert all(f == f.lower() for f in en.fillers)


class TestLanguagePacks:
    def test_available(self):
        assert LanguageRegistry.available_languages() == ["en", "ru"]

    def test_english_shorthand(self):
        pack = LanguageRegistry.get("en")
        assert pack.shorthand.contractions
        assert pack.shorthand.articles is not None
        assert pack.shorthand.patronymic is None
        assert pack.shorthand.deverbals == ()

    def test_russian_shorthand(self, ru):
        assert ru.script == "cyrillic"
        assert ru.shorthand.contractions == ()
        assert ru.shorthand.articles is None
        assert ru.shorthand.deverbals
        assert ru.shorthand.pronoun_elision
        assert ru.shorthand.patronymic is not None

    def test_russian_data(self, ru):
        assert ru.substitutions["то есть"] == "т.е."
        assert ru.substitutions["целиком и полностью"] == "полностью"
        assert "как бы" in ru.fillers

    def test_capitalize_patterns(self, en, ru):
        assert en.capitalize_after_period.search("end. next")
        assert ru.capitalize_after_period.search("конец. дальше")
        assert not en.capitalize_after_period.search("end. Next")


class TestMergeLayers:
    def test_later_layers_win(self):
        merged = merge_layers({"a": "1", "b": "2"}, (("b", "3"),), {"c": "4"})
        assert dict(merged) == {"a": "1", "b": "3", "c": "4"}

    def test_none_and_empty_layers_skipped(self):
        assert dict(merge_layers(None, {}, {"A": "x"})) == {"a": "x"}


class TestRules:
    def test_phrase_rule_compiles_with_boundaries(self):
        rule = phrase("In Order To", "to")
        assert rule.pattern == "in order to"
        pattern = rule.compile("latin")
        assert pattern.search("IN ORDER TO")
        assert pattern.search("win order tod") is None

    def test_word_rule_kind(self):
        assert word("function", "fn").kind == "word_pair"

    def test_regex_rule_expands_groups(self):
        rule = regex(r"\b(revert|return) back\b", r"\1")
        match = rule.compile("latin").search("revert back")
        assert rule.expand(match) == "revert"

    def test_callable_replacement(self):
        rule = Rule("regex_rule", r"(\d+)", lambda m: str(int(m.group(1)) * 2))
        match = rule.compile("latin").search("x 21")
        assert rule.expand(match) == "42"

    def test_cyrillic_rule_gets_unicode_flag(self):
        assert phrase("при", "x").compile("cyrillic").flags & re.UNICODE

    def test_literal_rule_uses_word_boundary_builder(self):
        rule = phrase("basically", "", suffix=r",?[ \t]*")
        assert rule.compile("latin") is build_word_boundary_regex(
            "basically", "latin", re.IGNORECASE, r",?[ \t]*"
        )
        assert rule.compile("latin").match("Basically, ok").group(0) == "Basically, "
