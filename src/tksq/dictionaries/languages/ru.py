"""Russian language pack."""

from __future__ import annotations

import re

from tksq.dictionaries.languages.base import LanguagePack, ShorthandRules
from tksq.dictionaries.rules import phrase, regex
from tksq.language.boundary import NO_LETTER_AFTER, NO_LETTER_BEFORE

_L = r"[^\W\d_]"  # any letter

FILLERS = (
    "как бы",
    "по сути",
    "по сути дела",
    "в общем-то",
    "собственно говоря",
    "на самом деле",
    "в принципе",
    "так сказать",
    "скажем так",
    "в конечном счёте",
    "в конечном счете",
    "по большому счёту",
    "по большому счету",
    "честно говоря",
    "вообще-то",
    "как известно",
    "само собой разумеется",
    "необходимо отметить, что",
    "следует отметить, что",
    "стоит отметить, что",
    "надо сказать, что",
)

SUBSTITUTIONS = (
    # Bureaucratic prepositions and conjunctions
    ("в настоящее время", "сейчас"),
    ("в данный момент", "сейчас"),
    ("на сегодняшний день", "сегодня"),
    ("в ближайшее время", "скоро"),
    ("в течение длительного времени", "долго"),
    ("в большинстве случаев", "обычно"),
    ("в связи с тем что", "т.к."),
    ("в связи с тем, что", "т.к."),
    ("по причине того, что", "т.к."),
    ("по причине того что", "т.к."),
    ("ввиду того что", "т.к."),
    ("ввиду того, что", "т.к."),
    ("так как", "т.к."),
    ("в результате чего", "поэтому"),
    ("при условии что", "если"),
    ("при условии, что", "если"),
    ("в том случае, если", "если"),
    ("в случае если", "если"),
    ("для того чтобы", "чтобы"),
    ("для того, чтобы", "чтобы"),
    ("в соответствии с", "согласно"),
    ("по отношению к", "к"),
    ("доводим до вашего сведения", "сообщаем"),
    ("необходимо", "нужно"),
    ("наиболее важных", "важнейших"),
    ("наиболее важный", "важнейший"),
    # Standard abbreviations
    ("то есть", "т.е."),
    ("и так далее", "и т.д."),
    ("и тому подобное", "и т.п."),
    ("и другие", "и др."),
    ("так называемый", "т.н."),
    ("так называемая", "т.н."),
    ("так называемое", "т.н."),
    # Paired synonyms
    ("целиком и полностью", "полностью"),
    ("полностью и окончательно", "окончательно"),
    ("самый лучший", "лучший"),
    ("самый худший", "худший"),
    ("самая лучшая", "лучшая"),
    ("самое лучшее", "лучшее"),
    # Bureaucratic adjectives
    ("вышеуказанный", "указанный"),
    ("вышеуказанная", "указанная"),
    ("вышеуказанное", "указанное"),
    ("вышеуказанных", "указанных"),
    ("вышеупомянутый", "упомянутый"),
    ("вышеупомянутая", "упомянутая"),
    ("вышеупомянутых", "упомянутых"),
    ("данный", "этот"),
    ("данная", "эта"),
    ("данное", "это"),
    ("данного", "этого"),
    ("данному", "этому"),
    ("данной", "этой"),
)

REDUNDANCIES = (
    regex(rf"{NO_LETTER_BEFORE}свободн{_L}* (ваканси{_L}*){NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}памятн{_L}* (сувенир{_L}*){NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}(?:совместн|взаимн){_L}* (сотрудничеств{_L}*){NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}предварительн{_L}* (планировани{_L}*){NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}прейскурант цен{NO_LETTER_AFTER}", "прейскурант"),
    regex(rf"{NO_LETTER_BEFORE}впервые (дебютир{_L}*){NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}(верн{_L}*) обратно{NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}(подним{_L}*) вверх{NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}(спуст{_L}*) вниз{NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}период(?:а|ом|е)? времени{NO_LETTER_AFTER}", "период"),
    regex(rf"{NO_LETTER_BEFORE}более (лучше|хуже){NO_LETTER_AFTER}", r"\1"),
)

COPULAS = (
    phrase("имеет место быть", "есть"),
    phrase("представляет собой", "—"),
    phrase("является одним из", "один из"),
    phrase("является одной из", "одна из"),
)

# Verb phrases built around a verbal noun, folded back into the verb.
DEVERBALS = (
    phrase("осуществление контроля", "контроль"),
    phrase("осуществлять контроль", "контролировать"),
    phrase("осуществить контроль", "проконтролировать"),
    phrase("осуществить проверку", "проверить"),
    phrase("осуществлять проверку", "проверять"),
    phrase("произвести проверку", "проверить"),
    phrase("производить проверку", "проверять"),
    phrase("провести анализ", "проанализировать"),
    phrase("проводить анализ", "анализировать"),
    phrase("проведение анализа", "анализ"),
    phrase("принятие решения", "решение"),
    phrase("принять решение", "решить"),
    phrase("принимать решение", "решать"),
    phrase("оказать помощь", "помочь"),
    phrase("оказывать помощь", "помогать"),
    phrase("оказать влияние", "повлиять"),
    phrase("оказывать влияние", "влиять"),
    phrase("принять участие", "участвовать"),
    phrase("принимать участие", "участвовать"),
    phrase("вести борьбу", "бороться"),
    phrase("дать ответ", "ответить"),
    phrase("произвести оплату", "оплатить"),
    phrase("осуществить оплату", "оплатить"),
    phrase("произвести замену", "заменить"),
    phrase("осуществление деятельности", "деятельность"),
)

# "я думаю" -> "думаю": the verb ending already carries the person.
PRONOUN_ELISION = (
    regex(rf"{NO_LETTER_BEFORE}я\s+({_L}+(?:ю|у)){NO_LETTER_AFTER}", r"\1"),
    regex(rf"{NO_LETTER_BEFORE}мы\s+({_L}+(?:ем|ём|им)){NO_LETTER_AFTER}", r"\1"),
)

PATRONYMIC = regex(
    rf"{NO_LETTER_BEFORE}([А-ЯЁ][а-яё]+)\s+([А-ЯЁ][а-яё]+(?:ич|овна|евна|ична|инична)){NO_LETTER_AFTER}",
    lambda m: f"{m.group(1)[0]}.{m.group(2)[0]}.",
    flags=0,
)

RUSSIAN = LanguagePack(
    code="ru",
    script="cyrillic",
    fillers=FILLERS,
    substitutions=SUBSTITUTIONS,
    redundancies=REDUNDANCIES,
    shorthand=ShorthandRules(
        copulas=COPULAS,
        deverbals=DEVERBALS,
        pronoun_elision=PRONOUN_ELISION,
        patronymic=PATRONYMIC,
    ),
    capitalize_after_period=re.compile(r"\.\s+([а-яё])"),
)
