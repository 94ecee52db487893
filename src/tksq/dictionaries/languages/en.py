"""English language pack."""

from __future__ import annotations

import re

from tksq.dictionaries.languages.base import LanguagePack, ShorthandRules
from tksq.dictionaries.rules import phrase, regex

# Phrases that carry no meaning and can be dropped outright.
FILLERS = (
    "basically",
    "essentially",
    "actually",
    "literally",
    "needless to say",
    "it goes without saying that",
    "it goes without saying",
    "as a matter of fact",
    "for all intents and purposes",
    "in my humble opinion",
    "to be honest",
    "to tell the truth",
    "honestly",
    "frankly",
    "obviously",
    "simply put",
    "in essence",
    "as you can see",
    "as mentioned earlier",
    "as previously mentioned",
    "as stated above",
    "all things considered",
    "at the end of the day",
    "you know",
    "i mean",
    "of course",
)

SUBSTITUTIONS = (
    ("in order to", "to"),
    ("due to the fact that", "because"),
    ("owing to the fact that", "because"),
    ("in light of the fact that", "because"),
    ("despite the fact that", "although"),
    ("in spite of the fact that", "although"),
    ("at this point in time", "now"),
    ("at this moment in time", "now"),
    ("at the present time", "now"),
    ("in the event that", "if"),
    ("in the near future", "soon"),
    ("until such time as", "until"),
    ("a large number of", "many"),
    ("a great deal of", "much"),
    ("the majority of", "most"),
    ("a majority of", "most"),
    ("a number of", "several"),
    ("a sufficient amount of", "enough"),
    ("is able to", "can"),
    ("are able to", "can"),
    ("was able to", "could"),
    ("has the ability to", "can"),
    ("have the ability to", "can"),
    ("with regard to", "regarding"),
    ("with respect to", "regarding"),
    ("in relation to", "regarding"),
    ("in regard to", "regarding"),
    ("for the purpose of", "for"),
    ("in addition to", "besides"),
    ("as well as", "and"),
    ("take into consideration", "consider"),
    ("take into account", "consider"),
    ("give consideration to", "consider"),
    ("make a decision", "decide"),
    ("come to a conclusion", "conclude"),
    ("conduct an investigation", "investigate"),
    ("in close proximity to", "near"),
    ("in the vicinity of", "near"),
    ("on a daily basis", "daily"),
    ("on a regular basis", "regularly"),
    ("prior to", "before"),
    ("subsequent to", "after"),
    ("in the course of", "during"),
    ("in the absence of", "without"),
    ("in excess of", "over"),
    ("as a result of", "due to"),
    ("is indicative of", "indicates"),
    ("whether or not", "whether"),
    ("it is possible that", "possibly"),
    ("there is a chance that", "maybe"),
    ("for example", "e.g."),
    ("that is to say", "i.e."),
    ("in other words", "i.e."),
)

REDUNDANCIES = (
    regex(r"\b(?:absolutely|completely|totally|entirely) (essential|necessary|unique|complete|finished)\b", r"\1"),
    regex(r"\bpast (history|experience)\b", r"\1"),
    regex(r"\bfinal (outcome|conclusion|result)\b", r"\1"),
    regex(r"\badvance (planning|warning|notice)\b", r"\1"),
    regex(r"\bbasic (fundamentals|essentials)\b", r"\1"),
    regex(r"\b(revert|return) back\b", r"\1"),
    regex(r"\b(join|combine|merge|collaborate|connect) together\b", r"\1"),
    regex(r"\bnew innovation(s?)\b", r"innovation\1"),
    regex(r"\bend result\b", "result"),
    regex(r"\bfuture plans\b", "plans"),
    regex(r"\bclose proximity\b", "proximity"),
    regex(r"\bfree gift\b", "gift"),
    regex(r"\bunexpected surprise\b", "surprise"),
    regex(r"\btrue fact\b", "fact"),
    regex(r"\brepeat again\b", "repeat"),
    regex(r"\bperiod of time\b", "period"),
    regex(r"\beach and every\b", "every"),
    regex(r"\bfirst and foremost\b", "first"),
)

CONTRACTIONS = (
    regex(r"\bdo not\b", "don't"),
    regex(r"\bcannot\b", "can't"),
    regex(r"\bwill not\b", "won't"),
    regex(r"\bshould not\b", "shouldn't"),
    regex(r"\bwould not\b", "wouldn't"),
    regex(r"\bcould not\b", "couldn't"),
    regex(r"\bdoes not\b", "doesn't"),
    regex(r"\bdid not\b", "didn't"),
    regex(r"\bis not\b", "isn't"),
    regex(r"\bare not\b", "aren't"),
    regex(r"\bwas not\b", "wasn't"),
    regex(r"\bwere not\b", "weren't"),
    regex(r"\bhas not\b", "hasn't"),
    regex(r"\bhave not\b", "haven't"),
    regex(r"\bhad not\b", "hadn't"),
    regex(r"\bwill have\b", "will've"),
    regex(r"\bwould have\b", "would've"),
    regex(r"\bcould have\b", "could've"),
    regex(r"\bshould have\b", "should've"),
    regex(r"\bit is\b", "it's"),
    regex(r"\bthat is\b", "that's"),
    regex(r"\bthere is\b", "there's"),
    regex(r"\bwhat is\b", "what's"),
    regex(r"\bwho is\b", "who's"),
    regex(r"\blet us\b", "let's"),
    regex(r"\bI am\b", "I'm", flags=0),
    regex(r"\bI have\b", "I've", flags=0),
    regex(r"\bI will\b", "I'll", flags=0),
    regex(r"\bI would\b", "I'd", flags=0),
    regex(r"\byou are\b", "you're"),
    regex(r"\byou have\b", "you've"),
    regex(r"\byou will\b", "you'll"),
    regex(r"\byou would\b", "you'd"),
    regex(r"\bwe are\b", "we're"),
    regex(r"\bwe have\b", "we've"),
    regex(r"\bwe will\b", "we'll"),
    regex(r"\bthey are\b", "they're"),
    regex(r"\bthey have\b", "they've"),
    regex(r"\bthey will\b", "they'll"),
)

# Longer "it is ..." spans; these run before the contractions.
COPULAS = (
    phrase("it is important to note that", "notably"),
    phrase("it is worth noting that", "notably"),
    phrase("it is necessary to", "must"),
    phrase("it is possible to", "can"),
    phrase("it is recommended to", "should"),
    phrase("there are many", "many"),
    phrase("there are several", "several"),
    phrase("there are some", "some"),
    phrase("there is a need to", "need to"),
)

# Lower-case only: a capital "A" mid-sentence is usually a name ("plan A").
ARTICLES = regex(r"\b(?:the|a|an)[ \t]+", "", flags=0)

ENGLISH = LanguagePack(
    code="en",
    script="latin",
    fillers=FILLERS,
    substitutions=SUBSTITUTIONS,
    redundancies=REDUNDANCIES,
    shorthand=ShorthandRules(
        contractions=CONTRACTIONS,
        articles=ARTICLES,
        copulas=COPULAS,
    ),
    capitalize_after_period=re.compile(r"\.\s+([a-z])"),
)
