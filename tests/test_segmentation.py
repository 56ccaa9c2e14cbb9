"""
Tests for the Boundary Classifier and Word Segmentation Engine
"""

import pytest

from charwise import (
    CharClass,
    classify,
    is_boundary,
    is_grammar,
    word_count,
    word_set,
    words,
    words_by_occurrence,
)
from charwise.constants import BOUNDARY_SYMBOLS, GRAMMAR_MARKS


SAMPLES = [
    "",
    "\n\n\n  \n\n\n",
    "grammar at end,,)",
    "Status::(happy)",
    '"here\'s a forward/slash!"',
    "it's grammar!",
    "!!!",
    "a!b",
    "''it's''",
    "x - y -- z",
    "—dash—",
    "世界 世界世界",
    "hello I am poop 💩 that's my face",
    "This is a good string\n\n\nthat continues after newlines.\n\n\n",
    "tab\tseparated\u3000ideographic\u00a0space",
]


class TestBoundaryClassifier:
    @pytest.mark.parametrize("c", [" ", "\t", "\n", "\r", "\u3000", "\u00a0", "\u2028", "–", "—", "/"])
    def test_boundaries(self, c):
        assert is_boundary(c)
        assert classify(c) is CharClass.BOUNDARY

    @pytest.mark.parametrize("c", list("!?,.'\"[]()*~{}:;-<>+=|%&@#$^\\`"))
    def test_grammar_marks(self, c):
        assert is_grammar(c)
        assert not is_boundary(c)
        assert classify(c) is CharClass.GRAMMAR

    @pytest.mark.parametrize("c", ["a", "Z", "0", "世", "💩", "_", "\u0301", "«"])
    def test_ordinary(self, c):
        assert not is_grammar(c)
        assert not is_boundary(c)
        assert classify(c) is CharClass.ORDINARY

    @pytest.mark.parametrize("c", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_information_separators_are_ordinary(self, c):
        assert not is_boundary(c)
        assert classify(c) is CharClass.ORDINARY

    def test_tables_are_disjoint(self):
        assert not (GRAMMAR_MARKS & BOUNDARY_SYMBOLS)
        assert len(GRAMMAR_MARKS) == 30


class TestWords:
    def test_narrator_sentence(self):
        s = '"Here\'s a sentence," said the narrator/programmer.'
        assert words(s) == ["Here's", "a", "sentence", "said", "the", "narrator", "programmer"]

    @pytest.mark.parametrize("s, want", [
        ("grammar at end,,)", ["grammar", "at", "end"]),
        ("    Status: happy", ["Status", "happy"]),
        ("Status: happy", ["Status", "happy"]),
        ("Status::(happy)", ["Status::(happy"]),
        ("ei\nther/or", ["ei", "ther", "or"]),
        ("either/or", ["either", "or"]),
        ("either/\nor", ["either", "or"]),
        ('"here\'s an em—dash"', ["here's", "an", "em", "dash"]),
        ('"here\'s some dialogue!"', ["here's", "some", "dialogue"]),
        ("it's grammar!", ["it's", "grammar"]),
        ("Hello there, friend!", ["Hello", "there", "friend"]),
        ("hi,,    my name is thing", ["hi", "my", "name", "is", "thing"]),
        ("世界 世界世界", ["世界", "世界世界"]),
        ("hello I am poop 💩 hi", ["hello", "I", "am", "poop", "💩", "hi"]),
        ("interrupted\n\n\nstring.\n\n\n", ["interrupted", "string"]),
        ("en–dash", ["en", "dash"]),
    ])
    def test_words(self, s, want):
        assert words(s) == want

    @pytest.mark.parametrize("s", ["", "   ", "\n\n\n  \n\n\n", "\t\u3000"])
    def test_whitespace_only(self, s):
        assert words(s) == []

    def test_internal_grammar_is_kept(self):
        assert words("a.b") == ["a.b"]
        assert words("x+y=z") == ["x+y=z"]

    def test_edge_grammar_is_dropped(self):
        assert words("!!!") == []
        assert words("(parenthetical)") == ["parenthetical"]
        assert words("''it's''") == ["it's"]

    def test_information_separators_do_not_split(self):
        assert words("a\x1cb") == ["a\x1cb"]
        assert words("a\x1fb c") == ["a\x1fb", "c"]

    def test_code_point_granularity(self):
        assert words("café ok") == ["café", "ok"]

    def test_bytes_input(self):
        assert words("it's 世界!".encode("utf-8")) == ["it's", "世界"]


class TestWordCount:
    @pytest.mark.parametrize("s, want", [
        ('"here\'s a forward/slash!"', 4),
        ('"here\'s an em—dash"', 4),
        ('"here\'s some dialogue!"', 3),
        ("Hello there, friend!", 3),
        ("hi,,    my name is thing", 5),
        ("世界 世界世界", 2),
        ("hello I am poop 💩 that's my face", 8),
        ("", 0),
        ("\n\n\n  \n\n\n", 0),
        ("This is a good string\n\n\nthat continues after newlines.\n\n\n", 9),
    ])
    def test_word_count(self, s, want):
        assert word_count(s) == want

    @pytest.mark.parametrize("s", SAMPLES)
    def test_agrees_with_words(self, s):
        assert word_count(s) == len(words(s))


class TestWordSet:
    def test_unfolded(self):
        s = "I'm really, really tired of thinking of ways to test shit."
        assert word_set(s) == [
            "I'm", "really", "tired", "of", "thinking", "ways", "to", "test", "shit",
        ]
        assert word_set("REALLY, Really, really... tired.") == ["REALLY", "Really", "really", "tired"]

    def test_folded(self):
        s = "I'm really, really tired of thinking of ways to test shit."
        assert word_set(s, fold=True) == [
            "i'm", "really", "tired", "of", "thinking", "ways", "to", "test", "shit",
        ]
        assert word_set("REALLY, Really, really... tired.", fold=True) == ["really", "tired"]
        assert word_set("hello, Hello, hELlo there!", fold=True) == ["hello", "there"]

    def test_folded_sharp_s(self):
        assert word_set("STRA\u00dfE stra\u00dfe", fold=True) == ["stra\u00dfe"]


class TestWordsByOccurrence:
    DIALOGUE = '"Here\'s the dialogue," said the narrator/programmer to the listener!! And here\'s this.'

    def test_unfolded(self):
        occ = words_by_occurrence(self.DIALOGUE)
        assert occ.as_dict() == {
            "Here's": 1, "the": 3, "dialogue": 1, "said": 1, "narrator": 1,
            "programmer": 1, "to": 1, "listener": 1, "And": 1, "here's": 1, "this": 1,
        }

    def test_folded(self):
        occ = words_by_occurrence(self.DIALOGUE, fold=True)
        counts = occ.as_dict()
        assert counts["the"] == 3
        assert counts["here's"] == 2
        assert counts["and"] == 1
        assert "Here's" not in counts

    def test_fold_collapses_case(self):
        occ = words_by_occurrence("thing, Thing, and THING", fold=True)
        assert occ.as_dict() == {"thing": 3, "and": 1}

    @pytest.mark.parametrize("s", SAMPLES)
    @pytest.mark.parametrize("fold", [False, True])
    def test_sum_matches_word_count(self, s, fold):
        assert words_by_occurrence(s, fold).total() == word_count(s)
