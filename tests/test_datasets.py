from pathlib import Path

import pytest
from wordle_solver.datasets import (
    Dictionary, Words, describe_wordlist, load_dictionary, pretty_summary, read_lines,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


# --- Dictionary ---

def test_build_groups_by_length():
    d = Dictionary.build(["a", "b", "bc", "de", "def", "asd"])
    assert d.lengths() == [1, 2, 3]
    assert d.words_of_length(1) == {"a", "b"}
    assert d.words_of_length(2) == {"bc", "de"}
    assert d.words_of_length(3) == {"def", "asd"}
    assert len(d) == 6


def test_build_trims_whitespace():
    d = Dictionary.build(["abc", "de ", " a ", "\na\n", "\r\n def \r\n"])
    assert d.lengths() == [1, 2, 3]
    assert d.words_of_length(1) == {"a"}
    assert d.words_of_length(2) == {"de"}
    assert d.words_of_length(3) == {"abc", "def"}


def test_build_lowercases_and_dedupes():
    d = Dictionary.build(["ABC", "DEf", "abc"])
    assert d.lengths() == [3]
    assert d.words_of_length(3) == {"abc", "def"}


def test_build_drops_blank_lines():
    d = Dictionary.build(["", "   ", "\n", "ab"])
    assert d.lengths() == [2]


def test_length_counts_codepoints_not_bytes():
    d = Dictionary.build(["ÄÖÜ", "éte", "ab"])
    assert d.words_of_length(3) == {"äöü", "éte"}
    assert d.words_of_length(6) is None


def test_missing_length_returns_none():
    d = Dictionary.build(["abc"])
    assert d.words_of_length(4) is None
    assert d.get(4) is None


@pytest.mark.parametrize("words", [
    ["crane", "cat", "dogs", "x", "Élan", "  spaced  "],
    ["aa", "bb", "ccc", "dddd", "eeeee", "ffffff"],
])
def test_every_bucket_has_exact_length(words):
    d = Dictionary.build(words)
    for n in d.lengths():
        assert all(len(w) == n for w in d.words_of_length(n))


def test_dictionary_is_immutable():
    d = Dictionary.build(["abc", "def"])
    ws = d.words_of_length(3)
    with pytest.raises(AttributeError):
        ws.add("xyz")
    assert "abc" in d and "xyz" not in d and 3 not in d


# --- Words / letter frequencies ---

def test_words_frequencies():
    w = Words(["abc", "aab", "aba"])
    assert w.freqs["a"] == 5
    assert w.freqs["b"] == 3
    assert w.freqs["c"] == 1


def test_words_freq_counts_repeats():
    w = Words(["abc", "aab", "aba"])
    assert w.freq("abc") == 9
    assert w.freq("aaa") == 15
    assert w.freq("ddd") == 0


def test_words_unique_freq_counts_each_letter_once():
    w = Words(["abc", "aab", "aba"])
    assert w.unique_freq("abc") == 9
    assert w.unique_freq("aaa") == 5
    assert w.unique_freq("ddd") == 0


# --- Loading ---

def test_load_dictionary(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Crane\r\n raise \n\nCAT\n", encoding="utf-8")
    d = load_dictionary(p)
    assert d.words_of_length(5) == {"crane", "raise"}
    assert d.words_of_length(3) == {"cat"}


def test_read_lines_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "nope.txt")


# --- Word-list report ---

def test_describe_wordlist_happy_path(tmp_path: Path):
    p = tmp_path / "words.txt"
    _write(p, ["crane", "raise", "stare", "cat"])

    rep = describe_wordlist(p)
    assert rep["exists"] is True
    assert rep["words"] == 4 and rep["unique_words"] == 4
    assert rep["by_length"] == {3: 1, 5: 3}
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "words=4" in s and "lengths=3:1,5:3" in s


def test_describe_wordlist_flags_blanks_duplicates_and_non_alpha(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("crane\n\nCRANE\nab-c\n   \n", encoding="utf-8")

    rep = describe_wordlist(p)
    assert rep["lines"] == 5
    assert rep["blank_lines"] == 2
    assert rep["words"] == 3
    assert rep["unique_words"] == 2
    assert rep["non_alpha"] == 1


def test_describe_wordlist_missing_file(tmp_path: Path):
    rep = describe_wordlist(tmp_path / "nope.txt")
    assert rep["exists"] is False
    assert "MISSING" in pretty_summary(rep)
