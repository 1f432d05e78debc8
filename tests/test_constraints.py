import pytest
from wordle_solver.engine import Chooser, Puzzle, score


def test_scenario_abz_excludes_def():
    chooser = Chooser()
    chooser.fold(Puzzle("abc").check("abz"))
    assert chooser.fixed_position == {0: "a", 1: "b"}
    assert chooser.excluded_letters == {"z"}
    assert chooser.filter({"abc", "def", "abz"}) == {"abc"}


def test_wrong_place_bans_position_and_requires_letter():
    chooser = Chooser()
    chooser.fold(score("bad", "abc"))     # Y Y -
    assert chooser.excluded_position[0] == {"b"}
    assert chooser.excluded_position[1] == {"a"}
    assert chooser.required_letters == {"a", "b"}
    assert chooser.excluded_letters == {"d"}
    words = {"abc", "bad", "cab", "xyz", "abd", "bca"}
    assert chooser.filter(words) == {"abc"}


def test_excluded_positions_accumulate_across_rounds():
    chooser = Chooser()
    chooser.add_wrong_place(0, "b")
    chooser.add_wrong_place(0, "c")
    assert not chooser.accepts("bxa")
    assert not chooser.accepts("cxa")
    assert not chooser.accepts("xyz")   # b and c still required
    assert chooser.accepts("abc")


def test_positive_fact_clears_absent_letter():
    chooser = Chooser()
    chooser.add_absent("a")
    chooser.add_exact(0, "a")
    assert "a" not in chooser.excluded_letters
    chooser.add_absent("b")
    chooser.add_wrong_place(1, "b")
    assert "b" not in chooser.excluded_letters


def test_absent_retracts_fixed_positions():
    chooser = Chooser()
    chooser.add_exact(0, "a")
    chooser.add_exact(2, "a")
    chooser.add_exact(1, "b")
    chooser.add_wrong_place(1, "a")
    chooser.add_absent("a")
    assert chooser.fixed_position == {1: "b"}
    assert "a" not in chooser.required_letters
    assert chooser.excluded_letters == {"a"}


def test_no_letter_is_both_required_and_excluded():
    chooser = Chooser()
    for guess in ["xyz", "bca", "abz", "cab"]:
        chooser.fold(score(guess, "abc"))
        positive = set(chooser.fixed_position.values()) | chooser.required_letters
        assert not positive & chooser.excluded_letters


@pytest.mark.parametrize("answer", ["crane", "level", "geese", "abbey"])
def test_filter_keeps_answer_and_never_grows(answer):
    words = {"crane", "level", "geese", "abbey", "stare", "leech", "bleed", "eerie", "keyed"}
    chooser = Chooser()
    candidates = set(words)
    for guess in sorted(words):
        chooser.fold(score(guess, answer))
        filtered = chooser.filter(candidates)
        assert filtered <= candidates
        assert answer in filtered
        candidates = filtered


def test_unsolved_guess_rejects_itself():
    for guess in ["abz", "cab", "xyz", "aaa"]:
        chooser = Chooser()
        chooser.fold(score(guess, "abc"))
        assert not chooser.accepts(guess)
