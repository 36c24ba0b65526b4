import pytest
from packages.engine import (Color, ConflictError, InvalidFeedbackSymbol, Knowledge, LengthMismatch,
                             filter_candidates, simulate)

WORDS = ["abbey", "trust", "exalt", "crane", "trace", "crate", "pleat", "rusty", "burst", "hobby"]


def _passing(k: Knowledge, words=WORDS):
    return {w for w in words if k.check(w)}


def test_empty_knowledge_accepts_everything():
    k = Knowledge()
    assert k.is_empty
    assert _passing(k) == set(WORDS)
    assert k.check("cranes") is False


def test_all_grey_trust_against_abbey():
    k = Knowledge()
    k.add("trust", simulate("trust", "abbey"))
    assert not k.check("trust")
    assert k.check("abbey")
    # 't' is ruled out everywhere, so 'exalt' goes too
    assert not k.check("exalt")
    assert filter_candidates(["abbey", "trust", "exalt"], k) == ["abbey"]


def test_green_fixes_position():
    k = Knowledge()
    k.add("crane", "GBBBB")
    assert k.fixed_letters == ["c", None, None, None, None]
    assert "r" in k.excluded_letters[3]
    assert "c" not in k.excluded_letters[0]
    assert not k.is_empty


def test_yellow_requires_letter_in_open_positions():
    k = Knowledge()
    k.add("crane", "BYBBB")
    assert "r" in k.required_letters
    assert "r" in k.excluded_letters[1]
    assert k.check("rusty")
    assert k.check("burst")
    assert not k.check("hobby")


def test_green_clears_required_letter():
    k = Knowledge()
    k.add("crane", "BYBBB")
    k.add("rusty", "GBBBB")
    assert "r" not in k.required_letters
    assert k.fixed_letters[0] == "r"


def test_repeat_grey_is_only_local():
    k = Knowledge()
    # second 'e' grey while the first is yellow: only index 2 loses 'e'
    k.add("keeps", simulate("keeps", "abbey"))
    assert "e" in k.excluded_letters[1]
    assert "e" in k.excluded_letters[2]
    assert "e" not in k.excluded_letters[3]
    assert "e" in k.required_letters
    assert k.check("abbey")


def test_grey_does_not_exclude_fixed_letter():
    k = Knowledge()
    k.add("abate", simulate("abate", "abbey"))
    assert k.fixed_letters[:2] == ["a", "b"]
    assert "a" not in k.excluded_letters[0]
    assert "a" in k.excluded_letters[2]
    assert k.check("abbey")


@pytest.mark.parametrize("first,second,index", [
    # green at a position already fixed to another letter
    (("crane", "GBBBB"), ("trace", "GBBBB"), 0),
    # green for a letter already excluded at that position
    (("about", "YBBBB"), ("abbey", "GBBBB"), 0),
    # yellow for the letter already fixed there
    (("crane", "GBBBB"), ("cloth", "YBBBB"), 0),
    # yellow for a letter no open position can hold
    (("abcde", "BBBBB"), ("fghai", "BBBYB"), 3),
    # grey for a single letter that is already fixed elsewhere
    (("crane", "GBBBB"), ("fghci", "BBBBB"), 3),
    # grey for a repeated letter fixed at that very index
    (("crane", "GBBBB"), ("cczzz", "BGBBB"), 0),
])
def test_conflicts(first, second, index):
    k = Knowledge()
    k.add(*first)
    with pytest.raises(ConflictError) as ei:
        k.add(*second)
    assert ei.value.index == index
    assert ei.value.letter == second[0][index]
    assert ei.value.color is Color(second[1][index])
    assert second[0] in str(ei.value)


def test_repeat_grey_elsewhere_is_accepted():
    # documented partial check: only the own index is compared for repeats
    k = Knowledge()
    k.add("crane", "GBBBB")
    k.add("ccxyz", "GBBBB")
    assert "c" in k.excluded_letters[1]


def test_rejected_add_changes_nothing():
    k = Knowledge()
    k.add("crane", "GYBBB")
    before = (list(k.fixed_letters), [set(s) for s in k.excluded_letters], set(k.required_letters))
    passing = _passing(k)

    # 't' green at index 0 contradicts the fixed 'c'; nothing may be applied
    with pytest.raises(ConflictError):
        k.add("tours", "GBBBB")

    assert (k.fixed_letters, k.excluded_letters, k.required_letters) == before
    assert _passing(k) == passing


def test_conflict_late_in_word_discards_earlier_rules():
    k = Knowledge()
    k.add("crane", "GYBBB")
    before = (list(k.fixed_letters), [set(s) for s in k.excluded_letters], set(k.required_letters))

    # indices 0-2 are valid and would add rules; index 3 greens the excluded 'n'
    with pytest.raises(ConflictError) as ei:
        k.add("corny", "GYBGB")
    assert ei.value.index == 3

    assert k.fixed_letters == before[0]
    assert k.excluded_letters == before[1]
    assert k.required_letters == before[2]
    assert "o" not in k.required_letters


def test_symbol_sequences_are_rules_too():
    k = Knowledge()
    k.add("crane", ["g", "B", "B", "B", "B"])
    assert k.fixed_letters[0] == "c"
    with pytest.raises(ConflictError):
        k.add("trace", ["G", "B", "B", "B", "B"])


def test_unknown_symbol_in_sequence():
    k = Knowledge()
    with pytest.raises(InvalidFeedbackSymbol) as ei:
        k.add("crane", [Color.CORRECT, "X", "B", "B", "B"])
    assert ei.value.index == 1
    assert k.is_empty


def test_repeating_a_submission_is_accepted():
    k = Knowledge()
    k.add("crane", "GYBBB")
    k.add("crane", "GYBBB")
    assert k.fixed_letters[0] == "c"


def test_each_add_narrows_the_candidates():
    answer = "burst"
    k = Knowledge()
    passing = _passing(k)
    for guess in ["crane", "trust", "burst"]:
        k.add(guess, simulate(guess, answer))
        now = _passing(k)
        assert now <= passing
        assert answer in now
        passing = now


def test_length_mismatch():
    k = Knowledge()
    with pytest.raises(LengthMismatch):
        k.add("cranes", "GGGGGG")
    with pytest.raises(LengthMismatch):
        k.add("crane", [Color.CORRECT] * 4)
    assert k.is_empty


def test_clone_is_independent():
    k = Knowledge()
    k.add("crane", "BYBBB")
    c = k.clone()
    c.add("rusty", "GBBBB")
    assert k.fixed_letters[0] is None
    assert "u" not in k.excluded_letters[1]
    assert "r" in k.required_letters
    assert c.fixed_letters[0] == "r"


def test_count_pass_and_filter():
    k = Knowledge()
    k.add("crane", "BYBBB")
    assert k.count_pass(WORDS) == 2
    assert filter_candidates([" Rusty", "hobby", "burst", "b?rst"], k) == ["rusty", "burst"]
