import random

import pytest
from codebreaker.engine import (
    Feedback, InvalidCodeError, InvalidFeedbackError, all_codes, filter_candidates, format_code,
    parse_code, score,
)

# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("secret,guess,expected", [
    ("rryb", "rrry", (2, 1)),
    ("rybg", "rryy", (1, 1)),
    ("rybg", "rybg", (4, 0)),
    ("rybg", "gbyr", (0, 4)),
    ("rrrr", "rmmm", (1, 0)),
    ("rmmm", "rrrr", (1, 0)),
    ("ccbb", "bbcc", (0, 4)),
    ("yyrr", "ryyy", (1, 2)),
    ("mcgb", "ccmm", (1, 1)),
    ("rybg", "mmcc", (0, 0)),
])
def test_score_golden(secret, guess, expected):
    assert score(secret, guess) == Feedback(*expected)

def test_score_is_case_and_space_insensitive():
    assert score("R R Y B", ["r", "R", "r", "Y"]) == Feedback(2, 1)

def test_score_self_is_exact_for_every_code():
    for code in all_codes():
        assert score(code, code) == Feedback(4, 0)

def test_score_conservation_and_symmetry_sample():
    rng = random.Random(0)
    codes = all_codes()
    for _ in range(2000):
        a, b = rng.choice(codes), rng.choice(codes)
        fb = score(a, b)
        assert fb.exact + fb.partial <= 4
        assert score(b, a) == fb

@pytest.mark.parametrize("secret,guess", [
    ("rry", "rryy"),
    ("rryy", "rryyy"),
    ("rrxy", "rryy"),
    ("rryy", ["r", "r", "y", 5]),
    ("", "rryy"),
])
def test_score_rejects_invalid_codes(secret, guess):
    with pytest.raises(InvalidCodeError):
        score(secret, guess)

def test_invalid_code_is_a_value_error():
    with pytest.raises(ValueError):
        parse_code("purple")

def test_parse_and_format_code():
    assert parse_code(" R r y Y ") == ("r", "r", "y", "y")
    assert parse_code(("g", "b", "c", "m")) == ("g", "b", "c", "m")
    assert format_code(("g", "b", "c", "m")) == "gbcm"
    with pytest.raises(InvalidCodeError):
        parse_code(42)

def test_all_codes_universe():
    codes = all_codes()
    assert len(codes) == 1296
    assert len(set(codes)) == 1296
    assert codes[0] == ("r", "r", "r", "r")

def test_feedback_value():
    fb = Feedback(4, 0)
    assert fb.solved
    exact, partial = Feedback(1, 2)
    assert (exact, partial) == (1, 2)
    assert not Feedback(3, 0).solved
    assert str(Feedback(2, 1)) == "2/1"

@pytest.mark.parametrize("exact,partial", [(3, 2), (-1, 0), (0, 5), (1.0, 0)])
def test_feedback_rejects_out_of_range(exact, partial):
    with pytest.raises(InvalidFeedbackError):
        Feedback(exact, partial)

def test_filter_candidates_exact_hit():
    cand = filter_candidates(all_codes(), [("rryy", Feedback(4, 0))])
    assert cand == [("r", "r", "y", "y")]

def test_filter_candidates_no_hit_removes_colors():
    cand = filter_candidates(all_codes(), [("rryy", (0, 0))])
    assert len(cand) == 4 ** 4
    assert all("r" not in c and "y" not in c for c in cand)

def test_filter_candidates_history_and_order():
    codes = [parse_code(c) for c in ["yrbc", "gbcm", "rrbb", "ryyb", "rybg", "mmcc"]]
    history = [("rryy", Feedback(1, 1))]
    cand = filter_candidates(codes, history)
    assert cand == [parse_code("yrbc"), parse_code("rybg")]

@pytest.mark.parametrize("raw", [
    ["r", "r", "y", ["y"]],
    ["r", "r", "y", None],
    ("r", "r", "y", {"y": 1}),
])
def test_parse_code_rejects_non_string_symbols(raw):
    with pytest.raises(InvalidCodeError):
        parse_code(raw)
