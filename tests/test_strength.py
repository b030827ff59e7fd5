from passgen.strength import (
    CHECKED_SPECIAL_CHARS,
    StrengthLevel,
    classify,
    points_to_strength,
    score_points,
)


def test_reference_passwords():
    assert classify("") == StrengthLevel.VERY_WEAK
    assert classify("foo") == StrengthLevel.VERY_WEAK
    assert classify("Foo") == StrengthLevel.WEAK
    assert classify("Foo1") == StrengthLevel.MEDIUM
    assert classify("Foo1!") == StrengthLevel.STRONG
    assert classify("Foo1!Bar2?96") == StrengthLevel.VERY_STRONG


def test_classify_is_deterministic():
    for pw in ["", "foo", "Foo1!Bar2?96", "%%%%", "ÄÖü123"]:
        assert classify(pw) == classify(pw)


def test_points_table():
    expected = [
        StrengthLevel.VERY_WEAK,
        StrengthLevel.VERY_WEAK,
        StrengthLevel.WEAK,
        StrengthLevel.MEDIUM,
        StrengthLevel.STRONG,
        StrengthLevel.VERY_STRONG,
    ]
    assert [points_to_strength(p) for p in range(6)] == expected


def test_points_out_of_range():
    for bad in (-1, 6):
        try:
            points_to_strength(bad)
            raised = False
        except ValueError:
            raised = True
        assert raised


def test_length_must_exceed_ten():
    assert score_points("aaaaaaaaaa") == 1  # exactly 10
    assert score_points("aaaaaaaaaaa") == 2


def test_only_neutral_symbols_scores_like_empty():
    assert score_points("%$&") == 0
    assert classify("%$&") == classify("")


def test_special_chars_differ_from_generator_set():
    # '@' counts here, '#' does not, even though the generator emits '#'
    assert CHECKED_SPECIAL_CHARS == "?!@"
    assert score_points("@") == 1
    assert score_points("#") == 0


def test_unicode_case_and_digits():
    assert score_points("é") == 1
    assert score_points("É") == 1
    assert score_points("٣") == 1  # Arabic-Indic digit three


def test_labels_and_ordering():
    assert [str(s) for s in StrengthLevel] == [
        "very weak", "weak", "medium", "strong", "very strong",
    ]
    assert StrengthLevel.WEAK < StrengthLevel.STRONG
    assert classify("Foo1!").label == "strong"
