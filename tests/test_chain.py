from collections import Counter

import pytest

from wordloop.chain import (
    WordError,
    count_loops,
    has_balanced_letters,
    last_char,
    loop_and_merge,
    merge,
    solve,
    validate_word,
)
from wordloop.dlist import DList


def _is_closed_chain(words):
    return all(
        last_char(words[k]) == words[(k + 1) % len(words)][0]
        for k in range(len(words))
    )


def test_last_char_skips_soft_and_hard_signs():
    assert last_char("конь") == "н"
    assert last_char("съезд") == "д"
    assert last_char("сады") == "д"
    assert last_char("объём") == "м"


@pytest.mark.parametrize(
    "word, fragment",
    [
        ("Кот", "заглавную букву"),
        ("cat", "недопустимый символ"),
        ("ьма", "начинается на недопустимый символ"),
        ("мыь", "недопустимую комбинацию букв"),
    ],
)
def test_validate_word_errors(word, fragment):
    with pytest.raises(WordError, match=fragment):
        validate_word(word)


def test_validate_word_accepts_lowercase_russian():
    validate_word("ёж")
    validate_word("а")
    with pytest.raises(WordError):
        validate_word("")


def test_balanced_letters():
    assert has_balanced_letters(["кот", "том", "мак"])
    assert not has_balanced_letters(["кот", "том"])
    assert has_balanced_letters(DList(["конь", "нос", "сок"]))


def test_solve_simple_cycle():
    words = ["кот", "мак", "том"]
    result = solve(words)
    assert Counter(result) == Counter(words)
    assert _is_closed_chain(result)


def test_solve_with_soft_sign():
    words = ["сок", "конь", "нос"]
    result = solve(words)
    assert Counter(result) == Counter(words)
    assert _is_closed_chain(result)


def test_solve_merges_two_loops():
    words = ["аб", "ба", "бв", "вб"]
    result = solve(words)
    assert Counter(result) == Counter(words)
    assert _is_closed_chain(result)


def test_solve_merge_needing_rotation():
    words = ["ав", "ва", "бг", "гв", "вб"]
    result = solve(words)
    assert Counter(result) == Counter(words)
    assert _is_closed_chain(result)


def test_solve_unbalanced_returns_none():
    assert solve(["кот", "том"]) is None


def test_solve_disconnected_returns_none():
    assert solve(["аа", "бб"]) is None


def test_solve_rejects_bad_and_empty_input():
    with pytest.raises(WordError):
        solve(["кот", "Том"])
    with pytest.raises(ValueError):
        solve([])


def test_loop_and_merge_counts():
    dlist = DList(["аа", "бб"])
    loops = loop_and_merge(dlist.begin(), dlist.back(), dlist)
    assert len(loops) == 2
    assert count_loops(loops, dlist) == 2

    joined = DList(["аб", "ба", "бв", "вб"])
    loops = loop_and_merge(joined.begin(), joined.back(), joined)
    assert count_loops(loops, joined) == 1
    assert _is_closed_chain(list(joined))


def test_merge_rotates_second_loop():
    dlist = DList(["ав", "ва", "бг", "гв", "вб"])
    first = dlist.begin()
    assert merge(first, first + 1, first + 2, dlist.back())
    result = list(dlist)
    assert len(result) == 5
    assert _is_closed_chain(result)


def test_merge_fails_without_common_letter():
    dlist = DList(["аа", "бб"])
    assert not merge(dlist.begin(), dlist.begin(), dlist.back(), dlist.back())
    assert list(dlist) == ["аа", "бб"]