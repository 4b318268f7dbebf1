"""Arranging Russian words into a single closed chain of last and first letters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from wordloop.dlist import Cursor, DList

_LOWER = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"
_UPPER = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
_BAD_LETTERS = "ьъы"


class WordError(ValueError):
    """A word that cannot take part in the chain."""


def last_char(word: str) -> str:
    """The last letter of ``word`` that counts for chaining (skipping ь, ъ or ы)."""
    if word[-1] in _BAD_LETTERS:
        return word[-2]
    return word[-1]


def validate_word(word: str) -> None:
    """Raise :class:`WordError` unless ``word`` is a usable lowercase Russian word."""
    if not word:
        raise WordError("Пустое слово!")
    for letter in word:
        if letter not in _LOWER:
            if letter in _UPPER:
                raise WordError(
                    f'Слово "{word}" содержит заглавную букву! '
                    "(Используйте только строчные буквы)"
                )
            raise WordError(
                f'Слово "{word}" содержит недопустимый символ "{letter}"! '
                "(слова могут содержать только буквы русского алфавита)"
            )
    if word[0] in _BAD_LETTERS:
        raise WordError(
            f'Слово "{word}" начинается на недопустимый символ "{word[0]}"! '
            "(слова не могут начинаться на ь, ъ или ы)"
        )
    if len(word) > 1 and word[-2] in _BAD_LETTERS and word[-1] in _BAD_LETTERS:
        raise WordError(
            f'Слово "{word}" кончается на недопустимую комбинацию букв "{word[-2:]}"!'
        )


def has_balanced_letters(words: Iterable[str]) -> bool:
    """True if every letter starts exactly as many words as it ends."""
    firsts: Counter[str] = Counter()
    lasts: Counter[str] = Counter()
    for word in words:
        firsts[word[0]] += 1
        lasts[last_char(word)] += 1
    return firsts == lasts


def _grow_chain(front: Cursor, dlist: DList) -> Cursor:
    """Pull matching words next to each other starting at ``front``; return the chain's end."""
    end = dlist.end()
    current = front
    while True:
        wanted = last_char(current.value)
        candidate = current + 1
        while candidate != end and candidate.value[0] != wanted:
            candidate = candidate + 1
        if candidate == end:
            return current
        (current + 1).pull(candidate)
        current = candidate


def loop_and_merge(
    front: Cursor, back: Cursor, dlist: DList
) -> list[tuple[Cursor, Cursor]]:
    """Split the list from ``front`` into chains, then splice later chains into earlier ones.

    Returns one ``(front, back)`` pair per chain; chains that were spliced into
    another are replaced by a pair of end cursors.  ``back`` marks the last
    word of the range, which always runs to the end of ``dlist``.
    """
    del back
    end = dlist.end()
    segments: list[tuple[Cursor, Cursor]] = []
    segment_front = front
    while True:
        segment_back = _grow_chain(segment_front, dlist)
        segments.append((segment_front, segment_back))
        if segment_back == dlist.back():
            break
        segment_front = segment_back + 1

    loops: list[tuple[Cursor, Cursor]] = []
    for segment_front, segment_back in reversed(segments):
        for index, (other_front, other_back) in enumerate(loops):
            if other_front != end and merge(
                segment_front, segment_back, other_front, other_back
            ):
                loops[index] = (end, end)
        loops.append((segment_front, segment_back))
    return loops


def merge(front1: Cursor, back1: Cursor, front2: Cursor, back2: Cursor) -> bool:
    """Try to splice loop ``front2..back2`` into loop ``front1..back1``, rotating it as needed."""
    start = front2
    while True:
        stop = back1 + 1
        cursor = front1
        while cursor != stop:
            if cursor.value[0] == front2.value[0]:
                cursor.pull_range(front2, back2)
                return True
            cursor = cursor + 1
        if front2 != back2:
            back2 = back2 - 1
            front2.pull(back2 + 1)
            front2 = front2 - 1
        if front2 == start:
            return False


def count_loops(loops: Iterable[tuple[Cursor, Cursor]], dlist: DList) -> int:
    """Number of loops left that were not merged into another one."""
    end = dlist.end()
    return sum(1 for loop_front, _ in loops if loop_front != end)


def solve(words: Iterable[str]) -> list[str] | None:
    """Order ``words`` into one closed chain, or return None if there is none.

    Raises :class:`WordError` for an unusable word and :class:`ValueError`
    when no words are given.
    """
    dlist = DList()
    for word in words:
        validate_word(word)
        dlist.append(word)
    if not dlist:
        raise ValueError("no words given")
    if not has_balanced_letters(dlist):
        return None
    loops = loop_and_merge(dlist.begin(), dlist.back(), dlist)
    if count_loops(loops, dlist) != 1:
        return None
    return list(dlist)