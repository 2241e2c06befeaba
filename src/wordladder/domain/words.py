"""Word normalization and the one-edit adjacency rule.

Two words are adjacent when exactly one character edit turns one into
the other: a substitution (same length), an insertion or a deletion
(lengths differ by one). Equal words are never adjacent.

INVARIANT: ``is_adjacent_words(a, b) == is_adjacent_words(b, a)``.
"""

from __future__ import annotations

from wordladder.domain.types import EditKind


def normalize_word(raw: str) -> str | None:
    """Trim and uppercase *raw*. Returns None for blank input.

    Examples:
        >>> normalize_word("  cat\\n")
        'CAT'
        >>> normalize_word("   ") is None
        True
    """
    word = raw.strip().upper()
    return word or None


def _differs_by_one_substitution(w1: str, w2: str) -> bool:
    mismatches = 0
    for a, b in zip(w1, w2, strict=True):
        if a != b:
            mismatches += 1
            if mismatches > 1:
                return False
    return mismatches == 1


def _differs_by_one_deletion(long: str, short: str) -> bool:
    """Check that removing one character of *long* yields *short*.

    Any valid deletion point sits at or after the first mismatch, and
    deleting exactly at the first mismatch works whenever some deletion
    does, so one prefix scan plus one suffix comparison covers every
    candidate position.
    """
    i = 0
    while i < len(short) and long[i] == short[i]:
        i += 1
    # Either the extra character is the last one or the suffixes line up.
    return long[i + 1 :] == short[i:]


def is_adjacent_words(w1: str, w2: str) -> bool:
    """Return True if *w1* and *w2* differ by exactly one character edit.

    Examples:
        >>> is_adjacent_words("CAT", "CATS")
        True
        >>> is_adjacent_words("AAB", "AB")
        True
        >>> is_adjacent_words("CAT", "CAT")
        False
    """
    if w1 == w2:
        return False
    diff = len(w1) - len(w2)
    if diff == 0:
        return _differs_by_one_substitution(w1, w2)
    if diff == 1:
        return _differs_by_one_deletion(w1, w2)
    if diff == -1:
        return _differs_by_one_deletion(w2, w1)
    return False


def edit_kind(w1: str, w2: str) -> EditKind | None:
    """Classify the edit that turns *w1* into *w2*, or None if not adjacent.

    ``INSERTION`` means *w2* is *w1* with one character added.
    """
    if not is_adjacent_words(w1, w2):
        return None
    if len(w1) == len(w2):
        return EditKind.SUBSTITUTION
    if len(w2) > len(w1):
        return EditKind.INSERTION
    return EditKind.DELETION
