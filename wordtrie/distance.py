"""Edit-distance predicate used by the suggestion engine."""

from __future__ import annotations


def is_one_edit(a: str, b: str) -> bool:
    """True if *a* and *b* differ by at most one substitution, insertion
    or deletion.

    Identical strings count as within one edit. Transpositions are two
    edits.

    Parameters
    ----------
    a, b : str
        Strings to compare.

    Returns
    -------
    bool
    """
    la, lb = len(a), len(b)
    if abs(la - lb) > 1:
        return False

    i = j = 0
    edits = 0
    while i < la and j < lb:
        if a[i] == b[j]:
            i += 1
            j += 1
            continue

        edits += 1
        if edits > 1:
            return False
        if la > lb:
            i += 1          # deletion from a
        elif la < lb:
            j += 1          # insertion into a
        else:
            i += 1          # substitution
            j += 1
    return True
