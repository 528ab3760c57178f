"""Stable comparator-driven sorts.

Every sort here works in place on any mutable indexable sequence that
supports ``len(seq)``, ``seq[i]`` and ``seq[i] = value``. Comparators follow
the three-way convention: negative when ``a`` orders before ``b``, zero when
they rank equal, positive otherwise. Elements that rank equal keep their
original relative order.
"""

from functools import cmp_to_key
from typing import Any, Callable, List, MutableSequence, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[T, T], int]

INSERTION_SORT_THRESHOLD = 16


def _check_comparator(comparator: Any) -> None:
    if not callable(comparator):
        raise ValueError("comparator must be callable")


def insertion_sort(seq: MutableSequence[T], comparator: Comparator,
                   lo: int = 0, hi: Optional[int] = None) -> None:
    _check_comparator(comparator)
    if hi is None:
        hi = len(seq)
    if lo < 0 or hi > len(seq) or lo > hi:
        raise IndexError("insertion_sort: range out of bounds")
    _insertion_sort(seq, comparator, lo, hi)


def _insertion_sort(seq: MutableSequence[T], comparator: Comparator, lo: int, hi: int) -> None:
    for i in range(lo + 1, hi):
        value = seq[i]
        j = i - 1
        # strict comparison keeps equal elements in place
        while j >= lo and comparator(seq[j], value) > 0:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = value


def merge_sort(seq: MutableSequence[T], comparator: Comparator) -> None:
    """Sort ``seq`` in place with a top-down merge sort.

    The elements are copied into a working list once, sorted there and
    written back, so ``seq`` only needs element get/set by index.
    """
    _check_comparator(comparator)
    n = len(seq)
    if n < 2:
        return
    items: List[T] = [seq[i] for i in range(n)]
    scratch: List[T] = items[:]
    _merge_sort(items, scratch, 0, n, comparator)
    for i in range(n):
        seq[i] = items[i]


def _merge_sort(items: List[T], scratch: List[T], lo: int, hi: int, comparator: Comparator) -> None:
    if hi - lo <= INSERTION_SORT_THRESHOLD:
        _insertion_sort(items, comparator, lo, hi)
        return

    mid = (lo + hi) // 2
    _merge_sort(items, scratch, lo, mid, comparator)
    _merge_sort(items, scratch, mid, hi, comparator)

    if comparator(items[mid - 1], items[mid]) <= 0:
        return

    scratch[lo:hi] = items[lo:hi]
    i, j, k = lo, mid, lo
    while i < mid and j < hi:
        # ties take the left run first
        if comparator(scratch[j], scratch[i]) < 0:
            items[k] = scratch[j]
            j += 1
        else:
            items[k] = scratch[i]
            i += 1
        k += 1

    # leftover right-run elements are already in their final slots
    while i < mid:
        items[k] = scratch[i]
        i += 1
        k += 1


def builtin_sort(seq: MutableSequence[T], comparator: Comparator) -> None:
    """Sort ``seq`` in place using Python's (stable) built-in sort."""
    _check_comparator(comparator)
    n = len(seq)
    ordered = sorted((seq[i] for i in range(n)), key=cmp_to_key(comparator))
    for i in range(n):
        seq[i] = ordered[i]
