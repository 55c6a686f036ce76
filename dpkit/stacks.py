"""Stack manipulations on plain lists whose last element is the top."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

__all__ = ["delete_middle", "reverse_stack", "sort_stack", "sorted_recursive"]

T = TypeVar("T")


def delete_middle(stack: list[T]) -> T:
    """Remove and return the middle element of ``stack``.

    The middle is the ``ceil(len / 2)``-th element counted from the top.
    """
    if not stack:
        raise IndexError("delete_middle from an empty stack")
    return stack.pop(len(stack) // 2)


def reverse_stack(stack: list[T]) -> None:
    """Reverse ``stack`` in place, so the old bottom becomes the top."""
    stack.reverse()


def sort_stack(stack: list[T]) -> None:
    """Sort ``stack`` in place so that its largest element is on top."""
    stack.sort()


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def sorted_recursive(items: Iterable[T]) -> list[T]:
    """New ascending list of ``items``, sorted stably by recursive merging."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = len(values) // 2
    return _merge(sorted_recursive(values[:middle]), sorted_recursive(values[middle:]))