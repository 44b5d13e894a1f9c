#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/myers.py
"""Line-level alignment with Myers' shortest edit script.

The forward pass explores the edit graph one edit at a time. For every step
``d`` it records the furthest ``x`` reached on each diagonal ``k = x - y``
in an immutable :class:`Frontier`. The frontiers form an arena indexed by
step, which the backward pass reads to reconstruct the path without any
shared mutable state.

Running time is O((N + M) * D) and the arena holds O(D^2) integers, where D
is the number of inserted plus deleted lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from codediff.constants import EditTag
from codediff.diff.normalize import fold_whitespace

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Edit:
    """One step of an edit script.

    ``equal`` edits carry both indices, ``delete`` only ``left_index`` and
    ``insert`` only ``right_index``. Indices are zero-based.
    """

    tag: EditTag
    left_index: int | None
    right_index: int | None

    @classmethod
    def equal(cls, left_index: int, right_index: int) -> "Edit":
        return cls("equal", left_index, right_index)

    @classmethod
    def delete(cls, left_index: int) -> "Edit":
        return cls("delete", left_index, None)

    @classmethod
    def insert(cls, right_index: int) -> "Edit":
        return cls("insert", None, right_index)


@dataclass(frozen=True, slots=True)
class Frontier:
    """Furthest reach on every diagonal after ``step`` edits.

    ``reach[i]`` belongs to diagonal ``k = 2 * i - step``.
    """

    step: int
    reach: tuple[int, ...]

    def x_at(self, k: int) -> int:
        return self.reach[(k + self.step) // 2]


def _moves_down(k: int, d: int, previous: Frontier) -> bool:
    """Whether diagonal ``k`` at step ``d`` is entered from ``k + 1`` (an insert).

    The boundary diagonals have a single neighbour; elsewhere the neighbour
    with the larger reach wins and ties go to the diagonal below (a delete).
    """
    if k == -d:
        return True
    if k == d:
        return False
    return previous.x_at(k - 1) < previous.x_at(k + 1)


def _forward(a: Sequence[str], b: Sequence[str]) -> list[Frontier]:
    """Explore the edit graph and return the frontier arena.

    The returned list holds one frontier per completed step before the one
    that reached ``(len(a), len(b))``; its length is therefore the edit
    distance.
    """
    n, m = len(a), len(b)
    arena: list[Frontier] = []
    previous: Frontier | None = None

    for d in range(n + m + 1):
        reach: list[int] = []
        for k in range(-d, d + 1, 2):
            if previous is None:
                x = 0
            elif _moves_down(k, d, previous):
                x = previous.x_at(k + 1)
            else:
                x = previous.x_at(k - 1) + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            if x >= n and y >= m:
                return arena
            reach.append(x)
        previous = Frontier(d, tuple(reach))
        arena.append(previous)

    raise AssertionError("edit graph search did not terminate")  # pragma: no cover


def _backtrack(arena: list[Frontier], n: int, m: int) -> list[Edit]:
    """Walk back from ``(n, m)`` and return the edits in document order."""
    x, y = n, m
    edits: list[Edit] = []

    for d in range(len(arena), 0, -1):
        previous = arena[d - 1]
        k = x - y
        prev_k = k + 1 if _moves_down(k, d, previous) else k - 1
        prev_x = previous.x_at(prev_k)
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            edits.append(Edit.equal(x, y))
        if x > prev_x:
            x -= 1
            edits.append(Edit.delete(x))
        else:
            y -= 1
            edits.append(Edit.insert(y))

    while x > 0 and y > 0:
        x -= 1
        y -= 1
        edits.append(Edit.equal(x, y))

    edits.reverse()
    return edits


def shortest_edit_script(
    left_lines: Sequence[str],
    right_lines: Sequence[str],
    ignore_whitespace: bool = False,
) -> list[Edit]:
    """Compute a minimal edit script turning ``left_lines`` into ``right_lines``.

    Parameters
    ----------
    left_lines : Sequence[str]
        Lines of the original document
    right_lines : Sequence[str]
        Lines of the modified document
    ignore_whitespace : bool, default False
        Compare lines after :func:`fold_whitespace`

    Returns
    -------
    list of Edit
        Edits in document order. The number of ``delete`` plus ``insert``
        edits equals the minimal edit distance. Two empty inputs give an
        empty list.

    Examples
    --------
    >>> [e.tag for e in shortest_edit_script(["a", "b"], ["a", "c"])]
    ['equal', 'delete', 'insert']

    """
    if ignore_whitespace:
        a: Sequence[str] = [fold_whitespace(line) for line in left_lines]
        b: Sequence[str] = [fold_whitespace(line) for line in right_lines]
    else:
        a, b = left_lines, right_lines

    n, m = len(a), len(b)
    if n == 0 and m == 0:
        return []

    arena = _forward(a, b)
    logger.debug("Aligned %d left and %d right lines with %d edits", n, m, len(arena))
    return _backtrack(arena, n, m)
