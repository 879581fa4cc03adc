"""
textmix.core — Edit-path morphing between two strings
======================================================

OVERVIEW
════════

§1  THE MATRIX
──────────────

For two strings text1 (the destination) and text2 (the starting point)
we build the full Levenshtein matrix with unit costs:

    M[0][x] = x
    M[y][0] = y
    M[y][x] = min(
        M[y-1][x]   + 1,                          # up
        M[y][x-1]   + 1,                          # left
        M[y-1][x-1] + (text1[x-1] != text2[y-1]), # diagonal
    )

Rows index text2, columns index text1, so M has len(text2)+1 rows and
len(text1)+1 columns and M[-1][-1] is the edit distance.

Matrices are memoized per ordered pair (text1, text2) in a MatrixCache.
The default cache lives for the whole process and is unbounded unless
TEXTMIX_CACHE_MAX_ENTRIES says otherwise.


§2  BACKTRACKING
────────────────

Starting from the bottom-right cell, each step looks at the three
neighbours (up, left, diag) and moves along the cheapest one.  Ties are
broken in a fixed order so that paths are reproducible:

    diagonal  >  left  >  up

A diagonal move is a SUBSTITUTE when the value drops and a NOOP when it
does not.  A left move is an INSERT, an up move is a DELETE.  Once the
path reaches the first row only left moves remain, on the first column
only up moves.  next_step() itself only handles interior cells.


§3  TRAVERSAL
─────────────

traverse(text1, text2, n) copies text2 into a buffer and applies the
first n edits of the backtracking path to it:

    SUBSTITUTE  buffer[y] = text1[x]
    INSERT      buffer.insert(y, text1[x])
    DELETE      del buffer[x]

where (x, y) is the cell the step moved to.  NOOP steps move the cursor
but do not count towards n.  With n = 0 the result is text2; once n
reaches the number of edits on the path the result stops changing.

Inserts index the buffer with y and deletes with x.  After a run of
several inserts or deletes those two coordinates no longer line up with
buffer positions, so some intermediate (and final) strings look odd.
That is how the path has always been applied and it is kept as is.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterator, Optional

from .config import CACHE_MAX_ENTRIES
from .validation import check_text

logger = logging.getLogger(__name__)

Matrix = tuple[tuple[int, ...], ...]


# ═══════════════════════════════════════════════════════════════════
#  MATRIX CACHE
# ═══════════════════════════════════════════════════════════════════

class MatrixCache:
    """
    Memo store for edit-distance matrices, keyed by the ordered pair
    (text1, text2).

    max_entries=None or 0 keeps every matrix for the lifetime of the
    cache.  A positive limit drops the oldest entry once it is exceeded.

    All access goes through one lock, so two threads asking for the same
    missing pair compute it once.
    """

    def __init__(self, max_entries: Optional[int] = None):
        if max_entries is not None and max_entries < 0:
            raise ValueError(f"max_entries must be >= 0, got {max_entries}")
        self.max_entries = max_entries or None
        self._store: dict[tuple[str, str], Matrix] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: tuple[str, str]) -> bool:
        return key in self._store

    def __repr__(self) -> str:
        limit = self.max_entries if self.max_entries else "unbounded"
        return f"MatrixCache(entries={len(self._store)}, max_entries={limit})"

    def get(self, text1: str, text2: str) -> Optional[Matrix]:
        with self._lock:
            return self._store.get((text1, text2))

    def put(self, text1: str, text2: str, matrix: Matrix) -> None:
        with self._lock:
            self._insert((text1, text2), matrix)

    def get_or_compute(
        self, text1: str, text2: str,
        factory: Callable[[str, str], Matrix],
    ) -> Matrix:
        """Return the stored matrix for the pair, building it on a miss."""
        key = (text1, text2)
        with self._lock:
            matrix = self._store.get(key)
            if matrix is not None:
                self.hits += 1
                return matrix
            self.misses += 1
            logger.debug("matrix cache miss for %r / %r", text1, text2)
            matrix = factory(text1, text2)
            self._insert(key, matrix)
            return matrix

    def clear(self) -> None:
        """Drop every stored matrix and reset the counters."""
        with self._lock:
            dropped = len(self._store)
            self._store.clear()
            self.hits = 0
            self.misses = 0
        logger.debug("matrix cache cleared (%d entries dropped)", dropped)

    def _insert(self, key: tuple[str, str], matrix: Matrix) -> None:
        # caller holds the lock
        self._store[key] = matrix
        if self.max_entries and len(self._store) > self.max_entries:
            oldest = next(iter(self._store))
            del self._store[oldest]
            logger.debug("matrix cache evicted %r", oldest)


DEFAULT_CACHE = MatrixCache(max_entries=CACHE_MAX_ENTRIES)


def clear_cache() -> None:
    """Empty the process-wide matrix cache."""
    DEFAULT_CACHE.clear()


# ═══════════════════════════════════════════════════════════════════
#  EDIT-DISTANCE MATRIX
# ═══════════════════════════════════════════════════════════════════

def levenshtein_matrix(text1: str, text2: str) -> Matrix:
    """
    Full Levenshtein DP matrix, rows over text2 and columns over text1.

    Unlike a two-row distance computation the whole table is kept,
    since backtracking needs every cell.  Empty inputs give a single row
    or a single column.
    """
    n = len(text1)
    m = len(text2)

    rows = [list(range(n + 1))]
    for y in range(1, m + 1):
        prev = rows[-1]
        curr = [y] + [0] * n
        for x in range(1, n + 1):
            cost = 0 if text1[x - 1] == text2[y - 1] else 1
            curr[x] = min(
                prev[x] + 1,         # up
                curr[x - 1] + 1,     # left
                prev[x - 1] + cost,  # diagonal
            )
        rows.append(curr)

    return tuple(tuple(row) for row in rows)


def matrix_for(text1: str, text2: str, cache: Optional[MatrixCache] = None) -> Matrix:
    """
    Cached matrix for the ordered pair (text1, text2).

    matrix_for(a, b) and matrix_for(b, a) are separate entries.
    """
    check_text("text1", text1)
    check_text("text2", text2)
    if cache is None:
        cache = DEFAULT_CACHE
    return cache.get_or_compute(text1, text2, levenshtein_matrix)


def edit_distance(text1: str, text2: str, cache: Optional[MatrixCache] = None) -> int:
    """Levenshtein distance, read off the cached matrix."""
    return matrix_for(text1, text2, cache)[-1][-1]


# ═══════════════════════════════════════════════════════════════════
#  BACKTRACKING
# ═══════════════════════════════════════════════════════════════════

class EditOp(Enum):
    """Kinds of step along a backtracking path."""
    NOOP = auto()        # Diagonal, characters already match
    SUBSTITUTE = auto()  # Diagonal, overwrite one character
    INSERT = auto()      # Left, add a character of text1
    DELETE = auto()      # Up, remove a character of text2


@dataclass(frozen=True, slots=True)
class EditStep:
    """
    One move of the path walker.

    value is the matrix value of the cell the move started from,
    (x, y) is the cell it moved to.
    """
    value: int
    op: EditOp
    x: int
    y: int

    def __repr__(self) -> str:
        return f"EditStep({self.op.name}, value={self.value}, to=({self.x}, {self.y}))"


def _check_cell(matrix: Matrix, x: int, y: int) -> None:
    if not (0 <= y < len(matrix) and 0 <= x < len(matrix[0])):
        raise ValueError(f"cell ({x}, {y}) is outside the matrix")


def next_step(matrix: Matrix, x: int, y: int) -> EditStep:
    """
    Pick the next move from interior cell (x, y) towards the origin.

    Tie-break order is diagonal, then left, then up.  Needs x > 0 and
    y > 0: raises ValueError on the first row or column, and for cells
    outside the matrix.  walk() handles the edges.
    """
    _check_cell(matrix, x, y)
    if x == 0 or y == 0:
        raise ValueError(f"cell ({x}, {y}) is on the matrix edge, next_step needs x > 0 and y > 0")

    val = matrix[y][x]
    up = matrix[y - 1][x]
    left = matrix[y][x - 1]
    diag = matrix[y - 1][x - 1]
    low = min(up, left, diag)

    if diag == 0 or diag <= low:
        op = EditOp.SUBSTITUTE if diag < val else EditOp.NOOP
        return EditStep(val, op, x - 1, y - 1)
    if left == 0 or left <= low:
        return EditStep(val, EditOp.INSERT, x - 1, y)
    return EditStep(val, EditOp.DELETE, x, y - 1)


def walk(matrix: Matrix, x: Optional[int] = None, y: Optional[int] = None) -> Iterator[EditStep]:
    """
    Yield every step from (x, y) to the origin.

    Starts from the bottom-right cell when no position is given.  Interior
    cells go through next_step.  Once the cursor reaches the first row the
    remaining moves are INSERTs, on the first column they are DELETEs.
    """
    if x is None:
        x = len(matrix[0]) - 1
    if y is None:
        y = len(matrix) - 1
    _check_cell(matrix, x, y)

    while x > 0 or y > 0:
        if y == 0:
            step = EditStep(matrix[y][x], EditOp.INSERT, x - 1, y)
        elif x == 0:
            step = EditStep(matrix[y][x], EditOp.DELETE, x, y - 1)
        else:
            step = next_step(matrix, x, y)
        yield step
        x, y = step.x, step.y


# ═══════════════════════════════════════════════════════════════════
#  TRAVERSAL
# ═══════════════════════════════════════════════════════════════════

def apply_step(buffer: list[str], step: EditStep, text1: str) -> None:
    """Apply one edit step to the working buffer in place."""
    if step.op is EditOp.NOOP:
        return

    if step.op is EditOp.SUBSTITUTE:
        if step.y < len(buffer):
            buffer[step.y] = text1[step.x]
        else:
            buffer.append(text1[step.x])
    elif step.op is EditOp.INSERT:
        buffer.insert(step.y, text1[step.x])
    elif step.op is EditOp.DELETE:
        # Slice deletion: past the end of the buffer this is a no-op.
        del buffer[step.x:step.x + 1]


def traverse(
    text1: str, text2: str, iterations: int,
    cache: Optional[MatrixCache] = None,
) -> str:
    """
    Morph text2 towards text1 by applying `iterations` edits.

    Edits are taken from the backtracking path of the pair's matrix,
    starting at the bottom-right corner.  NOOP steps are free.  Returns
    text2 for iterations=0 and stops changing once the path is used up.

        traverse("kitten", "sitting", 1)  →  "sittin"
        traverse("kitten", "sitting", 2)  →  "sitten"
        traverse("kitten", "sitting", 3)  →  "kitten"
    """
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")

    matrix = matrix_for(text1, text2, cache)
    buffer = list(text2)
    remaining = iterations

    for step in walk(matrix):
        if remaining == 0:
            break
        apply_step(buffer, step, text1)
        if step.op is not EditOp.NOOP:
            remaining -= 1
            logger.debug("applied %r -> %r", step, "".join(buffer))

    return "".join(buffer)
