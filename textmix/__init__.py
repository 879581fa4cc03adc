"""
textmix
=======

Blend two strings into something in between.

    traverse("kitten", "sitting", 2)        → "sitten"
    text_mix("5 apples", "10 apples", 0.5)  → "8 apples"

Two strategies live side by side:

  • Edit-path morphing (traverse): walk the Levenshtein matrix of the pair
    back from its bottom-right corner and apply the first N edits to the
    second string.  N = 0 gives the second string, enough edits give the
    first.
  • Ratio mixing (text_mix): pair up whitespace-separated words,
    interpolate numbers linearly and splice everything else character by
    character according to the ratio.

Both are deterministic.  Matrices are memoized per ordered string pair in
a MatrixCache; clear_cache() empties the process-wide one.
"""

import logging

from textmix.core import (
    # Matrix
    Matrix,
    MatrixCache,
    DEFAULT_CACHE,
    clear_cache,
    levenshtein_matrix,
    matrix_for,
    edit_distance,
    # Backtracking
    EditOp,
    EditStep,
    next_step,
    walk,
    # Traversal
    apply_step,
    traverse,
)
from textmix.mix import pick, string_mix, number_mix, text_mix
from textmix.numeric import is_numeric, parse_number

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "Matrix", "MatrixCache", "DEFAULT_CACHE", "clear_cache",
    "levenshtein_matrix", "matrix_for", "edit_distance",
    "EditOp", "EditStep", "next_step", "walk",
    "apply_step", "traverse",
    "pick", "string_mix", "number_mix", "text_mix",
    "is_numeric", "parse_number",
]
