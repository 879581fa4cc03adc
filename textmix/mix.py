"""
textmix.mix — Blending two texts by a ratio.

    text_mix("5 apples", "10 apples", 0.5)   →  "8 apples"
    string_mix("cat", "dog", 0.5)            →  "dot"

A ratio of 0 leans fully on the first input, 1 fully on the second.
Ratios outside [0, 1] are not clamped; they extrapolate.

WORDS:
    Both texts are split on single spaces and paired by position.  A pair
    of numeric tokens is interpolated linearly and rounded.  Any other
    pair is mixed character by character.  A side that runs out of
    tokens contributes empty strings.

CHARACTERS:
    The output length moves linearly from len(text1) to len(text2).
    Index i takes text2[i] while i < ratio * max(len(text1), len(text2))
    and text1[i] after that, so text2 "grows in" from the left.  Past the
    end of either input the other one supplies the character.
"""

import logging
import math
import random
from typing import Optional, Union

from .validation import check_text
from .numeric import is_numeric, parse_number

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  CHARACTER LEVEL
# ═══════════════════════════════════════════════════════════════════

def pick(
    text1: str, text2: str, idx: int, ratio: float,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Character at position `idx` of the mix of text1 and text2.

    Positional by default.  With an `rng` the choice between the two
    inputs is a coin flip weighted by `ratio` instead.
    """
    if idx >= len(text1):
        return text2[idx] if idx < len(text2) else ""
    if idx >= len(text2):
        return text1[idx]

    if rng is not None:
        return text2[idx] if rng.random() < ratio else text1[idx]

    n_max = max(len(text1), len(text2))
    return text2[idx] if idx < ratio * n_max else text1[idx]


def string_mix(
    text1: str, text2: str, ratio: float,
    rng: Optional[random.Random] = None,
) -> str:
    """Mix two strings character by character."""
    check_text("text1", text1)
    check_text("text2", text2)
    length = len(text1) + math.floor((len(text2) - len(text1)) * ratio)
    return "".join(pick(text1, text2, i, ratio, rng) for i in range(length))


# ═══════════════════════════════════════════════════════════════════
#  WORD LEVEL
# ═══════════════════════════════════════════════════════════════════

def number_mix(num1: float, num2: float, ratio: float) -> Union[int, float]:
    """
    Linear interpolation between two numbers, rounded half up.

    Fractions are lost: number_mix(0.2, 0.4, 0.5) is 0.  A result too
    large for a float (only reachable near the float limits or with huge
    ratios) comes back unrounded as inf, -inf or nan.
    """
    value = num1 * (1 - ratio) + num2 * ratio
    if not math.isfinite(value):
        return value
    # TODO: keep the significant digits of the inputs instead of rounding to int
    floored = math.floor(value)
    return floored + (value - floored >= 0.5)


def text_mix(
    text1: str, text2: str, ratio: float,
    rng: Optional[random.Random] = None,
) -> str:
    """Mix two texts word by word."""
    check_text("text1", text1)
    check_text("text2", text2)

    words1 = text1.split(" ")
    words2 = text2.split(" ")
    n_max = max(len(words1), len(words2))

    out: list[str] = []
    for i in range(n_max):
        w1 = words1[i] if i < len(words1) else ""
        w2 = words2[i] if i < len(words2) else ""
        if is_numeric(w1) and is_numeric(w2):
            mixed = str(number_mix(parse_number(w1), parse_number(w2), ratio))
            logger.debug("token %d: numeric %r / %r -> %s", i, w1, w2, mixed)
        else:
            mixed = string_mix(w1, w2, ratio, rng)
            logger.debug("token %d: text %r / %r -> %r", i, w1, w2, mixed)
        out.append(mixed)

    return " ".join(out)
