"""
Benchmark: textmix matrices and traversal.

Measures:
    1. Matrix distances against the Levenshtein / rapidfuzz packages,
       when either is installed
    2. Cold vs warm (cached) traversal over every step of a path
    3. Word-level mixing throughput
    4. How matrix construction scales with input length
"""

import sys
import os
import time

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from textmix.core import (
    MatrixCache, EditOp, edit_distance, levenshtein_matrix, matrix_for,
    traverse, walk,
)
from textmix.mix import text_mix


STRING_PAIRS = [
    ("kitten", "sitting"),
    ("saturday", "sunday"),
    ("intention", "execution"),
    ("washington", "elvis"),
    ("pneumonoultramicroscopicsilicovolcanoconiosis",
     "pseudopseudohypoparathyroidism"),
    ("abcdefghijklmnopqrstuvwxyz", "zyxwvutsrqponmlkjihgfedcba"),
]

SENTENCE_PAIRS = [
    ("5 apples cost 3 dollars", "10 pears cost 7 dollars"),
    ("the quick brown fox jumps", "a lazy dog sleeps all day long"),
    ("version 1 of 12 released", "version 9 of 12 retired"),
]


def _try_import(name):
    """Safely attempt to import an optional dependency by name."""
    import importlib
    try:
        return importlib.import_module(name)
    except ImportError:
        return None


# ═══════════════════════════════════════════════════════════════════
#  BENCHMARKS
# ═══════════════════════════════════════════════════════════════════

def benchmark_distances():
    """Check matrix distances against reference packages."""
    print("=" * 70)
    print("  §1  DISTANCES vs REFERENCE PACKAGES")
    print("=" * 70)
    print()

    references = []
    lev = _try_import("Levenshtein")
    if lev is not None:
        references.append(("Levenshtein", lev.distance))
    rf = _try_import("rapidfuzz.distance")
    if rf is not None:
        references.append(("rapidfuzz", rf.Levenshtein.distance))

    if not references:
        print("  (neither Levenshtein nor rapidfuzz installed; "
              "pip install textmix[bench])")
        print()

    all_pass = True
    for s1, s2 in STRING_PAIRS:
        t0 = time.perf_counter()
        ours = levenshtein_matrix(s1, s2)[-1][-1]
        dt = time.perf_counter() - t0

        checks = []
        for name, fn in references:
            expected = fn(s1, s2)
            ok = expected == ours
            all_pass = all_pass and ok
            checks.append(f"{name}={expected}{'' if ok else ' ✗'}")

        print(f"  d(\"{s1[:20]}\", \"{s2[:20]}\") = {ours:>3}  "
              f"{'  '.join(checks)}  [{dt*1000:.2f}ms]")

    print()
    if references:
        print("  RESULT: " + ("all distances agree." if all_pass else "MISMATCH!"))
        print()


def benchmark_cached_traversal():
    """Traverse every step of each path, cold and warm."""
    print("=" * 70)
    print("  §2  TRAVERSAL (cold vs cached matrix)")
    print("=" * 70)
    print()

    for s1, s2 in STRING_PAIRS:
        cache = MatrixCache()
        d = edit_distance(s1, s2, cache)
        cache.clear()

        t0 = time.perf_counter()
        traverse(s1, s2, d, cache)
        cold = time.perf_counter() - t0

        t0 = time.perf_counter()
        for n in range(d + 1):
            traverse(s1, s2, n, cache)
        warm = (time.perf_counter() - t0) / (d + 1)

        steps = sum(1 for _ in walk(matrix_for(s1, s2, cache)))
        edits = sum(1 for s in walk(matrix_for(s1, s2, cache)) if s.op is not EditOp.NOOP)
        print(f"  {s1[:14]:>14} ← {s2[:14]:<14}  steps={steps:>3}  edits={edits:>3}  "
              f"cold={cold*1000:>7.2f}ms  warm={warm*1000:>7.3f}ms  "
              f"hits={cache.hits}")

    print()


def benchmark_text_mix():
    """Word-level mixing across a ratio sweep."""
    print("=" * 70)
    print("  §3  WORD-LEVEL MIXING")
    print("=" * 70)
    print()

    ratios = [i / 10 for i in range(11)]
    for t1, t2 in SENTENCE_PAIRS:
        t0 = time.perf_counter()
        outputs = [text_mix(t1, t2, r) for r in ratios]
        dt = time.perf_counter() - t0
        print(f"  {t1!r} → {t2!r}  [{dt*1000:.2f}ms for {len(ratios)} ratios]")
        for r, out in zip(ratios[::5], outputs[::5]):
            print(f"      {r:.1f}: {out}")
    print()


def benchmark_scaling():
    """How matrix construction scales with string length."""
    print("=" * 70)
    print("  §4  SCALING")
    print("=" * 70)
    print()

    for n in [10, 50, 100, 500]:
        a = "ab" * (n // 2)
        b = "ba" * (n // 2)

        t0 = time.perf_counter()
        m = levenshtein_matrix(a, b)
        dt = time.perf_counter() - t0

        print(f"  Length {n:>4}: d={m[-1][-1]:>5}  time={dt*1000:>8.2f}ms")

    print()


def main():
    print()
    print("╔══════════════════════════════════════════════════════════════════════╗")
    print("║          TEXT MIX — BENCHMARK SUITE                                  ║")
    print("║          textmix v0.1.0                                              ║")
    print("╚══════════════════════════════════════════════════════════════════════╝")
    print()

    benchmark_distances()
    benchmark_cached_traversal()
    benchmark_text_mix()
    benchmark_scaling()


if __name__ == "__main__":
    main()
