"""
Stress tests / adversarial evaluation of textmix.

This script tries to BREAK the claimed properties:
  1. Matrix recurrence and boundary rows
  2. Walker: every path ends at the origin, edit count == distance
  3. Traversal: endpoints, saturation, never raising
  4. Cache: one shared matrix per ordered pair, bounded eviction
  5. Character mixing: length formula for arbitrary ratios
  6. Word mixing: numeric interpolation and token padding
"""

import sys, os, random, string, time, itertools
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from textmix.core import (
    MatrixCache, EditOp, levenshtein_matrix, matrix_for, walk, traverse,
)
from textmix.mix import string_mix, number_mix, text_mix
from textmix.numeric import is_numeric


def test(name, condition, detail=""):
    status = "PASS" if condition else "FAIL"
    print(f"  [{status}] {name}" + (f"  ({detail})" if detail else ""))
    return condition


def random_text(max_len=8, alphabet="abc"):
    return "".join(random.choice(alphabet) for _ in range(random.randint(0, max_len)))


random.seed(42)

# Every string of length ≤ 4 over {a, b, c}
all_strings = [""]
for length in range(1, 5):
    for combo in itertools.product("abc", repeat=length):
        all_strings.append("".join(combo))

sample_pairs = random.sample(
    [(s1, s2) for s1 in all_strings for s2 in all_strings],
    min(2000, len(all_strings) ** 2)
)


# ═══════════════════════════════════════════════════════════════
#  §1  MATRIX RECURRENCE
# ═══════════════════════════════════════════════════════════════

print("=" * 70)
print("  §1  MATRIX RECURRENCE — exhaustive small cases")
print("=" * 70)

bad = 0
for s1, s2 in sample_pairs:
    m = levenshtein_matrix(s1, s2)
    if m[0] != tuple(range(len(s1) + 1)) or [r[0] for r in m] != list(range(len(s2) + 1)):
        bad += 1
        continue
    for y in range(1, len(s2) + 1):
        for x in range(1, len(s1) + 1):
            if m[y][x] != min(m[y - 1][x] + 1, m[y][x - 1] + 1,
                              m[y - 1][x - 1] + (s1[x - 1] != s2[y - 1])):
                bad += 1

test("Recurrence + boundaries (2000 pairs, len≤4)", bad == 0, f"{bad} bad cells")


# ═══════════════════════════════════════════════════════════════
#  §2  WALKER
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §2  WALKER — paths reach the origin with distance-many edits")
print("=" * 70)

wrong_count = 0
stuck = 0
for s1, s2 in sample_pairs:
    m = levenshtein_matrix(s1, s2)
    x, y = len(s1), len(s2)
    edits = 0
    for step in walk(m):
        if not (step.x <= x and step.y <= y and (step.x, step.y) != (x, y)):
            stuck += 1
            break
        x, y = step.x, step.y
        if step.op is not EditOp.NOOP:
            edits += 1
    if (x, y) != (0, 0):
        stuck += 1
    if edits != m[-1][-1]:
        wrong_count += 1
        if wrong_count <= 5:
            print(f"    MISMATCH: {s1!r} ← {s2!r}: {edits} edits, distance {m[-1][-1]}")

test("Cursor strictly decreases to (0, 0)", stuck == 0, f"{stuck} stuck paths")
test("Edits on path == edit distance", wrong_count == 0, f"{wrong_count} mismatches")


# ═══════════════════════════════════════════════════════════════
#  §3  TRAVERSAL
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §3  TRAVERSAL — endpoints and saturation")
print("=" * 70)

start_ok = all(traverse(s1, s2, 0) == s2 for s1, s2 in sample_pairs)
test("traverse(a, b, 0) == b", start_ok)

identity_ok = all(traverse(s, s, n) == s for s in all_strings for n in (0, 1, 5))
test("traverse(s, s, n) == s", identity_ok)

saturation_bad = 0
reached = 0
errors = 0
for s1, s2 in sample_pairs:
    d = matrix_for(s1, s2)[-1][-1]
    try:
        settled = traverse(s1, s2, d)
        if any(traverse(s1, s2, d + k) != settled for k in (1, 2, 10)):
            saturation_bad += 1
        if settled == s1:
            reached += 1
    except Exception as exc:
        errors += 1
        if errors <= 5:
            print(f"    ERROR: traverse({s1!r}, {s2!r}, {d}) raised {exc!r}")

test("Never raises", errors == 0, f"{errors} errors")
test("Saturation past the edit distance", saturation_bad == 0,
     f"{saturation_bad} pairs kept changing")
print(f"  [INFO] {reached}/{len(sample_pairs)} pairs land exactly on text1 "
      f"(inserts and deletes index different coordinates)")

long_errors = 0
for _ in range(200):
    s1 = random_text(30, string.ascii_lowercase[:6])
    s2 = random_text(30, string.ascii_lowercase[:6])
    for n in (0, 1, 3, 10, 100):
        try:
            traverse(s1, s2, n)
        except Exception:
            long_errors += 1
test("Never raises on longer random strings (200 pairs)", long_errors == 0,
     f"{long_errors} errors")


# ═══════════════════════════════════════════════════════════════
#  §4  CACHE
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §4  CACHE")
print("=" * 70)

cache = MatrixCache()
results = [traverse("washington", "elvis", n, cache) for n in range(12)]
test("One miss, many hits for one pair", cache.misses == 1 and cache.hits == 11,
     f"misses={cache.misses} hits={cache.hits}")
test("Known endpoint", results[-1] == "washington", results[-1])

bounded = MatrixCache(max_entries=16)
for s1, s2 in sample_pairs[:200]:
    matrix_for(s1, s2, bounded)
test("Bounded cache respects max_entries", len(bounded) <= 16, f"{len(bounded)} entries")


# ═══════════════════════════════════════════════════════════════
#  §5  CHARACTER MIXING
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §5  CHARACTER MIXING — length formula")
print("=" * 70)

length_bad = 0
for _ in range(2000):
    s1 = random_text(10)
    s2 = random_text(10)
    ratio = random.uniform(0, 1)
    expected = len(s1) + int((len(s2) - len(s1)) * ratio // 1)
    if len(string_mix(s1, s2, ratio)) != max(expected, 0):
        length_bad += 1
test("Output length for ratios in [0, 1]", length_bad == 0, f"{length_bad} mismatches")

extrap_errors = 0
for _ in range(500):
    try:
        string_mix(random_text(10), random_text(10), random.uniform(-3, 3))
    except Exception:
        extrap_errors += 1
test("Extrapolating ratios never raise", extrap_errors == 0, f"{extrap_errors} errors")

endpoints_ok = all(string_mix(s1, s2, 0) == s1 and string_mix(s1, s2, 1) == s2
                   for s1, s2 in sample_pairs)
test("ratio 0 → text1, ratio 1 → text2", endpoints_ok)


# ═══════════════════════════════════════════════════════════════
#  §6  WORD MIXING
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  §6  WORD MIXING")
print("=" * 70)

interp_bad = 0
for _ in range(1000):
    a = random.randint(-1000, 1000)
    b = random.randint(-1000, 1000)
    r = random.choice([0, 0.25, 0.5, 0.75, 1])
    out = text_mix(f"{a} items", f"{b} items", r)
    if out != f"{number_mix(a, b, r)} items":
        interp_bad += 1
test("Numeric tokens interpolate", interp_bad == 0, f"{interp_bad} mismatches")

count_bad = 0
for _ in range(500):
    w1 = " ".join(random_text(5) or "x" for _ in range(random.randint(1, 6)))
    w2 = " ".join(random_text(5) or "y" for _ in range(random.randint(1, 6)))
    out = text_mix(w1, w2, random.uniform(0, 1))
    if len(out.split(" ")) != max(len(w1.split(" ")), len(w2.split(" "))):
        count_bad += 1
test("Token count == max of both sides", count_bad == 0, f"{count_bad} mismatches")

test("nan / inf are not numeric",
     not any(is_numeric(t) for t in ("nan", "inf", "-inf", "Infinity")))

t0 = time.perf_counter()
for _ in range(1000):
    text_mix("the 3 quick foxes", "a 12 lazy dogs", 0.5)
dt = time.perf_counter() - t0
print(f"  [INFO] 1000 text_mix calls: {dt*1000:.1f}ms")


# ═══════════════════════════════════════════════════════════════
#  SUMMARY
# ═══════════════════════════════════════════════════════════════

print()
print("=" * 70)
print("  STRESS TEST SUMMARY")
print("=" * 70)
print("  If you see FAIL above, there's a bug.")
print("  If everything is PASS, the implementation is correct")
print("  for the tested cases (not a proof, but high confidence).")
