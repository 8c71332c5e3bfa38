from typing import TypeVar

from .pair import KeyValuePair
from .sequence import Sequence, UniqueSequence
from .shared import printf
from .table import Table

K = TypeVar("K")

RADIX_BASE = 10

Ranked = Sequence[KeyValuePair[K, int]]


_debug_trace_passes = False


def set_debug_trace_passes(b: bool):
    global _debug_trace_passes
    _debug_trace_passes = b


def rank(pairs: Ranked) -> Ranked:
    """Order (key, count) pairs by count, highest first.

    LSD radix sort over base-10 digits. Each pass is a stable counting sort,
    so pairs with equal counts keep their input order. Counts must be
    non-negative integers.
    """
    if pairs.is_empty():
        return pairs

    max_count = 0
    for pair in pairs:
        if pair.value < 0:
            raise ValueError(f"cannot rank negative count {pair.value!r}")
        max_count = max(max_count, pair.value)

    exp = 1
    while max_count // exp > 0:
        pairs = _counting_sort_by_digit(pairs, exp)
        exp *= RADIX_BASE

    return pairs


def _counting_sort_by_digit(pairs: Ranked, exp: int) -> Ranked:
    n = pairs.size()
    output: Ranked = Sequence(n)
    for _ in range(n):
        output.add(None)

    count = [0] * RADIX_BASE
    for pair in pairs:
        count[_digit(pair.value, exp)] += 1

    # count[d] becomes the end of the bucket for digit d, largest digit first
    for d in range(RADIX_BASE - 2, -1, -1):
        count[d] += count[d + 1]

    for i in range(n - 1, -1, -1):
        pair = pairs.get(i)
        digit = _digit(pair.value, exp)
        count[digit] -= 1
        output.set(count[digit], pair)

    if _debug_trace_passes:
        printf("pass exp={0:d}\n", exp)
        printf("{0:s}\n", " ".join(str(pair.value) for pair in output))

    return output


def _digit(value: int, exp: int) -> int:
    return (value // exp) % RADIX_BASE


def top_keys(pairs: Ranked, n: int) -> UniqueSequence[K]:
    """Keys of the first n ranked pairs, with repeated keys dropped.

    The prefix is cut before deduplication, so duplicate keys in the input
    can leave fewer than n keys.
    """
    ranked = rank(pairs)
    result: UniqueSequence[K] = UniqueSequence()
    for i in range(min(n, ranked.size())):
        result.add(ranked.get(i).key)
    return result


def rank_table(table: Table[K, int]) -> Ranked:
    return rank(table.items())
