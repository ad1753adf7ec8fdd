"""Row shuffling and key scrambling for anonymising data sets."""

from __future__ import annotations

import os
import random
from concurrent.futures import ThreadPoolExecutor

from piiscan.models import DataSet, SimpleRecord

KEY_LENGTH = 9

_DIGIT_MAP = str.maketrans("0123456789", "1804296573")

# Output position p takes the character at input position _POSITION_SOURCE[p].
_POSITION_SOURCE = (1, 7, 3, 6, 5, 8, 0, 2, 4)


def shuffle_record(record: SimpleRecord, rng: random.Random | None = None) -> SimpleRecord:
    """Shuffle the rows of ``record`` in place and return it."""
    rng = rng or random.Random()
    count = len(record.arrs)
    if count <= 1:
        return record
    rows = record.arrs
    for i in range(count):
        j = rng.randrange(count)
        if i != j:
            rows[i], rows[j] = rows[j], rows[i]
    return record


def shuffle_rows(
    data: DataSet,
    rng: random.Random | None = None,
    max_workers: int | None = None,
) -> None:
    """Replace every partition of ``data`` with a shuffled deep copy.

    Each partition is shuffled in parallel with its own generator, seeded
    from ``rng`` in key order, so a seeded ``rng`` gives repeatable results.
    """
    rng = rng or random.Random()
    workers = max_workers or os.cpu_count() or 1
    jobs = [
        (key, record.copy(), random.Random(rng.getrandbits(64)))
        for key, record in data.partitions()
    ]
    if not jobs:
        return
    with ThreadPoolExecutor(max_workers=workers) as pool:
        shuffled = pool.map(lambda job: (job[0], shuffle_record(job[1], job[2])), jobs)
        for key, record in shuffled:
            data.records[key] = record


def check_leading_zero(key: str) -> str:
    """Left-pad ``key`` with zeros to nine characters."""
    return key.rjust(KEY_LENGTH, "0")


def reassign_key_digits(key: str) -> str:
    """Substitute each decimal digit of ``key`` by a fixed permutation."""
    return key.translate(_DIGIT_MAP)


def scramble_key_positions(key: str) -> str:
    """Reorder the first nine characters of ``key`` by a fixed permutation."""
    if len(key) < KEY_LENGTH:
        raise ValueError(f"key must have at least {KEY_LENGTH} characters, got {len(key)}")
    return "".join(key[src] for src in _POSITION_SOURCE)