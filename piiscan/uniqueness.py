"""Column uniqueness checks over partitioned data sets."""

from __future__ import annotations

import logging
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Sequence

from piiscan.models import DataSet

log = logging.getLogger(__name__)


class UniquenessStatus(IntEnum):
    """Outcome of a uniqueness check."""

    NO_UNIQUE_COLUMNS = 0
    MISSING_COLUMNS = 1
    FOUND_UNIQUE_VALUES = 2


@dataclass
class UniquenessReport:
    """What a uniqueness check found."""

    status: UniquenessStatus
    num_columns: int = 0
    unique_columns: list[int] = field(default_factory=list)
    percentages: dict[int, float] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)
    elapsed: float = 0.0


def count_unique(rows: Sequence[Sequence[str]], expected_cols: int) -> list[int]:
    """Count, per column, the values that occur exactly once in ``rows``.

    Column 0 is the key column and is not counted. Values are compared
    after stripping surrounding whitespace.
    """
    counts = [0] * max(expected_cols, 0)
    for ix in range(1, expected_cols):
        occurrences: Counter[str] = Counter()
        for row_ind, row in enumerate(rows):
            if ix < len(row):
                occurrences[row[ix].strip()] += 1
            else:
                log.debug("Missing column value at row %d and column %d", row_ind, ix)
        counts[ix] = sum(1 for n in occurrences.values() if n == 1)
    return counts


def unique(data: DataSet, threshold: float) -> UniquenessReport:
    """Find the columns whose share of unique values reaches ``threshold`` percent.

    Unique values are counted per partition and summed, then taken as a
    percentage of the data set's total row count.
    """
    started = time.monotonic()
    partitions = [record for _, record in data.partitions()]
    first = partitions[0] if partitions else None
    expected_cols = len(first.arrs[0]) if first is not None and first.arrs else 0

    if expected_cols == 0:
        log.warning("expecting at least 2 columns")
        return UniquenessReport(
            status=UniquenessStatus.MISSING_COLUMNS,
            elapsed=time.monotonic() - started,
        )
    if data.rows <= 0:
        raise ValueError("data set reports no rows")

    totals = [0] * expected_cols
    with ThreadPoolExecutor() as pool:
        for counts in pool.map(lambda rec: count_unique(rec.arrs, expected_cols), partitions):
            for ix, value in enumerate(counts):
                totals[ix] += value

    report = UniquenessReport(status=UniquenessStatus.NO_UNIQUE_COLUMNS, num_columns=expected_cols)
    for ix in range(1, expected_cols):
        percentage = totals[ix] / data.rows * 100
        report.percentages[ix] = percentage
        log.info("unique percentage %f for the column index %d", percentage, ix)
        if percentage >= threshold:
            report.unique_columns.append(ix)
            msg = (
                f"col [{ix}] uniqueness check successful. found (%) {percentage:2.2f} unique, "
                f"threshold (%) {threshold:2.2f}. Sample values below:"
            )
            log.info(msg)
            report.messages.append(msg)

    report.elapsed = time.monotonic() - started
    log.info("uniqueness check complete time %.6fs", report.elapsed)
    if report.unique_columns:
        report.status = UniquenessStatus.FOUND_UNIQUE_VALUES
    return report