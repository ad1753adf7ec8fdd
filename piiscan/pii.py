"""Column-wise PII detection using regular expressions and a name classifier."""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from piiscan.models import ColumnResults, DataSet, PIIColumn, SimpleRecord

log = logging.getLogger(__name__)

NAME_LABEL = "NAME"
NAME_SCORE_THRESHOLD = 0.8
NAME_SHARE_THRESHOLD = 0.5

NameScorer = Callable[[str], float]


@dataclass(frozen=True)
class PIIFormat:
    """A named PII type with the pattern that recognises it."""

    name: str
    regex: str


@dataclass(frozen=True)
class CompiledPIIFormat:
    """A PII type whose pattern has been compiled."""

    name: str
    regex: re.Pattern[str]


def compile_formats(formats: Iterable[PIIFormat]) -> list[CompiledPIIFormat]:
    """Compile each format's pattern, leaving out those that do not compile."""
    compiled = []
    for fmt in formats:
        try:
            pattern = re.compile(fmt.regex)
        except re.error as exc:
            log.error("Error compiling regex for %s: %s", fmt.name, exc)
            continue
        compiled.append(CompiledPIIFormat(name=fmt.name, regex=pattern))
    return compiled


def join_columns(partition: int, record: SimpleRecord) -> ColumnResults:
    """Regroup a partition's rows by column, leaving out the key column 0."""
    result = ColumnResults(row_partition=partition)
    for row in record.arrs:
        for col_idx, value in enumerate(row):
            if col_idx != 0:
                result.columns.setdefault(col_idx, []).append(value)
    return result


def select_partitions(data: DataSet, percent: int | str) -> list[int]:
    """Return the keys of the leading partitions that cover ``percent`` of the rows.

    Partitions are taken in key order until their row count reaches the limit.
    """
    percent = int(percent)
    limit = (data.rows * percent) // 100
    log.info("Total dataset rows count: %d", data.rows)
    log.info("PII data limit percent: %d", percent)
    log.info("PII data limit count: %d", limit)

    selected = []
    count = 0
    for key, record in data.partitions():
        if count >= limit:
            break
        count += int(record.rows)
        selected.append(key)
    log.info("Limit data Record count %d", count)
    return selected


def detect_pii_column(
    col_idx: int,
    values: Sequence[str],
    patterns: Sequence[CompiledPIIFormat],
    is_name: NameScorer | None = None,
    hide_data: bool = False,
) -> PIIColumn:
    """Find the PII types present in one column.

    Each value is labelled with the first pattern it matches. ``is_name``
    scores a value as a personal name; when more than the score threshold
    holds for at least half the values, the column is labelled ``NAME``.
    """
    log.debug("Doing PII detect for index: %d", col_idx)
    found: list[str] = []
    column_data: list[str] = []

    for value in values:
        for pattern in patterns:
            if pattern.regex.search(value):
                log.debug("Matching: %s, pattern: %s", value, pattern.name)
                if pattern.name not in found:
                    found.append(pattern.name)
                if not hide_data:
                    column_data.append(value)
                break

    if is_name is not None and values:
        name_count = sum(
            1 for value in values if value and float(is_name(value)) > NAME_SCORE_THRESHOLD
        )
        if name_count / len(values) >= NAME_SHARE_THRESHOLD and NAME_LABEL not in found:
            found.append(NAME_LABEL)

    return PIIColumn(column=found, col_ind=col_idx, column_data=column_data)


def detect_pii(
    data: DataSet | None,
    hash_keys: Iterable[int] = (),
    formats: Iterable[PIIFormat] = (),
    is_name: NameScorer | None = None,
    percent: int | str = 100,
    hide_data: bool = False,
) -> dict[int, list[PIIColumn]]:
    """Scan a sample of ``data`` for columns holding PII.

    Returns the columns in which anything was found, keyed by column index.
    Columns listed in ``hash_keys`` are not scanned.
    """
    log.info("Starting PII detection process")
    if data is None or not data.records:
        log.info("No data provided or empty dataset")
        return {}

    selected = select_partitions(data, percent)
    if not selected:
        return {}

    columns: dict[int, list[str]] = {}
    with ThreadPoolExecutor() as pool:
        joined = pool.map(lambda key: join_columns(key, data.records[key]), selected)
        for result in joined:
            for col_idx, values in result.columns.items():
                columns.setdefault(col_idx, []).extend(values)

    patterns = compile_formats(formats)
    skipped = set(hash_keys)
    targets = [(idx, vals) for idx, vals in sorted(columns.items()) if idx not in skipped]

    found: dict[int, list[PIIColumn]] = {}
    with ThreadPoolExecutor() as pool:
        detected = pool.map(
            lambda item: detect_pii_column(item[0], item[1], patterns, is_name, hide_data),
            targets,
        )
        for column in detected:
            if column.column:
                found.setdefault(column.col_ind, []).append(column)
    return found