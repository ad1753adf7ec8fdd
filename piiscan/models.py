"""Core data structures shared by the scanning and scrambling code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class SimpleRecord:
    """One partition of a data set: a block of rows of string fields."""

    rows: int = 0
    arrs: list[list[str]] = field(default_factory=list)

    def copy(self) -> SimpleRecord:
        """Return a deep copy whose rows can be changed independently."""
        return SimpleRecord(rows=self.rows, arrs=[list(row) for row in self.arrs])


@dataclass
class DataSet:
    """A tabular data set split into numbered partitions."""

    records: dict[int, SimpleRecord] = field(default_factory=dict)
    rows: int = 0
    columns: int = 0
    header: list[str] = field(default_factory=list)

    def partitions(self) -> Iterator[tuple[int, SimpleRecord]]:
        """Yield ``(key, record)`` pairs in ascending key order."""
        for key in sorted(self.records):
            yield key, self.records[key]


@dataclass
class PIIColumn:
    """The PII types found in one column, with the matching values."""

    column: list[str] = field(default_factory=list)
    col_ind: int = 0
    column_data: list[str] = field(default_factory=list)


@dataclass
class ColumnResults:
    """The values of one partition regrouped by column index."""

    columns: dict[int, list[str]] = field(default_factory=dict)
    row_partition: int = 0