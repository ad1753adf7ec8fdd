import pytest

from piiscan.models import DataSet, SimpleRecord
from piiscan.uniqueness import UniquenessStatus, count_unique, unique


def _rows(n):
    return [[f"k{i}", f"id{i}", "same"] for i in range(n)]


def test_count_unique_distinct_and_constant_columns():
    rows = _rows(6)
    counts = count_unique(rows, 3)
    assert len(counts) == 3
    assert counts[1] == len(rows)
    assert counts[2] == 0


def test_count_unique_ignores_key_column():
    rows = [["a", "x"], ["b", "x"]]
    assert count_unique(rows, 2)[0] == 0


def test_count_unique_strips_whitespace():
    rows = [["k1", "a"], ["k2", " a "], ["k3", "b"]]
    assert count_unique(rows, 2)[1] == 1


def test_count_unique_skips_missing_values():
    rows = [["k1", "a", "p"], ["k2", "b"], ["k3", "c", "q"]]
    counts = count_unique(rows, 3)
    assert counts[1] == 3
    assert counts[2] == 2


def test_count_unique_does_not_modify_rows():
    rows = [["k1", " a "]]
    count_unique(rows, 2)
    assert rows == [["k1", " a "]]


def test_unique_finds_distinct_column():
    rows = _rows(8)
    data = DataSet(records={1: SimpleRecord(rows=8, arrs=rows)}, rows=8, columns=3)
    report = unique(data, 50.0)
    assert report.status is UniquenessStatus.FOUND_UNIQUE_VALUES
    assert report.unique_columns == [1]
    assert report.num_columns == 3
    assert report.percentages[1] == 100.0
    assert report.percentages[2] == 0.0
    assert report.messages[0].startswith("col [1] uniqueness check successful")


def test_unique_threshold_not_reached():
    rows = [["k1", "a"], ["k2", "a"], ["k3", "b"], ["k4", "b"]]
    data = DataSet(records={1: SimpleRecord(rows=4, arrs=rows)}, rows=4, columns=2)
    report = unique(data, 10.0)
    assert report.status is UniquenessStatus.NO_UNIQUE_COLUMNS
    assert report.unique_columns == []
    assert report.messages == []


def test_unique_counts_per_partition():
    data = DataSet(
        records={
            1: SimpleRecord(rows=1, arrs=[["k1", "dup"]]),
            2: SimpleRecord(rows=1, arrs=[["k2", "dup"]]),
        },
        rows=2,
        columns=2,
    )
    report = unique(data, 100.0)
    assert report.unique_columns == [1]
    assert report.percentages[1] == 100.0


def test_unique_empty_dataset_reports_missing_columns():
    report = unique(DataSet(), 50.0)
    assert report.status is UniquenessStatus.MISSING_COLUMNS
    assert report.num_columns == 0


def test_unique_zero_rows_raises():
    data = DataSet(records={1: SimpleRecord(rows=1, arrs=[["k", "v"]])}, rows=0)
    with pytest.raises(ValueError):
        unique(data, 50.0)