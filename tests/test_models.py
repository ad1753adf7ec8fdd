from piiscan.models import ColumnResults, DataSet, PIIColumn, SimpleRecord


def test_copy_is_deep():
    original = SimpleRecord(rows=2, arrs=[["k1", "a"], ["k2", "b"]])
    clone = original.copy()
    clone.arrs[0][1] = "changed"
    clone.arrs.append(["k3", "c"])
    assert original.arrs == [["k1", "a"], ["k2", "b"]]
    assert clone.rows == original.rows


def test_copy_equal_to_original():
    original = SimpleRecord(rows=1, arrs=[["x", "y"]])
    assert original.copy() == original


def test_partitions_sorted_by_key():
    r1 = SimpleRecord(rows=1, arrs=[["a"]])
    r2 = SimpleRecord(rows=1, arrs=[["b"]])
    r3 = SimpleRecord(rows=1, arrs=[["c"]])
    data = DataSet(records={3: r3, 1: r1, 2: r2}, rows=3)
    assert list(data.partitions()) == [(1, r1), (2, r2), (3, r3)]


def test_partitions_empty():
    assert list(DataSet().partitions()) == []


def test_default_containers_not_shared():
    first = PIIColumn()
    second = PIIColumn()
    first.column.append("EMAIL")
    assert second.column == []
    a = ColumnResults()
    b = ColumnResults()
    a.columns[1] = ["v"]
    assert b.columns == {}