# piiscan

Tools for inspecting partitioned tabular data before it is shared:

- **PII detection** (`piiscan.pii`): check columns against named regular
  expressions and an optional name scorer, and report which columns look like
  personal data.
- **Uniqueness** (`piiscan.uniqueness`): count the values that occur exactly
  once in each column and flag columns unique enough to act as identifiers.
- **Scrambling** (`piiscan.scramble`): shuffle rows within each partition and
  obscure nine-character keys by padding, digit substitution and position
  scrambling.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Data model

`piiscan.models` defines:

- `SimpleRecord(rows, arrs)`: one partition; `arrs` is a list of rows, each a
  list of strings. `copy()` returns a deep copy.
- `DataSet(records, rows, columns, header)`: `records` maps partition keys to
  `SimpleRecord`s and `rows` is the total row count. `partitions()` yields
  `(key, record)` pairs in ascending key order.
- `PIIColumn(column, col_ind, column_data)`: the PII labels found in one
  column and, optionally, the matching values.
- `ColumnResults(columns, row_partition)`: one partition's values regrouped by
  column index.

Column 0 of every row is treated as the key column and is skipped by the PII
and uniqueness checks.

## PII detection

```python
from piiscan.pii import PIIFormat, detect_pii

formats = [PIIFormat(name="EMAIL", regex=r"[^@\s]+@example\.com")]
result = detect_pii(
    data,
    hash_keys=[],
    formats=formats,
    is_name=lambda value: 0.0,
    percent=100,
    hide_data=True,
)
for col_idx, findings in result.items():
    print(col_idx, [f.column for f in findings])
```

- `percent` (an int or a numeric string) limits how much of the data set is
  scanned: partitions are taken in key order until their row count reaches
  that share of `data.rows` (`select_partitions` does this selection).
- Columns listed in `hash_keys` are not checked.
- Each value is labelled with the first pattern that matches anywhere in it
  (`re.search`); each label appears once per column. Patterns that fail to
  compile are logged and left out (`compile_formats`).
- `is_name` is any callable returning a score for a value. Non-empty values
  scoring above 0.8 count as names; when they make up at least half of the
  column's values, the column is labelled `NAME`.
- With `hide_data=False` the values that matched a pattern are kept in each
  result's `column_data`.
- Only columns with at least one label appear in the result, which maps a
  column index to a list of `PIIColumn`.
- `detect_pii` returns an empty dict for `None` or an empty data set.

`join_columns(partition, record)` and `detect_pii_column(col_idx, values,
patterns, is_name, hide_data)` are the per-partition and per-column steps and
can be used on their own.

## Uniqueness

```python
from piiscan.uniqueness import unique, UniquenessStatus

report = unique(data, threshold=90.0)
if report.status is UniquenessStatus.FOUND_UNIQUE_VALUES:
    print(report.unique_columns, report.percentages)
```

The number of columns is taken from the first row of the first partition; if
there is none, the status is `MISSING_COLUMNS`. Unique values are counted per
partition after stripping whitespace, summed, and taken as a percentage of
`data.rows`; a `ValueError` is raised if `data.rows` is not positive. The
`UniquenessReport` carries `status`, `num_columns`, `unique_columns`,
`percentages`, `messages` and `elapsed` (seconds).

`count_unique(rows, expected_cols)` gives the per-column count of values that
appear exactly once in a list of rows (index 0 is always 0).

## Scrambling

```python
import random
from piiscan.scramble import (
    shuffle_rows, check_leading_zero, reassign_key_digits, scramble_key_positions,
)

shuffle_rows(data, rng=random.Random(7), max_workers=4)

key = scramble_key_positions(reassign_key_digits(check_leading_zero("12345")))
```

- `shuffle_rows` replaces every partition with a shuffled deep copy, in
  parallel; a seeded `rng` gives repeatable results. `shuffle_record` shuffles
  one record in place.
- `check_leading_zero` left-pads a key with zeros to nine characters.
- `reassign_key_digits` replaces each digit by a fixed substitution
  (0→1, 1→8, 2→0, 3→4, 4→2, 5→9, 6→6, 7→5, 8→7, 9→3); other characters are
  kept.
- `scramble_key_positions` reorders the first nine characters in a fixed
  pattern and raises `ValueError` for keys shorter than nine characters.

## What the package does not do

- It does not read or write files: data sets must be built as `DataSet`
  objects by the caller.
- It ships no PII patterns and no name model: patterns are passed as
  `PIIFormat`s and name scoring as a callable.
- It has no command-line tool; it is used as a library.

## Running the tests

```
pip install .[test]
pytest
```