"""
Shared CSV record handling for the file-based adapters.

Files are read as strings, cleaned column by column, then validated
against a pandera schema. Bad rows are dropped one by one with a
warning; only file-level problems (missing file, missing columns,
unparseable CSV) raise.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Type

import pandas as pd
import pandera as pa

from src.flight_planner.exceptions import DataLoadError

logger = logging.getLogger(__name__)

# Header is line 1, so DataFrame row 0 is line 2
_HEADER_LINES = 2


def line_number(index: object) -> int:
    """CSV line number of a DataFrame row label."""
    return int(index) + _HEADER_LINES


def read_csv_records(path: Path, required_columns: Iterable[str]) -> pd.DataFrame:
    """
    Read a CSV file with every value as a stripped string.

    Raises:
        DataLoadError: If the file is missing, unparseable or lacks a
            required column.
    """
    if not path.exists():
        raise DataLoadError(path, "file not found")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise DataLoadError(path, str(e)) from e

    df.columns = [str(col).strip() for col in df.columns]
    missing = set(required_columns) - set(df.columns)
    if missing:
        raise DataLoadError(path, f"missing columns: {', '.join(sorted(missing))}")

    for col in df.columns:
        df[col] = df[col].str.strip()
    return df


def drop_rows(df: pd.DataFrame, mask: pd.Series, label: str, reason: str) -> pd.DataFrame:
    """Drop rows where ``mask`` is True, logging one warning per row."""
    for index in df.index[mask]:
        logger.warning(
            "Skipping invalid %s record at line %d: %s",
            label,
            line_number(index),
            reason,
        )
    return df.loc[~mask].copy()


def clean_records(
    df: pd.DataFrame,
    label: str,
    text_columns: Iterable[str] = (),
    numeric_columns: Iterable[str] = (),
    integer_columns: Iterable[str] = (),
) -> pd.DataFrame:
    """
    Coerce columns and drop rows that cannot be coerced.

    Text columns must be non-empty. Numeric columns are parsed with
    ``pd.to_numeric(errors="coerce")``; integer columns must also hold
    whole numbers and end up as int64.
    """
    df = df.copy()

    for col in text_columns:
        blank = df[col].isna() | (df[col] == "")
        df = drop_rows(df, blank, label, f"empty {col}")

    integer_columns = list(integer_columns)
    for col in list(numeric_columns) + integer_columns:
        values = pd.to_numeric(df[col], errors="coerce")
        invalid = values.isna()
        if col in integer_columns:
            invalid |= values.notna() & (values % 1 != 0)
        df[col] = values
        df = drop_rows(df, invalid, label, f"bad {col}")

    for col in integer_columns:
        df[col] = df[col].astype("int64")
    return df


def validate_rows(df: pd.DataFrame, schema: Type[pa.DataFrameModel], path: Path, label: str) -> pd.DataFrame:
    """
    Validate rows against ``schema``, dropping the rows that fail.

    Raises:
        DataLoadError: If a failure is not tied to a row (e.g. a column
            missing or of the wrong type as a whole).
    """
    try:
        return schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as exc:
        failures = exc.failure_cases
        row_failures = failures.dropna(subset=["index"])
        if len(row_failures) < len(failures):
            raise DataLoadError(path, f"{schema.__name__} validation failed") from exc

        bad_rows: List[int] = sorted({int(i) for i in row_failures["index"]})
        for index in bad_rows:
            checks = row_failures.loc[row_failures["index"] == index, "column"]
            logger.warning(
                "Skipping invalid %s record at line %d: failed checks on %s",
                label,
                line_number(index),
                ", ".join(sorted(set(str(c) for c in checks))),
            )
        return schema.validate(df.drop(index=bad_rows))
