"""
Readers for the header-less, whitespace-delimited lab tables.

Column numbers below are 1-based, as in the observing logs:

  photometry (bllacr.dat, bllaci.dat):
    1 JD, 2 object mag, 4 standard-1 mag, 5 its error, 6 standard-2 mag, 7 its error
  polarization (bllacPPPx):
    1 JD, 3 polarization [%]
  polarization, all stars (bllacPxall):
    same columns, three rows per epoch: object, standard 1, standard 2
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import List, Union

import pandas as pd

from pipeline.reduction.errors import MalformedTableError
from pipeline.reduction.records import Epoch, PolarizationEpoch

PathLike = Union[str, Path]

PHOTOMETRY_MIN_COLUMNS = 7
POLARIZATION_MIN_COLUMNS = 3


def file_sha256(path: PathLike) -> str:
    return hashlib.sha256(Path(path).read_bytes()).hexdigest()


def load_table(path: PathLike, min_columns: int = 1) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"input table not found: {path}")
    try:
        df = pd.read_csv(path, sep=r"\s+", header=None, comment="#")
    except pd.errors.EmptyDataError:
        raise MalformedTableError(f"{path}: table is empty") from None
    except pd.errors.ParserError as exc:
        raise MalformedTableError(f"{path}: {exc}") from exc
    if df.shape[1] < min_columns:
        raise MalformedTableError(f"{path}: expected at least {min_columns} columns, found {df.shape[1]}")
    try:
        df = df.apply(pd.to_numeric)
    except (ValueError, TypeError) as exc:
        raise MalformedTableError(f"{path}: non-numeric cell ({exc})") from exc
    if df.isna().to_numpy().any():
        raise MalformedTableError(f"{path}: ragged rows or missing values")
    # 1-based column labels, matching the file format description
    df.columns = range(1, df.shape[1] + 1)
    return df


def load_photometry(path: PathLike) -> List[Epoch]:
    df = load_table(path, PHOTOMETRY_MIN_COLUMNS)
    return [
        Epoch(
            jd=float(row[1]),
            mag=float(row[2]),
            std_mags=(float(row[4]), float(row[6])),
            std_errs=(float(row[5]), float(row[7])),
        )
        for _, row in df.iterrows()
    ]


def load_polarization(path: PathLike) -> List[PolarizationEpoch]:
    df = load_table(path, POLARIZATION_MIN_COLUMNS)
    return _polarization_rows(df)


def load_standard_polarization(path: PathLike, standard: int) -> List[PolarizationEpoch]:
    """Rows of comparison standard 1 or 2 from the interleaved all-stars table."""
    if standard not in (1, 2):
        raise ValueError(f"standard must be 1 or 2, got {standard}")
    df = load_table(path, POLARIZATION_MIN_COLUMNS)
    if df.shape[0] % 3 != 0:
        raise MalformedTableError(f"{path}: expected three rows per epoch, found {df.shape[0]} rows")
    return _polarization_rows(df.iloc[standard::3])


def _polarization_rows(df: pd.DataFrame) -> List[PolarizationEpoch]:
    jd = df[1].to_numpy(float)
    p = df[3].to_numpy(float)
    return [PolarizationEpoch(float(t), float(v)) for t, v in zip(jd, p)]

