import csv
import logging
from io import StringIO
from pathlib import Path
from typing import IO, List

import pandas as pd

logger = logging.getLogger(__name__)

NAME_COLUMN = "Name"
PASS_COLUMN = "Pass"
RESERVED_COLUMNS = (NAME_COLUMN, PASS_COLUMN)


def _strip_bom(text: str) -> str:
    return text[1:] if text.startswith("\ufeff") else text


def read_csv(text: str, quoting: int = csv.QUOTE_MINIMAL) -> pd.DataFrame:
    """Read CSV text into string columns named after the header row.

    The header is read on its own so pandas mangles blank and duplicate names
    ("Unnamed: 2", "Math.1"). The body is then read with the header as its
    first row, which pins the width: wider rows go through ``on_bad_lines`` and
    are truncated, shorter rows come back NaN-padded and are filled with ``""``.
    Rows whose every cell is blank are dropped. ``attrs["ragged_rows"]`` counts
    the rows that were padded or truncated.
    """

    text = _strip_bom(text or "").strip("\r\n")
    if not text.strip():
        return pd.DataFrame()

    header = pd.read_csv(StringIO(text), nrows=0, index_col=False, engine="python", quoting=quoting)
    columns = list(header.columns)
    width = len(columns)

    too_wide = []

    def _truncate(row: List[str]) -> List[str]:
        if any(str(value).strip() for value in row):
            too_wide.append(len(row))
        return row[:width]

    # Keeping the header as row 0 stops pandas from reading a wide first row as an index.
    body = pd.read_csv(
        StringIO(text),
        header=None,
        names=list(range(width)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        quoting=quoting,
        on_bad_lines=_truncate,
    )
    body = body.iloc[1:].reset_index(drop=True)
    body.columns = columns

    short = body.isna().any(axis=1)
    body = body.fillna("")
    filled = (body.apply(lambda col: col.astype(str).str.strip()) != "").any(axis=1)
    df = body[filled].reset_index(drop=True)

    ragged = len(too_wide) + int((short & filled).sum())
    df.attrs["ragged_rows"] = ragged
    if ragged:
        logger.warning("%d row(s) did not match the %d header columns; padded or truncated", ragged, width)
    logger.debug("Parsed %d records across %d columns", len(df), width)
    return df


def parse_records(text: str) -> pd.DataFrame:
    """Header-driven parse: quoted fields, embedded commas and doubled quotes
    follow the CSV dialect. Blank input gives an empty frame."""

    return read_csv(text)


def split_records(text: str) -> pd.DataFrame:
    """Degraded fallback: split every line on commas with no quote handling."""

    return read_csv(text, quoting=csv.QUOTE_NONE)


def load_dataset(source: str | Path | IO[str] | IO[bytes]) -> pd.DataFrame:
    if isinstance(source, (str, Path)):
        raw = Path(source).read_bytes()
    else:
        raw = source.read()

    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ValueError("Input file must be UTF-8 encoded text") from exc

    return parse_records(raw)


def metric_columns(df: pd.DataFrame) -> List[str]:
    return [col for col in df.columns if col not in RESERVED_COLUMNS]


def export_dataframe(df: pd.DataFrame, path: Path) -> Path:
    """Write a dataset or result table as CSV, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    logger.debug("Wrote %d rows to %s", len(df), path)
    return path
