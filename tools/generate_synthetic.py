#!/usr/bin/env python3
"""Generate a synthetic class CSV for demos.

Usage:
    python tools/generate_synthetic.py --output data/synthetic_class.csv --students 40 --seed 42

Each student gets an underlying ability; subject marks scatter around it so the
class spreads across the Poor / Mid / Excellent bands. A few cells are left
blank and, optionally, one subject is reported as good / average / bad ratings.
"""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from insightplan.io import export_dataframe

DEFAULT_SUBJECTS = ("Math", "Science", "English", "Computer")
PASS_MARK = 35.0


def _rating_for(mark: float) -> str:
    if mark >= 75:
        return "Good"
    if mark >= 35:
        return "Average"
    return "Bad"


def generate_synthetic_dataset(
    output_path: Path,
    n_students: int = 40,
    subjects: Sequence[str] = DEFAULT_SUBJECTS,
    seed: int = 42,
    rating_subject: Optional[str] = None,
    blank_rate: float = 0.05,
) -> pd.DataFrame:
    if n_students < 1:
        raise ValueError("n_students must be at least 1")
    if not subjects:
        raise ValueError("At least one subject is required")

    rng = np.random.default_rng(seed)
    abilities = rng.beta(2.2, 2.0, size=n_students) * 100

    rows = []
    for idx, ability in enumerate(abilities, start=1):
        row = {"Name": f"Student_{idx:03d}"}
        marks = []
        for subject in subjects:
            mark = float(np.clip(rng.normal(ability, 10), 0, 100))
            marks.append(mark)
            if rng.random() < blank_rate:
                row[subject] = ""
            else:
                row[subject] = f"{mark:.0f}"
        if rating_subject:
            row[rating_subject] = _rating_for(float(rng.normal(ability, 12)))
        row["Pass"] = "Yes" if np.mean(marks) >= PASS_MARK else "No"
        rows.append(row)

    result = pd.DataFrame(rows)
    export_dataframe(result, output_path)
    return result


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a synthetic class CSV for demos")
    parser.add_argument("--output", type=Path, default=Path("data/synthetic_class.csv"), help="Where to write the CSV")
    parser.add_argument("--students", type=int, default=40, help="Number of synthetic students")
    parser.add_argument("--subjects", nargs="+", default=list(DEFAULT_SUBJECTS), help="Subject column names")
    parser.add_argument("--rating-subject", default=None, help="Extra subject reported as Good/Average/Bad")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args(list(argv) if argv is not None else None)

    generate_synthetic_dataset(
        args.output,
        n_students=args.students,
        subjects=args.subjects,
        seed=args.seed,
        rating_subject=args.rating_subject,
    )
    print(f"Synthetic class written to {args.output}")


if __name__ == "__main__":
    main()
