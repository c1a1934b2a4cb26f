"""
Tabular export of enumerated combinations.

Each combination becomes one row with an integer column per atom type
(how many copies it uses), the combination size, and a readable label.
"""

import logging
from collections import Counter
from itertools import islice
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .enumeration.limited import TypedLimitedCombination

logger = logging.getLogger(__name__)

SIZE_COLUMN = "size"
LABEL_COLUMN = "combination"


def _column_names(combinations: TypedLimitedCombination) -> List[str]:
    """Column labels in code order; distinct atoms must print distinctly."""
    columns = [str(atom) for atom in combinations.atoms] + [SIZE_COLUMN, LABEL_COLUMN]
    clashes = sorted(name for name, n in Counter(columns).items() if n > 1)
    if clashes:
        raise ValueError(f"Atoms map to clashing column names: {clashes}")
    return columns


def combinations_to_frame(
    combinations: TypedLimitedCombination,
    limit: Optional[int] = None,
) -> pd.DataFrame:
    """
    Consume a generator into a DataFrame.

    Args:
        combinations: Generator to drain. Its cursor is consumed, but never
            advanced past the last exported combination.
        limit: Stop after this many rows (None = all).

    Returns:
        DataFrame with one column per atom (in code order), then size and label.

    Raises:
        ValueError: If two atoms (or an atom and the size/label columns)
            share the same string form.
    """
    columns = _column_names(combinations)
    rows = []
    for combination in islice(combinations, limit):
        counts = combinations.counts(combination)
        row = [counts[atom] for atom in combinations.atoms]
        row.append(len(combination))
        row.append(",".join(str(atom) for atom in combination))
        rows.append(row)

    if limit is not None and len(rows) == limit:
        logger.info("Stopped export at limit of %d combinations", limit)
    return pd.DataFrame(rows, columns=columns)


def write_frame(frame: pd.DataFrame, output_path: Path) -> None:
    """Write to CSV or JSON depending on the file suffix."""
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix == ".csv":
        frame.to_csv(output_path, index=False)
    elif suffix == ".json":
        frame.to_json(output_path, orient="records", indent=2)
    else:
        raise ValueError(f"Unsupported output format: {output_path.suffix or '(none)'}")
    logger.info("Wrote %d combinations to %s", len(frame), output_path)
