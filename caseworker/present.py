from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd  # type: ignore

from .models import FIELD_LABELS, ParsedDates


COLUMNS = ["Felt", "Dato"]


def table_rows(parsed: ParsedDates, labels: List[Tuple[str, str]] = FIELD_LABELS) -> List[Tuple[str, str]]:
    """(label, value) pairs for every field that has a value, in label order."""
    rows: List[Tuple[str, str]] = []
    for name, label in labels:
        value = getattr(parsed, name, None)
        if value:
            rows.append((label, value))
    return rows


def to_dataframe(parsed: ParsedDates) -> pd.DataFrame:
    return pd.DataFrame(table_rows(parsed), columns=COLUMNS)


def validate_out_file(out_file: str) -> Optional[str]:
    if not out_file:
        return "Velg en fil å lagre til (CSV eller XLSX)."
    out_dir = Path(out_file).parent
    if not out_dir.exists():
        return "Mappen finnes ikke."
    if not (out_file.lower().endswith(".csv") or out_file.lower().endswith(".xlsx")):
        return "Filen må slutte på .csv eller .xlsx"
    return None


def export_results(parsed: ParsedDates, out_file: str) -> None:
    df = to_dataframe(parsed)
    if out_file.lower().endswith(".csv"):
        df.to_csv(out_file, index=False, encoding="utf-8")
    else:
        with pd.ExcelWriter(out_file, engine="openpyxl") as writer:  # type: ignore
            df.to_excel(writer, index=False, sheet_name="Datoer")
