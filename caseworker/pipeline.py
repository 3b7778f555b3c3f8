from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .extract import extract_dates_and_entries
from .models import ParsedDates
from .present import table_rows


def process_text(
    raw: str,
    log: Optional[Callable[[str], None]] = None,
    patterns: Optional[Dict[str, Union[str, List[str]]]] = None,
) -> ParsedDates:
    if log:
        log(f"Leser {len(raw)} tegn")
    parsed, entries = extract_dates_and_entries(raw, patterns=patterns)
    if log:
        log(f"Fant {len(entries)} AAP-vedtak")
        rows = table_rows(parsed)
        if not rows:
            log("Ingen datoer funnet")
        for label, value in rows:
            log(f"{label}: {value}")
    return parsed


def read_text_file(path: str | Path) -> str:
    # Undecodable bytes are replaced rather than rejected
    return Path(path).read_text(encoding="utf-8", errors="replace")


def process_text_file(
    path: str | Path,
    log: Optional[Callable[[str], None]] = None,
    patterns: Optional[Dict[str, Union[str, List[str]]]] = None,
) -> ParsedDates:
    if log:
        log(f"Åpner {Path(path).name}")
    raw = read_text_file(path)
    return process_text(raw, log=log, patterns=patterns)
