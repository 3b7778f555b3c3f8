from .models import AapEntry, ParsedDates, FIELD_LABELS
from .patterns import DEFAULT_PATTERNS, DATE_PATTERN, merge_patterns
from .dates import (
    INVALID_DATE,
    parse_ddmmyyyy,
    parse_date_parts,
    format_ddmmyyyy,
    day_before,
    is_later,
)
from .extract import (
    extract_dates,
    extract_date_after,
    extract_dates_and_entries,
    extract_aap_entries,
    extract_uforetrygd,
    find_aap_section,
    parse_aap_rows,
    parse_aap_entry,
    find_aap_start,
    find_latest_til,
)
from .present import table_rows, to_dataframe, validate_out_file, export_results
from .pipeline import process_text, process_text_file, read_text_file

__all__ = [
    "AapEntry",
    "ParsedDates",
    "FIELD_LABELS",
    "DEFAULT_PATTERNS",
    "DATE_PATTERN",
    "merge_patterns",
    "INVALID_DATE",
    "parse_ddmmyyyy",
    "parse_date_parts",
    "format_ddmmyyyy",
    "day_before",
    "is_later",
    "extract_dates",
    "extract_date_after",
    "extract_dates_and_entries",
    "extract_aap_entries",
    "extract_uforetrygd",
    "find_aap_section",
    "parse_aap_rows",
    "parse_aap_entry",
    "find_aap_start",
    "find_latest_til",
    "table_rows",
    "to_dataframe",
    "validate_out_file",
    "export_results",
    "process_text",
    "process_text_file",
    "read_text_file",
]
