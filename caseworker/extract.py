from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .dates import day_before, is_later
from .models import AapEntry, ParsedDates
from .patterns import DATE_PATTERN, ROW_ID_PATTERN, merge_patterns


ROW_ID_RE = re.compile(ROW_ID_PATTERN)


def compile_label_pattern(label: str) -> re.Pattern[str]:
    return re.compile(re.escape(label) + r":?\s*(" + DATE_PATTERN + r")", flags=re.IGNORECASE)


def extract_date_after(label: str, text: str) -> Optional[str]:
    """First 'DD.MM.YYYY' date following label (optionally with a colon), case-insensitive."""
    m = compile_label_pattern(label).search(text)
    return m.group(1) if m else None


def find_aap_section(text: str, header: str = "Vedtak ID", terminators: Iterable[str] = ("Meldekort", "Uføretrygd")) -> Optional[str]:
    """
    Text between the AAP table header and the next terminator word
    (or end of text). None when the header is missing.
    """
    stop = "|".join(re.escape(t) for t in terminators)
    end = rf"(?:{stop}|\Z)" if stop else r"\Z"
    rgx = re.compile(rf"{re.escape(header)}(.*?){end}", flags=re.IGNORECASE | re.DOTALL)
    m = rgx.search(text)
    if not m:
        return None
    return m.group(1)


def parse_aap_rows(section: str) -> List[str]:
    lines = (ln.strip() for ln in section.split("\n"))
    return [ln for ln in lines if ROW_ID_RE.match(ln)]


def _col(cols: List[str], idx: int) -> Optional[str]:
    return cols[idx] if idx < len(cols) else None


def parse_aap_entry(row: str) -> AapEntry:
    # 0=id 1=fra 2=til 7=variant 8+=vedtak text
    cols = row.split()
    variant = _col(cols, 7)
    return AapEntry(
        id=cols[0],
        fra=_col(cols, 1),
        til=_col(cols, 2),
        vedtak_variant=variant.lower() if variant is not None else None,
        vedtak=" ".join(cols[8:]),
    )


def find_aap_start(entries: Iterable[AapEntry], marker: str = "innvilgelse") -> Optional[str]:
    for e in entries:
        if e.vedtak_variant and marker in e.vedtak_variant:
            return e.fra
    return None


def find_latest_til(entries: Iterable[AapEntry]) -> Optional[str]:
    latest: Optional[str] = None
    for e in entries:
        if latest is None or is_later(e.til, latest):
            latest = e.til
    return latest


def extract_uforetrygd(
    text: str,
    header: str = "Uføretrygd",
    empty_marker: str = "Ingen uføretrygd data.",
    fra_label: str = "Fra",
    til_label: str = "Til",
) -> Tuple[Optional[str], Optional[str]]:
    """Disability-benefit (fra, til); both None unless both dates are found."""
    m = re.search(re.escape(header) + r"(.*)", text, flags=re.IGNORECASE | re.DOTALL)
    if not m:
        return None, None
    section = m.group(1)
    if re.search(re.escape(empty_marker), section, flags=re.IGNORECASE):
        return None, None
    fra = extract_date_after(fra_label, section)
    til = extract_date_after(til_label, section)
    if fra and til:
        return fra, til
    return None, None


def _as_list(value: Union[str, List[str]]) -> List[str]:
    return [value] if isinstance(value, str) else list(value)


def extract_aap_entries(text: str, patterns: Optional[Dict[str, Union[str, List[str]]]] = None) -> List[AapEntry]:
    to_use = merge_patterns(patterns)
    section = find_aap_section(
        text,
        header=str(to_use["aap_header"]),
        terminators=_as_list(to_use["aap_terminators"]),
    )
    if section is None:
        return []
    return [parse_aap_entry(row) for row in parse_aap_rows(section)]


def extract_dates_and_entries(
    raw: str,
    patterns: Optional[Dict[str, Union[str, List[str]]]] = None,
) -> Tuple[ParsedDates, List[AapEntry]]:
    """Like extract_dates, but also returns the AAP rows the dates were read from."""
    to_use = merge_patterns(patterns)

    sykdato = extract_date_after(str(to_use["sykdato_label"]), raw)

    entries = extract_aap_entries(raw, to_use)
    aap_start = find_aap_start(entries, marker=str(to_use["innvilgelse"]))
    maksdato = day_before(aap_start) if aap_start else None
    aap_til = find_latest_til(entries) if entries else None

    uforetrygd_fra, uforetrygd_til = extract_uforetrygd(
        raw,
        header=str(to_use["uforetrygd_header"]),
        empty_marker=str(to_use["uforetrygd_empty"]),
        fra_label=str(to_use["fra_label"]),
        til_label=str(to_use["til_label"]),
    )

    parsed = ParsedDates(
        sykdato=sykdato,
        maksdato=maksdato,
        aap_start=aap_start,
        aap_til=aap_til,
        uforetrygd_fra=uforetrygd_fra,
        uforetrygd_til=uforetrygd_til,
    )
    return parsed, entries


def extract_dates(raw: str, patterns: Optional[Dict[str, Union[str, List[str]]]] = None) -> ParsedDates:
    parsed, _entries = extract_dates_and_entries(raw, patterns)
    return parsed
