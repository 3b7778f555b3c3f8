from __future__ import annotations

from typing import Dict, List, Union


DEFAULT_PATTERNS: Dict[str, Union[str, List[str]]] = {
    "sykdato_label": "Første sykedag",
    "aap_header": "Vedtak ID",
    "aap_terminators": ["Meldekort", "Uføretrygd"],
    "innvilgelse": "innvilgelse",
    "uforetrygd_header": "Uføretrygd",
    "uforetrygd_empty": "Ingen uføretrygd data.",
    "fra_label": "Fra",
    "til_label": "Til",
}

# Plain ASCII digits; \d would also accept other Unicode digits.
DATE_PATTERN = r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}"
ROW_ID_PATTERN = r"^[0-9]{8}"


def merge_patterns(overrides: Dict[str, Union[str, List[str]]] | None = None) -> Dict[str, Union[str, List[str]]]:
    merged = dict(DEFAULT_PATTERNS)
    if overrides:
        merged.update(overrides)
    return merged
