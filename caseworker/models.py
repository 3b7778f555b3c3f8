from __future__ import annotations

from dataclasses import dataclass, fields
from typing import List, Optional, Tuple


@dataclass
class ParsedDates:
    sykdato: Optional[str] = None
    maksdato: Optional[str] = None
    aap_start: Optional[str] = None
    aap_til: Optional[str] = None
    uforetrygd_fra: Optional[str] = None
    uforetrygd_til: Optional[str] = None

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))


@dataclass
class AapEntry:
    """One row of the AAP decision table."""

    id: str
    fra: Optional[str]
    til: Optional[str]
    vedtak_variant: Optional[str]
    vedtak: str = ""


# Display order follows ParsedDates field order.
FIELD_LABELS: List[Tuple[str, str]] = [
    ("sykdato", "Sykdato"),
    ("maksdato", "Maks dato"),
    ("aap_start", "AAP start"),
    ("aap_til", "AAP til"),
    ("uforetrygd_fra", "Uføretrygd fra"),
    ("uforetrygd_til", "Uføretrygd til"),
]
