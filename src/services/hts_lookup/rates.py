"""
HTS Rate Resolver with hierarchical rate inheritance
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence

from .config import (
    CENTS_RATE_PATTERN,
    FREE_RATE,
    PERCENT_RATE_PATTERN,
    SECTION_301_FOOTNOTE_PATTERN,
)
from .models import Footnote, ResolvedCandidate, TariffRecord

logger = logging.getLogger(__name__)


class InheritedRates(NamedTuple):
    """Last non-empty general/special/other rates seen in traversal order"""

    general: str = ""
    special: str = ""
    other: str = ""

    def absorb(self, record: TariffRecord) -> "InheritedRates":
        """Return the accumulator after visiting record (own rates win)"""
        return InheritedRates(
            general=record.general_rate or self.general,
            special=record.special_rate or self.special,
            other=record.other_rate or self.other,
        )


def resolve_rates(records: Sequence[TariffRecord]) -> List[ResolvedCandidate]:
    """
    Resolve effective rates for a full search result

    Algorithm:
    1. Fold over records in source order, carrying the last non-empty
       general, special and other rates
    2. A record with its own rate updates the accumulator before it is
       resolved, so it resolves to itself
    3. Records without a code (headers) are dropped from the output but
       still pass their rates down to the records that follow
    4. An empty rate with no rated predecessor stays empty

    The accumulator lives only for this call. The sequence must be the
    complete response; a suffix cannot be resolved in isolation.

    Args:
        records: TariffRecords in hierarchical (pre-order) order

    Returns:
        List of ResolvedCandidate for records with a code
    """
    inherited = InheritedRates()
    resolved = []
    header_count = 0

    for record in records:
        inherited = inherited.absorb(record)

        if not record.code:
            header_count += 1
            continue

        resolved.append(
            ResolvedCandidate(
                hts_code=record.code,
                description=record.description,
                general_rate=inherited.general,
                special_rate=inherited.special,
                other_rate=inherited.other,
                units=list(record.units),
                section301_note=extract_section301_note(record.footnotes),
                indent_level=record.indent_level,
            )
        )

    logger.debug(
        f"Resolved {len(resolved)} candidates ({header_count} header rows skipped)"
    )
    return resolved


def extract_section301_note(footnotes: Iterable[Footnote]) -> Optional[str]:
    """
    Find the first footnote referencing a Section 301 provision (9903.88.xx)

    Args:
        footnotes: Footnotes of one HTS entry

    Returns:
        Stripped footnote text or None
    """
    for footnote in footnotes or []:
        if footnote.value and SECTION_301_FOOTNOTE_PATTERN.search(footnote.value):
            return footnote.value.strip()
    return None


def parse_duty_rate(rate_str: Optional[str]) -> float:
    """
    Parse a duty rate string like "16.5%", "Free" or "0.47¢/kg" to a percentage

    Compound unit rates (cents per unit) are only approximated as
    cents / 100; this is a known approximation, not a conversion.

    Args:
        rate_str: Rate string from the tariff schedule

    Returns:
        Percentage as float, 0.0 when empty, free or unparseable
    """
    if not rate_str or rate_str.strip() == FREE_RATE:
        return 0.0

    pct_match = PERCENT_RATE_PATTERN.search(rate_str)
    if pct_match:
        try:
            return float(pct_match.group(1))
        except ValueError:
            logger.warning(f"Unparseable percentage in rate: {rate_str!r}")
            return 0.0

    cent_match = CENTS_RATE_PATTERN.search(rate_str)
    if cent_match:
        try:
            return float(cent_match.group(1)) / 100
        except ValueError:
            logger.warning(f"Unparseable unit rate: {rate_str!r}")
            return 0.0

    return 0.0
