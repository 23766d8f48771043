"""
Classification Ranker - heuristic relevance scoring of HTS candidates
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import (
    ALTERNATIVE_CONFIDENCE_RANGE,
    GENERIC_DESCRIPTIONS,
    MAX_ALTERNATIVES,
    PRIMARY_CONFIDENCE_RANGE,
    SCORE_BASELINE,
    SCORE_CAP,
    SCORE_GENERIC_PENALTY,
    SCORE_MATERIAL_MATCH,
    SCORE_PER_CODE_DIGIT,
    SCORE_PER_INDENT,
    SCORE_PER_WORD_MATCH,
    SCORE_PRODUCT_TYPE_MATCH,
    SCORE_WORD_MIN_LENGTH,
    SCORING_MATERIAL_TERMS,
    SCORING_PRODUCT_TERMS,
)
from .models import ScoredCandidate
from ..hts_lookup.models import ResolvedCandidate

logger = logging.getLogger(__name__)


def _clip(value: int, bounds: Tuple[int, int]) -> int:
    low, high = bounds
    return min(high, max(low, value))


def _shared_term(terms: Iterable[str], left: str, right: str) -> bool:
    return any(term in left and term in right for term in terms)


def score_candidate(candidate: ResolvedCandidate, description: str) -> int:
    """
    Score a candidate's relevance to the product description

    Scoring:
    - Baseline 50
    - +2 per digit of the HTS code (longer codes are more specific)
    - +3 per indent level (subordinate entries are more specific)
    - +5 per description word longer than 3 characters found inside a
      word of the candidate description
    - +10 if a material term appears in both descriptions
    - +15 if a product type term appears in both descriptions
    - -10 for residual "other"/"parts" entries
    - Capped at 95

    Args:
        candidate: Resolved HTS candidate
        description: Original product description

    Returns:
        Integer score, never above 95
    """
    desc = (description or "").lower()
    hts_desc = candidate.description.lower()
    hts_words = hts_desc.split()

    score = SCORE_BASELINE
    score += len(re.sub(r"\D", "", candidate.hts_code)) * SCORE_PER_CODE_DIGIT
    score += candidate.indent_level * SCORE_PER_INDENT

    for word in desc.split():
        if len(word) >= SCORE_WORD_MIN_LENGTH and any(word in w for w in hts_words):
            score += SCORE_PER_WORD_MATCH

    if _shared_term(SCORING_MATERIAL_TERMS, desc, hts_desc):
        score += SCORE_MATERIAL_MATCH

    if _shared_term(SCORING_PRODUCT_TERMS, desc, hts_desc):
        score += SCORE_PRODUCT_TYPE_MATCH

    if hts_desc.strip() in GENERIC_DESCRIPTIONS:
        score -= SCORE_GENERIC_PENALTY

    return min(SCORE_CAP, score)


def rank(
    candidates: Sequence[ResolvedCandidate], description: str
) -> List[ScoredCandidate]:
    """
    Score candidates and sort by score descending

    The sort is stable: equal scores keep their input order.

    Args:
        candidates: Resolved candidates with codes
        description: Original product description

    Returns:
        List of ScoredCandidate with rank positions assigned
    """
    scored = [
        (score_candidate(candidate, description), candidate)
        for candidate in candidates
    ]
    ordered = sorted(scored, key=lambda pair: pair[0], reverse=True)

    ranked = [
        ScoredCandidate(**candidate.model_dump(), score=score, rank=position)
        for position, (score, candidate) in enumerate(ordered)
    ]

    if ranked:
        logger.debug(
            f"Ranked {len(ranked)} candidates, top {ranked[0].hts_code} ({ranked[0].score})"
        )
    return ranked


def aggregate_candidates(
    batches: Iterable[Sequence[ResolvedCandidate]],
) -> List[ResolvedCandidate]:
    """
    Merge per-keyword candidate batches, first occurrence of a code wins

    Args:
        batches: Candidate lists in keyword-priority order

    Returns:
        Deduplicated candidates in first-seen order
    """
    seen_codes = set()
    merged = []

    for batch in batches:
        for candidate in batch:
            if candidate.hts_code in seen_codes:
                continue
            seen_codes.add(candidate.hts_code)
            merged.append(candidate)

    return merged


def primary_confidence(score: int) -> int:
    return _clip(score, PRIMARY_CONFIDENCE_RANGE)


def alternative_confidence(score: int) -> int:
    return _clip(score, ALTERNATIVE_CONFIDENCE_RANGE)


def select(
    ranked: Sequence[ScoredCandidate],
) -> Tuple[Optional[ScoredCandidate], List[ScoredCandidate]]:
    """Split a ranked list into the primary candidate and its alternatives"""
    if not ranked:
        return None, []
    return ranked[0], list(ranked[1 : 1 + MAX_ALTERNATIVES])
