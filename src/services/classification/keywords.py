"""
Keyword Strategist - builds USITC search strings from a product description
"""

import logging
import re
from typing import List

from .config import (
    FALLBACK_PHRASE_TOKENS,
    MATERIAL_TERMS,
    MAX_KEYWORD_STRATEGIES,
    MIN_TOKEN_LENGTH,
    MODIFIER_TERMS,
    PRIMARY_PRODUCT_NOUNS,
    STOP_WORDS,
)

logger = logging.getLogger(__name__)


def tokenize(description: str) -> List[str]:
    """
    Lowercase, strip punctuation and drop short and filler words

    Args:
        description: Free-text product description

    Returns:
        Surviving tokens in original order
    """
    text = re.sub(r"[^\w\s]", " ", (description or "").lower())
    return [
        word
        for word in text.split()
        if len(word) >= MIN_TOKEN_LENGTH and word not in STOP_WORDS
    ]


def build_keywords(description: str) -> List[str]:
    """
    Derive ordered search strategies from a product description

    Priority:
    1. Each primary product noun alone
    2. Each material + product noun pair
    3. Each modifier + product noun pair
    4. No product noun: the first material alone
    5. Still nothing: the first three tokens joined, then the first token

    Single nouns retrieve the right heading from the keyword search far
    more reliably than long literal phrases.

    Args:
        description: Free-text product description

    Returns:
        Deduplicated strategies, at most MAX_KEYWORD_STRATEGIES
    """
    tokens = tokenize(description)

    nouns = [t for t in tokens if t in PRIMARY_PRODUCT_NOUNS]
    modifiers = [t for t in tokens if t in MODIFIER_TERMS]
    materials = [t for t in tokens if t in MATERIAL_TERMS]

    strategies = []
    strategies.extend(nouns)
    strategies.extend(f"{material} {noun}" for material in materials for noun in nouns)
    strategies.extend(f"{modifier} {noun}" for modifier in modifiers for noun in nouns)

    if not nouns and materials:
        strategies.append(materials[0])

    if not strategies and tokens:
        strategies.append(" ".join(tokens[:FALLBACK_PHRASE_TOKENS]))
        strategies.append(tokens[0])

    keywords = list(dict.fromkeys(strategies))[:MAX_KEYWORD_STRATEGIES]

    logger.debug(f"Keywords for {description!r}: {keywords}")
    return keywords
