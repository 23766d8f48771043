"""
Classification Service - ranks HTS codes for free-text product descriptions
"""

from .keywords import build_keywords
from .ranker import aggregate_candidates, rank, score_candidate
from .service import ClassificationService

__all__ = [
    "ClassificationService",
    "aggregate_candidates",
    "build_keywords",
    "rank",
    "score_candidate",
]
