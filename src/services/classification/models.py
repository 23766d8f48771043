"""
Pydantic models for Classification Service
"""

from pydantic import Field
from typing import List, Optional

from ..common.models import CamelModel
from ..hts_lookup.models import ResolvedCandidate


class ClassificationRequest(CamelModel):
    """Input of the classification endpoint"""

    product_description: Optional[str] = ""
    country_of_origin: Optional[str] = ""


class ScoredCandidate(ResolvedCandidate):
    """Resolved candidate with its relevance score and rank position"""

    score: int
    rank: int = 0


class SpecialTariff(CamelModel):
    """Additional duty attached to a classification"""

    name: str
    rate: float
    authority: str
    hts_provision: Optional[str] = None


class AlternativeCandidate(CamelModel):
    """Next-ranked candidate shown beside the primary classification"""

    hts_code: str
    description: str
    confidence: int
    general_rate: str = ""


class ClassificationResult(CamelModel):
    """Primary classification with alternatives and special tariffs"""

    hts_code: str
    description: str
    confidence: int
    general_rate: str = ""
    general_duty_rate: float = 0.0
    special_rate: str = ""
    other_rate: str = ""
    units: List[str] = Field(default_factory=list)
    section301_note: Optional[str] = None
    special_tariffs: List[SpecialTariff] = Field(default_factory=list)
    reasoning: List[str] = Field(default_factory=list)
    alternatives: List[AlternativeCandidate] = Field(default_factory=list)
    country_of_origin: str
    country_name: str


class ClassificationResponse(CamelModel):
    """Response from classify(); classification is None when nothing matched"""

    classification: Optional[ClassificationResult] = None
    message: Optional[str] = None
    keywords: List[str] = Field(default_factory=list)
    total_results: int = 0


class HTSSearchResponse(CamelModel):
    """Response from search_hts()"""

    query: str
    keywords: List[str] = Field(default_factory=list)
    results: List[ResolvedCandidate] = Field(default_factory=list)
    total: int = 0
