"""
Compliance risk score for audit findings
"""

from .models import RiskScoreInput, RiskScoreResult

ERROR_WEIGHT = 25
WARNING_WEIGHT = 10
MAX_RISK_SCORE = 100
HIGH_RISK_THRESHOLD = 60
MEDIUM_RISK_THRESHOLD = 30

RECOMMENDATIONS = {
    "High": "Immediate review required: significant compliance discrepancies found.",
    "Medium": "Review recommended: some potential issues identified.",
    "Low": "Low risk: documents appear compliant with minor notes.",
}


def calculate_risk_score(findings: RiskScoreInput) -> RiskScoreResult:
    """
    Score audit findings on a 0-100 scale

    Errors weigh 25 points and warnings 10; info findings do not add risk.
    """
    raw_score = findings.error_count * ERROR_WEIGHT + findings.warning_count * WARNING_WEIGHT
    score = min(MAX_RISK_SCORE, raw_score)

    if score >= HIGH_RISK_THRESHOLD:
        level = "High"
    elif score >= MEDIUM_RISK_THRESHOLD:
        level = "Medium"
    else:
        level = "Low"

    return RiskScoreResult(
        risk_score=score,
        level=level,
        error_count=findings.error_count,
        warning_count=findings.warning_count,
        info_count=findings.info_count,
        total_checks=findings.error_count + findings.warning_count + findings.info_count,
        notes=findings.notes or "",
        recommendation=RECOMMENDATIONS[level],
    )
