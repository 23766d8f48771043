"""
Duty & Fee Calculator - general duty, trade remedy surcharges, MPF and HMF
"""

import logging

from pydantic import ValidationError

from .config import HMF_MODE, HMF_RATE, MONEY_DECIMALS, MPF_MAX, MPF_MIN, MPF_RATE
from .models import DutyBreakdown, DutyCalculationRequest, DutyComponent
from ..common.errors import InvalidInput

logger = logging.getLogger(__name__)


def _money(amount: float) -> float:
    return round(amount, MONEY_DECIMALS)


def _ad_valorem(entered_value: float, rate_percent: float) -> float:
    return entered_value * rate_percent / 100


def _remedy_component(entered_value: float, rate_percent: float) -> DutyComponent:
    return DutyComponent(
        rate_percent=rate_percent,
        amount=_money(_ad_valorem(entered_value, rate_percent)),
        applicable=rate_percent > 0,
    )


def calculate_duties(
    entered_value: float,
    general_rate_pct: float,
    section301_rate_pct: float = 0.0,
    section232_rate_pct: float = 0.0,
    ad_cvd_rate_pct: float = 0.0,
    shipping_method: str = "ocean",
) -> DutyBreakdown:
    """
    Compute the landed cost breakdown of an entry

    Running totals use unrounded amounts; each monetary output is rounded
    once when the breakdown is built. The landed cost is the sum of the
    rounded entered value and total duties so the two always add up.

    Args:
        entered_value: Entered value in USD (>= 0)
        general_rate_pct: General duty rate in percent (16.5 means 16.5%)
        section301_rate_pct: Section 301 surcharge in percent
        section232_rate_pct: Section 232 surcharge in percent
        ad_cvd_rate_pct: Antidumping/countervailing rate in percent
        shipping_method: "ocean", "air" or "land"

    Returns:
        DutyBreakdown

    Raises:
        InvalidInput: If a value is negative or the shipping method is unknown
    """
    try:
        request = DutyCalculationRequest(
            entered_value=entered_value,
            general_duty_rate_percent=general_rate_pct,
            section301_rate_percent=section301_rate_pct,
            section232_rate_percent=section232_rate_pct,
            ad_cvd_rate_percent=ad_cvd_rate_pct,
            shipping_method=shipping_method,
        )
    except ValidationError as e:
        raise InvalidInput(f"Invalid duty calculation input: {e}") from e

    return calculate_from_request(request)


def calculate_from_request(request: DutyCalculationRequest) -> DutyBreakdown:
    """Compute the breakdown for an already validated request"""
    value = request.entered_value

    general_duty = _ad_valorem(value, request.general_duty_rate_percent)
    section301 = _ad_valorem(value, request.section301_rate_percent)
    section232 = _ad_valorem(value, request.section232_rate_percent)
    ad_cvd = _ad_valorem(value, request.ad_cvd_rate_percent)

    mpf_raw = value * MPF_RATE
    mpf = max(MPF_MIN, min(MPF_MAX, mpf_raw))

    ocean = request.shipping_method == HMF_MODE
    if ocean:
        hmf = value * HMF_RATE
    else:
        hmf = 0.0

    total_duties = general_duty + section301 + section232 + ad_cvd + mpf + hmf
    if value > 0:
        effective_rate = _money(total_duties / value * 100)
    else:
        effective_rate = None
        logger.debug("Entered value is 0, effective duty rate not available")

    breakdown = DutyBreakdown(
        entered_value=_money(value),
        shipping_method=request.shipping_method,
        general_duty=DutyComponent(
            rate_percent=request.general_duty_rate_percent,
            amount=_money(general_duty),
            applicable=request.general_duty_rate_percent > 0,
        ),
        section301=_remedy_component(value, request.section301_rate_percent),
        section232=_remedy_component(value, request.section232_rate_percent),
        ad_cvd=_remedy_component(value, request.ad_cvd_rate_percent),
        mpf=DutyComponent(
            rate_percent=MPF_RATE * 100,
            amount=_money(mpf),
            note=f"Bounded: min ${MPF_MIN:.2f}, max ${MPF_MAX:.2f} (raw: ${mpf_raw:.2f})",
        ),
        hmf=DutyComponent(
            rate_percent=HMF_RATE * 100 if ocean else 0.0,
            amount=_money(hmf),
            applicable=ocean,
            note=None if ocean else "Harbor maintenance fee applies to ocean shipments only",
        ),
        total_duties=_money(total_duties),
        effective_duty_rate=effective_rate,
        effective_rate_available=effective_rate is not None,
        total_landed_cost=_money(_money(value) + _money(total_duties)),
    )

    logger.info(
        f"Duties calculated: value={value:.2f}, mode={request.shipping_method}, "
        f"total_duties={breakdown.total_duties:.2f}"
    )
    return breakdown
