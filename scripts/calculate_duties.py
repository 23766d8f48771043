"""
Print a landed cost breakdown for an entry

Usage:
    python scripts/calculate_duties.py ENTERED_VALUE GENERAL_RATE [SECTION_301_RATE] [SHIPPING_METHOD]

Example:
    python scripts/calculate_duties.py 9000 16.5 7.5 air
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.services.common.errors import InvalidInput
from src.services.duty_calculator import calculate_duties


def main():
    if len(sys.argv) < 3:
        print(__doc__)
        return False

    try:
        entered_value = float(sys.argv[1])
        general_rate = float(sys.argv[2])
        section301_rate = float(sys.argv[3]) if len(sys.argv) > 3 else 0.0
    except ValueError:
        print("ERROR: values and rates must be numbers")
        return False
    shipping_method = sys.argv[4] if len(sys.argv) > 4 else "ocean"

    try:
        breakdown = calculate_duties(
            entered_value,
            general_rate,
            section301_rate_pct=section301_rate,
            shipping_method=shipping_method,
        )
    except InvalidInput as e:
        print(f"ERROR: {e}")
        return False

    print("=" * 60)
    print("DUTY & FEE BREAKDOWN")
    print("=" * 60)
    print(f"Entered value:     ${breakdown.entered_value:>12,.2f}")
    print(f"Shipping method:   {breakdown.shipping_method}")
    print("-" * 60)

    lines = [
        ("General duty", breakdown.general_duty),
        ("Section 301", breakdown.section301),
        ("Section 232", breakdown.section232),
        ("AD/CVD", breakdown.ad_cvd),
        ("MPF", breakdown.mpf),
        ("HMF", breakdown.hmf),
    ]
    for label, component in lines:
        if not component.applicable:
            continue
        print(f"{label:<18} ${component.amount:>12,.2f}  ({component.rate_percent:g}%)")

    print("-" * 60)
    print(f"Total duties:      ${breakdown.total_duties:>12,.2f}")
    print(f"Landed cost:       ${breakdown.total_landed_cost:>12,.2f}")
    if breakdown.effective_rate_available:
        print(f"Effective rate:    {breakdown.effective_duty_rate:.2f}%")
    else:
        print("Effective rate:    n/a (entered value is 0)")

    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
