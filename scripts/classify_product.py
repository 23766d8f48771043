"""
Classify a product description against the live USITC tariff database

Usage:
    python scripts/classify_product.py "cotton hooded sweatshirt" CN
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.services.common.errors import InvalidInput, UpstreamUnavailable
from src.services.common.service_factory import ServiceFactory


def print_header(text):
    """Print formatted header"""
    print("\n" + "=" * 80)
    print(f"  {text}")
    print("=" * 80)


def main():
    if len(sys.argv) < 3:
        print(__doc__)
        return False

    description, country = sys.argv[1], sys.argv[2]

    print_header("HTS CLASSIFICATION")
    print(f"Product: {description}")
    print(f"Country of origin: {country.upper()}")

    service = ServiceFactory.get_classification_service()

    try:
        response = service.classify(description, country)
    except InvalidInput as e:
        print(f"\nERROR: {e}")
        return False
    except UpstreamUnavailable as e:
        print(f"\nERROR: USITC database unavailable: {e}")
        return False

    print(f"\nKeywords searched: {', '.join(response.keywords)}")
    print(f"Candidates found: {response.total_results}")

    result = response.classification
    if result is None:
        print(f"\n{response.message}")
        return False

    print_header("PRIMARY CLASSIFICATION")
    print(f"HTS code:     {result.hts_code}")
    print(f"Description:  {result.description}")
    print(f"Confidence:   {result.confidence}%")
    print(f"General rate: {result.general_rate or 'not stated'}")
    if result.special_rate:
        print(f"Special rate: {result.special_rate}")

    if result.special_tariffs:
        print("\nSpecial tariffs:")
        for tariff in result.special_tariffs:
            print(f"  - {tariff.name}: {tariff.rate:g}% ({tariff.authority})")

    if result.alternatives:
        print("\nAlternatives:")
        for alt in result.alternatives:
            print(f"  - {alt.hts_code} ({alt.confidence}%): {alt.description}")

    print("\nReasoning:")
    for step, line in enumerate(result.reasoning, 1):
        print(f"  {step}. {line}")

    return True


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
