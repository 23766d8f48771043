"""
Configuration constants for Classification Service
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Project Root Directory
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# File paths
DATA_DIR = PROJECT_ROOT / "data"
LOG_DIR = DATA_DIR / "logs"
LOG_FILE = LOG_DIR / "classification.log"

# Logging
LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"
LOG_LEVEL = "DEBUG" if DEBUG_MODE else "INFO"

# Keyword strategies
MIN_TOKEN_LENGTH = 3
MAX_KEYWORD_STRATEGIES = 5
FALLBACK_PHRASE_TOKENS = 3

STOP_WORDS = {
    "the", "and", "for", "with", "from", "that", "this", "are", "was",
    "used", "made", "sizes", "adult", "men", "women", "boy", "girl",
    "not", "component", "another", "product", "printed", "screen",
}

# Product types that map onto tariff headings
PRIMARY_PRODUCT_NOUNS = {
    "sweatshirt", "shirt", "pants", "dress", "jacket", "shoe", "bag",
    "earbuds", "headphones", "cable", "phone", "laptop", "toy",
    "furniture", "blouse", "sweater", "pullover", "trouser", "skirt",
    "coat", "hat", "glove", "sock",
}

# Construction methods that refine a heading without identifying it
MODIFIER_TERMS = {"hooded", "knitted", "woven", "crocheted"}

MATERIAL_TERMS = {
    "cotton", "polyester", "silk", "wool", "nylon", "leather", "rubber",
    "plastic", "steel", "aluminum", "glass", "ceramic", "wood",
}

# Relevance scoring
SCORE_BASELINE = 50
SCORE_PER_CODE_DIGIT = 2
SCORE_PER_INDENT = 3
SCORE_PER_WORD_MATCH = 5
SCORE_WORD_MIN_LENGTH = 4
SCORE_MATERIAL_MATCH = 10
SCORE_PRODUCT_TYPE_MATCH = 15
SCORE_GENERIC_PENALTY = 10
SCORE_CAP = 95

SCORING_MATERIAL_TERMS = [
    "cotton", "polyester", "silk", "wool", "leather", "steel", "plastic",
]
SCORING_PRODUCT_TERMS = [
    "sweater", "sweatshirt", "pullover", "shirt", "trouser", "pant",
    "dress", "jacket", "coat", "shoe", "boot", "hat", "glove",
    "knitted", "crocheted", "woven", "hosiery",
]
GENERIC_DESCRIPTIONS = {"other", "parts"}

# Confidence display ranges
PRIMARY_CONFIDENCE_RANGE = (40, 95)
ALTERNATIVE_CONFIDENCE_RANGE = (10, 85)
MAX_ALTERNATIVES = 3

# HTS search
SEARCH_RESULT_LIMIT = 20

NO_MATCH_MESSAGE = (
    "No matching HTS codes found. Try a more specific product description."
)
CLASSIFICATION_FAILED_MESSAGE = "Classification failed. Please try again."
DATA_SOURCE_NAME = "USITC Harmonized Tariff Schedule database (hts.usitc.gov)"

# Ensure directories exist
LOG_DIR.mkdir(parents=True, exist_ok=True)
