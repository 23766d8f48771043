"""
Configuration constants for HTS Lookup Service
"""

import os
import re
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# USITC HTS REST API
HTS_API_BASE = os.getenv("HTS_API_BASE", "https://hts.usitc.gov/reststop").rstrip("/")
HTS_SEARCH_PATH = "/search"
HTS_API_TIMEOUT = float(os.getenv("HTS_API_TIMEOUT", "5"))
HTS_REQUEST_HEADERS = {"Accept": "application/json"}

# Footnote references to the Section 301 provisions (9903.88.xx)
SECTION_301_FOOTNOTE_PATTERN = re.compile(r"9903\.88")

# Duty rate string patterns
PERCENT_RATE_PATTERN = re.compile(r"([\d.]+)%")
CENTS_RATE_PATTERN = re.compile(r"([\d.]+)¢")
FREE_RATE = "Free"
