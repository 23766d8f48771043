"""
Configuration constants for Trade Remedy Service

The surcharge tables below are a snapshot of one policy period. They are
data, not algorithm: an updated table file can be supplied through
TRADE_REMEDY_TABLES_PATH.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Optional JSON file overriding the built-in tables
_tables_path = os.getenv("TRADE_REMEDY_TABLES_PATH")
TRADE_REMEDY_TABLES_PATH = Path(_tables_path) if _tables_path else None

# Section 301 (USTR)
SECTION_301_COUNTRY = "CN"
SECTION_301_AUTHORITY = "USTR"
SECTION_301_TEXTILE_CHAPTERS = ["61", "62", "63"]
SECTION_301_TEXTILE_RATE = 7.5
SECTION_301_TEXTILE_LIST = "List 4A"
SECTION_301_TEXTILE_PROVISION = "9903.88.15"
SECTION_301_DEFAULT_RATE = 25.0
SECTION_301_DEFAULT_LIST = "Lists 1-3"
SECTION_301_DEFAULT_PROVISION = "9903.88.01-03"

# Section 232 (DOC/BIS)
SECTION_232_AUTHORITY = "DOC/BIS"
STEEL_HEADINGS = [str(heading) for heading in range(7206, 7230)]
STEEL_RATE = 25.0
ALUMINUM_HEADINGS = ["7601", "7604", "7605", "7606", "7607", "7608", "7609"]
ALUMINUM_RATE = 10.0

# Free trade agreement partners
FTA_PARTNERS = {
    "USMCA": ["MX", "CA"],
    "KORUS FTA": ["KR"],
    "AUSFTA": ["AU"],
}

# Country names for display
COUNTRY_NAMES = {
    "CN": "China",
    "VN": "Vietnam",
    "MX": "Mexico",
    "IN": "India",
    "BD": "Bangladesh",
    "TH": "Thailand",
    "KR": "South Korea",
    "TW": "Taiwan",
    "CA": "Canada",
    "DE": "Germany",
    "JP": "Japan",
    "AU": "Australia",
}
