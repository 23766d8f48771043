"""
Configuration constants for Duty Calculator Service
"""

# Merchandise Processing Fee (all entries)
MPF_RATE = 0.003464
MPF_MIN = 31.67
MPF_MAX = 614.35

# Harbor Maintenance Fee (ocean shipments only)
HMF_RATE = 0.00125
HMF_MODE = "ocean"

# Monetary outputs are rounded once, at the boundary
MONEY_DECIMALS = 2
