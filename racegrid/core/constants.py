"""Shared pacing constants.

Distances are stored in millimeters everywhere, so every unit is expressed
as an exact millimeter factor here. Rate conversions are derived from those
factors instead of rounded approximations so conversions round-trip.
"""

# Canonical distance factors (millimeters per unit)
MM_PER_MM = 1.0
MM_PER_CM = 10.0
MM_PER_M = 1000.0
MM_PER_KM = 1000.0 * MM_PER_M
MM_PER_IN = 25.4
MM_PER_YD = 36 * MM_PER_IN
MM_PER_MI = 1760 * MM_PER_YD

# Distance of one statute mile / kilometer in meters
MILE_M = MM_PER_MI / MM_PER_M  # 1609.344
KM_M = MM_PER_KM / MM_PER_M

SECONDS_PER_MIN = 60.0
SECONDS_PER_HR = 3600.0

# Speed units: multiply m/s by these to get kph / mph
KPH_PER_MPS = SECONDS_PER_HR / KM_M  # 3.6
MPH_PER_MPS = SECONDS_PER_HR / MILE_M  # ~2.2369

# Per-distance units: min/km = MIN_KM_PER_MPS / (m/s)
MIN_KM_PER_MPS = KM_M / SECONDS_PER_MIN  # 50/3
MIN_MILE_PER_MPS = MILE_M / SECONDS_PER_MIN  # 26.8224

# Time spans in nanoseconds
NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000
NS_PER_MIN = 60 * NS_PER_S
NS_PER_HR = 60 * NS_PER_MIN
