"""
Constants for the lifecycle CO2 comparison.

Default emission factors applied when the corresponding form field is
blank, and the fixed coefficients of the curb-weight heuristics.

IMPORTANT: No unicode characters allowed in this file (Windows charmap constraint).
"""

# Tank-to-wheel CO2 per litre of fuel
DEFAULT_ALPHA_FUEL = 2.18  # kgCO2e / L

# Grid carbon intensity
DEFAULT_ALPHA_GRID = 0.45  # kgCO2e / kWh

# Grid primary energy factor (grid-side energy per delivered kWh)
DEFAULT_PHI_GRID = 8.5  # MJ / kWh

# Battery manufacturing intensity
DEFAULT_ALPHA_BAT_PER_KWH = 80.0  # kgCO2e / kWh of capacity

# Vehicle manufacturing (battery excluded): BOF steel factor 1.46 tCO2/t
MANUFACTURING_CO2_PER_KG = 1.46  # kgCO2e / kg curb weight

# ICE fuel economy: l = 3.5 + 2.5 * (w / 1000)
ICE_FUEL_BASE = 3.5  # L / 100 km
ICE_FUEL_PER_TONNE = 2.5  # L / 100 km per 1000 kg

# BEV energy use: e = 6.0 + 0.006 * w
BEV_ENERGY_BASE = 6.0  # kWh / 100 km
BEV_ENERGY_PER_KG = 0.006  # kWh / 100 km per kg

# BEV battery capacity: clamp(0.04 * w, 45, 95)
BATTERY_KWH_PER_KG = 0.04
BATTERY_MIN_KWH = 45.0
BATTERY_MAX_KWH = 95.0
