"""
Curb-weight heuristics for missing vehicle parameters.

Linear approximations calibrated for typical passenger vehicles:

    E_manuf  = 1.46 * w                     [kgCO2e]
    l_ICE    = 3.5 + 2.5 * (w / 1000)       [L/100km]
    e_BEV    = 6.0 + 0.006 * w              [kWh/100km]
    C_bat    = clamp(0.04 * w, 45, 95)      [kWh]

Each function takes the curb weight in kilograms and is only called for
fields the user left blank. Callers validate w > 0 beforehand.
"""

from emissions.constants import (
    MANUFACTURING_CO2_PER_KG,
    ICE_FUEL_BASE, ICE_FUEL_PER_TONNE,
    BEV_ENERGY_BASE, BEV_ENERGY_PER_KG,
    BATTERY_KWH_PER_KG, BATTERY_MIN_KWH, BATTERY_MAX_KWH,
)


def manufacturing_co2(weight_kg):
    """
    Vehicle manufacturing emissions, battery excluded.

    Parameters
    ----------
    weight_kg : float
        Curb weight in kilograms.

    Returns
    -------
    float
        Manufacturing emissions in kgCO2e.
    """
    return MANUFACTURING_CO2_PER_KG * weight_kg


def ice_fuel_economy(weight_kg):
    """ICE fuel consumption in L/100km from curb weight."""
    return ICE_FUEL_BASE + ICE_FUEL_PER_TONNE * (weight_kg / 1000)


def bev_energy_use(weight_kg):
    """BEV energy consumption in kWh/100km from curb weight."""
    return BEV_ENERGY_BASE + BEV_ENERGY_PER_KG * weight_kg


def bev_battery_capacity(weight_kg):
    """
    BEV battery capacity in kWh, clamped to [45, 95] for any weight.
    """
    return max(BATTERY_MIN_KWH, min(BATTERY_MAX_KWH, BATTERY_KWH_PER_KG * weight_kg))
