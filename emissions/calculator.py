"""
Emissions calculator: ICE vs BEV cumulative lifecycle CO2.

Linear lifecycle model:

    E_ICE(d) = E_manuf^ICE + d * k_ICE
    E_BEV(d) = (E_manuf^BEV + alpha_bat) + d * k_BEV

    k_ICE    = (1 / l) * alpha_fuel
    k_BEV    = (1 / e) * alpha_grid
    alpha_bat = C_bat * alpha_bat_per_kWh

    d* = ((E_manuf^BEV + alpha_bat) - E_manuf^ICE) / (k_ICE - k_BEV)

Pipeline: derive missing values -> intensities -> break-even -> series.
Every function is pure; calculate() builds fresh records on every call.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import logging

from emissions import heuristics
from emissions.errors import DomainError
from emissions.records import (
    BreakEvenStatus,
    CalculationResult,
    ResolvedInputs,
    RowResult,
)

log = logging.getLogger(__name__)

# Heuristic used for each optional field, and the weight it reads
_ESTIMATORS = {
    "ice_fuel_economy": (heuristics.ice_fuel_economy, "ice_weight"),
    "ice_manufacturing": (heuristics.manufacturing_co2, "ice_weight"),
    "bev_energy_use": (heuristics.bev_energy_use, "bev_weight"),
    "bev_battery_capacity": (heuristics.bev_battery_capacity, "bev_weight"),
    "bev_manufacturing": (heuristics.manufacturing_co2, "bev_weight"),
}


def derive_missing_values(inputs):
    """
    Estimate every optional parameter the user left blank.

    Parameters
    ----------
    inputs : InputRecord

    Returns
    -------
    dict
        Field name -> estimated value, only for TO_ESTIMATE fields.
        Provided values never appear here.
    """
    derived = {}
    for name in inputs.missing_fields():
        estimator, weight_field = _ESTIMATORS[name]
        derived[name] = estimator(getattr(inputs, weight_field))
    return derived


def resolve_inputs(inputs, derived):
    """Merge provided values with heuristic estimates."""
    values = {}
    for name in _ESTIMATORS:
        provided = inputs.provided_value(name)
        values[name] = provided if provided is not None else derived[name]
    return ResolvedInputs(**values)


def per_km_intensities(ice_fuel_economy, bev_energy_use, alpha_fuel, alpha_grid):
    """
    Emission intensity per km for each vehicle.

    Parameters
    ----------
    ice_fuel_economy : float
        L/100km, must be > 0.
    bev_energy_use : float
        kWh/100km, must be > 0.
    alpha_fuel : float
        kgCO2e per litre.
    alpha_grid : float
        kgCO2e per kWh.

    Returns
    -------
    tuple of float
        (k_ice, k_bev) in kgCO2e/km.

    Raises
    ------
    DomainError
        If either economy is zero or negative.
    """
    if ice_fuel_economy <= 0:
        raise DomainError(
            "ICE fuel economy must be positive, got {}".format(ice_fuel_economy))
    if bev_energy_use <= 0:
        raise DomainError(
            "BEV energy use must be positive, got {}".format(bev_energy_use))
    k_ice = (1 / ice_fuel_economy) * alpha_fuel
    k_bev = (1 / bev_energy_use) * alpha_grid
    return k_ice, k_bev


def battery_emissions(bev_battery_capacity, alpha_bat_per_kwh):
    """Battery manufacturing emissions alpha_bat in kgCO2e."""
    return bev_battery_capacity * alpha_bat_per_kwh


def manufacturing_gap(ice_manufacturing, bev_manufacturing, alpha_bat):
    """BEV (vehicle + battery) minus ICE manufacturing emissions."""
    return (bev_manufacturing + alpha_bat) - ice_manufacturing


def break_even(k_ice, k_bev, delta_manuf):
    """
    Solve for the distance where the cumulative curves cross.

    Parameters
    ----------
    k_ice, k_bev : float
        Per-km intensities in kgCO2e/km.
    delta_manuf : float
        Manufacturing gap in kgCO2e.

    Returns
    -------
    tuple
        (distance or None, BreakEvenStatus).

        k_ice <  k_bev            -> (None, NO_ADVANTAGE)
        k_ice == k_bev            -> (None, IMMEDIATE_ADVANTAGE) if
                                     delta_manuf <= 0, else NO_ADVANTAGE
        k_ice >  k_bev, d* >= 0   -> (d*, FINITE)
        k_ice >  k_bev, d* <  0   -> (None, IMMEDIATE_ADVANTAGE)
    """
    if k_ice < k_bev:
        return None, BreakEvenStatus.NO_ADVANTAGE
    if k_ice == k_bev:
        # Equal slopes never cross; report no numeric distance either way
        if delta_manuf <= 0:
            return None, BreakEvenStatus.IMMEDIATE_ADVANTAGE
        return None, BreakEvenStatus.NO_ADVANTAGE

    distance = delta_manuf / (k_ice - k_bev)
    if distance >= 0:
        return distance, BreakEvenStatus.FINITE
    return None, BreakEvenStatus.IMMEDIATE_ADVANTAGE


def emissions_row(distance, k_ice, k_bev, ice_total_manuf, bev_total_manuf,
                  bev_energy_use, phi_grid):
    """
    Cumulative emissions at a single distance.

    Parameters
    ----------
    distance : float
        Distance in km.
    k_ice, k_bev : float
        Per-km intensities in kgCO2e/km.
    ice_total_manuf : float
        ICE manufacturing emissions in kgCO2e.
    bev_total_manuf : float
        BEV manufacturing plus battery emissions in kgCO2e.
    bev_energy_use : float
        kWh/100km.
    phi_grid : float
        Primary energy factor in MJ/kWh.

    Returns
    -------
    RowResult
    """
    e_ice = ice_total_manuf + distance * k_ice
    e_bev = bev_total_manuf + distance * k_bev
    return RowResult(
        distance=distance,
        e_ice=e_ice,
        e_bev=e_bev,
        delta=e_bev - e_ice,
        k_ice=k_ice,
        k_bev=k_bev,
        primary_energy_bev=distance * (bev_energy_use / 100) * phi_grid,
    )


def cumulative_series(distances, resolved, k_ice, k_bev, alpha_bat, phi_grid):
    """Emissions rows for every distance, in input order."""
    bev_total_manuf = resolved.bev_manufacturing + alpha_bat
    return tuple(
        emissions_row(d, k_ice, k_bev, resolved.ice_manufacturing,
                      bev_total_manuf, resolved.bev_energy_use, phi_grid)
        for d in distances
    )


def calculate(inputs):
    """
    Run the full comparison for one validated input record.

    Parameters
    ----------
    inputs : InputRecord

    Returns
    -------
    CalculationResult

    Raises
    ------
    DomainError
        If a resolved fuel or energy economy is not positive.
    """
    derived = derive_missing_values(inputs)
    if derived:
        log.debug("Estimated from curb weight: %s", sorted(derived))
    resolved = resolve_inputs(inputs, derived)

    k_ice, k_bev = per_km_intensities(
        resolved.ice_fuel_economy, resolved.bev_energy_use,
        inputs.alpha_fuel, inputs.alpha_grid)

    alpha_bat = battery_emissions(resolved.bev_battery_capacity,
                                  inputs.alpha_bat_per_kwh)
    delta_manuf = manufacturing_gap(resolved.ice_manufacturing,
                                    resolved.bev_manufacturing, alpha_bat)
    distance, status = break_even(k_ice, k_bev, delta_manuf)
    log.debug("Break-even: status=%s distance=%s", status.value, distance)

    series = cumulative_series(inputs.distances, resolved, k_ice, k_bev,
                               alpha_bat, inputs.phi_grid)

    return CalculationResult(
        k_ice=k_ice,
        k_bev=k_bev,
        alpha_bat=alpha_bat,
        delta_manuf=delta_manuf,
        break_even_distance=distance,
        break_even_status=status,
        series=series,
        inputs=inputs,
        derived=derived,
    )
