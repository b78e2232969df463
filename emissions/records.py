"""
Immutable records passed through the comparison pipeline.

    InputRecord        - validated user input, optional fields tagged
    ResolvedInputs     - input after heuristic fill-in (all concrete)
    RowResult          - one distance row of the cumulative table
    CalculationResult  - complete engine output

Optional physical parameters are held as either Provided(value) or the
TO_ESTIMATE marker, so a user-supplied zero is never mistaken for a
missing value.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Tuple, Union

from emissions.constants import (
    DEFAULT_ALPHA_FUEL,
    DEFAULT_ALPHA_GRID,
    DEFAULT_PHI_GRID,
    DEFAULT_ALPHA_BAT_PER_KWH,
)


@dataclass(frozen=True)
class Provided:
    """A parameter value supplied by the user."""

    value: float


class ToEstimate:
    """Marker for a parameter to be derived from curb weight."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "TO_ESTIMATE"

    def __reduce__(self):
        return (ToEstimate, ())


TO_ESTIMATE = ToEstimate()

OptionalParam = Union[Provided, ToEstimate]

# Fields of InputRecord that fall back to a heuristic when absent
ESTIMATED_FIELDS = (
    "ice_fuel_economy",
    "ice_manufacturing",
    "bev_energy_use",
    "bev_battery_capacity",
    "bev_manufacturing",
)


def optional_param(value):
    """Wrap a nullable number: None -> TO_ESTIMATE, else Provided(float)."""
    if value is None or isinstance(value, ToEstimate):
        return TO_ESTIMATE
    if isinstance(value, Provided):
        return value
    return Provided(float(value))


class BreakEvenStatus(str, enum.Enum):
    """Outcome of the break-even solve."""

    FINITE = "finite"
    NO_ADVANTAGE = "no_advantage"
    IMMEDIATE_ADVANTAGE = "immediate_advantage"


@dataclass(frozen=True)
class InputRecord:
    """
    Validated comparison input.

    Attributes
    ----------
    distances : tuple of float
        Non-negative distances in km, ascending.
    ice_weight, bev_weight : float
        Curb weights in kg. Required, > 0.
    alpha_fuel : float
        kgCO2e per litre of fuel.
    alpha_grid : float
        kgCO2e per kWh of grid electricity.
    phi_grid : float
        Primary energy factor in MJ per kWh.
    alpha_bat_per_kwh : float
        Battery manufacturing emissions in kgCO2e per kWh of capacity.
    ice_fuel_economy, ice_manufacturing, bev_energy_use,
    bev_battery_capacity, bev_manufacturing : Provided or ToEstimate
        Optional physical parameters.
    """

    distances: Tuple[float, ...]
    ice_weight: float
    bev_weight: float
    alpha_fuel: float = DEFAULT_ALPHA_FUEL
    alpha_grid: float = DEFAULT_ALPHA_GRID
    phi_grid: float = DEFAULT_PHI_GRID
    alpha_bat_per_kwh: float = DEFAULT_ALPHA_BAT_PER_KWH
    ice_fuel_economy: OptionalParam = TO_ESTIMATE
    ice_manufacturing: OptionalParam = TO_ESTIMATE
    bev_energy_use: OptionalParam = TO_ESTIMATE
    bev_battery_capacity: OptionalParam = TO_ESTIMATE
    bev_manufacturing: OptionalParam = TO_ESTIMATE

    def __post_init__(self):
        # Normalize so callers may pass lists and plain numbers / None
        object.__setattr__(self, "distances",
                           tuple(float(d) for d in self.distances))
        for name in ESTIMATED_FIELDS:
            object.__setattr__(self, name, optional_param(getattr(self, name)))

    def missing_fields(self):
        """Names of optional parameters that need a heuristic estimate."""
        return [name for name in ESTIMATED_FIELDS
                if isinstance(getattr(self, name), ToEstimate)]

    def provided_value(self, name):
        """Return the user value for an optional field, or None."""
        param = getattr(self, name)
        return param.value if isinstance(param, Provided) else None

    def to_dict(self):
        """Serialize with optional fields as number or null."""
        result = {
            "distances": list(self.distances),
            "ice_weight": self.ice_weight,
            "bev_weight": self.bev_weight,
            "alpha_fuel": self.alpha_fuel,
            "alpha_grid": self.alpha_grid,
            "phi_grid": self.phi_grid,
            "alpha_bat_per_kwh": self.alpha_bat_per_kwh,
        }
        for name in ESTIMATED_FIELDS:
            result[name] = self.provided_value(name)
        return result


@dataclass(frozen=True)
class ResolvedInputs:
    """InputRecord with every optional parameter made concrete."""

    ice_fuel_economy: float
    ice_manufacturing: float
    bev_energy_use: float
    bev_battery_capacity: float
    bev_manufacturing: float


@dataclass(frozen=True)
class RowResult:
    """One row of the cumulative emissions table."""

    distance: float
    e_ice: float
    e_bev: float
    delta: float
    k_ice: float
    k_bev: float
    primary_energy_bev: float

    def to_dict(self):
        return {
            "distance": self.distance,
            "e_ice": self.e_ice,
            "e_bev": self.e_bev,
            "delta": self.delta,
            "k_ice": self.k_ice,
            "k_bev": self.k_bev,
            "primary_energy_bev": self.primary_energy_bev,
        }


@dataclass(frozen=True)
class CalculationResult:
    """
    Complete engine output.

    Attributes
    ----------
    k_ice, k_bev : float
        Emission intensity per km in kgCO2e/km.
    alpha_bat : float
        Battery manufacturing emissions in kgCO2e.
    delta_manuf : float
        (BEV manufacturing + battery) - ICE manufacturing, kgCO2e.
    break_even_distance : float or None
        Distance in km where the curves cross, when FINITE.
    break_even_status : BreakEvenStatus
    series : tuple of RowResult
        One row per input distance, in input order.
    inputs : InputRecord
        The record the result was computed from.
    derived : mapping
        Heuristic estimates for the fields that were left blank.
    """

    k_ice: float
    k_bev: float
    alpha_bat: float
    delta_manuf: float
    break_even_distance: Optional[float]
    break_even_status: BreakEvenStatus
    series: Tuple[RowResult, ...]
    inputs: InputRecord
    derived: MappingProxyType = field(
        default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, "series", tuple(self.series))
        object.__setattr__(self, "derived",
                           MappingProxyType(dict(self.derived)))

    def to_dict(self):
        """Serialize for the JSON API."""
        return {
            "k_ice": self.k_ice,
            "k_bev": self.k_bev,
            "alpha_bat": self.alpha_bat,
            "delta_manuf": self.delta_manuf,
            "break_even_distance": self.break_even_distance,
            "break_even_status": self.break_even_status.value,
            "derived": dict(self.derived),
            "inputs": self.inputs.to_dict(),
            "series": [row.to_dict() for row in self.series],
        }
