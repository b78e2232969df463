"""
Input boundary: form fields / JSON payloads -> InputRecord.

Form field names (also the share-URL query keys):

    distances, alpha-fuel, alpha-grid, phi-grid, alpha-bat-per-kwh,
    ice-weight, ice-fuel-economy, ice-manufacturing,
    bev-weight, bev-energy-use, bev-battery-capacity, bev-manufacturing

JSON callers may use the snake_case spelling of any field
(e.g. "ice_weight"). Blank values mean "use the default" for emission
factors and "estimate from curb weight" for vehicle parameters.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import math

from emissions.constants import (
    DEFAULT_ALPHA_FUEL,
    DEFAULT_ALPHA_GRID,
    DEFAULT_PHI_GRID,
    DEFAULT_ALPHA_BAT_PER_KWH,
)
from emissions.errors import ValidationError
from emissions.records import InputRecord

# Form field order; share URLs and the page form follow it
FORM_FIELDS = (
    "distances",
    "alpha-fuel",
    "alpha-grid",
    "phi-grid",
    "alpha-bat-per-kwh",
    "ice-weight",
    "ice-fuel-economy",
    "ice-manufacturing",
    "bev-weight",
    "bev-energy-use",
    "bev-battery-capacity",
    "bev-manufacturing",
)

FIELD_LABELS = {
    "alpha-fuel": "alpha_fuel",
    "alpha-grid": "alpha_grid",
    "phi-grid": "phi_grid",
    "alpha-bat-per-kwh": "alpha_bat_per_kWh",
    "ice-weight": "ICE weight",
    "ice-fuel-economy": "ICE fuel economy",
    "ice-manufacturing": "ICE manufacturing CO2",
    "bev-weight": "BEV weight",
    "bev-energy-use": "BEV energy use",
    "bev-battery-capacity": "BEV battery capacity",
    "bev-manufacturing": "BEV manufacturing CO2",
}

# Emission factors: form field -> (record attribute, default when blank)
_FACTOR_FIELDS = (
    ("alpha-fuel", "alpha_fuel", DEFAULT_ALPHA_FUEL),
    ("alpha-grid", "alpha_grid", DEFAULT_ALPHA_GRID),
    ("phi-grid", "phi_grid", DEFAULT_PHI_GRID),
    ("alpha-bat-per-kwh", "alpha_bat_per_kwh", DEFAULT_ALPHA_BAT_PER_KWH),
)

# Vehicle parameters left blank are estimated from curb weight.
# Economy values are divisors and must be strictly positive.
_OPTIONAL_FIELDS = (
    ("ice-fuel-economy", "ice_fuel_economy", True),
    ("ice-manufacturing", "ice_manufacturing", False),
    ("bev-energy-use", "bev_energy_use", True),
    ("bev-battery-capacity", "bev_battery_capacity", False),
    ("bev-manufacturing", "bev_manufacturing", False),
)

ERROR_PREFIX = "Input validation error: "


def _is_blank(value):
    return value is None or (isinstance(value, str) and value.strip() == "")


def _to_float(value):
    """float() that returns NaN instead of raising on junk."""
    if isinstance(value, bool):
        return float("nan")
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def normalize_fields(data):
    """
    Map a form / JSON mapping onto the canonical form field names.

    Unknown keys are dropped. When both spellings are present the
    form spelling wins.
    """
    fields = {}
    if not data:
        return fields
    for name in FORM_FIELDS:
        alias = name.replace("-", "_")
        if name in data:
            fields[name] = data[name]
        elif alias in data:
            fields[name] = data[alias]
    return fields


def parse_distances(value, max_count=None):
    """
    Parse the distance list.

    Accepts a comma-separated string or a list of numbers. Entries that
    are not finite non-negative numbers are dropped; the rest are sorted
    ascending.

    Parameters
    ----------
    value : str or list
        Raw distances.
    max_count : int, optional
        Upper bound on the number of distances.

    Returns
    -------
    list of float

    Raises
    ------
    ValidationError
        If the input is blank, nothing valid remains, or there are more
        than max_count entries.
    """
    if _is_blank(value):
        raise ValidationError("Distances cannot be empty")

    if isinstance(value, str):
        items = [item.strip() for item in value.split(",")]
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        items = [value]

    distances = []
    for item in items:
        d = _to_float(item)
        if math.isfinite(d) and d >= 0:
            distances.append(d)
    distances.sort()

    if not distances:
        raise ValidationError("No valid distances found")
    if max_count is not None and len(distances) > max_count:
        raise ValidationError(
            "Too many distances ({}); at most {} allowed".format(
                len(distances), max_count))
    return distances


def parse_number(value, field_label, minimum=0, strict=False):
    """
    Parse an optional numeric field.

    Parameters
    ----------
    value : str, float or None
        Raw field value. Blank means not supplied.
    field_label : str
        Name used in the error message.
    minimum : float
        Smallest accepted value.
    strict : bool
        If True the value must be strictly greater than minimum.

    Returns
    -------
    float or None
        None when the field is blank.

    Raises
    ------
    ValidationError
        If the value is not a finite number or is below the minimum.
    """
    if _is_blank(value):
        return None
    num = _to_float(value)
    if strict:
        ok = math.isfinite(num) and num > minimum
        bound = "> {}".format(minimum)
    else:
        ok = math.isfinite(num) and num >= minimum
        bound = ">= {}".format(minimum)
    if not ok:
        raise ValidationError("{} must be a number {}".format(field_label, bound))
    return num


def _required_weight(fields, name):
    weight = parse_number(fields.get(name), FIELD_LABELS[name])
    if not weight:
        raise ValidationError("{} is required".format(FIELD_LABELS[name]))
    return weight


def parse_inputs(data, max_distances=None):
    """
    Validate raw form fields and build an InputRecord.

    Parameters
    ----------
    data : mapping
        Form fields (form names or snake_case aliases).
    max_distances : int, optional
        Cap on the number of distances.

    Returns
    -------
    InputRecord

    Raises
    ------
    ValidationError
        Message prefixed with "Input validation error: ".
    """
    fields = normalize_fields(data)
    try:
        distances = parse_distances(fields.get("distances"), max_distances)

        kwargs = {}
        for name, attr, default in _FACTOR_FIELDS:
            value = parse_number(fields.get(name), FIELD_LABELS[name])
            kwargs[attr] = default if value is None else value

        kwargs["ice_weight"] = _required_weight(fields, "ice-weight")
        kwargs["bev_weight"] = _required_weight(fields, "bev-weight")

        for name, attr, strict in _OPTIONAL_FIELDS:
            kwargs[attr] = parse_number(fields.get(name), FIELD_LABELS[name],
                                        strict=strict)
    except ValidationError as exc:
        raise ValidationError(ERROR_PREFIX + str(exc)) from exc

    return InputRecord(distances=distances, **kwargs)
