"""
Display text for comparison results: break-even message, severity and
the list of values estimated from curb weight.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from emissions.records import BreakEvenStatus

NO_ESTIMATES_MESSAGE = "No estimated values (all inputs provided)"

# Field -> (label, format, unit), in display order
_DERIVED_DISPLAY = (
    ("ice_fuel_economy", "ICE fuel economy", "{:.1f}", "L/100 km"),
    ("ice_manufacturing", "ICE manufacturing CO2", "{:.0f}", "kgCO2e"),
    ("bev_energy_use", "BEV energy use", "{:.1f}", "kWh/100 km"),
    ("bev_battery_capacity", "BEV battery capacity", "{:.0f}", "kWh"),
    ("bev_manufacturing", "BEV manufacturing CO2", "{:.0f}", "kgCO2e"),
)


def break_even_message(result):
    """
    One-line summary of the break-even outcome.

    The equal-intensity case never carries a distance; it is phrased
    from the manufacturing gap carried in the status.
    """
    status = result.break_even_status
    if status is BreakEvenStatus.FINITE:
        return "Break-even at {:,.0f} km".format(result.break_even_distance)
    if status is BreakEvenStatus.NO_ADVANTAGE:
        return "No finite break-even (BEV per-km intensity is not lower)"
    if result.k_ice == result.k_bev:
        return "Already better at d=0 (equal per-km intensity)"
    return "BEV is better from 0 km"


def break_even_severity(result):
    """'warning' when the BEV never catches up, else 'success'."""
    if result.break_even_status is BreakEvenStatus.NO_ADVANTAGE:
        return "warning"
    return "success"


def derived_value_lines(result):
    """Human-readable lines for every estimated parameter."""
    lines = []
    for name, label, fmt, unit in _DERIVED_DISPLAY:
        if name in result.derived:
            lines.append("{}: {} {}".format(
                label, fmt.format(result.derived[name]), unit))
    return lines


def summary(result):
    """Display fields for the page and the JSON API."""
    return {
        "break_even_message": break_even_message(result),
        "break_even_severity": break_even_severity(result),
        "derived_lines": derived_value_lines(result) or [NO_ESTIMATES_MESSAGE],
    }
