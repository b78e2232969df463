"""
CSV export of the cumulative emissions table.

Column order is fixed: distance, E_ICE, E_BEV, delta, k_ICE, k_BEV,
PE_BEV. Emissions and primary energy are rounded to whole units,
intensities to three decimals.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

import csv
import io

CSV_FILENAME = "ice_vs_bev_emissions.csv"

CSV_HEADERS = (
    "Distance (km)",
    "E_ICE(d) (kgCO2e)",
    "E_BEV(d) (kgCO2e)",
    "Delta (BEV - ICE) (kgCO2e)",
    "k_ICE (kgCO2e/km)",
    "k_BEV (kgCO2e/km)",
    "PE_BEV(d) (MJ)",
)


def format_distance(distance):
    """Whole distances without a trailing '.0'."""
    if float(distance).is_integer():
        return str(int(distance))
    return repr(float(distance))


def format_fixed(value, decimals):
    """Fixed-point text, with negative zero printed as 0."""
    text = "{:.{}f}".format(value, decimals)
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def csv_row(row):
    """Formatted cells for one RowResult."""
    return [
        format_distance(row.distance),
        format_fixed(row.e_ice, 0),
        format_fixed(row.e_bev, 0),
        format_fixed(row.delta, 0),
        format_fixed(row.k_ice, 3),
        format_fixed(row.k_bev, 3),
        format_fixed(row.primary_energy_bev, 0),
    ]


def write_csv(series, stream):
    """
    Write the emissions table to a text stream.

    Parameters
    ----------
    series : iterable of RowResult
        Rows in display order.
    stream : file-like
        Text stream opened with newline="".
    """
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in series:
        writer.writerow(csv_row(row))


def to_csv(series):
    """Return the emissions table as CSV text."""
    buf = io.StringIO()
    write_csv(series, buf)
    return buf.getvalue()
