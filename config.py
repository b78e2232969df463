"""
Default Flask configuration.

Loaded first by create_app(); environment variables prefixed with
CO2CMP_ (e.g. CO2CMP_MAX_DISTANCES=1000) and the mapping passed to
create_app() override these values.
"""


class DefaultConfig:
    # Upper bound on the number of distances in one request
    MAX_DISTANCES = 500

    # Chart rendering
    CHART_SIZE = (8.0, 5.0)  # inches
    CHART_DPI = 100

    LOG_LEVEL = "INFO"

    # Values the form starts from and returns to on reset
    FORM_DEFAULTS = {
        "distances": "0,20000,40000,60000,100000",
        "alpha-fuel": "2.7",
        "alpha-grid": "0.45",
        "phi-grid": "8.5",
        "alpha-bat-per-kwh": "80",
        "ice-weight": "1750",
        "bev-weight": "1900",
    }
