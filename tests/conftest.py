"""
Pytest fixtures for the comparator test suite.
"""

import pytest
from app import create_app
from emissions.records import InputRecord


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def reference_inputs():
    """Form-default scenario: weights only, everything else estimated."""
    return InputRecord(
        distances=[0, 20000, 40000, 60000, 100000],
        ice_weight=1750,
        bev_weight=1900,
        alpha_fuel=2.7,
        alpha_grid=0.45,
        phi_grid=8.5,
        alpha_bat_per_kwh=80,
    )


@pytest.fixture
def reference_form():
    """The same scenario as raw form fields."""
    return {
        "distances": "0,20000,40000,60000,100000",
        "alpha-fuel": "2.7",
        "alpha-grid": "0.45",
        "phi-grid": "8.5",
        "alpha-bat-per-kwh": "80",
        "ice-weight": "1750",
        "bev-weight": "1900",
    }
