"""Pytest fixtures for amcapital tests."""

import os
import sys
from datetime import datetime, timezone

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from amcapital.core.settings import AppSettings
from amcapital.domain.models.simulation import SimulationConfig


@pytest.fixture
def long_term_config():
    """T2 of 50 m² in Paris, rented unfurnished."""
    return SimulationConfig(
        price=250_000,
        surface=50,
        unit_type="t2",
        exploitation_mode="long_term",
        city="paris",
    )


@pytest.fixture
def short_term_config():
    return SimulationConfig(
        price=250_000,
        surface=50,
        unit_type="t2",
        exploitation_mode="short_term",
        city="paris",
    )


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def settings(tmp_path):
    return AppSettings(reports_dir=str(tmp_path), enable_export=True)


@pytest.fixture
def valid_input():
    return {
        "price": 250000,
        "surface": 50,
        "unitType": "t2",
        "exploitationMode": "long",
        "city": "Paris",
    }


@pytest.fixture
def valid_contact():
    return {
        "firstName": "Claire",
        "lastName": "Martin",
        "email": "claire.martin@example.fr",
        "phone": "06 12 34 56 78",
        "projectType": "investment",
        "message": "Je souhaite investir à Lyon.",
    }
