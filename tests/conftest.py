import pytest

from contfrac.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Re-read CONTFRAC_* variables for every test."""
    reset_config()
    yield
    reset_config()
