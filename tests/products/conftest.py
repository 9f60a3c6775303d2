import pytest


@pytest.fixture(autouse=True)
def start_on_catalog(logged_in):
    """Every catalog test starts logged in as the standard user"""
    return logged_in
