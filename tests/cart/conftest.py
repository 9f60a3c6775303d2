import pytest


@pytest.fixture(autouse=True)
def start_on_catalog(logged_in):
    """Every cart test starts logged in as the standard user"""
    return logged_in
