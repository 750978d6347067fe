import pytest

from .fakes import FakeSaucePage

ENV = {
    "TEST_USERNAME": "standard_user",
    "TEST_PASSWORD": "secret_sauce",
    "CHECKOUT_FIRST_NAME": "John",
    "CHECKOUT_LAST_NAME": "Doe",
    "CHECKOUT_POSTAL_CODE": "12345",
}


@pytest.fixture
def full_env(monkeypatch):
    for name, value in ENV.items():
        monkeypatch.setenv(name, value)
    return ENV


@pytest.fixture
def shop():
    return FakeSaucePage()


@pytest.fixture
def inventory_shop(shop):
    """A fake store already logged in and showing the inventory."""
    shop.start_at("inventory.html")
    return shop
