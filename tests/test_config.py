import os

import pytest

from saucedemo_checkout.config import (
    CHECKOUT_VARS,
    CREDENTIAL_VARS,
    CheckoutInfo,
    Credentials,
    MissingEnvironmentError,
    env_flag,
    get_checkout_info,
    get_test_credentials,
)


def test_credentials_are_read_from_environment(full_env):
    assert get_test_credentials() == Credentials(username="standard_user", password="secret_sauce")


def test_checkout_info_is_read_from_environment(full_env):
    assert get_checkout_info() == CheckoutInfo(first_name="John", last_name="Doe", postal_code="12345")


@pytest.mark.parametrize("name", CREDENTIAL_VARS)
def test_missing_credential_is_fatal(full_env, monkeypatch, name):
    monkeypatch.delenv(name)

    with pytest.raises(MissingEnvironmentError) as excinfo:
        get_test_credentials()

    message = str(excinfo.value)
    assert "TEST_USERNAME and TEST_PASSWORD must be set" in message
    assert f"missing: {name}" in message
    assert "cp .env.example .env" in message
    assert excinfo.value.missing == (name,)


@pytest.mark.parametrize("name", CHECKOUT_VARS)
def test_missing_checkout_value_is_fatal(full_env, monkeypatch, name):
    monkeypatch.delenv(name)

    with pytest.raises(MissingEnvironmentError) as excinfo:
        get_checkout_info()

    message = str(excinfo.value)
    assert "CHECKOUT_FIRST_NAME, CHECKOUT_LAST_NAME, and CHECKOUT_POSTAL_CODE must be set" in message
    assert "checkout information" in message
    assert excinfo.value.missing == (name,)


def test_empty_value_counts_as_missing(full_env, monkeypatch):
    monkeypatch.setenv("TEST_PASSWORD", "")

    with pytest.raises(MissingEnvironmentError) as excinfo:
        get_test_credentials()

    assert excinfo.value.missing == ("TEST_PASSWORD",)


def test_every_missing_name_is_reported(monkeypatch):
    for name in CHECKOUT_VARS:
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(MissingEnvironmentError) as excinfo:
        get_checkout_info()

    assert excinfo.value.missing == CHECKOUT_VARS


def test_loading_does_not_touch_environment(full_env):
    before = dict(os.environ)

    get_test_credentials()
    get_checkout_info()

    assert dict(os.environ) == before


@pytest.mark.parametrize(
    "value, expected",
    [("false", False), ("0", False), ("off", False), ("No", False), (" FALSE ", False), ("true", True), ("1", True)],
)
def test_env_flag_parsing(monkeypatch, value, expected):
    monkeypatch.setenv("HEADLESS", value)

    assert env_flag("HEADLESS", True) is expected


@pytest.mark.parametrize("default", [True, False])
def test_env_flag_defaults_when_unset_or_empty(monkeypatch, default):
    monkeypatch.delenv("HEADLESS", raising=False)
    assert env_flag("HEADLESS", default) is default

    monkeypatch.setenv("HEADLESS", "")
    assert env_flag("HEADLESS", default) is default
