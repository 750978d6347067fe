import os
from typing import Dict, Sequence

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

FALSE_VALUES = {"0", "false", "no", "off"}


def env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name, "").strip().lower()
    if not value:
        return default
    return value not in FALSE_VALUES


# optional settings
SAUCE_URL = os.getenv("SAUCE_URL", "https://www.saucedemo.com/")
HEADLESS = env_flag("HEADLESS", True)

CREDENTIAL_VARS = ("TEST_USERNAME", "TEST_PASSWORD")
CHECKOUT_VARS = ("CHECKOUT_FIRST_NAME", "CHECKOUT_LAST_NAME", "CHECKOUT_POSTAL_CODE")


class MissingEnvironmentError(RuntimeError):
    """A required environment variable is unset or empty."""

    def __init__(self, names: Sequence[str], missing: Sequence[str], what: str):
        self.names = tuple(names)
        self.missing = tuple(missing)
        super().__init__(
            "\nMissing required environment variables!\n\n"
            f"{_join_names(self.names)} must be set (missing: {', '.join(self.missing)}).\n\n"
            "Setup instructions:\n"
            "1. Copy .env.example to .env:\n"
            "   cp .env.example .env\n\n"
            f"2. Edit .env and add your {what}\n\n"
            "3. Run tests: pytest -m e2e\n"
        )


# Request models
class Credentials(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class CheckoutInfo(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    postal_code: str = Field(min_length=1)


def _join_names(names: Sequence[str]) -> str:
    if len(names) <= 2:
        return " and ".join(names)
    return ", ".join(names[:-1]) + ", and " + names[-1]


def _require(names: Sequence[str], what: str) -> Dict[str, str]:
    values = {name: os.getenv(name, "") for name in names}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise MissingEnvironmentError(names, missing, what)
    return values


def get_test_credentials() -> Credentials:
    values = _require(CREDENTIAL_VARS, "credentials")
    return Credentials(username=values["TEST_USERNAME"], password=values["TEST_PASSWORD"])


def get_checkout_info() -> CheckoutInfo:
    values = _require(CHECKOUT_VARS, "checkout information")
    return CheckoutInfo(
        first_name=values["CHECKOUT_FIRST_NAME"],
        last_name=values["CHECKOUT_LAST_NAME"],
        postal_code=values["CHECKOUT_POSTAL_CODE"],
    )
