"""Live-browser fixtures. Configuration is resolved before the browser starts."""

import pytest
import pytest_asyncio
from playwright.async_api import async_playwright

from saucedemo_checkout.config import HEADLESS, get_checkout_info, get_test_credentials


@pytest.fixture
def credentials():
    return get_test_credentials()


@pytest.fixture
def checkout_info():
    return get_checkout_info()


@pytest_asyncio.fixture
async def browser(credentials, checkout_info):
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=HEADLESS)
        yield browser
        await browser.close()


@pytest_asyncio.fixture
async def page(browser):
    context = await browser.new_context()
    page = await context.new_page()
    yield page
    await context.close()
