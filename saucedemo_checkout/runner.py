import asyncio

from playwright.async_api import async_playwright, TimeoutError as PlaywrightTimeoutError, Error as PlaywrightError

from saucedemo_checkout.config import (
    HEADLESS,
    SAUCE_URL,
    CheckoutInfo,
    Credentials,
    MissingEnvironmentError,
    get_checkout_info,
    get_test_credentials,
)
from saucedemo_checkout.flow import CheckoutFlowError, CheckoutResult, complete_checkout

ITEM_COUNT = 3


async def run_automation(credentials: Credentials, checkout_info: CheckoutInfo, headless: bool) -> CheckoutResult:
    """
    Runs the checkout in a fresh browser and always closes it afterwards.
    """
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=headless)
        try:
            context = await browser.new_context()
            page = await context.new_page()
            return await complete_checkout(page, credentials, checkout_info, ITEM_COUNT, SAUCE_URL)
        finally:
            await browser.close()


def run() -> int:
    """
    Runs the checkout end-to-end and prints a final result.
    Returns an exit code (0 = success, 1 = failed check or missing config, 2 = browser error).
    """
    try:
        credentials = get_test_credentials()
        checkout_info = get_checkout_info()
    except MissingEnvironmentError as e:
        print(e)
        return 1

    try:
        result = asyncio.run(run_automation(credentials, checkout_info, HEADLESS))

    except CheckoutFlowError as e:

        print(f"FAILURE: {e}")
        return 1

    except ValueError as e:

        print(f"FAILURE: {e}")
        return 1

    except PlaywrightTimeoutError:

        print("A step timed out. The page may be slow or elements changed.")
        return 2

    except PlaywrightError as e:

        print(f" Browser automation error: {e}")
        return 2

    print(f"SUCCESS! Ordered {', '.join(result.items)} ({result.total})")
    return 0


def main() -> None:
    raise SystemExit(run())
