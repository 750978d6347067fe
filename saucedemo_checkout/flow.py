from typing import List, Optional

from playwright.async_api import Page
from pydantic import BaseModel

from saucedemo_checkout.config import SAUCE_URL, CheckoutInfo, Credentials
from saucedemo_checkout.pages import CartPage, CheckoutPage, InventoryPage, LoginPage

COMPLETION_MESSAGE = "Thank you for your order"


class CheckoutFlowError(Exception):
    """The store showed something other than what the flow expected."""


# Response model
class CheckoutResult(BaseModel):
    status: str
    message: str
    items: List[str]
    total: Optional[str] = None
    confirmation: Optional[str] = None


async def complete_checkout(
    page: Page,
    credentials: Credentials,
    checkout_info: CheckoutInfo,
    item_count: int = 3,
    base_url: str = SAUCE_URL,
) -> CheckoutResult:
    """
    Logs in, buys `item_count` random products and returns what was ordered.
    Raises CheckoutFlowError when the cart or the confirmation screen
    does not match what was added.
    """
    login_page = LoginPage(page, base_url)
    inventory_page = InventoryPage(page)
    cart_page = CartPage(page)
    checkout_page = CheckoutPage(page)

    # Go to login
    await login_page.goto()
    await login_page.login(credentials.username, credentials.password)
    await page.wait_for_url(InventoryPage.URL_PATTERN)

    added_items = await inventory_page.add_random_items_to_cart(item_count)
    if len(added_items) != item_count:
        raise CheckoutFlowError(f"Expected {item_count} items to be added, got {len(added_items)}")

    badge_count = await inventory_page.get_cart_item_count()
    if badge_count != item_count:
        raise CheckoutFlowError(f"Cart badge shows {badge_count}, expected {item_count}")
    print(f"Added items: {added_items}")

    await inventory_page.go_to_cart()
    await page.wait_for_url(CartPage.URL_PATTERN)

    cart_names = await cart_page.get_cart_items_names()
    missing = [name for name in added_items if name not in cart_names]
    if missing or len(cart_names) != item_count:
        raise CheckoutFlowError(f"Cart holds {cart_names}, expected {added_items}")

    await cart_page.proceed_to_checkout()
    await page.wait_for_url(CheckoutPage.STEP_ONE_URL_PATTERN)

    await checkout_page.fill_checkout_information(
        checkout_info.first_name, checkout_info.last_name, checkout_info.postal_code
    )
    await checkout_page.continue_to_overview()
    await page.wait_for_url(CheckoutPage.STEP_TWO_URL_PATTERN)

    total = await checkout_page.get_order_total()

    await checkout_page.finish_checkout()
    await page.wait_for_url(CheckoutPage.COMPLETE_URL_PATTERN)

    confirmation = await checkout_page.get_completion_message()
    if not confirmation or COMPLETION_MESSAGE not in confirmation:
        raise CheckoutFlowError(f"Unexpected completion message: {confirmation!r}")

    return CheckoutResult(
        status="success",
        message="Order placed successfully",
        items=added_items,
        total=total,
        confirmation=confirmation,
    )
