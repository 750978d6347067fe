import re
from typing import List

from playwright.async_api import Page

SEL_CART_ITEM = ".cart_item"
SEL_ITEM_NAME = ".inventory_item_name"
SEL_CHECKOUT_BTN = '[data-test="checkout"]'
SEL_CONTINUE_SHOPPING_BTN = '[data-test="continue-shopping"]'
SEL_REMOVE_BTN = '[data-test^="remove"]'


class CartPage:
    URL_PATTERN = re.compile(r".*cart\.html")

    def __init__(self, page: Page):
        self.page = page
        self.cart_items = page.locator(SEL_CART_ITEM)
        self.checkout_button = page.locator(SEL_CHECKOUT_BTN)
        self.continue_shopping_button = page.locator(SEL_CONTINUE_SHOPPING_BTN)
        self.remove_buttons = page.locator(SEL_REMOVE_BTN)

    async def get_cart_items_names(self) -> List[str]:
        names: List[str] = []
        for i in range(await self.cart_items.count()):
            name = await self.cart_items.nth(i).locator(SEL_ITEM_NAME).text_content()
            if name:
                names.append(name)
        return names

    async def get_cart_item_count(self) -> int:
        return await self.cart_items.count()

    async def remove_item(self, name: str) -> None:
        """Removes the cart line whose product name is `name`."""
        for i in range(await self.cart_items.count()):
            item = self.cart_items.nth(i)
            if await item.locator(SEL_ITEM_NAME).text_content() == name:
                await item.locator(SEL_REMOVE_BTN).click()
                return
        raise LookupError(f"Item '{name}' is not in the cart")

    async def proceed_to_checkout(self) -> None:
        await self.checkout_button.click()

    async def continue_shopping(self) -> None:
        await self.continue_shopping_button.click()
