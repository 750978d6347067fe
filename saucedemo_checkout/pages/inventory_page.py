import random
import re
from typing import List, Optional

from playwright.async_api import Page

from saucedemo_checkout.sampling import random_indices

SEL_ITEM = ".inventory_item"
SEL_ITEM_NAME = ".inventory_item_name"
SEL_ADD_TO_CART = '[data-test^="add-to-cart"]'
SEL_CART_BADGE = ".shopping_cart_badge"
SEL_CART_LINK = ".shopping_cart_link"


class InventoryPage:
    URL_PATTERN = re.compile(r".*inventory\.html")

    def __init__(self, page: Page):
        self.page = page
        self.inventory_items = page.locator(SEL_ITEM)
        self.shopping_cart_badge = page.locator(SEL_CART_BADGE)
        self.shopping_cart_link = page.locator(SEL_CART_LINK)

    async def get_item_count(self) -> int:
        return await self.inventory_items.count()

    async def get_item_names(self) -> List[str]:
        names: List[str] = []
        for i in range(await self.get_item_count()):
            name = await self.inventory_items.nth(i).locator(SEL_ITEM_NAME).text_content()
            if name:
                names.append(name)
        return names

    async def add_random_items_to_cart(self, count: int, rng: Optional[random.Random] = None) -> List[str]:
        """
        Clicks "Add to cart" on `count` distinct, randomly chosen products.
        Returns the names of the products that were added.
        """
        total_items = await self.get_item_count()
        added_items: List[str] = []

        for index in random_indices(total_items, count, rng):
            item = self.inventory_items.nth(index)
            item_name = await item.locator(SEL_ITEM_NAME).text_content()
            await item.locator(SEL_ADD_TO_CART).click()
            if item_name:
                added_items.append(item_name)

        return added_items

    async def get_cart_item_count(self) -> int:
        # the badge is only rendered once the cart has something in it
        if await self.shopping_cart_badge.count() == 0:
            return 0
        badge_text = await self.shopping_cart_badge.text_content()
        return int(badge_text) if badge_text else 0

    async def go_to_cart(self) -> None:
        await self.shopping_cart_link.click()
