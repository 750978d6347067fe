import re
from typing import Optional

from playwright.async_api import Page

SEL_FIRST_NAME = '[data-test="firstName"]'
SEL_LAST_NAME = '[data-test="lastName"]'
SEL_POSTAL_CODE = '[data-test="postalCode"]'
SEL_CONTINUE_BTN = '[data-test="continue"]'
SEL_FINISH_BTN = '[data-test="finish"]'
SEL_ERROR = '[data-test="error"]'
SEL_SUBTOTAL = ".summary_subtotal_label"
SEL_TAX = ".summary_tax_label"
SEL_TOTAL = ".summary_total_label"
SEL_COMPLETE_HEADER = ".complete-header"
SEL_COMPLETE_TEXT = ".complete-text"


class CheckoutPage:
    """Covers all three checkout screens: information, overview and complete."""

    STEP_ONE_URL_PATTERN = re.compile(r".*checkout-step-one\.html")
    STEP_TWO_URL_PATTERN = re.compile(r".*checkout-step-two\.html")
    COMPLETE_URL_PATTERN = re.compile(r".*checkout-complete\.html")

    def __init__(self, page: Page):
        self.page = page
        self.first_name_input = page.locator(SEL_FIRST_NAME)
        self.last_name_input = page.locator(SEL_LAST_NAME)
        self.postal_code_input = page.locator(SEL_POSTAL_CODE)
        self.continue_button = page.locator(SEL_CONTINUE_BTN)
        self.finish_button = page.locator(SEL_FINISH_BTN)
        self.error_message = page.locator(SEL_ERROR)
        self.subtotal_label = page.locator(SEL_SUBTOTAL)
        self.tax_label = page.locator(SEL_TAX)
        self.total_label = page.locator(SEL_TOTAL)
        self.complete_header = page.locator(SEL_COMPLETE_HEADER)
        self.complete_text = page.locator(SEL_COMPLETE_TEXT)

    async def fill_checkout_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        await self.first_name_input.fill(first_name)
        await self.last_name_input.fill(last_name)
        await self.postal_code_input.fill(postal_code)

    async def continue_to_overview(self) -> None:
        await self.continue_button.click()

    async def finish_checkout(self) -> None:
        await self.finish_button.click()

    async def get_order_total(self) -> Optional[str]:
        return await self.total_label.text_content()

    async def get_completion_message(self) -> Optional[str]:
        return await self.complete_header.text_content()

    async def get_error_message(self) -> Optional[str]:
        if await self.error_message.count() == 0:
            return None
        return await self.error_message.text_content()
