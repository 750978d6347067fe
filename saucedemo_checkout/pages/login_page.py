import re
from typing import Optional

from playwright.async_api import Page

from saucedemo_checkout.config import SAUCE_URL

# css selectors we care about

SEL_USERNAME = "#user-name"
SEL_PASSWORD = "#password"
SEL_LOGIN_BTN = "#login-button"
SEL_ERROR = '[data-test="error"]'


class LoginPage:
    TITLE_PATTERN = re.compile(r"Swag Labs")

    def __init__(self, page: Page, base_url: str = SAUCE_URL):
        self.page = page
        self.url = base_url
        self.username_input = page.locator(SEL_USERNAME)
        self.password_input = page.locator(SEL_PASSWORD)
        self.login_button = page.locator(SEL_LOGIN_BTN)
        self.error_message = page.locator(SEL_ERROR)

    async def goto(self) -> None:
        await self.page.goto(self.url, wait_until="domcontentloaded")

    async def login(self, username: str, password: str) -> None:
        await self.username_input.fill(username)
        await self.password_input.fill(password)
        await self.login_button.click()

    async def get_error_message(self) -> Optional[str]:
        """Text of the login error banner, or None when no error is shown."""
        if await self.error_message.count() == 0:
            return None
        return await self.error_message.text_content()
