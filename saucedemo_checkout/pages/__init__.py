from saucedemo_checkout.pages.cart_page import CartPage
from saucedemo_checkout.pages.checkout_page import CheckoutPage
from saucedemo_checkout.pages.inventory_page import InventoryPage
from saucedemo_checkout.pages.login_page import LoginPage

__all__ = ["CartPage", "CheckoutPage", "InventoryPage", "LoginPage"]
