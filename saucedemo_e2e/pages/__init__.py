from saucedemo_e2e.pages.base_page import BasePage
from saucedemo_e2e.pages.cart_page import CartPage
from saucedemo_e2e.pages.login_page import LoginPage
from saucedemo_e2e.pages.products_page import ProductsPage

__all__ = ["BasePage", "CartPage", "LoginPage", "ProductsPage"]
