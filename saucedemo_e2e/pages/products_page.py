from playwright.sync_api import expect

from saucedemo_e2e.pages.base_page import BasePage
from saucedemo_e2e.strings import extract_decimal


class ProductsPage(BasePage):
    """Inventory (catalog) page: add/remove buttons, cart badge, sorting, side menu."""

    PATH = 'inventory.html'

    def __init__(self, page, logger, settings):
        super().__init__(page, logger, settings)
        self.logger.info("Initializing products page")

    @property
    def page_title(self):
        return self.page.locator(".title")

    @property
    def cart_badge(self):
        return self.page.locator(".shopping_cart_badge")

    @property
    def cart_link(self):
        return self.page.locator(".shopping_cart_link")

    @property
    def sort_dropdown(self):
        return self.page.locator("[data-test='product-sort-container']")

    @property
    def product_items(self):
        return self.page.locator(".inventory_item")

    @property
    def menu_button(self):
        return self.page.locator("#react-burger-menu-btn")

    @property
    def logout_link(self):
        return self.page.locator("#logout_sidebar_link")

    @property
    def menu_close_button(self):
        return self.page.locator("#react-burger-cross-btn")

    def add_to_cart_button(self, product_id):
        return self.page.locator(f"[data-test='add-to-cart-{product_id}']")

    def remove_button(self, product_id):
        return self.page.locator(f"[data-test='remove-{product_id}']")

    def is_page_loaded(self):
        self.logger.info("Checking products page loading")
        return self.check_page_loaded(self.page_title, "products page title", self.PATH)

    def add_product_to_cart(self, product_id):
        self.logger.info("Adding product to cart", product=product_id)
        button = self.add_to_cart_button(product_id)
        try:
            self.wait_for_visible(button, f"add product button {product_id}")
            self.click(button, f"add product '{product_id}' to cart")
        except Exception:
            self.logger.error("Error adding product to cart", product=product_id,
                              exc_info=True)
            raise
        self.logger.info("Product added to cart", product=product_id)

    def remove_product_from_cart(self, product_id):
        self.logger.info("Removing product from cart", product=product_id)
        button = self.remove_button(product_id)
        try:
            self.wait_for_visible(button, f"remove product button {product_id}")
            self.click(button, f"remove product '{product_id}' from cart")
        except Exception:
            self.logger.error("Error removing product from cart", product=product_id,
                              exc_info=True)
            raise
        self.logger.info("Product removed from cart", product=product_id)

    def read_cart_badge(self):
        """Number shown on the cart badge, or None when no badge is rendered."""
        if self.count(self.cart_badge, "cart items counter") == 0:
            return None
        text = self.get_text(self.cart_badge, "cart items counter")
        if not text.isdigit():
            self.logger.warning("Cart badge is not a number", text=text)
            return None
        return int(text)

    def get_cart_items_count(self):
        """Items in the cart per the badge; an empty cart shows no badge and counts 0."""
        badge = self.read_cart_badge()
        count = 0 if badge is None else badge
        self.logger.info("Number of items in cart", count=count)
        return count

    def go_to_cart(self):
        self.logger.info("Navigating to cart page")
        self.click(self.cart_link, "cart link")

    def sort_products(self, option):
        """
        Select a sort option (az, za, lohi, hilo).

        Waits until the dropdown reports the new value, then for the
        configured settle pause while the list re-renders.
        """
        self.logger.info("Applying product sorting", option=option)
        try:
            self.sort_dropdown.select_option(option)
            expect(self.sort_dropdown).to_have_value(
                option, timeout=self.settings.default_timeout_ms)
            self.pause(self.settings.sort_settle_ms, "sort re-render")
        except Exception:
            self.logger.error("Error applying sorting", option=option, exc_info=True)
            raise
        self.logger.info("Sorting applied", option=option)

    def get_products_count(self):
        return self.count(self.product_items, "products on page")

    def get_product_name(self, index):
        name = self.product_items.nth(index).locator(".inventory_item_name")
        return self.get_text(name, f"product name {index}")

    def get_product_price(self, index):
        price = self.product_items.nth(index).locator(".inventory_item_price")
        return self.get_text(price, f"product price {index}")

    def get_product_names(self):
        return [self.get_product_name(i) for i in range(self.get_products_count())]

    def get_product_prices(self):
        return [extract_decimal(self.get_product_price(i))
                for i in range(self.get_products_count())]

    def open_menu(self):
        self.logger.info("Opening main menu")
        try:
            self.click(self.menu_button, "main menu button")
            self.wait_for_visible(self.logout_link, "logout button")
        except Exception:
            self.logger.error("Error opening main menu", exc_info=True)
            raise

    def close_menu(self):
        self.logger.info("Closing main menu")
        if self.is_visible(self.menu_close_button, "menu close button"):
            self.click(self.menu_close_button, "menu close button")

    def logout(self):
        self.logger.info("Performing logout")
        try:
            self.open_menu()
            self.click(self.logout_link, "logout button")
        except Exception:
            self.logger.error("Error during logout", exc_info=True)
            raise
        self.logger.info("Logout completed")
