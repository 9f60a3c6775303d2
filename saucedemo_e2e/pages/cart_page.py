from playwright.sync_api import expect

from saucedemo_e2e.errors import CartIndexOutOfRange
from saucedemo_e2e.pages.base_page import BasePage


class CartPage(BasePage):
    """Cart page: the list of added items and the continue/checkout buttons."""

    PATH = 'cart.html'

    def __init__(self, page, logger, settings):
        super().__init__(page, logger, settings)
        self.logger.info("Initializing cart page")

    @property
    def page_title(self):
        return self.page.locator(".title")

    @property
    def cart_items(self):
        return self.page.locator(".cart_item")

    @property
    def checkout_button(self):
        return self.page.locator("[data-test='checkout']")

    @property
    def continue_shopping_button(self):
        return self.page.locator("[data-test='continue-shopping']")

    def item(self, index):
        return self.cart_items.nth(index)

    def item_named(self, product_name):
        return self.page.locator(
            f".cart_item:has(.inventory_item_name:has-text('{product_name}'))")

    def is_page_loaded(self):
        self.logger.info("Checking cart page loading")
        return self.check_page_loaded(self.page_title, "cart page title", self.PATH)

    def get_cart_items_count(self):
        return self.count(self.cart_items, "items in cart")

    def get_cart_item_names(self):
        names = []
        for i in range(self.get_cart_items_count()):
            name = self.get_text(self.item(i).locator(".inventory_item_name"),
                                 f"product name {i}")
            if name:
                names.append(name)
        self.logger.info("Products in cart", names=names)
        return names

    def get_cart_item_info(self, index):
        """(name, price) of the cart item at index, price as shown ('$29.99')."""
        self.logger.info("Getting cart item information", index=index)
        item = self.item(index)
        try:
            name = self.get_text(item.locator(".inventory_item_name"), f"product name {index}")
            price = self.get_text(item.locator(".inventory_item_price"),
                                  f"product price {index}")
        except Exception:
            self.logger.error("Error getting cart item information", index=index,
                              exc_info=True)
            raise
        return name, price

    def remove_item_from_cart(self, index):
        """
        Remove the item at index.

        Raises:
            CartIndexOutOfRange: index is negative or not below the item count;
                the cart is left untouched.
        """
        self.logger.info("Removing item from cart", index=index)
        count = self.get_cart_items_count()
        if index < 0 or index >= count:
            self.logger.error("Cart index out of range", index=index, count=count)
            raise CartIndexOutOfRange(index, count)

        item = self.item(index)
        try:
            product_name = self.get_text(item.locator(".inventory_item_name"),
                                         f"product name {index}")
            self.click(item.locator("button[data-test*='remove']"),
                       f"remove product '{product_name}' (index: {index})")
        except Exception:
            self.logger.error("Error removing item from cart", index=index, exc_info=True)
            raise
        self.logger.info("Product removed from cart", product=product_name)

    def remove_item_from_cart_by_name(self, product_name):
        self.logger.info("Removing item from cart by name", product=product_name)
        button = self.item_named(product_name).locator("button[data-test*='remove']")
        self.click(button, f"remove product '{product_name}' by name")

    def clear_cart(self):
        """Remove every item, last one first, waiting for the list to shrink each time."""
        count = self.get_cart_items_count()
        self.logger.info("Clearing cart", items=count)
        try:
            for index in range(count - 1, -1, -1):
                self.remove_item_from_cart(index)
                expect(self.cart_items).to_have_count(
                    index, timeout=self.settings.default_timeout_ms)
                self.pause(self.settings.cart_removal_delay_ms, "cart list re-render")
        except Exception:
            self.logger.error("Error clearing cart", exc_info=True)
            raise
        self.logger.info("Cart successfully cleared")

    def proceed_to_checkout(self):
        self.logger.info("Proceeding to checkout")
        self.click(self.checkout_button, "checkout button")

    def continue_shopping(self):
        self.logger.info("Continuing shopping")
        self.click(self.continue_shopping_button, "continue shopping button")

    def is_product_in_cart(self, product_name):
        locator = self.page.locator(
            f".cart_item .inventory_item_name:has-text('{product_name}')")
        return self.is_visible(locator, f"product '{product_name}' in cart")

    def is_cart_empty(self):
        empty = self.get_cart_items_count() == 0
        self.logger.info("Cart is empty", empty=empty)
        return empty
