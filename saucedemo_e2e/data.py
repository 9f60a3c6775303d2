# data.py
# Static test data for the Sauce Demo shop: accounts, product ids, sort options.
# This can be referenced as: from saucedemo_e2e.data import Users, Products

from dataclasses import dataclass

DEFAULT_PASSWORD = 'secret_sauce'


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


class Users:
    STANDARD = Credentials('standard_user', DEFAULT_PASSWORD)
    # Rejected by the site with "Sorry, this user has been locked out."
    LOCKED_OUT = Credentials('locked_out_user', DEFAULT_PASSWORD)
    PROBLEM = Credentials('problem_user', DEFAULT_PASSWORD)
    PERFORMANCE_GLITCH = Credentials('performance_glitch_user', DEFAULT_PASSWORD)
    INVALID = Credentials('invalid_user', 'invalid_password')


class Products:
    # Slugs used in the add-to-cart-{id} / remove-{id} data-test attributes
    BACKPACK = 'sauce-labs-backpack'
    BIKE_LIGHT = 'sauce-labs-bike-light'
    BOLT_T_SHIRT = 'sauce-labs-bolt-t-shirt'
    FLEECE_JACKET = 'sauce-labs-fleece-jacket'
    ONESIE = 'sauce-labs-onesie'
    RED_T_SHIRT = 'test.allthethings()-t-shirt-(red)'

    ALL = (
        BACKPACK,
        BIKE_LIGHT,
        BOLT_T_SHIRT,
        FLEECE_JACKET,
        ONESIE,
        RED_T_SHIRT,
    )


PRODUCT_NAMES = {
    Products.BACKPACK: 'Sauce Labs Backpack',
    Products.BIKE_LIGHT: 'Sauce Labs Bike Light',
    Products.BOLT_T_SHIRT: 'Sauce Labs Bolt T-Shirt',
    Products.FLEECE_JACKET: 'Sauce Labs Fleece Jacket',
    Products.ONESIE: 'Sauce Labs Onesie',
    Products.RED_T_SHIRT: 'Test.allTheThings() T-Shirt (Red)',
}


class SortOption:
    NAME_A_TO_Z = 'az'
    NAME_Z_TO_A = 'za'
    PRICE_LOW_TO_HIGH = 'lohi'
    PRICE_HIGH_TO_LOW = 'hilo'
