"""
Catalog and user tags for the Marketplace Domain
"""

from grocery_market.core.domain import StatusEnum


class UserRole(StatusEnum):
    """Role of a marketplace user. Fixed at creation."""

    CUSTOMER = "customer"
    SELLER = "seller"


class ProductCategory(StatusEnum):
    """Grocery product categories."""

    MEAT = "meat"
    POULTRY = "poultry"
    SEAFOOD = "seafood"
    EGGS_DAIRY = "eggs_dairy"
    VEGETABLES = "vegetables"
    FRUITS = "fruits"
    SPICES_CONDIMENTS = "spices_condiments"
    GRAINS_CEREALS = "grains_cereals"
    BEVERAGES = "beverages"
    OTHERS = "others"


class UnitOfMeasurement(StatusEnum):
    """Unit a product is sold in."""

    KG = "kg"
    GRAM = "gram"
    PIECE = "piece"
    DOZEN = "dozen"
    LITER = "liter"
    BOTTLE = "bottle"
    PACK = "pack"
    BOX = "box"
    BUNDLE = "bundle"
