"""Product aggregate.

Products live independently of carts and orders.  The checkout core only
reads them; prices change and products are removed from the catalog
without touching any existing order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, PurchaseOption


def check_price(price: Money) -> Money:
    """Catalog prices are positive and whole cents."""
    if price.amount <= 0:
        raise ValidationError("Product price must be greater than zero")
    if not price.is_whole_cents:
        raise ValidationError(f"Product price must be whole cents, got {price.amount}")
    return price


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    purchase_options: frozenset[PurchaseOption] = field(
        default_factory=lambda: frozenset({PurchaseOption.STANDARD})
    )
    category: str = ""
    brand: str = ""
    subcategory: str = ""

    def offers(self, option: PurchaseOption) -> bool:
        return option in self.purchase_options

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = check_price(new_price)

    def set_purchase_options(self, options: frozenset[PurchaseOption]) -> None:
        """Replace the offered options.

        Cart lines already holding a withdrawn option stay in the cart;
        only new adds are checked against this set.
        """
        if not options:
            raise ValidationError("Product must offer at least one purchase option")
        self.purchase_options = frozenset(options)
