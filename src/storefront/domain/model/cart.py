"""Cart aggregate — one per user, keyed by (product_id, purchase_option).

The cart is a plain mutable aggregate.  Atomicity of its read-modify-write
cycles is the repository's job (see ``CartRepository.update``); the
aggregate itself only guarantees that two lines never share a key.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import CartLineNotFound
from storefront.domain.model.value_objects import PurchaseOption, Quantity

LineKey = tuple[str, PurchaseOption]


@dataclass
class CartLine:
    product_id: str
    quantity: Quantity
    purchase_option: PurchaseOption = PurchaseOption.STANDARD

    @property
    def key(self) -> LineKey:
        return (self.product_id, self.purchase_option)


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Invariants:
    - at most one line per ``(product_id, purchase_option)``
    - every line has a positive quantity
    """

    user_id: str
    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_line(
        self,
        product_id: str,
        quantity: Quantity,
        purchase_option: PurchaseOption = PurchaseOption.STANDARD,
    ) -> CartLine:
        """Add units of a product, merging into an existing line if present."""
        existing = self.find_line(product_id, purchase_option)
        if existing is not None:
            existing.quantity = existing.quantity + quantity
            return existing

        line = CartLine(
            product_id=product_id,
            quantity=quantity,
            purchase_option=purchase_option,
        )
        self.lines.append(line)
        return line

    def set_line_quantity(
        self,
        product_id: str,
        purchase_option: PurchaseOption | None,
        quantity: int,
    ) -> None:
        """Replace a line's quantity; zero or less removes the line.

        With no ``purchase_option`` the product's first line is targeted,
        whatever its option.  Removing an absent line is a no-op.  Setting
        a positive quantity on an absent line raises ``CartLineNotFound``.
        """
        if purchase_option is None:
            existing = self.first_line_for(product_id)
        else:
            existing = self.find_line(product_id, purchase_option)
        if quantity <= 0:
            if existing is not None:
                self.lines.remove(existing)
            return
        if existing is None:
            label = f"{product_id} ({purchase_option.value})" if purchase_option else product_id
            raise CartLineNotFound(f"Item {label} not found in cart")
        existing.quantity = Quantity(quantity)

    def remove_product(
        self,
        product_id: str,
        purchase_option: PurchaseOption | None = None,
    ) -> None:
        """Drop the product's line for one option, or for every option."""
        self.lines = [
            line
            for line in self.lines
            if not (
                line.product_id == product_id
                and (purchase_option is None or line.purchase_option == purchase_option)
            )
        ]

    def clear(self) -> None:
        self.lines = []

    # --- Queries --------------------------------------------------------------

    def find_line(
        self, product_id: str, purchase_option: PurchaseOption
    ) -> CartLine | None:
        for line in self.lines:
            if line.key == (product_id, purchase_option):
                return line
        return None

    def first_line_for(self, product_id: str) -> CartLine | None:
        return next((line for line in self.lines if line.product_id == product_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
