"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLineSnapshot, OrderStatus
from storefront.domain.model.value_objects import (
    Money,
    PurchaseOption,
    Quantity,
    ShippingAddress,
)
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> None:
        with self._file.lock:
            orders = self._file.read()
            if any(raw["id"] == order.id for raw in orders):
                raise ValidationError(f"Order {order.id} already exists")
            orders.append(self._to_raw(order))
            self._file.write(orders)

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_for_user(self, user_id: str) -> list[Order]:
        orders = [
            self._to_domain(raw) for raw in self._file.read() if raw["user_id"] == user_id
        ]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "currency": order.total.currency,
            "subtotal": str(order.subtotal.amount),
            "discount": str(order.discount.amount),
            "total": str(order.total.amount),
            "coupon_code": order.coupon_code,
            "shipping_address": order.shipping_address.to_dict(),
            "payment_method": order.payment_method,
            "items": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "purchase_option": line.purchase_option.value,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        lines = tuple(
            OrderLineSnapshot(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
                purchase_option=PurchaseOption(i.get("purchase_option", "standard")),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            lines=lines,
            subtotal=Money(Decimal(raw["subtotal"]), currency),
            discount=Money(Decimal(raw["discount"]), currency),
            total=Money(Decimal(raw["total"]), currency),
            coupon_code=raw.get("coupon_code"),
            shipping_address=ShippingAddress.from_dict(raw.get("shipping_address")),
            payment_method=raw.get("payment_method", "card"),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
