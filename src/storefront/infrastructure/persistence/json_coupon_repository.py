"""JSON-file-backed implementation of CouponRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Callable

from storefront.domain.model.coupon import Coupon, DiscountKind, normalize_code
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.coupon_repository import CouponRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonCouponRepository(CouponRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty=[])

    # --- CouponRepository interface -------------------------------------------

    def get_by_code(self, code: str) -> Coupon | None:
        code = normalize_code(code)
        for raw in self._file.read():
            if raw["code"] == code:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Coupon]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, coupon: Coupon) -> None:
        with self._file.lock:
            records = self._file.read()
            for i, raw in enumerate(records):
                if raw["code"] == coupon.code:
                    records[i] = self._to_raw(coupon)
                    break
            else:
                records.append(self._to_raw(coupon))
            self._file.write(records)

    def update(self, code: str, mutation: Callable[[Coupon], None]) -> Coupon | None:
        code = normalize_code(code)
        with self._file.lock:
            records = self._file.read()
            for i, raw in enumerate(records):
                if raw["code"] != code:
                    continue
                coupon = self._to_domain(raw)
                mutation(coupon)
                records[i] = self._to_raw(coupon)
                self._file.write(records)
                return coupon
            return None

    def increment_usage_if_available(self, code: str) -> bool:
        code = normalize_code(code)
        with self._file.lock:
            records = self._file.read()
            for raw in records:
                if raw["code"] != code:
                    continue
                limit = raw.get("usage_limit")
                if limit is not None and raw["used_count"] >= limit:
                    return False
                raw["used_count"] += 1
                self._file.write(records)
                return True
            return False

    def release_usage(self, code: str) -> bool:
        code = normalize_code(code)
        with self._file.lock:
            records = self._file.read()
            for raw in records:
                if raw["code"] != code:
                    continue
                if raw["used_count"] <= 0:
                    return False
                raw["used_count"] -= 1
                self._file.write(records)
                return True
            return False

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(coupon: Coupon) -> dict:
        return {
            "code": coupon.code,
            "type": coupon.discount_kind.value,
            "discount": str(coupon.discount_value),
            "min_purchase": str(coupon.min_purchase.amount),
            "max_discount": (
                str(coupon.max_discount.amount) if coupon.max_discount is not None else None
            ),
            "valid_from": coupon.valid_from.isoformat(),
            "valid_to": coupon.valid_to.isoformat(),
            "usage_limit": coupon.usage_limit,
            "used_count": coupon.used_count,
            "active": coupon.active,
            "created_at": coupon.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Coupon:
        max_discount = raw.get("max_discount")
        return Coupon(
            code=raw["code"],
            discount_kind=DiscountKind(raw["type"]),
            discount_value=Decimal(raw["discount"]),
            min_purchase=Money(Decimal(raw.get("min_purchase", "0"))),
            max_discount=Money(Decimal(max_discount)) if max_discount is not None else None,
            valid_from=datetime.fromisoformat(raw["valid_from"]),
            valid_to=datetime.fromisoformat(raw["valid_to"]),
            usage_limit=raw.get("usage_limit"),
            used_count=raw.get("used_count", 0),
            active=raw.get("active", True),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
