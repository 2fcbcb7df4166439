"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly.  ``ValidationError``
maps to a 400-style response and ``EntityNotFoundError`` to a 404.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Catalog / cart ----------------------------------------------------------


class ProductNotFound(EntityNotFoundError):
    """The catalog has no product with the requested ID."""


class InvalidPurchaseOption(ValidationError):
    """The purchase option is not offered for the product."""


class CartLineNotFound(EntityNotFoundError):
    """No cart line matches the requested product / purchase option."""


# --- Checkout ----------------------------------------------------------------


class EmptyCart(ValidationError):
    """Checkout was attempted with no cart lines."""


class ProductUnavailable(ValidationError):
    """A product disappeared from the catalog while the order was priced."""


# --- Coupons -----------------------------------------------------------------


class CouponRejected(ValidationError):
    """A coupon cannot be applied to the given subtotal.

    Subclasses name the first failing rule.  During checkout these are
    swallowed and the order proceeds without a discount.
    """


class CodeNotFound(CouponRejected, EntityNotFoundError):
    """No coupon exists with that (normalized) code."""


class CouponInactive(CouponRejected):
    pass


class CouponExpired(CouponRejected):
    pass


class MinPurchaseNotMet(CouponRejected):
    pass


class UsageLimitExceeded(CouponRejected):
    pass
