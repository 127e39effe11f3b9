from decimal import Decimal
from typing import NamedTuple


class DiscountTier(NamedTuple):
    threshold: Decimal
    multiplier: Decimal


# Highest threshold first; each lower bound is inclusive.
DISCOUNT_TIERS: tuple[DiscountTier, ...] = (
    DiscountTier(threshold=Decimal("1000"), multiplier=Decimal("0.90")),
    DiscountTier(threshold=Decimal("500"), multiplier=Decimal("0.95")),
)


def discount_multiplier(
    subtotal: Decimal, tiers: tuple[DiscountTier, ...] = DISCOUNT_TIERS
) -> Decimal:
    return next(
        (tier.multiplier for tier in tiers if subtotal >= tier.threshold),
        Decimal("1"),
    )


def apply_discount(
    subtotal: Decimal, tiers: tuple[DiscountTier, ...] = DISCOUNT_TIERS
) -> Decimal:
    multiplier = discount_multiplier(subtotal, tiers)
    if multiplier == 1:
        return subtotal
    return subtotal * multiplier
