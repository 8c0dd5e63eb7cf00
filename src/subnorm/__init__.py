"""subnorm: normalize exchange subscription confirmations into canonical filters."""

from .settings import Settings
from .exchanges import (
    CanonicalFilter,
    Exchange,
    MalformedMessage,
    get_subscription_normalizer,
    normalize_subscription,
)

__all__ = [
    "Settings",
    "CanonicalFilter",
    "Exchange",
    "MalformedMessage",
    "get_subscription_normalizer",
    "normalize_subscription",
]
