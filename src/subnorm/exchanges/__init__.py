"""Exchange subscription normalizers."""

from .protocol import CanonicalFilter, Exchange, SubscriptionNormalizer
from .base import BaseSubscriptionNormalizer, MalformedMessage
from .normalization import ExpansionTable, match_prefix, split_first, split_last
from .factory import (
    SUBSCRIPTION_NORMALIZERS,
    get_subscription_normalizer,
    normalize_subscription,
)

__all__ = [
    "CanonicalFilter",
    "Exchange",
    "SubscriptionNormalizer",
    "BaseSubscriptionNormalizer",
    "MalformedMessage",
    "ExpansionTable",
    "match_prefix",
    "split_first",
    "split_last",
    "SUBSCRIPTION_NORMALIZERS",
    "get_subscription_normalizer",
    "normalize_subscription",
]
