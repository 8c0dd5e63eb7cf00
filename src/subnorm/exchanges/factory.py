"""Registry of subscription normalizers keyed by exchange."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from .base import BaseSubscriptionNormalizer
from .bitflyer import BitflyerNormalizer
from .bitmex import BitmexNormalizer
from .bitstamp import BitstampNormalizer
from .coinbase import CoinbaseNormalizer
from .cryptofacilities import CryptofacilitiesNormalizer
from .deribit import DeribitNormalizer
from .ftx import FtxNormalizer
from .gemini import GeminiNormalizer
from .kraken import KrakenNormalizer
from .okex import OkexNormalizer
from .protocol import CanonicalFilter, Exchange

logger = logging.getLogger(__name__)


def build_registry(
    normalizers: Mapping[Exchange, BaseSubscriptionNormalizer[Any]],
) -> Mapping[Exchange, BaseSubscriptionNormalizer[Any]]:
    """Freeze a normalizer registry.

    Raises:
        ValueError: If a normalizer is registered under another exchange
    """
    for exchange, normalizer in normalizers.items():
        if normalizer.exchange is not exchange:
            raise ValueError(
                f"{type(normalizer).__name__} handles {normalizer.exchange.value}, "
                f"cannot register it for {exchange.value}"
            )
    return MappingProxyType(dict(normalizers))


SUBSCRIPTION_NORMALIZERS = build_registry(
    {
        Exchange.BITMEX: BitmexNormalizer(),
        Exchange.COINBASE: CoinbaseNormalizer(),
        Exchange.DERIBIT: DeribitNormalizer(),
        Exchange.CRYPTOFACILITIES: CryptofacilitiesNormalizer(),
        Exchange.BITSTAMP: BitstampNormalizer(),
        Exchange.OKEX: OkexNormalizer(),
        Exchange.FTX: FtxNormalizer(),
        Exchange.KRAKEN: KrakenNormalizer(),
        Exchange.BITFLYER: BitflyerNormalizer(),
        Exchange.GEMINI: GeminiNormalizer(),
    }
)


def get_subscription_normalizer(
    exchange: Exchange | str,
) -> BaseSubscriptionNormalizer[Any] | None:
    """Look up the subscription normalizer for an exchange.

    Args:
        exchange: Exchange enum member or name (case-insensitive)

    Returns:
        The registered normalizer, or None if the exchange is not supported
    """
    if not isinstance(exchange, Exchange):
        if not isinstance(exchange, str):
            return None
        try:
            exchange = Exchange(exchange.lower())
        except ValueError:
            return None
    return SUBSCRIPTION_NORMALIZERS.get(exchange)


def normalize_subscription(exchange: Exchange | str, message: Any) -> list[CanonicalFilter] | None:
    """Normalize a message if it is a subscription confirmation.

    Args:
        exchange: Exchange the message came from
        message: Parsed JSON message

    Returns:
        Canonical filters, or None if the exchange is unsupported or the
        message is not a subscription confirmation

    Raises:
        MalformedMessage: If the confirmation lacks expected fields
    """
    normalizer = get_subscription_normalizer(exchange)
    if normalizer is None:
        logger.debug("No subscription normalizer for exchange %s", exchange)
        return None

    if not normalizer.can_handle(message):
        return None

    return normalizer.map(message)
