"""Crypto Facilities subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .protocol import CanonicalFilter, Exchange


class CryptofacilitiesSubscribe(BaseModel):
    event: str
    feed: str
    # Account-wide feeds such as heartbeat carry no product_ids
    product_ids: list[str] | None = None


class CryptofacilitiesNormalizer(BaseSubscriptionNormalizer[CryptofacilitiesSubscribe]):
    """Crypto Facilities subscription normalizer.

    See https://www.cryptofacilities.com/resources/hc/en-us/sections/360000120914-Websocket-API-Public
    """

    exchange = Exchange.CRYPTOFACILITIES
    discriminator = ("event", "subscribe")
    message_model = CryptofacilitiesSubscribe

    def extract(self, message: CryptofacilitiesSubscribe) -> list[CanonicalFilter]:
        symbols = tuple(message.product_ids) if message.product_ids is not None else None
        return [CanonicalFilter(message.feed, symbols)]
