"""Kraken subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .protocol import CanonicalFilter, Exchange


class KrakenSubscription(BaseModel):
    name: str


class KrakenSubscribe(BaseModel):
    event: str
    pair: list[str]
    subscription: KrakenSubscription


class KrakenNormalizer(BaseSubscriptionNormalizer[KrakenSubscribe]):
    """Kraken subscription normalizer.

    See https://www.kraken.com/features/websocket-api#message-subscribe
    """

    exchange = Exchange.KRAKEN
    discriminator = ("event", "subscribe")
    message_model = KrakenSubscribe

    def extract(self, message: KrakenSubscribe) -> list[CanonicalFilter]:
        return [CanonicalFilter(message.subscription.name, tuple(message.pair))]
