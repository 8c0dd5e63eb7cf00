"""Gemini subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .normalization import ExpansionTable
from .protocol import CanonicalFilter, Exchange

GEMINI_CHANNELS = ExpansionTable(
    {
        "l2": ["trade", "l2_updates", "auction_open", "auction_indicative", "auction_result"],
    }
)


class GeminiSubscription(BaseModel):
    name: str
    symbols: list[str]


class GeminiSubscribe(BaseModel):
    type: str
    subscriptions: list[GeminiSubscription]


class GeminiNormalizer(BaseSubscriptionNormalizer[GeminiSubscribe]):
    """Gemini market data v2 subscription normalizer.

    See https://docs.gemini.com/websocket-api/#market-data-version-2
    """

    exchange = Exchange.GEMINI
    discriminator = ("type", "subscribe")
    message_model = GeminiSubscribe
    channels = GEMINI_CHANNELS

    def extract(self, message: GeminiSubscribe) -> list[CanonicalFilter]:
        filters = []
        for subscription in message.subscriptions:
            symbols = tuple(subscription.symbols)
            for physical in self.expand(self.channels, subscription.name):
                filters.append(CanonicalFilter(physical, symbols))
        return filters
