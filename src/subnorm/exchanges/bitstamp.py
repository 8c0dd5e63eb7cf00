"""Bitstamp subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .protocol import CanonicalFilter, Exchange


class BitstampData(BaseModel):
    channel: str


class BitstampSubscribe(BaseModel):
    event: str
    data: BitstampData


class BitstampNormalizer(BaseSubscriptionNormalizer[BitstampSubscribe]):
    """Bitstamp subscription normalizer.

    Channel names such as ``live_trades_btcusd`` end with the currency pair,
    so the split happens on the last underscore.
    See https://www.bitstamp.net/websocket/v2/
    """

    exchange = Exchange.BITSTAMP
    discriminator = ("event", "bts:subscribe")
    message_model = BitstampSubscribe

    def extract(self, message: BitstampSubscribe) -> list[CanonicalFilter]:
        channel, symbol = self.split_last(message.data.channel, "_")
        return [CanonicalFilter(channel, (symbol,))]
