"""Deribit subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .protocol import CanonicalFilter, Exchange


class DeribitParams(BaseModel):
    channels: list[str]


class DeribitSubscribe(BaseModel):
    method: str
    params: DeribitParams


class DeribitNormalizer(BaseSubscriptionNormalizer[DeribitSubscribe]):
    """Deribit subscription normalizer.

    Channels are dot-delimited. The channel name is the first segment. With
    two segments the symbol is the second one
    (``deribit_price_ranking.btc_usd``); with more, the last segment is an
    interval and the symbol spans everything in between, dots included
    (``book.ETH-PERPETUAL.100.1.100ms`` -> ``ETH-PERPETUAL.100.1``).
    See https://docs.deribit.com/v2/#subscription-management
    """

    exchange = Exchange.DERIBIT
    discriminator = ("method", "public/subscribe")
    message_model = DeribitSubscribe

    def extract(self, message: DeribitSubscribe) -> list[CanonicalFilter]:
        return [self._parse_channel(channel) for channel in message.params.channels]

    def _parse_channel(self, channel: str) -> CanonicalFilter:
        name, remainder = self.split_first(channel, ".")
        last = remainder.rfind(".")
        symbol = remainder if last == -1 else remainder[:last]
        return CanonicalFilter(name, (symbol,))
