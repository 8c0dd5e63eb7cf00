"""OKEx subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .protocol import CanonicalFilter, Exchange


class OkexSubscribe(BaseModel):
    op: str
    args: list[str]


class OkexNormalizer(BaseSubscriptionNormalizer[OkexSubscribe]):
    """OKEx subscription normalizer.

    Args look like ``spot/depth:BTC-USDT``.
    See https://www.okex.com/docs/en/#spot_ws-sub
    """

    exchange = Exchange.OKEX
    discriminator = ("op", "subscribe")
    message_model = OkexSubscribe

    def extract(self, message: OkexSubscribe) -> list[CanonicalFilter]:
        filters = []
        for arg in message.args:
            channel, symbol = self.split_first(arg, ":")
            filters.append(CanonicalFilter(channel, (symbol,)))
        return filters
