"""Coinbase Pro subscription normalizer."""

from __future__ import annotations

from pydantic import BaseModel

from .base import BaseSubscriptionNormalizer
from .normalization import ExpansionTable
from .protocol import CanonicalFilter, Exchange

# Logical channel -> message types the feed emits for it
COINBASE_CHANNELS = ExpansionTable(
    {
        "full": ["received", "open", "done", "match", "change"],
        "level2": ["snapshot", "l2update"],
        "matches": ["match", "last_match"],
        "ticker": ["ticker"],
    }
)


class CoinbaseChannel(BaseModel):
    name: str
    product_ids: list[str]


class CoinbaseSubscribe(BaseModel):
    type: str
    product_ids: list[str] | None = None
    channels: list[str | CoinbaseChannel]


class CoinbaseNormalizer(BaseSubscriptionNormalizer[CoinbaseSubscribe]):
    """Coinbase Pro subscription normalizer.

    Channels are either bare names, which apply to the top-level
    ``product_ids``, or objects carrying their own ``product_ids``. Each
    logical channel expands to the message types it produces.
    See https://docs.pro.coinbase.com/#protocol-overview
    """

    exchange = Exchange.COINBASE
    discriminator = ("type", "subscribe")
    message_model = CoinbaseSubscribe
    channels = COINBASE_CHANNELS

    def extract(self, message: CoinbaseSubscribe) -> list[CanonicalFilter]:
        filters = []
        for channel in message.channels:
            if isinstance(channel, str):
                name, product_ids = channel, message.product_ids
            else:
                name, product_ids = channel.name, channel.product_ids

            symbols = tuple(product_ids) if product_ids is not None else None
            for physical in self.expand(self.channels, name):
                filters.append(CanonicalFilter(physical, symbols))
        return filters
